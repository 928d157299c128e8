from devsync.models.tag import Tag
from devsync.repositories.repository import Repository
from devsync.services.search.catalog import TAG_SEARCH


class TagRepository(Repository[Tag]):
    search_spec = TAG_SEARCH
