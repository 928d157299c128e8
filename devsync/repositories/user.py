from devsync.models.user import User
from devsync.repositories.repository import Repository
from devsync.services.search.catalog import USER_SEARCH


class UserRepository(Repository[User]):
    search_spec = USER_SEARCH
