import unittest

from tests.search.base import SearchDataBase

from devsync.core.errors import BusinessError, InvalidIdError, NotFoundError
from devsync.models.enums import TargetType
from devsync.models.tag import Tag
from devsync.repositories.answer import AnswerRepository
from devsync.repositories.comment import CommentRepository
from devsync.repositories.note import NoteRepository
from devsync.repositories.project import ProjectRepository
from devsync.repositories.question import QuestionRepository
from devsync.repositories.tag import TagRepository
from devsync.repositories.workspace import WorkspaceRepository
from devsync.schemas.search import PageRequest


class RepositoryContractTests(SearchDataBase):
    def setUp(self):
        self.reset_data()
        super().setUp()

    def test_exists_and_find_by_id(self):
        repo = TagRepository(self.db)
        self.assertTrue(repo.exists("t-java"))
        self.assertFalse(repo.exists("t-missing"))
        self.assertEqual(repo.find_by_id("t-java").name, "java")
        self.assertIsNone(repo.find_by_id("t-missing"))

    def test_blank_id_is_rejected(self):
        repo = TagRepository(self.db)
        for value in (None, "", "   "):
            with self.assertRaises(ValueError):
                repo.exists(value)
            with self.assertRaises(ValueError):
                repo.find_by_id(value)

    def test_blank_id_is_a_business_error(self):
        with self.assertRaises(BusinessError) as ctx:
            NoteRepository(self.db).find_all_by_project_id(None, "")
        self.assertIsInstance(ctx.exception, InvalidIdError)
        self.assertEqual(ctx.exception.message, "Project ID must not be null or empty")

    def test_get_or_404(self):
        with self.assertRaises(NotFoundError) as ctx:
            QuestionRepository(self.db).get_or_404("q-missing")
        self.assertEqual(ctx.exception.entity, "Question")
        self.assertEqual(ctx.exception.entity_id, "q-missing")

    def test_create_update_delete(self):
        repo = TagRepository(self.db)
        created = repo.create(Tag(name="kotlin", color="purple", category="language"))
        self.assertTrue(created.id)
        self.assertTrue(repo.exists(created.id))

        created.color = "violet"
        repo.update(created)
        self.assertEqual(repo.find_by_id(created.id).color, "violet")

        repo.delete_by_id(created.id)
        self.assertFalse(repo.exists(created.id))

    def test_create_none_is_rejected(self):
        with self.assertRaises(ValueError):
            TagRepository(self.db).create(None)

    def test_delete_missing_is_a_no_op(self):
        TagRepository(self.db).delete_by_id("t-missing")
        self.assertEqual(TagRepository(self.db).search().total_elements, 3)


class SupplementalOperationTests(SearchDataBase):
    def setUp(self):
        self.reset_data()
        super().setUp()

    def test_questions_by_project(self):
        page = QuestionRepository(self.db).find_all_by_project_id(PageRequest(), "P1")
        self.assertEqual(self.ids(page), ["q1", "q3", "q4"])
        self.assertEqual(page.total_elements, 3)

    def test_questions_by_project_paged_and_sorted(self):
        page = QuestionRepository(self.db).find_all_by_project_id(
            PageRequest(page_number=0, page_size=2, sort="createdAt", direction="desc"), "P1"
        )
        self.assertEqual(self.ids(page), ["q4", "q3"])
        self.assertEqual(page.total_elements, 3)

    def test_notes_by_project(self):
        page = NoteRepository(self.db).find_all_by_project_id(None, "P2")
        self.assertEqual(self.ids(page), ["n3"])

    def test_by_project_requires_id(self):
        with self.assertRaises(ValueError):
            NoteRepository(self.db).find_all_by_project_id(None, " ")

    def test_answers_by_question(self):
        page = AnswerRepository(self.db).find_all_by_question_id(PageRequest(), "q1")
        self.assertEqual(self.ids(page), ["a1", "a2"])

    def test_delete_answers_by_question(self):
        repo = AnswerRepository(self.db)
        self.assertEqual(repo.delete_all_by_question_id("q1"), 2)
        self.assertEqual(self.ids(repo.search()), ["a3"])

    def test_comments_by_target(self):
        repo = CommentRepository(self.db)
        page = repo.find_all_by_target(PageRequest(), TargetType.QUESTION, "q1")
        self.assertEqual(self.ids(page), ["c1", "c3"])
        page = repo.find_all_by_target(PageRequest(), TargetType.ANSWER, "q1")
        self.assertEqual(page.total_elements, 0)

    def test_comments_by_target_requires_type(self):
        with self.assertRaises(ValueError):
            CommentRepository(self.db).find_all_by_target(PageRequest(), None, "q1")

    def test_delete_comments_by_target(self):
        repo = CommentRepository(self.db)
        self.assertEqual(repo.delete_all_by_target(TargetType.QUESTION, "q1"), 2)
        self.assertEqual(self.ids(repo.search()), ["c2"])

    def test_project_workspace_helpers(self):
        repo = ProjectRepository(self.db)
        self.assertTrue(repo.exists_by_workspace_id("w-core"))
        self.assertFalse(repo.exists_by_workspace_id("w-lab"))
        self.assertEqual(repo.count_by_workspace_ids(["w-core", "w-lab"]), {"w-core": 2})
        self.assertEqual(repo.count_by_workspace_ids([]), {})

    def test_workspace_has_members(self):
        repo = WorkspaceRepository(self.db)
        self.assertTrue(repo.has_members("w-core"))
        self.assertFalse(repo.has_members("w-lab"))


if __name__ == "__main__":
    unittest.main()
