import unittest

from fastapi.testclient import TestClient

from tests.search.base import SearchDataBase

from devsync.core.config import settings
from devsync.db.session import get_db
from devsync.main import app


class ApiTestBase(SearchDataBase):
    def setUp(self):
        super().setUp()

        def _override_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _override_db
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        app.dependency_overrides.clear()
        super().tearDown()


class ListEndpointTests(ApiTestBase):
    def test_envelope_shape(self):
        response = self.client.get("/api/tags", params={"pageNumber": 0, "pageSize": 2})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(set(body), {"pageNumber", "pageSize", "totalElements", "totalPages", "items"})
        self.assertEqual(body["pageNumber"], 0)
        self.assertEqual(body["pageSize"], 2)
        self.assertEqual(body["totalElements"], 3)
        self.assertEqual(body["totalPages"], 2)
        self.assertEqual([row["name"] for row in body["items"]], ["docker", "java"])

    def test_terms_query_param(self):
        response = self.client.get(
            "/api/questions",
            params={"terms": "status=OPEN#projectId=P1", "sort": "id", "direction": "asc"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["id"] for row in response.json()["items"]], ["q1", "q4"])
        self.assertEqual(response.json()["items"][0]["tagsId"], ["t-java", "t-spring"])

    def test_post_search_with_filters(self):
        response = self.client.post(
            "/api/answers/search",
            json={"page": {"pageNumber": 0, "pageSize": 5}, "filters": {"isAccepted": "true"}},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["totalElements"], 1)
        self.assertEqual(body["items"][0]["id"], "a1")
        self.assertIs(body["items"][0]["isAccepted"], True)

    def test_terms_and_filters_together_are_rejected(self):
        response = self.client.post(
            "/api/tags/search",
            json={"terms": "name=java", "filters": {"name": "java"}},
        )
        self.assertEqual(response.status_code, 422)

    def test_terms_with_empty_filters_are_rejected(self):
        response = self.client.post("/api/notes/search", json={"terms": "version=2", "filters": {}})
        self.assertEqual(response.status_code, 422)

    def test_terms_alone_in_body_are_applied(self):
        response = self.client.post("/api/notes/search", json={"terms": "version=2"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["id"] for row in response.json()["items"]], ["n2"])

    def test_negative_page_number_is_rejected(self):
        response = self.client.get("/api/tags", params={"pageNumber": -1})
        self.assertEqual(response.status_code, 422)

    def test_huge_page_number_is_rejected(self):
        response = self.client.get("/api/tags", params={"pageNumber": 10**19})
        self.assertEqual(response.status_code, 422)
        response = self.client.post("/api/tags/search", json={"page": {"pageNumber": 10**19}})
        self.assertEqual(response.status_code, 422)

    def test_last_allowed_page_number_is_empty(self):
        response = self.client.get("/api/tags", params={"pageNumber": settings.SEARCH_MAX_PAGE_NUMBER})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["items"], [])

    def test_page_size_clamp_is_documented(self):
        parameters = self.client.get("/openapi.json").json()["paths"]["/api/tags"]["get"]["parameters"]
        page_size = next(item for item in parameters if item["name"] == "pageSize")
        self.assertIn("clamped", page_size["description"])

    def test_oversized_page_reports_applied_size(self):
        response = self.client.get("/api/tags", params={"pageSize": 10_000})
        self.assertEqual(response.json()["pageSize"], settings.SEARCH_MAX_PAGE_SIZE)

    def test_workspace_listing_is_enriched(self):
        response = self.client.get("/api/workspaces", params={"sort": "name", "direction": "asc"})
        self.assertEqual(response.status_code, 200)
        items = response.json()["items"]
        self.assertEqual([row["id"] for row in items], ["w-core", "w-lab"])
        self.assertEqual(items[0]["projectCount"], 2)
        self.assertEqual(items[0]["ownerName"], "Alice Smith")
        self.assertEqual(items[0]["membersId"], ["u-bob", "u-carol"])
        self.assertEqual(items[1]["projectCount"], 0)


class ErrorResponseTests(ApiTestBase):
    def test_unknown_field_is_bad_request(self):
        response = self.client.get("/api/tags", params={"terms": "bogus=x"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["status"], 400)
        self.assertEqual(body["error"], "Bad Request")
        self.assertEqual(body["message"], "Invalid search field provided: 'bogus'")
        self.assertEqual(body["path"], "/api/tags")
        self.assertIn("timestamp", body)

    def test_bad_boolean_is_bad_request(self):
        response = self.client.get("/api/answers", params={"terms": "isAccepted=maybe"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("isAccepted", response.json()["message"])

    def test_bad_sort_is_bad_request(self):
        response = self.client.get("/api/users", params={"sort": "password", "direction": "asc"})
        self.assertEqual(response.status_code, 400)

    def test_blank_id_is_bad_request(self):
        response = self.client.get("/api/tags/%20")
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["error"], "Bad Request")
        self.assertEqual(body["message"], "Tag ID must not be null or empty")

    def test_missing_entity_is_not_found(self):
        response = self.client.get("/api/questions/q-missing")
        self.assertEqual(response.status_code, 404)
        body = response.json()
        self.assertEqual(body["status"], 404)
        self.assertEqual(body["error"], "Not Found")
        self.assertEqual(body["message"], "Question not found with id: q-missing")

    def test_request_id_is_echoed(self):
        response = self.client.get("/api/tags", headers={"X-Request-ID": "search-check-1"})
        self.assertEqual(response.headers.get("x-request-id"), "search-check-1")
        self.assertEqual(response.headers.get("x-content-type-options"), "nosniff")

    def test_invalid_request_id_is_replaced(self):
        response = self.client.get("/api/tags/t-missing", headers={"X-Request-ID": "bad id"})
        self.assertEqual(response.status_code, 404)
        self.assertNotEqual(response.headers.get("x-request-id"), "bad id")
        self.assertRegex(response.headers.get("x-request-id"), r"^[A-Za-z0-9._-]{1,128}$")


class SubResourceTests(ApiTestBase):
    def test_project_questions(self):
        response = self.client.get("/api/projects/P1/questions", params={"sort": "createdAt", "direction": "desc"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["id"] for row in response.json()["items"]], ["q4", "q3", "q1"])

    def test_project_notes(self):
        response = self.client.get("/api/projects/P2/notes")
        self.assertEqual([row["id"] for row in response.json()["items"]], ["n3"])

    def test_unknown_project_sub_resource_is_not_found(self):
        response = self.client.get("/api/projects/P9/questions")
        self.assertEqual(response.status_code, 404)

    def test_question_answers(self):
        response = self.client.get("/api/questions/q1/answers")
        self.assertEqual([row["id"] for row in response.json()["items"]], ["a1", "a2"])

    def test_target_comments(self):
        response = self.client.get("/api/comments/target/QUESTION/q1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["id"] for row in response.json()["items"]], ["c1", "c3"])

    def test_unknown_target_type(self):
        response = self.client.get("/api/comments/target/PROJECT/P1")
        self.assertEqual(response.status_code, 422)


class DeleteEndpointTests(ApiTestBase):
    def setUp(self):
        self.reset_data()
        super().setUp()

    def test_workspace_with_members_is_kept(self):
        response = self.client.delete("/api/workspaces/w-core")
        self.assertEqual(response.status_code, 400)
        self.assertIn("members", response.json()["message"])
        self.assertEqual(self.client.get("/api/workspaces/w-core").status_code, 200)

    def test_empty_workspace_is_deleted(self):
        response = self.client.delete("/api/workspaces/w-lab")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get("/api/workspaces/w-lab").status_code, 404)

    def test_missing_workspace(self):
        self.assertEqual(self.client.delete("/api/workspaces/w-none").status_code, 404)

    def test_question_delete_cascades(self):
        response = self.client.delete("/api/questions/q1")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get("/api/questions/q1").status_code, 404)

        answers = self.client.get("/api/answers").json()
        self.assertEqual([row["id"] for row in answers["items"]], ["a3"])

        comments = self.client.get("/api/comments").json()
        self.assertEqual([row["id"] for row in comments["items"]], ["c2"])


if __name__ == "__main__":
    unittest.main()
