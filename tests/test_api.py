"""HTTP tests for the API routes."""

import httpx
from jose import jwt

from life_manage.main import app
from life_manage.routers.deps import get_completion_client
from life_manage.services.completion_client import CompletionClient
from tests.helpers import TEST_KEY, auth_headers, completion_body, export_document, export_entry, make_token

HEADERS = auth_headers("user-1")
OTHER = auth_headers("user-2")


def use_completions(handler):
    """Route completion calls made by the app through an in-process handler."""
    transport = httpx.MockTransport(handler)
    app.dependency_overrides[get_completion_client] = lambda: CompletionClient(
        httpx.AsyncClient(transport=transport), api_url="https://completions.test/v1/chat/completions"
    )


def create_project(client, headers=HEADERS, **fields):
    response = client.post("/api/projects", json={"title": "Website", **fields}, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestMisc:
    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestAuth:
    def test_missing_token(self, client):
        response = client.get("/api/projects")
        assert response.status_code == 401

    def test_wrong_secret(self, client):
        token = jwt.encode({"sub": "user-1"}, "other-secret", algorithm="HS256")
        response = client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_expired_token(self, client):
        token = make_token("user-1", exp=1)
        response = client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"


class TestProjects:
    def test_create_and_get(self, client):
        project = create_project(client, category="work", tags=["a", "a"])

        assert project["category"] == "work"
        assert project["tags"] == ["a"]
        fetched = client.get(f"/api/projects/{project['id']}", headers=HEADERS).json()
        assert fetched["title"] == "Website"

    def test_invalid_category_is_400(self, client):
        response = client.post("/api/projects", json={"title": "X", "category": "hobby"}, headers=HEADERS)
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_other_users_project_is_404(self, client):
        project = create_project(client, headers=OTHER)
        response = client.get(f"/api/projects/{project['id']}", headers=HEADERS)
        assert response.status_code == 404
        assert response.json() == {"detail": "Project not found", "code": "NOT_FOUND"}

    def test_list_filters(self, client):
        create_project(client, title="Website", category="work")
        create_project(client, title="Holiday", category="personal")

        body = client.get("/api/projects", params={"category": "work"}, headers=HEADERS).json()
        assert body["count"] == 1
        assert body["projects"][0]["title"] == "Website"
        body = client.get("/api/projects", params={"search": "holi"}, headers=HEADERS).json()
        assert [p["title"] for p in body["projects"]] == ["Holiday"]

    def test_blank_title_patch_is_400(self, client):
        project = create_project(client)
        response = client.patch(f"/api/projects/{project['id']}", json={"title": "   "}, headers=HEADERS)
        assert response.status_code == 400
        assert client.get(f"/api/projects/{project['id']}", headers=HEADERS).json()["title"] == "Website"

    def test_update_and_delete(self, client):
        project = create_project(client)
        response = client.patch(f"/api/projects/{project['id']}", json={"priority": 3}, headers=HEADERS)
        assert response.json()["priority"] == 3

        assert client.delete(f"/api/projects/{project['id']}", headers=HEADERS).status_code == 204
        assert client.delete(f"/api/projects/{project['id']}", headers=HEADERS).status_code == 404

    def test_detail(self, client):
        project = create_project(client)
        client.post("/api/tasks", json={"project_id": project["id"], "title": "Task"}, headers=HEADERS)
        client.post(f"/api/projects/{project['id']}/notes", json={"content": "Note"}, headers=HEADERS)

        detail = client.get(f"/api/projects/{project['id']}/detail", headers=HEADERS).json()
        assert detail["project"]["id"] == project["id"]
        assert [t["title"] for t in detail["tasks"]] == ["Task"]
        assert [n["content"] for n in detail["notes"]] == ["Note"]
        assert detail["conversations"] == []


class TestTasksAndNotes:
    def test_task_lifecycle(self, client):
        project = create_project(client)
        task = client.post(
            "/api/tasks",
            json={"project_id": project["id"], "title": "Write copy", "due_date": "2030-01-01T00:00:00"},
            headers=HEADERS,
        ).json()
        assert task["status"] == "pending"

        cycled = client.post(f"/api/tasks/{task['id']}/cycle-status", headers=HEADERS).json()
        assert cycled["status"] == "in_progress"
        patched = client.patch(f"/api/tasks/{task['id']}", json={"status": "pending"}, headers=HEADERS).json()
        assert patched["status"] == "pending"

        listed = client.get("/api/tasks", params={"project_id": project["id"]}, headers=HEADERS).json()
        assert listed["count"] == 1
        assert client.delete(f"/api/tasks/{task['id']}", headers=HEADERS).status_code == 204

    def test_task_for_unknown_project_is_400(self, client):
        response = client.post(
            "/api/tasks",
            json={"project_id": "00000000-0000-4000-8000-000000000000", "title": "Orphan"},
            headers=HEADERS,
        )
        assert response.status_code == 400

    def test_note_lifecycle(self, client):
        project = create_project(client)
        note = client.post(f"/api/projects/{project['id']}/notes", json={"content": "first"}, headers=HEADERS).json()

        updated = client.patch(f"/api/notes/{note['id']}", json={"content": "second"}, headers=HEADERS).json()
        assert updated["content"] == "second"
        untouched = client.patch(f"/api/notes/{note['id']}", json={}, headers=HEADERS)
        assert untouched.status_code == 200
        assert untouched.json()["content"] == "second"
        notes = client.get(f"/api/projects/{project['id']}/notes", headers=HEADERS).json()
        assert [n["content"] for n in notes] == ["second"]
        assert client.delete(f"/api/notes/{note['id']}", headers=HEADERS).status_code == 204


class TestSession:
    def test_set_and_clear_credential(self, client):
        response = client.put("/api/session/credential", json={"api_key": TEST_KEY, "store": True}, headers=HEADERS)
        assert response.json()["has_session_key"] is True
        assert response.json()["has_stored_key"] is True
        assert "api_key" not in response.text

        assert client.delete("/api/session", headers=HEADERS).status_code == 204
        status = client.get("/api/session", headers=HEADERS).json()
        assert status == {
            "user_id": "user-1",
            "email": "user@example.com",
            "has_session_key": False,
            "has_stored_key": True,
        }

        assert client.post("/api/session", headers=HEADERS).json()["has_session_key"] is True

    def test_bad_key_format(self, client):
        response = client.put("/api/session/credential", json={"api_key": "nope"}, headers=HEADERS)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid OpenAI API key format"


class TestImportAndCategorize:
    def test_preview(self, client):
        body = export_document(export_entry("a", "Alpha", "hi"), {"title": "broken"})
        preview = client.post("/api/conversations/import/preview", content=body, headers=HEADERS).json()
        assert [c["id"] for c in preview["conversations"]] == ["a"]
        assert preview["rejected"][0]["index"] == 1

    def test_invalid_export_is_400(self, client):
        response = client.post("/api/conversations/import", content=b'{"chats": []}', headers=HEADERS)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid ChatGPT export format"

    def test_import_selected(self, client):
        body = export_document(export_entry("a", "Alpha", "hi"), export_entry("b", "Beta", "yo"))
        response = client.post("/api/conversations/import", params={"selected": ["b"]}, content=body, headers=HEADERS)
        assert response.status_code == 201
        assert response.json()["count"] == 1

        listed = client.get("/api/conversations", params={"uncategorized": True}, headers=HEADERS).json()
        assert [c["title"] for c in listed["conversations"]] == ["Beta"]

    def test_categorize_without_key_is_401(self, client):
        client.post("/api/conversations/import", content=export_document(export_entry("a", "A", "hi")), headers=HEADERS)
        response = client.post("/api/categorize", headers=HEADERS)
        assert response.status_code == 401
        assert response.json()["code"] == "AUTH_REQUIRED"

    def test_categorize_after_sign_out_is_401(self, client):
        client.post("/api/conversations/import", content=export_document(export_entry("a", "A", "hi")), headers=HEADERS)
        client.put("/api/session/credential", json={"api_key": TEST_KEY, "store": True}, headers=HEADERS)
        assert client.delete("/api/session", headers=HEADERS).status_code == 204

        response = client.post("/api/categorize", headers=HEADERS)

        assert response.status_code == 401
        assert response.json()["detail"] == "OpenAI API key is missing"

    def test_upload_then_categorize(self, client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["Authorization"])
            return httpx.Response(200, json=completion_body('{"category": "work", "tags": ["web"]}'))

        use_completions(handler)
        body = export_document(export_entry("a", "Alpha", "hi"), export_entry("b", "Beta", "yo"))
        imported = client.post("/api/conversations/import", content=body, headers=HEADERS).json()
        assert all(c["project_id"] is None for c in imported["imported"])
        client.put("/api/session/credential", json={"api_key": TEST_KEY}, headers=HEADERS)

        report = client.post("/api/categorize", headers=HEADERS).json()

        assert report["processed"] == 2
        assert report["projects_created"] == 2
        assert [s["outcome"] for s in report["steps"]] == ["ok", "ok"]
        assert report["steps"][-1]["progress"] == 1.0
        assert seen == [f"Bearer {TEST_KEY}"] * 2
        projects = client.get("/api/projects", headers=HEADERS).json()["projects"]
        assert sorted(p["title"] for p in projects) == ["Alpha", "Beta"]
        assert all(p["category"] == "work" for p in projects)
        listed = client.get("/api/conversations", params={"uncategorized": True}, headers=HEADERS).json()
        assert listed["count"] == 0

    def test_conversation_detail_and_assignment(self, client):
        imported = client.post(
            "/api/conversations/import",
            content=export_document(export_entry("a", "Alpha", "question", "answer")),
            headers=HEADERS,
        ).json()["imported"][0]
        project = create_project(client)

        detail = client.get(f"/api/conversations/{imported['id']}", headers=HEADERS).json()
        assert [m["role"] for m in detail["messages"]] == ["user", "assistant"]

        assigned = client.patch(
            f"/api/conversations/{imported['id']}", json={"project_id": project["id"]}, headers=HEADERS
        ).json()
        assert assigned["project_id"] == project["id"]
        response = client.patch(f"/api/conversations/{imported['id']}", json={"content": {}}, headers=HEADERS)
        assert response.status_code == 400


class TestWorkflows:
    def test_next_steps_fallback(self, client):
        use_completions(lambda request: httpx.Response(500, json={"error": {"message": "overloaded"}}))
        project = create_project(client)
        client.put("/api/session/credential", json={"api_key": TEST_KEY}, headers=HEADERS)

        body = client.post(f"/api/projects/{project['id']}/next-steps", headers=HEADERS).json()

        assert body["outcome"] == "fallback"
        assert len(body["created"]) == 3
        assert len(body["tasks"]) == 3

    def test_dashboard_without_key_has_no_summary(self, client):
        create_project(client)
        body = client.get("/api/dashboard", headers=HEADERS).json()
        assert body["summary"] is None
        assert body["counts"]["projects"] == 1

    def test_dashboard_summary(self, client):
        use_completions(lambda request: httpx.Response(200, json=completion_body("Stay focused.")))
        create_project(client)
        client.put("/api/session/credential", json={"api_key": TEST_KEY}, headers=HEADERS)

        body = client.get("/api/dashboard", headers=HEADERS).json()
        assert body["summary"] == "Stay focused."
        assert body["summary_outcome"] == "ok"

    def test_sample_data(self, client):
        response = client.post("/api/sample-data", headers=HEADERS)
        assert response.status_code == 201
        assert response.json()["counts"]["projects"] == 3
        dashboard = client.get("/api/dashboard", headers=HEADERS).json()
        assert len(dashboard["recent_projects"]) == 3
        assert len(dashboard["priority_tasks"]) == 2
