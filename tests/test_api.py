"""Integration tests for API endpoints."""
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from prompt_service.config import settings
from prompt_service.dependencies import get_completion_gateway, get_prompt_repository
from prompt_service.exceptions import UpstreamError
from prompt_service.main import app, mount_frontend

from tests.conftest import StubCompletionGateway


@pytest.fixture
def override(seeded_repository, gateway):
    """Point the app at the temporary store and the stub gateway."""
    app.dependency_overrides[get_prompt_repository] = lambda: seeded_repository
    app.dependency_overrides[get_completion_gateway] = lambda: gateway
    yield {"repository": seeded_repository, "gateway": gateway}
    app.dependency_overrides.clear()


def _client(target=app):
    return AsyncClient(transport=ASGITransport(app=target), base_url="http://test")


@pytest.mark.asyncio
async def test_health_endpoint():
    async with _client() as client:
        response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data['status'] == 'OK'
    assert data['service'] == settings.APP_NAME
    assert data['version'] == settings.VERSION


class TestPromptEndpoints:

    @pytest.mark.asyncio
    async def test_list_prompts(self, override):
        async with _client() as client:
            response = await client.get("/api/prompts")

        assert response.status_code == 200
        assert response.json() == [
            {
                "name": "backend",
                "count": 1,
                "prompts": [{"id": "backend/test-api", "name": "test-api", "category": "backend"}]
            },
            {
                "name": "security",
                "count": 1,
                "prompts": [{"id": "security/auth-patterns", "name": "auth-patterns", "category": "security"}]
            },
        ]

    @pytest.mark.asyncio
    async def test_list_prompts_on_missing_store_is_empty(self, repository):
        app.dependency_overrides[get_prompt_repository] = lambda: repository
        try:
            async with _client() as client:
                response = await client.get("/api/prompts")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_get_search_scenario(self, repository):
        app.dependency_overrides[get_prompt_repository] = lambda: repository
        try:
            async with _client() as client:
                created = await client.post(
                    "/api/prompts",
                    json={"category": "backend", "name": "test-api", "content": "Use REST conventions."}
                )
                fetched = await client.get("/api/prompts/backend/test-api")
                searched = await client.post("/api/search", json={"query": "rest"})
        finally:
            app.dependency_overrides.clear()

        assert created.status_code == 200
        assert created.json() == {"success": True, "id": "backend/test-api"}

        assert fetched.status_code == 200
        assert fetched.json() == {
            "id": "backend/test-api",
            "category": "backend",
            "name": "test-api",
            "content": "Use REST conventions."
        }

        assert searched.status_code == 200
        data = searched.json()
        assert data["query"] == "rest"
        assert data["count"] == 1
        assert data["results"][0]["id"] == "backend/test-api"
        assert data["results"][0]["preview"] == "Use REST conventions...."

    @pytest.mark.asyncio
    async def test_create_sanitizes_name(self, override):
        async with _client() as client:
            response = await client.post(
                "/api/prompts",
                json={"category": "backend", "name": "My New Prompt!", "content": "body"}
            )

        assert response.json()["id"] == "backend/my-new-prompt-"

    @pytest.mark.asyncio
    async def test_create_with_missing_fields_returns_400_and_writes_nothing(self, repository, prompts_dir):
        app.dependency_overrides[get_prompt_repository] = lambda: repository
        try:
            async with _client() as client:
                response = await client.post("/api/prompts", json={"category": "x"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_input"
        assert not prompts_dir.exists()

    @pytest.mark.asyncio
    async def test_create_with_wrong_types_returns_400(self, override):
        async with _client() as client:
            response = await client.post(
                "/api/prompts", json={"category": "x", "name": "y", "content": ["not", "text"]}
            )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_input"

    @pytest.mark.asyncio
    async def test_get_missing_prompt_returns_404(self, override):
        async with _client() as client:
            response = await client.get("/api/prompts/backend/ghost")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "not_found"

    @pytest.mark.asyncio
    async def test_get_unsafe_name_is_rejected(self, override):
        async with _client() as client:
            response = await client.get("/api/prompts/backend/a%5Cb")

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_path"

    @pytest.mark.asyncio
    async def test_delete_then_get(self, override):
        async with _client() as client:
            deleted = await client.delete("/api/prompts/backend/test-api")
            fetched = await client.get("/api/prompts/backend/test-api")
            deleted_again = await client.delete("/api/prompts/backend/test-api")

        assert deleted.status_code == 200
        assert deleted.json() == {"success": True}
        assert fetched.status_code == 404
        assert deleted_again.status_code == 404

    @pytest.mark.asyncio
    async def test_search_empty_query(self, override):
        async with _client() as client:
            response = await client.post("/api/search", json={"query": ""})

        assert response.json() == {"query": "", "count": 0, "results": []}


class TestAssistantEndpoints:

    @pytest.mark.asyncio
    async def test_generate_uses_default_system_message(self, override):
        gateway = override["gateway"]

        async with _client() as client:
            response = await client.post("/api/generate", json={"userRequest": "hello"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "response": "stub reply",
            "model": settings.DEFAULT_MODEL,
            "promptUsed": "default"
        }
        messages = gateway.calls[0]["messages"]
        assert messages[0].role == "system"
        assert messages[0].content == settings.DEFAULT_SYSTEM_PROMPT
        assert messages[1].content == "hello"

    @pytest.mark.asyncio
    async def test_generate_with_prompt_and_model(self, override):
        gateway = override["gateway"]

        async with _client() as client:
            response = await client.post(
                "/api/generate",
                json={"userRequest": "hello", "promptId": "backend/test-api", "model": "custom-model"}
            )

        data = response.json()
        assert data["model"] == "custom-model"
        assert data["promptUsed"] == "backend/test-api"
        assert gateway.calls[0]["messages"][0].content == "Use REST conventions."

    @pytest.mark.asyncio
    async def test_generate_without_user_request_returns_400(self, override):
        async with _client() as client:
            response = await client.post("/api/generate", json={"promptId": "backend/test-api"})

        assert response.status_code == 400
        assert override["gateway"].calls == []

    @pytest.mark.asyncio
    async def test_chat_prepends_stored_prompt(self, override):
        gateway = override["gateway"]

        async with _client() as client:
            response = await client.post(
                "/api/chat",
                json={
                    "messages": [{"role": "user", "content": "hi"}],
                    "promptId": "security/auth-patterns"
                }
            )

        assert response.status_code == 200
        assert response.json() == {"response": "stub reply"}
        call = gateway.calls[0]
        assert [(m.role, m.content) for m in call["messages"]] == [
            ("system", "# AUTH PATTERNS\n\nAccess token: 15min"),
            ("user", "hi"),
        ]
        assert call["model"] == settings.DEFAULT_MODEL

    @pytest.mark.asyncio
    async def test_chat_gateway_failure_returns_500(self, seeded_repository):
        failing = StubCompletionGateway(error=UpstreamError("Completion provider error: 503"))
        app.dependency_overrides[get_prompt_repository] = lambda: seeded_repository
        app.dependency_overrides[get_completion_gateway] = lambda: failing
        try:
            async with _client() as client:
                response = await client.post(
                    "/api/chat", json={"messages": [{"role": "user", "content": "hi"}]}
                )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["detail"] == {
            "error": "Completion provider error: 503",
            "code": "upstream_failure"
        }

    @pytest.mark.asyncio
    async def test_chat_rejects_unknown_role(self, override):
        async with _client() as client:
            response = await client.post(
                "/api/chat", json={"messages": [{"role": "robot", "content": "hi"}]}
            )

        assert response.status_code == 400


@pytest.mark.asyncio
async def test_oversized_body_is_rejected(override, monkeypatch):
    monkeypatch.setattr(settings, "MAX_REQUEST_BYTES", 100)

    async with _client() as client:
        response = await client.post(
            "/api/prompts",
            json={"category": "big", "name": "big", "content": "x" * 500}
        )

    assert response.status_code == 413
    assert response.json()["detail"]["code"] == "payload_too_large"


class TestFrontend:

    @pytest.mark.asyncio
    async def test_serves_files_and_falls_back_to_index(self, tmp_path):
        public = tmp_path / "public"
        public.mkdir()
        (public / "index.html").write_text("<html>app</html>", encoding="utf-8")
        (public / "app.js").write_text("console.log('hi')", encoding="utf-8")

        frontend_app = FastAPI()
        assert mount_frontend(frontend_app, public)

        async with _client(frontend_app) as client:
            asset = await client.get("/app.js")
            route = await client.get("/prompts/backend")
            api = await client.get("/api/unknown")

        assert asset.text == "console.log('hi')"
        assert route.text == "<html>app</html>"
        assert api.status_code == 404

    def test_missing_public_dir_is_not_mounted(self, tmp_path):
        assert not mount_frontend(FastAPI(), tmp_path / "missing")
        assert not mount_frontend(FastAPI(), None)
