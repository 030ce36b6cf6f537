"""Chatbot endpoints — questions, remaining quota, ask."""

import pytest
from httpx import AsyncClient

from app.application.interfaces import ChatProvider
from app.application.services.chatbot_service import (
    PREDEFINED_QUESTIONS,
    QUOTA_EXCEEDED_MESSAGE,
    UNAVAILABLE_MESSAGE,
)
from app.domain.entities import ChatCompletionResult
from app.infrastructure.dependencies import get_chat_provider
from app.main import app


class CannedChatProvider(ChatProvider):
    def __init__(self):
        self.calls = 0

    @property
    def provider_name(self) -> str:
        return "canned"

    async def complete(self, messages, model, *, temperature=None, max_tokens=None):
        self.calls += 1
        return ChatCompletionResult(model=model, content="Have a look at **AutoCode Pro**.", finish_reason="stop")


@pytest.fixture
def provider(api_store) -> CannedChatProvider:
    canned = CannedChatProvider()
    app.dependency_overrides[get_chat_provider] = lambda: canned
    return canned


@pytest.mark.asyncio
async def test_predefined_questions(client: AsyncClient):
    response = await client.get("/api/v1/chatbot/questions")

    assert response.status_code == 200
    assert response.json() == {"questions": PREDEFINED_QUESTIONS}


@pytest.mark.asyncio
async def test_fresh_device_has_five_questions(client: AsyncClient):
    response = await client.get("/api/v1/chatbot/remaining/device-new")
    assert response.json() == {"remaining": 5}


@pytest.mark.asyncio
async def test_ask_requires_question_and_device(client: AsyncClient):
    for body in ({"question": "Hi?"}, {"device_id": "d"}, {"question": "  ", "device_id": "d"}):
        response = await client.post("/api/v1/chatbot/ask", json=body)
        assert response.status_code == 400


@pytest.mark.asyncio
async def test_ask_answers_and_counts_down(client: AsyncClient, provider: CannedChatProvider):
    response = await client.post(
        "/api/v1/chatbot/ask", json={"question": "What tools exist?", "device_id": "device-a"}
    )

    assert response.status_code == 200
    assert response.json() == {"response": "Have a look at **AutoCode Pro**.", "remaining": 4}
    remaining = await client.get("/api/v1/chatbot/remaining/device-a")
    assert remaining.json() == {"remaining": 4}


@pytest.mark.asyncio
async def test_sixth_question_is_rejected(client: AsyncClient, provider: CannedChatProvider):
    for i in range(5):
        ok = await client.post(
            "/api/v1/chatbot/ask", json={"question": f"Q{i}?", "device_id": "device-b"}
        )
        assert ok.status_code == 200

    response = await client.post(
        "/api/v1/chatbot/ask", json={"question": "One more?", "device_id": "device-b"}
    )

    assert response.status_code == 429
    assert response.json() == {"message": QUOTA_EXCEEDED_MESSAGE, "remaining": 0}
    assert provider.calls == 5


@pytest.mark.asyncio
async def test_unconfigured_llm_apologises_without_spending_quota(client: AsyncClient):
    response = await client.post(
        "/api/v1/chatbot/ask", json={"question": "Hello?", "device_id": "device-c"}
    )

    assert response.status_code == 200
    assert response.json() == {"response": UNAVAILABLE_MESSAGE, "remaining": 5}
