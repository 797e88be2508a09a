"""API tests for the streaming chat endpoint."""

import asyncio
import json

import pytest

from qwery.domain.exceptions.code import Code
from qwery.domain.llm_providers.llm_types import ChatResponse
from qwery.domain.model.agent.message import Message, MessageRole
from qwery.infrastructure.adapters.primary.web.routers import chat as chat_router

USER_MESSAGE = {"id": "u1", "role": "user", "parts": [{"type": "text", "text": "Show revenue"}]}


class FakeAgent:
    def __init__(self, chunks: list[str], error: Exception | None = None) -> None:
        self.conversation_slug = "fake"
        self.received: list[list[dict]] = []
        self._chunks = chunks
        self._error = error

    async def respond(self, messages):
        self.received.append(messages)
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error


def _events(body: str) -> list:
    events = []
    for block in body.strip().split("\n\n"):
        assert block.startswith("data: ")
        data = block[len("data: "):]
        events.append(data if data == "[DONE]" else json.loads(data))
    return events


async def _drain_background_tasks() -> None:
    if chat_router._background_tasks:
        await asyncio.gather(*list(chat_router._background_tasks))


class TestChatRoute:
    @pytest.mark.asyncio
    async def test_streams_text_deltas(self, client, agent_registry, test_conversation):
        agent = FakeAgent(["Revenue ", "is up"])
        agent_registry.get_or_create.return_value = agent

        response = await client.post(
            f"/api/chat/{test_conversation.slug}", json={"messages": [USER_MESSAGE]}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.headers["cache-control"] == "no-cache"
        assert _events(response.text) == [
            {"type": "text-delta", "delta": "Revenue "},
            {"type": "text-delta", "delta": "is up"},
            "[DONE]",
        ]
        agent_registry.get_or_create.assert_awaited_once_with(test_conversation.slug)
        assert agent.received == [[USER_MESSAGE]]
        await _drain_background_tasks()

    @pytest.mark.asyncio
    async def test_agent_failure_becomes_error_event(
        self, client, agent_registry, test_conversation
    ):
        agent_registry.get_or_create.return_value = FakeAgent(
            ["partial"], error=RuntimeError("model unavailable")
        )

        response = await client.post(
            f"/api/chat/{test_conversation.slug}", json={"messages": [USER_MESSAGE]}
        )

        assert _events(response.text)[-2:] == [
            {"type": "error", "error": "model unavailable"},
            "[DONE]",
        ]
        await _drain_background_tasks()

    @pytest.mark.asyncio
    async def test_empty_messages_rejected(self, client, agent_registry, test_conversation):
        response = await client.post(f"/api/chat/{test_conversation.slug}", json={"messages": []})

        assert response.status_code == 400
        assert response.json()["code"] == Code.BAD_REQUEST_ERROR.code
        agent_registry.get_or_create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message",
        [
            {"foo": 1},
            {"id": "u1", "role": "robot", "parts": [{"type": "text", "text": "hi"}]},
            {"id": "u1", "role": "user", "parts": [{"type": "text"}]},
            {"id": "u1", "role": "user"},
            {"id": " ", "role": "user", "parts": []},
        ],
    )
    async def test_malformed_messages_rejected(
        self, client, agent_registry, mock_llm, test_conversation, message
    ):
        response = await client.post(
            f"/api/chat/{test_conversation.slug}", json={"messages": [message]}
        )

        assert response.status_code == 400
        assert response.json()["code"] == Code.BAD_REQUEST_ERROR.code
        agent_registry.get_or_create.assert_not_awaited()
        mock_llm.ainvoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_text_parts_pass_through(self, client, agent_registry, test_conversation):
        agent = FakeAgent(["ok"])
        agent_registry.get_or_create.return_value = agent
        message = {
            "id": "u2",
            "role": "user",
            "metadata": {"source": "web"},
            "parts": [
                {"type": "text", "text": "Show revenue"},
                {"type": "file", "url": "https://example.com/a.csv", "mediaType": "text/csv"},
            ],
        }

        await client.post(f"/api/chat/{test_conversation.slug}", json={"messages": [message]})
        await _drain_background_tasks()

        assert agent.received == [[message]]

    @pytest.mark.asyncio
    async def test_unknown_conversation(self, client, agent_registry):
        response = await client.post("/api/chat/ghost123", json={"messages": [USER_MESSAGE]})

        assert response.status_code == 404
        assert response.json()["code"] == Code.CONVERSATION_NOT_FOUND_ERROR.code
        agent_registry.get_or_create.assert_not_awaited()


class TestTitleGeneration:
    @pytest.mark.asyncio
    async def test_first_message_titles_conversation(
        self, client, agent_registry, mock_llm, test_conversation
    ):
        mock_llm.ainvoke.return_value = ChatResponse(content="Revenue Overview")
        agent_registry.get_or_create.return_value = FakeAgent(["ok"])

        await client.post(f"/api/chat/{test_conversation.slug}", json={"messages": [USER_MESSAGE]})
        await _drain_background_tasks()

        response = await client.get(f"/api/conversations/{test_conversation.slug}")
        assert response.json()["title"] == "Revenue Overview"
        assert 'User message: "Show revenue"' in mock_llm.ainvoke.await_args.args[0]

    @pytest.mark.asyncio
    async def test_not_regenerated_once_messages_exist(
        self, client, agent_registry, mock_llm, test_conversation, message_repo
    ):
        await message_repo.create(
            Message.create(
                conversation_id=test_conversation.id,
                content={"text": "earlier"},
                role=MessageRole.USER,
                created_by="test-user",
            )
        )
        agent_registry.get_or_create.return_value = FakeAgent(["ok"])

        await client.post(f"/api/chat/{test_conversation.slug}", json={"messages": [USER_MESSAGE]})
        await _drain_background_tasks()

        mock_llm.ainvoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_default_title_is_not_written(
        self, client, agent_registry, mock_llm, test_conversation
    ):
        mock_llm.ainvoke.side_effect = RuntimeError("provider down")
        agent_registry.get_or_create.return_value = FakeAgent(["ok"])

        await client.post(f"/api/chat/{test_conversation.slug}", json={"messages": [USER_MESSAGE]})
        await _drain_background_tasks()

        response = await client.get(f"/api/conversations/{test_conversation.slug}")
        assert response.json()["title"] == "New Conversation"
