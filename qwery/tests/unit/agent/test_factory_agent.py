"""Tests for FactoryAgent wired to a real store and a scripted LLM."""

import pytest

from qwery.domain.exceptions.code import Code
from qwery.domain.llm_providers.llm_types import ChatResponse
from qwery.domain.shared_kernel import DomainException
from qwery.infrastructure.agent.agent_store import AgentStore
from qwery.infrastructure.agent.factory_agent import AgentResponseError, FactoryAgent
from qwery.infrastructure.agent.state_machine import IDLE, STOPPED


def _user(message_id: str, text: str) -> dict:
    return {"id": message_id, "role": "user", "parts": [{"type": "text", "text": text}]}


@pytest.fixture
def store(session_factory) -> AgentStore:
    return AgentStore(session_factory)


@pytest.fixture
def greeting_llm(mock_llm):
    mock_llm.ainvoke.return_value = ChatResponse(
        content='{"intent": "greeting", "complexity": "simple"}'
    )

    async def tokens(*args, **kwargs):
        for token in ("Hi", " there"):
            yield token

    mock_llm.generate_stream.side_effect = tokens
    return mock_llm


async def _collect(agent: FactoryAgent, messages: list[dict]) -> str:
    return "".join([chunk async for chunk in agent.respond(messages)])


class TestFactoryAgentCreate:
    @pytest.mark.asyncio
    async def test_unknown_conversation(self, store, mock_llm):
        with pytest.raises(DomainException) as exc_info:
            await FactoryAgent.create("missing0", store, mock_llm)
        assert exc_info.value.code == Code.CONVERSATION_NOT_FOUND_ERROR.code

    @pytest.mark.asyncio
    async def test_starts_idle(self, store, mock_llm, test_conversation, tmp_path):
        agent = await FactoryAgent.create(
            test_conversation.slug, store, mock_llm, workspace=tmp_path
        )
        assert agent.machine.phase == IDLE
        assert agent.conversation.id == test_conversation.id


class TestFactoryAgentRespond:
    @pytest.mark.asyncio
    async def test_streams_and_persists_exchange(
        self, store, greeting_llm, test_conversation, tmp_path
    ):
        agent = await FactoryAgent.create(
            test_conversation.slug, store, greeting_llm, workspace=tmp_path
        )

        reply = await _collect(agent, [_user("u1", "hello")])

        assert reply == "Hi there"
        assert agent.machine.phase == IDLE
        stored = await store.load_messages(test_conversation.id)
        assert [m["role"] for m in stored] == ["user", "assistant"]
        assert stored[0]["id"] == "u1"
        assert stored[1]["parts"] == [{"type": "text", "text": "Hi there"}]

    @pytest.mark.asyncio
    async def test_resent_history_is_not_duplicated(
        self, store, greeting_llm, test_conversation, tmp_path
    ):
        agent = await FactoryAgent.create(
            test_conversation.slug, store, greeting_llm, workspace=tmp_path
        )
        first = _user("u1", "hello")
        await _collect(agent, [first])
        stored = await store.load_messages(test_conversation.id)

        await _collect(agent, [*stored, _user("u2", "hello again")])

        roles = [m["role"] for m in await store.load_messages(test_conversation.id)]
        assert roles == ["user", "assistant", "user", "assistant"]

    @pytest.mark.asyncio
    async def test_failure_raises_and_idles(self, store, mock_llm, test_conversation, tmp_path):
        mock_llm.ainvoke.side_effect = RuntimeError("provider down")
        agent = await FactoryAgent.create(
            test_conversation.slug, store, mock_llm, workspace=tmp_path
        )

        with pytest.raises(AgentResponseError, match="provider down"):
            await _collect(agent, [_user("u1", "hello")])

        assert agent.machine.phase == IDLE
        assert await store.load_messages(test_conversation.id) == []


class TestFactoryAgentStop:
    @pytest.mark.asyncio
    async def test_stopped_agent_is_rebuilt_idle(self, store, mock_llm, test_conversation, tmp_path):
        agent = await FactoryAgent.create(
            test_conversation.slug, store, mock_llm, workspace=tmp_path
        )
        await agent.stop()
        assert agent.machine.phase == STOPPED
        assert (await store.load_persisted_state(test_conversation.id)).phase == STOPPED

        rebuilt = await FactoryAgent.create(
            test_conversation.slug, store, mock_llm, workspace=tmp_path
        )

        assert rebuilt.machine.phase == IDLE
