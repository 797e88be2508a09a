"""Unit tests for the agent application services."""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest

from qwery.application.services.agent import (
    AgentConstructor,
    AgentFactory,
    ConversationTitleService,
    MessagePersistenceService,
    StatePersistenceService,
)
from qwery.application.services.agent.conversation_title_service import clean_title
from qwery.domain.llm_providers.llm_types import ChatResponse, Message as LLMMessage
from qwery.domain.model.agent.message import Message, MessageRole
from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.domain.model.organization import Organization
from qwery.domain.model.project import Project
from qwery.domain.model.agent.conversation import Conversation


def _tool_call(call_id: str, name: str, arguments: dict) -> dict:
    return {
        "id": call_id,
        "type": "function",
        "function": {"name": name, "arguments": json.dumps(arguments)},
    }


class TestAgentRunner:
    @pytest.mark.asyncio
    async def test_executes_tool_calls_until_final_answer(self, mock_llm):
        async def add(a: int, b: int) -> int:
            return a + b

        mock_llm.generate.side_effect = [
            {"content": "", "tool_calls": [_tool_call("c1", "add", {"a": 2, "b": 3})]},
            {"content": "The sum is 5", "tool_calls": []},
        ]
        runner = AgentFactory(mock_llm).build_agent(
            AgentConstructor(
                name="calc",
                system_prompt="You add numbers.",
                tools=[AgentFactory.create_tool("add", add, "Add two numbers")],
            )
        )

        result = await runner.run("2 + 3?")

        assert result.text == "The sum is 5"
        assert result.results[0].result == 5
        tool_message = result.messages[-2]
        assert tool_message.role == "tool"
        assert tool_message.content == "5"
        first_call_messages = mock_llm.generate.await_args_list[0].args[0]
        assert first_call_messages[0].role == "system"
        assert mock_llm.generate.await_args_list[0].kwargs["tools"][0]["function"]["name"] == "add"

    @pytest.mark.asyncio
    async def test_tool_errors_are_fed_back(self, mock_llm):
        async def boom() -> None:
            raise ValueError("no data")

        mock_llm.generate.side_effect = [
            {"content": "", "tool_calls": [_tool_call("c1", "boom", {})]},
            {"content": "Sorry", "tool_calls": []},
        ]
        runner = AgentFactory(mock_llm).build_agent(
            AgentConstructor(
                name="t", system_prompt="s", tools=[AgentFactory.create_tool("boom", boom)]
            )
        )

        result = await runner.run("go")

        assert result.results[0].error == "no data"
        assert json.loads(result.messages[-2].content) == {"error": "no data"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, mock_llm):
        mock_llm.generate.side_effect = [
            {"content": "", "tool_calls": [_tool_call("c1", "missing", {})]},
            {"content": "done", "tool_calls": []},
        ]
        runner = AgentFactory(mock_llm).build_agent(AgentConstructor(name="t", system_prompt="s"))

        result = await runner.run("go")

        assert result.results[0].error == "Unknown tool: missing"

    @pytest.mark.asyncio
    async def test_stops_at_max_steps(self, mock_llm):
        async def noop() -> str:
            return "ok"

        mock_llm.generate.return_value = {
            "content": "thinking",
            "tool_calls": [_tool_call("c1", "noop", {})],
        }
        runner = AgentFactory(mock_llm, max_steps=3).build_agent(
            AgentConstructor(
                name="t", system_prompt="s", tools=[AgentFactory.create_tool("noop", noop)]
            )
        )

        result = await runner.run("go")

        assert mock_llm.generate.await_count == 3
        assert result.text == "thinking"

    @pytest.mark.asyncio
    async def test_stream_without_tools_streams_tokens(self, mock_llm):
        async def tokens(*args, **kwargs):
            for token in ("Hel", "lo"):
                yield token

        mock_llm.generate_stream.side_effect = tokens
        runner = AgentFactory(mock_llm).build_chat_agent(
            AgentConstructor(name="chat", system_prompt="s")
        )

        chunks = [chunk async for chunk in runner.stream([LLMMessage.user("hi")])]

        assert chunks == ["Hel", "lo"]


class TestConversationTitleService:
    @pytest.mark.asyncio
    async def test_generates_clean_title(self, mock_llm):
        mock_llm.ainvoke.return_value = ChatResponse(content='  "Monthly revenue analysis"  ')

        title = await ConversationTitleService(mock_llm).generate("Show revenue by month")

        assert title == "Monthly revenue analysis"
        prompt = mock_llm.ainvoke.await_args.args[0]
        assert 'User message: "Show revenue by month"' in prompt

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_default(self, mock_llm):
        mock_llm.ainvoke.side_effect = RuntimeError("provider down")

        assert await ConversationTitleService(mock_llm).generate("hi") == "New Conversation"

    @pytest.mark.asyncio
    async def test_timeout_falls_back_to_default(self, mock_llm):
        async def slow(*args, **kwargs):
            await asyncio.sleep(1)
            return ChatResponse(content="Too late")

        mock_llm.ainvoke.side_effect = slow

        title = await ConversationTitleService(mock_llm, timeout=0.01).generate("hi")

        assert title == "New Conversation"

    def test_clean_title_truncates(self):
        assert len(clean_title("x" * 100)) == 60
        assert clean_title("'quoted'") == "quoted"


class TestMessagePersistenceService:
    @pytest.fixture
    async def conversation(self, organization_repo, project_repo, conversation_repo):
        org = await organization_repo.create(Organization.create(name="o", created_by="u"))
        project = await project_repo.create(Project.create(org_id=org.id, name="p", created_by="u"))
        return await conversation_repo.create(
            Conversation.create(project_id=project.id, task_id="t", created_by="u")
        )

    @pytest.mark.asyncio
    async def test_persists_and_skips_existing(self, message_repo, conversation_repo, conversation):
        service = MessagePersistenceService(message_repo, conversation_repo, conversation.slug)
        ui_messages = [
            {"id": "m1", "role": "user", "parts": [{"type": "text", "text": "hello"}]},
            {"id": "m2", "role": "assistant", "parts": [{"type": "text", "text": "hi!"}]},
        ]

        first = await service.persist_messages(ui_messages, created_by="alice")
        second = await service.persist_messages(ui_messages, created_by="alice")

        assert first == {"errors": []}
        assert second == {"errors": []}
        stored = await message_repo.find_by_conversation_id(conversation.id)
        assert [m.id for m in stored] == ["m1", "m2"]
        assert stored[0].content["parts"][0]["text"] == "hello"
        assert stored[1].role is MessageRole.ASSISTANT

    @pytest.mark.asyncio
    async def test_message_id_reused_by_another_conversation(
        self, message_repo, conversation_repo, conversation
    ):
        other = await conversation_repo.create(
            Conversation.create(project_id=conversation.project_id, task_id="t2", created_by="u")
        )
        ui_message = {"id": "msg-1", "role": "user", "parts": [{"type": "text", "text": "hi"}]}

        first = await MessagePersistenceService(
            message_repo, conversation_repo, conversation.slug
        ).persist_messages([ui_message])
        other_service = MessagePersistenceService(message_repo, conversation_repo, other.slug)
        second = await other_service.persist_messages([ui_message])
        resent = await other_service.persist_messages([ui_message])

        assert first == second == resent == {"errors": []}
        stored = await message_repo.find_by_conversation_id(other.id)
        assert len(stored) == 1
        assert stored[0].id != "msg-1"
        assert stored[0].content["id"] == "msg-1"
        assert [m.id for m in await message_repo.find_by_conversation_id(conversation.id)] == [
            "msg-1"
        ]

    @pytest.mark.asyncio
    async def test_unknown_conversation_is_reported(self, message_repo, conversation_repo):
        service = MessagePersistenceService(message_repo, conversation_repo, "missing")

        outcome = await service.persist_messages(
            [{"id": "m1", "role": "user", "parts": [{"type": "text", "text": "x"}]}]
        )

        assert len(outcome["errors"]) == 1

    def test_convert_to_ui_messages(self):
        full = Message.create(
            conversation_id="c",
            content={"id": "x", "role": "user", "parts": [{"type": "text", "text": "a"}]},
            role=MessageRole.USER,
            created_by="u",
            message_id="m1",
        )
        legacy = Message.create(
            conversation_id="c",
            content={"text": "b"},
            role=MessageRole.ASSISTANT,
            created_by="u",
            message_id="m2",
        )

        converted = MessagePersistenceService.convert_to_ui_messages([full, legacy])

        assert converted[0]["id"] == "m1"
        assert converted[0]["parts"] == [{"type": "text", "text": "a"}]
        assert converted[1] == {
            "id": "m2",
            "role": "assistant",
            "parts": [{"type": "text", "text": "b"}],
        }


class TestStatePersistenceService:
    @pytest.mark.asyncio
    async def test_round_trip(self, agent_state_repo):
        service = StatePersistenceService(agent_state_repo)
        await service.persist_state(
            "c1", AgentStateSnapshot(conversation_id="ignored", phase="idle", context={"k": 1})
        )

        snapshot = await service.load_persisted_state("c1")

        assert snapshot.phase == "idle"
        assert snapshot.context == {"k": 1}

    @pytest.mark.asyncio
    async def test_errors_are_swallowed(self):
        repo = AsyncMock()
        repo.save.side_effect = RuntimeError("db down")
        repo.find_by_conversation_id.side_effect = RuntimeError("db down")
        service = StatePersistenceService(repo)

        await service.persist_state("c1", AgentStateSnapshot(conversation_id="c1", phase="idle"))
        assert await service.load_persisted_state("c1") is None
