"""Tests for the conversation actors, the read-data agent and UI message helpers."""

import json
from unittest.mock import AsyncMock

import pytest

from qwery.application.services.agent.agent_factory import AgentFactory
from qwery.domain.llm_providers.llm_types import ChatResponse
from qwery.domain.model.agent.message import Message, MessageRole
from qwery.infrastructure.agent.actors import (
    DEFAULT_INTENT,
    detect_intent,
    greeting,
    load_context,
    parse_intent,
    read_data,
    summarize_intent,
)
from qwery.infrastructure.agent.read_data_agent import ReadDataAgent
from qwery.infrastructure.agent.ui_messages import (
    format_history,
    last_input_text,
    to_llm_messages,
    ui_message_text,
)


def _ui(role: str, text: str) -> dict:
    return {"id": f"{role}-{text}", "role": role, "parts": [{"type": "text", "text": text}]}


class TestParseIntent:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('{"intent": "read-data", "complexity": "medium"}', {"intent": "read-data", "complexity": "medium"}),
            ('Sure! {"intent": "greeting", "complexity": "simple"} ', {"intent": "greeting", "complexity": "simple"}),
            ('{"intent": "dance", "complexity": "epic"}', DEFAULT_INTENT),
            ("no json here", DEFAULT_INTENT),
            ("{broken", DEFAULT_INTENT),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_intent(raw) == expected


class TestActors:
    @pytest.mark.asyncio
    async def test_detect_intent(self, mock_llm):
        mock_llm.ainvoke.return_value = ChatResponse(content='{"intent": "read-data"}')

        intent = await detect_intent(mock_llm, "show me sales")

        assert intent == {"intent": "read-data", "complexity": "simple"}
        assert "show me sales" in mock_llm.ainvoke.await_args.args[0]

    @pytest.mark.asyncio
    async def test_greeting_streams_from_chat_agent(self, mock_llm):
        async def tokens(*args, **kwargs):
            yield "Hello"

        mock_llm.generate_stream.side_effect = tokens

        stream = await greeting(AgentFactory(mock_llm), "hi")

        assert [chunk async for chunk in stream] == ["Hello"]
        sent = mock_llm.generate_stream.call_args.args[0]
        assert sent[0].role == "system"
        assert "The user greeted you" in sent[0].content
        assert sent[-1].content == "hi"

    @pytest.mark.asyncio
    async def test_summarize_intent_includes_history(self, mock_llm):
        async def tokens(*args, **kwargs):
            yield "I can help with your data."

        mock_llm.generate_stream.side_effect = tokens

        stream = await summarize_intent(
            AgentFactory(mock_llm),
            "what next?",
            {"intent": "other", "complexity": "simple"},
            [_ui("user", "load sheet"), _ui("assistant", "done"), _ui("user", "what next?")],
        )

        assert [chunk async for chunk in stream] == ["I can help with your data."]
        prompt = mock_llm.generate_stream.call_args.args[0][0].content
        assert "user: load sheet" in prompt
        assert "assistant: done" in prompt
        assert "Detected intent: other (simple)" in prompt

    @pytest.mark.asyncio
    async def test_load_context_converts_messages(self):
        repo = AsyncMock()
        repo.find_by_conversation_id.return_value = [
            Message.create(
                conversation_id="c1",
                content={"text": "legacy"},
                role=MessageRole.USER,
                created_by="u",
                message_id="m1",
            )
        ]

        messages = await load_context(repo, "c1")

        assert messages == [
            {"id": "m1", "role": "user", "parts": [{"type": "text", "text": "legacy"}]}
        ]

    @pytest.mark.asyncio
    async def test_read_data_yields_final_answer(self, mock_llm, tmp_path):
        mock_llm.generate.return_value = {"content": "You have 3 customers.", "tool_calls": []}

        stream = await read_data(
            AgentFactory(mock_llm), "c1", "how many customers?", [], workspace=tmp_path
        )

        assert [chunk async for chunk in stream] == ["You have 3 customers."]


class TestReadDataAgent:
    @pytest.mark.asyncio
    async def test_uses_workspace_tools(self, mock_llm, tmp_path):
        mock_llm.generate.side_effect = [
            {
                "content": "",
                "tool_calls": [
                    {
                        "id": "c1",
                        "type": "function",
                        "function": {"name": "listViews", "arguments": json.dumps({})},
                    }
                ],
            },
            {"content": "No views yet.", "tool_calls": []},
        ]
        agent = ReadDataAgent("conv-1", AgentFactory(mock_llm), workspace=tmp_path)

        result = await agent.run("what views do I have?", [_ui("user", "what views do I have?")])

        assert result.text == "No views yet."
        assert result.results[0].result["views"] == []
        sent = mock_llm.generate.await_args_list[0].args[0]
        assert [m.role for m in sent] == ["system", "user"]
        tool_names = {t["function"]["name"] for t in mock_llm.generate.await_args_list[0].kwargs["tools"]}
        assert "createDbViewFromSheet" in tool_names

    @pytest.mark.asyncio
    async def test_blank_input_rejected(self, mock_llm, tmp_path):
        agent = ReadDataAgent("conv-1", AgentFactory(mock_llm), workspace=tmp_path)
        with pytest.raises(ValueError):
            await agent.run("  ")


class TestUIMessages:
    def test_text_helpers(self):
        message = {
            "role": "user",
            "parts": [
                {"type": "text", "text": "first"},
                {"type": "tool-call", "name": "x"},
                {"type": "text", "text": "second"},
            ],
        }
        assert ui_message_text(message) == "first second"
        assert last_input_text([message]) == "first"
        assert last_input_text([]) == ""

    def test_to_llm_messages_skips_empty(self):
        converted = to_llm_messages(
            [_ui("user", "q"), {"role": "assistant", "parts": []}, _ui("assistant", "a")]
        )
        assert [(m.role, m.content) for m in converted] == [("user", "q"), ("assistant", "a")]

    def test_format_history(self):
        assert format_history([]) == "(no previous messages)"
        assert format_history([_ui("user", "q")]) == "user: q"
