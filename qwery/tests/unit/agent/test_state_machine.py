"""Tests for the conversational agent state machine."""

import pytest

from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.infrastructure.agent.state_machine import (
    DETECT_INTENT,
    FINISH_STREAM,
    GREETING,
    IDLE,
    LOAD_CONTEXT,
    READ_DATA,
    STOP,
    STOPPED,
    STREAMING,
    SUMMARIZE_INTENT,
    USER_INPUT,
    ConversationActors,
    ConversationStateMachine,
    resolve_transition,
)

HISTORY = [{"id": "m0", "role": "user", "parts": [{"type": "text", "text": "earlier"}]}]


def _user(text: str) -> dict:
    return {"id": "u1", "role": "user", "parts": [{"type": "text", "text": text}]}


async def _chunks(*parts: str):
    for part in parts:
        yield part


class RecordingPersistence:
    def __init__(self, snapshot: AgentStateSnapshot | None = None) -> None:
        self.snapshot = snapshot
        self.phases: list[str] = []

    async def persist_state(self, conversation_id: str, snapshot: AgentStateSnapshot) -> None:
        self.phases.append(snapshot.phase)
        self.snapshot = snapshot

    async def load_persisted_state(self, conversation_id: str) -> AgentStateSnapshot | None:
        return self.snapshot


def make_actors(intent: str = "greeting", calls: list | None = None) -> ConversationActors:
    calls = calls if calls is not None else []

    async def load_context(conversation_id):
        return list(HISTORY)

    async def detect_intent(text):
        calls.append(("detect_intent", text))
        return {"intent": intent, "complexity": "simple"}

    async def greeting(text):
        calls.append(("greeting", text))
        return _chunks("Hello!")

    async def summarize_intent(text, detected, previous):
        calls.append(("summarize_intent", text, detected["intent"]))
        return _chunks("Summary")

    async def read_data(text, previous):
        calls.append(("read_data", text, len(previous)))
        return _chunks("3 rows")

    return ConversationActors(
        load_context=load_context,
        detect_intent=detect_intent,
        greeting=greeting,
        summarize_intent=summarize_intent,
        read_data=read_data,
    )


async def _collect(stream) -> str:
    return "".join([chunk async for chunk in stream])


class TestResolveTransition:
    def test_table(self):
        assert resolve_transition(IDLE, USER_INPUT) == DETECT_INTENT
        assert resolve_transition(IDLE, STOP) == STOPPED
        assert resolve_transition(GREETING, USER_INPUT) == DETECT_INTENT
        assert resolve_transition(READ_DATA, STOP) == IDLE
        assert resolve_transition(STREAMING, FINISH_STREAM) == IDLE
        assert resolve_transition(IDLE, FINISH_STREAM) is None
        assert resolve_transition(STOPPED, USER_INPUT) is None


class TestStart:
    @pytest.mark.asyncio
    async def test_loads_context_and_settles_in_idle(self):
        persistence = RecordingPersistence()
        machine = ConversationStateMachine("c1", make_actors(), persistence)

        await machine.start()

        assert machine.phase == IDLE
        assert machine.context.previous_messages == HISTORY
        assert persistence.phases == [LOAD_CONTEXT, IDLE]

    @pytest.mark.asyncio
    async def test_restores_context_but_not_stopped_phase(self):
        snapshot = AgentStateSnapshot(
            conversation_id="c1",
            phase=STOPPED,
            context={"input_message": "last question", "intent": {"intent": "read-data"}},
        )
        machine = ConversationStateMachine("c1", make_actors(), RecordingPersistence(snapshot))

        await machine.start()

        assert machine.phase == IDLE
        assert machine.is_done is False
        assert machine.context.input_message == "last question"
        assert machine.context.intent == {"intent": "read-data"}

    @pytest.mark.asyncio
    async def test_load_context_failure_still_idles(self):
        actors = make_actors()

        async def broken(conversation_id):
            raise RuntimeError("db down")

        actors.load_context = broken
        machine = ConversationStateMachine("c1", actors)

        await machine.start()

        assert machine.phase == IDLE
        assert machine.context.previous_messages == []


class TestRouting:
    @pytest.mark.asyncio
    async def test_greeting_flow(self):
        calls: list = []
        persistence = RecordingPersistence()
        machine = ConversationStateMachine("c1", make_actors("greeting", calls), persistence)
        await machine.start()

        phase = await machine.send(USER_INPUT, [_user("hi there")])

        assert phase == STREAMING
        assert calls == [("detect_intent", "hi there"), ("greeting", "hi there")]
        assert await _collect(machine.context.stream_result) == "Hello!"
        assert persistence.phases[-3:] == [DETECT_INTENT, GREETING, STREAMING]

        assert await machine.send(FINISH_STREAM) == IDLE

    @pytest.mark.asyncio
    async def test_read_data_flow(self):
        calls: list = []
        machine = ConversationStateMachine("c1", make_actors("read-data", calls))
        await machine.start()

        await machine.send(USER_INPUT, [*HISTORY, _user("count rows")])

        assert calls[-1] == ("read_data", "count rows", 2)
        assert await _collect(machine.context.stream_result) == "3 rows"

    @pytest.mark.asyncio
    async def test_other_intent_summarizes(self):
        calls: list = []
        machine = ConversationStateMachine("c1", make_actors("other", calls))
        await machine.start()

        await machine.send(USER_INPUT, [_user("what can you do?")])

        assert calls[-1] == ("summarize_intent", "what can you do?", "other")
        assert machine.context.intent["intent"] == "other"

    @pytest.mark.asyncio
    async def test_new_input_while_streaming_restarts(self):
        calls: list = []
        machine = ConversationStateMachine("c1", make_actors("greeting", calls))
        await machine.start()
        await machine.send(USER_INPUT, [_user("first")])

        await machine.send(USER_INPUT, [_user("second")])

        assert machine.phase == STREAMING
        assert machine.context.input_message == "second"
        assert calls.count(("greeting", "second")) == 1

    @pytest.mark.asyncio
    async def test_finish_stream_ignored_when_idle(self):
        machine = ConversationStateMachine("c1", make_actors())
        await machine.start()

        assert await machine.send(FINISH_STREAM) == IDLE


class TestErrors:
    @pytest.mark.asyncio
    async def test_intent_failure_returns_to_idle(self):
        actors = make_actors()

        async def broken(text):
            raise RuntimeError("classifier down")

        actors.detect_intent = broken
        machine = ConversationStateMachine("c1", actors)
        await machine.start()

        phase = await machine.send(USER_INPUT, [_user("hi")])

        assert phase == IDLE
        assert machine.context.error == "classifier down"
        assert machine.context.stream_result is None

    @pytest.mark.asyncio
    async def test_responder_failure_returns_to_idle(self):
        actors = make_actors("read-data")

        async def broken(text, previous):
            raise ValueError("sheet unreachable")

        actors.read_data = broken
        machine = ConversationStateMachine("c1", actors)
        await machine.start()

        await machine.send(USER_INPUT, [_user("load my sheet")])

        assert machine.phase == IDLE
        assert machine.context.error == "sheet unreachable"

    @pytest.mark.asyncio
    async def test_error_cleared_on_next_input(self):
        machine = ConversationStateMachine("c1", make_actors())
        await machine.start()
        await machine.fail("boom")

        await machine.send(USER_INPUT, [_user("again")])

        assert machine.context.error is None


class TestStop:
    @pytest.mark.asyncio
    async def test_stop_while_running_returns_to_idle(self):
        machine = ConversationStateMachine("c1", make_actors())
        await machine.start()
        await machine.send(USER_INPUT, [_user("hi")])

        assert await machine.send(STOP) == IDLE

    @pytest.mark.asyncio
    async def test_stop_when_idle_is_final(self):
        machine = ConversationStateMachine("c1", make_actors())
        await machine.start()

        await machine.send(STOP)

        assert machine.phase == STOPPED
        assert machine.is_done is True
        assert await machine.send(USER_INPUT, [_user("hello?")]) == STOPPED

    @pytest.mark.asyncio
    async def test_result_of_cancelled_run_is_dropped(self):
        actors = make_actors("greeting")
        machine = ConversationStateMachine("c1", actors)

        async def detect_then_stop(text):
            await machine.send(STOP)
            return {"intent": "greeting", "complexity": "simple"}

        actors.detect_intent = detect_then_stop
        await machine.start()

        await machine.send(USER_INPUT, [_user("hi")])

        assert machine.phase == IDLE
        assert machine.context.stream_result is None
