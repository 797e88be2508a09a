"""
Conversational agent state machine.

Phases::

    load_context -> idle
    idle --USER_INPUT--> running.detect_intent
    running.detect_intent -> running.greeting | running.read_data | running.summarize_intent
    running.<actor> -> running.streaming --FINISH_STREAM--> idle
    running.* --USER_INPUT--> running.detect_intent
    running.* --STOP--> idle
    idle --STOP--> stopped (final)

Actor failures move the machine back to ``idle`` with ``error`` set. Each
phase change is persisted as an ``AgentStateSnapshot``.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.infrastructure.agent.actors import DEFAULT_INTENT
from qwery.infrastructure.agent.ui_messages import UIMessage, last_input_text

logger = logging.getLogger(__name__)

LOAD_CONTEXT = "load_context"
IDLE = "idle"
STOPPED = "stopped"
RUNNING = "running"
DETECT_INTENT = "running.detect_intent"
SUMMARIZE_INTENT = "running.summarize_intent"
GREETING = "running.greeting"
READ_DATA = "running.read_data"
STREAMING = "running.streaming"

USER_INPUT = "USER_INPUT"
STOP = "STOP"
FINISH_STREAM = "FINISH_STREAM"

TERMINAL_PHASES = {STOPPED}

# Keys are (phase, event); "running" matches every running.* phase.
TRANSITIONS: dict[tuple[str, str], str] = {
    (IDLE, USER_INPUT): DETECT_INTENT,
    (IDLE, STOP): STOPPED,
    (RUNNING, USER_INPUT): DETECT_INTENT,
    (RUNNING, STOP): IDLE,
    (STREAMING, FINISH_STREAM): IDLE,
}

INTENT_PHASES = {
    "greeting": GREETING,
    "read-data": READ_DATA,
    "other": SUMMARIZE_INTENT,
}


def is_running(phase: str) -> bool:
    return phase.startswith(f"{RUNNING}.")


def resolve_transition(phase: str, event: str) -> str | None:
    target = TRANSITIONS.get((phase, event))
    if target is None and is_running(phase):
        target = TRANSITIONS.get((RUNNING, event))
    return target


class StatePersistence(Protocol):
    async def persist_state(self, conversation_id: str, snapshot: AgentStateSnapshot) -> None: ...

    async def load_persisted_state(self, conversation_id: str) -> AgentStateSnapshot | None: ...


StreamResult = AsyncIterator[str]


@dataclass
class ConversationActors:
    load_context: Callable[[str], Awaitable[list[UIMessage]]]
    detect_intent: Callable[[str], Awaitable[dict[str, str]]]
    greeting: Callable[[str], Awaitable[StreamResult]]
    summarize_intent: Callable[[str, dict[str, str], list[UIMessage]], Awaitable[StreamResult]]
    read_data: Callable[[str, list[UIMessage]], Awaitable[StreamResult]]


@dataclass
class AgentContext:
    conversation_id: str
    input_message: str = ""
    previous_messages: list[UIMessage] = field(default_factory=list)
    stream_result: StreamResult | None = None
    intent: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_INTENT))
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "conversation_id": self.conversation_id,
            "input_message": self.input_message,
            "previous_messages": self.previous_messages,
            "intent": self.intent,
            "error": self.error,
        }

    def restore(self, data: dict[str, Any]) -> None:
        self.input_message = data.get("input_message") or ""
        self.previous_messages = list(data.get("previous_messages") or [])
        self.intent = dict(data.get("intent") or DEFAULT_INTENT)
        self.error = data.get("error")


class ConversationStateMachine:
    def __init__(
        self,
        conversation_id: str,
        actors: ConversationActors,
        persistence: StatePersistence | None = None,
    ) -> None:
        self.conversation_id = conversation_id
        self.context = AgentContext(conversation_id=conversation_id)
        self.phase = LOAD_CONTEXT
        self._actors = actors
        self._persistence = persistence
        # Bumped on every event; actor results from an older run are dropped.
        self._run_id = 0

    @property
    def is_done(self) -> bool:
        return self.phase in TERMINAL_PHASES

    async def _set_phase(self, phase: str) -> None:
        logger.debug(f"[FactoryAgent:{self.conversation_id}] {self.phase} -> {phase}")
        self.phase = phase
        if self._persistence is not None:
            await self._persistence.persist_state(
                self.conversation_id,
                AgentStateSnapshot(
                    conversation_id=self.conversation_id,
                    phase=phase,
                    context=self.context.to_dict(),
                ),
            )

    async def start(self) -> None:
        """
        Restore the persisted context, then load the conversation history.

        A new machine always settles in ``idle``: a snapshot left ``stopped``
        by an evicted agent or ``running.*`` by a crash is not resumed.
        """
        if self._persistence is not None:
            snapshot = await self._persistence.load_persisted_state(self.conversation_id)
            if snapshot is not None:
                logger.debug(
                    f"[FactoryAgent:{self.conversation_id}] restoring snapshot from {snapshot.phase}"
                )
                self.context.restore(snapshot.context)

        await self._set_phase(LOAD_CONTEXT)
        try:
            self.context.previous_messages = await self._actors.load_context(self.conversation_id)
        except Exception as e:
            logger.warning(f"[FactoryAgent:{self.conversation_id}] loadContext failed: {e}")
        await self._set_phase(IDLE)

    async def send(self, event: str, messages: list[UIMessage] | None = None) -> str:
        target = resolve_transition(self.phase, event)
        if target is None:
            logger.debug(f"[FactoryAgent:{self.conversation_id}] ignored {event} in {self.phase}")
            return self.phase

        self._run_id += 1
        if event == USER_INPUT:
            self.context.previous_messages = list(messages or [])
            self.context.input_message = last_input_text(self.context.previous_messages)
            self.context.stream_result = None
            self.context.error = None

        await self._set_phase(target)
        if target == DETECT_INTENT:
            await self._run_detect_intent(self._run_id)
        return self.phase

    async def fail(self, error: Exception | str) -> None:
        message = str(error)
        logger.error(f"[FactoryAgent:{self.conversation_id}] {self.phase} error: {message}")
        self._run_id += 1
        self.context.error = message
        self.context.stream_result = None
        await self._set_phase(IDLE)

    async def _run_detect_intent(self, run_id: int) -> None:
        try:
            intent = await self._actors.detect_intent(self.context.input_message)
        except Exception as e:
            if run_id == self._run_id:
                await self.fail(e)
            return
        if run_id != self._run_id:
            return
        self.context.intent = intent
        target = INTENT_PHASES.get(intent.get("intent", "other"), SUMMARIZE_INTENT)
        await self._set_phase(target)
        await self._run_responder(target, run_id)

    async def _run_responder(self, phase: str, run_id: int) -> None:
        ctx = self.context
        try:
            if phase == GREETING:
                stream = await self._actors.greeting(ctx.input_message)
            elif phase == READ_DATA:
                stream = await self._actors.read_data(ctx.input_message, ctx.previous_messages)
            else:
                stream = await self._actors.summarize_intent(
                    ctx.input_message, ctx.intent, ctx.previous_messages
                )
        except Exception as e:
            if run_id == self._run_id:
                await self.fail(e)
            return
        if run_id != self._run_id:
            return
        ctx.stream_result = stream
        await self._set_phase(STREAMING)
