"""Tests for the live agent registry."""

import asyncio
import time
from unittest.mock import AsyncMock, MagicMock

import pytest

from qwery.infrastructure.agent.agent_registry import AgentRegistry


def fake_agent(done: bool = False) -> MagicMock:
    agent = MagicMock()
    agent.machine.is_done = done
    agent.stop = AsyncMock()
    return agent


def counting_builder():
    built: list[str] = []

    async def build(slug: str):
        built.append(slug)
        await asyncio.sleep(0)
        return fake_agent()

    return build, built


class TestGetOrCreate:
    @pytest.mark.asyncio
    async def test_concurrent_requests_share_creation(self):
        build, built = counting_builder()
        registry = AgentRegistry(build)

        first, second = await asyncio.gather(
            registry.get_or_create("abc12345"), registry.get_or_create("abc12345")
        )

        assert first is second
        assert built == ["abc12345"]
        assert "abc12345" in registry
        assert len(registry) == 1

    @pytest.mark.asyncio
    async def test_existing_agent_is_reused(self):
        build, built = counting_builder()
        registry = AgentRegistry(build)

        agent = await registry.get_or_create("abc12345")

        assert await registry.get_or_create("abc12345") is agent
        assert built == ["abc12345"]

    @pytest.mark.asyncio
    async def test_finished_agent_is_replaced(self):
        build, built = counting_builder()
        registry = AgentRegistry(build)
        agent = await registry.get_or_create("abc12345")
        agent.machine.is_done = True

        replacement = await registry.get_or_create("abc12345")

        assert replacement is not agent
        assert len(built) == 2

    @pytest.mark.asyncio
    async def test_builder_error_propagates(self):
        async def failing(slug):
            raise RuntimeError("not found")

        registry = AgentRegistry(failing)

        with pytest.raises(RuntimeError):
            await registry.get_or_create("abc12345")
        assert len(registry) == 0


class TestCleanup:
    @pytest.mark.asyncio
    async def test_inactive_agents_are_stopped_and_evicted(self):
        build, _ = counting_builder()
        registry = AgentRegistry(build, inactivity_timeout=60)
        agent = await registry.get_or_create("abc12345")

        assert await registry.cleanup_inactive(time.monotonic()) == []
        expired = await registry.cleanup_inactive(time.monotonic() + 61)

        assert expired == ["abc12345"]
        agent.stop.assert_awaited_once()
        assert "abc12345" not in registry

    @pytest.mark.asyncio
    async def test_stop_errors_are_logged(self):
        registry = AgentRegistry(counting_builder()[0], inactivity_timeout=0)
        agent = await registry.get_or_create("abc12345")
        agent.stop.side_effect = RuntimeError("boom")

        await registry.cleanup_inactive(time.monotonic() + 1)

        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_remove(self):
        registry = AgentRegistry(counting_builder()[0])
        agent = await registry.get_or_create("abc12345")

        assert await registry.remove("abc12345") is True
        assert await registry.remove("abc12345") is False
        agent.stop.assert_awaited_once()


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_stop_stops_every_agent(self):
        registry = AgentRegistry(counting_builder()[0], cleanup_interval=3600)
        await registry.start()
        first = await registry.get_or_create("aaaa1111")
        second = await registry.get_or_create("bbbb2222")

        await registry.stop()

        first.stop.assert_awaited_once()
        second.stop.assert_awaited_once()
        assert len(registry) == 0
