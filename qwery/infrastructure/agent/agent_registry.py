"""
Registry of live conversational agents, one per conversation slug.

Concurrent requests for the same slug share a single creation task. A
background loop stops and evicts agents that have been idle too long.
"""

import asyncio
import contextlib
import logging
import time
from collections.abc import Awaitable, Callable

from qwery.infrastructure.agent.factory_agent import FactoryAgent

logger = logging.getLogger(__name__)

AgentBuilder = Callable[[str], Awaitable[FactoryAgent]]

DEFAULT_INACTIVITY_TIMEOUT = 30 * 60
DEFAULT_CLEANUP_INTERVAL = 5 * 60


class AgentRegistry:
    def __init__(
        self,
        builder: AgentBuilder,
        inactivity_timeout: float = DEFAULT_INACTIVITY_TIMEOUT,
        cleanup_interval: float = DEFAULT_CLEANUP_INTERVAL,
    ) -> None:
        self._builder = builder
        self.inactivity_timeout = inactivity_timeout
        self.cleanup_interval = cleanup_interval
        self._agents: dict[str, FactoryAgent] = {}
        self._pending: dict[str, asyncio.Task[FactoryAgent]] = {}
        self._last_access: dict[str, float] = {}
        self._lock = asyncio.Lock()
        self._cleanup_task: asyncio.Task[None] | None = None
        self._running = False

    def __len__(self) -> int:
        return len(self._agents)

    def __contains__(self, slug: str) -> bool:
        return slug in self._agents

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._cleanup_task = asyncio.create_task(self._cleanup_loop())
        logger.info("[AgentRegistry] Started")

    async def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._cleanup_task:
            self._cleanup_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._cleanup_task
            self._cleanup_task = None

        async with self._lock:
            agents = list(self._agents.items())
            self._agents.clear()
            self._last_access.clear()
        for slug, agent in agents:
            await self._stop_agent(slug, agent)
        logger.info("[AgentRegistry] Stopped")

    async def get_or_create(self, slug: str) -> FactoryAgent:
        async with self._lock:
            agent = self._agents.get(slug)
            if agent is not None and not agent.machine.is_done:
                self._last_access[slug] = time.monotonic()
                return agent
            task = self._pending.get(slug)
            if task is None:
                task = asyncio.create_task(self._builder(slug))
                self._pending[slug] = task

        try:
            agent = await task
        finally:
            async with self._lock:
                if self._pending.get(slug) is task:
                    del self._pending[slug]

        async with self._lock:
            self._agents[slug] = agent
            self._last_access[slug] = time.monotonic()
        return agent

    async def remove(self, slug: str) -> bool:
        async with self._lock:
            agent = self._agents.pop(slug, None)
            self._last_access.pop(slug, None)
        if agent is None:
            return False
        await self._stop_agent(slug, agent)
        return True

    async def cleanup_inactive(self, now: float | None = None) -> list[str]:
        """Stop and evict agents idle longer than ``inactivity_timeout``."""
        now = time.monotonic() if now is None else now
        async with self._lock:
            expired = [
                slug
                for slug, accessed in self._last_access.items()
                if now - accessed > self.inactivity_timeout
            ]
            agents = [(slug, self._agents.pop(slug)) for slug in expired if slug in self._agents]
            for slug in expired:
                self._last_access.pop(slug, None)
        for slug, agent in agents:
            logger.info(f"[AgentRegistry] Cleaning up inactive agent: {slug}")
            await self._stop_agent(slug, agent)
        return expired

    async def _stop_agent(self, slug: str, agent: FactoryAgent) -> None:
        try:
            await agent.stop()
        except Exception as e:
            logger.warning(f"[AgentRegistry] Error stopping agent {slug}: {e}")

    async def _cleanup_loop(self) -> None:
        while self._running:
            try:
                await asyncio.sleep(self.cleanup_interval)
                await self.cleanup_inactive()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"[AgentRegistry] Cleanup error: {e}")
