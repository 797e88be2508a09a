from qwery.domain.ports.agent.agent_side_effects import AgentSideEffectsPort

__all__ = ["AgentSideEffectsPort"]
