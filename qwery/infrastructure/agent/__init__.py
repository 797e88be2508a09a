"""Conversational agent: state machine, actors and workspace data tools."""
