"""Boundary Protocols: contract between the handlers and the store.

Invariants:
    - Handlers depend on QueryExecutor, never on a concrete engine
    - One call is one statement and one round trip

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can pass any object with execute()
"""

from typing import Any, Mapping, Protocol


class QueryExecutor(Protocol):
    """Executes one parameterized statement and returns its rows as dicts."""
    async def execute(
        self, statement: str, parameters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]: ...
