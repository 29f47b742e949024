"""Ports implemented by adapters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConcordanceWriter(Protocol):
    """Downstream store for concordance records, addressed per concept branch.

    Both methods return the HTTP status code of the writer's response and raise
    ``WriterUnavailableError`` when the writer cannot be reached.
    """

    def put_concordance(self, concept_uuid: str, body: bytes, *, transaction_id: str) -> int: ...

    def delete_concordance(self, concept_uuid: str, *, transaction_id: str) -> int: ...


__all__ = ["ConcordanceWriter"]
