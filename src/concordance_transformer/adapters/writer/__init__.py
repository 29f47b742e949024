"""Public interface for the concordance writer adapter."""

from __future__ import annotations

from .client import REQUEST_ID_HEADER, ConcordanceWriterClient, branch_path

__all__ = ["REQUEST_ID_HEADER", "ConcordanceWriterClient", "branch_path"]
