"""Public interface for the taxonomy export adapter."""

from __future__ import annotations

from .schema import (
    ConceptGraph,
    ConceptNode,
    EditorialIdentifiers,
    ManagedLocationIdentifiers,
)
from .translator import decode_concept_payload, parse_concept

__all__ = [
    "ConceptGraph",
    "ConceptNode",
    "EditorialIdentifiers",
    "ManagedLocationIdentifiers",
    "decode_concept_payload",
    "parse_concept",
]
