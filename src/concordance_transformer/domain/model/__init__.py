"""Domain model for concept concordances."""

from __future__ import annotations

from .concept import (
    MANAGED_LOCATION_MARKER,
    Concept,
    ConceptPayload,
    IdentifierBundle,
    bundle_kind_for,
)
from .concordance import ConcordedID, UppConcordance
from .enums import AUTHORITY_ORDER, LOCATION_AUTHORITIES, Authority, BundleKind, SourceAuthority
from .status import Status, http_status_for, is_success, log_level_for

__all__ = [
    "AUTHORITY_ORDER",
    "LOCATION_AUTHORITIES",
    "MANAGED_LOCATION_MARKER",
    "Authority",
    "BundleKind",
    "Concept",
    "ConceptPayload",
    "ConcordedID",
    "IdentifierBundle",
    "SourceAuthority",
    "Status",
    "UppConcordance",
    "bundle_kind_for",
    "http_status_for",
    "is_success",
    "log_level_for",
]
