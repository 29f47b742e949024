"""Validation of external identifiers and their deterministic UUIDs.

Identifiers are content-addressed: the same raw value always derives the same
UUID, so re-processing a payload yields the same concordance record.
"""

from __future__ import annotations

import hashlib
from uuid import UUID

from concordance_transformer.domain.errors import InvalidIdentifierError
from concordance_transformer.domain.model.enums import Authority

FACTSET_ID_LENGTH = 8
FACTSET_ID_PREFIX = "0"
FACTSET_ID_SUFFIX = "-E"
TME_ID_SEPARATOR = "-"


def name_based_uuid(name: str | bytes) -> str:
    """Return the version-3 UUID of ``name`` hashed without a namespace."""

    data = name.encode("utf-8") if isinstance(name, str) else name
    digest = hashlib.md5(data, usedforsecurity=False).digest()
    return str(UUID(bytes=digest, version=3))


def is_valid_tme_id(tme_id: str) -> bool:
    parts = tme_id.split(TME_ID_SEPARATOR)
    return len(parts) == 2 and all(parts)


def derive_tme_uuid(tme_id: str) -> str:
    if not is_valid_tme_id(tme_id):
        raise InvalidIdentifierError(
            f"Bad Request: Concordance id {tme_id} is not a valid {Authority.TME} Id"
        )
    return name_based_uuid(tme_id)


def is_valid_factset_id(factset_id: str) -> bool:
    return (
        len(factset_id) == FACTSET_ID_LENGTH
        and factset_id.startswith(FACTSET_ID_PREFIX)
        and factset_id.endswith(FACTSET_ID_SUFFIX)
    )


def derive_factset_uuid(factset_id: str) -> str:
    if not is_valid_factset_id(factset_id):
        raise InvalidIdentifierError(
            f"Bad Request: Concordance id {factset_id} is not a valid {Authority.FACTSET} Id"
        )
    # FACTSET UUIDs hash the MD5 digest of the id, not the id itself.
    first_pass = hashlib.md5(factset_id.encode("utf-8"), usedforsecurity=False).digest()
    return name_based_uuid(first_pass)


def derive_location_uuid(value: str) -> str | None:
    """Return the UUID for a location identifier, or None for blank values."""

    if not value.strip():
        return None
    return name_based_uuid(value)
