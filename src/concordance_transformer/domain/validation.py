"""Shape and eligibility checks for a decoded concept payload."""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import Final

from concordance_transformer.domain.errors import (
    ConceptTypeNotAllowedError,
    ConceptValidationError,
)
from concordance_transformer.domain.model import (
    Concept,
    ConceptPayload,
    SourceAuthority,
    Status,
)

log = getLogger(__name__)

THING_URI_PREFIX: Final[str] = "http://www.ft.com/thing/"
LOCATION_URI_PREFIX: Final[str] = "http://www.ft.com/ontology/managedlocation/"

UUID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)

_URI_PREFIX_AUTHORITIES: Final[tuple[tuple[str, SourceAuthority], ...]] = (
    (THING_URI_PREFIX, SourceAuthority.SMARTLOGIC),
    (LOCATION_URI_PREFIX, SourceAuthority.MANAGED_LOCATION),
)

NOT_ALLOWED_CONCEPT_TYPES: Final[frozenset[str]] = frozenset({"skos:Concept"})
NON_CONCORDABLE_SHORT_TYPES: Final[frozenset[str]] = frozenset({"Membership", "MembershipRole"})

ALERT_TAG_CONCEPT_TYPE_NOT_ALLOWED: Final[str] = (
    "SmartlogicConcordanceTransformerConceptTypeNotAllowed"
)


@dataclass(frozen=True, slots=True)
class ValidatedConcept:
    concept: Concept
    concept_uuid: str
    authority: SourceAuthority


def extract_uuid_and_authority(uri: str) -> tuple[str, SourceAuthority] | None:
    """Split a concept URI into its UUID and the authority implied by the prefix."""

    for prefix, authority in _URI_PREFIX_AUTHORITIES:
        if not uri.startswith(prefix):
            continue
        candidate = uri.removeprefix(prefix)
        if UUID_PATTERN.fullmatch(candidate) is None:
            return None
        return candidate, authority
    return None


def short_type(concept_type: str) -> str:
    return concept_type.rsplit("/", 1)[-1]


def validate_concept(payload: ConceptPayload, *, transaction_id: str = "") -> ValidatedConcept:
    """Return the single concept of ``payload`` once it passes every eligibility rule.

    Raises ``ConceptValidationError`` with the outcome classification otherwise.
    """

    if not payload.concepts:
        raise _rejected(
            "invalid Request Json: Missing/invalid @graph field",
            Status.SEMANTICALLY_INCORRECT,
            transaction_id=transaction_id,
        )
    if len(payload.concepts) > 1:
        raise _rejected(
            "invalid Request Json: More than 1 concept in smartlogic concept payload "
            "which is currently not supported",
            Status.SEMANTICALLY_INCORRECT,
            transaction_id=transaction_id,
        )

    concept = payload.concepts[0]
    extracted = extract_uuid_and_authority(concept.id)
    if extracted is None:
        raise _rejected(
            "invalid Request Json: Missing/invalid @id field",
            Status.SEMANTICALLY_INCORRECT,
            transaction_id=transaction_id,
        )
    concept_uuid, authority = extracted

    concept_type = concept.primary_type
    if concept_type is None:
        raise _rejected(
            f"bad Request: Type has not been set for concept: {concept_uuid}",
            Status.SYNTACTICALLY_INCORRECT,
            transaction_id=transaction_id,
            concept_uuid=concept_uuid,
        )

    if concept_type in NOT_ALLOWED_CONCEPT_TYPES:
        error = ConceptTypeNotAllowedError(
            concept_uuid=concept_uuid,
            alert_tag=ALERT_TAG_CONCEPT_TYPE_NOT_ALLOWED,
        )
        log.error(
            "%s",
            error,
            extra={
                "transaction_id": transaction_id,
                "uuid": concept_uuid,
                "concept_type": concept_type,
                "alert_tag": ALERT_TAG_CONCEPT_TYPE_NOT_ALLOWED,
            },
        )
        raise error

    short_form = short_type(concept_type)
    if short_form in NON_CONCORDABLE_SHORT_TYPES and concept.identifiers.tme:
        raise _rejected(
            f"bad Request: Concept type {short_form} does not support concordance",
            Status.SYNTACTICALLY_INCORRECT,
            transaction_id=transaction_id,
            concept_uuid=concept_uuid,
        )

    return ValidatedConcept(concept=concept, concept_uuid=concept_uuid, authority=authority)


def _rejected(
    message: str,
    status: Status,
    *,
    transaction_id: str,
    concept_uuid: str = "",
) -> ConceptValidationError:
    log.error(message, extra={"transaction_id": transaction_id, "uuid": concept_uuid})
    return ConceptValidationError(message, status=status, concept_uuid=concept_uuid)
