"""Build the ordered concordance list for a validated concept.

Authorities are processed in a fixed order: TME, FACTSET, then the location
authorities (DBPedia, Geonames, Wikidata). A derived UUID that equals the
concept's own UUID always aborts the conversion. Duplicates are handled
asymmetrically: TME and FACTSET duplicates are errors, location duplicates are
dropped with a warning.
"""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Final

from concordance_transformer.domain.errors import (
    ConcordanceAssemblyError,
    InvalidIdentifierError,
)
from concordance_transformer.domain.identifiers import (
    derive_factset_uuid,
    derive_location_uuid,
    derive_tme_uuid,
)
from concordance_transformer.domain.model import (
    LOCATION_AUTHORITIES,
    Authority,
    ConcordedID,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from concordance_transformer.domain.model import Concept

log = getLogger(__name__)

ALERT_TAG_INVALID_CONCORDANCE: Final[str] = "ConceptLoadingInvalidConcordance"

_STRICT_DERIVERS: Final[dict[Authority, Callable[[str], str]]] = {
    Authority.TME: derive_tme_uuid,
    Authority.FACTSET: derive_factset_uuid,
}


def assemble_concordances(
    concept: Concept,
    concept_uuid: str,
    *,
    transaction_id: str = "",
) -> tuple[ConcordedID, ...]:
    concordances: list[ConcordedID] = []
    for authority, derive in _STRICT_DERIVERS.items():
        _append_strict(
            concordances,
            concept.identifiers.values_for(authority),
            authority=authority,
            derive=derive,
            concept_uuid=concept_uuid,
            transaction_id=transaction_id,
        )
    for authority in LOCATION_AUTHORITIES:
        _append_locations(
            concordances,
            concept.identifiers.values_for(authority),
            authority=authority,
            concept_uuid=concept_uuid,
            transaction_id=transaction_id,
        )
    return tuple(concordances)


def _append_strict(
    concordances: list[ConcordedID],
    values: Iterable[str],
    *,
    authority: Authority,
    derive: Callable[[str], str],
    concept_uuid: str,
    transaction_id: str,
) -> None:
    context = {"transaction_id": transaction_id, "uuid": concept_uuid}
    for value in values:
        try:
            derived = derive(value)
        except InvalidIdentifierError as exc:
            log.error(  # noqa: TRY400
                "%s", exc, extra={**context, "alert_tag": ALERT_TAG_INVALID_CONCORDANCE}
            )
            raise ConcordanceAssemblyError(str(exc), concept_uuid=concept_uuid) from exc

        if derived == concept_uuid:
            raise _self_reference(authority, concept_uuid, context)
        if _contains_uuid(concordances, derived):
            message = f"bad Request: Payload from smartlogic contains duplicate {authority} id values"
            log.error(message, extra=context)
            raise ConcordanceAssemblyError(message, concept_uuid=concept_uuid)

        concordances.append(ConcordedID(authority=authority, authority_value=value, uuid=derived))


def _append_locations(
    concordances: list[ConcordedID],
    values: Iterable[str],
    *,
    authority: Authority,
    concept_uuid: str,
    transaction_id: str,
) -> None:
    context = {"transaction_id": transaction_id, "uuid": concept_uuid}
    for value in values:
        derived = derive_location_uuid(value)
        if derived is None:
            log.warning(
                "Payload from Smartlogic contains one or more empty %s values. Skipping it",
                authority,
                extra=context,
            )
            continue
        if derived == concept_uuid:
            raise _self_reference(authority, concept_uuid, context)
        if _contains_uuid(concordances, derived):
            log.warning(
                "Payload from Smartlogic contains duplicate %s values. Skipping it",
                authority,
                extra=context,
            )
            continue

        concordances.append(ConcordedID(authority=authority, authority_value=value, uuid=derived))


def _contains_uuid(concordances: Iterable[ConcordedID], uuid: str) -> bool:
    return any(concorded.uuid == uuid for concorded in concordances)


def _self_reference(
    authority: Authority,
    concept_uuid: str,
    context: dict[str, str],
) -> ConcordanceAssemblyError:
    message = (
        "bad Request: Payload from smartlogic has a smartlogic uuid that is the same "
        f"as the uuid generated from the {authority} id"
    )
    log.error(message, extra=context)
    return ConcordanceAssemblyError(message, concept_uuid=concept_uuid)
