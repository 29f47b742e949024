"""Convert a decoded concept payload into a concordance record."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from concordance_transformer.domain.assembly import assemble_concordances
from concordance_transformer.domain.errors import ConcordanceError
from concordance_transformer.domain.model import Status, UppConcordance
from concordance_transformer.domain.validation import validate_concept

if TYPE_CHECKING:
    from concordance_transformer.domain.model import ConceptPayload

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a conversion; ``concordance`` is set only for valid concepts."""

    status: Status
    concept_uuid: str = ""
    concordance: UppConcordance | None = None
    error: ConcordanceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_upp_concordance(payload: ConceptPayload, *, transaction_id: str = "") -> UppConcordance:
    """Validate ``payload`` and assemble its record; raises ``ConcordanceError``."""

    validated = validate_concept(payload, transaction_id=transaction_id)
    concordances = assemble_concordances(
        validated.concept,
        validated.concept_uuid,
        transaction_id=transaction_id,
    )
    concordance = UppConcordance(
        authority=validated.authority,
        concept_uuid=validated.concept_uuid,
        concordances=concordances,
    )
    log.debug(
        "Concordance record is %s",
        concordance,
        extra={"transaction_id": transaction_id, "uuid": validated.concept_uuid},
    )
    return concordance


def convert_to_upp_concordance(
    payload: ConceptPayload,
    *,
    transaction_id: str = "",
) -> ConversionResult:
    try:
        concordance = build_upp_concordance(payload, transaction_id=transaction_id)
    except ConcordanceError as exc:
        return ConversionResult(status=exc.status, concept_uuid=exc.concept_uuid, error=exc)
    return ConversionResult(
        status=Status.VALID_CONCEPT,
        concept_uuid=concordance.concept_uuid,
        concordance=concordance,
    )
