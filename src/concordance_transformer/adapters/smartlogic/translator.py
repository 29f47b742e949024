"""Translate JSON-LD concept exports into domain concepts."""

from __future__ import annotations

from logging import getLogger

from pydantic import ValidationError

from concordance_transformer.domain.errors import PayloadDecodeError
from concordance_transformer.domain.model import Concept, ConceptPayload, Status

from .schema import ConceptGraph, ConceptNode

log = getLogger(__name__)


def parse_concept(node: ConceptNode) -> Concept:
    return Concept(
        id=node.id,
        types=tuple(node.types),
        identifiers=node.identifiers.to_bundle(),
    )


def decode_concept_payload(body: str | bytes, *, transaction_id: str = "") -> ConceptPayload:
    """Decode a message body into a :class:`ConceptPayload`.

    Raises ``PayloadDecodeError`` when the body is not JSON or does not have the
    shape of a concept export. Unknown fields are ignored.
    """

    try:
        graph = ConceptGraph.model_validate_json(body)
    except ValidationError as exc:
        log.error(
            "Failed to decode concept payload",
            extra={"transaction_id": transaction_id},
            exc_info=exc,
        )
        errors = exc.errors()
        detail = errors[0]["msg"] if errors else str(exc)
        raise PayloadDecodeError(
            f"invalid Request Json: {detail}",
            status=Status.SYNTACTICALLY_INCORRECT,
        ) from exc
    return ConceptPayload(concepts=tuple(parse_concept(node) for node in graph.concepts))
