"""Decide between writing and deleting a concordance record, and forward it."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING, Final

from concordance_transformer.domain.errors import WriterUnavailableError
from concordance_transformer.domain.model import Status

if TYPE_CHECKING:
    from concordance_transformer.domain.model import UppConcordance
    from concordance_transformer.domain.ports import ConcordanceWriter

log = getLogger(__name__)

ACCEPTED_WRITE_STATUSES: Final[frozenset[int]] = frozenset(
    {HTTPStatus.OK, HTTPStatus.CREATED, HTTPStatus.NOT_MODIFIED}
)


class UnexpectedWriterResponseError(RuntimeError):
    """Raised when the concordance writer answers with a status it should not."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class ForwardResult:
    status: Status
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def forward_concordance(
    writer: ConcordanceWriter,
    concept_uuid: str,
    concordance: UppConcordance,
    *,
    transaction_id: str = "",
) -> ForwardResult:
    """Write the record when it has concordances, otherwise delete the branch.

    Exactly one call is made to ``writer``.
    """

    context = {"transaction_id": transaction_id, "uuid": concept_uuid}
    if concordance.has_concordances:
        log.info(
            "Concordance record is: %s; forwarding request to writer", concordance, extra=context
        )
        return _write(writer, concept_uuid, concordance, transaction_id=transaction_id)
    log.debug("No concordance found; making delete request", extra=context)
    return _delete(writer, concept_uuid, transaction_id=transaction_id)


def _write(
    writer: ConcordanceWriter,
    concept_uuid: str,
    concordance: UppConcordance,
    *,
    transaction_id: str,
) -> ForwardResult:
    context = {"transaction_id": transaction_id, "uuid": concept_uuid}
    try:
        body = concordance.to_json()
    except (TypeError, ValueError) as exc:
        log.exception("Bad Request: Could not marshal concordance json", extra=context)
        return ForwardResult(status=Status.SYNTACTICALLY_INCORRECT, error=exc)

    try:
        status_code = writer.put_concordance(concept_uuid, body, transaction_id=transaction_id)
    except WriterUnavailableError as exc:
        log.exception("Service Unavailable: Put request to writer resulted in error", extra=context)
        return ForwardResult(status=Status.SERVICE_UNAVAILABLE, error=exc)

    if status_code not in ACCEPTED_WRITE_STATUSES:
        error = UnexpectedWriterResponseError(
            f"Internal Error: Put request to writer returned unexpected status: {status_code}",
            status_code=status_code,
        )
        log.error("%s", error, extra={**context, "status": status_code})
        return ForwardResult(status=Status.INTERNAL_ERROR, error=error)

    return ForwardResult(status=Status.VALID_CONCEPT)


def _delete(writer: ConcordanceWriter, concept_uuid: str, *, transaction_id: str) -> ForwardResult:
    context = {"transaction_id": transaction_id, "uuid": concept_uuid}
    try:
        status_code = writer.delete_concordance(concept_uuid, transaction_id=transaction_id)
    except WriterUnavailableError as exc:
        log.exception(
            "Service Unavailable: Delete request to writer resulted in error", extra=context
        )
        return ForwardResult(status=Status.SERVICE_UNAVAILABLE, error=exc)

    if status_code == HTTPStatus.NO_CONTENT:
        return ForwardResult(status=Status.NO_CONTENT)
    if status_code == HTTPStatus.NOT_FOUND:
        return ForwardResult(status=Status.NOT_FOUND)

    error = UnexpectedWriterResponseError(
        f"Internal Error: Delete request to writer returned unexpected status: {status_code}",
        status_code=status_code,
    )
    log.error("%s", error, extra={**context, "status": status_code})
    return ForwardResult(status=Status.INTERNAL_ERROR, error=error)
