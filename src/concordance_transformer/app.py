"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from concordance_transformer.adapters.messages import parse_ft_message, transaction_id_for
from concordance_transformer.adapters.smartlogic import decode_concept_payload
from concordance_transformer.adapters.writer import ConcordanceWriterClient
from concordance_transformer.config import get_writer_config
from concordance_transformer.domain import (
    ConcordanceError,
    convert_to_upp_concordance,
    forward_concordance,
)
from concordance_transformer.domain.model import (
    Status,
    UppConcordance,
    http_status_for,
    is_success,
    log_level_for,
)

if TYPE_CHECKING:
    from http import HTTPStatus

    from concordance_transformer.config import WriterConfig
    from concordance_transformer.domain.ports import ConcordanceWriter

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EventOutcome:
    """Final classification of one inbound payload."""

    status: Status
    concept_uuid: str = ""
    concordance: UppConcordance | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and is_success(self.status)

    @property
    def http_status(self) -> HTTPStatus:
        return http_status_for(self.status)


def build_writer_client(config: WriterConfig | None = None) -> ConcordanceWriterClient:
    return ConcordanceWriterClient(config or get_writer_config())


def transform_concordance(body: str | bytes, transaction_id: str = "") -> EventOutcome:
    """Decode and convert ``body`` without contacting the writer."""

    try:
        payload = decode_concept_payload(body, transaction_id=transaction_id)
    except ConcordanceError as exc:
        return EventOutcome(status=exc.status, error=exc)

    result = convert_to_upp_concordance(payload, transaction_id=transaction_id)
    return EventOutcome(
        status=result.status,
        concept_uuid=result.concept_uuid,
        concordance=result.concordance,
        error=result.error,
    )


def handle_concordance_event(
    body: str | bytes,
    transaction_id: str,
    *,
    writer: ConcordanceWriter,
) -> EventOutcome:
    """Decode, convert and forward one concept payload.

    Every failure is reported through the returned outcome; nothing is raised for
    a bad payload or an unreachable writer.
    """

    log.debug(f"Processing message with body: {body!r}", extra={"transaction_id": transaction_id})
    outcome = transform_concordance(body, transaction_id)
    if outcome.concordance is None:
        _log_outcome(outcome, transaction_id)
        return outcome

    forwarded = forward_concordance(
        writer,
        outcome.concept_uuid,
        outcome.concordance,
        transaction_id=transaction_id,
    )
    outcome = EventOutcome(
        status=forwarded.status,
        concept_uuid=outcome.concept_uuid,
        concordance=outcome.concordance,
        error=forwarded.error,
    )
    _log_outcome(outcome, transaction_id)
    return outcome


def process_message(
    raw: str | bytes,
    *,
    writer: ConcordanceWriter,
    transaction_id: str | None = None,
) -> EventOutcome:
    """Handle a raw FT message envelope, using its request id as transaction id.

    ``transaction_id`` is only used when the envelope has no request id.
    """

    message = parse_ft_message(raw)
    tid = transaction_id_for(message, transaction_id)
    return handle_concordance_event(message.body, tid, writer=writer)


def check_writer(config: WriterConfig | None = None) -> str:
    with build_writer_client(config) as client:
        return client.check_connectivity()


def _log_outcome(outcome: EventOutcome, transaction_id: str) -> None:
    context = {"transaction_id": transaction_id, "uuid": outcome.concept_uuid}
    if outcome.ok:
        log.info("Forwarded concordance record to rw", extra=context)
        return
    log.log(
        log_level_for(outcome.status),
        f"Concordance event failed with status {outcome.status}: {outcome.error}",
        extra=context,
    )
