"""Errors raised while turning a concept payload into a concordance record."""

from __future__ import annotations

from concordance_transformer.domain.model.status import Status


class ConcordanceError(Exception):
    """Base error; carries the outcome classification for the failing payload."""

    status: Status = Status.SYNTACTICALLY_INCORRECT

    def __init__(
        self,
        message: str,
        *,
        status: Status | None = None,
        concept_uuid: str = "",
    ) -> None:
        super().__init__(message)
        if status is not None:
            self.status = status
        self.concept_uuid = concept_uuid


class PayloadDecodeError(ConcordanceError):
    """Raised when a message body is not a decodable concept payload."""


class ConceptValidationError(ConcordanceError):
    """Raised when a concept is not eligible for concordance."""

    def __init__(
        self,
        message: str,
        *,
        status: Status,
        concept_uuid: str = "",
        alert_tag: str | None = None,
    ) -> None:
        super().__init__(message, status=status, concept_uuid=concept_uuid)
        self.alert_tag = alert_tag


class ConceptTypeNotAllowedError(ConceptValidationError):
    """Raised for concept types that are never concorded."""

    def __init__(self, *, concept_uuid: str = "", alert_tag: str | None = None) -> None:
        super().__init__(
            "concept type not allowed",
            status=Status.SEMANTICALLY_INCORRECT,
            concept_uuid=concept_uuid,
            alert_tag=alert_tag,
        )


class InvalidIdentifierError(ValueError):
    """Raised when an external identifier does not have its authority's format."""


class ConcordanceAssemblyError(ConcordanceError):
    """Raised when the identifiers of a concept cannot form a concordance record."""


class WriterUnavailableError(ConnectionError):
    """Raised by writer adapters when the concordance store cannot be reached."""
