"""Concordance conversion engine.

The domain layer is adapter-free: it receives an already decoded
``ConceptPayload`` and talks to the downstream store only through the
``ConcordanceWriter`` port.
"""

from __future__ import annotations

from .conversion import ConversionResult, build_upp_concordance, convert_to_upp_concordance
from .errors import (
    ConceptTypeNotAllowedError,
    ConceptValidationError,
    ConcordanceAssemblyError,
    ConcordanceError,
    InvalidIdentifierError,
    PayloadDecodeError,
    WriterUnavailableError,
)
from .forwarding import ForwardResult, UnexpectedWriterResponseError, forward_concordance
from .ports import ConcordanceWriter

__all__ = [
    "ConceptTypeNotAllowedError",
    "ConceptValidationError",
    "ConcordanceAssemblyError",
    "ConcordanceError",
    "ConcordanceWriter",
    "ConversionResult",
    "ForwardResult",
    "InvalidIdentifierError",
    "PayloadDecodeError",
    "UnexpectedWriterResponseError",
    "WriterUnavailableError",
    "build_upp_concordance",
    "convert_to_upp_concordance",
    "forward_concordance",
]
