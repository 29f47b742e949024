"""Codec for FT message envelopes: a header block, a blank line, then the body."""

from __future__ import annotations

import re
import secrets
import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging import getLogger
from typing import Final

log = getLogger(__name__)

REQUEST_ID_HEADER: Final[str] = "X-Request-Id"
TRANSACTION_ID_PREFIX: Final[str] = "tid_"

_HEADER_LINE: Final[re.Pattern[str]] = re.compile(r"^([\w-]+):(.*)$")
_SEPARATORS: Final[tuple[str, ...]] = ("\r\n\r\n", "\n\n")
_TID_ALPHABET: Final[str] = string.ascii_lowercase + string.digits


@dataclass(frozen=True, slots=True)
class FTMessage:
    headers: Mapping[str, str] = field(default_factory=dict[str, str])
    body: str = ""

    @property
    def transaction_id(self) -> str | None:
        return self.headers.get(REQUEST_ID_HEADER) or None


def _header_section_end(raw: str) -> int:
    for separator in _SEPARATORS:
        index = raw.find(separator)
        if index != -1:
            return index
    log.warning(f"Message with no message body: [{raw}]")
    return len(raw)


def parse_headers(section: str) -> dict[str, str]:
    headers: dict[str, str] = {}
    for line in section.splitlines():
        match = _HEADER_LINE.match(line.strip())
        if match is None:
            continue
        name, value = match.groups()
        headers[name] = value.strip()
    return headers


def parse_ft_message(raw: str | bytes) -> FTMessage:
    """Split a raw envelope into headers and body.

    CRLF line endings are expected; plain LF is accepted as a fallback. A message
    without a blank line is treated as headers only. Bytes that are not valid
    UTF-8 are replaced rather than rejected; the body decoder reports them.
    """

    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    end = _header_section_end(text)
    return FTMessage(headers=parse_headers(text[:end]), body=text[end:].strip())


def new_transaction_id() -> str:
    suffix = "".join(secrets.choice(_TID_ALPHABET) for _ in range(10))
    return f"{TRANSACTION_ID_PREFIX}{suffix}"


def transaction_id_for(message: FTMessage, default: str | None = None) -> str:
    """Return the message's request id.

    Falls back to ``default``, then to a freshly generated id.
    """

    tid = message.transaction_id or default
    if tid is None:
        tid = new_transaction_id()
        log.info(f"No {REQUEST_ID_HEADER} header on message; generated {tid}")
    return tid
