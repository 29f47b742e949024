"""Outcome codes shared by conversion, forwarding and the process adapters.

Every caller that turns a ``Status`` into something else (an HTTP response code,
a log level, a success flag) goes through the classifiers below. They match
exhaustively, so adding a member without handling it is a type-check failure
rather than a silent fall-through to an error path.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from http import HTTPStatus
from typing import assert_never


class Status(StrEnum):
    NOT_FOUND = "NotFound"
    SYNTACTICALLY_INCORRECT = "SyntacticallyIncorrect"
    SEMANTICALLY_INCORRECT = "SemanticallyIncorrect"
    VALID_CONCEPT = "ValidConcept"
    INTERNAL_ERROR = "InternalError"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    NO_CONTENT = "NoContent"


def http_status_for(status: Status) -> HTTPStatus:
    """Map an outcome onto the HTTP status a request handler should answer with."""

    match status:
        case Status.VALID_CONCEPT:
            return HTTPStatus.OK
        case Status.NO_CONTENT:
            return HTTPStatus.NO_CONTENT
        case Status.NOT_FOUND:
            return HTTPStatus.NOT_FOUND
        case Status.SYNTACTICALLY_INCORRECT:
            return HTTPStatus.BAD_REQUEST
        case Status.SEMANTICALLY_INCORRECT:
            return HTTPStatus.UNPROCESSABLE_ENTITY
        case Status.SERVICE_UNAVAILABLE:
            return HTTPStatus.SERVICE_UNAVAILABLE
        case Status.INTERNAL_ERROR:
            return HTTPStatus.INTERNAL_SERVER_ERROR
        case _:
            assert_never(status)


def is_success(status: Status) -> bool:
    """Return True when the outcome leaves the downstream store in the intended state."""

    match status:
        case Status.VALID_CONCEPT | Status.NO_CONTENT | Status.NOT_FOUND:
            return True
        case (
            Status.SYNTACTICALLY_INCORRECT
            | Status.SEMANTICALLY_INCORRECT
            | Status.SERVICE_UNAVAILABLE
            | Status.INTERNAL_ERROR
        ):
            return False
        case _:
            assert_never(status)


def log_level_for(status: Status) -> int:
    match status:
        case Status.VALID_CONCEPT | Status.NO_CONTENT | Status.NOT_FOUND:
            return logging.INFO
        case Status.SYNTACTICALLY_INCORRECT | Status.SEMANTICALLY_INCORRECT:
            return logging.WARNING
        case Status.SERVICE_UNAVAILABLE | Status.INTERNAL_ERROR:
            return logging.ERROR
        case _:
            assert_never(status)
