"""HTTP client for the concordance writer service."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypedDict

import httpx

from concordance_transformer.domain.errors import WriterUnavailableError

if TYPE_CHECKING:
    from types import TracebackType

    from concordance_transformer.config.writer import WriterConfig

log = getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"
GTG_PATH = "__gtg"
UNAVAILABLE_MESSAGE = "unable to verify availability of the concordance writer"


class ClientOptions(TypedDict, total=False):
    base_url: str
    timeout: float
    headers: dict[str, str]
    transport: httpx.BaseTransport


def branch_path(concept_uuid: str) -> str:
    return f"branches/{concept_uuid}"


class ConcordanceWriterClient:
    """Writes and deletes concordance records on a writer addressed by branch uuid."""

    def __init__(
        self,
        config: WriterConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        http = config.http
        client_kwargs: ClientOptions = {
            "base_url": http.base_url,
            "timeout": http.timeout_seconds,
        }
        if http.default_headers:
            client_kwargs["headers"] = dict(http.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def __enter__(self) -> ConcordanceWriterClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def put_concordance(self, concept_uuid: str, body: bytes, *, transaction_id: str) -> int:
        response = self._request(
            "PUT",
            branch_path(concept_uuid),
            transaction_id=transaction_id,
            content=body,
        )
        return response.status_code

    def delete_concordance(self, concept_uuid: str, *, transaction_id: str) -> int:
        response = self._request("DELETE", branch_path(concept_uuid), transaction_id=transaction_id)
        return response.status_code

    def check_connectivity(self) -> str:
        """Call the writer's good-to-go endpoint.

        Returns a short confirmation; raises ``WriterUnavailableError`` when the
        writer cannot be reached or does not answer with 200.
        """

        url = self._client.base_url.join(GTG_PATH)
        try:
            response = self._client.get(GTG_PATH)
        except httpx.TransportError as exc:
            log.error(f"Error calling writer at {url}: {exc}")
            raise WriterUnavailableError(UNAVAILABLE_MESSAGE) from exc
        if response.status_code != httpx.codes.OK:
            log.error(f"Writer {url} returned status {response.status_code}")
            raise WriterUnavailableError(UNAVAILABLE_MESSAGE)
        return "Successfully connected to the concordance writer"

    def _request(
        self,
        method: str,
        path: str,
        *,
        transaction_id: str,
        content: bytes | None = None,
    ) -> httpx.Response:
        headers = {REQUEST_ID_HEADER: transaction_id}
        try:
            response = self._client.request(method, path, content=content, headers=headers)
        except httpx.TransportError as exc:
            log.error(
                f"{method} request to writer failed: {exc}",
                extra={"transaction_id": transaction_id},
            )
            raise WriterUnavailableError(str(exc)) from exc
        log.debug(
            f"{method} {response.request.url} returned {response.status_code}",
            extra={"transaction_id": transaction_id},
        )
        return response
