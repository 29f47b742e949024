"""Concordance writer configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default, env_positive_float
from .http_client import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig

DEFAULT_WRITER_ADDRESS = "http://localhost:8080/__concordances-rw-neo4j/"


@dataclass(frozen=True, slots=True)
class WriterConfig:
    http: HttpClientConfig

    @property
    def address(self) -> str:
        return self.http.base_url


def get_writer_config(*, http: HttpClientConfig | None = None) -> WriterConfig:
    if http is not None:
        return WriterConfig(http=http)
    return WriterConfig(
        http=HttpClientConfig(
            name="concordance-writer",
            base_url=env_or_default("WRITER_ADDRESS", DEFAULT_WRITER_ADDRESS),
            timeout_seconds=env_positive_float("WRITER_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            default_headers={"Content-Type": "application/json"},
        )
    )
