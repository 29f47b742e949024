from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from concordance_transformer.adapters.smartlogic import decode_concept_payload
from tests.helpers.concepts import CONCEPTS_DIR

if TYPE_CHECKING:
    from collections.abc import Callable

    from concordance_transformer.domain.model import ConceptPayload


@pytest.fixture(scope="session")
def read_concept() -> Callable[[str], str]:
    """Return a loader for the JSON-LD samples under ``tests/data/concepts``."""

    def reader(name: str) -> str:
        return (CONCEPTS_DIR / f"{name}.json").read_text(encoding="utf-8")

    return reader


@pytest.fixture(scope="session")
def load_concept(read_concept: Callable[[str], str]) -> Callable[[str], ConceptPayload]:
    def loader(name: str) -> ConceptPayload:
        return decode_concept_payload(read_concept(name))

    return loader


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WRITER_ADDRESS", "WRITER_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
