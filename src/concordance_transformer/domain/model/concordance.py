"""Concordance records written to the downstream store."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .enums import Authority, SourceAuthority


@dataclass(frozen=True, slots=True, kw_only=True)
class ConcordedID:
    authority: Authority
    uuid: str
    authority_value: str = ""

    def as_payload(self) -> dict[str, str]:
        payload = {"authority": str(self.authority)}
        if self.authority_value:
            payload["authorityValue"] = self.authority_value
        payload["uuid"] = self.uuid
        return payload


@dataclass(frozen=True, slots=True, kw_only=True)
class UppConcordance:
    authority: SourceAuthority
    concept_uuid: str
    concordances: tuple[ConcordedID, ...] = ()

    @property
    def has_concordances(self) -> bool:
        return bool(self.concordances)

    def as_payload(self) -> dict[str, object]:
        return {
            "authority": str(self.authority),
            "uuid": self.concept_uuid,
            "concordances": [concorded.as_payload() for concorded in self.concordances],
        }

    def to_json(self) -> bytes:
        """Serialize to the compact JSON body accepted by the concordance writer."""

        return json.dumps(self.as_payload(), separators=(",", ":")).encode("utf-8")
