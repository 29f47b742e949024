"""Concepts as published by the taxonomy manager, after decoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from .enums import Authority, BundleKind

MANAGED_LOCATION_MARKER = "managedlocation"


def bundle_kind_for(concept_id: str) -> BundleKind:
    """Pick the identifier schema a concept id was published with."""

    if MANAGED_LOCATION_MARKER in concept_id:
        return BundleKind.MANAGED_LOCATION
    return BundleKind.EDITORIAL


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentifierBundle:
    """Raw identifier values per authority.

    Both identifier schemas resolve to this shape; editorial concepts never carry
    DBPedia values, so that tuple stays empty for them.
    """

    kind: BundleKind = BundleKind.EDITORIAL
    tme: tuple[str, ...] = ()
    factset: tuple[str, ...] = ()
    dbpedia: tuple[str, ...] = ()
    geonames: tuple[str, ...] = ()
    wikidata: tuple[str, ...] = ()

    def values_for(self, authority: Authority) -> tuple[str, ...]:
        match authority:
            case Authority.TME:
                return self.tme
            case Authority.FACTSET:
                return self.factset
            case Authority.DBPEDIA:
                return self.dbpedia
            case Authority.GEONAMES:
                return self.geonames
            case Authority.WIKIDATA:
                return self.wikidata
            case _:
                assert_never(authority)


@dataclass(frozen=True, slots=True, kw_only=True)
class Concept:
    id: str
    types: tuple[str, ...] = ()
    identifiers: IdentifierBundle = field(default_factory=IdentifierBundle)

    @property
    def primary_type(self) -> str | None:
        return self.types[0] if self.types else None


@dataclass(frozen=True, slots=True)
class ConceptPayload:
    """The ``@graph`` of a single taxonomy export."""

    concepts: tuple[Concept, ...] = ()
