"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Authority(StrEnum):
    """External authorities whose identifiers are concorded to a concept."""

    TME = "TME"
    FACTSET = "FACTSET"
    DBPEDIA = "DBPedia"
    GEONAMES = "Geonames"
    WIKIDATA = "Wikidata"


class SourceAuthority(StrEnum):
    """Provenance of the concept that owns a concordance record."""

    SMARTLOGIC = "Smartlogic"
    MANAGED_LOCATION = "ManagedLocation"


class BundleKind(StrEnum):
    """Discriminator for the identifier schema a concept was published with."""

    EDITORIAL = "editorial"
    MANAGED_LOCATION = "managed_location"


LOCATION_AUTHORITIES: tuple[Authority, ...] = (
    Authority.DBPEDIA,
    Authority.GEONAMES,
    Authority.WIKIDATA,
)

# Order in which concordances are appended to a record.
AUTHORITY_ORDER: tuple[Authority, ...] = (
    Authority.TME,
    Authority.FACTSET,
    *LOCATION_AUTHORITIES,
)
