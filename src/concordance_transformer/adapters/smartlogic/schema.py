"""Pydantic models describing the taxonomy manager's JSON-LD export."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from concordance_transformer.domain.model import (
    BundleKind,
    IdentifierBundle,
    bundle_kind_for,
)

ONTOLOGY_NS: Final[str] = "http://www.ft.com/ontology/"
MANAGED_LOCATION_NS: Final[str] = "http://www.ft.com/ontology/managedlocation/"


class JsonLdBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class TmeIdentifierNode(JsonLdBaseModel):
    value: str = Field(default="", alias="@value")


class FactsetIdentifierNode(JsonLdBaseModel):
    language: str = Field(default="", alias="@language")
    value: str = Field(default="", alias="@value")


class LocationIdentifierNode(JsonLdBaseModel):
    type: str = Field(default="", alias="@type")
    value: str = Field(default="", alias="@value")


IdentifierNode = TmeIdentifierNode | FactsetIdentifierNode | LocationIdentifierNode


def _values(nodes: Sequence[IdentifierNode]) -> tuple[str, ...]:
    return tuple(node.value for node in nodes)


class EditorialIdentifiers(JsonLdBaseModel):
    tme: list[TmeIdentifierNode] = Field(
        default_factory=list, alias=f"{ONTOLOGY_NS}TMEIdentifier"
    )
    factset: list[FactsetIdentifierNode] = Field(
        default_factory=list, alias=f"{ONTOLOGY_NS}factsetIdentifier"
    )
    wikidata: list[LocationIdentifierNode] = Field(
        default_factory=list, alias=f"{ONTOLOGY_NS}wikidataIdentifier"
    )
    geonames: list[LocationIdentifierNode] = Field(
        default_factory=list, alias=f"{ONTOLOGY_NS}geonamesIdentifier"
    )

    def to_bundle(self) -> IdentifierBundle:
        return IdentifierBundle(
            kind=BundleKind.EDITORIAL,
            tme=_values(self.tme),
            factset=_values(self.factset),
            geonames=_values(self.geonames),
            wikidata=_values(self.wikidata),
        )


class ManagedLocationIdentifiers(JsonLdBaseModel):
    tme: list[TmeIdentifierNode] = Field(
        default_factory=list, alias=f"{MANAGED_LOCATION_NS}TMEIdentifier"
    )
    factset: list[FactsetIdentifierNode] = Field(
        default_factory=list,
        alias=f"{MANAGED_LOCATION_NS}factsetIdentifier",
    )
    dbpedia: list[LocationIdentifierNode] = Field(
        default_factory=list, alias=f"{MANAGED_LOCATION_NS}dbpediaId"
    )
    geonames: list[LocationIdentifierNode] = Field(
        default_factory=list, alias=f"{MANAGED_LOCATION_NS}geonamesId"
    )
    wikidata: list[LocationIdentifierNode] = Field(
        default_factory=list, alias=f"{MANAGED_LOCATION_NS}wikidataId"
    )

    def to_bundle(self) -> IdentifierBundle:
        return IdentifierBundle(
            kind=BundleKind.MANAGED_LOCATION,
            tme=_values(self.tme),
            factset=_values(self.factset),
            dbpedia=_values(self.dbpedia),
            geonames=_values(self.geonames),
            wikidata=_values(self.wikidata),
        )


_IDENTIFIER_SCHEMAS: Final[
    dict[BundleKind, type[EditorialIdentifiers] | type[ManagedLocationIdentifiers]]
] = {
    BundleKind.EDITORIAL: EditorialIdentifiers,
    BundleKind.MANAGED_LOCATION: ManagedLocationIdentifiers,
}


class ConceptNode(JsonLdBaseModel):
    id: str = Field(default="", alias="@id")
    types: list[str] = Field(default_factory=list, alias="@type")
    identifiers: EditorialIdentifiers | ManagedLocationIdentifiers = Field(
        default_factory=EditorialIdentifiers
    )

    @model_validator(mode="before")
    @classmethod
    def _select_identifier_schema(cls, value: object) -> object:
        # Only the schema matching the id is read; fields of the other one are ignored.
        if not isinstance(value, Mapping):
            return value
        data = dict(cast(Mapping[str, object], value))
        concept_id = data.get("@id")
        kind = bundle_kind_for(concept_id if isinstance(concept_id, str) else "")
        data["identifiers"] = _IDENTIFIER_SCHEMAS[kind].model_validate(value)
        return data

    # JSON null reads as an absent value; validation reports it downstream.
    @field_validator("id", mode="before")
    @classmethod
    def _null_id_is_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("types", mode="before")
    @classmethod
    def _null_types_are_empty(cls, value: object) -> object:
        return [] if value is None else value


class ConceptGraph(JsonLdBaseModel):
    concepts: list[ConceptNode] = Field(default_factory=list, alias="@graph")

    @field_validator("concepts", mode="before")
    @classmethod
    def _null_graph_is_empty(cls, value: object) -> object:
        return [] if value is None else value
