from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from concordance_transformer.domain.errors import (
    ConceptTypeNotAllowedError,
    ConceptValidationError,
)
from concordance_transformer.domain.model import (
    Concept,
    ConceptPayload,
    IdentifierBundle,
    SourceAuthority,
    Status,
)
from concordance_transformer.domain.validation import (
    ALERT_TAG_CONCEPT_TYPE_NOT_ALLOWED,
    extract_uuid_and_authority,
    short_type,
    validate_concept,
)
from tests.helpers.concepts import CONCEPT_UUID

if TYPE_CHECKING:
    from collections.abc import Callable

BRAND = "http://www.ft.com/ontology/Brand"
THING_ID = f"http://www.ft.com/thing/{CONCEPT_UUID}"


def _payload(*concepts: Concept) -> ConceptPayload:
    return ConceptPayload(concepts=concepts)


@pytest.mark.parametrize(
    ("uri", "expected"),
    [
        ("www.google.com/2d3e16e0-61cb-4322-8aff-3b01c59f4daa", None),
        ("http://www.ft.com/thing/2d3e16e061cb43228aff3b01c59f4daa", None),
        ("http://www.ft.com/thing/2D3E16E0-61CB-4322-8AFF-3B01C59F4DAA", None),
        ("http://www.ft.com/thing/2d3e16e0-61cb-4322-8aff-3b01c59f4daa/extra", None),
        (
            "http://www.ft.com/thing/2d3e16e0-61cb-4322-8aff-3b01c59f4daa",
            ("2d3e16e0-61cb-4322-8aff-3b01c59f4daa", SourceAuthority.SMARTLOGIC),
        ),
        (
            "http://www.ft.com/ontology/managedlocation/2d3e16e0-61cb-4322-8aff-3b01c59f4daa",
            ("2d3e16e0-61cb-4322-8aff-3b01c59f4daa", SourceAuthority.MANAGED_LOCATION),
        ),
    ],
)
def test_extract_uuid_and_authority(
    uri: str, expected: tuple[str, SourceAuthority] | None
) -> None:
    assert extract_uuid_and_authority(uri) == expected


def test_short_type_takes_last_path_segment() -> None:
    assert short_type("http://www.ft.com/ontology/Membership") == "Membership"
    assert short_type("skos:Concept") == "skos:Concept"


def test_empty_graph_is_semantically_incorrect() -> None:
    with pytest.raises(ConceptValidationError, match="Missing/invalid @graph field") as exc:
        validate_concept(_payload())

    assert exc.value.status is Status.SEMANTICALLY_INCORRECT
    assert exc.value.concept_uuid == ""


def test_more_than_one_concept_is_rejected_before_identifiers() -> None:
    broken = Concept(id="not-a-uri", identifiers=IdentifierBundle(tme=("invalid",)))

    with pytest.raises(ConceptValidationError, match="More than 1 concept") as exc:
        validate_concept(_payload(broken, broken))

    assert exc.value.status is Status.SEMANTICALLY_INCORRECT


def test_invalid_id_has_no_concept_uuid(load_concept: Callable[[str], ConceptPayload]) -> None:
    with pytest.raises(ConceptValidationError, match="Missing/invalid @id field") as exc:
        validate_concept(load_concept("invalid_id"))

    assert exc.value.status is Status.SEMANTICALLY_INCORRECT
    assert exc.value.concept_uuid == ""


def test_missing_types_is_syntactically_incorrect(
    load_concept: Callable[[str], ConceptPayload],
) -> None:
    with pytest.raises(ConceptValidationError) as exc:
        validate_concept(load_concept("no_types"))

    assert str(exc.value) == f"bad Request: Type has not been set for concept: {CONCEPT_UUID}"
    assert exc.value.status is Status.SYNTACTICALLY_INCORRECT
    assert exc.value.concept_uuid == CONCEPT_UUID


def test_denied_type_raises_tagged_sentinel(
    load_concept: Callable[[str], ConceptPayload],
) -> None:
    with pytest.raises(ConceptTypeNotAllowedError) as exc:
        validate_concept(load_concept("not_allowed_type"))

    assert str(exc.value) == "concept type not allowed"
    assert exc.value.status is Status.SEMANTICALLY_INCORRECT
    assert exc.value.alert_tag == ALERT_TAG_CONCEPT_TYPE_NOT_ALLOWED
    assert exc.value.concept_uuid == CONCEPT_UUID


@pytest.mark.parametrize(
    ("fixture", "short_form"),
    [("membership_with_tme", "Membership"), ("membership_role_with_tme", "MembershipRole")],
)
def test_membership_types_with_tme_are_rejected(
    load_concept: Callable[[str], ConceptPayload], fixture: str, short_form: str
) -> None:
    with pytest.raises(ConceptValidationError) as exc:
        validate_concept(load_concept(fixture))

    assert str(exc.value) == f"bad Request: Concept type {short_form} does not support concordance"
    assert exc.value.status is Status.SYNTACTICALLY_INCORRECT


def test_membership_without_tme_is_accepted(
    load_concept: Callable[[str], ConceptPayload],
) -> None:
    validated = validate_concept(load_concept("membership_without_tme"))

    assert validated.concept_uuid == CONCEPT_UUID
    assert validated.authority is SourceAuthority.SMARTLOGIC


def test_only_first_type_is_checked() -> None:
    concept = Concept(id=THING_ID, types=(BRAND, "skos:Concept"))

    validated = validate_concept(_payload(concept))

    assert validated.concept is concept


def test_managed_location_prefix_sets_authority(
    load_concept: Callable[[str], ConceptPayload],
) -> None:
    validated = validate_concept(load_concept("managed_location_ids"))

    assert validated.authority is SourceAuthority.MANAGED_LOCATION
    assert validated.concept_uuid == CONCEPT_UUID
