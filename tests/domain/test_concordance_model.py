from __future__ import annotations

import json

from concordance_transformer.domain.model import (
    Authority,
    BundleKind,
    ConcordedID,
    IdentifierBundle,
    SourceAuthority,
    UppConcordance,
    bundle_kind_for,
)


def test_payload_keys_and_order() -> None:
    concordance = UppConcordance(
        authority=SourceAuthority.MANAGED_LOCATION,
        concept_uuid="20db1bd6-59f9-4404-adb5-3165a448f8b0",
        concordances=(
            ConcordedID(
                authority=Authority.DBPEDIA,
                authority_value="http://dbpedia.org/resource/Essex",
                uuid="9567fbd6-f6f3-34f4-9b31-53856d5428a3",
            ),
        ),
    )

    assert concordance.to_json() == (
        b'{"authority":"ManagedLocation","uuid":"20db1bd6-59f9-4404-adb5-3165a448f8b0",'
        b'"concordances":[{"authority":"DBPedia",'
        b'"authorityValue":"http://dbpedia.org/resource/Essex",'
        b'"uuid":"9567fbd6-f6f3-34f4-9b31-53856d5428a3"}]}'
    )


def test_empty_authority_value_is_omitted() -> None:
    concorded = ConcordedID(authority=Authority.TME, uuid="d83a4dc1-397e-4f99-8ecf-2f1b15febb7f")

    assert concorded.as_payload() == {
        "authority": "TME",
        "uuid": "d83a4dc1-397e-4f99-8ecf-2f1b15febb7f",
    }


def test_empty_record_serializes_empty_list() -> None:
    concordance = UppConcordance(authority=SourceAuthority.SMARTLOGIC, concept_uuid="x")

    assert not concordance.has_concordances
    assert json.loads(concordance.to_json())["concordances"] == []


def test_bundle_kind_follows_id_marker() -> None:
    assert bundle_kind_for("http://www.ft.com/thing/abc") is BundleKind.EDITORIAL
    assert (
        bundle_kind_for("http://www.ft.com/ontology/managedlocation/abc")
        is BundleKind.MANAGED_LOCATION
    )


def test_bundle_values_per_authority() -> None:
    bundle = IdentifierBundle(tme=("a-b",), wikidata=("w",))

    assert bundle.values_for(Authority.TME) == ("a-b",)
    assert bundle.values_for(Authority.WIKIDATA) == ("w",)
    assert bundle.values_for(Authority.DBPEDIA) == ()
