"""Tests for JSON Schema validation of resolution envelopes."""

from __future__ import annotations

from typing import Any

import jsonschema
import pytest

from paribhasha import resolve


@pytest.mark.parametrize(
    ("words", "context"),
    [
        (["gajaḥ", "gajaḥ", "gajaḥ"], None),
        ([{"surface": "tat", "pronoun": True}, {"surface": "bhrātā", "kinship": True}], None),
        (
            [{"surface": "gāvaḥ", "gender": "f"}, {"surface": "gāvaḥ", "gender": "f"}],
            {"domain": "domestic-animals", "collection": True},
        ),
        (
            [{"surface": "kuṇḍam", "base": "kuṇḍa", "gender": "n"}, {"surface": "kuṇḍaḥ", "base": "kuṇḍa", "gender": "m"}],
            None,
        ),
        ([{"surface": "गजः", "case": "nom"}, {"surface": "गजम्", "case": "acc"}], {"forceCaseCheck": True}),
        ("gajaḥ", None),
        ([], None),
        (["gaja7"], None),
        (["gajaḥ"], "collection"),
    ],
    ids=["identical", "mandatory", "domain", "neuter", "case_mismatch", "no_rule", "empty", "bad_script", "bad_context"],
)
def test_envelope_matches_schema(words: Any, context: Any, resolution_schema: dict[str, Any]) -> None:
    envelope = resolve(words, context).to_dict()

    jsonschema.validate(envelope, resolution_schema)


def test_schema_rejects_applied_result_without_sutra(resolution_schema: dict[str, Any]) -> None:
    envelope = resolve(["gajaḥ", "gajaḥ"]).to_dict()
    envelope["sutra"] = None

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(envelope, resolution_schema)


def test_schema_requires_error_code_for_invalid_input(resolution_schema: dict[str, Any]) -> None:
    envelope = resolve([]).to_dict()
    del envelope["error"]

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(envelope, resolution_schema)
