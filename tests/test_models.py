import pytest
from pydantic import ValidationError as SchemaError
from advisor.models import CompatibilityLevel, Verdict

def test_levels_are_ordered_by_rank():
    assert CompatibilityLevel.POOR < CompatibilityLevel.LIMITED < CompatibilityLevel.GOOD < CompatibilityLevel.EXCELLENT
    assert max(CompatibilityLevel) is CompatibilityLevel.EXCELLENT
    # Alphabetical order would put "Good" before "Limited".
    assert sorted([CompatibilityLevel.LIMITED, CompatibilityLevel.GOOD, CompatibilityLevel.POOR]) == [
        CompatibilityLevel.POOR, CompatibilityLevel.LIMITED, CompatibilityLevel.GOOD
    ]

def test_parse_is_case_insensitive():
    assert CompatibilityLevel.parse(" good ") is CompatibilityLevel.GOOD
    with pytest.raises(ValueError):
        CompatibilityLevel.parse("Great")

def test_verdict_accepts_wire_names_and_dumps_them():
    verdict = Verdict.model_validate({
        "compatibility": "poor",
        "issues": ["x"],
        "recommendedVersions": ["macOS Sonoma"],
        "tips": [],
        "summary": "s",
    })
    assert verdict.compatibility is CompatibilityLevel.POOR
    assert verdict.recommended_versions == ["macOS Sonoma"]
    payload = verdict.to_payload()
    assert payload["recommendedVersions"] == ["macOS Sonoma"]
    assert payload["compatibility"] == "Poor"

def test_verdict_requires_recommended_versions():
    with pytest.raises(SchemaError):
        Verdict(compatibility=CompatibilityLevel.GOOD, recommended_versions=[], summary="s")
