from __future__ import annotations

from typing import Any

import pytest

from truthlens_core.sanitize import (
    DEFAULT_EXPLANATION,
    FALLBACK_EXPLANATION,
    build_result,
    coerce_choice,
    fallback_payload,
    sanitize_response,
)
from truthlens_core.types import VERDICTS, Detail


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(-5, 0.0), (150, 100.0), (42.7, 42.7), (0, 0.0), (100, 100.0)],
)
def test_confidence_is_clamped(raw: float, expected: float) -> None:
    assert sanitize_response({"confidence": raw}).confidence == expected


@pytest.mark.parametrize("raw", ["90", None, True, [80], {"v": 1}, float("nan")])
def test_non_numeric_confidence_defaults_to_fifty(raw: Any) -> None:
    assert sanitize_response({"confidence": raw}).confidence == 50


def test_unknown_verdict_defaults_to_suspicious() -> None:
    assert sanitize_response({"verdict": "bogus"}).verdict == "suspicious"
    assert sanitize_response({"verdict": "AUTHENTIC"}).verdict == "suspicious"
    assert sanitize_response({"verdict": 1}).verdict == "suspicious"


def test_known_verdict_passes_through() -> None:
    assert sanitize_response({"verdict": "fake"}).verdict == "fake"
    assert sanitize_response({"verdict": "authentic"}).verdict == "authentic"


def test_detail_coercion() -> None:
    payload = sanitize_response({"details": [{"label": 7, "value": None}]})

    assert payload.details == (Detail(label="7", value="N/A", kind="neutral"),)


def test_detail_order_and_kind_preserved() -> None:
    payload = sanitize_response(
        {
            "details": [
                {"label": "Domain Age", "value": "12 years", "type": "positive"},
                {"label": "URL Structure", "value": "Typosquat", "type": "negative"},
                {"label": "Tone", "value": "Calm", "type": "mixed"},
                "not a mapping",
            ]
        }
    )

    assert [detail.label for detail in payload.details] == [
        "Domain Age",
        "URL Structure",
        "Tone",
        "Finding",
    ]
    assert [detail.kind for detail in payload.details] == [
        "positive",
        "negative",
        "neutral",
        "neutral",
    ]


def test_non_list_details_yield_empty() -> None:
    assert sanitize_response({"details": {"label": "x"}}).details == ()
    assert sanitize_response({"details": "none"}).details == ()


def test_flags_keep_only_strings() -> None:
    payload = sanitize_response({"flags": ["ok", 5, None, "also-ok"]})

    assert payload.flags == ("ok", "also-ok")


def test_non_list_flags_yield_empty() -> None:
    assert sanitize_response({"flags": "Clickbait"}).flags == ()


def test_explanation_fallback() -> None:
    assert sanitize_response({}).explanation == DEFAULT_EXPLANATION
    assert sanitize_response({"explanation": ""}).explanation == DEFAULT_EXPLANATION
    assert sanitize_response({"explanation": 12}).explanation == DEFAULT_EXPLANATION
    assert sanitize_response({"explanation": "Looks fine."}).explanation == "Looks fine."


@pytest.mark.parametrize("raw", [None, "text", 3, ["verdict", "fake"]])
def test_non_mapping_response_yields_defaults(raw: Any) -> None:
    payload = sanitize_response(raw)

    assert payload.verdict == "suspicious"
    assert payload.confidence == 50
    assert payload.explanation == DEFAULT_EXPLANATION
    assert payload.details == ()
    assert payload.flags == ()


def test_extra_fields_are_ignored() -> None:
    payload = sanitize_response({"verdict": "authentic", "confidence": 88, "model": "x"})

    assert payload.verdict == "authentic"
    assert payload.confidence == 88


def test_coerce_choice() -> None:
    assert coerce_choice("fake", VERDICTS, "suspicious") == "fake"
    assert coerce_choice("FAKE", VERDICTS, "suspicious") == "suspicious"
    assert coerce_choice(None, VERDICTS, "suspicious") == "suspicious"


def test_fallback_payload() -> None:
    payload = fallback_payload()

    assert payload.verdict == "suspicious"
    assert payload.confidence == 50
    assert payload.explanation == FALLBACK_EXPLANATION
    assert payload.details == (
        Detail(label="Analysis", value="Partial results available", kind="neutral"),
    )
    assert payload.flags == ("Automated analysis inconclusive",)


def test_build_result_attaches_modality() -> None:
    payload = sanitize_response(
        {
            "verdict": "fake",
            "confidence": 91,
            "explanation": "Face blending artifacts.",
            "details": [{"label": "Deepfake", "value": "Detected", "type": "negative"}],
            "flags": ["Blending"],
        }
    )

    result = build_result("image", payload)

    assert result.modality == "image"
    assert result.verdict == "fake"
    assert result.details[0].kind == "negative"
    assert result.flags == ("Blending",)


def test_detail_serializes_kind_as_type() -> None:
    detail = Detail(label="AI Generation", value="Not detected", kind="positive")

    assert detail.model_dump(by_alias=True) == {
        "label": "AI Generation",
        "value": "Not detected",
        "type": "positive",
    }


@pytest.mark.parametrize(
    ("raw", "expected"), [(10**400, 100.0), (-(10**400), 0.0)], ids=["huge", "huge-negative"]
)
def test_integer_confidence_beyond_float_range_is_clamped(raw: int, expected: float) -> None:
    assert sanitize_response({"confidence": raw}).confidence == expected


def test_infinite_confidence_is_clamped() -> None:
    assert sanitize_response({"confidence": float("inf")}).confidence == 100.0
    assert sanitize_response({"confidence": float("-inf")}).confidence == 0.0


def test_empty_detail_text_uses_fallbacks() -> None:
    payload = sanitize_response({"details": [{"label": "", "value": "", "type": "negative"}]})

    assert payload.details == (Detail(label="Finding", value="N/A", kind="negative"),)


def test_detail_zero_is_stringified_not_replaced() -> None:
    payload = sanitize_response({"details": [{"label": 0, "value": 0}]})

    assert payload.details == (Detail(label="0", value="0", kind="neutral"),)


def test_detail_text_too_long_to_render_uses_fallbacks() -> None:
    payload = sanitize_response({"details": [{"label": 10**5000, "value": 10**5000}]})

    assert payload.details == (Detail(label="Finding", value="N/A", kind="neutral"),)
