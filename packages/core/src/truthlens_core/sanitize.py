from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, TypeVar

from .types import (
    DETAIL_KINDS,
    VERDICTS,
    AnalysisPayload,
    AnalysisResult,
    Detail,
    Modality,
)

DEFAULT_VERDICT = "suspicious"
DEFAULT_CONFIDENCE = 50.0
DEFAULT_EXPLANATION = "Analysis completed."
DEFAULT_DETAIL_LABEL = "Finding"
DEFAULT_DETAIL_VALUE = "N/A"
DEFAULT_DETAIL_KIND = "neutral"

MIN_CONFIDENCE = 0.0
MAX_CONFIDENCE = 100.0

FALLBACK_EXPLANATION = "Analysis completed with limited data. Manual review recommended."

_T = TypeVar("_T")


def coerce_choice(value: Any, allowed: tuple[_T, ...], default: _T) -> _T:
    """Return ``value`` when it is one of ``allowed``, otherwise ``default``."""
    if isinstance(value, str) and value in allowed:
        return value  # type: ignore[return-value]
    return default


def clamp_confidence(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_CONFIDENCE
    if isinstance(value, float) and math.isnan(value):
        return DEFAULT_CONFIDENCE
    return float(min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, value)))


def _coerce_text(value: Any, fallback: str) -> str:
    if value is None:
        return fallback
    try:
        text = str(value)
    except (ValueError, RecursionError):
        # int-to-str digit limit, or a structure nested too deeply to render
        return fallback
    return text if text else fallback


def _coerce_detail(item: Any) -> Detail:
    if not isinstance(item, Mapping):
        return Detail(
            label=DEFAULT_DETAIL_LABEL,
            value=DEFAULT_DETAIL_VALUE,
            kind=DEFAULT_DETAIL_KIND,
        )

    # The oracle spells the evidence kind "type"; accept "kind" as well.
    raw_kind = item.get("type", item.get("kind"))
    return Detail(
        label=_coerce_text(item.get("label"), DEFAULT_DETAIL_LABEL),
        value=_coerce_text(item.get("value"), DEFAULT_DETAIL_VALUE),
        kind=coerce_choice(raw_kind, DETAIL_KINDS, DEFAULT_DETAIL_KIND),
    )


def sanitize_response(raw: Any) -> AnalysisPayload:
    """Coerce an untrusted oracle response into a valid payload.

    Every field is normalized independently: unknown verdicts fall back to
    ``suspicious``, non-numeric confidences to 50 (and all confidences are
    clamped to ``[0, 100]``), empty or missing explanations to a generic
    sentence, and list fields are dropped to empty when not list-shaped.
    This function never raises.
    """
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    explanation = data.get("explanation")
    if not isinstance(explanation, str) or not explanation:
        explanation = DEFAULT_EXPLANATION

    raw_details = data.get("details")
    details = (
        tuple(_coerce_detail(item) for item in raw_details)
        if isinstance(raw_details, list)
        else ()
    )

    raw_flags = data.get("flags")
    flags = (
        tuple(flag for flag in raw_flags if isinstance(flag, str))
        if isinstance(raw_flags, list)
        else ()
    )

    return AnalysisPayload(
        verdict=coerce_choice(data.get("verdict"), VERDICTS, DEFAULT_VERDICT),
        confidence=clamp_confidence(data.get("confidence")),
        explanation=explanation,
        details=details,
        flags=flags,
    )


def fallback_payload() -> AnalysisPayload:
    """Terminal record for a response with no extractable structured payload."""
    return AnalysisPayload(
        verdict="suspicious",
        confidence=50,
        explanation=FALLBACK_EXPLANATION,
        details=(
            Detail(label="Analysis", value="Partial results available", kind="neutral"),
        ),
        flags=("Automated analysis inconclusive",),
    )


def build_result(modality: Modality, payload: AnalysisPayload) -> AnalysisResult:
    return AnalysisResult(modality=modality, **payload.model_dump())
