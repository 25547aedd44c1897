"""
Weighted multimodal fusion of per-modality verdicts.

Each result votes with ``weight(modality) * trust(verdict) * confidence/100``.
Weights are renormalized over the results actually present, so a session that
only analyzed text and audio is judged on those two channels alone.

The decision is deliberately asymmetric: any single ``fake`` vote, or a low
blended score, yields ``fake`` regardless of what the other channels say.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .types import MODALITIES, VERDICTS, AnalysisResult, Modality, MultimodalResult, Verdict

logger = logging.getLogger(__name__)

MODALITY_WEIGHTS: Mapping[Modality, float] = {
    "text": 0.20,
    "url": 0.15,
    "image": 0.25,
    "video": 0.20,
    "document": 0.10,
    "audio": 0.10,
}

VERDICT_TRUST_SCORES: Mapping[Verdict, float] = {
    "authentic": 1.0,
    "suspicious": 0.5,
    "fake": 0.0,
}

FAKE_SCORE_THRESHOLD = 0.30
SUSPICIOUS_SCORE_THRESHOLD = 0.70


def _check_table(name: str, table: Mapping[str, float], expected: tuple[str, ...]) -> None:
    missing = [key for key in expected if key not in table]
    unknown = [key for key in table if key not in expected]
    if missing or unknown:
        raise RuntimeError(f"{name} out of sync: missing={missing} unknown={unknown}")


_check_table("MODALITY_WEIGHTS", MODALITY_WEIGHTS, MODALITIES)
_check_table("VERDICT_TRUST_SCORES", VERDICT_TRUST_SCORES, VERDICTS)


@dataclass(frozen=True)
class FusionScore:
    weighted_score: float
    total_weight: float
    normalized_score: float
    fake_count: int
    suspicious_count: int
    overall_confidence: int


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_fusion_score(results: Sequence[AnalysisResult]) -> FusionScore:
    if not results:
        raise ValueError("Fusion requires at least one analysis result")

    weighted_score = 0.0
    total_weight = 0.0
    fake_count = 0
    suspicious_count = 0

    for result in results:
        weight = MODALITY_WEIGHTS[result.modality]
        total_weight += weight
        weighted_score += (
            weight * VERDICT_TRUST_SCORES[result.verdict] * (result.confidence / 100)
        )
        if result.verdict == "fake":
            fake_count += 1
        elif result.verdict == "suspicious":
            suspicious_count += 1

    mean_confidence = sum(result.confidence for result in results) / len(results)

    return FusionScore(
        weighted_score=weighted_score,
        total_weight=total_weight,
        normalized_score=weighted_score / total_weight,
        fake_count=fake_count,
        suspicious_count=suspicious_count,
        overall_confidence=_round_half_up(mean_confidence),
    )


def _decide(score: FusionScore, modality_count: int) -> tuple[Verdict, str]:
    if score.fake_count > 0 or score.normalized_score < FAKE_SCORE_THRESHOLD:
        return "fake", (
            f"Multimodal analysis detected manipulation across {modality_count} "
            f"modalities. {score.fake_count} modality/modalities flagged as fake "
            "with high confidence."
        )
    if score.suspicious_count > 0 or score.normalized_score < SUSPICIOUS_SCORE_THRESHOLD:
        return "suspicious", (
            f"Cross-modal analysis reveals inconsistencies across {modality_count} "
            f"modalities. {score.suspicious_count} modality/modalities show "
            "suspicious patterns that warrant further investigation."
        )
    return "authentic", (
        f"All {modality_count} analyzed modalities show consistent authentic "
        "patterns. No manipulation markers detected across text, visual, or "
        "audio content."
    )


def fuse_results(results: Sequence[AnalysisResult]) -> MultimodalResult:
    score = compute_fusion_score(results)
    verdict, explanation = _decide(score, len(results))

    logger.debug(
        "Fused %d results: score=%.3f fake=%d suspicious=%d verdict=%s",
        len(results),
        score.normalized_score,
        score.fake_count,
        score.suspicious_count,
        verdict,
    )

    return MultimodalResult(
        overall_verdict=verdict,
        overall_confidence=score.overall_confidence,
        fusion_explanation=explanation,
        modalities=tuple(results),
    )
