from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

Modality = Literal["text", "url", "image", "video", "document", "audio"]
Verdict = Literal["authentic", "suspicious", "fake"]
DetailKind = Literal["positive", "negative", "neutral"]

MODALITIES: tuple[Modality, ...] = get_args(Modality)
VERDICTS: tuple[Verdict, ...] = get_args(Verdict)
DETAIL_KINDS: tuple[DetailKind, ...] = get_args(DetailKind)


class Detail(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    value: str
    kind: DetailKind = Field(default="neutral", alias="type")


class AnalysisPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    confidence: float = Field(ge=0, le=100)
    explanation: str = Field(min_length=1)
    details: tuple[Detail, ...] = ()
    flags: tuple[str, ...] = ()


class AnalysisResult(AnalysisPayload):
    modality: Modality


class MultimodalResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    overall_verdict: Verdict = Field(alias="overallVerdict")
    overall_confidence: int = Field(ge=0, le=100, alias="overallConfidence")
    fusion_explanation: str = Field(alias="fusionExplanation")
    modalities: tuple[AnalysisResult, ...]
