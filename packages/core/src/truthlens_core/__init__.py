from .analysis import analyze_content
from .fusion import FusionScore, compute_fusion_score, fuse_results
from .oracle import AnalysisRequest, OracleClient, OracleError
from .sanitize import build_result, coerce_choice, fallback_payload, sanitize_response
from .session import AnalysisSession
from .types import (
    AnalysisPayload,
    AnalysisResult,
    Detail,
    DetailKind,
    Modality,
    MultimodalResult,
    Verdict,
)

__all__ = [
    "Modality",
    "Verdict",
    "DetailKind",
    "Detail",
    "AnalysisPayload",
    "AnalysisResult",
    "MultimodalResult",
    "AnalysisRequest",
    "AnalysisSession",
    "FusionScore",
    "OracleClient",
    "OracleError",
    "analyze_content",
    "build_result",
    "coerce_choice",
    "compute_fusion_score",
    "fallback_payload",
    "fuse_results",
    "sanitize_response",
]
