from __future__ import annotations

import logging

from .oracle import AnalysisRequest, OracleClient
from .sanitize import build_result, fallback_payload, sanitize_response
from .session import AnalysisSession
from .types import AnalysisResult

logger = logging.getLogger(__name__)


def analyze_content(
    request: AnalysisRequest,
    *,
    client: OracleClient,
    session: AnalysisSession | None = None,
) -> AnalysisResult:
    """Run one oracle analysis and turn the reply into a result record.

    Oracle errors propagate unchanged. When the judge replied without any
    extractable JSON object the fixed fallback record is used as-is.
    """
    raw = client.analyze(request)
    if raw is None:
        logger.warning("No structured payload in %s analysis; using fallback", request.modality)
        payload = fallback_payload()
    else:
        payload = sanitize_response(raw)

    result = build_result(request.modality, payload)
    if session is not None:
        session.append(result)
    return result
