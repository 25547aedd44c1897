from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest

from truthlens_core.analysis import analyze_content
from truthlens_core.oracle import AnalysisRequest, OracleClient, OracleRateLimitError
from truthlens_core.sanitize import FALLBACK_EXPLANATION
from truthlens_core.session import AnalysisSession


def _client_returning(raw: Any) -> Mock:
    client = Mock(spec=OracleClient)
    client.analyze.return_value = raw
    return client


def test_analysis_sanitizes_oracle_reply() -> None:
    client = _client_returning(
        {
            "verdict": "fake",
            "confidence": 140,
            "explanation": "Synthetic voice.",
            "details": [{"label": "Voice Synthesis", "value": "Detected", "type": "negative"}],
            "flags": ["Cloned voice", 3],
        }
    )
    request = AnalysisRequest(modality="audio", audio_base64="UklGRg==")

    result = analyze_content(request, client=client)

    client.analyze.assert_called_once_with(request)
    assert result.modality == "audio"
    assert result.verdict == "fake"
    assert result.confidence == 100
    assert result.flags == ("Cloned voice",)


def test_unusable_reply_uses_fallback_record() -> None:
    client = _client_returning(None)

    result = analyze_content(AnalysisRequest(modality="text", content="hi"), client=client)

    assert result.modality == "text"
    assert result.verdict == "suspicious"
    assert result.confidence == 50
    assert result.explanation == FALLBACK_EXPLANATION
    assert result.flags == ("Automated analysis inconclusive",)


def test_analysis_appends_to_session() -> None:
    session = AnalysisSession()
    client = _client_returning({"verdict": "authentic", "confidence": 90})

    analyze_content(AnalysisRequest(modality="text", content="a"), client=client, session=session)
    analyze_content(AnalysisRequest(modality="text", content="b"), client=client, session=session)

    results, fusion = session.current()
    assert len(results) == 2
    assert fusion is not None
    assert fusion.overall_verdict == "authentic"
    assert fusion.overall_confidence == 90


def test_oracle_error_leaves_session_untouched() -> None:
    session = AnalysisSession()
    client = Mock(spec=OracleClient)
    client.analyze.side_effect = OracleRateLimitError("slow down")

    with pytest.raises(OracleRateLimitError):
        analyze_content(
            AnalysisRequest(modality="text", content="a"), client=client, session=session
        )

    assert session.current() == ((), None)
