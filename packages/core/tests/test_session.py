from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from truthlens_core.session import AnalysisSession
from truthlens_core.types import AnalysisResult


def _result(modality: str, verdict: str = "authentic", confidence: float = 100) -> AnalysisResult:
    return AnalysisResult(
        modality=modality,
        verdict=verdict,
        confidence=confidence,
        explanation="Analysis completed.",
    )


def test_new_session_is_empty() -> None:
    session = AnalysisSession()

    results, fusion = session.current()

    assert results == ()
    assert fusion is None
    assert len(session) == 0


def test_append_recomputes_fusion_over_history() -> None:
    session = AnalysisSession()

    first = session.append(_result("text", confidence=80))
    second = session.append(_result("text", confidence=95))
    results, fusion = session.current()

    assert len(first.modalities) == 1
    assert len(second.modalities) == 2
    assert fusion == second
    assert fusion.overall_confidence == 88
    assert [r.confidence for r in results] == [80, 95]


def test_fake_vote_flips_session_verdict() -> None:
    session = AnalysisSession()

    assert session.append(_result("text")).overall_verdict == "authentic"
    assert session.append(_result("image", "fake", 90)).overall_verdict == "fake"


def test_clear_resets_results_and_fusion() -> None:
    session = AnalysisSession()
    session.append(_result("url"))

    session.clear()

    assert session.current() == ((), None)


def test_snapshot_is_consistent_under_concurrent_appends() -> None:
    session = AnalysisSession()
    modalities = ["text", "url", "image", "video", "document", "audio"] * 10

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda m: session.append(_result(m)), modalities))

    results, fusion = session.current()

    assert len(results) == len(modalities)
    assert fusion is not None
    assert fusion.modalities == results


def test_len_waits_for_in_flight_update() -> None:
    session = AnalysisSession()
    session.append(_result("text"))
    lengths: list[int] = []

    with session._lock:
        reader = threading.Thread(target=lambda: lengths.append(len(session)))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()

    reader.join(timeout=5)
    assert lengths == [1]
