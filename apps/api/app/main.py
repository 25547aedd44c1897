from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from truthlens_core import (
    AnalysisRequest,
    AnalysisResult,
    AnalysisSession,
    MultimodalResult,
    OracleClient,
    OracleError,
    analyze_content,
)
from truthlens_core.oracle import OracleCreditsExhaustedError, OracleRateLimitError

from app.settings import settings

logger = logging.getLogger(__name__)

_session = AnalysisSession()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    yield


app = FastAPI(title="TruthLens API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SessionAnalyzeResponse(BaseModel):
    result: AnalysisResult
    fusion: MultimodalResult


class SessionResponse(BaseModel):
    results: list[AnalysisResult]
    fusion: MultimodalResult | None = None


def get_oracle_client() -> OracleClient:
    return OracleClient(
        api_key=settings.oracle_api_key,
        base_url=settings.oracle_base_url,
        model=settings.oracle_model,
        timeout_seconds=settings.oracle_timeout_seconds,
    )


def get_analysis_session() -> AnalysisSession:
    return _session


def _run_analysis(request: AnalysisRequest, client: OracleClient) -> AnalysisResult:
    try:
        return analyze_content(request, client=client)
    except OracleRateLimitError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    except OracleCreditsExhaustedError as exc:
        raise HTTPException(status_code=402, detail=str(exc)) from exc
    except OracleError as exc:
        logger.error("Analysis error for %s: %s", request.modality, exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc


def _session_response(session: AnalysisSession) -> SessionResponse:
    results, fusion = session.current()
    return SessionResponse(results=list(results), fusion=fusion)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/analyze-content", response_model=AnalysisResult)
def analyze_content_route(
    payload: AnalysisRequest,
    client: OracleClient = Depends(get_oracle_client),
) -> AnalysisResult:
    return _run_analysis(payload, client)


@app.post("/v1/session/analyze", response_model=SessionAnalyzeResponse)
def analyze_into_session(
    payload: AnalysisRequest,
    client: OracleClient = Depends(get_oracle_client),
    session: AnalysisSession = Depends(get_analysis_session),
) -> SessionAnalyzeResponse:
    result = _run_analysis(payload, client)
    fusion = session.append(result)
    return SessionAnalyzeResponse(result=result, fusion=fusion)


@app.get("/v1/session", response_model=SessionResponse)
def get_session_state(
    session: AnalysisSession = Depends(get_analysis_session),
) -> SessionResponse:
    return _session_response(session)


@app.delete("/v1/session", response_model=SessionResponse)
def clear_session(
    session: AnalysisSession = Depends(get_analysis_session),
) -> SessionResponse:
    session.clear()
    return _session_response(session)
