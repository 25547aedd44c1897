from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Callable
from urllib.parse import urlsplit

import requests

from . import prompts
from .parse import extract_json_object
from .request import DEFAULT_IMAGE_MIME_TYPE, AnalysisRequest

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_MODEL = "google/gemini-2.5-pro"

HttpPost = Callable[..., requests.Response]

EMPTY_VIDEO_RESPONSE: dict[str, Any] = {
    "verdict": "suspicious",
    "confidence": 50,
    "explanation": "Could not extract frames from video for analysis",
    "details": [],
    "flags": ["Unable to process video"],
}


class OracleError(RuntimeError):
    """Raised when the analysis oracle cannot produce a response."""


class OracleRateLimitError(OracleError):
    """Raised when the oracle rejects a request with HTTP 429."""


class OracleCreditsExhaustedError(OracleError):
    """Raised when the oracle rejects a request with HTTP 402."""


def _image_part(base64_data: str, mime_type: str) -> dict[str, Any]:
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{mime_type};base64,{base64_data}"},
    }


def _decode_text_document(base64_data: str) -> str | None:
    try:
        return base64.b64decode(base64_data, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None


class OracleClient:
    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 60.0,
        http_post: HttpPost = requests.post,
    ) -> None:
        self.api_key = (api_key or "").strip()
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.http_post = http_post

    def analyze(self, request: AnalysisRequest) -> dict[str, Any] | None:
        """Route a request to the judge and return its JSON payload.

        Returns ``None`` when the judge replied but no JSON object could be
        extracted from the reply. Raises ``OracleError`` on request failures.
        """
        logger.info("Analyzing content type: %s", request.modality)

        if request.modality == "text":
            return self.analyze_text(request.content or "")
        if request.modality == "url":
            return self.analyze_url(request.content or "")
        if request.modality == "image":
            return self.analyze_image(
                request.image_base64 or "",
                request.resolved_mime_type(DEFAULT_IMAGE_MIME_TYPE),
            )
        if request.modality == "video":
            return self.analyze_video(request.video_frames)
        if request.modality == "document":
            return self.analyze_document(
                request.document_base64 or "",
                request.resolved_file_name,
                request.resolved_mime_type(),
            )
        if request.modality == "audio":
            return self.analyze_audio(request.resolved_file_name, request.resolved_mime_type())
        raise OracleError(f"Unknown content type: {request.modality}")

    def analyze_text(self, text: str) -> dict[str, Any] | None:
        return self._complete(prompts.SYSTEM_PROMPT, prompts.text_prompt(text))

    def analyze_url(self, url: str) -> dict[str, Any] | None:
        try:
            domain = urlsplit(url.strip()).hostname
        except ValueError as exc:
            raise OracleError(f"Invalid URL: {url}") from exc
        if not domain:
            raise OracleError(f"Invalid URL: {url}")
        return self._complete(prompts.SYSTEM_PROMPT, prompts.url_prompt(url, domain))

    def analyze_image(self, base64_data: str, mime_type: str) -> dict[str, Any] | None:
        content = [
            {"type": "text", "text": prompts.image_prompt()},
            _image_part(base64_data, mime_type),
        ]
        return self._complete(prompts.SYSTEM_PROMPT, content, label="vision")

    def analyze_video(self, frames: list[str]) -> dict[str, Any] | None:
        if not frames:
            return dict(EMPTY_VIDEO_RESPONSE)

        content = [{"type": "text", "text": prompts.video_prompt(len(frames))}]
        content.extend(_image_part(frame, "image/jpeg") for frame in frames)
        return self._complete(prompts.VIDEO_SYSTEM_PROMPT, content, label="video")

    def analyze_document(
        self, base64_data: str, file_name: str, mime_type: str
    ) -> dict[str, Any] | None:
        prompt = prompts.document_prompt(file_name, mime_type)

        if "pdf" in mime_type or "image" in mime_type:
            content = [
                {"type": "text", "text": prompt},
                _image_part(base64_data, mime_type),
            ]
            return self._complete(prompts.SYSTEM_PROMPT, content, label="vision")

        text = _decode_text_document(base64_data)
        if text is not None:
            return self.analyze_text(f"[Document: {file_name}]\n\n{text}")

        note = "\n\nNote: Document is binary/encoded. Analyze based on file metadata and type."
        return self._complete(prompts.SYSTEM_PROMPT, prompt + note)

    def analyze_audio(self, file_name: str, mime_type: str) -> dict[str, Any] | None:
        return self._complete(prompts.SYSTEM_PROMPT, prompts.audio_prompt(file_name, mime_type))

    def _complete(
        self,
        system_prompt: str,
        user_content: str | list[dict[str, Any]],
        *,
        label: str = "",
    ) -> dict[str, Any] | None:
        if not self.api_key:
            raise OracleError("Oracle API key is not configured")

        failure = f"AI {label} analysis failed" if label else "AI analysis failed"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = self.http_post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=headers,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("Oracle request failed: %s", exc)
            raise OracleError(failure) from exc

        if response.status_code >= 400:
            logger.error("Oracle error: %s %s", response.status_code, response.text[:300])
            if response.status_code == 429:
                raise OracleRateLimitError("Rate limit exceeded. Please try again in a moment.")
            if response.status_code == 402:
                raise OracleCreditsExhaustedError(
                    "AI credits exhausted. Please add credits to continue."
                )
            raise OracleError(failure)

        try:
            body = response.json()
        except ValueError as exc:
            raise OracleError("Oracle response was not valid JSON") from exc

        return extract_json_object(_message_content(body))


def _message_content(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None
