from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from truthlens_core.types import Modality

DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"
DEFAULT_FILE_MIME_TYPE = "application/octet-stream"
DEFAULT_FILE_NAME = "unknown"


class AnalysisRequest(BaseModel):
    """One piece of already-encoded content to send to the judge."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    modality: Modality = Field(alias="type")
    content: str | None = None
    image_base64: str | None = Field(default=None, alias="imageBase64")
    video_frames: list[str] = Field(default_factory=list, alias="videoFrames")
    document_base64: str | None = Field(default=None, alias="documentBase64")
    audio_base64: str | None = Field(default=None, alias="audioBase64")
    file_name: str | None = Field(default=None, alias="fileName")
    mime_type: str | None = Field(default=None, alias="mimeType")

    @model_validator(mode="after")
    def _check_payload(self) -> AnalysisRequest:
        if self.modality in ("text", "url") and not (self.content or "").strip():
            raise ValueError(f"content is required for {self.modality} analysis")
        if self.modality == "image" and not self.image_base64:
            raise ValueError("imageBase64 is required for image analysis")
        if self.modality == "document" and not self.document_base64:
            raise ValueError("documentBase64 is required for document analysis")
        if self.modality == "audio" and not self.audio_base64:
            raise ValueError("audioBase64 is required for audio analysis")
        return self

    @property
    def resolved_file_name(self) -> str:
        return self.file_name or DEFAULT_FILE_NAME

    def resolved_mime_type(self, default: str = DEFAULT_FILE_MIME_TYPE) -> str:
        return self.mime_type or default
