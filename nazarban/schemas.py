from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .embeds import ResolvedEmbed


# ============================
# Base Schema
# ============================
class BaseSchema(BaseModel):
    """Base schema class for all payloads.

    Unknown keys are ignored so older admin panels keep working.
    """

    model_config = ConfigDict(extra="ignore")


# A single URL or a language code -> URL mapping
VideoReferenceField = Union[str, Dict[str, str], None]


# ============================
# Helper Functions
# ============================
def _clean_reference(value: Any) -> Any:
    """Trim URLs in a video reference.

    Args:
        value (Any): Raw value from the request body.

    Returns:
        Any: The value with surrounding whitespace removed from every URL;
        ``None`` becomes an empty string. Other types are left for the
        field validation to reject.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict):
        return {
            str(lang).strip().lower(): ("" if url is None else url.strip() if isinstance(url, str) else url)
            for lang, url in value.items()
        }
    return value


# ============================
# Input Schemas
# ============================
class AdminPayload(BaseSchema):
    """Any admin body; ``password`` is optional when the session is logged in."""

    password: Optional[str] = None


class LoginIn(BaseSchema):
    password: str = ""


class AboutVideoIn(AdminPayload):
    """Schema for saving the about-page video."""

    videoUrl: VideoReferenceField = ""

    @field_validator("videoUrl", mode="before")
    @classmethod
    def _clean_video_url(cls, value):
        return _clean_reference(value)


class ServicesVideosIn(AdminPayload):
    """Schema for saving the per-service videos.

    ``videos`` stays loosely typed here; the route answers 400 for anything
    that is not an object, matching the public API.
    """

    videos: Any = None


class ResolveIn(BaseSchema):
    """Schema for previewing how a reference will be played."""

    videoUrl: VideoReferenceField = ""
    lang: Optional[str] = None

    @field_validator("videoUrl", mode="before")
    @classmethod
    def _clean_video_url(cls, value):
        return _clean_reference(value)


# ============================
# Output Schemas
# ============================
class EmbedOut(BaseSchema):
    """JSON form of a resolved embed."""

    kind: str
    url: Optional[str] = None
    mimeType: Optional[str] = None
    provider: Optional[str] = None

    @classmethod
    def from_embed(cls, embed: ResolvedEmbed) -> "EmbedOut":
        return cls(**embed.to_dict())


class EmbedResponse(BaseSchema):
    success: bool = True
    lang: str
    embed: EmbedOut


def clean_services_videos(videos: Dict[str, Any]) -> Dict[str, Any]:
    """Apply the same trimming as ``AboutVideoIn`` to each service reference."""
    cleaned = {}
    for sid, ref in videos.items():
        ref = _clean_reference(ref)
        cleaned[sid] = ref if isinstance(ref, (str, dict)) else ""
    return cleaned
