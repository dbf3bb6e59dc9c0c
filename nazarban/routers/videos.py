# nazarban/routers/videos.py
from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from ..embeds import VideoReference, resolve
from ..schemas import (
    AboutVideoIn,
    EmbedOut,
    EmbedResponse,
    ServicesVideosIn,
    clean_services_videos,
)
from ..services import content_store
from ..services.content_store import ContentWriteError
from ..utils import get_language
from .admin import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["videos"])


def _embed_response(reference: VideoReference, request: Request, lang: Optional[str]) -> EmbedResponse:
    lang = get_language(request, lang)
    return EmbedResponse(lang=lang, embed=EmbedOut.from_embed(resolve(reference, lang)))


def service_reference(service_id: str) -> VideoReference:
    reference = content_store.get_service_video(service_id)
    if reference is None:
        raise HTTPException(404, f"Unknown service: {service_id}")
    return reference


# ---- About page ----
@router.get("/about/video")
def get_about_video():
    data = content_store.load_about_video()
    return {"success": True, "videoUrl": data.get("videoUrl") or ""}


@router.post("/about/video")
def save_about_video(payload: AboutVideoIn, request: Request):
    require_admin(request, payload.password)
    try:
        data = content_store.save_about_video(payload.videoUrl)
    except ContentWriteError:
        raise HTTPException(500, "Failed to save about video")
    return {
        "success": True,
        "message": "About video URL saved successfully",
        "videoUrl": data["videoUrl"],
    }


@router.get("/about/video/embed", response_model=EmbedResponse)
def about_video_embed(request: Request, lang: Optional[str] = None):
    data = content_store.load_about_video()
    return _embed_response(data.get("videoUrl"), request, lang)


# ---- Services page ----
@router.get("/services/videos")
def get_services_videos():
    return {"success": True, "videos": content_store.load_services_videos()}


@router.post("/services/videos")
def save_services_videos(payload: ServicesVideosIn, request: Request):
    require_admin(request, payload.password)
    if not isinstance(payload.videos, dict):
        raise HTTPException(400, "Invalid videos data format")
    try:
        data = content_store.save_services_videos(clean_services_videos(payload.videos))
    except ContentWriteError:
        raise HTTPException(500, "Failed to save services videos")
    return {
        "success": True,
        "message": "Services videos saved successfully",
        "videos": data,
    }


@router.get("/services/videos/{service_id}/embed", response_model=EmbedResponse)
def service_video_embed(service_id: str, request: Request, lang: Optional[str] = None):
    return _embed_response(service_reference(service_id), request, lang)
