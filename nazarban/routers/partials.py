# nazarban/routers/partials.py
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse

from ..embeds import NoEmbed, VideoReference, resolve
from ..services import content_store
from ..templating import labels_for, templates
from ..utils import get_language
from .videos import service_reference

router = APIRouter(prefix="/partials", tags=["partials"])


def _render_player(request: Request, reference: VideoReference, lang: Optional[str], title_key: str) -> Response:
    lang = get_language(request, lang)
    embed = resolve(reference, lang)
    # nothing playable -> the page keeps the video region hidden
    if isinstance(embed, NoEmbed):
        return Response(status_code=204)
    return templates.TemplateResponse(
        request,
        "partials/video_player.html",
        {"embed": embed, "lang": lang, "title": labels_for(lang)[title_key]},
    )


@router.get("/about-video", response_class=HTMLResponse)
def about_video(request: Request, lang: Optional[str] = None):
    data = content_store.load_about_video()
    return _render_player(request, data.get("videoUrl"), lang, "about_title")


@router.get("/services/{service_id}/video", response_class=HTMLResponse)
def service_video(service_id: str, request: Request, lang: Optional[str] = None):
    return _render_player(request, service_reference(service_id), lang, "service_title")
