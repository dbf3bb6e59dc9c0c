# nazarban/embeds.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Mapping, Optional, Union
from urllib.parse import urlsplit

# Language fallback after the requested one
FALLBACK_LANGUAGES = ("en", "fa")

HLS_MIME = "application/x-mpegURL"
MP4_MIME = "video/mp4"

VideoReference = Union[str, Mapping[str, str], None]


@dataclass(frozen=True)
class NoEmbed:
    """Nothing playable: the caller renders no player at all."""

    kind: ClassVar[str] = "none"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "url": None, "mimeType": None, "provider": None}


@dataclass(frozen=True)
class NativeVideo:
    """A file or stream for an HTML5 <video> element."""

    url: str
    mime_type: str
    provider: Optional[str] = field(default=None, compare=False)

    kind: ClassVar[str] = "video"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "url": self.url, "mimeType": self.mime_type, "provider": self.provider}


@dataclass(frozen=True)
class IframeEmbed:
    """A third-party player page loaded into an <iframe>."""

    url: str
    provider: Optional[str] = field(default=None, compare=False)

    kind: ClassVar[str] = "iframe"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "url": self.url, "mimeType": None, "provider": self.provider}


ResolvedEmbed = Union[NoEmbed, NativeVideo, IframeEmbed]

NO_EMBED = NoEmbed()


# ===========================
# Provider table
# ===========================
def _url_path(url: str) -> str:
    try:
        return urlsplit(url).path
    except ValueError:
        # e.g. "http://[broken" is not splittable, match on the raw text
        return url


@dataclass(frozen=True)
class ProviderEntry:
    name: str
    pattern: re.Pattern
    build: Callable[[str, re.Match], ResolvedEmbed]
    # which part of the URL the pattern is searched in
    target: Callable[[str], str] = lambda url: url

    def match(self, url: str) -> Optional[re.Match]:
        return self.pattern.search(self.target(url))


def _youtube(url: str, m: re.Match) -> ResolvedEmbed:
    return IframeEmbed(f"https://www.youtube.com/embed/{m.group(1)}", provider="youtube")


def _vimeo(url: str, m: re.Match) -> ResolvedEmbed:
    return IframeEmbed(f"https://player.vimeo.com/video/{m.group(1)}", provider="vimeo")


def _aparat(url: str, m: re.Match) -> ResolvedEmbed:
    return IframeEmbed(
        f"https://www.aparat.com/video/video/embed/videohash/{m.group(1)}/vt/frame",
        provider="aparat",
    )


def _direct(url: str, m: re.Match) -> ResolvedEmbed:
    mime = HLS_MIME if _url_path(url).lower().endswith(".m3u8") else MP4_MIME
    return NativeVideo(url, mime, provider="direct")


def _embed(url: str, m: re.Match) -> ResolvedEmbed:
    return IframeEmbed(url, provider="embed")


PROVIDERS: tuple[ProviderEntry, ...] = (
    ProviderEntry(
        name="youtube",
        pattern=re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([A-Za-z0-9_-]{11})"),
        build=_youtube,
    ),
    ProviderEntry(
        name="vimeo",
        pattern=re.compile(r"vimeo\.com/(?:video/)?(\d+)"),
        build=_vimeo,
    ),
    ProviderEntry(
        name="aparat",
        pattern=re.compile(r"aparat\.com/v/([A-Za-z0-9]+)"),
        build=_aparat,
    ),
    # Arvan Cloud VOD: https://<channel>.arvanvod.ir/<id>/<file>
    ProviderEntry(
        name="arvan",
        pattern=re.compile(r"https?://[^/]+\.arvanvod\.ir/[^/]+/[^/]+"),
        build=_direct,
    ),
    ProviderEntry(
        name="direct",
        pattern=re.compile(r"\.(?:mp4|webm|ogg|m3u8)$", re.IGNORECASE),
        build=_direct,
        target=_url_path,
    ),
    ProviderEntry(
        name="embed",
        pattern=re.compile(r"embed"),
        build=_embed,
    ),
)


def get_provider(name: str) -> ProviderEntry:
    provider = next((p for p in PROVIDERS if p.name == name), None)
    if not provider:
        raise ValueError(f"Unknown provider: {name}")
    return provider


# ===========================
# Resolution
# ===========================
def select_url(reference: VideoReference, preferred_lang: str) -> str:
    """Pick the URL to play from a single URL or a per-language mapping.

    Mappings are tried in the order ``preferred_lang``, ``"en"``, ``"fa"``;
    the first non-empty string wins. Anything else yields ``""``.
    """
    if isinstance(reference, str):
        return reference
    if not isinstance(reference, Mapping):
        return ""

    for lang in (preferred_lang, *FALLBACK_LANGUAGES):
        value = reference.get(lang)
        if isinstance(value, str) and value:
            return value
    return ""


def resolve_url(url: str) -> ResolvedEmbed:
    """Map a single URL to the player that can show it."""
    if not isinstance(url, str) or not url:
        return NO_EMBED

    for provider in PROVIDERS:
        m = provider.match(url)
        if m:
            return provider.build(url, m)
    return NO_EMBED


def resolve(reference: VideoReference, preferred_lang: str) -> ResolvedEmbed:
    """Resolve a video reference into a render decision.

    Args:
        reference: A URL string, or a mapping of language code to URL.
        preferred_lang: Language code requested by the visitor.

    Returns:
        ResolvedEmbed: ``NoEmbed``, ``NativeVideo`` or ``IframeEmbed``.
        Unrecognized or missing input is ``NoEmbed``; this never raises.
    """
    return resolve_url(select_url(reference, preferred_lang))
