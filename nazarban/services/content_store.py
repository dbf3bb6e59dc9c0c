from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from ..config import settings

logger = logging.getLogger(__name__)


class ContentWriteError(RuntimeError):
    """Raised when a content file cannot be written."""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def content_path(filename: str) -> Path:
    """Return the absolute path of a content file inside CONTENT_DIR.

    Args:
        filename (str): Bare file name, e.g. ``aboutVideo.json``.

    Returns:
        Path: Location of the file. The directory is created if needed.
    """
    directory = Path(settings.CONTENT_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / filename


def write_json(path: Path, data: Mapping[str, Any]) -> None:
    """Write ``data`` as pretty UTF-8 JSON, replacing the file atomically.

    Each call writes its own temp file next to ``path``, so concurrent saves
    never share an intermediate file; the last ``os.replace`` wins.
    """
    tmp_name: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            json.dump(data, tmp, ensure_ascii=False, indent=2)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name:
            Path(tmp_name).unlink(missing_ok=True)
        logger.exception("[content] write failed: %s", path)
        raise ContentWriteError(f"Could not write {path.name}") from e


def read_json(path: Path, default: Mapping[str, Any]) -> dict:
    """Load a JSON object from ``path``.

    A missing, unreadable or non-object file is replaced by ``default``,
    which is also written back so the next read finds it.

    Args:
        path (Path): File to read.
        default (Mapping[str, Any]): Document used when the file is unusable.

    Returns:
        dict: The stored document or a copy of ``default``.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("[content] %s not found, creating a new one", path.name)
        data = None
    except (OSError, ValueError):
        logger.warning("[content] %s is not valid JSON, resetting it", path.name)
        data = None

    if isinstance(data, dict):
        return data

    fresh = dict(default)
    write_json(path, fresh)
    return fresh


# ===========================
# About page video
# ===========================
def _about_path() -> Path:
    return content_path(settings.ABOUT_VIDEO_FILE)


def load_about_video() -> dict:
    return read_json(_about_path(), {"videoUrl": ""})


def save_about_video(video_url: Any) -> dict:
    """Store the about-page video reference (empty clears it)."""
    data = {
        "videoUrl": video_url or "",
        "updatedAt": _now_iso(),
    }
    write_json(_about_path(), data)
    logger.info("[content] about video saved")
    return data


# ===========================
# Services page videos
# ===========================
def _services_path() -> Path:
    return content_path(settings.SERVICES_VIDEOS_FILE)


def load_services_videos() -> dict:
    return read_json(_services_path(), {sid: "" for sid in settings.SERVICE_IDS})


def save_services_videos(videos: Mapping[str, Any]) -> dict:
    """Store one video reference per configured service id.

    Ids not listed in ``settings.SERVICE_IDS`` are dropped; missing ones are
    stored as an empty string.
    """
    data: dict[str, Any] = {sid: videos.get(sid) or "" for sid in settings.SERVICE_IDS}
    data["updatedAt"] = _now_iso()
    write_json(_services_path(), data)
    logger.info("[content] services videos saved")
    return data


def get_service_video(service_id: str) -> Optional[Any]:
    """Return the stored reference for ``service_id``; None if the id is unknown."""
    if service_id not in settings.SERVICE_IDS:
        return None
    return load_services_videos().get(service_id) or ""
