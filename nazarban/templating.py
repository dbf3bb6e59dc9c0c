# nazarban/templating.py
from fastapi.templating import Jinja2Templates

from .config import settings

# Player chrome per language; anything other than "fa" falls back to English
LABELS = {
    "fa": {
        "about_title": "ویدیوی معرفی نظربان",
        "service_title": "ویدیوی خدمات",
        "unsupported": "مرورگر شما از پخش ویدیو پشتیبانی نمی‌کند.",
    },
    "en": {
        "about_title": "Nazarban Introduction Video",
        "service_title": "Service Video",
        "unsupported": "Your browser does not support the video tag.",
    },
}

IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"


def labels_for(lang: str) -> dict:
    return LABELS["fa"] if lang == "fa" else LABELS["en"]


def text_direction(lang: str) -> str:
    return "rtl" if lang == "fa" else "ltr"


templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))
templates.env.globals["settings"] = settings
templates.env.globals["labels_for"] = labels_for
templates.env.globals["text_direction"] = text_direction
templates.env.globals["IFRAME_ALLOW"] = IFRAME_ALLOW
