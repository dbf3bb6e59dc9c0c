import secrets
from typing import Optional

from fastapi import Request

from .config import settings


def normalize_lang(value: Optional[str]) -> str:
    """
    Normalize a language code coming from a query string or cookie.

    Args:
        value (Optional[str]): Raw code, e.g. ``"FA"`` or ``" en "``.

    Returns:
        str: Lower-cased code, or ``settings.DEFAULT_LANGUAGE`` if blank.
    """
    lang = (value or "").strip().lower()
    return lang or settings.DEFAULT_LANGUAGE


def get_language(request: Request, lang: Optional[str] = None) -> str:
    """
    Resolve the visitor's language for this request.

    Order: explicit ``lang`` query parameter, then the language cookie set by
    the front end, then the configured default.

    Args:
        request (Request): Incoming request.
        lang (Optional[str]): ``?lang=`` query value, injected by FastAPI.

    Returns:
        str: Language code to hand to the resolver.
    """
    return normalize_lang(lang or request.cookies.get(settings.LANGUAGE_COOKIE))


def verify_admin_password(plain: Optional[str]) -> bool:
    """
    Check a submitted password against ``settings.ADMIN_PASSWORD``.

    Args:
        plain (Optional[str]): Password from the request body.

    Returns:
        bool: True on match. Always False while no admin password is set.
    """
    expected = settings.ADMIN_PASSWORD
    if not expected or not plain:
        return False
    return secrets.compare_digest(plain.encode("utf-8"), expected.encode("utf-8"))
