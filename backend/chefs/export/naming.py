"""
Export file naming.

- slug(s): NFKD Unicode normalization → ASCII transliteration → lowercase → max 64 chars
- export_filename(form, type, format): "<slug(form name)>_<type>.<format>", lowercase
- content_disposition(filename): attachment header value
"""
import re
import unicodedata
from typing import Any


def slug(value: Any, max_length: int = 64) -> str:
    """
    Convert value to slug (filesystem-safe identifier).

    Idempotent: slug(slug(x)) == slug(x)

    Examples:
        slug("Hello World") → "hello_world"
        slug("José's Form") → "jose_s_form"
        slug("Permit #123") → "permit_123"
    """
    if not value:
        return ""

    s = unicodedata.normalize("NFKD", str(value))
    s = s.encode("ascii", "ignore").decode("ascii")
    s = s.lower()

    s = re.sub(r"[^a-z0-9]+", "_", s)
    s = re.sub(r"_+", "_", s)
    s = s.strip("_")

    if len(s) > max_length:
        s = s[:max_length].rstrip("_")

    return s


def export_filename(form, export_type: str, export_format: str) -> str:
    """File name offered to the client for an export of a form."""
    base = slug(getattr(form, "name", None)) or "form"
    return f"{base}_{export_type}.{export_format}".lower()


def content_disposition(filename: str) -> str:
    return f'attachment; filename="{filename}"'
