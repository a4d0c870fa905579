"""Utility functions: form input cleaning and path checks."""
import re
from pathlib import Path
from typing import Optional

from fastapi import HTTPException
from markupsafe import Markup, escape

FOLDER_DISALLOWED = re.compile(r"[^A-Za-z0-9_-]")


def resolve_under_root(root: Path, candidate: Path) -> Path:
    """Resolve a path ensuring it's under the root directory."""
    root = root.resolve()
    real = candidate.resolve()
    if root not in real.parents and real != root:
        raise HTTPException(status_code=400, detail="Path is outside root")
    return real


def clean_folder(value: Optional[str]) -> str:
    """Keep only letters, digits, underscores and dashes."""
    return FOLDER_DISALLOWED.sub("", value or "")


def clean_text(value: Optional[str]) -> str:
    """Strip markup, escape for use inside an HTML attribute, and trim.

    The result is already escaped, so it can be placed in templates and
    generated tags as-is.
    """
    if not value:
        return ""
    # lone surrogates from a badly encoded submission
    value = value.encode("utf-8", "replace").decode("utf-8")
    text = Markup(value).striptags()
    return str(escape(str(text))).strip()


def clean_alt(value: Optional[str]) -> str:
    """Like clean_text, with one trailing period dropped."""
    alt = clean_text(value)
    if alt.endswith("."):
        alt = alt[:-1].rstrip()
    return alt


def require(errors: dict, field: str, value: str, label: str) -> None:
    """Record a validation error when a required field came out empty."""
    if not value:
        errors[field] = f"{label} is required."
