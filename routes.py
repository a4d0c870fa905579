"""FastAPI routes for Photos to HTML."""
import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, Form, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import Settings, get_settings
from models import SIZE_CLASSES, GeneratedTagSet, PrintSetForm, SrcsetForm
from photoset import build_print_set, build_srcset
from scanner import ALLOWED_EXTS, DirectoryUnreadable, scan
from utils import clean_alt, clean_folder, clean_text, require, resolve_under_root

logger = logging.getLogger("photoset.routes")

# Configuration
APP_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = APP_DIR / "templates"
WORKFLOWS = ("srcset", "print-set")

# Jinja environment
jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def render(name: str, **ctx) -> HTMLResponse:
    """Render template with context."""
    template = jinja_env.get_template(name)
    ctx.setdefault("title", "Photos to HTML")
    ctx.setdefault("errors", {})
    return HTMLResponse(template.render(**ctx))


def preview_url(workflow: str) -> str:
    return f"/preview/{workflow}/"


def tag_slots(preview: GeneratedTagSet, output: GeneratedTagSet) -> list[dict]:
    """Pair preview and copy-paste HTML for each generated slot, in page order."""
    slots = []
    if output.intro:
        slots.append({"label": "Intro", "preview": preview.intro, "output": output.intro})
    slots += [
        {
            "label": "Featured image srcset",
            "preview": preview.featured_srcset,
            "output": output.featured_srcset,
            "rows": 4,
        },
        {
            "label": "List image srcset",
            "preview": preview.list_srcset,
            "output": output.list_srcset,
            "rows": 4,
        },
        {
            "label": "Figure with caption",
            "preview": preview.figure,
            "output": output.figure,
            "rows": 4,
        },
    ]
    for size in SIZE_CLASSES:
        slots.append(
            {
                "label": f"{size.width}x{size.height}",
                "preview": preview.size_tag(size.width),
                "output": output.size_tag(size.width),
            }
        )
    if output.figures:
        slots.append(
            {
                "label": "Photo set figures",
                "preview": "\n".join(preview.figures),
                "output": "\n".join(output.figures),
                "rows": min(20, 2 * len(output.figures)),
            }
        )
    return slots


def scan_photos(settings: Settings, workflow: str, errors: dict):
    """Scan the workflow's folder, recording a failure under photoset_dir."""
    scan_dir = settings.scan_dir(workflow)
    try:
        return scan(scan_dir)
    except DirectoryUnreadable as exc:
        logger.warning("Cannot read %s photos: %s", workflow, exc)
        errors["photoset_dir"] = f"Cannot read photos directory {exc.path} ({exc.reason})."
        return None


def index():
    """Landing page linking to both workflows."""
    return render("index.html")


def srcset_form(settings: Settings = Depends(get_settings)):
    """Empty srcset form."""
    return render(
        "srcset.html",
        title="Make Srcset - Photos to HTML",
        form=SrcsetForm(),
        base_url=settings.public_base_url,
        scan_dir=settings.srcset_dir,
        size_classes=SIZE_CLASSES,
    )


def srcset_submit(
    photoset_folder: Optional[str] = Form(None),
    photoset_alt: Optional[str] = Form(None),
    photoset_alt_prefix: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
):
    """Generate featured/list srcsets and per-size tags from the scanned set."""
    form = SrcsetForm(
        folder=clean_folder(photoset_folder),
        alt=clean_alt(photoset_alt),
        alt_prefix=clean_text(photoset_alt_prefix),
    )
    require(form.errors, "photoset_folder", form.folder, "Online folder")
    require(form.errors, "photoset_alt", form.alt, "Alt text")

    ctx = dict(
        title="Make Srcset - Photos to HTML",
        form=form,
        base_url=settings.public_base_url,
        scan_dir=settings.srcset_dir,
        size_classes=SIZE_CLASSES,
    )
    if not form.valid:
        return render("srcset.html", errors=form.errors, **ctx)

    photos = scan_photos(settings, "srcset", form.errors)
    if photos is None:
        return render("srcset.html", errors=form.errors, **ctx)

    output = build_srcset(
        photos, f"{settings.public_base_url}{form.folder}/", form.alt, form.alt_prefix
    )
    preview = build_srcset(photos, preview_url("srcset"), form.alt, form.alt_prefix)
    return render(
        "srcset.html",
        generated=True,
        empty=output.empty,
        slots=tag_slots(preview, output),
        **ctx,
    )


def print_set_form(settings: Settings = Depends(get_settings)):
    """Empty print photo set form."""
    return render(
        "print_set.html",
        title="Print Photo Set - Photos to HTML",
        form=PrintSetForm(),
        base_url=settings.public_base_url,
        scan_dir=settings.print_set_dir,
    )


def print_set_submit(
    photoset_title: Optional[str] = Form(None),
    photoset_intro: Optional[str] = Form(None),
    photoset_folder: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
):
    """Generate intro, size tags and numbered figures for a print photo set."""
    form = PrintSetForm(
        folder=clean_folder(photoset_folder),
        title=clean_alt(photoset_title),
        intro=clean_text(photoset_intro),
    )
    require(form.errors, "photoset_folder", form.folder, "Online folder")
    require(form.errors, "photoset_title", form.title, "Title")
    require(form.errors, "photoset_intro", form.intro, "Intro")

    ctx = dict(
        title="Print Photo Set - Photos to HTML",
        form=form,
        base_url=settings.public_base_url,
        scan_dir=settings.print_set_dir,
    )
    if not form.valid:
        return render("print_set.html", errors=form.errors, **ctx)

    photos = scan_photos(settings, "print-set", form.errors)
    if photos is None:
        return render("print_set.html", errors=form.errors, **ctx)

    output = build_print_set(
        photos, f"{settings.public_base_url}{form.folder}/", form.title, form.intro
    )
    preview = build_print_set(photos, preview_url("print-set"), form.title, form.intro)
    return render(
        "print_set.html",
        generated=True,
        empty=output.empty,
        slots=tag_slots(preview, output),
        **ctx,
    )


def preview_media(
    workflow: str, filename: str, settings: Settings = Depends(get_settings)
):
    """Serve a scanned photo so the preview section can show it."""
    if workflow not in WORKFLOWS:
        raise HTTPException(404, "Unknown workflow")
    root = settings.scan_dir(workflow)
    real = resolve_under_root(root, root / filename)
    if real.suffix.lower() not in ALLOWED_EXTS or not real.is_file():
        raise HTTPException(404, "File missing on disk")
    return FileResponse(real)
