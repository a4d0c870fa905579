"""
Photos to HTML – srcset and figure snippets for a CMS (FastAPI)

Quick start
-----------
1) python -m venv .venv && source .venv/bin/activate  # or .venv\\Scripts\\activate on Windows
2) pip install -e .
3) cp .env.sample .env and fill in the public base URL and both photo folders
4) python app.py  # auto-writes templates/static
5) Open http://localhost:8001 → pick a workflow → fill the form → copy the HTML

Notes
-----
• Nothing is stored; every submission rescans the folder.
• Photos must be named BASENAME_WIDTHxHEIGHT.ext, e.g. Wall_1024x576.jpg.
• The preview is served from the local folders, the copy-paste HTML points at the public base URL.
"""

import logging
import sys
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from markupsafe import escape

from config import ConfigurationError, get_settings, load_settings
from routes import (
    index,
    preview_media,
    print_set_form,
    print_set_submit,
    srcset_form,
    srcset_submit,
)
from templates_static import ensure_assets

logger = logging.getLogger("photoset")

# Configuration
APP_DIR = Path(__file__).resolve().parent
STATIC_DIR = APP_DIR / "static"

# Create FastAPI app; every route checks the settings first
app = FastAPI(title="Photos to HTML", dependencies=[Depends(get_settings)])

# Ensure templates and static files exist
ensure_assets()

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.exception_handler(ConfigurationError)
async def configuration_error(request: Request, exc: ConfigurationError):
    """Refuse to serve anything until the settings are complete."""
    logger.error("Configuration error: %s", exc)
    return HTMLResponse(
        f"<!doctype html><title>Configuration error</title><p>{escape(str(exc))}</p>",
        status_code=500,
    )


# Routes
app.get("/", response_class=HTMLResponse)(index)
app.get("/make-srcset", response_class=HTMLResponse)(srcset_form)
app.post("/make-srcset", response_class=HTMLResponse)(srcset_submit)
app.get("/print-photo-set", response_class=HTMLResponse)(print_set_form)
app.post("/print-photo-set", response_class=HTMLResponse)(print_set_submit)
app.get("/preview/{workflow}/{filename}")(preview_media)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        load_settings()
    except ConfigurationError as exc:
        sys.exit(str(exc))

    # Allow `python app.py 8000`
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8001
    print(f"→ Open http://localhost:{port}")
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=port, reload=True)
