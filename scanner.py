"""Image scanning utilities."""
import logging
import os
from pathlib import Path
from typing import Iterable

from PIL import Image as PILImage

from models import PhotoFile

logger = logging.getLogger("photoset.scanner")

# Configuration
ALLOWED_EXTS = {".jpg", ".jpeg", ".gif", ".png"}


class DirectoryUnreadable(Exception):
    """The scan directory does not exist or cannot be listed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def iter_image_files(root: Path) -> Iterable[Path]:
    """Iterate image files directly inside root, sorted by name."""
    if not root.exists():
        raise DirectoryUnreadable(root, "does not exist")
    if not root.is_dir():
        raise DirectoryUnreadable(root, "is not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise DirectoryUnreadable(root, "is not readable")
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise DirectoryUnreadable(root, exc.strerror or str(exc)) from exc

    for p in entries:
        if p.is_file() and p.suffix.lower() in ALLOWED_EXTS:
            yield p


def read_image_meta(path: Path) -> tuple[int, int]:
    """Read image dimensions."""
    with PILImage.open(path) as im:
        return im.width, im.height


def scan(root_dir: Path) -> list[PhotoFile]:
    """List the photos in root_dir with their pixel dimensions."""
    photos = []
    for file in iter_image_files(root_dir):
        try:
            w, h = read_image_meta(file)
        except (OSError, ValueError, PILImage.DecompressionBombError) as exc:
            # unreadable, not really an image, or too large to trust
            logger.debug("Skipping %s: %s", file.name, exc)
            continue
        photos.append(PhotoFile(filename=file.name, width=w, height=h))

    logger.info("Scanned %s: %d photo(s)", root_dir, len(photos))
    return photos
