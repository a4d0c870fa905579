from pathlib import Path

import pytest
from PIL import Image as PILImage

from config import Settings


def make_photo(folder: Path, name: str, size=None) -> Path:
    """Write a small solid image; size defaults to the one in the filename."""
    if size is None:
        stem = Path(name).stem
        w, h = stem.rsplit("_", 1)[1].split("x")
        size = (int(w), int(h))
    path = folder / name
    fmt = {".png": "PNG", ".gif": "GIF"}.get(path.suffix.lower(), "JPEG")
    PILImage.new("RGB", size, (120, 140, 160)).save(path, format=fmt)
    return path


@pytest.fixture
def photo_dirs(tmp_path):
    srcset_dir = tmp_path / "photos"
    print_dir = tmp_path / "print-photos"
    srcset_dir.mkdir()
    print_dir.mkdir()
    return srcset_dir, print_dir


@pytest.fixture
def settings(photo_dirs):
    srcset_dir, print_dir = photo_dirs
    return Settings(
        public_base_url="https://photos.example.com/hikes",
        srcset_dir=srcset_dir,
        print_set_dir=print_dir,
    )


@pytest.fixture
def client(settings):
    from fastapi.testclient import TestClient

    from app import app
    from config import get_settings

    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
