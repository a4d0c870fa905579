import pytest
from fastapi import HTTPException

import config
from routes import preview_media
from tests.conftest import make_photo

PUBLIC = "https://photos.example.com/hikes/"


def post_srcset(client, **overrides):
    data = {
        "photoset_folder": "Knot Wall!",
        "photoset_alt": "Hikers on the wall.",
        "photoset_alt_prefix": "Chinese Knot",
    }
    data.update(overrides)
    return client.post("/make-srcset", data=data)


def test_index_links_workflows(client):
    r = client.get("/")
    assert r.status_code == 200
    assert 'href="/make-srcset"' in r.text
    assert 'href="/print-photo-set"' in r.text


def test_srcset_form_shows_base_url_and_naming_rules(client):
    r = client.get("/make-srcset")
    assert r.status_code == 200
    assert PUBLIC in r.text
    assert "BASENAME_1024x576.jpg" in r.text
    assert "Photos preview and HTML" not in r.text


def test_srcset_generates_preview_and_copy_paste(client, photo_dirs):
    srcset_dir, _ = photo_dirs
    for name in ("X_1024x576.jpg", "X_720x405.jpg", "X_320x215.jpg"):
        make_photo(srcset_dir, name)

    r = post_srcset(client)
    assert r.status_code == 200
    # preview points at the local copies
    assert 'srcset="/preview/srcset/X_1024x576.jpg 1024w' in r.text
    # copy-paste output is escaped text pointing at the public folder
    assert f"&lt;img src=&#34;{PUBLIC}KnotWall/X_1024x576.jpg&#34;" in r.text
    assert "Featured image srcset" in r.text
    assert "List image srcset" in r.text
    assert "Figure with caption" in r.text
    assert "Hikers on the wall." in r.text


def test_srcset_without_large_has_no_featured(client, photo_dirs):
    srcset_dir, _ = photo_dirs
    make_photo(srcset_dir, "X_720x405.jpg")
    make_photo(srcset_dir, "X_320x215.jpg")

    r = post_srcset(client)
    assert "Featured image srcset" not in r.text
    assert "List image srcset" in r.text


def test_srcset_without_matching_files(client, photo_dirs):
    srcset_dir, _ = photo_dirs
    make_photo(srcset_dir, "cover.jpg", size=(64, 48))

    r = post_srcset(client)
    assert r.status_code == 200
    assert "No tags generated" in r.text


def test_srcset_missing_fields_redisplay_values(client):
    r = post_srcset(client, photoset_alt="", photoset_alt_prefix='The "Knot"')
    assert r.status_code == 200
    assert "Alt text is required." in r.text
    assert 'value="KnotWall"' in r.text
    assert 'value="The &#34;Knot&#34;"' in r.text
    assert "Photos preview and HTML" not in r.text


def test_srcset_unreadable_directory(client, settings, photo_dirs):
    srcset_dir, _ = photo_dirs
    srcset_dir.rmdir()

    r = post_srcset(client)
    assert r.status_code == 200
    assert "Cannot read photos directory" in r.text
    assert "Photos preview and HTML" not in r.text


def test_print_set_generates_numbered_figures(client, photo_dirs):
    _, print_dir = photo_dirs
    make_photo(print_dir, "a.jpg", size=(80, 60))
    make_photo(print_dir, "b.jpg", size=(60, 80))

    r = client.post(
        "/print-photo-set",
        data={
            "photoset_title": "Great Wall",
            "photoset_intro": "A <b>long</b> day.",
            "photoset_folder": "GreatWall",
        },
    )
    assert r.status_code == 200
    assert "Photo set figures" in r.text
    assert "<figcaption>Great Wall 1</figcaption>" in r.text
    assert "<figcaption>Great Wall 2</figcaption>" in r.text
    assert "<p>A long day.</p>" in r.text
    assert f"{PUBLIC}GreatWall/a.jpg" in r.text


def test_print_set_requires_title_and_intro(client):
    r = client.post("/print-photo-set", data={"photoset_folder": "GreatWall"})
    assert r.status_code == 200
    assert "Title is required." in r.text
    assert "Intro is required." in r.text


def test_preview_serves_scanned_photo(client, photo_dirs):
    srcset_dir, _ = photo_dirs
    make_photo(srcset_dir, "X_320x215.jpg")

    r = client.get("/preview/srcset/X_320x215.jpg")
    assert r.status_code == 200
    assert r.headers["content-type"] == "image/jpeg"
    assert client.get("/preview/srcset/missing.jpg").status_code == 404
    assert client.get("/preview/elsewhere/X_320x215.jpg").status_code == 404


def test_preview_refuses_paths_outside_scan_dir(settings):
    with pytest.raises(HTTPException) as exc:
        preview_media("srcset", "../secret.jpg", settings)
    assert exc.value.status_code == 400


def test_missing_configuration_rejects_requests(monkeypatch):
    from fastapi.testclient import TestClient

    from app import app

    for name in config.REQUIRED_SETTINGS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **kw: False)
    config.get_settings.cache_clear()

    with TestClient(app) as c:
        r = c.get("/")
    assert r.status_code == 500
    assert "PHOTOS_PUBLIC_BASE_URL" in r.text
    config.get_settings.cache_clear()


def test_print_set_title_period_not_doubled(client, photo_dirs):
    _, print_dir = photo_dirs
    make_photo(print_dir, "a.jpg", size=(80, 60))
    make_photo(print_dir, "X_720x405.jpg")
    make_photo(print_dir, "X_1024x576.jpg")

    r = client.post(
        "/print-photo-set",
        data={
            "photoset_title": "Great Wall.",
            "photoset_intro": "A day out.",
            "photoset_folder": "GreatWall",
        },
    )
    assert r.status_code == 200
    assert "<figcaption>Great Wall 1</figcaption>" in r.text
    assert 'data-lightbox="photoset">Great Wall.</a></figcaption>' in r.text
    assert "Great Wall.." not in r.text


def test_print_set_unreadable_directory(client, photo_dirs):
    _, print_dir = photo_dirs
    print_dir.rmdir()

    r = client.post(
        "/print-photo-set",
        data={
            "photoset_title": "Great Wall",
            "photoset_intro": "A day out.",
            "photoset_folder": "GreatWall",
        },
    )
    assert r.status_code == 200
    assert "Cannot read photos directory" in r.text
    assert "Photos preview and HTML" not in r.text
