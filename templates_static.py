"""Templates and static file generation."""

from pathlib import Path

# Template content
BASE_HTML = """{% macro field_error(errors, name) %}
{% if errors and errors.get(name) %}<div class="field-error">{{ errors[name] }}</div>{% endif %}
{% endmacro %}

{% macro tag_block(slot) %}
<section class="slot">
  <h3>{{ slot.label }}</h3>
  <div class="preview">{{ slot.preview|safe }}</div>
  <textarea readonly rows="{{ slot.rows or 3 }}" onclick="this.select()">{{ slot.output }}</textarea>
</section>
{% endmacro %}

<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta name="robots" content="noindex, nofollow">
  <title>{{ title or 'Photos to HTML' }}</title>
  <link rel="stylesheet" href="/static/app.css">
</head>
<body>
  <header class="topbar" id="top">
    <nav>
      <a href="/" class="brand">Photos to HTML</a>
      <a href="/print-photo-set">Print Photo Set</a>
      <a href="/make-srcset">Make Srcset</a>
    </nav>
  </header>
  <main class="container">
    {% block content %}{% endblock %}
  </main>
</body>
</html>
"""

INDEX_HTML = """{% extends 'base.html' %}
{% block content %}
<h1>Photos to HTML</h1>
<p class="lead">Turn a folder of photos into HTML to paste into the CMS.</p>
<ul class="workflows">
  <li><a href="/print-photo-set">Print Photo Set</a>: figures for a whole set of photos, with an intro.</li>
  <li><a href="/make-srcset">Make Srcset</a>: featured and list image srcsets for one photo set.</li>
</ul>
{% endblock %}
"""

RESULTS_HTML = """{% if generated %}
<hr>
<h2>Photos preview and HTML</h2>
{% if empty %}
<div class="flash error">No tags generated. Check the photos in {{ scan_dir }} follow the naming rules.</div>
{% else %}
<p class="lead">Preview the photos, and then copy the HTML.</p>
{% for slot in slots %}{% if slot.output %}{{ tag_block(slot) }}{% endif %}{% endfor %}
{% endif %}
{% endif %}
"""

SRCSET_HTML = """{% extends 'base.html' %}
{% block content %}
<h1>Make Srcset</h1>
<p class="lead">Fill in the form and submit to generate HTML code for featured image and list image srcsets, as long as the images are named according to the rules.</p>
<details>
  <summary>Image naming rules</summary>
  <p>Copy one set at a time into <samp>{{ scan_dir }}</samp>: six photos, same basename, suffixed with the sizes below.</p>
  <pre>{% for size in size_classes %}BASENAME{{ size.suffix }}.jpg
{% endfor %}</pre>
</details>

<div id="formheader">
  {% if errors %}<div class="flash error">Please fix the errors below.</div>{% endif %}
  {{ field_error(errors, 'photoset_dir') }}
  <form action="/make-srcset" method="post" class="settings">
    <label for="photoset_folder">Eventual online folder</label>
    <div class="path-input"><span class="muted">{{ base_url }}</span>
      <input type="text" id="photoset_folder" name="photoset_folder" value="{{ form.folder }}" />
    </div>
    <div class="help-text">No leading/trailing slash, e.g. <samp>BadalingAncientGreatWall</samp>.</div>
    {{ field_error(errors, 'photoset_folder') }}

    <label for="photoset_alt">Photo alt text</label>
    <input type="text" id="photoset_alt" name="photoset_alt" maxlength="255" value="{{ form.alt|safe }}" />
    <div class="help-text">e.g. Hikers on the ABC Great Wall.</div>
    {{ field_error(errors, 'photoset_alt') }}

    <label for="photoset_alt_prefix">Photo alt prefix</label>
    <input type="text" id="photoset_alt_prefix" name="photoset_alt_prefix" maxlength="255" value="{{ form.alt_prefix|safe }}" />
    <div class="help-text">Usually the name of the hike, for SEO, e.g. Chinese Knot Great Wall.</div>
    {{ field_error(errors, 'photoset_alt_prefix') }}

    <div><button type="submit">Generate the HTML code</button> <a href="/make-srcset">Start again</a></div>
  </form>
</div>
{% include 'results.html' %}
{% endblock %}
"""

PRINT_SET_HTML = """{% extends 'base.html' %}
{% block content %}
<h1>Print Photo Set</h1>
<p class="lead">Fill in the form and submit to generate HTML code for a set of photos in <samp>{{ scan_dir }}</samp>.</p>

<div id="formheader">
  {% if errors %}<div class="flash error">Please fix the errors below.</div>{% endif %}
  {{ field_error(errors, 'photoset_dir') }}
  <form action="/print-photo-set" method="post" class="settings">
    <label for="photoset_title">Title</label>
    <input type="text" id="photoset_title" name="photoset_title" maxlength="255" value="{{ form.title|safe }}" />
    {{ field_error(errors, 'photoset_title') }}

    <label for="photoset_intro">Intro</label>
    <textarea id="photoset_intro" name="photoset_intro" rows="4">{{ form.intro|safe }}</textarea>
    {{ field_error(errors, 'photoset_intro') }}

    <label for="photoset_folder">Eventual online folder</label>
    <div class="path-input"><span class="muted">{{ base_url }}</span>
      <input type="text" id="photoset_folder" name="photoset_folder" value="{{ form.folder }}" />
    </div>
    {{ field_error(errors, 'photoset_folder') }}

    <div><button type="submit">Generate the HTML code</button> <a href="/print-photo-set">Start again</a></div>
  </form>
</div>
{% include 'results.html' %}
{% endblock %}
"""

APP_CSS = """:root{--bg:#0f1115;--fg:#e5e7eb;--muted:#a1a1aa;--card:#111318;--brand:#7aa2ff;--danger:#ff5c5c}
*{box-sizing:border-box}body{margin:0;background:var(--bg);color:var(--fg);font:15px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Inter,Ubuntu,Helvetica,Arial}
a{color:var(--brand);text-decoration:none}.muted{color:var(--muted)}
.topbar{position:sticky;top:0;background:#0c0e13;border-bottom:1px solid #1c1f26;z-index:10}
.topbar nav{margin:auto;display:flex;gap:14px;align-items:center;padding:10px}
.topbar .brand{font-weight:700}
.container{margin:20px auto;padding:0 14px;max-width:1100px}
.lead{font-size:17px;color:var(--muted)}
button{cursor:pointer;background:#1e2635;border:1px solid #2f3748;color:var(--fg);padding:6px 12px;border-radius:8px}
input,select,textarea{background:#0e1218;border:1px solid #232a39;color:var(--fg);padding:6px 10px;border-radius:8px;width:100%;font:inherit}
.settings{display:grid;gap:10px;max-width:720px}
.path-input{display:flex;gap:8px;align-items:center}.path-input input{flex:1}
.help-text{font-size:13px;color:var(--muted);margin:0 0 8px 0}
.field-error{color:#f87171;font-size:13px}
.flash{background:#13221d;border:1px solid #214d39;padding:10px;border-radius:10px;margin:10px 0}
.flash.error{background:#2d1b1b;border-color:#ef4444;color:#f87171}
.slot{background:var(--card);border:1px solid #1f2430;border-radius:8px;padding:16px;margin-bottom:20px}
.slot h3{margin:0 0 10px 0}.slot textarea{font-family:ui-monospace,monospace;font-size:12px;margin-top:10px}
.preview img{max-width:100%;height:auto}.preview figure{margin:0 0 10px 0}
pre{background:#0e1218;padding:12px;border-radius:8px}
"""


def ensure_assets() -> None:
    """Create templates/static on first run so this file is standalone."""
    APP_DIR = Path(__file__).resolve().parent
    TEMPLATES_DIR = APP_DIR / "templates"
    STATIC_DIR = APP_DIR / "static"

    TEMPLATES_DIR.mkdir(parents=True, exist_ok=True)
    STATIC_DIR.mkdir(parents=True, exist_ok=True)
    files = {
        TEMPLATES_DIR / "base.html": BASE_HTML,
        TEMPLATES_DIR / "index.html": INDEX_HTML,
        TEMPLATES_DIR / "results.html": RESULTS_HTML,
        TEMPLATES_DIR / "srcset.html": SRCSET_HTML,
        TEMPLATES_DIR / "print_set.html": PRINT_SET_HTML,
        STATIC_DIR / "app.css": APP_CSS,
    }
    for p, content in files.items():
        if not p.exists():
            p.write_text(content, encoding="utf-8")
