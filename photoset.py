"""Photo set classification and HTML tag assembly."""
import logging
from typing import Iterable, Optional
from urllib.parse import quote

from markupsafe import escape

from models import SIZE_CLASSES, GeneratedTagSet, PhotoFile, SizeClass

logger = logging.getLogger("photoset.tags")

ALT_SEPARATOR = " - "
LIGHTBOX_ATTR = 'data-lightbox="photoset"'
FEATURED_SIZES = "100w"
LIST_SIZES = "(min-width: 592px) 320px, 100vw"


def match_size_class(filename: str) -> Optional[SizeClass]:
    """Return the first size class (in table order) whose suffix is in filename.

    A name containing two suffixes is classified by table order, not by
    which suffix comes first in the name.
    """
    for size in SIZE_CLASSES:
        if size.suffix in filename:
            return size
    return None


def classify(
    photos: Iterable[PhotoFile],
) -> tuple[dict[int, PhotoFile], list[PhotoFile]]:
    """Split photos into {width: photo} per size class and the unclassified rest."""
    by_size: dict[int, PhotoFile] = {}
    unclassified: list[PhotoFile] = []
    for photo in photos:
        size = match_size_class(photo.filename)
        if size is None:
            unclassified.append(photo)
        elif size.width in by_size:
            logger.warning(
                "Ignoring %s, %s already fills the %s slot",
                photo.filename,
                by_size[size.width].filename,
                size.suffix,
            )
        else:
            by_size[size.width] = photo
    return by_size, unclassified


def _src(base_url: str, photo: PhotoFile) -> str:
    return str(escape(base_url + quote(photo.filename)))


def img_tag(
    base_url: str,
    photo: PhotoFile,
    size: SizeClass,
    alt: str,
    alt_prefix: str = "",
) -> str:
    """Standalone img tag for one size class. alt and alt_prefix are pre-escaped."""
    if size.prefixed_alt and alt_prefix:
        alt = alt_prefix + ALT_SEPARATOR + alt
    css = ' class="img"' if size.legacy else ""
    return (
        f'<img src="{_src(base_url, photo)}" alt="{alt}" '
        f'width="{photo.width}" height="{photo.height}"{css}>'
    )


def build_tag_set(
    by_size: dict[int, PhotoFile],
    base_url: str,
    alt: str,
    alt_prefix: str = "",
) -> GeneratedTagSet:
    """Assemble every tag the present size classes allow."""
    tags = GeneratedTagSet()
    for size in SIZE_CLASSES:
        photo = by_size.get(size.width)
        if photo is not None:
            tags.sizes[size.width] = img_tag(base_url, photo, size, alt, alt_prefix)

    large = by_size.get(1024)
    medium = by_size.get(720)
    small = by_size.get(320)
    prefixed_alt = alt_prefix + ALT_SEPARATOR + alt if alt_prefix else alt

    if large and medium and small:
        tags.featured_srcset = (
            f'<img src="{_src(base_url, large)}" '
            f'srcset="{_src(base_url, large)} 1024w, '
            f'{_src(base_url, medium)} 720w, '
            f'{_src(base_url, small)} 320w" '
            f'sizes="{FEATURED_SIZES}" width="1024" height="576" '
            f'alt="{prefixed_alt}">'
        )

    if medium and small:
        tags.list_srcset = (
            f'<img src="{_src(base_url, small)}" '
            f'srcset="{_src(base_url, medium)} 720w, '
            f'{_src(base_url, small)} 320w" '
            f'sizes="{LIST_SIZES}" width="320" height="215" alt="{alt}">'
        )

    if medium and large:
        href = _src(base_url, large)
        tags.figure = (
            f'<figure><a href="{href}" {LIGHTBOX_ATTR}>{tags.sizes[720]}</a>'
            f'<figcaption><a href="{href}" {LIGHTBOX_ATTR}>{alt}.</a>'
            "</figcaption></figure>"
        )

    logger.debug(
        "Built tags for sizes %s (featured=%s list=%s figure=%s)",
        sorted(tags.sizes, reverse=True),
        bool(tags.featured_srcset),
        bool(tags.list_srcset),
        bool(tags.figure),
    )
    return tags


def generic_figures(
    photos: Iterable[PhotoFile], base_url: str, title: str
) -> list[str]:
    """One captioned figure per photo, numbered from 1 in the given order."""
    figures = []
    for n, photo in enumerate(photos, start=1):
        caption = f"{title} {n}"
        figures.append(
            f'<figure><img src="{_src(base_url, photo)}" alt="{caption}" '
            f'width="{photo.width}" height="{photo.height}">'
            f"<figcaption>{caption}</figcaption></figure>"
        )
    return figures


def build_srcset(
    photos: list[PhotoFile], base_url: str, alt: str, alt_prefix: str = ""
) -> GeneratedTagSet:
    """Tags for the srcset workflow; unclassified photos are ignored."""
    by_size, unclassified = classify(photos)
    if unclassified:
        logger.debug("Ignoring %d unsuffixed photo(s)", len(unclassified))
    return build_tag_set(by_size, base_url, alt, alt_prefix)


def build_print_set(
    photos: list[PhotoFile], base_url: str, title: str, intro: str
) -> GeneratedTagSet:
    """Tags for the print set workflow, with generic figures for the rest."""
    by_size, unclassified = classify(photos)
    tags = build_tag_set(by_size, base_url, title)
    tags.intro = f"<p>{intro}</p>" if intro else ""
    tags.figures = generic_figures(unclassified, base_url, title)
    return tags
