"""Data models for Photos to HTML."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PhotoFile:
    """An image found in a scan directory."""
    filename: str
    width: int
    height: int


@dataclass(frozen=True)
class SizeClass:
    """One of the expected photo sizes, matched by filename suffix."""
    width: int
    height: int
    prefixed_alt: bool = True
    legacy: bool = False

    @property
    def suffix(self) -> str:
        return f"_{self.width}x{self.height}"


# Priority order: the first class whose suffix is in the filename wins.
SIZE_CLASSES: tuple[SizeClass, ...] = (
    SizeClass(1024, 576),
    SizeClass(720, 405, prefixed_alt=False),
    SizeClass(608, 344, legacy=True),
    SizeClass(320, 215, prefixed_alt=False),
    SizeClass(192, 128, legacy=True),
    SizeClass(112, 112, legacy=True),
)


@dataclass
class SrcsetForm:
    """Sanitized submission of the srcset workflow."""
    folder: str = ""
    alt: str = ""
    alt_prefix: str = ""
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class PrintSetForm:
    """Sanitized submission of the print photo set workflow."""
    folder: str = ""
    title: str = ""
    intro: str = ""
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class GeneratedTagSet:
    """HTML snippets built for one photo set. Empty slots mean missing sources."""
    featured_srcset: str = ""
    list_srcset: str = ""
    figure: str = ""
    sizes: dict[int, str] = field(default_factory=dict)
    intro: str = ""
    figures: list[str] = field(default_factory=list)

    def size_tag(self, width: int) -> str:
        return self.sizes.get(width, "")

    @property
    def empty(self) -> bool:
        """True when no size class matched and no generic figure was built."""
        return not (self.sizes or self.figures)
