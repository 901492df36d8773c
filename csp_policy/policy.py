"""Content-Security-Policy configuration model and fixed tables."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# Header names the caller picks from when attaching the rendered value
CSP_HEADER = "Content-Security-Policy"
CSP_HEADER_LEGACY = "X-Content-Security-Policy"  # older browsers (IE 10/11)
CSP_HEADER_REPORT_ONLY = "Content-Security-Policy-Report-Only"

# Pre-quoted keyword tokens for populating source lists
SELF = "'self'"
NONE = "'none'"

UNSAFE_EVAL = "'unsafe-eval'"
UNSAFE_INLINE = "'unsafe-inline'"

# Bare words that must be single-quoted when used as the default scope
RESERVED_KEYWORDS = frozenset({"none", "self", "unsafe-inline", "unsafe-eval"})


class Category(NamedTuple):
    """One resource category: its directive tag, fallback token and config field."""

    tag: str
    default: str
    field: str


# Output order is part of the header contract.
CATEGORIES: tuple[Category, ...] = (
    Category("font-src", SELF, "font_sources"),
    Category("img-src", SELF, "image_sources"),
    Category("style-src", SELF, "style_sources"),
    Category("script-src", SELF, "script_sources"),
    Category("connect-src", NONE, "connect_sources"),
    Category("frame-src", NONE, "frame_sources"),
    Category("media-src", NONE, "media_sources"),
    Category("object-src", NONE, "object_sources"),
)


class PolicyConfig(BaseModel):
    """Allow-lists and flags that make up one policy.

    Every list starts empty and every flag starts false. Callers populate the
    lists (use ``SELF`` / ``NONE`` for keywords, entries are emitted verbatim)
    and then hand the config to ``render``.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    connect_sources: list[str] = Field(default_factory=list)
    font_sources: list[str] = Field(default_factory=list)
    frame_sources: list[str] = Field(default_factory=list)
    image_sources: list[str] = Field(default_factory=list)
    media_sources: list[str] = Field(default_factory=list)
    object_sources: list[str] = Field(default_factory=list)
    style_sources: list[str] = Field(default_factory=list)
    script_sources: list[str] = Field(default_factory=list)

    # Blank or unset falls back to 'none'
    default_scope: str | None = None

    allow_eval: bool = False
    allow_inline_script: bool = False
    allow_inline_style: bool = False

    # Where browsers POST violation reports; render() does not emit it
    reporting_url: str | None = None

    def sources(self, category: Category) -> list[str]:
        """Return the source list backing ``category``."""
        return getattr(self, category.field)
