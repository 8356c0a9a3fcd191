"""Per-build options, constructed once and passed explicitly to every step."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from resume_forge.config import CSS_MODES, PDF_ENGINES

DEFAULT_THEME = "modern"
DEFAULT_WRAP = 60

# Original camelCase option names accepted by from_mapping()
_ALIASES = {
    "sectionTitles": "section_titles",
    "noTips": "no_tips",
    "errHandler": "err_handler",
}


@dataclass(frozen=True)
class BuildOptions:
    theme: str = DEFAULT_THEME
    prettify: bool = False
    css: str | None = None
    pdf: str | None = None
    wrap: int = DEFAULT_WRAP
    section_titles: dict[str, str] = field(default_factory=dict)
    tips: bool = True
    no_tips: bool = False
    debug: bool = False
    sort: bool = False
    err_handler: Callable[[Any], None] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.wrap, bool) or not isinstance(self.wrap, int):
            raise ValueError(f"wrap must be an integer, got {self.wrap!r}")
        if not isinstance(self.section_titles, Mapping):
            raise ValueError(f"section_titles must be a mapping, got {self.section_titles!r}")
        if self.wrap <= 0:
            raise ValueError(f"wrap must be positive, got {self.wrap}")
        if self.pdf is not None and self.pdf not in PDF_ENGINES:
            raise ValueError(f"pdf must be one of {PDF_ENGINES}, got {self.pdf!r}")
        if self.css is not None and self.css not in CSS_MODES:
            raise ValueError(f"css must be one of {CSS_MODES}, got {self.css!r}")

    @property
    def show_tips(self) -> bool:
        return self.tips and not self.no_tips

    @classmethod
    def from_mapping(cls, opts: Mapping[str, Any] | None) -> "BuildOptions":
        """Build options from a loose mapping such as parsed CLI flags.

        Missing or falsy theme and wrap values fall back to the defaults; the
        theme name is trimmed and lower-cased.
        """
        values: dict[str, Any] = {}
        for key, value in (opts or {}).items():
            values[_ALIASES.get(key, key)] = value

        theme = str(values.get("theme") or "").strip().lower() or DEFAULT_THEME
        titles = values.get("section_titles") or {}
        if not isinstance(titles, Mapping):
            raise ValueError(f"sectionTitles must be a mapping, got {titles!r}")
        return cls(
            theme=theme,
            prettify=values.get("prettify") is True,
            css=values.get("css"),
            pdf=values.get("pdf"),
            wrap=_as_int("wrap", values.get("wrap") or DEFAULT_WRAP),
            section_titles={str(k).lower(): str(v) for k, v in titles.items()},
            tips=values.get("tips", True) is not False,
            no_tips=bool(values.get("no_tips", False)),
            debug=bool(values.get("debug", False)),
            sort=bool(values.get("sort", False)),
            err_handler=values.get("err_handler"),
        )


def _as_int(name: str, value: Any) -> int:
    """Coerce loosely typed numbers (e.g. ``"80"`` from YAML) to int."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
