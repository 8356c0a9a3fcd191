"""Jinja2 rendering of theme templates."""

from __future__ import annotations

import textwrap
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from resume_forge.options import BuildOptions

if TYPE_CHECKING:
    from resume_forge.models.theme import JrsTheme, Theme

DEFAULT_SECTION_TITLES: dict[str, str] = {
    "info": "Summary",
    "contact": "Contact",
    "employment": "Employment",
    "projects": "Projects",
    "skills": "Skills",
    "education": "Education",
    "service": "Service",
    "writing": "Writing",
    "recognition": "Recognition",
    "languages": "Languages",
    "interests": "Interests",
    "references": "References",
}

_DATE_FORMATS = (("%Y-%m-%d", "%b %Y"), ("%Y-%m", "%b %Y"), ("%Y", "%Y"))


def section_titles(options: BuildOptions | None) -> dict[str, str]:
    titles = dict(DEFAULT_SECTION_TITLES)
    if options is not None:
        titles.update(options.section_titles)
    return titles


def markdown_to_html(text: str | None) -> Markup:
    if not text:
        return Markup("")
    return Markup(markdown.markdown(text, extensions=["tables", "fenced_code"]))


def wrap_text(text: str | None, width: int = 60, indent: str = "") -> str:
    """Wrap each paragraph of ``text`` to ``width`` columns."""
    if not text:
        return ""
    paragraphs = str(text).split("\n")
    return "\n".join(
        textwrap.fill(p, width=width, initial_indent=indent, subsequent_indent=indent)
        if p.strip() else ""
        for p in paragraphs
    )


def format_date(value: str | None, fallback: str = "Present") -> str:
    if not value:
        return fallback
    for parse_fmt, out_fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(str(value), parse_fmt).strftime(out_fmt)
        except ValueError:
            continue
    return str(value)


def build_environment(folder: Path, options: BuildOptions | None = None) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(folder)),
        autoescape=select_autoescape(["html", "htm"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    width = options.wrap if options is not None else 60
    env.filters["markdown"] = markdown_to_html
    env.filters["wrap"] = partial(wrap_text, width=width)
    env.filters["date"] = format_date
    return env


def render_template(
    theme: "Theme",
    template_name: str,
    resume_data: dict[str, Any],
    options: BuildOptions | None = None,
    **extra: Any,
) -> str:
    """Render one of a theme's templates against a resume."""
    env = build_environment(theme.folder, options)
    template = env.get_template(template_name)
    return template.render(
        r=resume_data,
        resume=resume_data,
        titles=section_titles(options),
        options=options,
        **extra,
    )


def render_jrs(
    theme: "JrsTheme",
    resume_data: dict[str, Any],
    options: BuildOptions | None = None,
    css_href: str | None = None,
) -> str:
    """Render a JSON Resume document through a JRS theme's html template.

    The theme stylesheet is embedded as ``css`` unless ``css_href`` is given,
    in which case ``css`` is empty and the template links ``css_href``.
    """
    css = ""
    if css_href is None and theme.css_path is not None and theme.css_path.exists():
        css = theme.css_path.read_text(encoding="utf-8")
    return render_template(
        theme, theme.template, resume_data, options, css=Markup(css), css_href=css_href
    )
