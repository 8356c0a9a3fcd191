"""HTML output plus the formats derived from it (PDF, PNG)."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from bs4 import BeautifulSoup
from markupsafe import Markup

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.export.pdf_renderer import html_to_pdf
from resume_forge.export.png_renderer import pdf_to_png
from resume_forge.generators.base import GenerationContext, ResumeGenerator
from resume_forge.models.resume import ResumeDocument
from resume_forge.models.theme import OutputFormat
from resume_forge.templates.renderer import render_template

logger = logging.getLogger(__name__)


def render_html(
    resume: ResumeDocument,
    context: GenerationContext,
    output_path: Path | None = None,
    link_css: bool = False,
) -> str:
    """Render the theme's HTML for ``resume``.

    JSON Resume themes render through ``theme.render``. FRESH themes render
    the target format's template, or the theme's html template for formats
    without one of their own (png). The stylesheet is embedded unless
    ``link_css`` is set, in which case it is copied next to ``output_path``.
    """
    theme = context.theme
    css_href = None
    if theme.css_path is not None and link_css and output_path is not None:
        shutil.copyfile(theme.css_path, output_path.parent / theme.css_path.name)
        css_href = theme.css_path.name

    if theme.renders_jrs:
        return theme.render(resume.data, context.options, css_href=css_href)

    fmt = context.fmt if context.fmt.templates else theme.get_format(OutputFormat.HTML)
    if fmt is None or not fmt.templates:
        raise BuildError(
            ErrorKind.GENERATION_FAILURE,
            f"Theme {theme.name!r} has no HTML template",
            attempted=context.fmt.name.value,
            fatal=False,
        )

    css = None
    if theme.css_path is not None and css_href is None:
        css = Markup(theme.css_path.read_text(encoding="utf-8"))

    return render_template(
        theme,
        fmt.templates[0],
        resume.data,
        context.options,
        css=css,
        css_href=css_href,
        targets=context.targets,
    )


class HtmlGenerator(ResumeGenerator):
    format = OutputFormat.HTML

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path:
        html = render_html(
            resume,
            context,
            output_path=output_path,
            link_css=context.options.css == "link",
        )
        if context.options.prettify:
            html = BeautifulSoup(html, "html.parser").prettify()
        output_path.write_text(html, encoding="utf-8")
        return output_path


def _render_pdf(html: str, context: GenerationContext, engine: str | None) -> bytes:
    try:
        return html_to_pdf(html, engine=engine, base_url=context.theme.folder)
    except Exception as exc:
        raise BuildError(
            ErrorKind.PDF_GENERATION,
            attempted=engine or "default engine",
            inner=exc,
            fatal=False,
        ) from exc


class PdfGenerator(ResumeGenerator):
    format = OutputFormat.PDF

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path | None:
        engine = context.options.pdf
        if engine == "none":
            logger.info("PDF output disabled, skipping %s", output_path.name)
            return None
        html = render_html(resume, context)
        output_path.write_bytes(_render_pdf(html, context, engine))
        return output_path


class PngGenerator(ResumeGenerator):
    """Screenshot of the first page of the theme's HTML output."""

    format = OutputFormat.PNG

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path:
        engine = context.options.pdf if context.options.pdf != "none" else None
        html = render_html(resume, context)
        pdf_bytes = _render_pdf(html, context, engine)
        output_path.write_bytes(pdf_to_png(pdf_bytes))
        return output_path
