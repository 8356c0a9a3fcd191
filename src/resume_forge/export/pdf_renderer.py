from __future__ import annotations

import logging
from pathlib import Path

from resume_forge.config import PDF_ENGINES

logger = logging.getLogger(__name__)

DEFAULT_ENGINE = "weasyprint"


def html_to_pdf(
    html: str,
    engine: str | None = None,
    base_url: str | Path | None = None,
) -> bytes:
    """Convert an HTML string to PDF bytes.

    ``weasyprint`` (the default) falls back to fpdf2 when WeasyPrint or its
    system libraries are unavailable; ``fpdf`` goes straight to fpdf2.
    """
    engine = engine or DEFAULT_ENGINE
    if engine not in PDF_ENGINES or engine == "none":
        raise ValueError(f"Cannot render PDF with engine {engine!r}")
    if engine == "fpdf":
        return _html_to_pdf_fpdf2(html)
    return _html_to_pdf_weasyprint(html, base_url)


def _html_to_pdf_weasyprint(html: str, base_url: str | Path | None) -> bytes:
    """Convert HTML string to PDF bytes using WeasyPrint, with fpdf2 fallback."""
    try:
        from weasyprint import HTML
        return HTML(string=html, base_url=str(base_url) if base_url else None).write_pdf()
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        return _html_to_pdf_fpdf2(html)


def _html_to_pdf_fpdf2(html: str) -> bytes:
    from resume_forge.export.pdf_fallback import html_to_pdf_fpdf2
    return html_to_pdf_fpdf2(html)
