"""Fallback PDF renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path

from fpdf import FPDF

logger = logging.getLogger(__name__)

# Unicode-capable fonts, searched in order (Linux, macOS, Windows)
_UNICODE_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

_BLOCK_TAGS = r"h[1-3]|p|li|ul|ol|div|br\s*/?"


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


def html_to_pdf_fpdf2(html_content: str) -> bytes:
    """Lay out the headings, paragraphs and list items of an HTML page with fpdf2."""
    body_match = re.search(r"<body[^>]*>(.*?)</body>", html_content, re.DOTALL | re.IGNORECASE)
    body = body_match.group(1) if body_match else html_content
    body = re.sub(r"<(style|script)[^>]*>.*?</\1>", "", body, flags=re.DOTALL | re.IGNORECASE)

    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()

    font_name = "Helvetica"
    unicode_font = _find_unicode_font()
    if unicode_font:
        try:
            pdf.add_font("ResumeFont", "", unicode_font)
            font_name = "ResumeFont"
        except (OSError, RuntimeError):
            logger.debug("Failed to load font %s", unicode_font, exc_info=True)

    pdf.set_font(font_name, size=10)

    for line_type, text in _parse_html_to_lines(body):
        safe_text = _safe_text(text, pdf)
        if line_type == "h1":
            pdf.set_font_size(18)
            pdf.multi_cell(0, 10, safe_text, new_x="LMARGIN", new_y="NEXT")
            pdf.set_font_size(10)
        elif line_type == "h2":
            pdf.ln(3)
            pdf.set_font_size(13)
            pdf.multi_cell(0, 8, safe_text, new_x="LMARGIN", new_y="NEXT")
            pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
            pdf.ln(2)
            pdf.set_font_size(10)
        elif line_type == "h3":
            pdf.ln(1)
            pdf.set_font_size(11)
            pdf.multi_cell(0, 7, safe_text, new_x="LMARGIN", new_y="NEXT")
            pdf.set_font_size(10)
        elif line_type == "bullet":
            pdf.multi_cell(0, 6, f"  - {safe_text}", new_x="LMARGIN", new_y="NEXT")
        elif line_type == "text" and safe_text.strip():
            pdf.multi_cell(0, 6, safe_text, new_x="LMARGIN", new_y="NEXT")
        elif line_type == "break":
            pdf.ln(3)

    return bytes(pdf.output())


def _safe_text(text: str, pdf: FPDF) -> str:
    """Core fonts only cover latin-1; replace anything else."""
    if pdf.is_ttf_font:
        return text
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _parse_html_to_lines(body_html: str) -> list[tuple[str, str]]:
    """Parse simple HTML into (type, text) pairs."""
    lines: list[tuple[str, str]] = []
    parts = re.split(rf"(</?(?:{_BLOCK_TAGS})(?:\s[^>]*)?>)", body_html)
    current_tag = "text"
    for part in parts:
        part = part.strip()
        if not part:
            continue
        tag_match = re.match(rf"<(/?)({_BLOCK_TAGS})(?:\s[^>]*)?>", part)
        if tag_match:
            closing = tag_match.group(1) == "/"
            tag = tag_match.group(2).rstrip("/").strip()
            if closing:
                if tag in ("ul", "ol"):
                    lines.append(("break", ""))
                current_tag = "text"
            elif tag in ("h1", "h2", "h3"):
                current_tag = tag
            elif tag == "li":
                current_tag = "bullet"
            elif tag.startswith("br"):
                lines.append(("break", ""))
            else:
                current_tag = "text"
        else:
            text = _strip_html(part)
            if text:
                lines.append((current_tag, text))
    return lines


def _strip_html(text: str) -> str:
    """Remove HTML tags, decode entities and collapse whitespace."""
    text = re.sub(r"<[^>]+>", "", text)
    return re.sub(r"\s+", " ", html.unescape(text)).strip()
