"""DOCX output renderer: lays out theme-rendered markdown with python-docx."""

from __future__ import annotations

import re
from pathlib import Path

from docx import Document
from docx.shared import Pt, RGBColor

HEADING_COLOR = RGBColor(0x1B, 0x36, 0x5D)


def markdown_to_docx(
    markdown_text: str,
    output_path: str | Path,
    title: str | None = None,
    font_name: str = "Calibri",
) -> Path:
    """Write a .docx laid out from a markdown resume.

    ``# `` becomes the document title, ``## `` starts a section, ``### `` a
    sub-heading; ``- `` / ``* `` lines become bullets, with ``  - `` nested.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = Document()
    if title:
        doc.core_properties.title = title

    style = doc.styles["Normal"]
    style.font.name = font_name
    style.font.size = Pt(10)

    preamble, sections = split_sections(markdown_text)
    _render_lines(doc, preamble)
    for label, content in sections:
        heading = doc.add_heading(_strip_md_plain(label), level=2)
        if heading.runs:
            heading.runs[0].font.color.rgb = HEADING_COLOR
        _render_lines(doc, content)

    doc.save(str(output_path))
    return output_path


def split_sections(markdown_text: str) -> tuple[str, list[tuple[str, str]]]:
    """Split markdown at ``## `` headings into (preamble, [(label, content)])."""
    preamble: list[str] = []
    sections: list[tuple[str, list[str]]] = []
    for line in markdown_text.splitlines():
        if line.startswith("## "):
            sections.append((line[3:].strip(), []))
        elif sections:
            sections[-1][1].append(line)
        else:
            preamble.append(line)
    return "\n".join(preamble), [(label, "\n".join(body)) for label, body in sections]


def _render_lines(doc: Document, content: str) -> None:
    lines = content.split("\n")
    i = 0
    while i < len(lines):
        line = lines[i].strip()

        if not line or re.match(r"^-{3,}\s*$", line):
            i += 1
            continue

        if line.startswith("# "):
            doc.add_heading(_strip_md_plain(line[2:]), level=0)
            i += 1
            continue

        if line.startswith("### "):
            h = doc.add_heading(_strip_md_plain(line[4:]), level=3)
            if h.runs:
                h.runs[0].font.size = Pt(11)
            i += 1
            continue

        if line.startswith("- ") or line.startswith("* "):
            p = doc.add_paragraph(style="List Bullet")
            _add_rich_text(p, line[2:])
            while i + 1 < len(lines) and lines[i + 1].startswith("  - "):
                i += 1
                sp = doc.add_paragraph(style="List Bullet 2")
                _add_rich_text(sp, lines[i].strip()[2:])
            i += 1
            continue

        p = doc.add_paragraph()
        _add_rich_text(p, line)
        i += 1


def _add_rich_text(paragraph, text: str) -> None:
    """Add text to a paragraph with bold and italic markers rendered."""
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)

    parts = re.split(r"(\*{2}.+?\*{2}|\*[^*]+?\*)", text)
    for part in parts:
        if not part:
            continue
        bold_match = re.fullmatch(r"\*{2}(.+?)\*{2}", part)
        italic_match = re.fullmatch(r"\*([^*]+?)\*", part)
        if bold_match:
            paragraph.add_run(bold_match.group(1)).bold = True
        elif italic_match:
            paragraph.add_run(italic_match.group(1)).italic = True
        else:
            paragraph.add_run(part)


def _strip_md_plain(text: str) -> str:
    """Strip inline markdown formatting to plain text."""
    text = re.sub(r"\*{1,3}(.+?)\*{1,3}", r"\1", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)
    return text.strip()
