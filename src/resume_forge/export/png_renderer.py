"""Rasterise rendered PDF pages to PNG with PyMuPDF."""

from __future__ import annotations

import fitz  # pymupdf

DEFAULT_DPI = 144


def pdf_to_png(pdf_bytes: bytes, dpi: int = DEFAULT_DPI, page: int = 0) -> bytes:
    """Render one page of a PDF document as PNG bytes."""
    doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    try:
        if doc.page_count == 0:
            raise ValueError("PDF has no pages to rasterise")
        pix = doc[page].get_pixmap(dpi=dpi)
        return pix.tobytes("png")
    finally:
        doc.close()
