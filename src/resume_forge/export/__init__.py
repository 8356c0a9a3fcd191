"""Binary export: HTML to PDF and PNG."""
from resume_forge.export.pdf_renderer import (
    PDF_ENGINES,
    html_to_pdf,
)
from resume_forge.export.png_renderer import pdf_to_png

__all__ = ["html_to_pdf", "pdf_to_png", "PDF_ENGINES"]
