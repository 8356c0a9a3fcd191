from __future__ import annotations

from pathlib import Path

from resume_forge.generators.base import GenerationContext, ResumeGenerator
from resume_forge.models.resume import ResumeDocument
from resume_forge.models.theme import OutputFormat
from resume_forge.templates.docx_renderer import markdown_to_docx
from resume_forge.templates.renderer import render_template


class DocxGenerator(ResumeGenerator):
    """Word output: the format's markdown template laid out as a .docx."""

    format = OutputFormat.DOCX

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path:
        markdown_text = render_template(
            context.theme,
            self.template_for(context),
            resume.data,
            context.options,
            targets=context.targets,
        )
        return markdown_to_docx(markdown_text, output_path, title=resume.name or None)
