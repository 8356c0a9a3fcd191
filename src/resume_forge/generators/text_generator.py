"""Markdown and plain-text output from theme templates."""

from __future__ import annotations

from pathlib import Path

from resume_forge.generators.base import GenerationContext, ResumeGenerator
from resume_forge.models.resume import ResumeDocument
from resume_forge.models.theme import OutputFormat
from resume_forge.templates.renderer import render_template


class TemplateTextGenerator(ResumeGenerator):
    def __init__(self, fmt: OutputFormat):
        self.format = fmt

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path:
        text = render_template(
            context.theme,
            self.template_for(context),
            resume.data,
            context.options,
            targets=context.targets,
        )
        output_path.write_text(text, encoding="utf-8")
        return output_path
