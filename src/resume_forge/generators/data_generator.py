"""Freebie formats serialised straight from the resume model."""

from __future__ import annotations

from pathlib import Path

from resume_forge.generators.base import GenerationContext, ResumeGenerator
from resume_forge.models.resume import ResumeDocument
from resume_forge.models.theme import OutputFormat


class JsonGenerator(ResumeGenerator):
    format = OutputFormat.JSON

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path:
        output_path.write_text(resume.to_json() + "\n", encoding="utf-8")
        return output_path


class YamlGenerator(ResumeGenerator):
    format = OutputFormat.YML

    def generate(self, resume: ResumeDocument, output_path: Path, context: GenerationContext) -> Path:
        output_path.write_text(resume.to_yaml(), encoding="utf-8")
        return output_path
