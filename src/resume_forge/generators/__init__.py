"""Output format generators, keyed by format."""

from resume_forge.generators.base import GenerationContext, ResumeGenerator
from resume_forge.generators.data_generator import JsonGenerator, YamlGenerator
from resume_forge.generators.docx_generator import DocxGenerator
from resume_forge.generators.html_generator import HtmlGenerator, PdfGenerator, PngGenerator
from resume_forge.generators.text_generator import TemplateTextGenerator
from resume_forge.models.theme import OutputFormat

GENERATORS: dict[OutputFormat, ResumeGenerator] = {
    g.format: g
    for g in (
        HtmlGenerator(),
        PdfGenerator(),
        PngGenerator(),
        DocxGenerator(),
        TemplateTextGenerator(OutputFormat.MD),
        TemplateTextGenerator(OutputFormat.TXT),
        JsonGenerator(),
        YamlGenerator(),
    )
}


def get_generator(fmt: OutputFormat) -> ResumeGenerator | None:
    return GENERATORS.get(fmt)


__all__ = [
    "GENERATORS",
    "GenerationContext",
    "ResumeGenerator",
    "get_generator",
]
