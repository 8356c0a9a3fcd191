"""
Base interface for output format generators.

Each generator turns the in-memory resume into one output file for a single
output format. Generators are registered by format in ``generators.GENERATORS``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.models.resume import ResumeDocument
from resume_forge.models.target import TargetDescriptor
from resume_forge.models.theme import FormatDescriptor, OutputFormat, Theme
from resume_forge.options import BuildOptions


@dataclass
class GenerationContext:
    """Everything a generator needs besides the resume and the output path.

    ``targets`` is the full target list of the build; it is only passed to
    template-driven formats.
    """

    options: BuildOptions
    theme: Theme
    fmt: FormatDescriptor
    targets: list[TargetDescriptor] | None = None


class ResumeGenerator(ABC):
    """Abstract base class for format generators."""

    format: OutputFormat

    @abstractmethod
    def generate(
        self,
        resume: ResumeDocument,
        output_path: Path,
        context: GenerationContext,
    ) -> Path | None:
        """
        Write ``resume`` to ``output_path``.

        Returns:
            The written path, or None when the generator deliberately skipped
            the target (e.g. PDF output disabled).

        Raises:
            BuildError: For failures with a known error kind
            Exception: Anything else is wrapped by the dispatcher
        """

    @staticmethod
    def template_for(context: GenerationContext) -> str:
        """First template declared by the target's format."""
        if not context.fmt.templates:
            raise BuildError(
                ErrorKind.GENERATION_FAILURE,
                f"Theme {context.theme.name!r} declares no template for format",
                attempted=context.fmt.name.value,
                fatal=False,
            )
        return context.fmt.templates[0]
