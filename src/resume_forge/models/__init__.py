"""Data models for the resume build pipeline."""

from resume_forge.models.resume import Dialect, ResumeDocument, SourceDocument
from resume_forge.models.target import GenerationResult, TargetDescriptor
from resume_forge.models.theme import (
    FormatDescriptor,
    FreshTheme,
    JrsTheme,
    OutputFormat,
    Theme,
)

__all__ = [
    "Dialect",
    "FormatDescriptor",
    "FreshTheme",
    "GenerationResult",
    "JrsTheme",
    "OutputFormat",
    "ResumeDocument",
    "SourceDocument",
    "TargetDescriptor",
    "Theme",
]
