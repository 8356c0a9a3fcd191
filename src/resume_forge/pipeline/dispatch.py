"""Generate a single build target through its format generator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from resume_forge.errors import BuildError, ErrorKind
from resume_forge.events import BuildEvent
from resume_forge.generators import GenerationContext, get_generator
from resume_forge.models.resume import ResumeDocument
from resume_forge.models.target import GenerationResult, TargetDescriptor
from resume_forge.models.theme import Theme
from resume_forge.options import BuildOptions

logger = logging.getLogger(__name__)

Notify = Callable[[BuildEvent, dict[str, Any]], None]
Report = Callable[[BuildError], None]


def _relative(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def generate_target(
    target: TargetDescriptor,
    resume: ResumeDocument,
    theme: Theme,
    targets: list[TargetDescriptor],
    options: BuildOptions,
    notify: Notify,
    report: Report,
) -> GenerationResult | None:
    """Generate one target. Failures are reported and returned, never raised.

    Targets without a format (an extension the theme does not know) are
    skipped and return None.
    """
    if target.fmt is None:
        logger.debug("No format for %s, skipping", target.file)
        return None

    fmt = target.fmt
    file_label = _relative(target.file)
    notify(BuildEvent.BEFORE_GENERATE, {"fmt": fmt.name.value, "file": file_label})

    value = None
    error: BuildError | None = None
    try:
        generator = get_generator(fmt.name)
        if generator is None:
            raise BuildError(
                ErrorKind.GENERATION_FAILURE,
                "No generator registered for format",
                attempted=fmt.name.value,
                fatal=False,
            )
        target.file.parent.mkdir(parents=True, exist_ok=True)
        context = GenerationContext(
            options=options,
            theme=theme,
            fmt=fmt,
            targets=targets if fmt.templates else None,
        )
        value = generator.generate(resume, target.file, context)
    except BuildError as exc:
        error = exc
    except Exception as exc:
        logger.debug("Generator for %s raised", fmt.name.value, exc_info=True)
        error = BuildError(
            ErrorKind.GENERATION_FAILURE,
            attempted=file_label,
            inner=exc,
            fatal=False,
        )

    notify(BuildEvent.AFTER_GENERATE, {"fmt": fmt.name.value, "file": file_label, "error": error})
    if error is not None:
        error.fatal = False
        report(error)
    return GenerationResult(value=value, error=error)
