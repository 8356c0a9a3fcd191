"""Resolve requested destinations into build targets for a theme."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from resume_forge.models.target import TargetDescriptor
from resume_forge.models.theme import FormatDescriptor, OutputFormat, Theme

logger = logging.getLogger(__name__)

WILDCARD = "all"
DEFAULT_DESTINATION = "out/resume.all"
DEFAULT_STEM = "resume"


@dataclass(frozen=True)
class InvalidOutput:
    """A requested destination whose format the theme does not declare."""

    file: str
    format: str


def split_destination(destination: str | Path) -> tuple[str, str | None]:
    """Split a destination file name into (stem, extension).

    The extension is whatever follows the last dot, so ``resume.`` has an
    empty extension and ``.all`` has stem ``""`` and extension ``all``. Names
    without a dot have no extension (None).
    """
    stem, dot, ext = Path(destination).name.rpartition(".")
    if not dot:
        return ext, None
    return stem, ext


def requested_format(destination: str | Path) -> str:
    """Format named by a destination's extension; no extension means ``all``."""
    _, ext = split_destination(destination)
    return WILDCARD if ext is None else ext.lower()


def verify_outputs(destinations: list[str], theme: Theme) -> list[InvalidOutput]:
    """Return the destinations the theme cannot produce (empty when all valid)."""
    invalid = []
    for dest in destinations:
        fmt = requested_format(dest)
        if fmt != WILDCARD and not theme.has_format(fmt):
            invalid.append(InvalidOutput(file=str(dest), format=fmt))
    return invalid


def add_freebie_formats(theme: Theme) -> Theme:
    """Add the json, yml and png formats every theme gets for free.

    json and yml are serialised straight from the resume. png is rasterised
    from the theme's html output, so it is only added when html is declared.
    Formats the theme already declares are left alone.
    """
    formats = theme.formats
    if OutputFormat.JSON not in formats:
        formats[OutputFormat.JSON] = FormatDescriptor(
            name=OutputFormat.JSON, ext="json", title="json", freebie=True
        )
    if OutputFormat.YML not in formats:
        formats[OutputFormat.YML] = FormatDescriptor(
            name=OutputFormat.YML, ext="yml", title="yaml", freebie=True
        )
    if OutputFormat.HTML in formats and OutputFormat.PNG not in formats:
        formats[OutputFormat.PNG] = FormatDescriptor(
            name=OutputFormat.PNG, ext="png", title="png", freebie=True
        )
    return theme


def expand_targets(
    destinations: list[str] | None,
    theme: Theme,
    default: str = DEFAULT_DESTINATION,
) -> list[TargetDescriptor]:
    """Turn destinations into targets, expanding ``.all`` (or no extension)
    into one target per theme format.

    For example ``out/resume.all`` becomes ``out/resume.html``,
    ``out/resume.pdf``, ... in the order the theme declares its formats.
    A bare ``out/.all`` expands with the default ``resume`` stem.
    """
    dest_coll = destinations or [default]
    targets: list[TargetDescriptor] = []
    for dest in dest_coll:
        to = Path(dest).resolve()
        fmt = requested_format(to)
        if fmt == WILDCARD:
            stem = split_destination(to)[0] or DEFAULT_STEM
            targets.extend(
                TargetDescriptor(file=to.parent / f"{stem}.{desc.ext}", fmt=desc)
                for desc in theme.formats.values()
            )
        else:
            targets.append(TargetDescriptor(file=to, fmt=theme.get_format(fmt)))
    logger.debug("Expanded %d destination(s) into %d target(s)", len(dest_coll), len(targets))
    return targets
