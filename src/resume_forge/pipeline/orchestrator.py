"""Build pipeline orchestrator: sources + theme -> generated output files."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from resume_forge.converters.schema_converter import convert
from resume_forge.errors import BuildError, ErrorKind
from resume_forge.events import BuildEvent, BuildState, EventCallback
from resume_forge.models.resume import Dialect, ResumeDocument
from resume_forge.models.target import TargetDescriptor
from resume_forge.models.theme import Theme
from resume_forge.options import BuildOptions
from resume_forge.parsers.resume_factory import load_sources
from resume_forge.pipeline.dispatch import generate_target
from resume_forge.pipeline.merger import is_mixed, merge_sources
from resume_forge.pipeline.outputs import (
    DEFAULT_DESTINATION,
    add_freebie_formats,
    expand_targets,
    verify_outputs,
)
from resume_forge.templates.loader import load_theme, locate_theme

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of one build.

    ``error`` holds the fatal error when the build aborted; per-target
    failures live on each target's ``result``.
    """

    resume: ResumeDocument | None = None
    theme: Theme | None = None
    targets: list[TargetDescriptor] = field(default_factory=list)
    error: BuildError | None = None
    state: BuildState = BuildState.IDLE
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None and not self.failures

    @property
    def processed(self) -> list[TargetDescriptor]:
        return [t for t in self.targets if t.result is not None]

    @property
    def failures(self) -> list[TargetDescriptor]:
        return [t for t in self.targets if t.result is not None and not t.result.ok]


class BuildOrchestrator:
    """Sequences one build: load, theme, validate, merge, convert, expand, generate."""

    def __init__(
        self,
        on_event: EventCallback | None = None,
        *,
        default_destination: str = DEFAULT_DESTINATION,
    ):
        self.on_event = on_event
        self.default_destination = default_destination
        self.state = BuildState.IDLE
        self._options = BuildOptions()

    def run(
        self,
        sources: list[str | Path],
        destinations: list[str] | None = None,
        options: BuildOptions | None = None,
    ) -> BuildResult:
        """Run the build. Fatal errors are returned on the result, not raised."""
        start = time.monotonic()
        self._options = options or BuildOptions()
        self.state = BuildState.IDLE
        result = BuildResult()

        self._notify(BuildEvent.BEGIN, {"cmd": "build"})
        try:
            self._build(list(sources), list(destinations or []), result)
        except BuildError as exc:
            exc.fatal = True
            self._report(exc)
            self.state = BuildState.ABORTED
            result.error = exc
        finally:
            result.state = self.state
            result.elapsed_seconds = time.monotonic() - start
            self._notify(BuildEvent.END, {"state": self.state.value})
        return result

    def _build(self, sources: list[str | Path], destinations: list[str], result: BuildResult) -> None:
        opts = self._options
        if not sources:
            raise BuildError(ErrorKind.SOURCE_NOT_FOUND)

        # --- Sources ---
        loaded = load_sources(sources, sort=opts.sort)
        failed = [r for r in loaded if not r.ok]
        if failed:
            for r in failed[1:]:
                self._report(r.error)
            raise failed[0].error
        docs = [r.document for r in loaded]
        self.state = BuildState.SOURCES_LOADED

        # --- Theme ---
        self._notify(BuildEvent.BEFORE_THEME, {"theme": opts.theme})
        folder = locate_theme(opts.theme)
        theme = load_theme(folder, opts.theme)
        result.theme = theme
        self.state = BuildState.THEME_LOADED
        self._notify(BuildEvent.AFTER_THEME, {"theme": theme})

        # --- Requested outputs ---
        self._notify(BuildEvent.VERIFY_OUTPUTS, {"targets": destinations, "theme": theme})
        invalid = verify_outputs(destinations, theme)
        if invalid:
            raise BuildError(
                ErrorKind.INVALID_OUTPUT_FORMAT,
                attempted=", ".join(i.file for i in invalid),
                data=invalid,
            )
        self.state = BuildState.OUTPUTS_VALIDATED

        # --- Merge ---
        if len(docs) > 1:
            self._notify(BuildEvent.BEFORE_MERGE, {"f": [d.path for d in docs], "mixed": is_mixed(docs)})
            rez = merge_sources(docs)
            self._notify(BuildEvent.AFTER_MERGE, {"r": rez})
        else:
            rez = merge_sources(docs)
        self.state = BuildState.MERGED

        # --- Dialect ---
        to_dialect = Dialect.JRS if theme.renders_jrs else Dialect.FRESH
        if rez.dialect is not to_dialect:
            self._notify(BuildEvent.BEFORE_INLINE_CONVERT, {"fmt": to_dialect.value})
            rez = ResumeDocument(data=convert(rez.data, to_dialect), dialect=to_dialect, source=rez.source)
            self._notify(BuildEvent.AFTER_INLINE_CONVERT, {"file": docs[0].path, "fmt": to_dialect.value})
        result.resume = rez
        self.state = BuildState.CONVERTED

        # --- Targets ---
        add_freebie_formats(theme)
        self._notify(BuildEvent.APPLY_THEME, {"r": rez, "theme": theme})
        targets = expand_targets(destinations, theme, default=self.default_destination)
        result.targets = targets
        self.state = BuildState.EXPANDED

        self.state = BuildState.GENERATING
        for target in targets:
            target.result = generate_target(
                target, rez, theme, targets, opts, self._notify, self._report
            )
        self.state = BuildState.DONE
        logger.info(
            "Built %d target(s) with theme %s, %d failed",
            len(targets), theme.name, len(result.failures),
        )

    def _notify(self, event: BuildEvent, payload: dict[str, Any]) -> None:
        logger.debug("event %s", event.value)
        if self.on_event:
            self.on_event(event, payload)

    def _report(self, error: BuildError) -> None:
        log = logger.error if error.fatal else logger.warning
        log("%s [%s]", error, error.kind.value)
        if self._options.err_handler is not None:
            self._options.err_handler(error)


def build(
    sources: list[str | Path],
    destinations: list[str] | None = None,
    options: BuildOptions | None = None,
    on_event: EventCallback | None = None,
) -> BuildResult:
    """Run one build with a fresh orchestrator."""
    return BuildOrchestrator(on_event).run(sources, destinations, options)
