"""Lifecycle events and states reported by the build orchestrator."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class BuildEvent(str, Enum):
    BEGIN = "begin"
    BEFORE_THEME = "before_theme"
    AFTER_THEME = "after_theme"
    VERIFY_OUTPUTS = "verify_outputs"
    BEFORE_MERGE = "before_merge"
    AFTER_MERGE = "after_merge"
    BEFORE_INLINE_CONVERT = "before_inline_convert"
    AFTER_INLINE_CONVERT = "after_inline_convert"
    APPLY_THEME = "apply_theme"
    BEFORE_GENERATE = "before_generate"
    AFTER_GENERATE = "after_generate"
    END = "end"


class BuildState(str, Enum):
    IDLE = "idle"
    SOURCES_LOADED = "sources_loaded"
    THEME_LOADED = "theme_loaded"
    OUTPUTS_VALIDATED = "outputs_validated"
    MERGED = "merged"
    CONVERTED = "converted"
    EXPANDED = "expanded"
    GENERATING = "generating"
    DONE = "done"
    ABORTED = "aborted"


EventCallback = Callable[[BuildEvent, dict[str, Any]], None]
