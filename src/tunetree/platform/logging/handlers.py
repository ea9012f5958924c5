"""Rich console handler for structured library-build events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_ELLIPSIS = "…"
_SEPARATOR_STYLE = Style(color="magenta")
_SEGMENT_STYLE = Style(color="white")


def _as_pure_path(raw: str) -> PurePath:
    # Backslashes only appear in Windows paths; everything else is POSIX.
    return PureWindowsPath(raw) if "\\" in raw else PurePosixPath(raw)


def compact_path(raw: str, base: str | None = None, keep: int = 4) -> tuple[str, str]:
    """Shorten ``raw`` for console display.

    The path is made relative to ``base`` when it lies underneath it, then cut
    down to its last ``keep`` segments behind an ellipsis.

    Returns:
        tuple[str, str]: The display string and the separator it uses.
    """
    path = _as_pure_path(raw)
    if base:
        base_path = _as_pure_path(base)
        if path != base_path and path.is_relative_to(base_path):
            path = path.relative_to(base_path)

    sep = "\\" if isinstance(path, PureWindowsPath) else "/"
    segments = [segment for segment in path.parts if segment != path.anchor]

    if len(segments) > keep:
        return _ELLIPSIS + sep + sep.join(segments[-keep:]), sep
    prefix = path.anchor
    if prefix and not prefix.endswith(sep):
        prefix += sep
    return (prefix + sep.join(segments)) or ".", sep


class LibraryRichHandler(RichHandler):
    """Rich handler that renders scan/build events with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "scan.file.skip.unsupported": ("↪️", "yellow"),
        "scan.file.skip.no_extension": ("↪️", "yellow"),
        "scan.complete": ("🔎", "cyan"),
        "library.build.complete": ("✅", "green"),
        "library.build.error": ("❌", "red"),
    }
    _BUILD_METRICS: ClassVar[tuple[str, ...]] = ("tracks", "artists", "albums")
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(show_time=False, show_path=False, rich_tracebacks=True, markup=False)
        super().__init__(*args, **kwargs)

    def _path_text(self, raw: str, base: str | None = None) -> Text:
        display, sep = compact_path(raw, base, keep=self._PATH_SEGMENT_LIMIT)
        text = Text()
        for char in display:
            style = _SEPARATOR_STYLE if char in (sep, _ELLIPSIS) else _SEGMENT_STYLE
            _ = text.append(char, style=style)
        return text

    def _describe(self, event: str, record: logging.LogRecord, root: str | None) -> Text:
        body = Text()
        if event.startswith("scan.file.skip."):
            reason = "no extension" if event.endswith("no_extension") else "unsupported extension"
            _ = body.append(f"Skipped ({reason}) ")
            source = getattr(record, "source_path", None)
            if source:
                _ = body.append_text(self._path_text(str(source), base=root))
            return body

        if event == "scan.complete":
            _ = body.append("Scan complete")
            count = getattr(record, "total_files", None)
            if isinstance(count, int):
                _ = body.append(f" [files={count}]")
        elif event == "library.build.complete":
            parts: list[str] = []
            for name in self._BUILD_METRICS:
                value = getattr(record, name, None)
                if isinstance(value, int):
                    parts.append(f"{name}={value}")
            elapsed = getattr(record, "duration_seconds", None)
            if isinstance(elapsed, (int, float)):
                parts.append(f"duration={elapsed:.2f}s")
            _ = body.append("Library built")
            if parts:
                _ = body.append(f" [{', '.join(parts)}]")
        else:
            _ = body.append(record.getMessage())
            detail = getattr(record, "error_message", None)
            if detail:
                _ = body.append(f" ({detail})")

        if root:
            _ = body.append(" @ ")
            _ = body.append_text(self._path_text(root))
        return body

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return super().render_message(record, message)

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        root = getattr(record, "root_path", None)
        rendered = Text()
        _ = rendered.append(f"{icon} ", style=Style(color=color, bold=True))
        body = self._describe(event, record, str(root) if root else None)
        body.style = Style(color=color)
        _ = rendered.append_text(body)
        return rendered


__all__ = ["LibraryRichHandler", "compact_path"]
