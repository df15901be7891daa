"""Rich console handler with compact rendering of scan events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ScanRichHandler(RichHandler):
    """Rich handler that renders ``scan.*`` events with shortened paths."""

    _SCAN_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "scan.reader.start": ("🔎", "cyan"),
        "scan.reader.complete": ("✅", "green"),
        "scan.file.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format ``path`` relative to ``base`` and keep only its last segments.

        Args:
            path: Absolute or relative path string to format.
            base: Optional root used to relativize ``path`` when possible.

        Returns:
            Text: Styled path, prefixed with an ellipsis when truncated.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator + separator.join(body_parts)
        else:
            display_string = separator.join(body_parts) or "."

        text = Text()
        for char in display_string:
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    def _render_scan_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured scan events with dedicated styling."""

        event = getattr(record, "scan_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._SCAN_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(message)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append(" @ ")
            _ = body.append_text(
                self.format_path(str(source_path), base=getattr(record, "source_base_path", None))
            )

        metrics: list[str] = []
        matches = getattr(record, "matches", None)
        if isinstance(matches, int):
            metrics.append(f"matches={matches}")
        failures = getattr(record, "failures", None)
        if isinstance(failures, int) and failures:
            metrics.append(f"failed={failures}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            metrics.append(f"duration={duration:.3f}s")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        scan_text = self._render_scan_message(record, message)
        if scan_text is not None:
            return scan_text
        return super().render_message(record, message)


__all__ = ["ScanRichHandler"]
