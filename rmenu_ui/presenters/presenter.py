from __future__ import annotations

from typing import Any, Protocol

from rich.console import Console
from rich.markup import escape

_LEVEL_TEMPLATES = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...

    def emit_renderable(self, renderable: Any) -> None: ...


class Presenter:
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)

    def show(self, renderable: Any) -> None:
        self._sink.emit_renderable(renderable)


class _RichPresenterSink:
    def __init__(self, console: Console, error_console: Console) -> None:
        self._console = console
        self._error_console = error_console

    def emit(self, level: str, message: str) -> None:
        template = _LEVEL_TEMPLATES.get(level, "{message}")
        target = self._error_console if level in ("warning", "error") else self._console
        target.print(template.format(message=escape(message)), highlight=False)

    def emit_renderable(self, renderable: Any) -> None:
        self._console.print(renderable)


class RichPresenter(Presenter):
    """Presenter printing to stdout, with warnings and errors on stderr."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        super().__init__(
            _RichPresenterSink(
                console or Console(),
                error_console or Console(stderr=True),
            )
        )
