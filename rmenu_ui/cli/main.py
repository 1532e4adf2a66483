"""
Command-line interface for rmenu.

Builds a rofi menu tree from a YAML file and runs whatever the user picks.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from rmenu_actions.api import BUILTIN_TAGS
from rmenu_common.api import RMenuError, configure_logging, error_to_payload
from rmenu_ui.presenters import action_tree, registry_table
from rmenu_ui.wiring.dependencies import UIContext


logger = logging.getLogger(__name__)

_CONFIG_HELP = "Menu configuration file; defaults to $RMENU_CONFIG or ~/.config/rmenu/menu.yaml."


def _fail(ctx: UIContext, exc: RMenuError) -> NoReturn:
    logger.debug("Aborting: %s", error_to_payload(exc))
    ctx.present.error(str(exc))
    raise typer.Exit(1)


def create_app(ctx: UIContext) -> typer.Typer:
    """Build the Typer app, wired to the given context."""
    app = typer.Typer(
        help="Build rofi menus from a YAML file and run the selected actions.",
        no_args_is_help=True,
    )

    @app.callback()
    def entry(
        debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
        json_logs: Optional[bool] = typer.Option(
            None,
            "--json-logs/--no-json-logs",
            help="Render logs as JSON lines (defaults to $RMENU_LOG_JSON).",
        ),
        log_file: Optional[Path] = typer.Option(
            None,
            "--log-file",
            help="Also write logs to this file.",
        ),
    ) -> None:
        """Global options shared by every command."""
        configure_logging(
            debug=debug,
            json=json_logs,
            log_file=str(log_file) if log_file else None,
            force=True,
        )

    @app.command("run")
    def run_menu(
        config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
        picker: Optional[str] = typer.Option(
            None,
            "--picker",
            help="Picker executable to launch (defaults to $RMENU_PICKER or /usr/bin/rofi).",
        ),
    ) -> None:
        """Show the root menu and follow the selections until the chain ends."""
        if picker:
            ctx.picker_binary = picker
        try:
            steps = ctx.menu_service.run(config)
        except RMenuError as exc:
            _fail(ctx, exc)
        logger.debug("Ran %d action(s)", steps)

    @app.command("check")
    def check_menu(
        config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    ) -> None:
        """Load and build the configuration without running anything."""
        try:
            loaded = ctx.menu_service.load(config)
        except RMenuError as exc:
            _fail(ctx, exc)
        ctx.present.show(action_tree(loaded.root, title=str(loaded.path)))
        ctx.present.success(f"Configuration OK: {loaded.path}")

    @app.command("types")
    def list_types() -> None:
        """List the action types that configurations may use."""
        registry = ctx.registry
        ctx.present.show(
            registry_table(BUILTIN_TAGS, registry.available(), registry.pending())
        )

    return app


ctx_store = UIContext()
app = create_app(ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
