"""Command-line entry point."""

import logging
from pathlib import Path

import typer

from requestie.app import RequestieApp
from requestie.config import ConfigError, Settings, load_config
from requestie.logs import configure_logging
from requestie.session import Session
from requestie.storage import DocumentStore, FileStore, MemoryStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Edit HTTP request collections and environments in the terminal",
    add_completion=False,
)

_STATE_DIR_HELP = "Directory holding the saved document (overrides config.json)"
_EPHEMERAL_HELP = "Start from the default document and keep nothing on exit"
_RESET_HELP = "Discard the saved document before starting (not with --ephemeral)"
_LOG_LEVEL_HELP = "Log level for the log file (overrides config.json)"


def _load_settings() -> Settings:
    try:
        return load_config()
    except ConfigError as exc:
        typer.echo(f"Ignoring config: {exc}", err=True)
        return Settings()


@app.command()
def main(
    state_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--state-dir",
        "-s",
        help=_STATE_DIR_HELP,
    ),
    ephemeral: bool = typer.Option(False, "--ephemeral", help=_EPHEMERAL_HELP),  # noqa: B008
    reset: bool = typer.Option(False, "--reset", help=_RESET_HELP),  # noqa: B008
    log_level: str | None = typer.Option(None, "--log-level", help=_LOG_LEVEL_HELP),  # noqa: B008
) -> None:
    """Open the request editor."""
    if ephemeral and reset:
        raise typer.BadParameter(
            "--ephemeral never reads saved state, so there is nothing to reset",
            param_hint="--reset",
        )
    settings = _load_settings()
    if log_level is not None:
        try:
            settings = Settings(
                state_dir=settings.state_dir,
                log_file=settings.log_file,
                log_level=log_level,
            )
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(settings.log_level, settings.log_file)

    store: DocumentStore
    if ephemeral:
        store = MemoryStore()
    else:
        file_store = FileStore(state_dir or settings.state_dir)
        if reset:
            file_store.clear()
            logger.info("discarded saved document at %s", file_store.path)
        store = file_store

    session = Session(store)
    try:
        RequestieApp(session, persist_theme=True).run()
    finally:
        # The app saves on quit; this covers exits that bypass the quit action.
        session.close()


if __name__ == "__main__":
    app()
