"""flashdeck CLI — deck editing commands, review commands and the config subgroup."""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from flashdeck.application.config import AppConfig, default_config_file, resolve_config
from flashdeck.consts import VERSION
from flashdeck.domain.errors import EmptyDeck, OutOfBounds, PersistenceFailure

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="flashdeck: adaptive flashcard review in your terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}

config_app = typer.Typer(help="Manage flashdeck configuration.")
app.add_typer(config_app, name="config")


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


def _version_callback(value: bool):
    if value:
        typer.echo(f"flashdeck {VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Deck file. Defaults to 'deck_file' in config."),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version."),
    ] = False,
):
    """Global settings for flashdeck."""
    ctx.ensure_object(dict)
    ctx.obj["deck_file"] = file
    if quiet:
        ctx.obj["verbose"] = 0
    elif verbose:
        ctx.obj["verbose"] = 1 + verbose


def _resolve(ctx: typer.Context, **overrides: Any) -> AppConfig:
    obj = ctx.obj or {}
    config = resolve_config(
        {"deck_file": obj.get("deck_file"), "verbose": obj.get("verbose"), **overrides}
    )
    logging.getLogger().setLevel(_LOG_LEVELS[config.verbose])
    return config


def _deck_service(config: AppConfig):
    from flashdeck.application.deck_service import DeckService
    from flashdeck.application.factory import get_deck_repository

    return DeckService(get_deck_repository(config))


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg="red", err=True)
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Deck commands
# ---------------------------------------------------------------------------


@app.command()
def add(
    ctx: typer.Context,
    front: Annotated[str, typer.Argument(help="Front (prompt) text.")],
    back: Annotated[str, typer.Argument(help="Back (answer) text.")],
):
    """[bold green]Add[/bold green] a card to the end of the deck."""
    config = _resolve(ctx)
    typer.echo(f"Adding flashcard: {front}, {back}")
    try:
        _deck_service(config).add(front, back)
    except PersistenceFailure as e:
        _fail(str(e))


@app.command(context_settings={"ignore_unknown_options": True})
def remove(
    ctx: typer.Context,
    index: Annotated[int, typer.Argument(help="1-based card number, as shown by 'list'.")],
):
    """[bold red]Remove[/bold red] a card by its number.

    Card numbers start at 1. Zero and negative numbers are out of bounds.
    """
    config = _resolve(ctx)
    try:
        card = _deck_service(config).remove(index)
    except OutOfBounds:
        _fail(f"Index out of bounds: no card number {index}")
    except PersistenceFailure as e:
        _fail(str(e))
    else:
        typer.echo(f"Removed card nbr {index}: {card.front}, {card.back}")


@app.command("list")
def list_cards(ctx: typer.Context):
    """List cards in insertion order."""
    config = _resolve(ctx)
    try:
        listing = _deck_service(config).list()
    except PersistenceFailure as e:
        _fail(str(e))

    typer.echo(f"Cards in {config.deck_file}")
    for item in listing:
        typer.echo(f"{item.position}: {item.front}, {item.back}")


@app.command()
def stats(
    ctx: typer.Context,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Show answer counts and the current sampling weight of every card."""
    config = _resolve(ctx)
    try:
        listing = _deck_service(config).list()
    except PersistenceFailure as e:
        _fail(str(e))

    if json_output:
        typer.echo(
            json.dumps(
                [
                    {
                        "position": item.position,
                        "front": item.front,
                        "correct": item.correct,
                        "incorrect": item.incorrect,
                        "weight": round(item.weight, 4),
                    }
                    for item in listing
                ],
                indent=2,
            )
        )
        return

    if not listing:
        typer.secho("No cards found.", fg="yellow")
        return

    typer.echo(f"{'#':>3}  {'correct':>7}  {'incorrect':>9}  {'weight':>6}  front")
    for item in listing:
        typer.echo(
            f"{item.position:>3}  {item.correct:>7}  {item.incorrect:>9}"
            f"  {item.weight:>6.3f}  {item.front}"
        )


# ---------------------------------------------------------------------------
# Review commands
# ---------------------------------------------------------------------------


class InputMode(str, Enum):
    line = "line"
    key = "key"


InputOption = Annotated[
    InputMode | None,
    typer.Option("--input", help="'line' reads typed commands, 'key' reads single key presses."),
]
SeedOption = Annotated[int | None, typer.Option(help="Seed for card selection.")]
AutosaveOption = Annotated[
    bool | None,
    typer.Option("--autosave/--no-autosave", help="Save statistics after every answer."),
]


def _review(ctx: typer.Context, mode_name: str, **overrides: Any) -> None:
    from flashdeck.application.driver import run_review
    from flashdeck.application.factory import (
        get_input_provider,
        get_renderer,
        get_review_mode,
    )
    from flashdeck.application.session import ReviewSession

    if isinstance(overrides.get("input_mode"), InputMode):
        overrides["input_mode"] = overrides["input_mode"].value

    config = _resolve(ctx, **overrides)
    service = _deck_service(config)
    deck = service.load()

    mode = get_review_mode(mode_name, config)
    try:
        session = ReviewSession(deck, mode)
    except EmptyDeck as e:
        typer.secho(str(e), fg="yellow", err=True)
        raise typer.Exit(1)

    checkpoint = service.save if config.autosave else None
    try:
        summary = run_review(
            session,
            get_input_provider(mode, config),
            get_renderer(mode, config),
            checkpoint=checkpoint,
        )
        service.save(session.deck)
    except PersistenceFailure as e:
        _fail(str(e))

    if summary.reviewed:
        typer.echo(
            f"Reviewed {summary.reviewed} cards: "
            f"{summary.correct} correct, {summary.incorrect} incorrect."
        )


@app.command()
def learn(
    ctx: typer.Context,
    input_mode: InputOption = None,
    seed: SeedOption = None,
    autosave: AutosaveOption = None,
):
    """[bold green]Learn[/bold green]: cards you get wrong come back more often.

    Answer every card with yes/no; the next card is drawn at random,
    weighted towards cards with a poor record and cards never seen.
    """
    _review(ctx, "learn", input_mode=input_mode, seed=seed, autosave=autosave)


@app.command()
def flip(
    ctx: typer.Context,
    input_mode: InputOption = None,
    seed: SeedOption = None,
):
    """Flip through the deck in order, without scoring.

    Resumes at the card where the last flip session stopped.
    """
    _review(ctx, "flip", input_mode=input_mode, seed=seed)


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context):
    """Display final resolved configuration."""
    config = _resolve(ctx)
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))


@config_app.command("path")
def config_path():
    """Print where the config file is read from."""
    typer.echo(str(default_config_file()))


def main() -> None:
    app()
