"""
Adapter Factory
Centralizes the wiring of repositories, modes and terminal adapters from config.
"""

from flashdeck.application.config import AppConfig
from flashdeck.application.intents import help_line
from flashdeck.application.selector import WeightedSelector
from flashdeck.application.session import FlipMode, LearnMode, ReviewMode
from flashdeck.domain.ports import DeckRepository, InputProvider, Renderer
from flashdeck.infrastructure.adapters.terminal import (
    KeyInputProvider,
    LineInputProvider,
    TerminalRenderer,
)
from flashdeck.infrastructure.adapters.yaml_deck import YamlDeckRepository


def get_deck_repository(config: AppConfig) -> DeckRepository:
    return YamlDeckRepository(config.deck_file)


def get_review_mode(name: str, config: AppConfig) -> ReviewMode:
    selector = WeightedSelector(seed=config.seed)
    if name == "learn":
        return LearnMode(selector)
    if name == "flip":
        return FlipMode(selector)
    raise ValueError(f"Unknown review mode: {name}")


def get_input_provider(mode: ReviewMode, config: AppConfig) -> InputProvider:
    if config.input_mode == "key":
        return KeyInputProvider(mode.keys)
    return LineInputProvider(mode.commands)


def get_renderer(mode: ReviewMode, config: AppConfig) -> Renderer:
    table = mode.keys if config.input_mode == "key" else mode.commands
    return TerminalRenderer(hint=help_line(table), clear_screen=config.clear_screen)
