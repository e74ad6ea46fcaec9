"""Configuration management."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from football_cards.logging.game_logger import GameLogConfig


class RulesConfig(BaseModel):
    """Turn and match rules."""

    hand_size: int = Field(6, ge=1)
    min_cards_per_turn: int = Field(2, ge=1)
    max_cards_per_turn: int = Field(5, ge=1)
    max_turns: int = Field(4, ge=1)  # Match ends once current_turn exceeds this

    # Which combination resolution policy the scoring engine uses
    combination_policy: Literal["country_first", "declared_multiplier"] = "country_first"

    @model_validator(mode="after")
    def check_card_bounds(self) -> "RulesConfig":
        if self.min_cards_per_turn > self.max_cards_per_turn:
            raise ValueError("min_cards_per_turn cannot exceed max_cards_per_turn")
        return self


class CatalogConfig(BaseModel):
    """Catalog source configuration."""

    path: str | None = None  # None uses the bundled sample catalog


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    catalog: CatalogConfig = CatalogConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
