"""Card, combination rule and catalog models."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


class CombinationType(str, Enum):
    """Kind of combination a play can trigger."""

    NONE = "none"  # No combination applied
    COUNTRY = "country"  # Cards share a country
    CLUB = "club"  # Cards share a club


# Card attribute used to group played cards for each combination type
GROUPING_KEYS: dict[CombinationType, str] = {
    CombinationType.COUNTRY: "country",
    CombinationType.CLUB: "club",
}


class Card(BaseModel):
    """Single football player card."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    country: str = Field(min_length=1)
    club: str = Field(min_length=1)
    base_value: StrictInt | StrictFloat

    # Display only
    rarity: str | None = None
    position: str | None = None

    @field_validator("base_value")
    @classmethod
    def check_base_value(cls, value: int | float) -> int | float:
        if not math.isfinite(value):
            raise ValueError(f"base_value must be a finite number ({value})")
        if value < 0:
            raise ValueError(f"base_value must be non-negative ({value})")
        return value

    def group_key(self, combination: CombinationType) -> str:
        """Get the attribute this card is grouped by for a combination type."""
        return getattr(self, GROUPING_KEYS[combination])

    def __str__(self) -> str:
        return f"{self.name} ({self.country}, {self.club}) [{self.base_value}]"


class CombinationRule(BaseModel):
    """Multiplier applied when played cards share an attribute group."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: CombinationType
    required_players: StrictInt = Field(ge=1)
    multiplier: StrictInt | StrictFloat

    @field_validator("type")
    @classmethod
    def check_type(cls, value: CombinationType) -> CombinationType:
        if value == CombinationType.NONE:
            raise ValueError("Combination rule type cannot be 'none'")
        return value

    @field_validator("multiplier")
    @classmethod
    def check_multiplier(cls, value: int | float) -> int | float:
        if not math.isfinite(value):
            raise ValueError(f"multiplier must be a finite number ({value})")
        if value <= 1:
            raise ValueError(f"multiplier must be greater than 1 ({value})")
        return value

    def __str__(self) -> str:
        return f"{self.type.value} x{self.multiplier} (min {self.required_players})"


class Catalog(BaseModel):
    """Validated, immutable set of cards and combination rules."""

    model_config = ConfigDict(frozen=True)

    cards: tuple[Card, ...]
    combinations: tuple[CombinationRule, ...]

    def __len__(self) -> int:
        return len(self.cards)
