"""Catalog loading and validation."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from football_cards.models.card import Card, Catalog, CombinationRule

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = Path(__file__).parent / "data" / "players.json"


class CatalogError(ValueError):
    """Catalog data is missing or structurally invalid."""


@dataclass
class CatalogLoadResult:
    """Outcome of loading a catalog file."""

    catalog: Catalog | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        """Check if the catalog was loaded."""
        return self.catalog is not None


def default_catalog_path() -> Path:
    """Get the path of the bundled sample catalog."""
    return DEFAULT_CATALOG


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"]) or "record"
    return f"{field}: {err['msg']}"


def _parse_card(index: int, raw: Any) -> Card:
    if not isinstance(raw, dict):
        raise CatalogError(f"Invalid card at index {index}: expected object ({raw!r})")
    try:
        return Card.model_validate(raw)
    except ValidationError as e:
        raise CatalogError(
            f"Invalid card at index {index}: {_first_error(e)} ({json.dumps(raw, ensure_ascii=False)})"
        ) from e


def _parse_rule(index: int, raw: Any) -> CombinationRule:
    if not isinstance(raw, dict):
        raise CatalogError(f"Invalid combination at index {index}: expected object ({raw!r})")
    try:
        return CombinationRule.model_validate(raw)
    except ValidationError as e:
        raise CatalogError(
            f"Invalid combination at index {index}: {_first_error(e)} ({json.dumps(raw, ensure_ascii=False)})"
        ) from e


def parse_catalog(data: Any) -> Catalog:
    """Validate raw catalog data.

    Records are checked in order and parsing stops at the first invalid one.

    Args:
        data: Decoded JSON document with "cards" and "combinations" lists.

    Returns:
        Validated Catalog.

    Raises:
        CatalogError: If the document or any record is invalid.
    """
    if not isinstance(data, dict):
        raise CatalogError("Invalid catalog: root object missing")

    raw_cards = data.get("cards")
    if not isinstance(raw_cards, list) or not raw_cards:
        raise CatalogError('Invalid catalog: "cards" must be a non-empty list')

    cards: list[Card] = []
    seen_ids: set[str] = set()
    for i, raw in enumerate(raw_cards):
        card = _parse_card(i, raw)
        if card.id in seen_ids:
            raise CatalogError(f"Invalid card at index {i}: duplicate id ({card.id!r})")
        seen_ids.add(card.id)
        cards.append(card)

    raw_rules = data.get("combinations")
    if not isinstance(raw_rules, list) or not raw_rules:
        raise CatalogError('Invalid catalog: "combinations" must be a non-empty list')

    rules = [_parse_rule(i, raw) for i, raw in enumerate(raw_rules)]

    return Catalog(cards=tuple(cards), combinations=tuple(rules))


def load_catalog(path: Path | str | None = None) -> CatalogLoadResult:
    """Load and validate a catalog JSON file.

    Args:
        path: Path to the catalog. If None, uses the bundled sample catalog.

    Returns:
        CatalogLoadResult holding either the catalog or the failure reason.
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = json.load(f)
        catalog = parse_catalog(data)
    except OSError as e:
        logger.error(f"Failed to read catalog {catalog_path}: {e}")
        return CatalogLoadResult(error=f"Failed to read {catalog_path}: {e}")
    except json.JSONDecodeError as e:
        logger.error(f"Malformed catalog {catalog_path}: {e}")
        return CatalogLoadResult(error=f"Malformed JSON in {catalog_path}: {e}")
    except CatalogError as e:
        logger.error(f"Invalid catalog {catalog_path}: {e}")
        return CatalogLoadResult(error=str(e))

    logger.info(
        f"Loaded catalog {catalog_path}: {len(catalog.cards)} cards, "
        f"{len(catalog.combinations)} combinations"
    )
    return CatalogLoadResult(catalog=catalog)
