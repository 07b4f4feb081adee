"""Deck configuration loading and parsing."""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import json
import random
from pathlib import Path

from generic_cards.core.deck import Deck, DeckType

import logging
logger = logging.getLogger(__name__)

KNOWN_FIELDS = {'deckType', 'seed', 'shuffles', 'idealShuffles', 'cut'}


@dataclass
class DeckConfig:
    """
    How to build and prepare a deck.

    Attributes:
        deck_type: Standard deck to start from
        seed: Seed for the deck's random index source (None for unseeded)
        shuffles: Number of full-range shuffles to apply
        ideal_shuffles: Number of out-shuffles to apply after those
        cut: Number of cards to cut from top to bottom at the end
    """
    deck_type: DeckType = DeckType.STANDARD_52
    seed: Optional[int] = None
    shuffles: int = 0
    ideal_shuffles: int = 0
    cut: Optional[int] = None

    @classmethod
    def from_file(cls, filepath: Path) -> 'DeckConfig':
        """
        Load DeckConfig from a JSON file.

        Args:
            filepath: Path to JSON configuration file

        Returns:
            DeckConfig instance
        """
        logger.info(f"Loading deck configuration from {filepath}")
        with open(filepath, 'r') as f:
            return cls.from_json(f.read())

    @classmethod
    def from_json(cls, json_str: str) -> 'DeckConfig':
        """
        Create DeckConfig from JSON string.

        Args:
            json_str: JSON object describing the deck

        Returns:
            DeckConfig instance

        Raises:
            ValueError: If JSON is invalid or a field has a bad value
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeckConfig':
        """
        Create DeckConfig from already parsed data.

        Raises:
            ValueError: If a field has a bad value
        """
        if not isinstance(data, dict):
            raise ValueError(f"Deck configuration must be an object, got {type(data).__name__}")

        unknown = set(data) - KNOWN_FIELDS
        if unknown:
            logger.warning(f"Ignoring unknown deck configuration fields: {sorted(unknown)}")

        try:
            deck_type = DeckType(data.get('deckType', DeckType.STANDARD_52.value))
        except ValueError:
            raise ValueError(f"Invalid deckType: {data.get('deckType')!r}")

        seed = data.get('seed')
        if seed is not None and not _is_int(seed):
            raise ValueError(f"seed must be an integer, got {seed!r}")

        cut = data.get('cut')
        if cut is not None and not (_is_int(cut) and cut >= 0):
            raise ValueError(f"cut must be a non-negative integer, got {cut!r}")

        return cls(
            deck_type=deck_type,
            seed=seed,
            shuffles=_count(data, 'shuffles'),
            ideal_shuffles=_count(data, 'idealShuffles'),
            cut=cut,
        )

    def build_deck(self) -> Deck:
        """Create the deck and apply the configured shuffles and cut."""
        rng = random.Random(self.seed)
        deck = Deck.make_standard(self.deck_type, random_index=rng.randrange)
        deck.shuffle(self.shuffles)
        deck.ideal_shuffle(self.ideal_shuffles)
        if self.cut is not None and not deck.cut_from_top(self.cut):
            logger.warning(f"Cut of {self.cut} ignored for a deck of {deck.size} cards")
        return deck


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _count(data: Dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if not _is_int(value) or value < 0:
        raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
    return value
