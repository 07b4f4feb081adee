"""Playing cards, decks and hands with tracked ownership."""

from generic_cards.core.card import Card, ExternalHolder, JokerType, Rank, Suit, SuitColor
from generic_cards.core.containers import CardCollection, CardStore
from generic_cards.core.deck import Deck, DeckType
from generic_cards.core.hand import DiscardPile, Hand

__version__ = "0.1.0"
__all__ = [
    "Card",
    "ExternalHolder",
    "JokerType",
    "Rank",
    "Suit",
    "SuitColor",
    "CardCollection",
    "CardStore",
    "Deck",
    "DeckType",
    "DiscardPile",
    "Hand",
]
