"""Card related classes and utilities."""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from .containers import CardStore

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""
    HEARTS = 'h'
    DIAMONDS = 'd'
    SPADES = 's'
    CLUBS = 'c'
    LITTLE_JOKER = 'j'
    BIG_JOKER = 'J'

    def __str__(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        """Display name, e.g. 'Hearts'."""
        return self.name.replace('_', ' ').title()


class Rank(Enum):
    """Card ranks, valued by pip count (Jack=11 .. Ace=14)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    LITTLE_JOKER = 15
    BIG_JOKER = 16

    def __str__(self) -> str:
        return _RANK_SYMBOLS[self]

    @property
    def title(self) -> str:
        """Display name, e.g. 'Ten'."""
        return self.name.replace('_', ' ').title()


_RANK_SYMBOLS = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
    Rank.LITTLE_JOKER: '*',
    Rank.BIG_JOKER: '*',
}


class SuitColor(Enum):
    """Suit colors. Jokers have none."""
    NONE = auto()
    RED = auto()
    BLACK = auto()


class JokerType(Enum):
    """The two jokers of a 54-card deck."""
    LITTLE = auto()
    BIG = auto()


@dataclass(frozen=True)
class ExternalHolder:
    """
    A holder that does not track its cards.

    Useful for places like "face down on the table" where a card needs an
    owner but no collection keeps count. Receives no notifications.
    """
    label: str

    def __str__(self) -> str:
        return self.label


Holder = Union[CardStore, ExternalHolder, None]


class Card:
    """
    Represents a playing card.

    Suit and rank are fixed at construction. The holder is the only mutable
    part of a card; every change runs the ownership protocol against the old
    and new holders.

    Attributes:
        suit: Card suit (hearts, diamonds, spades, clubs, or a joker suit)
        rank: Card rank (2-A, or a joker rank)
        holder: Current owner of the card, if any
    """

    __slots__ = ('_suit', '_rank', '_holder')

    def __init__(self, suit: Suit, rank: Rank, holder: Holder = None):
        # Requesting either half of a joker makes the whole card that joker.
        if suit == Suit.LITTLE_JOKER:
            rank = Rank.LITTLE_JOKER
        elif rank == Rank.LITTLE_JOKER:
            suit = Suit.LITTLE_JOKER
        elif suit == Suit.BIG_JOKER:
            rank = Rank.BIG_JOKER
        elif rank == Rank.BIG_JOKER:
            suit = Suit.BIG_JOKER

        self._suit = suit
        self._rank = rank
        self._holder: Holder = None
        self.transfer_to(holder)

    @staticmethod
    def is_joker_suit(suit: Suit) -> bool:
        return suit in (Suit.LITTLE_JOKER, Suit.BIG_JOKER)

    @staticmethod
    def is_joker_rank(rank: Rank) -> bool:
        return rank in (Rank.LITTLE_JOKER, Rank.BIG_JOKER)

    @classmethod
    def new_joker(cls, joker_type: JokerType, holder: Holder = None) -> 'Card':
        """Create a joker; the constructor forces the matching rank."""
        suit = Suit.BIG_JOKER if joker_type == JokerType.BIG else Suit.LITTLE_JOKER
        return cls(suit, Rank.TWO, holder)

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def holder(self) -> Holder:
        """Where the card currently is (deck, hand, discard pile, ...)."""
        return self._holder

    @holder.setter
    def holder(self, new_holder: Holder) -> None:
        self.transfer_to(new_holder)

    @property
    def has_holder(self) -> bool:
        return self._holder is not None

    def transfer_to(self, new_holder: Holder) -> bool:
        """
        Move this card to a new holder.

        The current holder is told it lost the card before the new holder is
        told it gained it, so a card is never reported as held by two stores
        at once. If the new holder refuses the card (full, or a duplicate it
        does not allow) the card is left without a holder.

        Args:
            new_holder: A CardStore, an ExternalHolder, or None

        Returns:
            False if a CardStore refused the card, True otherwise

        Raises:
            TypeError: If new_holder is not a supported holder type
        """
        if new_holder is not None and not isinstance(new_holder, (CardStore, ExternalHolder)):
            raise TypeError(f"Unsupported card holder: {new_holder!r}")

        old_holder = self._holder
        if isinstance(old_holder, CardStore):
            old_holder.lose_card(self)

        self._holder = new_holder

        if isinstance(new_holder, CardStore):
            if not new_holder.gain_card(self):
                logger.debug(f"{self} refused by {new_holder!r}, card has no holder")
                self._holder = None
                return False
        return True

    @property
    def is_big_joker(self) -> bool:
        return self._suit == Suit.BIG_JOKER and self._rank == Rank.BIG_JOKER

    @property
    def is_little_joker(self) -> bool:
        return self._suit == Suit.LITTLE_JOKER and self._rank == Rank.LITTLE_JOKER

    @property
    def is_joker(self) -> bool:
        return self.is_big_joker or self.is_little_joker

    @property
    def is_heart(self) -> bool:
        return self._suit == Suit.HEARTS

    @property
    def is_diamond(self) -> bool:
        return self._suit == Suit.DIAMONDS

    @property
    def is_spade(self) -> bool:
        return self._suit == Suit.SPADES

    @property
    def is_club(self) -> bool:
        return self._suit == Suit.CLUBS

    @property
    def is_red(self) -> bool:
        return self.is_heart or self.is_diamond

    @property
    def is_black(self) -> bool:
        return self.is_spade or self.is_club

    @property
    def color(self) -> SuitColor:
        if self.is_black:
            return SuitColor.BLACK
        if self.is_red:
            return SuitColor.RED
        return SuitColor.NONE

    @property
    def is_face_card(self) -> bool:
        return self._rank in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def is_spot_card(self) -> bool:
        return not self.is_face_card and not self.is_joker

    @property
    def name(self) -> str:
        """Long name, e.g. 'Ace of Spades' or 'Big Joker'."""
        if self.is_joker:
            return self._suit.title
        return f"{self._rank.title} of {self._suit.title}"

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self._rank}{self._suit}"

    def __repr__(self) -> str:
        return f"Card({self._suit.name}, {self._rank.name})"

    def __eq__(self, other: object) -> bool:
        """Cards are equal if rank and suit match; the holder is ignored."""
        if not isinstance(other, Card):
            return NotImplemented
        return self._suit == other._suit and self._rank == other._rank

    def __hash__(self) -> int:
        return hash((self._suit, self._rank))

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades,
                     '*j' for the little joker or '*J' for the big joker

        Returns:
            Card instance with no holder

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        # Jokers are case-sensitive, the suit letter tells them apart
        if card_str == '*j':
            return cls.new_joker(JokerType.LITTLE)
        if card_str == '*J':
            return cls.new_joker(JokerType.BIG)

        rank_str, suit_str = card_str[0].upper(), card_str[1].lower()
        try:
            rank = next(
                r for r in Rank
                if not cls.is_joker_rank(r) and _RANK_SYMBOLS[r] == rank_str
            )
            suit = next(
                s for s in Suit
                if not cls.is_joker_suit(s) and s.value == suit_str
            )
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(suit, rank)
