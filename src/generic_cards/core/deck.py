"""Deck implementation."""
import logging
import random
from enum import Enum
from typing import Callable, Optional

from .card import Card, Holder, JokerType, Rank, Suit
from .containers import CardCollection

logger = logging.getLogger(__name__)

# Returns an index in [0, n) for a given n, e.g. random.Random().randrange
RandomIndex = Callable[[int], int]


class DeckType(Enum):
    """Standard deck compositions."""
    STANDARD_52 = "standard52"
    STANDARD_54 = "standard54"


class Deck(CardCollection):
    """
    A deck of playing cards.

    Index 0 is the top card, the last index is the bottom card.

    Attributes:
        max_size: Maximum number of cards the deck can hold
        allow_duplicates: Whether value-equal cards may coexist
    """

    def __init__(
        self,
        max_size: int = 54,
        allow_duplicates: bool = False,
        random_index: Optional[RandomIndex] = None,
    ):
        """
        Initialize an empty deck.

        Args:
            max_size: Capacity of the deck
            allow_duplicates: Whether to accept cards equal to one already held
            random_index: Index source used by shuffle(); defaults to a
                          fresh random.Random
        """
        super().__init__(max_size, allow_duplicates)
        self._random_index = random_index or random.Random().randrange

    @classmethod
    def make_standard(
        cls,
        deck_type: DeckType = DeckType.STANDARD_52,
        random_index: Optional[RandomIndex] = None,
    ) -> 'Deck':
        """
        Create a full deck in new-deck order.

        Cards run hearts, diamonds, spades, clubs, each from two to ace. A
        54-card deck then has the big joker followed by the little joker.
        """
        with_jokers = deck_type == DeckType.STANDARD_54
        deck = cls(54 if with_jokers else 52, False, random_index)

        for suit in Suit:
            if Card.is_joker_suit(suit):
                continue
            for rank in Rank:
                if not Card.is_joker_rank(rank):
                    Card(suit, rank, deck)

        if with_jokers:
            Card.new_joker(JokerType.BIG, deck)
            Card.new_joker(JokerType.LITTLE, deck)

        logger.debug(f"Created {deck_type.value} deck with {deck.size} cards")
        return deck

    @property
    def top_card(self) -> Optional[Card]:
        return self._sequence[0] if self._sequence else None

    @property
    def bottom_card(self) -> Optional[Card]:
        return self._sequence[-1] if self._sequence else None

    def deal_top_to(self, new_holder: Holder) -> bool:
        """
        Send the top card somewhere else (dealing a card).

        The card leaves the deck even if the new holder refuses it.

        Returns:
            False if the deck was empty
        """
        if not self._sequence:
            return False
        self._sequence[0].transfer_to(new_holder)
        return True

    def deal_bottom_to(self, new_holder: Holder) -> bool:
        """
        Send the bottom card somewhere else (dealing from the bottom).

        Returns:
            False if the deck was empty
        """
        if not self._sequence:
            return False
        self._sequence[-1].transfer_to(new_holder)
        return True

    def deal_top(self, count: int, new_holder: Holder) -> int:
        """
        Deal up to count cards from the top, one at a time.

        Returns:
            Number of cards dealt (fewer than count if the deck runs out)
        """
        dealt = 0
        while dealt < count and self.deal_top_to(new_holder):
            dealt += 1
        return dealt

    def cut_from_top(self, count: int) -> bool:
        """
        Cut count cards from the top to the bottom.

        The card at position count becomes the new top. Cutting the whole
        deck is not a cut.

        Returns:
            False if count is not smaller than the deck size

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"Cannot cut a negative number of cards: {count}")
        if count < len(self._sequence):
            self._sequence.rotate(count)
            return True
        return False

    def ideal_shuffle(self, times: int = 1) -> None:
        """
        Perform perfect out-shuffles, the "ideal" riffle by human hands.

        The deck is split after its first half (the bottom half gets the odd
        card) and the halves are interleaved starting with the top half, so
        the top card stays on top.

        Args:
            times: Number of shuffles to perform
        """
        if times < 0:
            raise ValueError(f"Cannot shuffle a negative number of times: {times}")
        for _ in range(times):
            cards = self._sequence.snapshot()
            half = len(cards) // 2
            top, bottom = cards[:half], cards[half:]

            shuffled = []
            for top_card, bottom_card in zip(top, bottom):
                shuffled.append(top_card)
                shuffled.append(bottom_card)
            shuffled.extend(bottom[len(top):])
            self._sequence.reorder(shuffled)

    def shuffle(self, times: int = 1, random_index: Optional[RandomIndex] = None) -> None:
        """
        Shuffle the deck by swapping every position with a random one.

        Each position, in order, is swapped with a position drawn from the
        whole deck. Note this is not Fisher-Yates; some orders come up more
        often than others.

        Args:
            times: Number of shuffles to perform
            random_index: Index source for this call only
        """
        if times < 0:
            raise ValueError(f"Cannot shuffle a negative number of times: {times}")
        pick = random_index or self._random_index
        count = len(self._sequence)
        for _ in range(times):
            for i in range(count):
                self._sequence.swap(i, pick(count))
        logger.debug(f"Shuffled {self!r} {times} time(s)")
