"""Hand and discard pile implementations."""

import logging
from typing import Optional

from .card import Card, Holder
from .containers import CardCollection

logger = logging.getLogger(__name__)


class Hand(CardCollection):
    """
    A player's hand.

    Allows duplicates by default, since games played with several decks can
    deal the same card twice.

    Attributes:
        max_size: Maximum number of cards the hand can hold
        allow_duplicates: Whether value-equal cards may coexist
    """

    def __init__(self, max_size: int = 54, allow_duplicates: bool = True):
        super().__init__(max_size, allow_duplicates)

    def insert(self, card: Card, index: int) -> bool:
        """
        Add a card and place it at index.

        The card lands at the back when index is at or past the end. A card
        already in the hand is moved to index.

        Returns:
            False if the hand refused the card
        """
        if not card.transfer_to(self):
            return False
        self.relocate_last_to(index)
        return True

    def give(self, index: int, new_holder: Holder) -> bool:
        """
        Send the card at index to another holder.

        Returns:
            False if there is no card at index
        """
        if not 0 <= index < self.size:
            logger.debug(f"No card at position {index} in {self!r}")
            return False
        self[index].transfer_to(new_holder)
        return True

    def __str__(self) -> str:
        """String representation showing cards in hand."""
        if self.is_empty:
            return "Empty hand"
        return f"Hand: {super().__str__()}"


class DiscardPile(CardCollection):
    """
    A face-up pile; the most recently discarded card is on top.

    Attributes:
        max_size: Maximum number of cards the pile can hold
        allow_duplicates: Whether value-equal cards may coexist
    """

    def __init__(self, max_size: int = 54, allow_duplicates: bool = True):
        super().__init__(max_size, allow_duplicates)

    @property
    def top_card(self) -> Optional[Card]:
        return self[-1] if not self.is_empty else None

    def take_top_to(self, new_holder: Holder) -> bool:
        """
        Pick up the top card.

        Returns:
            False if the pile is empty
        """
        top = self.top_card
        if top is None:
            return False
        top.transfer_to(new_holder)
        return True
