"""Interfaces and implementations for card containers."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from .card import Card

logger = logging.getLogger(__name__)


class CardStore(ABC):
    """
    Interface for anything that can hold cards (deck, hand, discard pile).

    Stores are never called directly by clients; a Card calls them when its
    holder changes.
    """

    @abstractmethod
    def gain_card(self, card: 'Card') -> bool:
        """
        Called when a card's holder becomes this store.

        Returns:
            True if the store kept the card, False if it refused it
        """
        pass

    @abstractmethod
    def lose_card(self, card: 'Card') -> None:
        """Called when a card held by this store moves elsewhere."""
        pass


class CardSequence:
    """
    Ordered cards with positional primitives.

    Owned by a CardCollection. Specialised collections (Deck, Hand) reorder
    cards only through these methods; adding and removing cards goes through
    the ownership protocol instead.
    """

    def __init__(self):
        self._cards: list['Card'] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> 'Card':
        return self._cards[index]

    def __iter__(self) -> Iterator['Card']:
        return iter(self._cards)

    def snapshot(self) -> tuple['Card', ...]:
        """Read-only copy of the current order."""
        return tuple(self._cards)

    def append(self, card: 'Card') -> None:
        self._cards.append(card)

    def discard(self, card: 'Card') -> bool:
        """Remove the first entry that is this very card object."""
        for i, held in enumerate(self._cards):
            if held is card:
                del self._cards[i]
                return True
        return False

    def move(self, source: int, target: int) -> None:
        """Take the card at source out and insert it at target."""
        card = self._cards.pop(source)
        self._cards.insert(target, card)

    def swap(self, i: int, j: int) -> None:
        self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def rotate(self, count: int) -> None:
        """Move the first count cards to the end, keeping their order."""
        self._cards[:] = self._cards[count:] + self._cards[:count]

    def reorder(self, cards: Iterable['Card']) -> None:
        """
        Replace the order with a permutation of the current cards.

        Raises:
            ValueError: If cards is not a permutation of the held cards
        """
        new_order = list(cards)
        if len(new_order) != len(self._cards) or {id(c) for c in new_order} != {id(c) for c in self._cards}:
            raise ValueError("New order must be a permutation of the held cards")
        self._cards[:] = new_order


class CardCollection(CardStore):
    """
    An ordered, bounded collection of cards.

    Cards join the collection by having their holder set to it, either
    directly or through add(). New cards go to the end. A full collection,
    or one refusing duplicates, silently rejects cards.

    Attributes:
        max_size: Maximum number of cards the collection can hold
        allow_duplicates: Whether value-equal cards may coexist
    """

    def __init__(self, max_size: int = 54, allow_duplicates: bool = False):
        """
        Initialize an empty collection.

        Args:
            max_size: Capacity of the collection
            allow_duplicates: Whether to accept cards equal to one already held

        Raises:
            ValueError: If max_size is negative
        """
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self._sequence = CardSequence()
        self._max_size = max_size
        self._allow_duplicates = allow_duplicates

    @property
    def cards(self) -> tuple['Card', ...]:
        """All cards in order."""
        return self._sequence.snapshot()

    @property
    def size(self) -> int:
        """Number of cards in the collection."""
        return len(self._sequence)

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def allow_duplicates(self) -> bool:
        return self._allow_duplicates

    @property
    def is_full(self) -> bool:
        return len(self._sequence) >= self._max_size

    @property
    def is_empty(self) -> bool:
        return len(self._sequence) == 0

    def __len__(self) -> int:
        return len(self._sequence)

    def __getitem__(self, index: int) -> 'Card':
        return self._sequence[index]

    def __iter__(self) -> Iterator['Card']:
        return iter(self._sequence.snapshot())

    def __contains__(self, card: object) -> bool:
        return any(card == held for held in self._sequence)

    def contains(self, card: 'Card') -> bool:
        """Whether a card equal to this one is in the collection."""
        return card in self

    def count(self, card: 'Card') -> int:
        """Number of cards equal to this one in the collection."""
        return sum(1 for held in self._sequence if held == card)

    def add(self, card: 'Card') -> bool:
        """
        Add a card to this collection.

        The card leaves its current holder first. A card that is refused
        ends up with no holder.

        Returns:
            True if the number of cards in the collection changed
        """
        before = len(self._sequence)
        card.transfer_to(self)
        return before != len(self._sequence)

    def add_cards(self, cards: Iterable['Card']) -> int:
        """
        Add several cards in order.

        Returns:
            Number of cards that were added
        """
        return sum(1 for card in cards if self.add(card))

    def relocate_last_to(self, index: int) -> bool:
        """
        Move the most recently added card (the last one) to index.

        Only positions before the last one are valid.

        Returns:
            False if nothing was moved
        """
        last_index = len(self._sequence) - 1
        if 0 <= index < last_index:
            self._sequence.move(last_index, index)
            return True
        return False

    def clear(self) -> None:
        """Release every card; each is left with no holder."""
        for card in self._sequence.snapshot():
            card.transfer_to(None)

    # CardStore implementation
    def gain_card(self, card: 'Card') -> bool:
        """Keep the card unless it is a refused duplicate or we are full."""
        if not self._allow_duplicates and card in self:
            logger.debug(f"{self!r} refused duplicate {card}")
            return False
        if self.is_full:
            logger.debug(f"{self!r} is full ({self._max_size}), refused {card}")
            return False
        self._sequence.append(card)
        return True

    def lose_card(self, card: 'Card') -> None:
        """Forget the card if it is held here."""
        if not self._sequence.discard(card):
            logger.debug(f"{self!r} asked to lose {card}, which it does not hold")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, max_size={self._max_size})"

    def __str__(self) -> str:
        if not self._sequence:
            return "Empty"
        return ' '.join(str(card) for card in self._sequence)
