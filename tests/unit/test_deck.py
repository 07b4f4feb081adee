"""Tests for deck implementation."""
import random

import pytest
from generic_cards.core.card import Card, ExternalHolder, Rank, Suit
from generic_cards.core.deck import Deck, DeckType
from generic_cards.core.hand import Hand


def scripted(indices):
    """Index source returning the given indices in order, recording each n."""
    remaining = iter(indices)
    calls = []

    def pick(n):
        calls.append(n)
        return next(remaining)

    pick.calls = calls
    return pick


def make_deck(card_strs, **kwargs):
    """Build a small deck holding the given cards, top first."""
    deck = Deck(max_size=kwargs.pop("max_size", len(card_strs)), **kwargs)
    for card_str in card_strs:
        deck.add(Card.from_string(card_str))
    return deck


def labels(deck):
    return [str(card) for card in deck.cards]


def test_standard_52_deck():
    """Test the 52-card deck has every normal card once and no jokers."""
    deck = Deck.make_standard(DeckType.STANDARD_52)
    assert deck.size == 52
    assert deck.max_size == 52
    assert not deck.allow_duplicates
    assert not any(card.is_joker for card in deck)
    assert len(set(deck.cards)) == 52
    assert all(card.holder is deck for card in deck)


def test_standard_52_deck_order():
    """Test new-deck order: hearts, diamonds, spades, clubs from two to ace."""
    deck = Deck.make_standard()
    assert deck.top_card == Card(Suit.HEARTS, Rank.TWO)
    assert deck[12] == Card(Suit.HEARTS, Rank.ACE)
    assert deck[13] == Card(Suit.DIAMONDS, Rank.TWO)
    assert deck.bottom_card == Card(Suit.CLUBS, Rank.ACE)


def test_standard_54_deck():
    """Test the 54-card deck adds the two jokers, big one first."""
    deck = Deck.make_standard(DeckType.STANDARD_54)
    assert deck.size == 54
    assert sum(1 for card in deck if card.is_big_joker) == 1
    assert sum(1 for card in deck if card.is_little_joker) == 1
    assert deck[52].is_big_joker
    assert deck[53].is_little_joker


def test_standard_deck_is_full():
    """Test nothing more fits in a standard deck."""
    deck = Deck.make_standard()
    extra = Card(Suit.HEARTS, Rank.TWO)
    assert not deck.add(extra)
    assert deck.size == 52


def test_empty_deck():
    """Test an empty deck has no top or bottom card and deals nothing."""
    deck = Deck()
    assert deck.top_card is None
    assert deck.bottom_card is None
    assert not deck.deal_top_to(None)
    assert not deck.deal_bottom_to(None)


def test_deal_top_to_hand():
    """Test dealing the top card to a hand with room."""
    deck = Deck.make_standard()
    hand = Hand(max_size=5, allow_duplicates=True)
    top = deck.top_card

    assert deck.deal_top_to(hand)
    assert deck.size == 51
    assert hand.size == 1
    assert top.holder is hand
    assert hand[0] is top
    assert deck.top_card == Card(Suit.HEARTS, Rank.THREE)


def test_deal_bottom_to_hand():
    """Test dealing from the bottom."""
    deck = Deck.make_standard()
    hand = Hand()
    bottom = deck.bottom_card

    assert deck.deal_bottom_to(hand)
    assert deck.size == 51
    assert hand[0] is bottom
    assert deck.bottom_card == Card(Suit.CLUBS, Rank.KING)


def test_deal_top_to_full_hand():
    """Test dealing to a full hand drops the card from both."""
    deck = Deck.make_standard()
    hand = Hand(max_size=1)
    hand.add(Card(Suit.SPADES, Rank.ACE))
    top = deck.top_card

    assert deck.deal_top_to(hand)
    assert hand.size == 1
    assert deck.size == 51
    assert top.holder is None


def test_deal_to_external_holder():
    """Test dealing a card onto the table."""
    deck = Deck.make_standard()
    table = ExternalHolder("table")
    top = deck.top_card

    assert deck.deal_top_to(table)
    assert top.holder is table
    assert deck.size == 51


def test_deal_several():
    """Test dealing more cards than the deck holds stops when it runs out."""
    deck = make_deck(["As", "Kh", "Qd"])
    hand = Hand()
    assert deck.deal_top(5, hand) == 3
    assert deck.size == 0
    assert [str(c) for c in hand] == ["As", "Kh", "Qd"]


def test_cut_from_top():
    """Test cutting ten cards from a fresh deck."""
    deck = Deck.make_standard()
    original = deck.cards

    assert deck.cut_from_top(10)
    assert deck.size == 52
    assert deck.top_card is original[10]
    assert deck.cards[-10:] == original[:10]
    assert deck.cards[:42] == original[10:]


@pytest.mark.parametrize("count,expected", [
    (0, ["2h", "3h", "4h", "5h"]),
    (1, ["3h", "4h", "5h", "2h"]),
    (3, ["5h", "2h", "3h", "4h"]),
])
def test_cut_small_deck(count, expected):
    """Test cuts keep the order within each part."""
    deck = make_deck(["2h", "3h", "4h", "5h"])
    assert deck.cut_from_top(count)
    assert labels(deck) == expected


@pytest.mark.parametrize("count", [4, 5])
def test_cut_whole_deck_rejected(count):
    """Test cutting the whole deck or more does nothing."""
    deck = make_deck(["2h", "3h", "4h", "5h"])
    assert not deck.cut_from_top(count)
    assert labels(deck) == ["2h", "3h", "4h", "5h"]


def test_cut_negative():
    """Test a negative cut is an error."""
    with pytest.raises(ValueError):
        Deck.make_standard().cut_from_top(-1)


def test_ideal_shuffle_even():
    """Test an out-shuffle interleaves the halves, top half first."""
    deck = make_deck(["2h", "3h", "4h", "5h", "6h", "7h"])
    deck.ideal_shuffle()
    assert labels(deck) == ["2h", "5h", "3h", "6h", "4h", "7h"]


def test_ideal_shuffle_odd():
    """Test the extra bottom card of an odd deck ends up last."""
    deck = make_deck(["2h", "3h", "4h", "5h", "6h"])
    deck.ideal_shuffle()
    assert labels(deck) == ["2h", "4h", "3h", "5h", "6h"]


def test_ideal_shuffle_permutation_52():
    """Test even decks: index 2i comes from the top half, 2i+1 from the bottom."""
    deck = Deck.make_standard()
    original = deck.cards
    deck.ideal_shuffle()
    for i in range(26):
        assert deck[2 * i] is original[i]
        assert deck[2 * i + 1] is original[26 + i]


def test_eight_out_shuffles_restore_52():
    """Test eight perfect out-shuffles bring a 52-card deck back to order."""
    deck = Deck.make_standard()
    original = deck.cards
    deck.ideal_shuffle(7)
    assert deck.cards != original
    deck.ideal_shuffle()
    assert deck.cards == original


@pytest.mark.parametrize("card_strs", [[], ["As"]])
def test_ideal_shuffle_tiny_decks(card_strs):
    """Test out-shuffling empty and single-card decks changes nothing."""
    deck = make_deck(card_strs, max_size=5)
    deck.ideal_shuffle(3)
    assert labels(deck) == card_strs


def test_shuffle_swap_trace():
    """Test each position is swapped with an index drawn from the whole deck."""
    pick = scripted([3, 3, 0, 1])
    deck = make_deck(["2h", "3h", "4h", "5h"], random_index=pick)

    deck.shuffle()
    # 0<->3, 1<->3, 2<->0, 3<->1
    assert labels(deck) == ["4h", "3h", "5h", "2h"]
    assert pick.calls == [4, 4, 4, 4]


def test_shuffle_times_repeats_passes():
    """Test shuffle(times) runs full passes one after another."""
    pick = scripted([1, 0, 1, 1])
    deck = make_deck(["2h", "3h"])

    deck.shuffle(2, random_index=pick)
    # Pass one: 0<->1 then 1<->0 -> 2h 3h; pass two: 0<->1 then 1<->1 -> 3h 2h
    assert labels(deck) == ["3h", "2h"]
    assert pick.calls == [2, 2, 2, 2]


def test_shuffle_per_call_source_overrides_deck():
    """Test an index source passed to shuffle wins over the deck's."""
    deck_pick = scripted([])
    call_pick = scripted([0, 0])
    deck = make_deck(["2h", "3h"], random_index=deck_pick)

    deck.shuffle(random_index=call_pick)
    assert labels(deck) == ["3h", "2h"]
    assert deck_pick.calls == []


def test_shuffle_is_reproducible():
    """Test seeded sources give identical shuffles."""
    deck1 = Deck.make_standard(random_index=random.Random(7).randrange)
    deck2 = Deck.make_standard(random_index=random.Random(7).randrange)
    deck1.shuffle(3)
    deck2.shuffle(3)
    assert deck1.cards == deck2.cards
    assert sorted(map(str, deck1.cards)) == sorted(map(str, Deck.make_standard().cards))


def test_shuffle_keeps_ownership():
    """Test shuffling only reorders; every card still belongs to the deck."""
    deck = Deck.make_standard(DeckType.STANDARD_54)
    deck.shuffle(10)
    assert deck.size == 54
    assert all(card.holder is deck for card in deck)


def test_shuffling_empty_deck():
    """Test shuffling an empty deck never asks for an index."""
    pick = scripted([])
    deck = Deck(random_index=pick)
    deck.shuffle(5)
    deck.ideal_shuffle(5)
    assert deck.size == 0
    assert pick.calls == []


def test_negative_shuffle_count():
    """Test negative shuffle counts are errors."""
    deck = Deck.make_standard()
    with pytest.raises(ValueError):
        deck.shuffle(-1)
    with pytest.raises(ValueError):
        deck.ideal_shuffle(-1)
