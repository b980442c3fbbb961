"""Tests for Card and Deck classes."""

import pytest
from collections import Counter
from random import Random

from hypothesis import given, strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import DeckEmpty


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_value(self):
        """Test card blackjack values."""
        assert Card(Rank.TWO, Suit.HEARTS).value == 2
        assert Card(Rank.NINE, Suit.HEARTS).value == 9
        assert Card(Rank.TEN, Suit.HEARTS).value == 10
        assert Card(Rank.JACK, Suit.HEARTS).value == 10
        assert Card(Rank.QUEEN, Suit.HEARTS).value == 10
        assert Card(Rank.KING, Suit.HEARTS).value == 10
        assert Card(Rank.ACE, Suit.HEARTS).value == 11

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Rank.ACE, Suit.SPADES).is_ace
        assert not Card(Rank.KING, Suit.SPADES).is_ace

    def test_card_str(self):
        """Test the canonical string form."""
        assert str(Card(Rank.ACE, Suit.HEARTS)) == "A/Hearts"
        assert str(Card(Rank.TEN, Suit.CLUBS)) == "10/Clubs"
        assert str(Card(Rank.QUEEN, Suit.DIAMONDS)) == "Q/Diamonds"

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("kc") == Card(Rank.KING, Suit.CLUBS)
        assert Card.from_string("Q♠") == Card(Rank.QUEEN, Suit.SPADES)

    def test_card_from_canonical_string(self):
        """Test that str() output parses back to the same card."""
        for suit in Suit:
            for rank in Rank:
                card = Card(rank, suit)
                assert Card.from_string(str(card)) == card

    @pytest.mark.parametrize("text", ["", "A", "1H", "AX", "11/Hearts", "A/Stars"])
    def test_card_from_string_invalid(self, text):
        """Test that malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_card_hash(self):
        """Test that cards can be used in sets/dicts."""
        cards = {Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}
        assert len(cards) == 1


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_creation(self):
        """Test creating a new deck."""
        deck = Deck()
        assert len(deck) == 52

    def test_deck_has_all_cards(self):
        """Test that deck contains all 52 unique rank/suit pairs."""
        cards = list(Deck())
        assert len(set(cards)) == 52
        assert set(cards) == {Card(rank, suit) for suit in Suit for rank in Rank}

    def test_deck_generation_order(self):
        """Test suit-major, rank-minor order before shuffling."""
        cards = list(Deck())
        assert str(cards[0]) == "A/Hearts"
        assert str(cards[1]) == "2/Hearts"
        assert str(cards[12]) == "K/Hearts"
        assert str(cards[13]) == "A/Spades"
        assert str(cards[26]) == "A/Diamonds"
        assert str(cards[51]) == "K/Clubs"

    def test_deck_shuffle(self):
        """Test shuffling changes card order but not the cards."""
        deck = Deck(rng=Random(42))
        order_before = list(deck)

        deck.shuffle()
        order_after = list(deck)

        assert Counter(order_before) == Counter(order_after)
        assert order_before != order_after

    def test_deck_shuffle_reproducible(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck(rng=Random(7))
        deck2 = Deck(rng=Random(7))
        deck1.shuffle()
        deck2.shuffle()
        assert list(deck1) == list(deck2)

    @given(seed=st.integers())
    def test_shuffle_is_permutation(self, seed):
        """Test that shuffle never loses or duplicates cards."""
        deck = Deck(rng=Random(seed))
        deck.shuffle()
        cards = list(deck)
        assert len(cards) == 52
        assert set(cards) == set(Deck())

    def test_shuffle_single_card(self):
        """Test shuffling a one-card deck is a no-op."""
        deck = Deck.stacked(["AH"], rng=Random(1))
        deck.shuffle()
        assert [str(c) for c in deck] == ["A/Hearts"]

    def test_deck_draw_from_top(self):
        """Test drawing removes and returns the first card."""
        deck = Deck()
        first = list(deck)[0]
        card = deck.draw()
        assert card == first
        assert len(deck) == 51
        assert card not in list(deck)

    def test_deck_draw_all(self):
        """Test drawing all cards from deck."""
        deck = Deck()
        cards = [deck.draw() for _ in range(52)]
        assert len(deck) == 0
        assert len(set(cards)) == 52

    def test_deck_draw_empty_raises(self):
        """Test that drawing from empty deck raises DeckEmpty."""
        deck = Deck()
        for _ in range(52):
            deck.draw()

        with pytest.raises(DeckEmpty):
            deck.draw()

    def test_deck_empty_is_index_error(self):
        """Test that DeckEmpty can be caught as IndexError."""
        with pytest.raises(IndexError):
            Deck.stacked([]).draw()

    def test_deck_reset(self):
        """Test resetting deck."""
        deck = Deck()
        deck.draw()
        deck.draw()
        assert len(deck) == 50

        deck.reset()
        assert len(deck) == 52

    def test_stacked_deck_order(self):
        """Test that a stacked deck deals in the given order."""
        deck = Deck.stacked(["KH", Card(Rank.TWO, Suit.CLUBS), "A/Spades"])
        assert [str(deck.draw()) for _ in range(3)] == ["K/Hearts", "2/Clubs", "A/Spades"]
