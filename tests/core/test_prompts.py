"""Tests for input parsing and the re-prompt loop."""

import pytest
from decimal import Decimal

from blackjack.errors import InputStreamFailure, InvalidInput
from blackjack.prompts import (
    Action,
    ScriptedInput,
    parse_action,
    parse_bid,
    parse_continue,
    parse_player_count,
    prompt_until,
)


class TestParsers:
    """Tests for the typed parsers."""

    @pytest.mark.parametrize("text", ["h", "H", "hit", "Hit", "HIT", " hit "])
    def test_hit_tokens(self, text):
        """Test the hit token family, case-insensitively."""
        assert parse_action(text) == Action.HIT

    @pytest.mark.parametrize("text", ["s", "S", "stand", "Stand", "STAND"])
    def test_stand_tokens(self, text):
        """Test the stand token family, case-insensitively."""
        assert parse_action(text) == Action.STAND

    @pytest.mark.parametrize("text", ["", "x", "hi", "double", "split"])
    def test_bad_action(self, text):
        """Test unknown actions are invalid input."""
        with pytest.raises(InvalidInput):
            parse_action(text)

    @pytest.mark.parametrize("text,expected", [("y", True), ("YES", True), ("n", False), ("No", False)])
    def test_continue_tokens(self, text, expected):
        """Test yes/no answers."""
        assert parse_continue(text) is expected

    def test_bad_continue(self):
        """Test an unknown answer is invalid input."""
        with pytest.raises(InvalidInput):
            parse_continue("maybe")

    def test_bid_within_wallet(self):
        """Test a positive bet the wallet covers."""
        assert parse_bid("100", Decimal("1000")) == 100
        assert parse_bid("1000", Decimal("1000")) == 1000

    def test_bid_fractional_wallet(self):
        """Test whole bets against a wallet with cents."""
        assert parse_bid("12", Decimal("12.50")) == 12
        with pytest.raises(InvalidInput):
            parse_bid("13", Decimal("12.50"))

    @pytest.mark.parametrize("text", ["abc", "", "0", "-5", "10.5", "1001", "1_000", "١٠٠", "１０"])
    def test_bad_bid(self, text):
        """Test non-numeric, non-positive and over-wallet bets."""
        with pytest.raises(InvalidInput):
            parse_bid(text, Decimal("1000"))

    def test_player_count(self):
        """Test counts inside 1-5."""
        assert parse_player_count("1") == 1
        assert parse_player_count(" 5 ") == 5

    @pytest.mark.parametrize("text", ["0", "6", "two", "0_3", "٣", "+", "3 4"])
    def test_bad_player_count(self, text):
        """Test out-of-range, separated and non-ASCII counts."""
        with pytest.raises(InvalidInput):
            parse_player_count(text)

    def test_invalid_input_keeps_text(self):
        """Test the raw text travels with the error."""
        with pytest.raises(InvalidInput) as exc_info:
            parse_action("jump")
        assert exc_info.value.text == "jump"
        assert isinstance(exc_info.value, ValueError)


class TestPromptUntil:
    """Tests for the re-prompt loop."""

    def test_returns_first_valid_answer(self):
        """Test invalid answers are skipped and reported."""
        source = ScriptedInput(["x", "q", "s", "h"])
        messages = []

        action = prompt_until(source, "Action? ", parse_action, "try again", messages.append)

        assert action == Action.STAND
        assert messages == ["try again", "try again"]
        assert source.prompts == ["Action? "] * 3
        assert source.remaining == 1

    def test_without_notifier(self):
        """Test the loop works with nobody listening."""
        source = ScriptedInput(["nope", "no", "y"])
        assert prompt_until(source, "?", parse_continue, "again") is False
        assert source.remaining == 1

    def test_stream_failure_propagates(self):
        """Test an exhausted source aborts instead of looping."""
        source = ScriptedInput(["bogus"])
        with pytest.raises(InputStreamFailure):
            prompt_until(source, "Action? ", parse_action, "try again")

    def test_stream_failure_is_eof(self):
        """Test InputStreamFailure can be caught as EOFError."""
        with pytest.raises(EOFError):
            ScriptedInput([]).read_line("?")
