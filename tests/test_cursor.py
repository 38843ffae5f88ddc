"""Tests for the shared character cursor."""

import pytest

from toyparse import Cursor, UnexpectedEndOfInput


class TestLookahead:
    def test_peek_does_not_consume(self):
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.pos == 0

    def test_peek_with_offset(self):
        cursor = Cursor("abc")
        assert cursor.peek(2) == "c"

    def test_peek_at_end_raises(self):
        cursor = Cursor("")
        with pytest.raises(UnexpectedEndOfInput) as exc_info:
            cursor.peek()
        assert exc_info.value.position == 0

    def test_peek_offset_past_end_raises(self):
        with pytest.raises(UnexpectedEndOfInput):
            Cursor("a").peek(1)

    def test_starts_with(self):
        cursor = Cursor("</div>")
        assert cursor.starts_with("</")
        assert not cursor.starts_with("<d")
        assert cursor.starts_with("")

    def test_at_end(self):
        cursor = Cursor("x")
        assert not cursor.at_end()
        cursor.advance()
        assert cursor.at_end()


class TestConsumption:
    def test_advance_returns_current_character(self):
        cursor = Cursor("xy")
        assert cursor.advance() == "x"
        assert cursor.advance() == "y"
        assert cursor.pos == 2

    def test_advance_is_codepoint_safe(self):
        cursor = Cursor("é😀z")
        assert cursor.advance() == "é"
        assert cursor.advance() == "😀"
        assert cursor.advance() == "z"
        assert cursor.at_end()

    def test_advance_at_end_raises(self):
        cursor = Cursor("")
        with pytest.raises(UnexpectedEndOfInput):
            cursor.advance()

    def test_consume_while_stops_at_failing_character(self):
        cursor = Cursor("abc123")
        assert cursor.consume_while(str.isalpha) == "abc"
        assert cursor.peek() == "1"

    def test_consume_while_may_return_empty(self):
        cursor = Cursor("123")
        assert cursor.consume_while(str.isalpha) == ""
        assert cursor.pos == 0

    def test_consume_while_stops_at_end(self):
        cursor = Cursor("abc")
        assert cursor.consume_while(lambda ch: True) == "abc"
        assert cursor.at_end()

    def test_skip_whitespace(self):
        cursor = Cursor(" \t\n\r x")
        cursor.skip_whitespace()
        assert cursor.peek() == "x"

    def test_consume_if(self):
        cursor = Cursor("</p>")
        assert not cursor.consume_if("<p")
        assert cursor.pos == 0
        assert cursor.consume_if("</")
        assert cursor.peek() == "p"

    def test_position_never_moves_backwards(self):
        cursor = Cursor("ab cd")
        positions = [cursor.pos]
        cursor.consume_while(str.isalpha)
        positions.append(cursor.pos)
        cursor.skip_whitespace()
        positions.append(cursor.pos)
        cursor.consume_while(str.isdigit)
        positions.append(cursor.pos)
        cursor.advance()
        positions.append(cursor.pos)
        assert positions == sorted(positions)


class TestErrorLocation:
    def test_error_carries_line_and_column(self):
        cursor = Cursor("ab\ncd")
        cursor.consume_while(lambda ch: ch != "d")
        error = cursor.error(UnexpectedEndOfInput)
        assert error.position == 4
        assert error.line == 2
        assert error.column == 2
        assert error.text == "cd"
