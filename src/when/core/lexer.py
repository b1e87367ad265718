"""Lexer turning a time phrase into a flat list of tokens.

The lexer is a small state machine. Each state is a method that consumes
some input, emits zero or more tokens and returns the next state, or ``None``
when the input is exhausted or an error was recorded.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from when.core.exceptions import LexError
from when.core.tokens import (
    EOF_TOKEN,
    JOIN_WORDS,
    KEYWORDS,
    LONG_UNITS,
    MONTHS,
    NUMBER_WORDS,
    SHORT_UNITS,
    WEEKDAYS,
    WORD_KINDS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

State = Callable[[], Any] | None

_EOF = ""
_JOIN_ADD = ",+&"


def lex(text: str) -> list[Token]:
    """Split *text* into tokens, ending with an EOF token.

    Raises:
        LexError: On the first character or word that cannot be tokenized.
    """
    lexer = Lexer(text)
    tokens = lexer.run()

    if tokens and tokens[-1].kind is TokenKind.ERROR:
        raise LexError(tokens[-1].literal, lexer.error_literal, lexer.error_position)

    tokens.append(EOF_TOKEN)
    logger.debug(f"lex({text!r}) -> {[str(t) for t in tokens]}")
    return tokens


def _is_word_rune(ch: str) -> bool:
    return ch == "'" or ch.isalpha()


class Lexer:
    """Single-use tokenizer for one input string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.start = 0  # start of the pending token
        self.pos = 0
        self.tokens: list[Token] = []
        self.error_literal = ""
        self.error_position = 0

    def run(self) -> list[Token]:
        state: State = self._lex_expr
        while state is not None:
            state = state()
        return self.tokens

    def _peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        if i >= len(self.text):
            return _EOF
        return self.text[i]

    def _read(self) -> str:
        ch = self._peek()
        if ch:
            self.pos += 1
        return ch

    def _read_while(self, pred: Callable[[str], bool]) -> None:
        while self.pos < len(self.text) and pred(self.text[self.pos]):
            self.pos += 1

    def _value(self) -> str:
        return self.text[self.start : self.pos]

    def _emit(self, kind: TokenKind, literal: str | None = None) -> None:
        if literal is None:
            literal = self._value()
        self.tokens.append(Token(kind, literal))
        self.start = self.pos

    def _ignore(self) -> None:
        self.start = self.pos

    def _error(self, message: str, literal: str) -> State:
        self.tokens.append(Token(TokenKind.ERROR, message))
        self.error_literal = literal
        self.error_position = self.start
        return None

    def _lex_expr(self) -> State:
        self._read_while(str.isspace)
        self._ignore()

        ch = self._peek()
        if ch == _EOF:
            return None
        if ch == "@":
            self._read()
            self._emit(TokenKind.KEYWORD)
            return self._lex_expr
        if ch == "+":
            self._read()
            self._emit(TokenKind.OPERATOR_ADD)
            return self._lex_expr
        if ch == "-":
            self._read()
            self._emit(TokenKind.OPERATOR_SUB)
            return self._lex_expr
        if ch.isdecimal():
            return self._lex_digit
        if ch.isalpha():
            return self._lex_word
        return self._error("invalid character", ch)

    def _lex_digit(self) -> State:
        self._read_while(str.isdecimal)
        self._emit(TokenKind.DIGIT)

        ch = self._peek()
        if ch == _EOF:
            return None
        if ch in ("-", "/"):
            self._read()
            self._emit(TokenKind.DATE_SEPARATOR)
            return self._lex_expr
        if ch == "s":
            return self._lex_seconds_or_ordinal
        if ch in SHORT_UNITS:
            self._read()
            self._emit(TokenKind.UNIT)
            return self._lex_short_unit_join
        if ch in ("n", "r", "t"):
            return self._lex_ordinal
        if ch in ("a", "p"):
            return self._lex_twelve_hour
        if ch == ":":
            return self._lex_colon
        return self._lex_expr

    def _lex_colon(self) -> State:
        self._read()
        self._emit(TokenKind.COLON)
        if not self._peek().isdecimal():
            return self._error("colon must be followed by a digit", ":")
        return self._lex_digit

    def _lex_seconds_or_ordinal(self) -> State:
        self._read()
        if self._peek() == "t":
            self._read()
            self._emit(TokenKind.ORDINAL)
            return self._lex_expr
        self._emit(TokenKind.UNIT)
        return self._lex_short_unit_join

    def _lex_ordinal(self) -> State:
        first = self._read()
        second = self._read()
        # 2nd, 3rd, 4th-9th; "st" is handled with the seconds unit
        if (first in ("n", "r") and second == "d") or (first == "t" and second == "h"):
            self._emit(TokenKind.ORDINAL)
            return self._lex_expr
        return self._error("invalid ordinal", self._value())

    def _lex_twelve_hour(self) -> State:
        marker = self.text[self.pos : self.pos + 2]
        after = self._peek(2)
        if marker.lower() in ("am", "pm") and (after == _EOF or after.isspace()):
            self.pos += 2
            self._emit(TokenKind.TWELVE_HOUR)
            return self._lex_expr
        return self._error("expected twelve hour am/pm marker", marker)

    def _lex_word(self) -> State:
        self._read_while(_is_word_rune)
        word = self._value().lower()

        if word in WORD_KINDS:
            self._emit(WORD_KINDS[word])
            return self._lex_expr
        if word in NUMBER_WORDS:
            self._emit(TokenKind.DIGIT, NUMBER_WORDS[word])
            return self._lex_expr
        if word in LONG_UNITS:
            self._emit(TokenKind.UNIT)
            return self._lex_long_unit_join
        if word in WEEKDAYS:
            self._emit(TokenKind.WEEKDAY)
            return self._lex_expr
        if word in MONTHS:
            self._emit(TokenKind.MONTH)
            return self._lex_expr
        if word in KEYWORDS:
            self._emit(TokenKind.KEYWORD)
            return self._lex_expr
        return self._error("invalid character", self._value())

    def _lex_long_unit_join(self) -> State:
        ch = self._peek()
        if ch == _EOF:
            return None
        if ch in _JOIN_ADD:
            self._read()
            self._emit(TokenKind.OPERATOR_ADD)
            return self._lex_expr
        if ch == "-":
            self._read()
            self._emit(TokenKind.OPERATOR_SUB)
            return self._lex_expr
        if not ch.isspace():
            return self._error("invalid character", ch)
        return self._lex_join_space

    def _lex_short_unit_join(self) -> State:
        ch = self._peek()
        if ch == _EOF:
            return None
        if ch in _JOIN_ADD:
            self._read()
            self._emit(TokenKind.OPERATOR_ADD)
            return self._lex_expr
        if ch == "-":
            self._read()
            self._emit(TokenKind.OPERATOR_SUB)
            return self._lex_expr
        if ch.isspace():
            return self._lex_join_space
        # 1y2M: terms written back to back
        self._emit(TokenKind.OPERATOR_ADD)
        return self._lex_expr

    def _lex_join_space(self) -> State:
        self._read_while(str.isspace)

        ch = self._peek()
        if ch == _EOF:
            self._ignore()
            return None
        if ch in ("+", "&"):
            self._ignore()
            self._read()
            self._emit(TokenKind.OPERATOR_ADD)
            return self._lex_expr
        if ch == "-":
            self._ignore()
            self._read()
            self._emit(TokenKind.OPERATOR_SUB)
            return self._lex_expr
        if ch.isdecimal():
            self._emit(TokenKind.OPERATOR_ADD)
            return self._lex_expr
        return self._lex_join_word

    def _lex_join_word(self) -> State:
        space = self._value()
        self._ignore()

        end = self.pos
        while end < len(self.text) and self.text[end].isalpha():
            end += 1
        word = self.text[self.pos : end].lower()

        if word in JOIN_WORDS:
            self.pos = end
            self._emit(JOIN_WORDS[word])
        elif word in NUMBER_WORDS:
            # the number itself is read by the next state
            self._emit(TokenKind.OPERATOR_ADD, space)
        return self._lex_expr
