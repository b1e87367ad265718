"""Recursive-descent parser and evaluator for time phrases.

A phrase resolves to one *anchor* instant plus an ordered list of duration
terms written before it ("1 year 2 months from ...")::

    [terms (ago | before EXPR | from EXPR | after EXPR)] | EXPR

``EXPR`` is a date and/or a time ("the 2nd Tuesday of March at noon"),
optionally followed by right-hand terms ("+ 5 days") that are applied to the
anchor as soon as they are read. Left-hand terms are applied to the finished
anchor, in the order they were written, negated for ``ago`` and ``before``.

Once a date has been resolved, a later production may only fill in the
time, and the other way round. Specifying either one twice is an error.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from tzlocal import get_localzone

from when.core.exceptions import ParseError
from when.core.lexer import lex
from when.core.timeutil import (
    add_calendar,
    add_duration,
    add_unit,
    last_day_of_month,
    make_datetime,
    normalize_unit,
    nth_last_weekday_of_month,
    nth_weekday_of_month,
    weekday_distance,
    weekday_index,
)
from when.core.tokens import EOF_TOKEN, MONTHS, WEEKDAYS, Token, TokenKind

logger = logging.getLogger(__name__)

_RELATIVE_MONTHS = {"the": 0, "last": -1, "next": 1}
_DAY_OFFSETS = {"today": 0, "tomorrow": 1, "yesterday": -1}
_MERIDIEMS = {"morning": "am", "afternoon": "pm", "evening": "pm"}


def parse_at(text: str, reference: datetime) -> datetime:
    """Resolve *text* relative to the *reference* instant.

    Empty or whitespace-only text resolves to *reference* itself.

    Raises:
        LexError: If the text contains a character or word that is not understood.
        ParseError: If the words do not form a supported phrase.
    """
    tokens = lex(text)
    if tokens[0].kind is TokenKind.EOF:
        return reference
    return Parser(tokens, reference).parse()


def parse(text: str) -> datetime:
    """Resolve *text* relative to the current time in the local timezone."""
    return parse_at(text, datetime.now(get_localzone()))


@dataclass
class DurationTerm:
    """A signed quantity of one unit, e.g. ``-7 second``."""

    quantity: int
    unit: str

    def apply(self, instant: datetime, negate: bool = False) -> datetime:
        quantity = -self.quantity if negate else self.quantity
        return add_unit(instant, quantity, self.unit)


@dataclass
class Parser:
    """Parsing context for a single phrase.

    Attributes:
        tokens: Token stream from :func:`lex`, ending in EOF
        now: Reference instant
        terms: Left-hand duration terms, applied last
        anchor: Resolved absolute instant, None until a production sets it
        negate_terms: Apply ``terms`` with their sign flipped
        date_resolved: A date component has been fixed
        time_resolved: A time component has been fixed
    """

    tokens: list[Token]
    now: datetime
    terms: list[DurationTerm] = field(default_factory=list)
    anchor: datetime | None = None
    negate_terms: bool = False
    date_resolved: bool = False
    time_resolved: bool = False
    pos: int = 0

    def parse(self) -> datetime:
        """Consume all tokens and return the resolved instant."""
        try:
            self._parse_expr()
            tok = self._peek()
            if tok.kind is not TokenKind.EOF:
                raise ParseError(tok, "unexpected token")

            result = self.anchor if self.anchor is not None else self.now
            logger.debug(f"anchor {result.isoformat()}, terms {self.terms}, negate={self.negate_terms}")
            for term in self.terms:
                result = term.apply(result, negate=self.negate_terms)
        except (ValueError, OverflowError) as e:
            # out-of-range year or arithmetic past datetime.max
            raise ParseError(self._last(), str(e)) from e

        return result

    def _peek(self) -> Token:
        if self.pos >= len(self.tokens):
            return EOF_TOKEN
        return self.tokens[self.pos]

    def _next(self) -> Token:
        tok = self._peek()
        self.pos += 1
        return tok

    def _last(self) -> Token:
        if 0 < self.pos <= len(self.tokens):
            return self.tokens[self.pos - 1]
        return EOF_TOKEN

    def _expect(self, kind: TokenKind, *values: str) -> Token:
        """Consume the next token, which must be of *kind* (and one of *values*)."""
        tok = self._next()
        if tok.kind is not kind or (values and tok.literal.lower() not in values):
            raise ParseError(tok, "unexpected token")
        return tok

    @staticmethod
    def _is(tok: Token, kind: TokenKind, *values: str) -> bool:
        return tok.kind is kind and (not values or tok.literal.lower() in values)

    def _clock(self) -> tuple[int, int, int]:
        """Time of day already resolved, else midnight."""
        if self.anchor is None:
            return 0, 0, 0
        return self.anchor.hour, self.anchor.minute, self.anchor.second

    def _date(self) -> tuple[int, int, int]:
        """Date already resolved, else the reference date."""
        source = self.anchor if self.anchor is not None else self.now
        return source.year, source.month, source.day

    def _make(self, year: int, month: int, day: int, clock: tuple[int, int, int] | None = None) -> datetime:
        hour, minute, second = clock if clock is not None else self._clock()
        return make_datetime(year, month, day, hour, minute, second, self.now.tzinfo)

    def _first_of_month(self, month: int, year: int | None = None) -> datetime:
        return self._make(self.now.year if year is None else year, month, 1)

    def _claim_date(self, tok: Token) -> None:
        if self.date_resolved:
            raise ParseError(tok, "date already specified")

    def _claim_time(self, tok: Token) -> None:
        if self.time_resolved:
            raise ParseError(tok, "time already specified")

    def _passed(self, candidate: datetime) -> bool:
        """Whether *candidate* is at or before the reference instant."""
        if candidate.tzinfo is None:
            return candidate <= self.now
        # same-zone comparisons ignore the offset, so compare in UTC
        return candidate.astimezone(timezone.utc) <= self.now.astimezone(timezone.utc)

    def _roll_years(self, candidate: datetime) -> datetime:
        """Move *candidate* a year forward unless it is after the reference."""
        if self._passed(candidate):
            return add_calendar(candidate, years=1)
        return candidate

    def _parse_expr(self) -> None:
        tok = self._peek()
        if tok.kind is TokenKind.EOF:
            return
        if tok.kind is TokenKind.DIGIT:
            self._parse_digit(self._next(), allow_duration=True)
            return
        self._parse_date_time()

    def _parse_date_time(self) -> None:
        """Resolve an absolute anchor."""
        tok = self._peek()
        if tok.kind is TokenKind.NOW:
            self._next()
            self._parse_now()
        elif tok.kind is TokenKind.DATE:
            self._parse_date_const()
        elif tok.kind is TokenKind.MONTH:
            self._parse_month()
        elif tok.kind is TokenKind.WEEKDAY:
            self._parse_weekday()
        elif tok.kind is TokenKind.KEYWORD:
            self._parse_keyword()
        elif tok.kind is TokenKind.TIME:
            self._parse_time_const()
        elif tok.kind is TokenKind.DIGIT:
            self._parse_digit(self._next())
        else:
            raise ParseError(tok, "unexpected token")

    def _continue_with_date(self) -> None:
        """After a time production: an optional date, then right-hand terms."""
        self.time_resolved = True
        if self.date_resolved:
            self._parse_right_terms()
            return

        tok = self._peek()
        if tok.kind in (TokenKind.EOF, TokenKind.OPERATOR_ADD, TokenKind.OPERATOR_SUB):
            self._parse_right_terms()
        elif tok.kind is TokenKind.DATE:
            self._parse_date_const()
        elif tok.kind is TokenKind.MONTH:
            self._parse_month()
        elif tok.kind is TokenKind.WEEKDAY:
            self._parse_weekday()
        elif tok.kind is TokenKind.KEYWORD:
            self._expect(TokenKind.KEYWORD, "on")
            self._parse_on()
        elif tok.kind is TokenKind.DIGIT:
            self._parse_digit(self._next())
        else:
            raise ParseError(tok, "unexpected token")

    def _continue_with_time(self) -> None:
        """After a date production: an optional time, then right-hand terms."""
        self.date_resolved = True
        if self.time_resolved:
            self._parse_right_terms()
            return

        tok = self._peek()
        if tok.kind in (TokenKind.EOF, TokenKind.OPERATOR_ADD, TokenKind.OPERATOR_SUB):
            self._parse_right_terms()
        elif tok.kind is TokenKind.TIME:
            self._parse_time_const()
        elif tok.kind is TokenKind.KEYWORD:
            self._expect(TokenKind.KEYWORD, "@", "at")
            self._parse_at()
        elif tok.kind is TokenKind.DIGIT:
            self._parse_digit(self._next())
        else:
            raise ParseError(tok, "unexpected token")

    def _parse_left_terms(self, count: Token) -> None:
        """``N unit [(+|-) N unit ...] [ago | before EXPR | from EXPR]``."""
        sign = 1
        while True:
            unit = self._expect(TokenKind.UNIT)
            self.terms.append(DurationTerm(sign * int(count.literal), normalize_unit(unit.literal)))

            tok = self._next()
            if tok.kind is TokenKind.EOF:
                self.anchor = self.now
                return
            if tok.kind in (TokenKind.OPERATOR_ADD, TokenKind.OPERATOR_SUB):
                sign = -1 if tok.kind is TokenKind.OPERATOR_SUB else 1
                count = self._expect(TokenKind.DIGIT)
                continue
            if tok.kind is TokenKind.AGO:
                self._expect(TokenKind.EOF)
                self.negate_terms = True
                self.anchor = self.now
                return
            if tok.kind in (TokenKind.BEFORE, TokenKind.FROM):
                if self._peek().kind is TokenKind.EOF:
                    raise ParseError(self._peek(), "unexpected token")
                self.negate_terms = tok.kind is TokenKind.BEFORE
                self._parse_date_time()
                return
            raise ParseError(tok, "unexpected token")

    def _parse_right_terms(self) -> None:
        """``[(+|-) N unit ...]`` applied straight to the anchor."""
        while True:
            tok = self._next()
            if tok.kind is TokenKind.EOF:
                return
            if tok.kind not in (TokenKind.OPERATOR_ADD, TokenKind.OPERATOR_SUB):
                raise ParseError(tok, "unexpected token")

            count = self._expect(TokenKind.DIGIT)
            unit = self._expect(TokenKind.UNIT)
            quantity = int(count.literal)
            if tok.kind is TokenKind.OPERATOR_SUB:
                quantity = -quantity
            self.anchor = add_unit(self.anchor, quantity, normalize_unit(unit.literal))

    def _parse_digit(self, digit: Token, allow_duration: bool = False) -> None:
        """Dispatch a digit on the token that follows it."""
        tok = self._peek()
        if tok.kind in (TokenKind.EOF, TokenKind.DATE_SEPARATOR):
            self._parse_year(digit)
        elif tok.kind is TokenKind.UNIT and allow_duration:
            self._parse_left_terms(digit)
        elif tok.kind is TokenKind.COLON:
            self._parse_clock(digit)
        elif tok.kind is TokenKind.KEYWORD:
            self._parse_digit_keyword(digit)
        elif tok.kind is TokenKind.ORDINAL:
            self._parse_ordinal(digit)
        elif tok.kind is TokenKind.TWELVE_HOUR:
            marker = self._next()
            self._parse_twelve_hour(digit, marker.literal.lower())
        else:
            raise ParseError(tok, "unexpected token")

    def _parse_year(self, digit: Token) -> None:
        """``YYYY[-MM[-DD]]``; ``/`` works as a separator too."""
        self._claim_date(digit)
        year = int(digit.literal)
        self.anchor = self._make(year, 1, 1)

        if self._peek().kind is TokenKind.EOF:
            self.date_resolved = True
            return
        if not self._is(self._peek(), TokenKind.DATE_SEPARATOR):
            self._continue_with_time()
            return

        self._next()
        tok = self._expect(TokenKind.DIGIT)
        month = int(tok.literal)
        if not 1 <= month <= 12:
            raise ParseError(tok, "month out of range")
        self.anchor = self._make(year, month, 1)

        if self._peek().kind is TokenKind.EOF:
            self.date_resolved = True
            return
        if not self._is(self._peek(), TokenKind.DATE_SEPARATOR):
            self._continue_with_time()
            return

        self._next()
        tok = self._expect(TokenKind.DIGIT)
        day = int(tok.literal)
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            raise ParseError(tok, "day out of range")
        self.anchor = self._make(year, month, day)
        self._continue_with_time()

    def _parse_digit_keyword(self, digit: Token) -> None:
        """``H in the morning``, ``H o'clock in the afternoon``."""
        tok = self._next()
        if self._is(tok, TokenKind.KEYWORD, "oclock", "o'clock"):
            tok = self._next()
        if not self._is(tok, TokenKind.KEYWORD, "in"):
            raise ParseError(tok, "unexpected token")

        self._expect(TokenKind.KEYWORD, "the")
        tok = self._next()
        if not self._is(tok, TokenKind.KEYWORD, *_MERIDIEMS):
            raise ParseError(tok, "unexpected token")
        self._parse_twelve_hour(digit, _MERIDIEMS[tok.literal.lower()])

    @staticmethod
    def _clock_value(tok: Token, name: str, low: int, high: int, width: int | None = None) -> int:
        text = tok.literal
        if width is not None and len(text) != width or width is None and len(text) > 2:
            raise ParseError(tok, f"invalid {name}")
        value = int(text)
        if not low <= value <= high:
            raise ParseError(tok, f"{name} out of range")
        return value

    def _hour(self, tok: Token, marker: str | None) -> int:
        if marker is None:
            return self._clock_value(tok, "hour", 0, 23)
        hour = self._clock_value(tok, "hour", 1, 12) % 12
        return hour + 12 if marker == "pm" else hour

    def _set_time(self, tok: Token, hour: int, minute: int = 0, second: int = 0) -> None:
        self._claim_time(tok)
        year, month, day = self._date()
        self.anchor = self._make(year, month, day, (hour, minute, second))
        self._continue_with_date()

    def _parse_clock(self, hour_tok: Token) -> None:
        """``H:MM[:SS] [am|pm]``."""
        self._expect(TokenKind.COLON)
        minute_tok = self._expect(TokenKind.DIGIT)
        second_tok = None
        if self._peek().kind is TokenKind.COLON:
            self._next()
            second_tok = self._expect(TokenKind.DIGIT)
        marker = None
        if self._peek().kind is TokenKind.TWELVE_HOUR:
            marker = self._next().literal.lower()

        hour = self._hour(hour_tok, marker)
        minute = self._clock_value(minute_tok, "minute", 0, 59, width=2)
        second = 0
        if second_tok is not None:
            second = self._clock_value(second_tok, "second", 0, 59, width=2)
        self._set_time(hour_tok, hour, minute, second)

    def _parse_twelve_hour(self, hour_tok: Token, marker: str) -> None:
        """``H am``, ``H pm``."""
        self._set_time(hour_tok, self._hour(hour_tok, marker))

    def _parse_time_const(self) -> None:
        """``noon``, ``midnight``."""
        tok = self._next()
        hour = 12 if tok.literal.lower() == "noon" else 0
        self._set_time(tok, hour)

    def _parse_at(self) -> None:
        """``at`` / ``@`` followed by a time."""
        tok = self._peek()
        if tok.kind is TokenKind.TIME:
            self._parse_time_const()
        elif tok.kind is TokenKind.DIGIT:
            self._parse_digit(self._next())
        else:
            raise ParseError(tok, "unexpected token")

    def _parse_now(self) -> None:
        self.anchor = self.now
        self._parse_right_terms()

    def _set_date(self, tok: Token, value: datetime) -> None:
        self._claim_date(tok)
        self.anchor = value
        self._continue_with_time()

    def _parse_date_const(self) -> None:
        """``today``, ``tomorrow``, ``yesterday``."""
        tok = self._next()
        offset = _DAY_OFFSETS[tok.literal.lower()]
        self._set_date(tok, self._make(self.now.year, self.now.month, self.now.day + offset))

    def _parse_weekday(self) -> None:
        """The next given weekday, never the reference day itself."""
        tok = self._next()
        weekday = WEEKDAYS[tok.literal.lower()]
        days = weekday_distance(weekday_index(self.now), weekday, strictly_future=True)
        self._set_date(tok, self._make(self.now.year, self.now.month, self.now.day + days))

    def _parse_month(self) -> None:
        """``March``, ``March 14th``, ``March the 14th``."""
        tok = self._next()
        month = MONTHS[tok.literal.lower()]

        nxt = self._peek()
        if self._is(nxt, TokenKind.KEYWORD, "the"):
            self._next()
        elif nxt.kind is not TokenKind.DIGIT:
            self._set_date(tok, self._roll_years(self._first_of_month(month)))
            return

        digit = self._expect(TokenKind.DIGIT)
        self._expect(TokenKind.ORDINAL)
        day = self._ordinal_value(digit)
        self._set_date(tok, self._roll_years(self._make(self.now.year, month, day)))

    def _relative_month(self) -> int:
        """``the month``, ``last month``, ``next month`` as a month offset."""
        which = self._expect(TokenKind.KEYWORD, *_RELATIVE_MONTHS)
        unit = self._next()
        if unit.kind is not TokenKind.UNIT or unit.literal.lower() != "month":
            raise ParseError(unit, "unexpected token")
        return _RELATIVE_MONTHS[which.literal.lower()]

    @staticmethod
    def _ordinal_value(digit: Token) -> int:
        value = int(digit.literal)
        if value < 1:
            raise ParseError(digit, "invalid ordinal")
        return value

    def _parse_ordinal(self, digit: Token) -> None:
        """Day of month or Nth weekday: ``4th``, ``4th of March``, ``2nd Tuesday of ...``."""
        self._expect(TokenKind.ORDINAL)
        n = self._ordinal_value(digit)

        tok = self._peek()
        if tok.kind in (TokenKind.EOF, TokenKind.OPERATOR_ADD, TokenKind.OPERATOR_SUB) or self._is(
            tok, TokenKind.KEYWORD, "@", "at"
        ):
            self._parse_day_of_this_month(digit, n)
        elif self._is(tok, TokenKind.KEYWORD, "of"):
            self._next()
            self._parse_ordinal_of(digit, n)
        elif self._is(tok, TokenKind.KEYWORD, "last"):
            self._next()
            self._parse_last(digit, n)
        elif tok.kind is TokenKind.WEEKDAY:
            self._parse_nth_weekday(n)
        elif tok.kind is TokenKind.MONTH:
            month = MONTHS[self._next().literal.lower()]
            self._set_date(digit, self._roll_years(self._make(self.now.year, month, n)))
        else:
            raise ParseError(tok, "unexpected token")

    def _parse_day_of_this_month(self, digit: Token, n: int) -> None:
        """Bare ``4th``: this month, or next month once the day has passed."""
        candidate = self._make(self.now.year, self.now.month, n)
        if self._passed(candidate):
            candidate = add_calendar(candidate, months=1)
        self._set_date(digit, candidate)

    def _parse_ordinal_of(self, digit: Token, n: int) -> None:
        """``4th of March``, ``4th of the|last|next month``."""
        tok = self._peek()
        if tok.kind is TokenKind.KEYWORD:
            offset = self._relative_month()
            value = add_calendar(self._make(self.now.year, self.now.month, n), months=offset)
            self._set_date(digit, value)
        elif tok.kind is TokenKind.MONTH:
            month = MONTHS[self._next().literal.lower()]
            self._set_date(digit, self._roll_years(self._make(self.now.year, month, n)))
        else:
            raise ParseError(tok, "unexpected token")

    def _parse_last(self, tok: Token, n: int) -> None:
        """``[N] last day of ...`` or ``[N] last WEEKDAY [of ...]``."""
        nxt = self._peek()
        if nxt.kind is TokenKind.UNIT:
            self._parse_last_day(tok, n)
        elif nxt.kind is TokenKind.WEEKDAY:
            self._parse_last_weekday(tok, n)
        else:
            raise ParseError(nxt, "unexpected token")

    def _parse_last_day(self, tok: Token, n: int) -> None:
        unit = self._next()
        if unit.literal.lower() != "day":
            raise ParseError(unit, "unexpected token")
        self._expect(TokenKind.KEYWORD, "of", "in")

        nxt = self._peek()
        if nxt.kind is TokenKind.KEYWORD:
            offset = self._relative_month()
            first = self._first_of_month(self.now.month + offset)
        elif nxt.kind is TokenKind.MONTH:
            first = self._first_of_month(MONTHS[self._next().literal.lower()])
        else:
            raise ParseError(nxt, "unexpected token")
        self._set_date(tok, last_day_of_month(first, n))

    def _parse_last_weekday(self, tok: Token, n: int) -> None:
        """``[N] last Sunday``, ``[N] last Sunday of|in March``, ``... of the|last|next month``.

        A date in a named month that has already passed is recomputed in next
        year's month. This is not the same as shifting it by one calendar year,
        which would land on a different weekday.
        """
        weekday = WEEKDAYS[self._next().literal.lower()]

        if not self._is(self._peek(), TokenKind.KEYWORD, "of", "in"):
            # the weekday in the previous Sunday-started week
            days = weekday - weekday_index(self.now) - 7 * n
            self._set_date(tok, self._make(self.now.year, self.now.month, self.now.day + days))
            return

        self._next()
        nxt = self._peek()
        if nxt.kind is TokenKind.KEYWORD:
            offset = self._relative_month()
            first = self._first_of_month(self.now.month + offset)
            self._set_date(tok, nth_last_weekday_of_month(first, weekday, n))
        elif nxt.kind is TokenKind.MONTH:
            month = MONTHS[self._next().literal.lower()]
            value = nth_last_weekday_of_month(self._first_of_month(month), weekday, n)
            if self._passed(value):
                first = self._first_of_month(month, year=self.now.year + 1)
                value = nth_last_weekday_of_month(first, weekday, n)
            self._set_date(tok, value)
        else:
            raise ParseError(nxt, "unexpected token")

    def _parse_nth_weekday(self, n: int) -> None:
        """``2nd Tuesday of|in March``, ``2nd Tuesday of the|last|next month``.

        A named month whose Nth weekday has already passed is recomputed in
        the next year, so the result is still a Tuesday. Shifting the date by
        one calendar year would not keep the weekday.
        """
        tok = self._next()
        weekday = WEEKDAYS[tok.literal.lower()]
        self._expect(TokenKind.KEYWORD, "of", "in")

        nxt = self._peek()
        if nxt.kind is TokenKind.KEYWORD:
            offset = self._relative_month()
            first = self._first_of_month(self.now.month + offset)
            self._set_date(tok, nth_weekday_of_month(first, weekday, n))
        elif nxt.kind is TokenKind.MONTH:
            month = MONTHS[self._next().literal.lower()]
            value = nth_weekday_of_month(self._first_of_month(month), weekday, n)
            if self._passed(value):
                first = self._first_of_month(month, year=self.now.year + 1)
                value = nth_weekday_of_month(first, weekday, n)
            self._set_date(tok, value)
        else:
            raise ParseError(nxt, "unexpected token")

    def _parse_keyword(self) -> None:
        tok = self._next()
        word = tok.literal.lower()
        if word in ("@", "at"):
            self._parse_at()
        elif word == "on":
            self._parse_on()
        elif word == "last":
            self._parse_last(tok, 1)
        elif word == "half":
            self._expect(TokenKind.KEYWORD, "past")
            self._parse_offset_hour(30)
        elif word == "quarter":
            which = self._next()
            if self._is(which, TokenKind.KEYWORD, "to"):
                self._parse_offset_hour(-15)
            elif self._is(which, TokenKind.KEYWORD, "after", "past"):
                self._parse_offset_hour(15)
            else:
                raise ParseError(which, "unexpected token")
        else:
            raise ParseError(tok, "unexpected token")

    def _parse_offset_hour(self, minutes: int) -> None:
        """Resolve the hour after ``quarter to``/``half past`` and shift it."""
        digit = self._expect(TokenKind.DIGIT)
        self._parse_digit(digit)
        self.anchor = add_duration(self.anchor, minutes=minutes)

    def _parse_on(self) -> None:
        """``on`` followed by a year, weekday, month or ``the ...``."""
        tok = self._peek()
        if tok.kind is TokenKind.DIGIT:
            self._parse_year(self._next())
        elif tok.kind is TokenKind.WEEKDAY:
            self._parse_weekday()
        elif tok.kind is TokenKind.MONTH:
            self._parse_month()
        elif tok.kind is TokenKind.KEYWORD:
            self._expect(TokenKind.KEYWORD, "the")
            nxt = self._next()
            if nxt.kind is TokenKind.DIGIT:
                if self._peek().kind is not TokenKind.ORDINAL:
                    raise ParseError(self._peek(), "unexpected token")
                self._parse_ordinal(nxt)
            elif self._is(nxt, TokenKind.KEYWORD, "last"):
                self._parse_last(nxt, 1)
            else:
                raise ParseError(nxt, "unexpected token")
        else:
            raise ParseError(tok, "unexpected token")
