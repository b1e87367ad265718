"""Token types and the static word vocabularies used by the lexer."""

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Kinds of token produced by the lexer."""

    AGO = auto()
    BEFORE = auto()
    COLON = auto()
    DATE = auto()  # today, tomorrow, yesterday
    DATE_SEPARATOR = auto()  # - or / directly after a digit run
    DIGIT = auto()
    EOF = auto()
    ERROR = auto()
    FROM = auto()  # from, after
    KEYWORD = auto()
    MONTH = auto()
    NOW = auto()
    OPERATOR_ADD = auto()
    OPERATOR_SUB = auto()
    ORDINAL = auto()
    TIME = auto()  # midnight, noon
    TWELVE_HOUR = auto()
    UNIT = auto()
    WEEKDAY = auto()


@dataclass(frozen=True)
class Token:
    """A single token; ``literal`` is the text it was read from."""

    kind: TokenKind
    literal: str

    def __str__(self) -> str:
        if self.kind is TokenKind.ERROR:
            return self.literal
        if self.kind is TokenKind.EOF:
            return "EOF"
        return repr(self.literal)


EOF_TOKEN = Token(TokenKind.EOF, "")

# Spelled-out numbers are emitted as digit tokens.
NUMBER_WORDS: dict[str, str] = {
    "a": "1",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",
    "eleven": "11",
    "twelve": "12",
}

LONG_UNITS = frozenset(
    {
        "year", "years",
        "month", "months",
        "week", "weeks",
        "day", "days",
        "hour", "hours",
        "minute", "minutes",
        "second", "seconds",
    }
)

SHORT_UNITS = frozenset("mhdwMys")

# Weekday numbering starts at Sunday = 0.
WEEKDAYS: dict[str, int] = {
    "sun": 0, "sunday": 0,
    "mon": 1, "monday": 1,
    "tue": 2, "tuesday": 2,
    "wed": 3, "wednesday": 3,
    "thu": 4, "thursday": 4,
    "fri": 5, "friday": 5,
    "sat": 6, "saturday": 6,
}

MONTHS: dict[str, int] = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

KEYWORDS = frozenset(
    {
        "in", "of", "on", "the", "next", "last",
        "at", "quarter", "half", "past", "to", "after",
        "oclock", "o'clock", "morning", "afternoon", "evening",
    }
)

# Words with a fixed token kind.
WORD_KINDS: dict[str, TokenKind] = {
    "now": TokenKind.NOW,
    "today": TokenKind.DATE,
    "tomorrow": TokenKind.DATE,
    "yesterday": TokenKind.DATE,
    "midnight": TokenKind.TIME,
    "noon": TokenKind.TIME,
    "am": TokenKind.TWELVE_HOUR,
    "pm": TokenKind.TWELVE_HOUR,
}

# Words recognised only between duration terms.
JOIN_WORDS: dict[str, TokenKind] = {
    "ago": TokenKind.AGO,
    "before": TokenKind.BEFORE,
    "after": TokenKind.FROM,
    "from": TokenKind.FROM,
    "and": TokenKind.OPERATOR_ADD,
}
