"""Lexer, parser and time arithmetic for when."""

from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    LexError,
    ParseError,
    WhenError,
)
from .tokens import Token, TokenKind

__all__ = [
    # Exceptions
    "ConfigError",
    "ConfigNotFoundError",
    "LexError",
    "ParseError",
    "WhenError",
    # Types
    "Token",
    "TokenKind",
]
