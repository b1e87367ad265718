"""Custom exceptions for when."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from when.core.tokens import Token


class WhenError(Exception):
    """Base exception for when."""


class LexError(WhenError):
    """Input text could not be split into tokens.

    Raised for an invalid character, an unknown word, a malformed ordinal
    suffix or a malformed twelve-hour marker.
    """

    def __init__(self, message: str, literal: str = "", position: int = 0):
        super().__init__(message)
        self.message = message
        self.literal = literal
        self.position = position


class ParseError(WhenError):
    """Token stream does not match the grammar."""

    def __init__(self, token: Token, message: str):
        super().__init__(f"{message}, token: {token.literal!r}")
        self.token = token
        self.message = message


class ConfigError(WhenError):
    """Error in configuration."""


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""
