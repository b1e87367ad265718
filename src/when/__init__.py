"""when: resolve natural-language date and time phrases."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("when-parser")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from when.core.config import WhenConfig, get_config, load_config, reload_config
from when.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    LexError,
    ParseError,
    WhenError,
)
from when.core.lexer import lex
from when.core.parser import parse, parse_at
from when.core.tokens import Token, TokenKind

__all__ = [
    # Version
    "__version__",
    # Core
    "parse",
    "parse_at",
    "lex",
    "Token",
    "TokenKind",
    # Config
    "load_config",
    "get_config",
    "reload_config",
    "WhenConfig",
    # Exceptions
    "WhenError",
    "LexError",
    "ParseError",
    "ConfigError",
    "ConfigNotFoundError",
]
