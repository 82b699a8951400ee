from __future__ import annotations


class MiniGrepError(Exception):
    """Base exception for minigrep."""


class PatternSyntaxError(MiniGrepError, ValueError):
    """Pattern could not be compiled."""

    UNSUPPORTED_ESCAPE = "UNSUPPORTED_ESCAPE"
    MISPLACED_START_ANCHOR = "MISPLACED_START_ANCHOR"
    MISPLACED_END_ANCHOR = "MISPLACED_END_ANCHOR"

    def __init__(self, message: str, *, pattern: str = "", reason: str = ""):
        super().__init__(message)
        self.message = message
        self.pattern = pattern
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid pattern: {self.message}"


class ConfigError(MiniGrepError):
    """Configuration is missing or invalid."""


class UsageError(MiniGrepError):
    """Invalid CLI usage (user error)."""
