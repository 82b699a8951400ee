from .errors import ConfigError, MiniGrepError, PatternSyntaxError, UsageError
from .matcher import match_here, matches
from .patterns import CompiledPattern, compile_pattern
from .version import __version__

__all__ = [
    "CompiledPattern",
    "ConfigError",
    "MiniGrepError",
    "PatternSyntaxError",
    "UsageError",
    "__version__",
    "compile_pattern",
    "match_here",
    "matches",
]
