"""Path scoping and ignore-pattern safety."""

from .paths import ConfigurationError, resolve_base_dir
from .patterns import compile_ignore_patterns, is_unsafe_pattern

__all__ = [
    "ConfigurationError",
    "compile_ignore_patterns",
    "is_unsafe_pattern",
    "resolve_base_dir",
]
