"""Stylesheet discovery, parsing and theme tokens."""

from .discovery import (
    DEFAULT_EXCLUDE_GLOBS,
    DEFAULT_STYLESHEET_GLOBS,
    DiscoveryResult,
    discover_stylesheets,
    matches_glob,
)
from .index import DefinedClassIndex, IndexBuild
from .parser import StylesheetClasses, classes_from_file, extract_classes_from_css, parse_stylesheet
from .svelte import extract_style_block_classes, style_blocks
from .theme import (
    ThemeTokenGenerator,
    ThemeTokens,
    declares_tailwind_theme,
    generate_theme_classes,
    parse_theme_variables,
)

__all__ = [
    "DEFAULT_EXCLUDE_GLOBS",
    "DEFAULT_STYLESHEET_GLOBS",
    "DefinedClassIndex",
    "DiscoveryResult",
    "IndexBuild",
    "StylesheetClasses",
    "ThemeTokenGenerator",
    "ThemeTokens",
    "classes_from_file",
    "declares_tailwind_theme",
    "discover_stylesheets",
    "extract_classes_from_css",
    "extract_style_block_classes",
    "generate_theme_classes",
    "matches_glob",
    "parse_stylesheet",
    "parse_theme_variables",
    "style_blocks",
]
