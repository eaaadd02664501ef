"""Decision engine merging stylesheet, theme and utility knowledge into verdicts."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from classlint.cache import LRUCache
from classlint.config import LintConfig
from classlint.extraction import ClassToken, extract_class_tokens
from classlint.logging import DebugTrace
from classlint.stylesheets import (
    DefinedClassIndex,
    ThemeTokenGenerator,
    extract_style_block_classes,
)
from classlint.tailwind import TailwindDetector, UtilityClassifier

logger = logging.getLogger(__name__)

SCOPED_CLASS_PREFIXES: Final[tuple[str, ...]] = ("module-", "styles-")
PLACEHOLDER_MARKERS: Final[tuple[str, ...]] = ("$", "{{")
CLASSIFIER_CACHE_SIZE = 1000
STYLE_BLOCK_CACHE_SIZE = 64

VERDICT_DYNAMIC = "dynamic"
VERDICT_PLACEHOLDER = "placeholder"
VERDICT_IGNORE_PATTERN = "ignore-pattern"
VERDICT_SCOPED_PREFIX = "scoped-prefix"
VERDICT_UTILITY = "utility"
VERDICT_DYNAMIC_UTILITY = "dynamic-utility"
VERDICT_DEFINED = "defined"
VERDICT_LOCAL = "local"
VERDICT_UNDEFINED = "undefined"


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """Undefined class names reported for one syntactic site."""

    site: Mapping[str, Any] = field(compare=False, repr=False)
    class_names: tuple[str, ...] = ()

    @property
    def message_id(self) -> str:
        return "undefinedClass" if len(self.class_names) == 1 else "undefinedClasses"

    @property
    def message(self) -> str:
        if len(self.class_names) == 1:
            return f"CSS class '{self.class_names[0]}' is not defined in any CSS file"
        return f"CSS classes {', '.join(self.class_names)} are not defined in any CSS file"


class AnalysisRun:
    """Owns every cache used while linting one project.

    Stylesheets, theme tokens, the framework marker and classifier results
    are computed lazily on first use and kept until :meth:`clear`.
    """

    def __init__(
        self, config: LintConfig, classifier_cache_size: int = CLASSIFIER_CACHE_SIZE
    ) -> None:
        self._config = config
        self._index = DefinedClassIndex()
        self._themes = ThemeTokenGenerator()
        self._detector = TailwindDetector(config.base_dir, config.exclude_patterns)
        self._classifier_cache_size = classifier_cache_size
        self._classifier: UtilityClassifier | None = None
        self._known: frozenset[str] | None = None
        self._style_blocks: LRUCache[str, frozenset[str]] = LRUCache(STYLE_BLOCK_CACHE_SIZE)
        self._trace: DebugTrace | None = None
        if config.debug and config.trace_path is not None:
            self._trace = DebugTrace(config.trace_path)
            self._trace.record("config", **config.to_public_dict())

    @property
    def config(self) -> LintConfig:
        return self._config

    @property
    def index(self) -> DefinedClassIndex:
        return self._index

    @property
    def detector(self) -> TailwindDetector:
        return self._detector

    @property
    def trace(self) -> DebugTrace | None:
        return self._trace

    @property
    def classifier(self) -> UtilityClassifier:
        if self._classifier is None:
            self._classifier = UtilityClassifier(
                theme_classes=self.theme_classes(),
                cache_size=self._classifier_cache_size,
            )
        return self._classifier

    def defined_classes(self) -> frozenset[str]:
        """Return classes defined by the configured stylesheet corpus."""
        config = self._config
        return self._index.build(config.base_dir, config.css_files, config.exclude_patterns)

    def theme_classes(self) -> frozenset[str]:
        """Return utility names generated from project theme tokens."""
        config = self._config
        return self._themes.generated_classes(
            config.base_dir, config.css_files, config.exclude_patterns
        )

    def build_known_classes(self) -> frozenset[str]:
        """Return stylesheet classes plus theme-generated utility names."""
        if self._known is None:
            defined = self.defined_classes()
            generated = self.theme_classes()
            self._known = defined | generated
            if self._trace is not None:
                build = self._index.build_details(
                    self._config.base_dir, self._config.css_files, self._config.exclude_patterns
                )
                self._trace.record(
                    "build",
                    defined_classes=len(defined),
                    theme_classes=len(generated),
                    stylesheets=list(build.files),
                    warnings=list(build.warnings),
                    tailwind_marker=self._detector.marker(),
                )
        return self._known

    def utilities_enabled(self) -> bool:
        """Return True when utility classes are exempt from reporting."""
        config = self._config
        if not config.ignore_tailwind:
            return False
        if not config.require_tailwind_config:
            return True
        return self._detector.is_tailwind_project()

    def verdict(self, token: ClassToken, local_classes: frozenset[str] = frozenset()) -> str:
        """Return the rule that decides ``token``; ``undefined`` means report it."""
        config = self._config
        value = token.value
        if token.dynamic and config.allow_dynamic_classes:
            return VERDICT_DYNAMIC
        if config.allow_dynamic_classes and any(marker in value for marker in PLACEHOLDER_MARKERS):
            return VERDICT_PLACEHOLDER
        if any(pattern.search(value) for pattern in config.ignore_class_patterns):
            return VERDICT_IGNORE_PATTERN
        if value.startswith(SCOPED_CLASS_PREFIXES):
            return VERDICT_SCOPED_PREFIX
        if self.utilities_enabled():
            if self.classifier.is_utility_class(value):
                return VERDICT_UTILITY
            if config.allow_dynamic_classes and self.classifier.is_dynamic_utility_class(value):
                return VERDICT_DYNAMIC_UTILITY
        if value in self.defined_classes():
            return VERDICT_DEFINED
        if value in local_classes:
            return VERDICT_LOCAL
        return VERDICT_UNDEFINED

    def check_site(
        self,
        node: Mapping[str, Any],
        tokens: Iterable[ClassToken],
        local_classes: frozenset[str] = frozenset(),
    ) -> list[Diagnostic]:
        """Return at most one diagnostic listing the site's undefined classes."""
        undefined: list[str] = []
        for token in tokens:
            verdict = self.verdict(token, local_classes)
            logger.debug("%s -> %s", token.value, verdict)
            if self._trace is not None:
                self._trace.record(
                    "token", value=token.value, dynamic=token.dynamic, verdict=verdict
                )
            if verdict == VERDICT_UNDEFINED:
                undefined.append(token.value)
        if not undefined:
            return []
        return [Diagnostic(site=node, class_names=tuple(undefined))]

    def check_node(
        self, node: Mapping[str, Any], source_text: str | None = None
    ) -> list[Diagnostic]:
        """Extract tokens from ``node`` and check them against the known classes."""
        tokens = extract_class_tokens(node)
        if not tokens:
            return []
        local_classes: frozenset[str] = frozenset()
        if source_text:
            local_classes = self.local_classes(source_text)
        return self.check_site(node, tokens, local_classes)

    def local_classes(self, source_text: str) -> frozenset[str]:
        """Return classes defined by the component's own ``<style>`` blocks."""
        cached = self._style_blocks.get(source_text)
        if cached is None:
            cached = frozenset(extract_style_block_classes(source_text))
            self._style_blocks.set(source_text, cached)
        return cached

    def clear(self) -> None:
        """Drop every cached build so the next check re-reads the project."""
        self._index.clear()
        self._themes.clear()
        self._detector.clear()
        self._style_blocks.clear()
        self._classifier = None
        self._known = None


def build_known_classes(config: LintConfig) -> frozenset[str]:
    """Build the known-class set for ``config`` in a fresh analysis run."""
    return AnalysisRun(config).build_known_classes()
