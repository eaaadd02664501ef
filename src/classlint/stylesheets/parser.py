"""Class-selector extraction from stylesheet text."""

from __future__ import annotations

import logging
import re
import xml.dom
from dataclasses import dataclass
from pathlib import Path

import cssutils

from classlint.stylesheets.lexical import scan_css_blocks

logger = logging.getLogger(__name__)

# cssutils reports every parse problem through its own logger; failures are
# surfaced here instead, once per selector.
cssutils.log.setLevel(logging.CRITICAL)

_KEYFRAMES_RE = re.compile(r"^@(?:-[a-z]+-)?keyframes\s+(?P<name>[^\s{]+)", re.IGNORECASE)
_UTILITY_RE = re.compile(r"^@utility\s+(?P<name>[A-Za-z_-][\w-]*)$")
_NESTING_RE = re.compile(r"\s*&\s*")
_FUNCTIONAL_PSEUDO_RE = re.compile(
    r"::?(?:is|where|has|not|matches|any|-webkit-any|-moz-any|host|host-context|global|local"
    r"|deep|slotted|part)\(",
    re.IGNORECASE,
)
_LEADING_COMBINATOR_RE = re.compile(r"^\s*[>+~]\s*")
_HEX_ESCAPE_RE = re.compile(r"\\([0-9a-fA-F]{1,6})\s?")
_CHAR_ESCAPE_RE = re.compile(r"\\(.)")


@dataclass(slots=True, frozen=True)
class StylesheetClasses:
    """Class names defined by one stylesheet plus recoverable parse warnings."""

    source: str
    classes: frozenset[str]
    keyframes: frozenset[str]
    warnings: tuple[str, ...]

    @property
    def names(self) -> frozenset[str]:
        """Return class names and keyframe names together."""
        return self.classes | self.keyframes


def parse_stylesheet(text: str, source: str = "<string>") -> StylesheetClasses:
    """Extract class selectors and keyframe names from stylesheet ``text``.

    Unparsable selectors are skipped and reported in ``warnings``; nothing
    here raises for malformed input.
    """
    scan = scan_css_blocks(text)
    classes: set[str] = set()
    keyframes: set[str] = set()
    warnings: list[str] = []

    if scan.unmatched_closing or scan.unclosed_opening:
        warnings.append(
            f"{source}: unbalanced braces "
            f"({scan.unclosed_opening} unclosed, {scan.unmatched_closing} unmatched)."
        )

    for block in scan.blocks:
        prelude = block.prelude
        if not prelude:
            continue
        if block.parent is not None and _KEYFRAMES_RE.match(block.parent):
            continue
        if prelude.startswith("@"):
            keyframe = _KEYFRAMES_RE.match(prelude)
            if keyframe is not None:
                keyframes.add(keyframe.group("name").strip("\"'"))
                continue
            utility = _UTILITY_RE.match(prelude)
            if utility is not None:
                classes.add(utility.group("name"))
                continue
            if prelude.lower().startswith("@scope"):
                classes.update(_scope_classes(prelude, source, block.line, warnings))
            continue
        classes.update(_selector_classes(prelude, source, block.line, warnings))

    for message in warnings:
        logger.warning(message)
    return StylesheetClasses(
        source=source,
        classes=frozenset(classes),
        keyframes=frozenset(keyframes),
        warnings=tuple(warnings),
    )


def extract_classes_from_css(text: str, source: str = "<string>") -> set[str]:
    """Return every class and keyframe name defined by stylesheet ``text``."""
    return set(parse_stylesheet(text, source).names)


def classes_from_file(path: Path) -> StylesheetClasses:
    """Parse one stylesheet file; unreadable or missing files yield no names."""
    source = path.as_posix()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        message = f"{source}: could not read stylesheet ({error})."
        logger.warning(message)
        return StylesheetClasses(
            source=source,
            classes=frozenset(),
            keyframes=frozenset(),
            warnings=(message,),
        )
    return parse_stylesheet(text, source)


def _selector_classes(
    prelude: str,
    source: str,
    line: int,
    warnings: list[str],
) -> set[str]:
    output: set[str] = set()
    pending = [_NESTING_RE.sub(" ", prelude).strip()]
    while pending:
        selector_text = pending.pop()
        outer, inner = _expand_functional_pseudos(selector_text)
        pending.extend(inner)
        for part in _split_top_level(outer, ","):
            part = _LEADING_COMBINATOR_RE.sub("", part).strip()
            if not part:
                continue
            try:
                selector_list = cssutils.css.SelectorList(selectorText=part)
            except (xml.dom.DOMException, ValueError, IndexError) as error:
                warnings.append(f"{source}:{line}: skipped selector '{part}' ({error}).")
                continue
            for selector in selector_list:
                for item in selector.seq:
                    if item.type != "class":
                        continue
                    name = _unescape_identifier(str(item.value).lstrip("."))
                    if name:
                        output.add(name)
    return output


def _scope_classes(prelude: str, source: str, line: int, warnings: list[str]) -> set[str]:
    output: set[str] = set()
    for start, end in _paren_groups(prelude):
        output.update(_selector_classes(prelude[start:end], source, line, warnings))
    return output


def _expand_functional_pseudos(selector_text: str) -> tuple[str, list[str]]:
    """Lift arguments of ``:is()``-style pseudo-classes out as separate selectors."""
    inner: list[str] = []
    pieces: list[str] = []
    cursor = 0
    while True:
        match = _FUNCTIONAL_PSEUDO_RE.search(selector_text, cursor)
        if match is None:
            break
        close = _matching_paren(selector_text, match.end() - 1)
        if close is None:
            break
        pieces.append(selector_text[cursor : match.start()])
        inner.append(selector_text[match.end() : close])
        cursor = close + 1
    pieces.append(selector_text[cursor:])
    outer = "".join(pieces).strip()
    if not outer or outer[-1] in ">+~":
        outer = f"{outer} *".strip()
    return outer, inner


def _matching_paren(text: str, open_index: int) -> int | None:
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


def _paren_groups(text: str) -> list[tuple[int, int]]:
    groups: list[tuple[int, int]] = []
    index = text.find("(")
    while index != -1:
        close = _matching_paren(text, index)
        if close is None:
            break
        groups.append((index + 1, close))
        index = text.find("(", close + 1)
    return groups


def _split_top_level(text: str, separator: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "([":
            depth += 1
        elif char in ")]" and depth > 0:
            depth -= 1
        elif char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def _unescape_identifier(name: str) -> str:
    unescaped = _HEX_ESCAPE_RE.sub(lambda match: chr(int(match.group(1), 16)), name)
    return _CHAR_ESCAPE_RE.sub(r"\1", unescaped)
