"""Classes defined by ``<style>`` blocks of single-file components."""

from __future__ import annotations

import re

from classlint.stylesheets.parser import extract_classes_from_css

_STYLE_BLOCK_RE = re.compile(r"<style\b[^>]*>(?P<body>[\s\S]*?)</style\s*>", re.IGNORECASE)


def style_blocks(source: str) -> list[str]:
    """Return the raw text of every ``<style>`` block, in source order."""
    return [match.group("body") for match in _STYLE_BLOCK_RE.finditer(source)]


def extract_style_block_classes(source: str, filename: str = "<component>") -> set[str]:
    """Return class and keyframe names defined by the component's own styles."""
    classes: set[str] = set()
    for index, body in enumerate(style_blocks(source)):
        classes.update(extract_classes_from_css(body, source=f"{filename}<style#{index}>"))
    return classes
