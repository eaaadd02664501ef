"""Lexical scanning of stylesheet text into rule blocks."""

from __future__ import annotations

from dataclasses import dataclass

_STRING_DELIMITERS = ('"', "'")
_ESCAPE_CHAR = "\\"


@dataclass(slots=True, frozen=True)
class CssBlock:
    """One ``prelude { body }`` block with nesting metadata."""

    prelude: str
    parent: str | None
    depth: int
    line: int
    body_start: int
    body_end: int


@dataclass(slots=True, frozen=True)
class CssScanResult:
    """Blocks in source order plus brace balance counters."""

    blocks: tuple[CssBlock, ...]
    unmatched_closing: int
    unclosed_opening: int


def mask_css(text: str, *, keep_strings: bool = False) -> str:
    """Blank out comments (and strings unless ``keep_strings``) preserving offsets."""
    chars = list(text)
    length = len(text)
    index = 0
    state: str | None = None
    quote = ""

    while index < length:
        char = text[index]
        if state is None:
            if text.startswith("/*", index):
                chars[index] = chars[index + 1] = " "
                state = "comment"
                index += 2
                continue
            if char in _STRING_DELIMITERS:
                if not keep_strings:
                    chars[index] = " "
                state = "string"
                quote = char
            index += 1
            continue

        if state == "comment":
            if text.startswith("*/", index):
                chars[index] = chars[index + 1] = " "
                state = None
                index += 2
                continue
            if char != "\n":
                chars[index] = " "
            index += 1
            continue

        # Inside a string literal.
        if char == quote and not _is_escaped(text, index):
            state = None
        elif char == "\n":
            # CSS strings cannot span lines unescaped; treat as terminated.
            state = None
        if not keep_strings and char != "\n":
            chars[index] = " "
        index += 1

    return "".join(chars)


def scan_css_blocks(text: str) -> CssScanResult:
    """Scan block preludes and body ranges with line accounting.

    Preludes are taken from the comment-masked text so attribute-selector
    strings survive; structure is read from the fully masked text so braces
    inside strings or comments are ignored.
    """
    structural = mask_css(text)
    readable = mask_css(text, keep_strings=True)

    open_stack: list[tuple[str, int, int]] = []
    finished: list[CssBlock] = []
    unmatched_closing = 0
    segment_start = 0
    line = 1
    for index, char in enumerate(structural):
        if char == "{":
            prelude = " ".join(readable[segment_start:index].split())
            open_stack.append((prelude, line, index + 1))
            segment_start = index + 1
        elif char == "}":
            if not open_stack:
                unmatched_closing += 1
            else:
                prelude, start_line, body_start = open_stack.pop()
                finished.append(
                    CssBlock(
                        prelude=prelude,
                        parent=open_stack[-1][0] if open_stack else None,
                        depth=len(open_stack) + 1,
                        line=start_line,
                        body_start=body_start,
                        body_end=index,
                    )
                )
            segment_start = index + 1
        elif char == ";":
            segment_start = index + 1

        if char == "\n":
            line += 1

    unclosed = len(open_stack)
    while open_stack:
        prelude, start_line, body_start = open_stack.pop()
        finished.append(
            CssBlock(
                prelude=prelude,
                parent=open_stack[-1][0] if open_stack else None,
                depth=len(open_stack) + 1,
                line=start_line,
                body_start=body_start,
                body_end=len(text),
            )
        )

    ordered = tuple(sorted(finished, key=lambda block: (block.body_start, block.depth)))
    return CssScanResult(
        blocks=ordered,
        unmatched_closing=unmatched_closing,
        unclosed_opening=unclosed,
    )


def block_body(text: str, block: CssBlock) -> str:
    """Return the comment-masked body text of ``block``."""
    return mask_css(text[block.body_start : block.body_end], keep_strings=True)


def _is_escaped(text: str, index: int) -> bool:
    backslashes = 0
    cursor = index - 1
    while cursor >= 0 and text[cursor] == _ESCAPE_CHAR:
        backslashes += 1
        cursor -= 1
    return backslashes % 2 == 1
