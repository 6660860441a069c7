"""
Scanning helpers.
Bracket and literal matching over raw JS/TSX text, shared by the
customization and prop passes. Nesting is tracked on an explicit stack,
so deeply nested templates never exhaust the interpreter's recursion limit.
"""

import re
from typing import Iterable, List

QUOTES = '\'"`'


def _scan_end(content: str, i: int, stack: List[list]) -> int:
    """Index just past the construct at the bottom of stack, -1 if it never closes.

    A frame is [quote] inside a literal, or [open, close, depth] inside
    code. A template's ${ pushes a brace frame, its } pops back.
    """
    while i < len(content):
        frame = stack[-1]
        ch = content[i]

        if len(frame) == 1:
            quote = frame[0]
            if ch == '\\':
                i += 2
                continue
            if quote == '`' and content.startswith('${', i):
                stack.append(['{', '}', 1])
                i += 2
                continue
            if ch == quote:
                stack.pop()
                i += 1
                if not stack:
                    return i
                continue
            if ch == '\n' and quote != '`':
                return -1
            i += 1
            continue

        if ch in QUOTES:
            stack.append([ch])
            i += 1
            continue
        if ch == frame[0]:
            frame[2] += 1
        elif ch == frame[1]:
            frame[2] -= 1
            if frame[2] == 0:
                stack.pop()
                if not stack:
                    return i + 1
        i += 1
    return -1


def string_end(content: str, i: int) -> int:
    """Index just past the string/template literal starting at i, -1 if unterminated."""
    return _scan_end(content, i + 1, [[content[i]]])


def balanced_end(content: str, i: int, open_ch: str, close_ch: str) -> int:
    """Index just past the bracket matching the one at i, -1 if unbalanced."""
    return _scan_end(content, i, [[open_ch, close_ch, 0]])


def generic_end(content: str, i: int) -> int:
    """Index just past a TS type argument list <...> starting at i, -1 if unclosed.

    Angle brackets only count outside (), [] and {}, and the > of an
    arrow never closes the list.
    """
    depth = 0
    nested = 0
    while i < len(content):
        ch = content[i]
        if ch in QUOTES:
            i = string_end(content, i)
            if i == -1:
                return -1
            continue
        if content.startswith('=>', i):
            i += 2
            continue
        if ch in '([{':
            nested += 1
        elif ch in ')]}':
            nested -= 1
        elif nested == 0 and ch == '<':
            depth += 1
        elif nested == 0 and ch == '>':
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return -1


def skip_whitespace(content: str, i: int) -> int:
    while i < len(content) and content[i].isspace():
        i += 1
    return i


def find_tag_end(content: str, start: int) -> int:
    """Index of the `>` closing a JSX opening tag, skipping {...} and strings."""
    i = start
    while i < len(content):
        ch = content[i]
        if ch in QUOTES:
            i = string_end(content, i)
        elif ch == '{':
            i = balanced_end(content, i, '{', '}')
        elif ch == '>':
            return i
        else:
            i += 1
        if i == -1:
            return -1
    return -1


def split_top_level(body: str) -> List[str]:
    """Split on commas that are not nested in brackets or literals."""
    entries = []
    depth = 0
    start = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if ch in QUOTES:
            end = string_end(body, i)
            i = end if end != -1 else len(body)
            continue
        if ch in '([{':
            depth += 1
        elif ch in ')]}':
            depth -= 1
        elif ch == ',' and depth == 0:
            entries.append(body[start:i])
            start = i + 1
        i += 1
    entries.append(body[start:])
    return [e.strip() for e in entries if e.strip()]


def component_alternation(names: Iterable[str]) -> str:
    return '|'.join(re.escape(n) for n in sorted(names, key=len, reverse=True))


def line_number_at(content: str, offset: int) -> int:
    """1-based line of a character offset."""
    return content.count('\n', 0, max(offset, 0)) + 1
