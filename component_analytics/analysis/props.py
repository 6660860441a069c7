"""
Prop extractor.
Reads the attributes written on each rendered tracked component so the
report can show which props are used and with which values.
"""

import re
from typing import Dict, List, Tuple

from ..models import ComponentInstance
from .scanning import (
    balanced_end,
    component_alternation,
    find_tag_end,
    line_number_at,
    skip_whitespace,
)


PROP_NAME = re.compile(r'[A-Za-z_$][\w$:-]*')
BARE_VALUE = re.compile(r'[^\s/>]+')
STRING_VALUE = re.compile(r'''^(['"])([^'"]*)\1$''')
NUMBER_VALUE = re.compile(r'^-?\d+(?:\.\d+)?$')
IDENTIFIER_VALUE = re.compile(r'^[A-Za-z_$][\w$.]*$')
HANDLER_VALUE = re.compile(r'^(?:handle|on)[A-Z]')

# Longer string literals are collapsed to <string>
MAX_LITERAL_LENGTH = 30


def normalize_prop_value(raw: str) -> str:
    """Collapse a raw prop value into a countable label.

    Booleans, numbers and short string literals are kept as written
    (`variant="ghost"` gives '"ghost"'). Dynamic values become a kind
    label such as <variable>, <function> or <object>.
    """
    raw = raw.strip()
    if raw in ('true', 'false') or NUMBER_VALUE.match(raw):
        return raw

    string = STRING_VALUE.match(raw)
    if string:
        literal = string.group(2)
        return f'"{literal}"' if len(literal) <= MAX_LITERAL_LENGTH else '<string>'

    if raw.startswith('['):
        return '<array>'
    if raw.startswith('{'):
        return '<object>'
    if '=>' in raw or raw.startswith('function'):
        return '<function>'
    if HANDLER_VALUE.match(raw):
        return '<handler>'
    if raw.startswith('`'):
        return '<template>'
    if '?' in raw and ':' in raw:
        return '<ternary>'
    if IDENTIFIER_VALUE.match(raw):
        return '<variable>'
    return '<expression>'


def parse_jsx_props(body: str) -> List[Tuple[str, str]]:
    """(name, normalized value) for each attribute of an opening tag body.

    Shorthand attributes (`<Card border>`) get 'true'. Spread
    attributes (`{...rest}`) are skipped.
    """
    props = []
    i = 0
    while i < len(body):
        if body[i] == '{':
            end = balanced_end(body, i, '{', '}')
            if end == -1:
                break
            i = end
            continue

        name = PROP_NAME.match(body, i)
        if not name:
            i += 1
            continue

        i = skip_whitespace(body, name.end())
        if i >= len(body) or body[i] != '=':
            props.append((name.group(), 'true'))
            continue

        i = skip_whitespace(body, i + 1)
        if i >= len(body):
            props.append((name.group(), 'true'))
            break

        if body[i] in '\'"':
            # JSX attribute strings have no escapes and may span lines
            end = body.find(body[i], i + 1)
            if end == -1:
                break
            raw = body[i:end + 1]
            i = end + 1
        elif body[i] == '{':
            end = balanced_end(body, i, '{', '}')
            if end == -1:
                break
            raw = body[i + 1:end - 1]
            i = end
        else:
            bare = BARE_VALUE.match(body, i)
            if not bare:
                props.append((name.group(), 'true'))
                continue
            raw = bare.group()
            i = bare.end()

        props.append((name.group(), normalize_prop_value(raw)))

    return props


def extract_component_instances(
    content: str,
    cleaned: str,
    exports: Dict[str, Tuple[str, str]]
) -> List[ComponentInstance]:
    """Every rendered tracked component with its line and props.

    exports maps local name -> (library, exported name). Opening tags are
    found in the sanitized text and read from the raw text at the same
    offset, so tags inside strings are skipped but literal prop values
    are kept.
    """
    if not exports:
        return []

    open_tag = re.compile(r'<(' + component_alternation(exports) + r')\b(?!\.)')
    instances = []
    for match in open_tag.finditer(cleaned):
        tag_end = find_tag_end(content, match.end())
        if tag_end == -1:
            continue
        library, component = exports[match.group(1)]
        instances.append(ComponentInstance(
            component=component,
            library=library,
            line=line_number_at(content, match.start()),
            props=parse_jsx_props(content[match.end():tag_end]),
        ))
    return instances
