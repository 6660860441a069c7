"""
Customization extractor.
Finds inline style={...} props and styled(Component) wrappers on
tracked library components, and the style properties they touch.
"""

import re
from typing import Dict, List, Optional, Set, Tuple

from ..models import InlineStyleUsage, StyledWrapperUsage
from .scanning import (
    balanced_end,
    component_alternation,
    find_tag_end,
    generic_end,
    skip_whitespace,
    split_top_level,
    string_end,
)


STYLE_ATTR = re.compile(r'(?<![\w$.-])style\s*=\s*\{')
VARIABLE_ASSIGNMENT = re.compile(
    r'(?:export\s+)?(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*(?::[^=;]+)?=\s*$'
)
CHAINED_CALL = re.compile(r'\s*\.(?:attrs|withConfig)\s*')
STYLE_KEY = re.compile(r'''^(?:([A-Za-z_$][\w$]*)|'([^']*)'|"([^"]*)")\s*:''')
SHORTHAND_KEY = re.compile(r'^[A-Za-z_$][\w$]*$')
ARROW_PREFIX = re.compile(r'^(?:async\s+)?(?:\([^)]*\)|[A-Za-z_$][\w$]*)\s*=>\s*')
CSS_COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)
CSS_DECLARATION = re.compile(
    r'(?:^|[;{}])\s*(-{0,2}[a-zA-Z][\w-]*)\s*:(?!:)[^;{}\n]*(?=[;}\n]|$)',
    re.MULTILINE
)

# How far back to look for `const Name =` before a styled() call
ASSIGNMENT_LOOKBACK = 200


# ─── Property parsing ─────────────────────────────────────────────────────────

def _object_body(expression: str) -> Optional[str]:
    expression = expression.strip()
    if expression.startswith('{') and expression.endswith('}'):
        return expression[1:-1]
    return None


def parse_style_properties(expression: str) -> Set[str]:
    """Property names of a style object literal, top level only.

    `{ color: 'red', '--gap': 4, ...base }` gives {'color', '--gap'}.
    A bare identifier like `style={rootStyle}` has no extractable properties.
    """
    body = _object_body(expression)
    if body is None:
        return set()

    properties = set()
    for entry in split_top_level(body):
        if entry.startswith('...'):
            continue
        key = STYLE_KEY.match(entry)
        if key:
            properties.add(key.group(1) or key.group(2) or key.group(3))
        elif SHORTHAND_KEY.match(entry):
            properties.add(entry)
    properties.discard('')
    return properties


def has_spread(expression: str) -> bool:
    body = _object_body(expression)
    return body is not None and any(e.startswith('...') for e in split_top_level(body))


def _mask_interpolations(template: str) -> str:
    """Replace each ${...} with underscores of the same length."""
    out = []
    i = 0
    while i < len(template):
        if template.startswith('${', i):
            end = balanced_end(template, i + 1, '{', '}')
            if end == -1:
                end = len(template)
            out.append('_' * (end - i))
            i = end
            continue
        out.append(template[i])
        i += 1
    return ''.join(out)


def _template_bodies(code: str) -> List[str]:
    bodies = []
    i = 0
    while i < len(code):
        if code[i] == '`':
            end = string_end(code, i)
            if end == -1:
                bodies.append(code[i + 1:])
                break
            bodies.append(code[i + 1:end - 1])
            i = end
            continue
        i += 1
    return bodies


def parse_styled_properties(css_body: str) -> Set[str]:
    """CSS property names declared in a styled template body.

    Interpolated values (`color: ${p => p.color};`) count as declarations;
    selectors such as `&:hover {` and `button:focus {` do not.
    """
    masked = CSS_COMMENT.sub('', _mask_interpolations(css_body))
    return {m.group(1) for m in CSS_DECLARATION.finditer(masked) if len(m.group(1)) > 1}


def parse_styled_call_properties(call_body: str) -> Set[str]:
    """Properties of a styled(Component)(...) argument.

    Template literals inside the call are parsed as CSS, an object literal
    (optionally returned by an arrow function) as a style object, and a
    plain identifier yields nothing.
    """
    if '`' in call_body:
        properties = set()
        for body in _template_bodies(call_body):
            properties |= parse_styled_properties(body)
        return properties

    expression = ARROW_PREFIX.sub('', call_body.strip())
    while expression.startswith('(') and expression.endswith(')'):
        expression = expression[1:-1].strip()
    return parse_style_properties(expression)


# ─── Inline style={} ──────────────────────────────────────────────────────────

def extract_style_from_props(props: str) -> List[str]:
    """Balanced contents of each style={...} in a props string."""
    results = []
    for match in STYLE_ATTR.finditer(props):
        brace = match.end() - 1
        end = balanced_end(props, brace, '{', '}')
        if end == -1:
            continue
        results.append(props[brace + 1:end - 1].strip())
    return results


def _multi_line_styles(content: str, open_tag: re.Pattern) -> Dict[int, Tuple[str, List[str]]]:
    """Brace-aware pass: handles attributes spread over several lines."""
    found = {}
    for match in open_tag.finditer(content):
        tag_end = find_tag_end(content, match.end())
        if tag_end == -1:
            continue
        styles = extract_style_from_props(content[match.end():tag_end])
        if styles:
            found[match.start()] = (match.group(1), styles)
    return found


def _single_line_styles(content: str, names: str) -> Dict[int, Tuple[str, List[str]]]:
    """Fast pass: opening tag closed on the same line."""
    found = {}
    pattern = re.compile(r'<(' + names + r')\b(?!\.)([^>\n]*)>')
    for match in pattern.finditer(content):
        styles = extract_style_from_props(match.group(2))
        if styles:
            found[match.start()] = (match.group(1), styles)
    return found


def extract_inline_styles(content: str, tracked: Dict[str, str]) -> List[InlineStyleUsage]:
    """Inline style props on tracked components.

    tracked maps local component name -> library name. Both passes are
    keyed by tag position so one attribute is never recorded twice.
    """
    if not tracked:
        return []

    names = component_alternation(tracked)
    open_tag = re.compile(r'<(' + names + r')\b(?!\.)')
    by_position = _single_line_styles(content, names)
    by_position.update(_multi_line_styles(content, open_tag))

    usages = []
    for position in sorted(by_position):
        component, styles = by_position[position]
        for expression in styles:
            usages.append(InlineStyleUsage(
                component=component,
                raw_style_expression=expression,
                properties=parse_style_properties(expression),
                has_spread=has_spread(expression),
                library=tracked[component],
            ))
    return usages


# ─── styled() ─────────────────────────────────────────────────────────────────

def _skip_generic(content: str, i: int) -> int:
    if i < len(content) and content[i] == '<':
        end = generic_end(content, i)
        if end != -1:
            return skip_whitespace(content, end)
    return i


def _variable_name(content: str, start: int) -> Optional[str]:
    before = content[max(0, start - ASSIGNMENT_LOOKBACK):start]
    match = VARIABLE_ASSIGNMENT.search(before)
    return match.group(1) if match else None


def _styled_body(content: str, i: int) -> Optional[Tuple[str, bool]]:
    """Body after styled(X): (text, is_template), or None if not a recognised form."""
    i = _skip_generic(content, skip_whitespace(content, i))

    # .attrs(...) / .withConfig(...) chains
    while True:
        chain = CHAINED_CALL.match(content, i)
        if not chain:
            break
        j = _skip_generic(content, chain.end())
        if j >= len(content) or content[j] != '(':
            return None
        end = balanced_end(content, j, '(', ')')
        if end == -1:
            return None
        i = _skip_generic(content, skip_whitespace(content, end))

    if i >= len(content):
        return None
    if content[i] == '`':
        end = string_end(content, i)
        if end == -1:
            return None
        return content[i + 1:end - 1], True
    if content[i] == '(':
        end = balanced_end(content, i, '(', ')')
        if end == -1:
            return None
        return content[i + 1:end - 1].strip(), False
    return None


def extract_styled_usages(content: str, tracked: Dict[str, str]) -> List[StyledWrapperUsage]:
    """styled(Component) wrappers of tracked components.

    Recognised forms: styled(X)`...`, styled(X).attrs(...)`...`,
    styled(X)<Props>`...` and styled(X)(fn). Lowercase targets and
    untracked names are ignored.
    """
    if not tracked:
        return []

    pattern = re.compile(r'\bstyled\(\s*(' + component_alternation(tracked) + r')\s*\)')
    usages = []
    for match in pattern.finditer(content):
        body = _styled_body(content, match.end())
        if body is None:
            continue
        text, is_template = body
        component = match.group(1)
        usages.append(StyledWrapperUsage(
            component=component,
            variable_name=_variable_name(content, match.start()),
            raw_css_body=text.strip(),
            properties=parse_styled_properties(text) if is_template else parse_styled_call_properties(text),
            library=tracked[component],
        ))
    return usages
