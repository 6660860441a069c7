"""
Tag recognizer.
Counts PascalCase JSX component elements and native HTML/SVG tags.
"""

import re
from collections import Counter
from typing import AbstractSet, Dict

from ..config import KNOWN_TAGS


# Every PascalCase opening tag, repeats included
JSX_COMPONENT = re.compile(r'<([A-Z][a-zA-Z0-9]*)')

# Full tag: <name ...> or <name ... />
FULL_TAG = re.compile(r'<([a-z][a-zA-Z0-9]*)\s*(?:[^>]*?)?/?>')

# Simple tag: <name followed by whitespace, / or > (catches wrapped attributes)
SIMPLE_TAG = re.compile(r'<([a-z][a-zA-Z0-9]*)[\s/>]')


def count_jsx_instances(content: str) -> Dict[str, int]:
    """Count every PascalCase JSX element occurrence."""
    return dict(Counter(JSX_COMPONENT.findall(content)))


def match_full_tags(cleaned: str) -> Dict[str, int]:
    return dict(Counter(FULL_TAG.findall(cleaned)))


def match_simple_tags(cleaned: str) -> Dict[str, int]:
    return dict(Counter(SIMPLE_TAG.findall(cleaned)))


def extract_html_tags(cleaned: str, known_tags: AbstractSet[str] = KNOWN_TAGS) -> Dict[str, int]:
    """Count native tags in sanitized content.

    Both passes run and the higher count wins per tag, so the simple pass
    only adds recall and never double counts. Anything outside the known
    tag allowlist (type assertions like <string>, motion.div's bare
    'motion', custom elements) is dropped.
    """
    tags = match_full_tags(cleaned)
    for tag, count in match_simple_tags(cleaned).items():
        if count > tags.get(tag, 0):
            tags[tag] = count

    return {tag: count for tag, count in tags.items() if tag in known_tags}
