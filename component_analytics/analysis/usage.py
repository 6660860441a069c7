"""
Usage counter.
Credits JSX instances and prop-value references to each component's
category, counting every occurrence exactly once.
"""

import re
from collections import defaultdict
from typing import Dict, Iterable, List

from ..models import (
    JSX_INSTANCE,
    PROP_REFERENCE,
    ComponentUsage,
    NativeTagUsage,
    SourceCategory,
)


def prop_reference_pattern(name: str) -> re.Pattern:
    """Pattern for a name used as a value rather than rendered.

    Matches icon={CloseIcon}, {icon: CloseIcon}, [CloseIcon, EditIcon].
    """
    return re.compile(r'(?:[=:{,\[]\s*)\b' + re.escape(name) + r'\b(?=[\s,}\]])')


def count_prop_references(stripped: str, names: Iterable[str]) -> Dict[str, int]:
    """Count prop-value references per name in import-stripped content."""
    counts = {}
    for name in names:
        found = len(prop_reference_pattern(name).findall(stripped))
        if found:
            counts[name] = found
    return counts


def count_usages(
    jsx_counts: Dict[str, int],
    prop_counts: Dict[str, int],
    component_to_category: Dict[str, SourceCategory]
) -> Dict[SourceCategory, List[ComponentUsage]]:
    """Bucket component usages by category.

    Prop references are only credited for matches beyond the name's JSX
    count, so a component rendered once and also matching the prop
    pattern is still one usage.
    """
    usages: Dict[SourceCategory, List[ComponentUsage]] = defaultdict(list)

    for name, count in jsx_counts.items():
        category = component_to_category.get(name)
        if category is None:
            continue
        usages[category].extend(ComponentUsage(name, category, JSX_INSTANCE) for _ in range(count))

    for name, count in prop_counts.items():
        category = component_to_category.get(name)
        if category is None:
            continue
        # Subtract the JSX instances already credited for this name
        additional = max(0, count - jsx_counts.get(name, 0))
        if additional == 0:
            continue
        usages[category].extend(ComponentUsage(name, category, PROP_REFERENCE) for _ in range(additional))

    return usages


def native_tag_usages(html_tags: Dict[str, int]) -> List[NativeTagUsage]:
    return [NativeTagUsage(tag, count) for tag, count in sorted(html_tags.items()) if count > 0]
