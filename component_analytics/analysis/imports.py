"""
Import resolver.
Parses import declarations and maps each local component name to the
category of the source it was imported from.
"""

import re
from typing import Dict, List, Optional, Set, Tuple

from ..models import (
    INTERNAL,
    OTHER_UI,
    UNCATEGORIZED,
    ImportDeclaration,
    ResolvedConfig,
    SourceCategory,
)


# import X from '...' / import { A, B as C } from '...' / import X, { A } from '...'
# `import type ...` statements are skipped entirely.
IMPORT_DECLARATION = re.compile(
    r'\bimport\s+(?!type\s+(?!from\b)[{\w*])'
    r'(?:(?P<default>[A-Za-z_$][\w$]*)\s*(?:,\s*)?)?'
    r'(?:\{(?P<named>[^}]*)\})?'
    r"""\s*from\s*['"](?P<source>[^'"]+)['"]"""
)

ALIAS_SEPARATOR = re.compile(r'\s+as\s+')
TYPE_MODIFIER = re.compile(r'^type\s')
COMMENT = re.compile(r'//[^\n]*|/\*.*?\*/', re.DOTALL)


def is_component_name(name: str) -> bool:
    """Only PascalCase names can be rendered as JSX elements."""
    return bool(name) and name[0].isupper()


def parse_import_specifiers(named_imports: Optional[str]) -> List[Tuple[str, str]]:
    """(exported, local) pairs from the inside of an import's braces.

    Only PascalCase local names are kept, since only those can appear
    as JSX elements. Type-only entries, hooks and utilities are dropped.
    """
    if not named_imports:
        return []

    pairs = []
    for entry in COMMENT.sub('', named_imports).split(','):
        entry = entry.strip()
        if not entry or TYPE_MODIFIER.match(entry):
            continue
        parts = [p.strip() for p in ALIAS_SEPARATOR.split(entry)]
        local_name = parts[1] if len(parts) > 1 else parts[0]
        if is_component_name(local_name):
            pairs.append((parts[0], local_name))
    return pairs


def parse_named_imports(named_imports: Optional[str]) -> List[str]:
    """Return the local PascalCase names from the inside of an import's braces.

    For `Button as UIButton` the local name `UIButton` is returned, since
    that is what appears in JSX.
    """
    return [local for _, local in parse_import_specifiers(named_imports)]


def extract_imports(content: str) -> List[ImportDeclaration]:
    """Extract all import declarations from file content."""
    declarations = []
    for match in IMPORT_DECLARATION.finditer(content):
        default = match.group('default')
        specifiers = parse_import_specifiers(match.group('named'))
        declarations.append(ImportDeclaration(
            source=match.group('source'),
            named_local_names=[local for _, local in specifiers],
            default_local_name=default if default and is_component_name(default) else None,
            exported_names={local: exported for exported, local in specifiers if exported != local},
        ))
    return declarations


def _matches_any(source: str, patterns: List[str]) -> bool:
    return any(p and p in source for p in patterns)


def categorize_import_source(source: str, config: ResolvedConfig) -> SourceCategory:
    """Categorize an import source.

    Order: tracked library (its own exclusions apply only to it), other
    UI library, internal (relative path or internal marker), otherwise
    uncategorized.
    """
    for lib in config.libraries:
        if _matches_any(source, lib.import_sources) and not _matches_any(source, lib.exclude_sources):
            return SourceCategory.for_library(lib.name)

    if _matches_any(source, config.other_ui_patterns):
        return OTHER_UI

    if source.startswith(('.', '/')) or _matches_any(source, list(config.internal_markers)):
        return INTERNAL

    return UNCATEGORIZED


def build_import_map(
    content: str,
    config: ResolvedConfig
) -> Tuple[Dict[str, SourceCategory], Set[SourceCategory]]:
    """Map local component names to their category.

    Returns the name -> category map and the set of categories seen.
    Names from uncategorized sources (react, next/link, ...) are omitted.
    """
    component_to_category: Dict[str, SourceCategory] = {}
    categories_present: Set[SourceCategory] = set()

    for declaration in extract_imports(content):
        category = categorize_import_source(declaration.source, config)
        if category == UNCATEGORIZED:
            continue

        for name in declaration.local_names:
            component_to_category[name] = category
            categories_present.add(category)

    return component_to_category, categories_present


def build_tracked_exports(content: str, config: ResolvedConfig) -> Dict[str, Tuple[str, str]]:
    """Map local names of tracked library components to (library, exported name).

    A library configured with a components list only reports those
    components here; the others are still counted as library usages.
    """
    exports: Dict[str, Tuple[str, str]] = {}

    for declaration in extract_imports(content):
        category = categorize_import_source(declaration.source, config)
        if not category.is_library:
            continue

        scope = config.library(category.library).components
        for name in declaration.local_names:
            exported = declaration.exported_name(name)
            if scope and exported not in scope:
                continue
            exports[name] = (category.library, exported)

    return exports
