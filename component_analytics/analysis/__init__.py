"""
Analysis passes - exports every pass used by the per-file pipeline.
"""

from .literals import sanitize_literals, strip_import_statements
from .tags import count_jsx_instances, extract_html_tags, match_full_tags, match_simple_tags
from .imports import (
    build_import_map,
    build_tracked_exports,
    categorize_import_source,
    extract_imports,
    parse_import_specifiers,
    parse_named_imports,
)
from .usage import count_prop_references, count_usages, native_tag_usages
from .customizations import (
    extract_inline_styles,
    extract_styled_usages,
    parse_style_properties,
    parse_styled_properties,
)
from .props import extract_component_instances, normalize_prop_value, parse_jsx_props
from .aggregate import aggregate, aggregate_codebases, from_file, merge

__all__ = [
    'sanitize_literals',
    'strip_import_statements',
    'count_jsx_instances',
    'extract_html_tags',
    'match_full_tags',
    'match_simple_tags',
    'build_import_map',
    'build_tracked_exports',
    'categorize_import_source',
    'extract_imports',
    'parse_import_specifiers',
    'parse_named_imports',
    'count_prop_references',
    'count_usages',
    'native_tag_usages',
    'extract_inline_styles',
    'extract_styled_usages',
    'parse_style_properties',
    'parse_styled_properties',
    'extract_component_instances',
    'normalize_prop_value',
    'parse_jsx_props',
    'aggregate',
    'aggregate_codebases',
    'from_file',
    'merge',
]
