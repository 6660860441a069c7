"""
Configuration constants for component analytics.
Tag allowlist, internal-path markers and file filters.
"""

from typing import Dict, List


CONFIG_FILENAME = 'component-analytics.yaml'

# How many parent directories to search for the config file
CONFIG_SEARCH_DEPTH = 5

# Source paths containing these are treated as the codebase's own components
INTERNAL_MARKERS = ('ui-components', 'primitives', 'components')

# Extensions to analyze
DEFAULT_EXTENSIONS = ('.tsx', '.jsx')

# Files/directories to ignore (substring match on the path)
IGNORE_PATTERNS = (
    'node_modules',
    'dist',
    'build',
    '__tests__',
    '.test.',
    '.spec.',
    '.stories.',
)

# Third-party UI sources that are neither tracked nor internal
DEFAULT_OTHER_UI_PATTERNS = (
    '@radix-ui',
    'styled-components',
    'motion/react',
    'framer-motion',
)

# Native HTML and SVG element names by category
HTML_TAG_CATEGORIES: Dict[str, List[str]] = {
    'layout': [
        'article', 'aside', 'details', 'dialog', 'div', 'figcaption',
        'figure', 'footer', 'header', 'main', 'nav', 'section', 'slot',
        'span', 'summary', 'template',
    ],
    'text': [
        'abbr', 'b', 'bdi', 'bdo', 'blockquote', 'br', 'cite', 'code',
        'data', 'del', 'dfn', 'em', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
        'hr', 'i', 'ins', 'kbd', 'mark', 'p', 'pre', 'q', 'rp', 'rt',
        'ruby', 's', 'samp', 'small', 'strong', 'sub', 'sup', 'time', 'u',
        'var', 'wbr',
    ],
    'form': [
        'button', 'datalist', 'fieldset', 'form', 'input', 'label',
        'legend', 'meter', 'optgroup', 'option', 'output', 'progress',
        'select', 'textarea',
    ],
    'list': ['dd', 'dl', 'dt', 'li', 'menu', 'ol', 'ul'],
    'table': [
        'caption', 'col', 'colgroup', 'table', 'tbody', 'td', 'tfoot',
        'th', 'thead', 'tr',
    ],
    'media': [
        'animate', 'animateTransform', 'audio', 'canvas', 'circle',
        'clipPath', 'defs', 'desc', 'ellipse', 'feBlend', 'feComposite',
        'feFlood', 'feGaussianBlur', 'feMerge', 'feMergeNode', 'feOffset',
        'filter', 'foreignObject', 'g', 'image', 'img', 'line',
        'linearGradient', 'marker', 'mask', 'metadata', 'path', 'pattern',
        'picture', 'polygon', 'polyline', 'radialGradient', 'rect', 'set',
        'source', 'stop', 'svg', 'symbol', 'text', 'title', 'track',
        'tspan', 'use', 'video',
    ],
    'link': ['a', 'area', 'link', 'map'],
    'embed': ['embed', 'iframe', 'object', 'param', 'portal'],
    'scripting': ['noscript', 'script'],
    'semantic': ['address', 'hgroup', 'search'],
    'document': ['html', 'head', 'body', 'base', 'meta', 'style'],
}

KNOWN_TAGS = frozenset(tag for tags in HTML_TAG_CATEGORIES.values() for tag in tags)

_TAG_TO_CATEGORY = {
    tag: category
    for category, tags in HTML_TAG_CATEGORIES.items()
    for tag in tags
}


def tag_category(tag: str) -> str:
    """Get category for a native tag, 'other' if unknown."""
    return _TAG_TO_CATEGORY.get(tag, 'other')
