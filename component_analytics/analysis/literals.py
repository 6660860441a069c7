"""
Literal sanitizer.
Blanks string/template bodies and import statements so later regex
passes don't pick up tags or identifiers embedded in them. Every
replacement has the same length as the text it replaces.
"""

import re


# One left-to-right scan: whichever literal starts first wins, so quotes
# inside a template never open a string. Module specifiers are kept so
# imports can still be resolved from the sanitized text. A single quote
# right after a word character is an apostrophe in JSX text, not a string.
LITERAL_PATTERN = re.compile(
    r"(?P<module>\b(?:from|import)\s*(?P<quote>['\"])[^'\"\n]*(?P=quote))"
    r"|`(?:\\[\s\S]|[^`\\])*`"
    r"|(?<!\w)'(?:\\.|[^'\\\n])*'"
    r'|"(?:\\.|[^"\\\n])*"'
)

IMPORT_CLAUSE = r'(?:\*\s*as\s+\w+|\{[^}]*\}|\w+)'
IMPORT_STATEMENT = re.compile(
    r'\bimport\s+(?:type\s+)?' + IMPORT_CLAUSE +
    r'(?:\s*,\s*' + IMPORT_CLAUSE + r')?'
    r"""\s*from\s*['"][^'"]+['"]\s*;?"""
)


def blank(text: str) -> str:
    """Replace every character except newlines with a space."""
    return re.sub(r'[^\n]', ' ', text)


def _blank_literal(match: re.Match) -> str:
    if match.group('module'):
        return match.group(0)
    literal = match.group(0)
    # Keep the delimiters, blank the body
    return literal[0] + blank(literal[1:-1]) + literal[-1]


def sanitize_literals(content: str) -> str:
    """Blank the bodies of template, single- and double-quoted literals."""
    return LITERAL_PATTERN.sub(_blank_literal, content)


def strip_import_statements(content: str) -> str:
    """Blank whole `import ... from '...'` statements, including multi-line ones."""
    return IMPORT_STATEMENT.sub(lambda m: blank(m.group(0)), content)
