"""
Literal sanitizer tests.
"""

from component_analytics.analysis import extract_html_tags, sanitize_literals, strip_import_statements


class TestSanitizeLiterals:
    """String and template bodies are blanked, positions are kept."""

    def test_length_and_newlines_preserved(self):
        content = 'const a = "<div>x</div>";\nconst b = `\n  <span />\n`;\nconst c = \'<p>\';\n'
        cleaned = sanitize_literals(content)
        assert len(cleaned) == len(content)
        assert cleaned.count('\n') == content.count('\n')

    def test_tags_inside_strings_are_not_seen(self):
        cleaned = sanitize_literals('const html = "<div>not a tag</div>"')
        assert extract_html_tags(cleaned) == {}

    def test_tags_inside_template_literal_are_not_seen(self):
        content = "const css = `\n  .container > div { color: red }\n  <div>${x}</div>\n`;"
        assert extract_html_tags(sanitize_literals(content)) == {}

    def test_delimiters_are_kept(self):
        assert sanitize_literals("x = 'abc'") == "x = '   '"

    def test_quote_inside_template_does_not_open_a_string(self):
        content = "const t = `it's`;\n<div>ok</div>"
        assert extract_html_tags(sanitize_literals(content)) == {'div': 1}

    def test_escaped_quotes(self):
        content = 'const s = "say \\"<b>\\" now"; <span />'
        assert extract_html_tags(sanitize_literals(content)) == {'span': 1}

    def test_module_specifiers_survive(self):
        content = "import { Button } from '@lib/ui'\nimport './styles.css'"
        cleaned = sanitize_literals(content)
        assert "'@lib/ui'" in cleaned
        assert "'./styles.css'" in cleaned

    def test_apostrophe_in_jsx_text_does_not_swallow_next_line(self):
        content = "<p>Don't do it</p>\n<span>ok</span>"
        assert extract_html_tags(sanitize_literals(content)) == {'p': 1, 'span': 1}

    def test_two_apostrophes_on_one_line(self):
        content = "<p>Don't</p><span>It's</span><b>x</b>"
        assert extract_html_tags(sanitize_literals(content)) == {'p': 1, 'span': 1, 'b': 1}

    def test_string_after_operator_still_blanked(self):
        assert sanitize_literals("x='<div>'") == "x='     '"


class TestStripImportStatements:
    """Import statements are blanked so prop-reference scans skip them."""

    def test_multi_line_import_is_blanked(self):
        content = "import {\n  Button,\n  Card,\n} from '@lib/ui';\nconst x = { icon: Card }\n"
        stripped = strip_import_statements(content)
        assert len(stripped) == len(content)
        assert 'Button' not in stripped
        assert 'const x = { icon: Card }' in stripped

    def test_default_and_type_imports(self):
        content = "import React, { useState } from 'react'\nimport type { Props } from './types'\n"
        stripped = strip_import_statements(content)
        assert stripped.strip() == ''

    def test_namespace_import(self):
        stripped = strip_import_statements("import * as Icons from '@lib/icons'")
        assert 'Icons' not in stripped
