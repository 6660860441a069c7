"""
Tag recognizer tests.
"""

from component_analytics.analysis import (
    count_jsx_instances,
    extract_html_tags,
    match_full_tags,
    match_simple_tags,
    sanitize_literals,
)
from component_analytics.config import tag_category


class TestJsxInstances:
    """PascalCase opening tags are counted, repeats included."""

    def test_counts_every_occurrence(self):
        content = '<Button>a</Button>\n<Button/>\n<Card />'
        assert count_jsx_instances(content) == {'Button': 2, 'Card': 1}

    def test_closing_tags_not_counted(self):
        assert count_jsx_instances('</Button>') == {}

    def test_member_expression_counts_object_name(self):
        assert count_jsx_instances('<Menu.Item />') == {'Menu': 1}


class TestHtmlTags:
    """Native tags are counted once per occurrence, allowlist only."""

    def test_html_and_svg_tags(self):
        content = '<div><span>x</span><svg><clipPath id="c"/></svg></div>'
        assert extract_html_tags(content) == {'div': 1, 'span': 1, 'svg': 1, 'clipPath': 1}

    def test_multi_line_attributes_counted_once(self):
        content = sanitize_literals('<div\n  className="a"\n  id="b"\n>\n</div>')
        assert extract_html_tags(content) == {'div': 1}

    def test_simple_pass_recovers_truncated_tag(self):
        content = '<div className'
        assert match_full_tags(content) == {}
        assert match_simple_tags(content) == {'div': 1}
        assert extract_html_tags(content) == {'div': 1}

    def test_type_assertions_and_member_tags_excluded(self):
        content = (
            'const a = <string>value;\n'
            'const b = <boolean>flag;\n'
            '<motion.div>hi</motion.div>\n'
            'let c = <typeof x>y;\n'
        )
        assert extract_html_tags(content) == {}

    def test_custom_known_tags(self):
        assert extract_html_tags('<div /><section />', frozenset({'div'})) == {'div': 1}

    def test_repeated_tags(self):
        assert extract_html_tags('<li>a</li><li>b</li><li>c</li>') == {'li': 3}


class TestTagCategory:

    def test_known_categories(self):
        assert tag_category('div') == 'layout'
        assert tag_category('button') == 'form'
        assert tag_category('clipPath') == 'media'

    def test_unknown_is_other(self):
        assert tag_category('blink') == 'other'
