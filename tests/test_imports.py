"""
Import resolver tests.
"""

from component_analytics.analysis import (
    build_import_map,
    build_tracked_exports,
    categorize_import_source,
    extract_imports,
    parse_import_specifiers,
    parse_named_imports,
)
from component_analytics.models import (
    INTERNAL,
    OTHER_UI,
    UNCATEGORIZED,
    ResolvedConfig,
    SourceCategory,
    UILibrary,
)


class TestParseNamedImports:
    """Local PascalCase names only."""

    def test_alias_uses_local_name(self):
        assert parse_named_imports('Button as UIButton, Card') == ['UIButton', 'Card']

    def test_hooks_and_utilities_dropped(self):
        assert parse_named_imports('useToast, Button, useState') == ['Button']

    def test_type_entries_dropped(self):
        assert parse_named_imports('type ButtonProps, Button') == ['Button']

    def test_trailing_comma(self):
        assert parse_named_imports('Button, Card,') == ['Button', 'Card']

    def test_multi_line_with_comments(self):
        named = '\n  Button, // primary action\n  /* layout */ Card,\n'
        assert parse_named_imports(named) == ['Button', 'Card']

    def test_empty(self):
        assert parse_named_imports('') == []
        assert parse_named_imports(None) == []
        assert parse_named_imports('   ') == []


class TestExtractImports:

    def test_combined_default_and_named(self):
        [decl] = extract_imports("import Dialog, { DialogTitle, useDialog } from '@radix-ui/react-dialog'")
        assert decl.source == '@radix-ui/react-dialog'
        assert decl.default_local_name == 'Dialog'
        assert decl.named_local_names == ['DialogTitle']
        assert set(decl.local_names) == {'Dialog', 'DialogTitle'}

    def test_lowercase_default_is_not_a_component(self):
        [decl] = extract_imports("import styled from 'styled-components'")
        assert decl.local_names == []

    def test_type_only_statement_skipped(self):
        assert extract_imports("import type { ButtonProps } from '@lib/ui'") == []

    def test_namespace_import_ignored(self):
        assert extract_imports("import * as Icons from '@lib/icons'") == []

    def test_side_effect_import_ignored(self):
        assert extract_imports("import './styles.css'") == []

    def test_multiple_declarations(self):
        content = (
            "import { Button } from '@lib/ui'\n"
            "import {\n  Widget,\n  Panel as P,\n} from './widgets'\n"
        )
        sources = [(d.source, d.local_names) for d in extract_imports(content)]
        assert sources == [('@lib/ui', ['Button']), ('./widgets', ['Widget', 'P'])]


class TestCategorizeImportSource:
    """Each source lands in exactly one category."""

    def test_tracked_libraries(self, config):
        assert categorize_import_source('@lib/ui', config) == SourceCategory.for_library('lib')
        assert categorize_import_source('@lib/ui/Button', config) == SourceCategory.for_library('lib')
        assert categorize_import_source('@lib/icons', config) == SourceCategory.for_library('icons')

    def test_excluded_source_is_not_the_library(self, config):
        category = categorize_import_source('@lib/ui/theme', config)
        assert category != SourceCategory.for_library('lib')
        assert category == UNCATEGORIZED

    def test_other_ui(self, config):
        assert categorize_import_source('@radix-ui/react-dialog', config) == OTHER_UI
        assert categorize_import_source('styled-components', config) == OTHER_UI

    def test_internal(self, config):
        for source in ['./Widget', '../shared/Panel', '/abs/Thing',
                       '@app/ui-components/Button', 'src/primitives/Box', '~/components/Nav']:
            assert categorize_import_source(source, config) == INTERNAL, source

    def test_uncategorized(self, config):
        assert categorize_import_source('react', config) == UNCATEGORIZED
        assert categorize_import_source('next/link', config) == UNCATEGORIZED

    def test_exclusions_are_scoped_to_their_library(self):
        config = ResolvedConfig(libraries=[
            UILibrary(name='A', import_sources=['@acme'], exclude_sources=['@acme/theme']),
            UILibrary(name='B', import_sources=['@acme/theme']),
        ])
        assert categorize_import_source('@acme/button', config) == SourceCategory.for_library('A')
        assert categorize_import_source('@acme/theme', config) == SourceCategory.for_library('B')

    def test_first_configured_library_wins(self):
        config = ResolvedConfig(libraries=[
            UILibrary(name='first', import_sources=['@acme']),
            UILibrary(name='second', import_sources=['@acme/ui']),
        ])
        assert categorize_import_source('@acme/ui', config) == SourceCategory.for_library('first')

    def test_library_before_other_ui(self):
        config = ResolvedConfig(
            libraries=[UILibrary(name='radix', import_sources=['@radix-ui'])],
        )
        assert categorize_import_source('@radix-ui/react-popover', config) == SourceCategory.for_library('radix')


class TestBuildImportMap:

    def test_maps_local_names(self, config):
        content = (
            "import { Button as UIButton, Card } from '@lib/ui'\n"
            "import { CloseIcon } from '@lib/icons'\n"
            "import { Widget } from './Widget'\n"
            "import { Link } from 'next/link'\n"
        )
        mapping, present = build_import_map(content, config)
        assert mapping == {
            'UIButton': SourceCategory.for_library('lib'),
            'Card': SourceCategory.for_library('lib'),
            'CloseIcon': SourceCategory.for_library('icons'),
            'Widget': INTERNAL,
        }
        assert present == {SourceCategory.for_library('lib'), SourceCategory.for_library('icons'), INTERNAL}

    def test_hook_only_import_adds_no_category(self, config):
        mapping, present = build_import_map("import { useTheme } from '@lib/ui'", config)
        assert mapping == {}
        assert present == set()


class TestImportSpecifiers:
    """(exported, local) pairs keep the name the library exports."""

    def test_alias_pairs(self):
        assert parse_import_specifiers('Button as UIButton, Card, type Props, useTheme') == [
            ('Button', 'UIButton'),
            ('Card', 'Card'),
        ]

    def test_exported_name_of_alias(self):
        [declaration] = extract_imports("import { Button as UIButton, Card } from '@lib/ui'")
        assert declaration.exported_name('UIButton') == 'Button'
        assert declaration.exported_name('Card') == 'Card'


class TestTrackedExports:

    def test_library_components_only(self, config):
        content = (
            "import { Button as UIButton } from '@lib/ui'\n"
            "import { CloseIcon } from '@lib/icons'\n"
            "import { Widget } from './Widget'\n"
            "import { Root } from '@radix-ui/react-popover'\n"
        )
        assert build_tracked_exports(content, config) == {
            'UIButton': ('lib', 'Button'),
            'CloseIcon': ('icons', 'CloseIcon'),
        }

    def test_components_list_limits_the_library(self):
        config = ResolvedConfig(libraries=[UILibrary('lib', ['@lib/ui'], components=['Card'])])
        content = "import { Button, Card } from '@lib/ui'"
        assert build_tracked_exports(content, config) == {'Card': ('lib', 'Card')}
