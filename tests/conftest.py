"""
Shared fixtures for component analytics tests.
"""

import pytest

from component_analytics.models import ResolvedConfig, UILibrary


@pytest.fixture
def config():
    """Two tracked libraries plus the usual other-UI patterns."""
    return ResolvedConfig(
        libraries=[
            UILibrary(name='lib', import_sources=['@lib/ui'], exclude_sources=['@lib/ui/theme']),
            UILibrary(name='icons', import_sources=['@lib/icons']),
        ],
        other_ui_patterns=['@radix-ui', 'styled-components', 'framer-motion'],
    )


@pytest.fixture
def codebase(tmp_path):
    """A small codebase on disk with one unreadable file and ignored paths."""
    root = tmp_path / 'app'
    (root / 'src' / 'components').mkdir(parents=True)
    (root / 'node_modules' / 'pkg').mkdir(parents=True)

    (root / 'src' / 'Page.tsx').write_text(
        "import { Button, Card } from '@lib/ui'\n"
        "import { Widget } from './components/Widget'\n"
        "export const Page = () => (\n"
        "  <Card>\n"
        "    <Widget />\n"
        "    <Button>Save</Button>\n"
        "  </Card>\n"
        ")\n",
        encoding='utf-8',
    )
    (root / 'src' / 'components' / 'Widget.tsx').write_text(
        "import { Panel } from './Panel'\n"
        "export const Widget = () => <Panel><div><span>hi</span></div></Panel>\n",
        encoding='utf-8',
    )
    (root / 'src' / 'Broken.tsx').write_bytes(b'\xff\xfe\x00<div>')
    (root / 'src' / 'Page.test.tsx').write_text("<div />", encoding='utf-8')
    (root / 'src' / 'helpers.ts').write_text("<div />", encoding='utf-8')
    (root / 'node_modules' / 'pkg' / 'index.jsx').write_text("<div />", encoding='utf-8')
    return root
