"""
Data models for component analytics.
Pure dataclasses - no business logic.
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from .config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_OTHER_UI_PATTERNS,
    IGNORE_PATTERNS,
    INTERNAL_MARKERS,
    KNOWN_TAGS,
)


@dataclass
class UILibrary:
    """A tracked UI component library."""
    name: str
    import_sources: List[str] = field(default_factory=list)
    exclude_sources: List[str] = field(default_factory=list)
    components: List[str] = field(default_factory=list)


@dataclass
class CodebaseEntry:
    """A codebase to analyze."""
    name: str
    path: Path


@dataclass
class ResolvedConfig:
    """Everything the analysis needs to classify one file."""
    libraries: List[UILibrary] = field(default_factory=list)
    other_ui_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_OTHER_UI_PATTERNS))
    codebases: List[CodebaseEntry] = field(default_factory=list)
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    ignore_patterns: Tuple[str, ...] = IGNORE_PATTERNS
    known_tags: FrozenSet[str] = KNOWN_TAGS
    internal_markers: Tuple[str, ...] = INTERNAL_MARKERS

    @property
    def library_names(self) -> List[str]:
        return [lib.name for lib in self.libraries]

    def library(self, name: str) -> Optional[UILibrary]:
        for lib in self.libraries:
            if lib.name == name:
                return lib
        return None


@dataclass(frozen=True)
class SourceCategory:
    """Where a component comes from: a tracked library, other UI, internal, or nowhere."""
    kind: str  # library, other_ui, internal, uncategorized
    library: Optional[str] = None

    @classmethod
    def for_library(cls, name: str) -> 'SourceCategory':
        return cls('library', name)

    @property
    def is_library(self) -> bool:
        return self.kind == 'library'

    @property
    def label(self) -> str:
        if self.is_library:
            return self.library
        return {'other_ui': 'Other UI', 'internal': 'Internal'}.get(self.kind, 'Uncategorized')


OTHER_UI = SourceCategory('other_ui')
INTERNAL = SourceCategory('internal')
UNCATEGORIZED = SourceCategory('uncategorized')


@dataclass
class ImportDeclaration:
    """One parsed import statement."""
    source: str
    named_local_names: List[str] = field(default_factory=list)
    default_local_name: Optional[str] = None
    # Map: local name -> exported name, for aliased named imports
    exported_names: Dict[str, str] = field(default_factory=dict)

    @property
    def local_names(self) -> List[str]:
        names = list(self.named_local_names)
        if self.default_local_name:
            names.append(self.default_local_name)
        return names

    def exported_name(self, local_name: str) -> str:
        """Name the source exports for a local name (same unless aliased)."""
        return self.exported_names.get(local_name, local_name)


# Usage kinds
JSX_INSTANCE = 'jsx_instance'
PROP_REFERENCE = 'prop_reference'


@dataclass(frozen=True)
class ComponentUsage:
    """One attributable occurrence of a component."""
    name: str
    category: SourceCategory
    kind: str = JSX_INSTANCE


@dataclass(frozen=True)
class NativeTagUsage:
    """A native HTML/SVG tag and how often it appears in a file."""
    tag: str
    count: int


@dataclass
class InlineStyleUsage:
    """A style={...} attribute on a tracked component."""
    component: str
    raw_style_expression: str
    properties: Set[str] = field(default_factory=set)
    has_spread: bool = False
    library: str = ''


@dataclass
class StyledWrapperUsage:
    """A styled(Component) wrapper around a tracked component."""
    component: str
    variable_name: Optional[str]
    raw_css_body: str
    properties: Set[str] = field(default_factory=set)
    library: str = ''


@dataclass
class ComponentInstance:
    """One rendered tracked component and the props written on it."""
    component: str  # exported name, not the local alias
    library: str
    line: int
    # (prop name, normalized value) in source order
    props: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class FileAnalysisResult:
    """Everything found in one file."""
    path: str = ''
    # Map: category -> usages credited to it
    usages: Dict[SourceCategory, List[ComponentUsage]] = field(default_factory=lambda: defaultdict(list))
    native_tags: List[NativeTagUsage] = field(default_factory=list)
    # Raw PascalCase JSX counts, attributed or not
    jsx_counts: Dict[str, int] = field(default_factory=dict)
    inline_styles: List[InlineStyleUsage] = field(default_factory=list)
    styled_usages: List[StyledWrapperUsage] = field(default_factory=list)
    # Categories of the file's resolved imports
    categories_present: Set[SourceCategory] = field(default_factory=set)
    # (library, exported name) of tracked components imported by the file
    tracked_imports: Set[Tuple[str, str]] = field(default_factory=set)
    component_instances: List[ComponentInstance] = field(default_factory=list)

    @property
    def libraries_present(self) -> Set[str]:
        return {c.library for c in self.categories_present if c.is_library}

    @property
    def uses_any_tracked_library(self) -> bool:
        return bool(self.libraries_present)

    @property
    def uses_internal(self) -> bool:
        return INTERNAL in self.categories_present

    @property
    def uses_tracked_library_with_internal(self) -> bool:
        return self.uses_any_tracked_library and self.uses_internal

    def component_counts(self, category: SourceCategory) -> Counter:
        return Counter(u.name for u in self.usages.get(category, []))

    def instance_count(self, category: SourceCategory) -> int:
        return len(self.usages.get(category, []))

    @property
    def native_tag_count(self) -> int:
        return sum(t.count for t in self.native_tags)

    @property
    def total_instances(self) -> int:
        return sum(len(u) for u in self.usages.values()) + self.native_tag_count

    @property
    def customization_count(self) -> int:
        return len(self.inline_styles) + len(self.styled_usages)


@dataclass
class CategoryTally:
    """Per-component instance counts for one category."""
    components: Counter = field(default_factory=Counter)
    total_instances: int = 0


@dataclass
class CustomizationTally:
    """Per-component customization counts and the properties they touch."""
    components: Counter = field(default_factory=Counter)
    # Map: component -> property -> count
    properties_by_component: Dict[str, Counter] = field(default_factory=dict)
    properties: Counter = field(default_factory=Counter)
    total: int = 0


@dataclass
class ComponentPropTally:
    """How one tracked component is used: files, instances and props."""
    files_importing: int = 0
    instances: int = 0
    props: Counter = field(default_factory=Counter)
    # Map: prop -> normalized value -> count
    prop_values: Dict[str, Counter] = field(default_factory=dict)
    # (path, line) of every instance, sorted
    references: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def avg_props_per_instance(self) -> float:
        return sum(self.props.values()) / self.instances if self.instances else 0.0


@dataclass
class AggregateResult:
    """Reduction of many FileAnalysisResults."""
    libraries: Dict[str, CategoryTally] = field(default_factory=dict)
    other_ui: CategoryTally = field(default_factory=CategoryTally)
    internal: CategoryTally = field(default_factory=CategoryTally)
    native_html: CategoryTally = field(default_factory=CategoryTally)
    jsx_counts: Counter = field(default_factory=Counter)
    file_count: int = 0
    files_with_html: int = 0
    # Internal adoption: files importing internal code, and of those, files using a library
    files_with_internal: int = 0
    files_with_internal_using_library: Counter = field(default_factory=Counter)
    files_with_internal_using_any_library: int = 0
    total_internal_instances: int = 0
    internal_instances_using_library: int = 0
    files_with_customizations: int = 0
    inline_styles: CustomizationTally = field(default_factory=CustomizationTally)
    styled_usages: CustomizationTally = field(default_factory=CustomizationTally)
    # Map: library -> exported component name -> prop usage
    component_props: Dict[str, Dict[str, ComponentPropTally]] = field(default_factory=dict)

    def library(self, name: str) -> CategoryTally:
        return self.libraries.get(name, CategoryTally())

    def merge(self, other: 'AggregateResult') -> 'AggregateResult':
        """New aggregate combining self and other. AggregateResult() is the identity."""
        from .analysis.aggregate import merge
        return merge(self, other)

    @property
    def tracked(self) -> CategoryTally:
        """All tracked libraries combined, re-derived on every access."""
        combined = CategoryTally()
        for tally in self.libraries.values():
            combined.components.update(tally.components)
            combined.total_instances += tally.total_instances
        return combined

    @property
    def total(self) -> CategoryTally:
        combined = self.tracked
        for tally in (self.other_ui, self.internal, self.native_html):
            combined.components.update(tally.components)
            combined.total_instances += tally.total_instances
        return combined
