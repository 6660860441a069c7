"""
Aggregator.
Folds per-file results into per-codebase and cross-codebase totals.
The fold is associative and commutative, so file order never matters.
"""

from collections import Counter
from functools import reduce
from typing import Dict, Iterable, List

from ..models import (
    INTERNAL,
    OTHER_UI,
    AggregateResult,
    CategoryTally,
    ComponentPropTally,
    CustomizationTally,
    FileAnalysisResult,
)


def _merge_tallies(a: CategoryTally, b: CategoryTally) -> CategoryTally:
    return CategoryTally(
        components=a.components + b.components,
        total_instances=a.total_instances + b.total_instances,
    )


def _merge_customizations(a: CustomizationTally, b: CustomizationTally) -> CustomizationTally:
    by_component = {name: Counter(props) for name, props in a.properties_by_component.items()}
    for name, props in b.properties_by_component.items():
        by_component[name] = by_component.get(name, Counter()) + props
    return CustomizationTally(
        components=a.components + b.components,
        properties_by_component=by_component,
        properties=a.properties + b.properties,
        total=a.total + b.total,
    )


def _merge_prop_tallies(a: ComponentPropTally, b: ComponentPropTally) -> ComponentPropTally:
    prop_values = {name: Counter(values) for name, values in a.prop_values.items()}
    for name, values in b.prop_values.items():
        prop_values[name] = prop_values.get(name, Counter()) + values
    return ComponentPropTally(
        files_importing=a.files_importing + b.files_importing,
        instances=a.instances + b.instances,
        props=a.props + b.props,
        prop_values=prop_values,
        references=sorted(a.references + b.references),
    )


def _merge_component_props(
    a: Dict[str, Dict[str, ComponentPropTally]],
    b: Dict[str, Dict[str, ComponentPropTally]]
) -> Dict[str, Dict[str, ComponentPropTally]]:
    merged = {}
    for library in set(a) | set(b):
        left = a.get(library, {})
        right = b.get(library, {})
        merged[library] = {
            name: _merge_prop_tallies(left.get(name, ComponentPropTally()), right.get(name, ComponentPropTally()))
            for name in set(left) | set(right)
        }
    return merged


def merge(a: AggregateResult, b: AggregateResult) -> AggregateResult:
    """Combine two aggregates into a new one. Neither input is modified."""
    libraries = {}
    for name in set(a.libraries) | set(b.libraries):
        libraries[name] = _merge_tallies(a.library(name), b.library(name))

    return AggregateResult(
        libraries=libraries,
        other_ui=_merge_tallies(a.other_ui, b.other_ui),
        internal=_merge_tallies(a.internal, b.internal),
        native_html=_merge_tallies(a.native_html, b.native_html),
        jsx_counts=a.jsx_counts + b.jsx_counts,
        file_count=a.file_count + b.file_count,
        files_with_html=a.files_with_html + b.files_with_html,
        files_with_internal=a.files_with_internal + b.files_with_internal,
        files_with_internal_using_library=(
            a.files_with_internal_using_library + b.files_with_internal_using_library
        ),
        files_with_internal_using_any_library=(
            a.files_with_internal_using_any_library + b.files_with_internal_using_any_library
        ),
        total_internal_instances=a.total_internal_instances + b.total_internal_instances,
        internal_instances_using_library=(
            a.internal_instances_using_library + b.internal_instances_using_library
        ),
        files_with_customizations=a.files_with_customizations + b.files_with_customizations,
        inline_styles=_merge_customizations(a.inline_styles, b.inline_styles),
        styled_usages=_merge_customizations(a.styled_usages, b.styled_usages),
        component_props=_merge_component_props(a.component_props, b.component_props),
    )


def _tally_customizations(records: List) -> CustomizationTally:
    tally = CustomizationTally()
    for record in records:
        tally.components[record.component] += 1
        tally.properties_by_component.setdefault(record.component, Counter()).update(record.properties)
        tally.properties.update(record.properties)
        tally.total += 1
    return tally


def _tally_component_props(result: FileAnalysisResult) -> Dict[str, Dict[str, ComponentPropTally]]:
    tallies: Dict[str, Dict[str, ComponentPropTally]] = {}

    def tally_for(library: str, component: str) -> ComponentPropTally:
        return tallies.setdefault(library, {}).setdefault(component, ComponentPropTally())

    for library, component in result.tracked_imports:
        tally_for(library, component).files_importing += 1

    for instance in result.component_instances:
        tally = tally_for(instance.library, instance.component)
        tally.instances += 1
        tally.references.append((result.path, instance.line))
        for name, value in instance.props:
            tally.props[name] += 1
            tally.prop_values.setdefault(name, Counter())[value] += 1

    for by_component in tallies.values():
        for tally in by_component.values():
            tally.references.sort()
    return tallies


def from_file(result: FileAnalysisResult) -> AggregateResult:
    """Aggregate of a single file."""
    libraries = {}
    for category, usages in result.usages.items():
        if category.is_library and usages:
            tally = libraries.setdefault(category.library, CategoryTally())
            tally.components.update(u.name for u in usages)
            tally.total_instances += len(usages)

    def tally_of(category) -> CategoryTally:
        usages = result.usages.get(category, [])
        return CategoryTally(Counter(u.name for u in usages), len(usages))

    html = Counter({t.tag: t.count for t in result.native_tags})
    internal_count = result.instance_count(INTERNAL)

    # Adoption counters go up once per file, not per usage
    uses_internal = result.uses_internal
    adopting = uses_internal and result.uses_any_tracked_library

    return AggregateResult(
        libraries=libraries,
        other_ui=tally_of(OTHER_UI),
        internal=tally_of(INTERNAL),
        native_html=CategoryTally(html, sum(html.values())),
        jsx_counts=Counter({k: v for k, v in result.jsx_counts.items() if v > 0}),
        file_count=1,
        files_with_html=1 if html else 0,
        files_with_internal=1 if uses_internal else 0,
        files_with_internal_using_library=(
            Counter(result.libraries_present) if uses_internal else Counter()
        ),
        files_with_internal_using_any_library=1 if adopting else 0,
        total_internal_instances=internal_count if uses_internal else 0,
        internal_instances_using_library=internal_count if adopting else 0,
        files_with_customizations=1 if result.customization_count else 0,
        inline_styles=_tally_customizations(result.inline_styles),
        styled_usages=_tally_customizations(result.styled_usages),
        component_props=_tally_component_props(result),
    )


def aggregate(results: Iterable[FileAnalysisResult]) -> AggregateResult:
    """Reduce file results to one aggregate. Order-independent."""
    return reduce(merge, (from_file(r) for r in results), AggregateResult())


def aggregate_codebases(per_codebase: Dict[str, AggregateResult]) -> AggregateResult:
    """Cross-codebase aggregate."""
    return reduce(merge, per_codebase.values(), AggregateResult())
