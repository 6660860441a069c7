"""
Report generation for component analytics.
Console, markdown, CSV and JSON output.
"""

import csv
import io
import json
from collections import Counter
from datetime import datetime
from typing import Dict, List, Tuple

from .analysis import aggregate_codebases
from .config import tag_category
from .models import AggregateResult, CategoryTally, ComponentPropTally, CustomizationTally, ResolvedConfig


TOP_N = 20
CROSS_CODEBASE_TOP_N = 30


def pct(numerator: int, denominator: int) -> str:
    """Percentage with one decimal, '0.0' for a zero denominator."""
    if denominator == 0:
        return '0.0'
    return f"{numerator / denominator * 100:.1f}"


def top_n(counts: Counter, n: int = TOP_N) -> List[Tuple[str, int]]:
    """Highest counts first, ties by name."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:n]


def _library_names(results: Dict[str, AggregateResult], config: ResolvedConfig) -> List[str]:
    names = list(config.library_names)
    for data in results.values():
        names.extend(n for n in sorted(data.libraries) if n not in names)
    return names


def cross_codebase_components(results: Dict[str, AggregateResult]) -> List[Tuple[str, int, Dict[str, int]]]:
    """Tracked components across codebases: (name, total, per-codebase counts)."""
    totals: Counter = Counter()
    per_codebase: Dict[str, Dict[str, int]] = {}
    for codebase, data in results.items():
        for name, count in data.tracked.components.items():
            totals[name] += count
            per_codebase.setdefault(name, {})[codebase] = count
    return [(name, total, per_codebase[name]) for name, total in top_n(totals, CROSS_CODEBASE_TOP_N)]


def _ranked_table(heading: str, counts: Counter, column: str = 'Component') -> List[str]:
    lines = [f"### {heading}", ""]
    ranked = top_n(counts)
    if not ranked:
        lines.extend(["_None found._", ""])
        return lines
    lines.append(f"| Rank | {column} | Instances |")
    lines.append("|------|------|-----------|")
    for i, (name, count) in enumerate(ranked, 1):
        lines.append(f"| {i} | `{name}` | {count} |")
    lines.append("")
    return lines


def _tag_category_table(native: CategoryTally) -> List[str]:
    by_category: Counter = Counter()
    for tag, count in native.components.items():
        by_category[tag_category(tag)] += count
    if not by_category:
        return []
    lines = ["### HTML Tags by Category", "", "| Category | Instances | % of Tags |", "|----------|-----------|-----------|"]
    for category, count in top_n(by_category):
        lines.append(f"| {category} | {count} | {pct(count, native.total_instances)}% |")
    lines.append("")
    return lines


def _customization_table(heading: str, tally: CustomizationTally) -> List[str]:
    if not tally.total:
        return []
    lines = [f"### {heading}", "", "| Component | Count | Top Properties |", "|-----------|-------|----------------|"]
    for name, count in top_n(tally.components):
        props = tally.properties_by_component.get(name, Counter())
        top_props = ', '.join(f"{p}({c})" for p, c in top_n(props, 5))
        lines.append(f"| `{name}` | {count} | {top_props} |")
    lines.append("")
    return lines


def _component_rows(data: AggregateResult) -> List[Tuple[str, str, ComponentPropTally]]:
    """(library, component, tally) rows, most instances first."""
    rows = [
        (library, name, tally)
        for library, by_component in data.component_props.items()
        for name, tally in by_component.items()
    ]
    return sorted(rows, key=lambda row: (-row[2].instances, row[1], row[0]))


def _component_props_table(data: AggregateResult) -> List[str]:
    rows = _component_rows(data)
    if not rows:
        return []
    lines = [
        "### Props by Tracked Component",
        "",
        "| Component | Library | Files | Instances | Avg Props | Top Props |",
        "|-----------|---------|-------|-----------|-----------|-----------|",
    ]
    for library, name, tally in rows[:TOP_N]:
        top_props = ', '.join(f"{p}({c})" for p, c in top_n(tally.props, 5))
        lines.append(
            f"| `{name}` | {library} | {tally.files_importing} | {tally.instances} "
            f"| {tally.avg_props_per_instance:.2f} | {top_props} |"
        )
    lines.append("")
    return lines


def generate_markdown_report(results: Dict[str, AggregateResult], config: ResolvedConfig) -> str:
    """Generate markdown report."""
    libraries = _library_names(results, config)
    totals = aggregate_codebases(results)

    lines = [
        "# Component Analytics Report",
        "",
        f"**Codebases:** {len(results)}",
        f"**Files analyzed:** {totals.file_count}",
        "",
        "All numbers are JSX element instances, not import counts. "
        "Native HTML tag instances count against tracked library adoption.",
        "",
        "## Component Sources",
        "",
    ]

    header = ['Codebase', 'Files'] + libraries + ['Other UI', 'Internal', 'HTML Tags', 'Total', '% Tracked']
    lines.append('| ' + ' | '.join(header) + ' |')
    lines.append('|' + '|'.join('---' for _ in header) + '|')
    for codebase, data in list(results.items()) + [('**TOTAL**', totals)]:
        total = data.total.total_instances
        row = [codebase, str(data.file_count)]
        row += [str(data.library(name).total_instances) for name in libraries]
        row += [
            str(data.other_ui.total_instances),
            str(data.internal.total_instances),
            str(data.native_html.total_instances),
            str(total),
            f"{pct(data.tracked.total_instances, total)}%",
        ]
        lines.append('| ' + ' | '.join(row) + ' |')
    lines.append("")

    lines.extend(["## Internal Component Adoption", ""])
    header = ['Codebase', 'Files w/ Internal'] + [f"Using {name}" for name in libraries] + ['Using Any', '% Using Any']
    lines.append('| ' + ' | '.join(header) + ' |')
    lines.append('|' + '|'.join('---' for _ in header) + '|')
    for codebase, data in list(results.items()) + [('**TOTAL**', totals)]:
        row = [codebase, str(data.files_with_internal)]
        row += [str(data.files_with_internal_using_library[name]) for name in libraries]
        row += [
            str(data.files_with_internal_using_any_library),
            f"{pct(data.files_with_internal_using_any_library, data.files_with_internal)}%",
        ]
        lines.append('| ' + ' | '.join(row) + ' |')
    lines.append("")

    for codebase, data in results.items():
        lines.extend([f"## {codebase}", ""])
        for name in libraries:
            lines.extend(_ranked_table(f"Top {TOP_N} {name} Components", data.library(name).components))
        lines.extend(_ranked_table(f"Top {TOP_N} Other UI Components", data.other_ui.components))
        lines.extend(_ranked_table(f"Top {TOP_N} Internal Components", data.internal.components))
        lines.extend(_ranked_table(f"Top {TOP_N} Native HTML/SVG Tags", data.native_html.components, 'Tag'))
        lines.extend(_tag_category_table(data.native_html))
        lines.extend(_customization_table("Inline Styles by Component", data.inline_styles))
        lines.extend(_customization_table("styled() Wrappers by Component", data.styled_usages))
        lines.extend(_component_props_table(data))

    cross = cross_codebase_components(results)
    if cross:
        codebases = list(results)
        lines.extend(["## Most Used Tracked Components (All Codebases)", ""])
        header = ['Rank', 'Component', 'Total'] + codebases
        lines.append('| ' + ' | '.join(header) + ' |')
        lines.append('|' + '|'.join('---' for _ in header) + '|')
        for i, (name, total, per_codebase) in enumerate(cross, 1):
            row = [str(i), f"`{name}`", str(total)] + [str(per_codebase.get(cb, 0)) for cb in codebases]
            lines.append('| ' + ' | '.join(row) + ' |')
        lines.append("")

    return '\n'.join(lines)


def generate_csv(results: Dict[str, AggregateResult], config: ResolvedConfig) -> str:
    """One row per codebase, category and component."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(['Codebase', 'Category', 'Component', 'Instances'])

    for codebase, data in results.items():
        categories = [(name, data.library(name)) for name in _library_names(results, config)]
        categories += [('Other UI', data.other_ui), ('Internal', data.internal), ('Native HTML', data.native_html)]
        for label, tally in categories:
            for component, count in top_n(tally.components, len(tally.components)):
                writer.writerow([codebase, label, component, count])

    return buffer.getvalue()


def _component_summary(tally: ComponentPropTally) -> dict:
    def values(prop: str) -> dict:
        counts = tally.prop_values.get(prop, Counter())
        return dict(top_n(counts, len(counts)))

    return {
        'files_importing': tally.files_importing,
        'instances': tally.instances,
        'unique_props': len(tally.props),
        'avg_props_per_instance': round(tally.avg_props_per_instance, 2),
        'props': {
            name: {
                'usages': count,
                'values': values(name),
            }
            for name, count in top_n(tally.props, len(tally.props))
        },
        'references': [f"{path}:{line}" for path, line in tally.references],
    }


def _codebase_summary(data: AggregateResult, libraries: List[str]) -> dict:
    def tally(t: CategoryTally) -> dict:
        return {
            'instances': t.total_instances,
            'unique_components': len(t.components),
            'components': dict(top_n(t.components, len(t.components))),
        }

    return {
        'file_count': data.file_count,
        'libraries': {name: tally(data.library(name)) for name in libraries},
        'other_ui': tally(data.other_ui),
        'internal': tally(data.internal),
        'native_html': tally(data.native_html),
        'total_instances': data.total.total_instances,
        'tracked_percent': float(pct(data.tracked.total_instances, data.total.total_instances)),
        'internal_adoption': {
            'files_with_internal': data.files_with_internal,
            'files_using_library': {name: data.files_with_internal_using_library[name] for name in libraries},
            'files_using_any_library': data.files_with_internal_using_any_library,
            'adoption_percent': float(pct(data.files_with_internal_using_any_library, data.files_with_internal)),
        },
        'customizations': {
            'files_with_customizations': data.files_with_customizations,
            'inline_styles': data.inline_styles.total,
            'styled_wrappers': data.styled_usages.total,
        },
        'components': {
            library: {name: _component_summary(t) for name, t in sorted(by_component.items())}
            for library, by_component in sorted(data.component_props.items())
        },
    }


def generate_json(results: Dict[str, AggregateResult], config: ResolvedConfig) -> str:
    """JSON summary of every codebase plus totals."""
    libraries = _library_names(results, config)
    summary = {
        'generated_at': datetime.now().isoformat(timespec='seconds'),
        'codebases': {codebase: _codebase_summary(data, libraries) for codebase, data in results.items()},
        'totals': _codebase_summary(aggregate_codebases(results), libraries),
        'top_tracked_components': [
            {'name': name, 'instances': total, 'codebases': per_codebase}
            for name, total, per_codebase in cross_codebase_components(results)
        ],
    }
    return json.dumps(summary, indent=2)


def print_summary(results: Dict[str, AggregateResult], config: ResolvedConfig) -> None:
    """Print summary to console."""
    if not results:
        print("\n⚠️  No codebases analyzed")
        return

    libraries = _library_names(results, config)
    print()
    for codebase, data in results.items():
        total = data.total.total_instances
        print(f"  📦 {codebase}: {data.file_count} files, {total} instances")
        for name in libraries:
            count = data.library(name).total_instances
            print(f"     {name}: {count} ({pct(count, total)}%)")
        print(f"     Other UI: {data.other_ui.total_instances}  "
              f"Internal: {data.internal.total_instances}  "
              f"HTML: {data.native_html.total_instances}")
        print(f"     Internal adoption: {data.files_with_internal_using_any_library}/"
              f"{data.files_with_internal} files "
              f"({pct(data.files_with_internal_using_any_library, data.files_with_internal)}%)")

    totals = aggregate_codebases(results)
    print(f"\n📊 Summary: {totals.file_count} files, {totals.total.total_instances} instances, "
          f"{pct(totals.tracked.total_instances, totals.total.total_instances)}% tracked")
