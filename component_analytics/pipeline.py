"""
Per-file analysis pipeline and the per-codebase loop.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional

from .analysis import (
    aggregate,
    build_import_map,
    build_tracked_exports,
    count_jsx_instances,
    count_prop_references,
    count_usages,
    extract_component_instances,
    extract_html_tags,
    extract_inline_styles,
    extract_styled_usages,
    native_tag_usages,
    sanitize_literals,
    strip_import_statements,
)
from .models import AggregateResult, FileAnalysisResult, ResolvedConfig
from .scanner import find_files, read_content


# Any callable with analyze_file's contract can replace it (e.g. an AST-based one)
FileAnalyzer = Callable[[str, ResolvedConfig], FileAnalysisResult]


def analyze_file(content: str, config: ResolvedConfig, path: str = '') -> FileAnalysisResult:
    """Analyze one file's text. Pure, and never raises for any string."""
    cleaned = sanitize_literals(content)

    component_to_category, categories_present = build_import_map(cleaned, config)
    jsx_counts = count_jsx_instances(cleaned)
    html_tags = extract_html_tags(cleaned, config.known_tags)

    prop_counts = count_prop_references(strip_import_statements(cleaned), component_to_category)
    usages = count_usages(jsx_counts, prop_counts, component_to_category)

    # Customizations need literal bodies, so they scan the raw text
    tracked = {
        name: category.library
        for name, category in component_to_category.items()
        if category.is_library
    }

    exports = build_tracked_exports(cleaned, config)

    return FileAnalysisResult(
        path=path,
        usages=usages,
        native_tags=native_tag_usages(html_tags),
        jsx_counts=jsx_counts,
        inline_styles=extract_inline_styles(content, tracked),
        styled_usages=extract_styled_usages(content, tracked),
        categories_present=categories_present,
        tracked_imports=set(exports.values()),
        component_instances=extract_component_instances(content, cleaned, exports),
    )


def analyze_files(
    root: Path,
    files: List[Path],
    config: ResolvedConfig,
    analyzer: FileAnalyzer = analyze_file,
    jobs: int = 1,
    log: Callable[[str], None] = lambda x: None
) -> List[FileAnalysisResult]:
    """Analyze files, skipping unreadable ones."""

    def run(path: Path) -> Optional[FileAnalysisResult]:
        content = read_content(path, log)
        if content is None:
            return None
        try:
            result = analyzer(content, config)
        except Exception as e:
            log(f"Skipped: {path} (analysis failed, {e.__class__.__name__}: {e})")
            return None
        result.path = path.relative_to(root).as_posix()
        log(f"Analyzed: {result.path}")
        return result

    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            results = list(executor.map(run, files))
    else:
        results = [run(path) for path in files]

    return [r for r in results if r is not None]


def analyze_codebase(
    root: Path,
    config: ResolvedConfig,
    analyzer: FileAnalyzer = analyze_file,
    jobs: int = 1,
    log: Callable[[str], None] = lambda x: None
) -> Optional[AggregateResult]:
    """Analyze every component file under root. None if root doesn't exist."""
    if not root.is_dir():
        return None

    files = find_files(root, config.extensions, config.ignore_patterns, log)
    return aggregate(analyze_files(root, files, config, analyzer, jobs, log))
