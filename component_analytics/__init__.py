"""
Component Analytics - UI component library usage measurement.

Scans JS/TS UI codebases and classifies every rendered element:
- Tracked UI library components (one bucket per configured library)
- Other UI library components
- Internal components (relative imports, component directories)
- Native HTML/SVG tags
- Inline style and styled() customizations of tracked components

Usage:
    python -m component_analytics [--config PATH] [--format FORMAT] [--verbose]
"""

from typing import Dict, List, Optional

from .analysis import aggregate, aggregate_codebases
from .loader import ConfigError, load_config
from .models import AggregateResult, FileAnalysisResult, ResolvedConfig
from .pipeline import analyze_codebase, analyze_file
from .report import generate_csv, generate_json, generate_markdown_report, print_summary


class ComponentAnalytics:
    """Main facade for analyzing every configured codebase."""

    def __init__(self, config: ResolvedConfig, verbose: bool = False, jobs: int = 1):
        self.config = config
        self.verbose = verbose
        self.jobs = jobs
        self.results: Dict[str, AggregateResult] = {}

    def log(self, msg: str) -> None:
        """Print if verbose mode."""
        if self.verbose:
            print(f"   {msg}")

    def run(self, only: Optional[List[str]] = None) -> Dict[str, AggregateResult]:
        """Analyze configured codebases. Missing directories are skipped."""
        for entry in self.config.codebases:
            if only and entry.name not in only:
                continue

            if not entry.path.is_dir():
                print(f"⚠️  Skipping {entry.name}: path not found ({entry.path})")
                continue

            print(f"📊 Analyzing {entry.name}...")
            result = analyze_codebase(entry.path, self.config, jobs=self.jobs, log=self.log)
            if result is not None:
                self.results[entry.name] = result
                print(f"   Analyzed {result.file_count} files")

        return self.results

    @property
    def totals(self) -> AggregateResult:
        return aggregate_codebases(self.results)

    def get_report(self, fmt: str = 'markdown') -> str:
        """Render results as markdown, csv or json."""
        generators = {
            'markdown': generate_markdown_report,
            'csv': generate_csv,
            'json': generate_json,
        }
        return generators[fmt](self.results, self.config)

    def print_summary(self) -> None:
        """Print summary to console."""
        print_summary(self.results, self.config)


__all__ = [
    'ComponentAnalytics',
    'ConfigError',
    'AggregateResult',
    'FileAnalysisResult',
    'ResolvedConfig',
    'aggregate',
    'aggregate_codebases',
    'analyze_codebase',
    'analyze_file',
    'load_config',
]
