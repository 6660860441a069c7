#!/usr/bin/env python3
"""
Entry point for component_analytics module.

Usage:
    python -m component_analytics [--config PATH] [--codebase NAME] [--format FORMAT]
                                  [--output FILE] [--jobs N] [--verbose]
"""

import argparse
import sys
from pathlib import Path

from . import ComponentAnalytics
from .loader import ConfigError, load_config


def main():
    parser = argparse.ArgumentParser(description='UI component usage analytics')
    parser.add_argument('--config', type=str, help='Path to component-analytics.yaml')
    parser.add_argument('--codebase', action='append', help='Only analyze this codebase (repeatable)')
    parser.add_argument('--format', choices=['summary', 'markdown', 'csv', 'json'], default='summary',
                        help='Output format (default: summary)')
    parser.add_argument('--output', type=str, help='Output file for report')
    parser.add_argument('--jobs', '-j', type=int, default=1, help='Files analyzed in parallel')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    args = parser.parse_args()

    try:
        config = load_config(Path(args.config).resolve() if args.config else None)
    except ConfigError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if not config.codebases:
        print("❌ No codebases configured")
        sys.exit(1)

    analytics = ComponentAnalytics(config, verbose=args.verbose, jobs=max(1, args.jobs))
    results = analytics.run(only=args.codebase)

    if not results:
        print("❌ No codebases could be analyzed")
        sys.exit(1)

    if args.format == 'summary':
        analytics.print_summary()
    else:
        report = analytics.get_report(args.format)
        if args.output:
            Path(args.output).write_text(report, encoding='utf-8')
            print(f"\n📄 Report written to: {args.output}")
        else:
            print("\n" + report)

    sys.exit(0)


if __name__ == '__main__':
    main()
