"""
Config file loader.
Reads component-analytics.yaml into a ResolvedConfig.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .config import (
    CONFIG_FILENAME,
    CONFIG_SEARCH_DEPTH,
    DEFAULT_EXTENSIONS,
    DEFAULT_OTHER_UI_PATTERNS,
    IGNORE_PATTERNS,
)
from .models import CodebaseEntry, ResolvedConfig, UILibrary


class ConfigError(ValueError):
    """Raised when the configuration file is malformed."""


def find_config_path(start: Optional[Path] = None) -> Optional[Path]:
    """Walk up from start looking for the config file."""
    directory = (start or Path.cwd()).resolve()
    for _ in range(CONFIG_SEARCH_DEPTH):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if directory.parent == directory:
            break
        directory = directory.parent
    return None


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Read the first present key (snake_case or camelCase alias)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _string_list(value: Any, name: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{name}' must be a list of strings")
    return list(value)


def _parse_library(raw: Any) -> UILibrary:
    if not isinstance(raw, dict):
        raise ConfigError("Each ui_libraries entry must be a mapping")
    name = raw.get('name')
    if not isinstance(name, str) or not name:
        raise ConfigError("Each ui_libraries entry needs a 'name'")
    return UILibrary(
        name=name,
        import_sources=_string_list(_get(raw, 'import_sources', 'importSources'), 'import_sources'),
        exclude_sources=_string_list(_get(raw, 'exclude_sources', 'excludeSources'), 'exclude_sources'),
        components=_string_list(raw.get('components'), 'components'),
    )


def _parse_codebase(raw: Any, base_dir: Path) -> CodebaseEntry:
    if not isinstance(raw, dict) or not raw.get('name') or not raw.get('path'):
        raise ConfigError("Each codebases entry needs 'name' and 'path'")
    return CodebaseEntry(
        name=str(raw['name']),
        path=(base_dir / str(raw['path'])).resolve(),
    )


def parse_config(data: Any, base_dir: Path) -> ResolvedConfig:
    """Build a ResolvedConfig from already-loaded YAML data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping")

    libraries = _get(data, 'ui_libraries', 'uiLibraries') or []
    codebases = data.get('codebases') or []
    files = data.get('files') or {}
    if not isinstance(libraries, list):
        raise ConfigError("'ui_libraries' must be a list")
    if not isinstance(codebases, list):
        raise ConfigError("'codebases' must be a list")
    if not isinstance(files, dict):
        raise ConfigError("'files' must be a mapping")

    other_ui = _get(data, 'other_ui_patterns', 'otherUIPatterns')
    if other_ui is None:
        other_ui_patterns = list(DEFAULT_OTHER_UI_PATTERNS)
    else:
        other_ui_patterns = _string_list(other_ui, 'other_ui_patterns')

    extensions = _string_list(files.get('extensions'), 'files.extensions')
    ignore = _string_list(files.get('ignore'), 'files.ignore')

    return ResolvedConfig(
        libraries=[_parse_library(lib) for lib in libraries],
        other_ui_patterns=other_ui_patterns,
        codebases=[_parse_codebase(cb, base_dir) for cb in codebases],
        extensions=tuple(extensions) or DEFAULT_EXTENSIONS,
        ignore_patterns=tuple(ignore) or IGNORE_PATTERNS,
    )


def load_config(path: Optional[Path] = None) -> ResolvedConfig:
    """Load config from path, or discover it. Defaults when nothing is found."""
    config_path = path or find_config_path()
    if config_path is None:
        return parse_config({}, Path.cwd())
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    return parse_config(data, config_path.parent)
