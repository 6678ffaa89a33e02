"""Loader for external locale pattern files.

A file holds a single culture::

    {"name": "fi-FI", "short_date_pattern": "d.M.yyyy", "short_time_pattern": "H.mm"}

or several under a ``patterns`` key. JSON and YAML are supported.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tagbind.errors import ErrorCode, LocaleFileError, TagBindError
from tagbind.locale.patterns import register_locale_pattern
from tagbind.types import LocalePattern

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("short_date_pattern", "short_time_pattern")


class LocalePatternLoader:
    """Loader for external locale pattern files.

    Example:
        loader = LocalePatternLoader()

        # Load single file
        loader.load_file(Path("locales/fi-FI.json"))

        # Load directory of pattern files
        loader.load_directory(Path("locales/"))
    """

    def __init__(self, auto_register: bool = True) -> None:
        """Initialize loader.

        Args:
            auto_register: Register loaded patterns in the global registry.
        """
        self._auto_register = auto_register
        self._patterns: dict[str, LocalePattern] = {}

    def load_file(self, path: Path) -> list[LocalePattern]:
        """Load a locale pattern file.

        Args:
            path: Path to a JSON or YAML file.

        Returns:
            Loaded patterns.

        Raises:
            LocaleFileError: If the file is missing, unsupported or malformed.
        """
        if not path.exists():
            raise LocaleFileError(
                f"Locale file not found: {path}",
                path,
                code=ErrorCode.LOCALE_FILE_NOT_FOUND,
            )

        suffix = path.suffix.lower()
        if suffix == ".json":
            data = self._load_json(path)
        elif suffix in (".yaml", ".yml"):
            data = self._load_yaml(path)
        else:
            raise LocaleFileError(f"Unsupported locale file format: {suffix}", path)

        patterns = self._parse_pattern_data(data, path)
        for pattern in patterns:
            self._patterns[pattern.name] = pattern
            if self._auto_register:
                register_locale_pattern(pattern)

        return patterns

    def load_directory(
        self,
        directory: Path,
        pattern: str = "*.json",
    ) -> dict[str, LocalePattern]:
        """Load all pattern files from a directory.

        Invalid files are skipped with a warning.

        Args:
            directory: Directory containing pattern files.
            pattern: Glob pattern for files.

        Returns:
            Dictionary of culture name to pattern.
        """
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        loaded: dict[str, LocalePattern] = {}
        for file_path in sorted(directory.glob(pattern)):
            try:
                for item in self.load_file(file_path):
                    loaded[item.name] = item
            except TagBindError as e:
                logger.warning("Skipping locale file %s: %s", file_path, e.message)

        return loaded

    def _load_json(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise LocaleFileError(f"Invalid JSON in {path.name}: {e}", path) from e
        except UnicodeDecodeError as e:
            raise LocaleFileError(f"{path.name} is not valid UTF-8: {e}", path) from e
        except OSError as e:
            raise LocaleFileError(f"Cannot read {path.name}: {e}", path) from e

    def _load_yaml(self, path: Path) -> Any:
        try:
            import yaml
        except ImportError:
            raise ImportError(
                "PyYAML is required for YAML locale files. "
                "Install with: pip install pyyaml"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LocaleFileError(f"Invalid YAML in {path.name}: {e}", path) from e
        except OSError as e:
            raise LocaleFileError(f"Cannot read {path.name}: {e}", path) from e

    def _parse_pattern_data(self, data: Any, path: Path) -> list[LocalePattern]:
        """Parse one culture or a ``patterns`` list.

        A culture without a name takes the file stem (``fi-FI.json``).
        """
        if not isinstance(data, dict):
            raise LocaleFileError(f"Expected a mapping in {path.name}", path)

        entries = data.get("patterns")
        if entries is None:
            entries = [{"name": path.stem, **data}]
        elif not isinstance(entries, list):
            raise LocaleFileError(f"'patterns' must be a list in {path.name}", path)

        return [self._parse_entry(entry, path) for entry in entries]

    def _parse_entry(self, entry: Any, path: Path) -> LocalePattern:
        if not isinstance(entry, dict):
            raise LocaleFileError(f"Pattern entries must be mappings in {path.name}", path)

        missing = [key for key in _REQUIRED_KEYS if not entry.get(key)]
        if missing:
            raise LocaleFileError(
                f"Missing {', '.join(missing)} in {path.name}",
                path,
                hint="Each locale needs short_date_pattern and short_time_pattern.",
            )

        return LocalePattern(
            name=str(entry.get("name") or path.stem),
            short_date_pattern=str(entry["short_date_pattern"]),
            short_time_pattern=str(entry["short_time_pattern"]),
        )

    def get_patterns(self) -> dict[str, LocalePattern]:
        """Get all loaded patterns."""
        return self._patterns.copy()


def load_locale_from_file(path: Path | str) -> list[LocalePattern]:
    """Load and register the patterns in a file."""
    loader = LocalePatternLoader(auto_register=True)
    return loader.load_file(Path(path))


def load_locale_from_dict(
    name: str,
    short_date_pattern: str,
    short_time_pattern: str,
) -> LocalePattern:
    """Create and register a culture's patterns."""
    pattern = LocalePattern(name, short_date_pattern, short_time_pattern)
    register_locale_pattern(pattern)
    return pattern


def load_locales_from_directory(
    directory: Path | str,
    pattern: str = "*.json",
) -> dict[str, LocalePattern]:
    """Load and register all pattern files in a directory."""
    loader = LocalePatternLoader(auto_register=True)
    return loader.load_directory(Path(directory), pattern)
