"""Translation loading interface and implementations.

Two on-disk layouts are supported under the configured ``lang_path``:

- groups: ``<lang_path>/<locale>/<group>.yml`` - one nested mapping per group
- json:   ``<lang_path>/<locale>.json`` - one flat mapping per locale

Missing or malformed files never raise; they load as an empty mapping.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from lingua.logging import get_module_logger

logger = get_module_logger()


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` on top of ``base``.

    Values from ``override`` win; nested mappings present on both sides are
    merged key by key. Neither input is modified.
    """
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _is_safe_name(name: str) -> bool:
    return bool(name) and not name.startswith(".") and Path(name).name == name


class TranslationLoader(ABC):
    """Abstract base for group-based translation loaders."""

    @abstractmethod
    def groups(self, locale: str) -> list[str]:
        """List group names available for a locale, sorted."""
        pass

    @abstractmethod
    def load_group(self, locale: str, group: str) -> Dict[str, Any]:
        """Load one group for a locale; empty mapping when unavailable."""
        pass

    def load_all(self, locale: str) -> Dict[str, Dict[str, Any]]:
        """Load every non-empty group for a locale."""
        result = {}
        for group in self.groups(locale):
            translations = self.load_group(locale, group)
            if translations:
                result[group] = translations
        return result


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML group files.

    Expects ``<translations_dir>/<locale>/<group>.yml`` (or ``.yaml``).

    Attributes:
        translations_dir: Root directory holding one sub-directory per locale.
    """

    EXTENSIONS = (".yml", ".yaml")

    def __init__(self, translations_dir: Path):
        self.translations_dir = Path(translations_dir)

    def locale_dir(self, locale: str) -> Path:
        return self.translations_dir / locale

    def groups(self, locale: str) -> list[str]:
        if not _is_safe_name(locale):
            return []

        directory = self.locale_dir(locale)
        if not directory.is_dir():
            return []

        return sorted(
            {
                path.stem
                for path in directory.iterdir()
                if path.is_file() and path.suffix in self.EXTENSIONS
            }
        )

    def load_group(self, locale: str, group: str) -> Dict[str, Any]:
        if not (_is_safe_name(locale) and _is_safe_name(group)):
            return {}

        for extension in self.EXTENSIONS:
            path = self.locale_dir(locale) / f"{group}{extension}"
            if path.is_file():
                return self._read(path, locale=locale, group=group)

        return {}

    def _read(self, path: Path, locale: str, group: str) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("translation_group_unreadable", file=str(path), error=str(e))
            return {}

        if not isinstance(data, dict):
            if data is not None:
                logger.warning(
                    "invalid_translation_group_format",
                    file=str(path),
                    expected="mapping",
                )
            return {}

        logger.debug(
            "translation_group_loaded",
            locale=locale,
            group=group,
            key_count=len(data),
        )
        return data


class JSONTranslationLoader:
    """Loader for single-file JSON translations (``<dir>/<locale>.json``)."""

    def __init__(self, translations_dir: Path):
        self.translations_dir = Path(translations_dir)

    def load(self, locale: str) -> Dict[str, Any]:
        if not _is_safe_name(locale):
            return {}

        path = self.translations_dir / f"{locale}.json"
        if not path.is_file():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("json_translations_unreadable", file=str(path), error=str(e))
            return {}

        if not isinstance(data, dict):
            logger.warning("invalid_json_translations_format", file=str(path), expected="object")
            return {}

        logger.debug("json_translations_loaded", locale=locale, key_count=len(data))
        return data
