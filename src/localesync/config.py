"""Run configuration, built once at startup and passed to the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from localesync.backends.openai_chat import DEFAULT_MODEL
from localesync.core.records import LocaleSet
from localesync.errors import ConfigurationMissing

# Environment variables for each setting; the first name is the canonical one.
ENV_ROOTS = ["translations_folder", "TRANSLATIONS_FOLDER"]
ENV_BASE_LANG = ["base_language", "BASE_LANGUAGE"]
ENV_TARGET_LANGS = ["target_languages", "TARGET_LANGUAGES"]
ENV_API_KEY = ["openai_api_key", "OPENAI_API_KEY"]
ENV_MODEL = ["openai_model", "OPENAI_MODEL"]
ENV_PRUNE = ["prune_stale", "PRUNE_STALE"]


def split_list(value: str) -> list[str]:
    """Split a comma-separated setting, trimming items and dropping empty ones."""
    return [item.strip() for item in value.split(",") if item.strip()]


def _require(value: str | None, setting: str) -> str:
    if value is None or not value.strip():
        raise ConfigurationMissing(setting)
    return value.strip()


@dataclass(frozen=True)
class SyncConfig:
    """Everything a sync run needs to know."""

    roots: tuple[Path, ...]
    locales: LocaleSet
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    prune: bool = True

    @property
    def base_locale(self) -> str:
        return self.locales.base

    @classmethod
    def from_values(
        cls,
        *,
        roots: str | None,
        base_lang: str | None,
        target_langs: str | None,
        api_key: str | None = None,
        model: str | None = None,
        prune: bool = True,
        require_api_key: bool = True,
    ) -> SyncConfig:
        """Validate raw setting values.

        Raises:
            ConfigurationMissing: Naming the first required setting that is
                absent or blank.
        """
        roots_value = _require(roots, ENV_ROOTS[0])
        base = _require(base_lang, ENV_BASE_LANG[0])
        targets_value = _require(target_langs, ENV_TARGET_LANGS[0])
        if require_api_key:
            api_key = _require(api_key, ENV_API_KEY[0])

        root_list = split_list(roots_value)
        if not root_list:
            raise ConfigurationMissing(ENV_ROOTS[0])
        target_list = split_list(targets_value)
        if not target_list:
            raise ConfigurationMissing(ENV_TARGET_LANGS[0])

        return cls(
            roots=tuple(Path(r) for r in root_list),
            locales=LocaleSet.from_list(base, target_list),
            api_key=api_key,
            model=(model or "").strip() or DEFAULT_MODEL,
            prune=prune,
        )
