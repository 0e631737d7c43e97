"""Data structures for locale sets, discovered files and translation jobs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

# (event, path, detail): event is one of "removed", "written", "skipped", "error"
ProgressCallback = Callable[[str, Path, str], None]


@dataclass(frozen=True)
class LocaleSet:
    """Base locale plus the ordered list of locales to translate into."""

    base: str
    targets: tuple[str, ...] = ()

    @classmethod
    def from_list(cls, base: str, targets: Iterable[str]) -> LocaleSet:
        """Build a LocaleSet, trimming entries and dropping blanks and duplicates."""
        seen: list[str] = []
        for t in targets:
            t = t.strip()
            if t and t not in seen:
                seen.append(t)
        return cls(base=base.strip(), targets=tuple(seen))

    def translation_targets(self) -> list[str]:
        """Targets that need a translated file (the base locale is skipped)."""
        return [t for t in self.targets if t != self.base]


@dataclass(frozen=True)
class FileRecord:
    """A file found while walking a root.

    Attributes:
        path: Absolute path of the file.
        stem: Filename without extension; for base files the ``.<base>``
            suffix is stripped, and a bare base file (``en.txt``) has the
            base locale as its stem.
        ext: Extension including the leading dot, or "" when there is none.
        locale: The base locale when the name marks a base-language file,
            otherwise None (already translated or foreign).
        is_symlink: The entry is a symbolic link to a file.
    """

    path: Path
    stem: str
    ext: str
    locale: str | None = None
    is_symlink: bool = False

    @property
    def is_base(self) -> bool:
        return self.locale is not None

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class TranslationJob:
    """One (base file, target locale) pair. Produces exactly one output file.

    Build jobs with ``naming.translation_job`` so ``output_name`` follows the
    naming rules.
    """

    source: FileRecord
    target: str
    base: str
    output_name: str

    @property
    def output_path(self) -> Path:
        return self.source.path.parent / self.output_name
