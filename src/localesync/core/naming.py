"""Locale-aware filename parsing and output name derivation.

Two naming conventions are recognized for base-language files:

    greeting.en.txt   dotted form, locale is the last dot-segment of the stem
    en.txt            bare form, the whole stem is the base locale

Translations derived from them are ``greeting.fr.txt`` and ``fr.txt``.
"""

from __future__ import annotations

from pathlib import Path

from localesync.core.records import FileRecord, TranslationJob


def split_extension(name: str) -> tuple[str, str]:
    """Split a filename at its final dot into (raw_stem, ext).

    The extension keeps its leading dot. A name without a dot has no
    extension; a name whose only dot is the first character is all extension.
    """
    idx = name.rfind(".")
    if idx < 0:
        return name, ""
    return name[:idx], name[idx:]


def parse_filename(name: str, base_locale: str) -> tuple[str, str | None, str]:
    """Classify a filename relative to the base locale.

    Returns:
        Tuple of (stem, locale, ext). ``locale`` equals ``base_locale`` for a
        base-language file and is None for anything else.
    """
    raw_stem, ext = split_extension(name)

    suffix = "." + base_locale
    if raw_stem.endswith(suffix):
        return raw_stem[: -len(suffix)], base_locale, ext

    # Bare form: the file is literally named after the base locale
    if (
        raw_stem.lower() == base_locale.lower()
        or name.lower() == (base_locale + ext).lower()
    ):
        return base_locale, base_locale, ext

    return raw_stem, None, ext


def parse(path: str | Path, base_locale: str, *, is_symlink: bool = False) -> FileRecord:
    """Parse a path into a FileRecord."""
    path = Path(path).absolute()
    stem, locale, ext = parse_filename(path.name, base_locale)
    return FileRecord(path=path, stem=stem, ext=ext, locale=locale, is_symlink=is_symlink)


def is_base_file(stem: str, ext: str, base_locale: str) -> bool:
    """Return True if ``stem + ext`` names a base-language file.

    ``stem`` is the raw filename without its extension.
    """
    _, locale, _ = parse_filename(stem + ext, base_locale)
    return locale is not None


def derive_output_name(stem: str, target_locale: str, ext: str, base_locale: str) -> str:
    """Filename of the ``target_locale`` translation of a base file."""
    if stem == base_locale:
        return f"{target_locale}{ext}"
    return f"{stem}.{target_locale}{ext}"


def translation_job(source: FileRecord, target_locale: str, base_locale: str) -> TranslationJob:
    """Pair a base file with a target locale and its derived output name."""
    return TranslationJob(
        source=source,
        target=target_locale,
        base=base_locale,
        output_name=derive_output_name(source.stem, target_locale, source.ext, base_locale),
    )
