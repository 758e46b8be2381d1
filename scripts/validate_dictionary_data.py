"""Validate normalization dictionary consistency.

Checks:
1. Alias keys reference existing term keys in the same domain.
2. Duplicate alias entries (domain + normalized alias) are not present.
3. Regex aliases compile.
"""

from __future__ import annotations

import re
import runpy
import unicodedata
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
DATA_ROOT = ROOT / "src" / "brew_codec" / "normalization" / "data"


class DictionaryCheckError(Exception):
    pass


def normalize_text(value: str) -> str:
    text = unicodedata.normalize("NFKC", value).lower().strip()
    text = text.replace("_", " ").replace("-", " ")
    text = re.sub(r"[^\w\s]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def load_python_constant(path: Path, key: str) -> list[dict]:
    namespace = runpy.run_path(str(path))
    if key not in namespace or not isinstance(namespace[key], list):
        raise DictionaryCheckError(f"Missing or invalid constant '{key}' in {path}")
    return namespace[key]


def validate_alias_references(terms: list[dict], aliases: list[dict]) -> None:
    valid_keys = {(item["domain"], item["key"]) for item in terms}
    for alias in aliases:
        ref = (alias.get("domain"), alias.get("key"))
        if ref not in valid_keys:
            raise DictionaryCheckError(f"Alias references unknown term key: {ref}")


def validate_duplicate_aliases(aliases: list[dict]) -> None:
    seen: dict[tuple[str, str, str], str] = {}
    for alias in aliases:
        domain = alias.get("domain")
        raw = alias.get("alias")
        key = alias.get("key")
        if not isinstance(domain, str) or not isinstance(raw, str):
            raise DictionaryCheckError(f"Invalid alias entry: {alias}")
        if not isinstance(key, str):
            raise DictionaryCheckError(f"Invalid alias key: {alias}")

        signature = (domain, alias.get("match_type", "exact"), normalize_text(raw))
        if signature in seen and seen[signature] != key:
            raise DictionaryCheckError(
                f"Conflicting alias detected for domain/text {signature}: "
                f"{seen[signature]} vs {key}"
            )
        seen[signature] = key


def validate_regex_aliases(aliases: list[dict]) -> None:
    for alias in aliases:
        if alias.get("match_type") != "regex":
            continue
        try:
            re.compile(alias["alias"])
        except re.error as exc:
            raise DictionaryCheckError(f"Invalid regex alias {alias['alias']!r}: {exc}") from exc


def iter_dictionary_versions(data_root: Path = DATA_ROOT) -> list[Path]:
    versions: list[Path] = []
    for path in sorted(data_root.iterdir()):
        if not path.is_dir():
            continue
        if all((path / name).exists() for name in ("terms.py", "aliases.py")):
            versions.append(path)
    if not versions:
        raise DictionaryCheckError(f"No dictionary versions found under {data_root}")
    return versions


def validate_version(version_dir: Path) -> None:
    terms = load_python_constant(version_dir / "terms.py", "TERMS")
    aliases = load_python_constant(version_dir / "aliases.py", "ALIASES")
    validate_alias_references(terms, aliases)
    validate_duplicate_aliases(aliases)
    validate_regex_aliases(aliases)


def main(data_root: Path = DATA_ROOT) -> int:
    try:
        for version_dir in iter_dictionary_versions(data_root):
            validate_version(version_dir)
    except DictionaryCheckError as exc:
        print(f"[dictionary-check] ERROR: {exc}")
        return 1

    print("[dictionary-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
