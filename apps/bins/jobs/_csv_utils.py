from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Iterable

BOM = "\ufeff"


def _build_candidates(base_dir: Path, filename: str) -> list[Path]:
    """검색할 파일 경로 후보 목록 생성."""
    candidates = []
    for root in (base_dir, base_dir / "data", base_dir / "data" / "csv"):
        candidates.append(root / filename)
        candidates.append(root / unicodedata.normalize("NFD", filename))
    return candidates


def resolve_csv_path(base_dir: Path, filename: str) -> Path:
    """Locate a CSV file under base_dir, data/ or data/csv/."""
    for candidate in _build_candidates(base_dir, filename):
        if candidate.exists():
            return candidate
    raise FileNotFoundError(
        f"CSV file '{filename}' not found under {base_dir} (or its data/ subdirectories)."
    )


def strip_bom(value: str) -> str:
    return value[1:] if value.startswith(BOM) else value


def clean_row(row: dict[str, str | None]) -> dict[str, str | None]:
    """헤더의 BOM과 공백을 제거합니다."""
    return {strip_bom(key).strip(): value for key, value in row.items() if key is not None}


def clean_str(value: str | None) -> str:
    return (value or "").strip()


def clean_optional_str(value: str | None) -> str | None:
    return clean_str(value) or None


def clean_float(value: str | None) -> float | None:
    """소수점 쉼표(40,4168)도 허용합니다."""
    text = clean_str(value).replace(",", ".")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def clean_int(value: str | None) -> int | None:
    text = clean_str(value)
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def normalize_name(value: str | None) -> str:
    """대소문자/악센트/공백 차이를 무시한 비교 키."""
    decomposed = unicodedata.normalize("NFD", clean_str(value).upper())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.split())


def first_present(row: dict[str, str | None], keys: Iterable[str]) -> str | None:
    for key in keys:
        value = row.get(key)
        if value is not None and value.strip():
            return value
    return None
