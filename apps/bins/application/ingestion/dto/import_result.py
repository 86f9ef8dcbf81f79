"""Import Result DTO."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BatchError:
    """실패한 묶음 정보 (1부터 시작하는 묶음 번호)."""

    batch: int
    size: int
    error: str


@dataclass
class ImportResult:
    """적재 결과."""

    inserted: int = 0
    errors: list[BatchError] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return sum(e.size for e in self.errors)
