"""좌표/영역 도메인 예외."""

from bins.domain.exceptions.base import DomainError


class InvalidCoordinatesError(DomainError, ValueError):
    """위도/경도 범위 위반."""

    def __init__(self, field: str, value: float, lower: float, upper: float) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {value} (expected {lower} <= {field} <= {upper})")


class InvalidBoundingBoxError(DomainError, ValueError):
    """최소값이 최대값보다 큰 bbox."""

    def __init__(self, axis: str, minimum: float, maximum: float) -> None:
        self.axis = axis
        super().__init__(
            f"Invalid bounding box: min_{axis} ({minimum}) is greater than max_{axis} ({maximum})"
        )
