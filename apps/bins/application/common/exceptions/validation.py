"""검증 관련 예외."""

from bins.application.common.exceptions.base import ApplicationError


class InvalidBinTypeError(ApplicationError):
    """유효하지 않은 bin_type 값."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid bin_type '{value}'. Allowed values: {allowed}.")


class InvalidLocationTypeError(ApplicationError):
    """유효하지 않은 location_type 값."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid location_type '{value}'. Allowed values: {allowed}.")


class RateLimitExceededError(ApplicationError):
    """요청 한도 초과."""

    def __init__(self, retry_after: int) -> None:
        self.retry_after = retry_after
        super().__init__("Too many requests, please try again later.")
