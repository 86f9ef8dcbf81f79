"""저장소 조회 관련 예외."""

from bins.application.common.exceptions.base import ApplicationError


class QueryFailedError(ApplicationError):
    """저장소 통신/쿼리 실패.

    결과 없음(빈 리스트)과 구분되어야 하므로 절대 빈 결과로 대체하지 않습니다.
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Database query failed during {operation}: {reason}")


class NearbyProcedureUnavailableError(ApplicationError):
    """저장소에 find_nearby 프로시저가 없음."""

    def __init__(self, procedure: str) -> None:
        self.procedure = procedure
        super().__init__(f"Stored procedure '{procedure}' is not available")
