"""FindNearbyBinsQuery 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from bins.application.common.exceptions import (
    NearbyProcedureUnavailableError,
    QueryFailedError,
)
from bins.application.nearby import (
    FindNearbyBinsQuery,
    NearbyPolicyService,
    NearbySearchRequest,
    NearbyStrategy,
    ProcedureAvailability,
)
from bins.domain.enums import BinType
from bins.domain.services import haversine_distance

pytestmark = pytest.mark.asyncio

MADRID_LAT, MADRID_LNG = 40.4168, -3.7038

IN_PROCESS = NearbyPolicyService(strategy=NearbyStrategy.IN_PROCESS)


def _request(**kwargs) -> NearbySearchRequest:
    params = {"bin_type": BinType.GLASS, "latitude": MADRID_LAT, "longitude": MADRID_LNG}
    params.update(kwargs)
    return NearbySearchRequest(**params)


class TestMadridScenarios:
    """Madrid 중심 기준 시나리오."""

    async def test_one_km_returns_only_center(self, fake_reader, center_bin) -> None:
        """1 km 반경이면 중심 레코드만."""
        query = FindNearbyBinsQuery(fake_reader)
        result = await query.execute(_request(radius_km=1, limit=10))
        assert result == [center_bin]

    async def test_fifty_km_returns_both_ordered(self, fake_reader, center_bin, far_bin) -> None:
        """50 km 반경이면 가까운 순서로 둘 다."""
        query = FindNearbyBinsQuery(fake_reader)
        result = await query.execute(_request(radius_km=50, limit=10))
        assert result == [center_bin, far_bin]

    async def test_native_strategy_gives_same_result(self, reader_factory, center_bin, far_bin) -> None:
        """저장소 프로시저 경로도 같은 결과."""
        reader = reader_factory({BinType.GLASS: [far_bin, center_bin]}, native=True)
        query = FindNearbyBinsQuery(reader, NearbyPolicyService(strategy=NearbyStrategy.NATIVE))
        result = await query.execute(_request(radius_km=50, limit=10))
        assert result == [center_bin, far_bin]

    async def test_empty_collection(self, fake_reader) -> None:
        """데이터가 없으면 빈 리스트 (에러 아님)."""
        query = FindNearbyBinsQuery(fake_reader)
        result = await query.execute(_request(bin_type=BinType.OIL, radius_km=50))
        assert result == []

    async def test_different_bin_types_are_isolated(self, fake_reader) -> None:
        query = FindNearbyBinsQuery(fake_reader, IN_PROCESS)
        assert await query.execute(_request(bin_type=BinType.PAPER)) == []


class TestOrderingAndLimit:
    """정렬/개수 제한 테스트."""

    async def test_results_sorted_by_distance(self, reader_factory, bin_factory) -> None:
        records = [
            bin_factory(1, 40.43, -3.70),
            bin_factory(2, 40.4170, -3.7040),
            bin_factory(3, 40.45, -3.68),
            bin_factory(4, 40.42, -3.71),
        ]
        reader = reader_factory({BinType.GLASS: records})
        query = FindNearbyBinsQuery(reader, IN_PROCESS)

        result = await query.execute(_request(radius_km=10, limit=10))

        distances = [haversine_distance(MADRID_LAT, MADRID_LNG, r.lat, r.lng) for r in result]
        assert distances == sorted(distances)
        assert [r.id for r in result] == [2, 4, 1, 3]

    async def test_limit_respected(self, reader_factory, bin_factory) -> None:
        records = [bin_factory(i, MADRID_LAT + i * 0.001, MADRID_LNG) for i in range(1, 21)]
        reader = reader_factory({BinType.GLASS: records})
        query = FindNearbyBinsQuery(reader, IN_PROCESS)

        result = await query.execute(_request(radius_km=10, limit=5))

        assert [r.id for r in result] == [1, 2, 3, 4, 5]

    async def test_radius_containment(self, reader_factory, bin_factory) -> None:
        """bbox 모서리(반경 밖) 후보는 제외."""
        inside = bin_factory(1, MADRID_LAT + 0.001, MADRID_LNG)
        corner = bin_factory(2, MADRID_LAT + 0.0085, MADRID_LNG + 0.0115)
        reader = reader_factory({BinType.GLASS: [corner, inside]})
        query = FindNearbyBinsQuery(reader, IN_PROCESS)

        result = await query.execute(_request(radius_km=1, limit=10))

        assert result == [inside]
        for record in result:
            assert haversine_distance(MADRID_LAT, MADRID_LNG, record.lat, record.lng) <= 1000

    async def test_records_without_coordinates_are_skipped(
        self, mock_bin_reader: AsyncMock, bin_factory
    ) -> None:
        located = bin_factory(1, MADRID_LAT, MADRID_LNG)
        mock_bin_reader.find_candidates.return_value = [bin_factory(2, None, None), located]

        query = FindNearbyBinsQuery(mock_bin_reader, IN_PROCESS)
        result = await query.execute(_request(radius_km=1, limit=10))

        assert result == [located]


class TestPolicyClamp:
    """반경/limit 보정 테스트."""

    async def test_radius_below_floor_is_clamped(self, mock_bin_reader: AsyncMock) -> None:
        """0.01 km는 거부되지 않고 0.05 km로 보정."""
        query = FindNearbyBinsQuery(mock_bin_reader, IN_PROCESS)
        result = await query.execute(_request(radius_km=0.01))

        assert result == []
        delta = mock_bin_reader.find_candidates.call_args.kwargs["delta"]
        assert delta.lat_delta == pytest.approx(0.05 / 111)

    async def test_radius_above_ceiling_is_clamped(self, mock_bin_reader: AsyncMock) -> None:
        query = FindNearbyBinsQuery(mock_bin_reader)
        await query.execute(_request(radius_km=500))

        assert mock_bin_reader.find_nearby_native.call_args.kwargs["radius_m"] == 50_000

    async def test_defaults(self, mock_bin_reader: AsyncMock) -> None:
        """radius/limit 생략 시 5 km, 100건."""
        query = FindNearbyBinsQuery(mock_bin_reader)
        await query.execute(_request())

        kwargs = mock_bin_reader.find_nearby_native.call_args.kwargs
        assert kwargs["radius_m"] == 5_000
        assert kwargs["limit"] == 100

    async def test_limit_clamped_to_ceiling(self, mock_bin_reader: AsyncMock) -> None:
        query = FindNearbyBinsQuery(mock_bin_reader)
        await query.execute(_request(limit=100_000))

        assert mock_bin_reader.find_nearby_native.call_args.kwargs["limit"] == 5000

    async def test_initial_overfetch(self, mock_bin_reader: AsyncMock) -> None:
        """후보는 limit의 두 배를 조회."""
        query = FindNearbyBinsQuery(mock_bin_reader, IN_PROCESS)
        await query.execute(_request(limit=10))

        assert mock_bin_reader.find_candidates.call_args.kwargs["limit"] == 20


class TestStrategies:
    """전략 선택 테스트."""

    async def test_native_result_is_truncated_and_stripped(
        self, mock_bin_reader: AsyncMock, bin_factory
    ) -> None:
        records = [bin_factory(i, MADRID_LAT, MADRID_LNG) for i in range(1, 4)]
        mock_bin_reader.find_nearby_native.return_value = [(r, 0.0) for r in records]

        query = FindNearbyBinsQuery(mock_bin_reader)
        result = await query.execute(_request(limit=2))

        assert result == records[:2]
        mock_bin_reader.find_candidates.assert_not_called()

    async def test_auto_falls_back_when_procedure_missing(
        self, fake_reader, center_bin
    ) -> None:
        """AUTO는 프로시저가 없으면 in-process로 대체."""
        query = FindNearbyBinsQuery(fake_reader, NearbyPolicyService(strategy=NearbyStrategy.AUTO))
        result = await query.execute(_request(radius_km=1))

        assert result == [center_bin]
        assert fake_reader.candidate_limits == [200]

    async def test_missing_procedure_is_not_called_again(self, fake_reader, center_bin) -> None:
        """미존재가 기록되면 다음 요청부터 프로시저를 호출하지 않음."""
        now = [0.0]
        availability = ProcedureAvailability(retry_seconds=60, clock=lambda: now[0])
        auto = NearbyPolicyService(strategy=NearbyStrategy.AUTO)

        for _ in range(3):
            result = await FindNearbyBinsQuery(fake_reader, auto, availability).execute(
                _request(radius_km=1)
            )
            assert result == [center_bin]

        assert fake_reader.native_calls == 1
        assert availability.is_marked_unavailable

        now[0] = 61.0
        await FindNearbyBinsQuery(fake_reader, auto, availability).execute(_request(radius_km=1))
        assert fake_reader.native_calls == 2

    async def test_available_procedure_keeps_native_path(self, fake_reader) -> None:
        fake_reader.native = True
        availability = ProcedureAvailability()
        auto = NearbyPolicyService(strategy=NearbyStrategy.AUTO)

        await FindNearbyBinsQuery(fake_reader, auto, availability).execute(_request())
        await FindNearbyBinsQuery(fake_reader, auto, availability).execute(_request())

        assert fake_reader.native_calls == 2
        assert fake_reader.candidate_limits == []
        assert not availability.is_marked_unavailable

    async def test_native_strategy_ignores_availability(self, fake_reader) -> None:
        availability = ProcedureAvailability()
        availability.mark_unavailable()
        query = FindNearbyBinsQuery(
            fake_reader, NearbyPolicyService(strategy=NearbyStrategy.NATIVE), availability
        )
        with pytest.raises(NearbyProcedureUnavailableError):
            await query.execute(_request(radius_km=1))
        assert fake_reader.native_calls == 1

    async def test_native_strategy_raises_when_procedure_missing(self, fake_reader) -> None:
        query = FindNearbyBinsQuery(
            fake_reader, NearbyPolicyService(strategy=NearbyStrategy.NATIVE)
        )
        with pytest.raises(NearbyProcedureUnavailableError):
            await query.execute(_request(radius_km=1))

    async def test_in_process_skips_native(self, mock_bin_reader: AsyncMock) -> None:
        query = FindNearbyBinsQuery(mock_bin_reader, IN_PROCESS)
        await query.execute(_request())

        mock_bin_reader.find_nearby_native.assert_not_called()
        mock_bin_reader.find_candidates.assert_called_once()

    async def test_query_failure_is_not_empty_result(self, mock_bin_reader: AsyncMock) -> None:
        """저장소 오류는 빈 결과로 바뀌지 않고 전파."""
        mock_bin_reader.find_nearby_native.side_effect = QueryFailedError(
            "find_nearby_native", "connection refused"
        )
        query = FindNearbyBinsQuery(mock_bin_reader)

        with pytest.raises(QueryFailedError):
            await query.execute(_request())


class TestCandidateWidening:
    """후보 부족 시 조회 창 확장 테스트."""

    async def test_window_doubles_until_limit_satisfied(
        self, mock_bin_reader: AsyncMock, bin_factory
    ) -> None:
        outside = [bin_factory(i, MADRID_LAT + 0.0085, MADRID_LNG + 0.0115) for i in range(1, 5)]
        inside = [bin_factory(i, MADRID_LAT + 0.001 * (i - 10), MADRID_LNG) for i in range(10, 12)]
        mock_bin_reader.find_candidates.side_effect = [outside, outside + inside + outside[:2]]

        query = FindNearbyBinsQuery(mock_bin_reader, IN_PROCESS)
        result = await query.execute(_request(radius_km=1, limit=2))

        assert [r.id for r in result] == [10, 11]
        limits = [c.kwargs["limit"] for c in mock_bin_reader.find_candidates.call_args_list]
        assert limits == [4, 8]

    async def test_stops_when_store_exhausted(self, reader_factory, bin_factory) -> None:
        inside = bin_factory(1, MADRID_LAT + 0.001, MADRID_LNG)
        corners = [
            bin_factory(i, MADRID_LAT + 0.0085, MADRID_LNG + 0.0115) for i in range(2, 7)
        ]
        reader = reader_factory({BinType.GLASS: [inside, *corners]})
        query = FindNearbyBinsQuery(reader, IN_PROCESS)

        result = await query.execute(_request(radius_km=1, limit=2))

        assert result == [inside]
        assert reader.candidate_limits == [4, 8]

    async def test_stops_at_candidate_ceiling(self, mock_bin_reader: AsyncMock, bin_factory) -> None:
        outside = [bin_factory(i, MADRID_LAT + 0.0085, MADRID_LNG + 0.0115) for i in range(1, 5)]
        mock_bin_reader.find_candidates.return_value = outside
        policy = NearbyPolicyService(strategy=NearbyStrategy.IN_PROCESS, max_candidates=4)

        query = FindNearbyBinsQuery(mock_bin_reader, policy)
        result = await query.execute(_request(radius_km=1, limit=2))

        assert result == []
        mock_bin_reader.find_candidates.assert_called_once()
