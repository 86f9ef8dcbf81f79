"""Bins Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from bins.application.aggregate import AggregateByDistrictQuery, AggregateByNeighborhoodQuery
from bins.application.catalog import CountBinsQuery, ListBinsByLocationQuery, ListBinsQuery
from bins.application.common.exceptions import InvalidBinTypeError, InvalidLocationTypeError
from bins.application.hierarchy import GetCountsHierarchyQuery
from bins.application.nearby import FindNearbyBinsQuery, NearbySearchRequest
from bins.domain.enums import BinType, LocationType
from bins.domain.value_objects import BoundingBox
from bins.presentation.http.schemas import (
    BinCount,
    BinEntry,
    DistrictAggregateEntry,
    HierarchyCountEntry,
    NeighborhoodAggregateEntry,
)
from bins.setup.dependencies import (
    enforce_rate_limit,
    get_aggregate_by_district_query,
    get_aggregate_by_neighborhood_query,
    get_count_bins_query,
    get_counts_hierarchy_query,
    get_find_nearby_bins_query,
    get_list_bins_by_location_query,
    get_list_bins_query,
)

router = APIRouter(
    prefix="/bins/{bin_type}",
    tags=["bins"],
    dependencies=[Depends(enforce_rate_limit)],
)

CACHE_NEARBY = "public, max-age=30, stale-while-revalidate=60"
CACHE_LIST = "public, max-age=60, stale-while-revalidate=120"
CACHE_SUMMARY = "public, max-age=300, stale-while-revalidate=600"


@router.get("", response_model=list[BinEntry], summary="List all bins of a type")
async def list_bins(
    bin_type: str,
    response: Response,
    query: Annotated[ListBinsQuery, Depends(get_list_bins_query)],
) -> list[BinEntry]:
    """종류별 전체 컨테이너를 조회합니다."""
    records = await query.execute(_parse_bin_type(bin_type))
    response.headers["Cache-Control"] = CACHE_LIST
    return [BinEntry.model_validate(r) for r in records]


@router.get("/count", response_model=BinCount, summary="Count bins of a type")
async def count_bins(
    bin_type: str,
    response: Response,
    query: Annotated[CountBinsQuery, Depends(get_count_bins_query)],
) -> BinCount:
    """종류별 컨테이너 수를 조회합니다."""
    count = await query.execute(_parse_bin_type(bin_type))
    response.headers["Cache-Control"] = CACHE_SUMMARY
    return BinCount(count=count)


@router.get(
    "/location/{location_type}/{location_id}",
    response_model=list[BinEntry],
    summary="List bins of a district or neighborhood",
)
async def bins_by_location(
    bin_type: str,
    location_type: str,
    location_id: int,
    response: Response,
    query: Annotated[ListBinsByLocationQuery, Depends(get_list_bins_by_location_query)],
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, description="Page size (capped at 1000)"),
) -> list[BinEntry]:
    """구/동네 단위로 컨테이너를 조회합니다."""
    records = await query.execute(
        bin_type=_parse_bin_type(bin_type),
        location_type=_parse_location_type(location_type),
        location_id=location_id,
        page=page,
        limit=limit,
    )
    response.headers["Cache-Control"] = CACHE_SUMMARY
    return [BinEntry.model_validate(r) for r in records]


@router.get("/nearby", response_model=list[BinEntry], summary="Find bins near a point")
async def nearby(
    bin_type: str,
    response: Response,
    query: Annotated[FindNearbyBinsQuery, Depends(get_find_nearby_bins_query)],
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    radius: float | None = Query(
        None,
        gt=0,
        description="Search radius in km. Clamped to the configured range, default 5 km.",
    ),
    limit: int | None = Query(
        None,
        ge=1,
        description="Maximum number of results. Clamped to the configured ceiling.",
    ),
) -> list[BinEntry]:
    """기준점에서 가까운 순으로 컨테이너를 조회합니다."""
    request = NearbySearchRequest(
        bin_type=_parse_bin_type(bin_type),
        latitude=lat,
        longitude=lng,
        radius_km=radius,
        limit=limit,
    )
    records = await query.execute(request)
    response.headers["Cache-Control"] = CACHE_NEARBY
    return [BinEntry.model_validate(r) for r in records]


@router.get(
    "/aggregate/district",
    response_model=list[DistrictAggregateEntry],
    summary="Aggregate bins by district inside a bounding box",
)
async def aggregate_district(
    bin_type: str,
    response: Response,
    query: Annotated[AggregateByDistrictQuery, Depends(get_aggregate_by_district_query)],
    min_lat: float = Query(..., alias="minLat", ge=-90, le=90),
    min_lng: float = Query(..., alias="minLng", ge=-180, le=180),
    max_lat: float = Query(..., alias="maxLat", ge=-90, le=90),
    max_lng: float = Query(..., alias="maxLng", ge=-180, le=180),
) -> list[DistrictAggregateEntry]:
    """bbox 내 구별 개수와 중심점을 조회합니다."""
    parsed_type = _parse_bin_type(bin_type)
    bbox = BoundingBox(min_lat=min_lat, min_lng=min_lng, max_lat=max_lat, max_lng=max_lng)
    aggregates = await query.execute(parsed_type, bbox)
    response.headers["Cache-Control"] = CACHE_SUMMARY
    return [DistrictAggregateEntry.model_validate(a) for a in aggregates]


@router.get(
    "/aggregate/neighborhood",
    response_model=list[NeighborhoodAggregateEntry],
    summary="Aggregate bins by neighborhood inside a bounding box",
)
async def aggregate_neighborhood(
    bin_type: str,
    response: Response,
    query: Annotated[AggregateByNeighborhoodQuery, Depends(get_aggregate_by_neighborhood_query)],
    min_lat: float = Query(..., alias="minLat", ge=-90, le=90),
    min_lng: float = Query(..., alias="minLng", ge=-180, le=180),
    max_lat: float = Query(..., alias="maxLat", ge=-90, le=90),
    max_lng: float = Query(..., alias="maxLng", ge=-180, le=180),
) -> list[NeighborhoodAggregateEntry]:
    """bbox 내 동네별 개수와 중심점을 조회합니다."""
    parsed_type = _parse_bin_type(bin_type)
    bbox = BoundingBox(min_lat=min_lat, min_lng=min_lng, max_lat=max_lat, max_lng=max_lng)
    aggregates = await query.execute(parsed_type, bbox)
    response.headers["Cache-Control"] = CACHE_SUMMARY
    return [NeighborhoodAggregateEntry.model_validate(a) for a in aggregates]


@router.get(
    "/counts",
    response_model=list[HierarchyCountEntry],
    summary="Counts grouped by district and neighborhood",
)
async def counts_hierarchy(
    bin_type: str,
    response: Response,
    query: Annotated[GetCountsHierarchyQuery, Depends(get_counts_hierarchy_query)],
) -> list[HierarchyCountEntry]:
    """구/동네 계층별 개수를 조회합니다."""
    counts = await query.execute(_parse_bin_type(bin_type))
    response.headers["Cache-Control"] = CACHE_SUMMARY
    return [HierarchyCountEntry.model_validate(c) for c in counts]


def _parse_bin_type(raw: str) -> BinType:
    """bin_type 경로 파라미터를 파싱합니다."""
    try:
        return BinType(raw.strip())
    except ValueError:
        raise InvalidBinTypeError(value=raw, allowed=[t.value for t in BinType])


def _parse_location_type(raw: str) -> LocationType:
    """location_type 경로 파라미터를 파싱합니다."""
    try:
        return LocationType(raw.strip().lower())
    except ValueError:
        raise InvalidLocationTypeError(value=raw, allowed=[t.value for t in LocationType])
