"""Bins HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class GeoPointSchema(BaseModel):
    """좌표 스키마."""

    lat: float
    lng: float

    model_config = {"from_attributes": True}


class BinEntry(BaseModel):
    """컨테이너 응답 스키마."""

    id: int
    category_group_id: int
    category_id: int
    district_id: int
    neighborhood_id: int | None
    address: str
    lat: float | None
    lng: float | None
    load_type: str | None = None
    direction: str | None = None
    subtype: str | None = None
    placement_type: str | None = None
    notes: str | None = None
    bus_stop: str | None = None
    interurban_node: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class BinCount(BaseModel):
    """컨테이너 수 응답 스키마."""

    count: int


class DistrictAggregateEntry(BaseModel):
    """구별 집계 응답 스키마."""

    district_id: int
    count: int
    centroid: GeoPointSchema

    model_config = {"from_attributes": True}


class NeighborhoodAggregateEntry(BaseModel):
    """동네별 집계 응답 스키마."""

    district_id: int
    neighborhood_id: int | None
    count: int
    centroid: GeoPointSchema

    model_config = {"from_attributes": True}


class HierarchyCountEntry(BaseModel):
    """계층 카운트 응답 스키마."""

    district_id: int
    neighborhood_id: int | None
    count: int

    model_config = {"from_attributes": True}
