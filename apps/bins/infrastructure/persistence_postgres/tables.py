"""컨테이너 종류별 테이블 정의.

모든 종류가 같은 컬럼 구성을 공유하며 테이블 이름만 다릅니다.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Float,
    Identity,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)

from bins.domain.enums import BinType

metadata = MetaData()


def _build_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        Column("id", BigInteger, Identity(), primary_key=True),
        Column("category_group_id", Integer, nullable=False),
        Column("category_id", Integer, nullable=False),
        Column("district_id", Integer, nullable=False),
        Column("neighborhood_id", Integer),
        Column("address", Text, nullable=False),
        Column("lat", Float),
        Column("lng", Float),
        Column("load_type", Text),
        Column("direction", Text),
        Column("subtype", Text),
        Column("placement_type", Text),
        Column("notes", Text),
        Column("bus_stop", Text),
        Column("interurban_node", Text),
        Column("created_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
        Column(
            "updated_at",
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        ),
        Index(f"ix_{name}_lat_lng", "lat", "lng"),
        Index(f"ix_{name}_district_neighborhood", "district_id", "neighborhood_id"),
    )


BIN_TABLES: dict[BinType, Table] = {bin_type: _build_table(bin_type.table_name) for bin_type in BinType}


def bin_table(bin_type: BinType) -> Table:
    return BIN_TABLES[bin_type]
