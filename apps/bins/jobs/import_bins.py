"""Import Madrid open-data container CSVs into a bin collection.

두 가지 CSV 형식을 지원합니다.

- coded: 구/동네 코드 컬럼(COD_DIST, COD_BARRIO)을 가진 형식 (의류, 폐유, 배터리)
- named: 구/동네 이름(Distrito, Barrio)만 가진 공용 형식 (Contenedores_varios.csv).
  ``--districts-json`` 으로 이름을 코드로 바꾸고 ``Tipo Contenedor`` 로 종류를 거릅니다.
"""

from __future__ import annotations

import argparse
import asyncio
import csv
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bins.application.ingestion.commands import ImportBinsCommand
from bins.application.ingestion.dto import ImportResult, NewBinRecord
from bins.domain.enums import BinType
from bins.domain.exceptions import InvalidCoordinatesError
from bins.domain.value_objects.geo_point import validate_latitude, validate_longitude
from bins.infrastructure.persistence_postgres import SqlaBinWriter
from bins.jobs._csv_utils import (
    clean_float,
    clean_int,
    clean_optional_str,
    clean_row,
    clean_str,
    first_present,
    normalize_name,
    resolve_csv_path,
)
from bins.setup.config import get_settings
from bins.setup.database import build_engine, build_session_factory
from bins.setup.logging import setup_logging

logger = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[3]
CONTAINER_GROUP_ID = 1
CLEAN_POINT_GROUP_ID = 2


@dataclass(frozen=True)
class Category:
    group_id: int
    category_id: int
    container_label: str | None = None


CATEGORIES: dict[BinType, Category] = {
    BinType.CLOTHING: Category(CLEAN_POINT_GROUP_ID, 14),
    BinType.OIL: Category(CONTAINER_GROUP_ID, 15),
    BinType.GLASS: Category(CONTAINER_GROUP_ID, 11, "Vidrio"),
    BinType.PAPER: Category(CONTAINER_GROUP_ID, 4, "Papel-Cartón"),
    BinType.PLASTIC: Category(CONTAINER_GROUP_ID, 3, "Envases"),
    BinType.ORGANIC: Category(CONTAINER_GROUP_ID, 5, "Orgánica"),
    BinType.BATTERY: Category(CONTAINER_GROUP_ID, 12),
    BinType.OTHER: Category(CONTAINER_GROUP_ID, 6, "Resto"),
}

LAT_COLUMNS = ("LATITUD", "Latitud")
LNG_COLUMNS = ("LONGITUD", "Longitud")
DISTRICT_CODE_COLUMNS = ("COD_DIST", "COD_DIS")
ADDRESS_COLUMNS = (
    "DIRECCIÓN COMPLETA AMPLIADA",
    "DIRECCION COMPLETA",
    "Direccion_completa",
    "DIRECCION",
    "Dirección",
    "NOMBRE",
)


class DistrictDirectory:
    """구/동네 이름 → 코드 변환표.

    distritos.json 형식: ``[{"cod_dis", "nom_dis", "barrios": [{"cod_barrio", "nom_bar"}]}]``
    """

    def __init__(self, entries: Iterable[dict]) -> None:
        self._districts: dict[str, int] = {}
        self._neighborhoods: dict[tuple[int, str], int] = {}
        for entry in entries:
            district_id = clean_int(str(entry.get("cod_dis", "")))
            if district_id is None:
                continue
            self._districts[normalize_name(entry.get("nom_dis"))] = district_id
            for barrio in entry.get("barrios", []):
                neighborhood_id = clean_int(str(barrio.get("cod_barrio", "")))
                if neighborhood_id is not None:
                    key = (district_id, normalize_name(barrio.get("nom_bar")))
                    self._neighborhoods[key] = neighborhood_id

    @classmethod
    def load(cls, path: Path) -> "DistrictDirectory":
        with path.open("r", encoding="utf-8") as file_obj:
            return cls(json.load(file_obj))

    def district_id(self, name: str | None) -> int | None:
        return self._districts.get(normalize_name(name))

    def neighborhood_id(self, district_id: int, name: str | None) -> int | None:
        return self._neighborhoods.get((district_id, normalize_name(name)))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Import a Madrid open-data container CSV into a bin collection",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "bin_type",
        type=BinType,
        choices=list(BinType),
        metavar="BIN_TYPE",
        help=f"Target collection, one of: {', '.join(t.value for t in BinType)}",
    )
    parser.add_argument("--csv-path", type=Path, required=True, help="Path to the CSV file")
    parser.add_argument(
        "--districts-json",
        type=Path,
        help="District/neighborhood directory for CSVs without code columns",
    )
    parser.add_argument(
        "--database-url",
        help="Override BINS_DATABASE_URL",
    )
    parser.add_argument("--batch-size", type=int, default=1000, help="Rows per insert batch")
    parser.add_argument(
        "--append",
        action="store_true",
        help="Keep existing rows instead of clearing the collection first",
    )
    return parser.parse_args(argv)


def read_rows(csv_path: Path) -> list[dict[str, str | None]]:
    """`;` 구분, BOM 포함 CSV를 읽습니다."""
    with csv_path.open("r", encoding="utf-8-sig", newline="") as file_obj:
        reader = csv.DictReader(file_obj, delimiter=";")
        return [clean_row(row) for row in reader]


def transform_row(
    row: dict[str, str | None],
    bin_type: BinType,
    directory: DistrictDirectory | None = None,
) -> NewBinRecord | None:
    """CSV 한 행을 적재 레코드로 변환합니다.

    구를 알 수 없거나 좌표가 범위를 벗어나면 None.
    """
    category = CATEGORIES[bin_type]

    district_id = clean_int(first_present(row, DISTRICT_CODE_COLUMNS))
    neighborhood_id = clean_int(row.get("COD_BARRIO"))
    if district_id is None and directory is not None:
        district_id = directory.district_id(row.get("Distrito") or row.get("DISTRITO"))
        if district_id is not None:
            neighborhood_id = directory.neighborhood_id(
                district_id, row.get("Barrio") or row.get("BARRIO")
            )
    if district_id is None:
        return None

    lat = clean_float(first_present(row, LAT_COLUMNS))
    lng = clean_float(first_present(row, LNG_COLUMNS))
    if not _coordinates_in_range(lat, lng):
        logger.debug("Row with out-of-range coordinates skipped", extra={"lat": lat, "lng": lng})
        return None

    return NewBinRecord(
        category_group_id=category.group_id,
        category_id=category.category_id,
        district_id=district_id,
        neighborhood_id=neighborhood_id,
        address=clean_str(first_present(row, ADDRESS_COLUMNS)),
        lat=lat,
        lng=lng,
        load_type=clean_optional_str(row.get("Carga")),
        direction=clean_optional_str(row.get("sentido")),
        placement_type=clean_optional_str(
            first_present(row, ("TIPO  SITUADO", "TIPO SITUADO"))
        ),
        notes=clean_optional_str(row.get("MÁS INFORMACIÓN")),
        bus_stop=clean_optional_str(row.get("Parada")),
        interurban_node=clean_optional_str(row.get("nodo Inter Urbano")),
    )


def _coordinates_in_range(lat: float | None, lng: float | None) -> bool:
    try:
        if lat is not None:
            validate_latitude(lat)
        if lng is not None:
            validate_longitude(lng)
    except InvalidCoordinatesError:
        return False
    return True


def build_records(
    rows: Iterable[dict[str, str | None]],
    bin_type: BinType,
    directory: DistrictDirectory | None = None,
) -> tuple[list[NewBinRecord], int]:
    """행을 변환하고 (레코드, 건너뛴 행 수)를 반환합니다.

    공용 CSV는 ``Tipo Contenedor`` 값이 대상 종류와 같은 행만 사용합니다.
    """
    label = CATEGORIES[bin_type].container_label
    records: list[NewBinRecord] = []
    skipped = 0
    for row in rows:
        row_label = row.get("Tipo Contenedor")
        if row_label is not None and label is not None and clean_str(row_label) != label:
            continue
        record = transform_row(row, bin_type, directory)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    return records, skipped


async def import_csv(
    session_factory: async_sessionmaker[AsyncSession],
    bin_type: BinType,
    records: list[NewBinRecord],
    *,
    batch_size: int,
    replace: bool,
) -> ImportResult:
    async with session_factory() as session:
        command = ImportBinsCommand(SqlaBinWriter(session), batch_size=batch_size)
        return await command.execute(bin_type, records, replace=replace)


async def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    csv_path = args.csv_path
    if not csv_path.exists():
        try:
            csv_path = resolve_csv_path(PROJECT_DIR, csv_path.name)
        except FileNotFoundError as exc:
            raise SystemExit(str(exc)) from exc
    csv_path = csv_path.resolve()
    directory = DistrictDirectory.load(args.districts_json) if args.districts_json else None

    records, skipped = build_records(read_rows(csv_path), args.bin_type, directory)
    if skipped:
        logger.warning("Rows skipped (unknown district or invalid coordinates)", extra={"skipped": skipped})

    engine = build_engine(settings, args.database_url)
    try:
        result = await import_csv(
            build_session_factory(engine),
            args.bin_type,
            records,
            batch_size=args.batch_size,
            replace=not args.append,
        )
    finally:
        await engine.dispose()

    print(
        f"Imported {result.inserted} rows into {args.bin_type.value} from {csv_path} "
        f"({result.failed} failed in {len(result.errors)} batches, {skipped} skipped)"
    )
    if result.errors:
        raise SystemExit(1)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
