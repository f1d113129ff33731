"""
Reference dataset loaders.

Two local files feed the service:

* **communes** -- a JSON array of objects carrying ``libelle_geographique``
  and/or ``Nom`` plus numeric ``Latitude`` / ``Longitude``.
* **stations** -- a GeoJSON ``FeatureCollection`` of railway stations;
  point coordinates are ``[lon, lat]``.

Rows that cannot become a ``Location`` (no label, no usable coordinates)
are skipped rather than failing the whole load; NaN and infinite
coordinates count as unusable.  A file that is missing, is not JSON or
has the wrong top-level shape raises ``DatasetError``.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional, Union

from src.domain.entities import Location

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

STATION_NAME_KEYS = ("libelle", "nom", "name", "libelle_gare")


class DatasetError(Exception):
    """Raised when a reference dataset cannot be read."""


def _read_json(path: PathLike) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:
        raise DatasetError(f"Dataset not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Dataset {path} is not valid JSON: {exc}") from exc


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    # "NaN" / "inf" strings and bare NaN / Infinity JSON literals
    if not math.isfinite(result):
        return None
    return result


def _label(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


# ── Communes ──────────────────────────────────────────────────────────


def parse_commune(record: dict) -> Optional[Location]:
    name = _label(record.get("libelle_geographique"))
    alt_name = _label(record.get("Nom"))
    lat = _as_float(record.get("Latitude"))
    lng = _as_float(record.get("Longitude"))
    if (name is None and alt_name is None) or lat is None or lng is None:
        return None
    return Location(name=name, latitude=lat, longitude=lng, alt_name=alt_name)


def load_communes(path: PathLike) -> list[Location]:
    data = _read_json(path)
    if not isinstance(data, list):
        raise DatasetError(f"{path}: expected a JSON array of communes")

    communes: list[Location] = []
    skipped = 0
    for record in data:
        loc = parse_commune(record) if isinstance(record, dict) else None
        if loc is None:
            skipped += 1
            continue
        communes.append(loc)

    if skipped:
        logger.debug("Skipped %d unusable commune rows in %s", skipped, path)
    logger.info("Loaded %d communes from %s", len(communes), path)
    return communes


# ── Stations ──────────────────────────────────────────────────────────


def parse_station(feature: dict) -> Optional[Location]:
    coords = (feature.get("geometry") or {}).get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        return None
    lng, lat = _as_float(coords[0]), _as_float(coords[1])
    if lat is None or lng is None:
        return None

    props = feature.get("properties") or {}
    name = next(
        (_label(props.get(k)) for k in STATION_NAME_KEYS if _label(props.get(k))),
        None,
    )
    return Location(name=name, latitude=lat, longitude=lng)


def load_stations(path: PathLike) -> list[Location]:
    data = _read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("features"), list):
        raise DatasetError(f"{path}: expected a GeoJSON FeatureCollection")

    stations = [
        loc
        for loc in (
            parse_station(f) for f in data["features"] if isinstance(f, dict)
        )
        if loc is not None
    ]
    logger.info("Loaded %d stations from %s", len(stations), path)
    return stations
