"""ZIP code to coordinate resolution with tiered fallback."""

import csv
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Optional

from clearance_scout.data.zipcodes import (
    METRO_ZIPS,
    NATIONAL_CENTROID,
    STATE_CENTERS,
    ZIP_PREFIX_STATES,
)

logger = logging.getLogger(__name__)

EXACT_ZIP = "exact_zip"
ZIP_PREFIX = "zip_prefix"
STATE_CENTER = "state_center"
FALLBACK = "fallback"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class ResolvedLocation:
    """Coordinates for a ZIP plus the tier that produced them."""

    lat: float
    lon: float
    source: str
    city: Optional[str] = None
    state: Optional[str] = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(self.lat, self.lon)

    def to_dict(self) -> dict:
        return {
            "lat": self.lat,
            "lon": self.lon,
            "source": self.source,
            "city": self.city,
            "state": self.state,
        }


def normalize_zip(zip_code: str) -> Optional[str]:
    """Trim and left-pad to 5 digits. Returns None for non-numeric or over-long input."""
    if zip_code is None:
        return None
    value = str(zip_code).strip()
    if not value.isdigit() or len(value) > 5:
        return None
    return value.zfill(5)


def state_for_zip(zip_code: str) -> Optional[str]:
    """Infer a state from the static 3-digit prefix range table."""
    zip_code = normalize_zip(zip_code)
    if zip_code is None:
        return None
    prefix = int(zip_code[:3])
    for start, end, state in ZIP_PREFIX_STATES:
        if start <= prefix <= end:
            return state
    return None


class ZipResolver:
    """
    Deterministic, offline ZIP resolver.

    Lookup order:
    1. Exact ZIP match in the loaded dataset
    2. First dataset ZIP sharing the 3-digit prefix (dataset order)
    3. State center for the state inferred from the prefix range table
    4. National centroid

    The dataset is read once at construction and never mutated.
    """

    def __init__(self, records: Iterable[tuple], state_centers: Optional[dict] = None):
        """
        Initialize resolver.

        Args:
            records: Iterable of (zip, lat, lon, city, state) rows
            state_centers: Centers to use for states absent from the rows
        """
        self._zips: dict[str, ResolvedLocation] = {}
        sums: dict[str, list[float]] = {}

        for zip_code, lat, lon, city, state in records:
            zip_code = normalize_zip(zip_code)
            if zip_code is None or lat is None or lon is None:
                continue
            state = (state or "").upper() or None
            if zip_code in self._zips:
                continue
            self._zips[zip_code] = ResolvedLocation(float(lat), float(lon), EXACT_ZIP, city, state)
            if state:
                acc = sums.setdefault(state, [0.0, 0.0, 0])
                acc[0] += float(lat)
                acc[1] += float(lon)
                acc[2] += 1

        self._state_centers: dict[str, ResolvedLocation] = {}
        for state, (lat, lon) in (state_centers or {}).items():
            self._state_centers[state] = ResolvedLocation(lat, lon, STATE_CENTER, state=state)
        for state, (lat_sum, lon_sum, count) in sums.items():
            self._state_centers[state] = ResolvedLocation(
                lat_sum / count, lon_sum / count, STATE_CENTER, state=state
            )

        logger.info(
            f"ZIP resolver ready: {len(self._zips)} ZIP codes, {len(self._state_centers)} state centers"
        )

    @classmethod
    def from_csv(cls, path: str | Path) -> "ZipResolver":
        """Load a CSV with columns zip, lat, lng, city, state_id."""
        rows = []
        with open(path, newline="", encoding="utf-8") as handle:
            for row in csv.DictReader(handle):
                try:
                    lat, lon = float(row["lat"]), float(row["lng"])
                except (KeyError, TypeError, ValueError):
                    continue
                rows.append((row.get("zip", ""), lat, lon, row.get("city"), row.get("state_id")))
        return cls(rows, state_centers=STATE_CENTERS)

    @classmethod
    def builtin(cls, stores: Iterable[dict] = ()) -> "ZipResolver":
        """Metro reference ZIPs plus the ZIP code of every known store location."""
        rows = list(METRO_ZIPS)
        for store in stores:
            if store.get("latitude") is None or store.get("longitude") is None:
                continue
            rows.append(
                (store["zip_code"], store["latitude"], store["longitude"], store.get("city"), store.get("state"))
            )
        return cls(rows, state_centers=STATE_CENTERS)

    @classmethod
    def from_settings(cls, zip_dataset_path: Optional[str], stores: Iterable[dict] = ()) -> "ZipResolver":
        if zip_dataset_path and Path(zip_dataset_path).exists():
            return cls.from_csv(zip_dataset_path)
        if zip_dataset_path:
            logger.warning(f"ZIP dataset not found at {zip_dataset_path}, using built-in metro data")
        return cls.builtin(stores)

    def resolve(self, zip_code: str) -> ResolvedLocation:
        """Resolve a ZIP code. Always returns a location, degrading to the national centroid."""
        zip_code = normalize_zip(zip_code)

        if zip_code is not None:
            exact = self._zips.get(zip_code)
            if exact is not None:
                return exact

            prefix = zip_code[:3]
            for key, location in self._zips.items():
                if key.startswith(prefix):
                    return replace(location, source=ZIP_PREFIX)

            state = state_for_zip(zip_code)
            if state and state in self._state_centers:
                return self._state_centers[state]

        lat, lon = NATIONAL_CENTROID
        return ResolvedLocation(lat, lon, FALLBACK, city="Geographic Center", state="US")

    def resolve_coordinates(self, zip_code: str) -> Optional[Coordinates]:
        """Coordinates for a ZIP, or None only when the input is not a ZIP at all."""
        if normalize_zip(zip_code) is None:
            return None
        return self.resolve(zip_code).coordinates

    def zip_codes_for_state(self, state: str) -> list[tuple[str, ResolvedLocation]]:
        state = state.upper()
        return [(zip_code, loc) for zip_code, loc in self._zips.items() if loc.state == state]

    def stats(self) -> dict:
        return {
            "total_zip_codes": len(self._zips),
            "total_state_centers": len(self._state_centers),
        }
