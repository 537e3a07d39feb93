from __future__ import annotations

import threading
from typing import Callable, Iterable, List, Optional

from ..schemas.weather import WeatherReading

Predicate = Callable[[WeatherReading], bool]


def _has_id(station_id: int) -> Predicate:
    return lambda r: r.id == station_id


def _at(lat: float, lon: float) -> Predicate:
    # Exact float equality; no rounding or tolerance is applied
    return lambda r: r.lat == lat and r.lon == lon


class WeatherStore:
    """Ordered in-memory collection of weather readings.

    Insertion order is the only ordering guarantee. Lookups are linear scans
    returning the first match; duplicate identities are allowed. All
    operations are serialized by a single lock since FastAPI runs sync
    handlers on a thread pool. Records are copied in and out, so callers never
    hold a reference to stored state.
    """

    def __init__(self, records: Optional[Iterable[WeatherReading]] = None) -> None:
        self._lock = threading.RLock()
        self._records: List[WeatherReading] = [r.model_copy(deep=True) for r in records or []]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index(self, match: Predicate) -> Optional[int]:
        for i, record in enumerate(self._records):
            if match(record):
                return i
        return None

    def append(self, record: WeatherReading) -> WeatherReading:
        stored = record.model_copy(deep=True)
        with self._lock:
            self._records.append(stored)
        return stored.model_copy(deep=True)

    def all(self) -> List[WeatherReading]:
        with self._lock:
            return [r.model_copy(deep=True) for r in self._records]

    def _find(self, match: Predicate) -> Optional[WeatherReading]:
        with self._lock:
            i = self._index(match)
            return None if i is None else self._records[i].model_copy(deep=True)

    def _replace(self, match: Predicate, record: WeatherReading) -> bool:
        stored = record.model_copy(deep=True)
        with self._lock:
            i = self._index(match)
            if i is None:
                return False
            self._records[i] = stored
            return True

    def _remove(self, match: Predicate) -> bool:
        with self._lock:
            i = self._index(match)
            if i is None:
                return False
            del self._records[i]
            return True

    def find_by_id(self, station_id: int) -> Optional[WeatherReading]:
        return self._find(_has_id(station_id))

    def find_by_coordinate(self, lat: float, lon: float) -> Optional[WeatherReading]:
        return self._find(_at(lat, lon))

    def replace_by_id(self, station_id: int, record: WeatherReading) -> bool:
        return self._replace(_has_id(station_id), record)

    def replace_by_coordinate(self, lat: float, lon: float, record: WeatherReading) -> bool:
        return self._replace(_at(lat, lon), record)

    def remove_by_id(self, station_id: int) -> bool:
        return self._remove(_has_id(station_id))

    def remove_by_coordinate(self, lat: float, lon: float) -> bool:
        return self._remove(_at(lat, lon))
