"""
Province/city reference data shared by the validator, the locations API and the form view-model.
One immutable table per process; both validation call sites read the same instance.
"""
import json
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from gms.core.config import settings
from gms.data.pakistan_locations import PAKISTAN_PROVINCES, PAKISTAN_CITIES_BY_PROVINCE

logger = logging.getLogger(__name__)


class ReferenceDataError(Exception):
    """Reference data is missing or malformed; validation cannot run"""


class ReferenceData:
    """Immutable province enumeration plus the city set of each province"""

    __slots__ = ("_provinces", "_cities")

    def __init__(self, cities_by_province: Mapping[str, Iterable[str]]):
        if not cities_by_province:
            raise ReferenceDataError("Reference data has no provinces")

        cities: Dict[str, Tuple[str, ...]] = {}
        for province, names in cities_by_province.items():
            if not isinstance(province, str) or not province.strip():
                raise ReferenceDataError(f"Invalid province name: {province!r}")
            if not isinstance(names, (list, tuple, set, frozenset)) or not all(
                isinstance(n, str) and n.strip() for n in names
            ):
                raise ReferenceDataError(f"Invalid city list for province {province!r}")
            # keep first occurrence order, drop duplicates
            cities[province.strip()] = tuple(dict.fromkeys(n.strip() for n in names))

        self._provinces: Tuple[str, ...] = tuple(cities)
        self._cities: Mapping[str, Tuple[str, ...]] = MappingProxyType(cities)

    @classmethod
    def from_mapping(cls, cities_by_province: Mapping[str, Iterable[str]]) -> "ReferenceData":
        return cls(cities_by_province)

    @property
    def provinces(self) -> Tuple[str, ...]:
        return self._provinces

    def cities_for(self, province: str) -> Tuple[str, ...]:
        """Cities of a province; empty for an unknown province"""
        return self._cities.get(province, ())

    def city_set(self, province: str) -> FrozenSet[str]:
        return frozenset(self.cities_for(province))

    def is_province(self, name: str) -> bool:
        return name in self._cities

    def is_city_of(self, province: str, city: str) -> bool:
        return city in self._cities.get(province, ())

    def __eq__(self, other):
        if not isinstance(other, ReferenceData):
            return NotImplemented
        return dict(self._cities) == dict(other._cities)

    def __hash__(self):
        return hash(tuple(self._cities.items()))

    def __repr__(self):
        return f"<ReferenceData {len(self._provinces)} provinces>"


def _load_json(path: str) -> ReferenceData:
    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, ValueError) as e:
        raise ReferenceDataError(f"Could not read reference data from {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ReferenceDataError(f"Reference data in {path} must be an object of province -> cities")
    return ReferenceData.from_mapping(raw)


def load_reference_data(path: Optional[str] = None) -> ReferenceData:
    """Load from a JSON file when a path is given or configured, else the built-in Pakistan table"""
    path = path or settings.REFERENCE_DATA_PATH
    if path:
        data = _load_json(path)
        logger.info(f"Loaded reference data from {path}: {len(data.provinces)} provinces")
        return data

    ordered = {p["name"]: PAKISTAN_CITIES_BY_PROVINCE.get(p["name"], []) for p in PAKISTAN_PROVINCES}
    return ReferenceData.from_mapping(ordered)


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    """Process-wide reference data, loaded once"""
    return load_reference_data()
