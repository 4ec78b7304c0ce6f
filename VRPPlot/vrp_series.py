"""
Plottable series built from routing objects.

Problem series group depots and jobs by category and are drawn as markers;
solution series are one ordered polyline per non-empty route.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .vrp_data_models import Coordinate, Job, JobKind, Vehicle, VehicleRoute, VRPInstance
from .vrp_exceptions import MissingLocationError, UnsupportedJobKindError
from .vrp_locations import Locations

logger = logging.getLogger(__name__)

SeriesKey = Union[str, int]

DEPOT = 'depot'
SERVICE = 'service'
PICKUP = 'pickup'
DELIVERY = 'delivery'

# Order in which problem series are emitted
CATEGORY_ORDER = (DEPOT, SERVICE, PICKUP, DELIVERY)

_CATEGORY_BY_KIND = {
    JobKind.SERVICE: SERVICE,
    JobKind.PICKUP: PICKUP,
    JobKind.DELIVERY: DELIVERY,
}


class Series:
    """Named, ordered collection of 2D points. Duplicates are kept, nothing is sorted."""

    def __init__(self, key: SeriesKey):
        self.key = key
        self.points: List[Coordinate] = []

    def add(self, coord: Coordinate) -> int:
        """Append a point and return its index within the series."""
        self.points.append(coord)
        return len(self.points) - 1

    def is_empty(self) -> bool:
        return not self.points

    def as_array(self) -> np.ndarray:
        """Points as an (n, 2) array of x, y."""
        return np.array([p.as_tuple() for p in self.points], dtype=float).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __repr__(self):
        return f"Series({self.key!r}, {[p.as_tuple() for p in self.points]})"


class SeriesCollection:
    """Ordered collection of series forming one plot layer."""

    def __init__(self, series: Optional[Iterable[Series]] = None):
        self.series: List[Series] = list(series) if series else []

    def add_series(self, series: Series):
        self.series.append(series)

    def get_series(self, key: SeriesKey) -> Series:
        for s in self.series:
            if s.key == key:
                return s
        raise KeyError(key)

    def keys(self) -> List[SeriesKey]:
        return [s.key for s in self.series]

    def as_array(self) -> np.ndarray:
        arrays = [s.as_array() for s in self.series]
        if not arrays:
            return np.empty((0, 2))
        return np.vstack(arrays)

    def domain_bounds(self) -> Optional[Tuple[float, float]]:
        """(min, max) of the x values, None when the collection holds no points."""
        return _bounds(self.as_array()[:, 0])

    def range_bounds(self) -> Optional[Tuple[float, float]]:
        """(min, max) of the y values, None when the collection holds no points."""
        return _bounds(self.as_array()[:, 1])

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self.series)


def _bounds(values: np.ndarray) -> Optional[Tuple[float, float]]:
    if values.size == 0:
        return None
    return float(np.min(values)), float(np.max(values))


class LabelMap:
    """Display strings for individual plotted points, keyed by (series key, point index)."""

    def __init__(self):
        self._labels: Dict[Tuple[SeriesKey, int], str] = {}

    def put(self, series_key: SeriesKey, index: int, label: str):
        self._labels[(series_key, index)] = label

    def get(self, series_key: SeriesKey, index: int) -> Optional[str]:
        return self._labels.get((series_key, index))

    def items(self):
        return self._labels.items()

    def __len__(self) -> int:
        return len(self._labels)


def make_vrp_series(vehicles: Iterable[Vehicle], jobs: Iterable[Job], labels: LabelMap) -> SeriesCollection:
    """
    Build the problem series: depots plus one series per job category.

    Every job point gets its demand recorded in ``labels``. Empty categories
    are left out of the returned collection.

    Raises:
        MissingLocationError: a vehicle or job has no coordinate
        UnsupportedJobKindError: a job kind outside service/pickup/delivery
    """
    by_category = {category: Series(category) for category in CATEGORY_ORDER}

    depot_series = by_category[DEPOT]
    for vehicle in vehicles:
        if vehicle.coord is None:
            raise MissingLocationError(f"vehicle {vehicle.id} has no coordinate", vehicle.location_id)
        depot_series.add(vehicle.coord)

    for job in jobs:
        category = _CATEGORY_BY_KIND.get(job.kind)
        if category is None:
            raise UnsupportedJobKindError(job.id, job.kind)
        if job.coord is None:
            raise MissingLocationError(f"job {job.id} has no coordinate", job.location_id)
        index = by_category[category].add(job.coord)
        labels.put(category, index, str(job.capacity_demand))

    coll = SeriesCollection(s for s in by_category.values() if not s.is_empty())
    logger.debug(f"Built problem series {coll.keys()}")
    return coll


def make_vrp_series_from_problem(vrp: VRPInstance, labels: LabelMap) -> SeriesCollection:
    return make_vrp_series(vrp.get_vehicles(), vrp.get_jobs(), labels)


def make_vrp_series_from_routes(routes: Iterable[VehicleRoute], labels: LabelMap) -> SeriesCollection:
    """Problem series for the vehicles and jobs taking part in the given routes."""
    vehicles: Dict[str, Vehicle] = {}
    jobs: Dict[str, Job] = {}
    for route in routes:
        vehicles.setdefault(route.vehicle.id, route.vehicle)
        for job in route.jobs:
            jobs.setdefault(job.id, job)
    return make_vrp_series(vehicles.values(), jobs.values(), labels)


def make_solution_series(routes: Iterable[VehicleRoute], locations: Locations) -> SeriesCollection:
    """
    One polyline per non-empty route: start, activities in order, end.

    Series are keyed 1, 2, 3, ... in route order, skipping empty routes.
    """
    coll = SeriesCollection()
    counter = 1
    for route in routes:
        if route.is_empty():
            continue
        series = Series(counter)
        series.add(locations.get_coord(route.start.location_id))
        for activity in route.activities:
            series.add(locations.get_coord(activity.location_id))
        series.add(locations.get_coord(route.end.location_id))
        coll.add_series(series)
        counter += 1
    return coll
