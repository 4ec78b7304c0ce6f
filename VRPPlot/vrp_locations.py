"""
Location lookup for plotting: maps stop location ids to coordinates.
"""

import logging
from typing import Dict, Iterator, Mapping

from .vrp_data_models import Coordinate, JobKind, VRPInstance
from .vrp_exceptions import MissingLocationError, UnsupportedJobKindError

logger = logging.getLogger(__name__)

# Job kinds visited at a single location
SINGLE_LOCATION_KINDS = (JobKind.SERVICE, JobKind.PICKUP, JobKind.DELIVERY)


class Locations:
    """Read-only mapping from location id to Coordinate, built once per plot."""

    def __init__(self, coords: Mapping[str, Coordinate]):
        self._coords: Dict[str, Coordinate] = dict(coords)

    @classmethod
    def from_mapping(cls, coords: Mapping[str, Coordinate]) -> "Locations":
        return cls(coords)

    def get_coord(self, location_id: str) -> Coordinate:
        """Coordinate of a location; raises MissingLocationError if the id is unknown."""
        coord = self._coords.get(location_id)
        if coord is None:
            raise MissingLocationError(f"no coordinate for location {location_id}", location_id)
        return coord

    def __contains__(self, location_id) -> bool:
        return location_id in self._coords

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[str]:
        return iter(self._coords)


def retrieve_locations(vrp: VRPInstance) -> Locations:
    """
    Collect the locations of all vehicles and jobs of a problem.

    Raises:
        MissingLocationError: a vehicle or job lacks a location id or coordinate
        UnsupportedJobKindError: a job is not visited at a single location
    """
    coords: Dict[str, Coordinate] = {}
    for vehicle in vrp.get_vehicles():
        if vehicle.location_id is None:
            raise MissingLocationError(f"vehicle {vehicle.id} has no location id")
        if vehicle.coord is None:
            raise MissingLocationError(f"vehicle {vehicle.id} has no coordinate", vehicle.location_id)
        coords[vehicle.location_id] = vehicle.coord

    for job in vrp.get_jobs():
        if job.kind not in SINGLE_LOCATION_KINDS:
            raise UnsupportedJobKindError(job.id, job.kind)
        if job.location_id is None:
            raise MissingLocationError(f"job {job.id} has no location id")
        if job.coord is None:
            raise MissingLocationError(f"job {job.id} has no coordinate", job.location_id)
        coords[job.location_id] = job.coord

    logger.debug(f"Resolved {len(coords)} locations for {vrp.name}")
    return Locations(coords)
