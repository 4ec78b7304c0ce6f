from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Optional, Union, Iterable
from enum import Enum

Demand = Union[int, float]


class JobKind(Enum):
    """Types of jobs a routing problem can contain."""
    SERVICE = "service"
    PICKUP = "pickup"
    DELIVERY = "delivery"
    SHIPMENT = "shipment"  # pickup and delivery at two different locations


@dataclass(frozen=True)
class Coordinate:
    """A physical location in the plane."""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Job:
    """
    A routing task. The variant is carried by ``kind``; SERVICE, PICKUP and
    DELIVERY jobs are visited at a single location.
    """
    id: str
    kind: JobKind
    location_id: Optional[str] = None
    coord: Optional[Coordinate] = None
    capacity_demand: Demand = 0

    def __post_init__(self):
        if self.capacity_demand < 0:
            raise ValueError(f"Job {self.id}: capacity demand must be non-negative, got {self.capacity_demand}")

    @classmethod
    def service(cls, id: str, location_id: Optional[str], coord: Optional[Coordinate], capacity_demand: Demand = 0) -> "Job":
        return cls(id, JobKind.SERVICE, location_id, coord, capacity_demand)

    @classmethod
    def pickup(cls, id: str, location_id: Optional[str], coord: Optional[Coordinate], capacity_demand: Demand = 0) -> "Job":
        return cls(id, JobKind.PICKUP, location_id, coord, capacity_demand)

    @classmethod
    def delivery(cls, id: str, location_id: Optional[str], coord: Optional[Coordinate], capacity_demand: Demand = 0) -> "Job":
        return cls(id, JobKind.DELIVERY, location_id, coord, capacity_demand)

    @classmethod
    def shipment(cls, id: str, location_id: Optional[str], coord: Optional[Coordinate], capacity_demand: Demand = 0) -> "Job":
        return cls(id, JobKind.SHIPMENT, location_id, coord, capacity_demand)


@dataclass
class Vehicle:
    """Represents a vehicle of the fleet; its location is the depot it starts from."""
    id: str
    location_id: Optional[str] = None
    coord: Optional[Coordinate] = None
    capacity: int = 0


@dataclass
class Start:
    """First stop of a route."""
    location_id: str


@dataclass
class End:
    """Last stop of a route."""
    location_id: str


@dataclass
class TourActivity:
    """One visited stop within a route."""
    location_id: str
    job: Job


@dataclass
class VehicleRoute:
    """A vehicle's tour: start, ordered activities, end."""
    vehicle: Vehicle
    start: Start
    end: End
    activities: List[TourActivity] = field(default_factory=list)

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle, jobs: Iterable[Job] = ()) -> "VehicleRoute":
        """Build a route leaving from and returning to the vehicle's depot, visiting jobs in order."""
        if vehicle.location_id is None:
            raise ValueError(f"Vehicle {vehicle.id} has no location to start the route from")
        route = cls(vehicle, Start(vehicle.location_id), End(vehicle.location_id))
        for job in jobs:
            route.add_activity(TourActivity(job.location_id, job))
        return route

    def add_activity(self, activity: TourActivity):
        self.activities.append(activity)

    def is_empty(self) -> bool:
        return not self.activities

    @property
    def jobs(self) -> List[Job]:
        """Jobs served by this route, in visiting order, without duplicates."""
        served: Dict[str, Job] = {}
        for activity in self.activities:
            served.setdefault(activity.job.id, activity.job)
        return list(served.values())


class VRPInstance:
    """Complete VRP problem definition: the fleet and the jobs to serve."""

    def __init__(self, name: str):
        self.name = name
        self.vehicles: Dict[str, Vehicle] = {}
        self.jobs: Dict[str, Job] = {}

    def add_vehicle(self, vehicle: Vehicle):
        """Add a vehicle to the instance."""
        self.vehicles[vehicle.id] = vehicle

    def add_job(self, job: Job):
        """Add a job to the instance."""
        self.jobs[job.id] = job

    def get_vehicles(self) -> List[Vehicle]:
        return list(self.vehicles.values())

    def get_jobs(self) -> List[Job]:
        return list(self.jobs.values())


@dataclass
class VRPSolution:
    """Routes computed for a problem."""
    routes: List[VehicleRoute]
    cost: float = 0.0
