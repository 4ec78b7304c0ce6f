"""
Shared pytest fixtures for VRPPlot tests.
"""

import matplotlib
matplotlib.use('Agg')

import pytest

from VRPPlot.vrp_data_models import Coordinate, Job, Vehicle, VehicleRoute, VRPInstance, VRPSolution
from VRPPlot.vrp_render import RenderSink


class RecordingSink(RenderSink):
    """Render sink that records its calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def render(self, view, title, output_path, width, height):
        self.calls.append({'view': view, 'title': title, 'output_path': output_path,
                           'width': width, 'height': height})


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def simple_instance():
    """Two depots and one service job at (5, 5) with demand 3."""
    instance = VRPInstance("simple")
    instance.add_vehicle(Vehicle("v1", "depot_1", Coordinate(0, 0)))
    instance.add_vehicle(Vehicle("v2", "depot_2", Coordinate(10, 0)))
    instance.add_job(Job.service("s1", "loc_s1", Coordinate(5, 5), 3))
    return instance


@pytest.fixture
def simple_solution(simple_instance):
    """v1 leaves depot_1, serves s1 and ends at depot_2; v2 stays home."""
    v1 = simple_instance.vehicles["v1"]
    v2 = simple_instance.vehicles["v2"]
    route = VehicleRoute.from_vehicle(v1, [simple_instance.jobs["s1"]])
    route.end.location_id = "depot_2"
    return VRPSolution([route, VehicleRoute.from_vehicle(v2)])


@pytest.fixture
def mixed_instance():
    """Every single-location job kind, interleaved."""
    instance = VRPInstance("mixed")
    instance.add_vehicle(Vehicle("v1", "depot", Coordinate(0, 0)))
    instance.add_job(Job.pickup("p1", "lp1", Coordinate(1, 2), 4))
    instance.add_job(Job.service("s1", "ls1", Coordinate(3, 4), 1))
    instance.add_job(Job.delivery("d1", "ld1", Coordinate(5, 6), 2.5))
    instance.add_job(Job.pickup("p2", "lp2", Coordinate(7, 8), 0))
    return instance
