#!/usr/bin/env python3
"""
Example: plot a small problem, its solution, and the bare routes.

Writes three PNG files into ./plots.
"""

import os
import sys
import logging

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from VRPPlot import (Coordinate, Job, Locations, PlotConfig, Vehicle, VehicleRoute, VRPInstance,
                     VRPSolution, plot_routes_as_png, plot_solution_as_png, plot_vrp_as_png)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_example_instance() -> VRPInstance:
    """Two depots, a few services, one pickup and one delivery."""
    instance = VRPInstance("Example")
    instance.add_vehicle(Vehicle("truck_1", "depot_A", Coordinate(0, 0), capacity=10))
    instance.add_vehicle(Vehicle("truck_2", "depot_B", Coordinate(20, 0), capacity=10))
    instance.add_job(Job.service("s1", "loc_s1", Coordinate(5, 5), 3))
    instance.add_job(Job.service("s2", "loc_s2", Coordinate(8, 12), 2))
    instance.add_job(Job.pickup("p1", "loc_p1", Coordinate(15, 8), 4))
    instance.add_job(Job.delivery("d1", "loc_d1", Coordinate(18, 14), 1))
    return instance


def create_example_solution(instance: VRPInstance) -> VRPSolution:
    jobs = instance.jobs
    routes = [
        VehicleRoute.from_vehicle(instance.vehicles["truck_1"], [jobs["s1"], jobs["s2"]]),
        VehicleRoute.from_vehicle(instance.vehicles["truck_2"], [jobs["p1"], jobs["d1"]]),
    ]
    return VRPSolution(routes)


def main():
    os.makedirs('plots', exist_ok=True)
    config = PlotConfig.from_env()

    instance = create_example_instance()
    solution = create_example_solution(instance)

    results = [
        plot_vrp_as_png(instance, 'plots/problem.png', f'VRP - {instance.name}', config),
        plot_solution_as_png(instance, solution, 'plots/solution.png', f'VRP Solution - {instance.name}', config),
    ]

    coords = {v.location_id: v.coord for v in instance.get_vehicles()}
    coords.update({j.location_id: j.coord for j in instance.get_jobs()})
    results.append(plot_routes_as_png(solution.routes, Locations(coords), 'plots/routes.png',
                                      f'Routes - {instance.name}', config))

    for result in results:
        logger.info(f"{result.output_path}: {result.status.value}")
    return all(result.success for result in results)


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
