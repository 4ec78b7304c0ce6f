"""
VRP Plotting Package

Renders vehicle routing problems and their solutions to static PNG images:
depots and jobs as category markers, routes as lines on shared axes.

Modules:
- vrp_data_models: Data structures for problems, jobs, vehicles and routes
- vrp_locations: Location lookup used to place route stops
- vrp_series: Problem and solution series builders
- vrp_plot_composer: Combines problem and solution layers into one view
- vrp_render: matplotlib render sink
- vrp_solution_plotter: Entry points for plotting problems, routes and solutions
"""

from .vrp_data_models import (Coordinate, Job, JobKind, Vehicle, Start, End, TourActivity,
                              VehicleRoute, VRPInstance, VRPSolution)
from .vrp_exceptions import VRPPlotError, MissingLocationError, UnsupportedJobKindError, RenderIOError
from .vrp_locations import Locations, retrieve_locations
from .vrp_plot_config import PlotConfig
from .vrp_solution_plotter import (PlotResult, PlotStatus, plot_vrp_as_png, plot_routes_as_png,
                                   plot_solution_as_png)

__version__ = "1.0.0"
__author__ = "OQI Project"
__description__ = "Static plots of VRP problems and solutions"

__all__ = [
    'Coordinate',
    'Job',
    'JobKind',
    'Vehicle',
    'Start',
    'End',
    'TourActivity',
    'VehicleRoute',
    'VRPInstance',
    'VRPSolution',
    'VRPPlotError',
    'MissingLocationError',
    'UnsupportedJobKindError',
    'RenderIOError',
    'Locations',
    'retrieve_locations',
    'PlotConfig',
    'PlotResult',
    'PlotStatus',
    'plot_vrp_as_png',
    'plot_routes_as_png',
    'plot_solution_as_png',
]
