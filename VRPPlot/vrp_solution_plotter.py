"""
Plots a vehicle routing problem, and optionally its routes, to a PNG file.

Plotting is a diagnostic aid run at the end of an optimization: every entry
point returns a PlotResult instead of raising, so a failed plot never breaks
the caller. Vehicles and jobs need locations and coordinates; otherwise a
warning is logged and nothing is written.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from .vrp_data_models import VehicleRoute, VRPInstance, VRPSolution
from .vrp_exceptions import MissingLocationError, RenderIOError, UnsupportedJobKindError
from .vrp_locations import Locations, retrieve_locations
from .vrp_plot_composer import ComposedView, compose_plot
from .vrp_plot_config import PlotConfig
from .vrp_render import MatplotlibRenderSink, RenderSink
from .vrp_series import (LabelMap, SeriesCollection, make_solution_series,
                         make_vrp_series_from_problem, make_vrp_series_from_routes)

logger = logging.getLogger(__name__)


class PlotStatus(Enum):
    """Outcome of a plot call."""
    SUCCESS = "success"
    MISSING_LOCATION = "missing_location"
    UNSUPPORTED_JOB_KIND = "unsupported_job_kind"
    RENDER_FAILED = "render_failed"


@dataclass
class PlotResult:
    """Result of a plot call; ``view`` is set whenever the series could be built."""
    status: PlotStatus
    output_path: str
    view: Optional[ComposedView] = None

    @property
    def success(self) -> bool:
        return self.status is PlotStatus.SUCCESS


SeriesBuilder = Callable[[LabelMap], Tuple[SeriesCollection, Optional[SeriesCollection]]]


def plot_vrp_as_png(vrp: VRPInstance, png_file: str, title: str,
                    config: Optional[PlotConfig] = None,
                    sink: Optional[RenderSink] = None) -> PlotResult:
    """Plot the problem only: depots and jobs as markers."""
    logger.info(f"plot vrp to {png_file}")

    def build(labels):
        return make_vrp_series_from_problem(vrp, labels), None

    return _plot(build, png_file, title, config, sink)


def plot_routes_as_png(routes: Iterable[VehicleRoute], locations: Locations, png_file: str, title: str,
                       config: Optional[PlotConfig] = None,
                       sink: Optional[RenderSink] = None) -> PlotResult:
    """
    Plot routes together with the vehicles and jobs they serve.

    Args:
        routes: Routes to draw; empty routes are skipped
        locations: Coordinates for every stop of every route
        png_file: Target path with filename
        title: Chart title
    """
    logger.info(f"plot routes to {png_file}")
    routes = list(routes)

    def build(labels):
        return make_vrp_series_from_routes(routes, labels), make_solution_series(routes, locations)

    return _plot(build, png_file, title, config, sink)


def plot_solution_as_png(vrp: VRPInstance, solution: VRPSolution, png_file: str, title: str,
                         config: Optional[PlotConfig] = None,
                         sink: Optional[RenderSink] = None) -> PlotResult:
    """Plot a problem and its solution; stop coordinates come from the problem's vehicles and jobs."""
    logger.info(f"plot solution to {png_file}")

    def build(labels):
        problem = make_vrp_series_from_problem(vrp, labels)
        return problem, make_solution_series(solution.routes, retrieve_locations(vrp))

    return _plot(build, png_file, title, config, sink)


def _plot(build: SeriesBuilder, png_file: str, title: str,
          config: Optional[PlotConfig], sink: Optional[RenderSink]) -> PlotResult:
    config = config or PlotConfig()
    sink = sink or MatplotlibRenderSink(dpi=config.dpi, show_labels=config.show_labels)
    labels = LabelMap()
    try:
        problem, solution = build(labels)
    except MissingLocationError as e:
        logger.warning(f"cannot plot vrp, since coord is missing ({e})")
        return PlotResult(PlotStatus.MISSING_LOCATION, png_file)
    except UnsupportedJobKindError as e:
        logger.error(f"cannot plot vrp: {e}")
        return PlotResult(PlotStatus.UNSUPPORTED_JOB_KIND, png_file)

    view = compose_plot(problem, solution, labels, margin=config.axis_margin)
    try:
        sink.render(view, title, png_file, config.width, config.height)
    except RenderIOError as e:
        logger.error(f"cannot plot: {e}")
        return PlotResult(PlotStatus.RENDER_FAILED, png_file, view)
    return PlotResult(PlotStatus.SUCCESS, png_file, view)
