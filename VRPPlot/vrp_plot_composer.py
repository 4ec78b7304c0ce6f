"""
Combines problem markers and solution lines into one view with shared axes.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .vrp_series import LabelMap, SeriesCollection

logger = logging.getLogger(__name__)

DEFAULT_MARGIN = 0.05
# Half-width used when all values on an axis coincide
DEGENERATE_PADDING = 0.5
DEFAULT_RANGE = (0.0, 1.0)


class LayerStyle(Enum):
    """How the series of a layer are drawn."""
    MARKERS = "markers"
    LINES = "lines"


@dataclass(frozen=True)
class AxisRange:
    """Closed interval shown on one axis."""
    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    @property
    def length(self) -> float:
        return self.upper - self.lower


@dataclass
class PlotLayer:
    """A series collection and the way it is drawn."""
    data: SeriesCollection
    style: LayerStyle
    labels: Optional[LabelMap] = None


@dataclass
class ComposedView:
    """Layers sharing one domain (x) and one range (y) axis, ready for rendering."""
    layers: List[PlotLayer] = field(default_factory=list)
    domain: AxisRange = AxisRange(*DEFAULT_RANGE)
    range: AxisRange = AxisRange(*DEFAULT_RANGE)

    @property
    def problem(self) -> PlotLayer:
        return self.layers[0]

    @property
    def solution(self) -> Optional[PlotLayer]:
        return self.layers[1] if len(self.layers) > 1 else None

    def has_solution(self) -> bool:
        return self.solution is not None


def range_with_margins(bounds: Optional[Tuple[float, float]], margin: float = DEFAULT_MARGIN) -> AxisRange:
    """
    Expand (min, max) by ``margin`` times its length on both sides.

    A zero-length interval is widened by DEGENERATE_PADDING around its value,
    missing bounds give DEFAULT_RANGE.
    """
    if bounds is None:
        return AxisRange(*DEFAULT_RANGE)
    lower, upper = bounds
    length = upper - lower
    if length <= 0:
        return AxisRange(lower - DEGENERATE_PADDING, upper + DEGENERATE_PADDING)
    return AxisRange(lower - margin * length, upper + margin * length)


def _union(a: Optional[Tuple[float, float]], b: Optional[Tuple[float, float]]) -> Optional[Tuple[float, float]]:
    if a is None:
        return b
    if b is None:
        return a
    return min(a[0], b[0]), max(a[1], b[1])


def compose_plot(problem: SeriesCollection,
                 solution: Optional[SeriesCollection] = None,
                 labels: Optional[LabelMap] = None,
                 margin: float = DEFAULT_MARGIN) -> ComposedView:
    """
    Build the view handed to the render sink.

    Layer 0 draws the problem as unconnected markers. When a solution is given,
    layer 1 draws its routes as lines on the same axes, and both axis ranges
    cover the points of both layers so no route is clipped.
    """
    domain_bounds = problem.domain_bounds()
    range_bounds = problem.range_bounds()
    layers = [PlotLayer(problem, LayerStyle.MARKERS, labels)]

    if solution is not None:
        domain_bounds = _union(domain_bounds, solution.domain_bounds())
        range_bounds = _union(range_bounds, solution.range_bounds())
        layers.append(PlotLayer(solution, LayerStyle.LINES))

    view = ComposedView(layers,
                        range_with_margins(domain_bounds, margin),
                        range_with_margins(range_bounds, margin))
    logger.debug(f"Composed view with {len(layers)} layer(s), domain {view.domain}, range {view.range}")
    return view
