"""
Configuration for VRP plots.

Output dimensions and axis margin can be set via:
1. Environment variables (VRPPLOT_*), see PlotConfig.from_env()
2. Programmatic API (PlotConfig(...))

Category styles are fixed and not part of the configuration.
"""

import os
from dataclasses import dataclass
from typing import Dict, Any

# Fixed marker styles per problem category
CATEGORY_STYLES: Dict[str, Dict[str, Any]] = {
    'depot': {'c': 'red', 's': 120, 'marker': 's'},
    'service': {'c': 'orange', 's': 60, 'marker': 'o'},
    'pickup': {'c': 'green', 's': 70, 'marker': '^'},
    'delivery': {'c': 'blue', 's': 70, 'marker': 'v'},
}

BACKGROUND_COLOR = 'lightgray'
GRID_COLOR = 'white'
LABEL_COLOR = 'black'
ROUTE_COLORMAP = 'tab10'


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class PlotConfig:
    """
    Configuration for rendering a VRP plot.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        dpi: Resolution used to convert pixels into figure inches
        axis_margin: Fraction of the data extent added on each side of an axis
        show_labels: Draw job demands next to their markers
    """

    width: int = 1000
    height: int = 600
    dpi: int = 100
    axis_margin: float = 0.05
    show_labels: bool = True

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Plot dimensions must be positive, got {self.width}x{self.height}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if self.axis_margin < 0:
            raise ValueError(f"axis_margin must be non-negative, got {self.axis_margin}")

    @property
    def figsize(self):
        """Figure size in inches giving exactly width x height pixels."""
        return (self.width / self.dpi, self.height / self.dpi)

    @classmethod
    def from_env(cls) -> "PlotConfig":
        """Build a config from VRPPLOT_* environment variables, falling back to defaults."""
        kwargs = {}
        if os.environ.get('VRPPLOT_WIDTH'):
            kwargs['width'] = int(os.environ['VRPPLOT_WIDTH'])
        if os.environ.get('VRPPLOT_HEIGHT'):
            kwargs['height'] = int(os.environ['VRPPLOT_HEIGHT'])
        if os.environ.get('VRPPLOT_DPI'):
            kwargs['dpi'] = int(os.environ['VRPPLOT_DPI'])
        if os.environ.get('VRPPLOT_AXIS_MARGIN'):
            kwargs['axis_margin'] = float(os.environ['VRPPLOT_AXIS_MARGIN'])
        if os.environ.get('VRPPLOT_SHOW_LABELS'):
            kwargs['show_labels'] = _env_bool(os.environ['VRPPLOT_SHOW_LABELS'])
        return cls(**kwargs)
