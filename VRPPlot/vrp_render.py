"""
Render sink: draws a composed view to a PNG file with matplotlib.
"""

import logging
from abc import ABC, abstractmethod

import matplotlib.pyplot as plt
import seaborn as sns

from .vrp_exceptions import RenderIOError
from .vrp_plot_composer import ComposedView, LayerStyle, PlotLayer
from .vrp_plot_config import (BACKGROUND_COLOR, CATEGORY_STYLES, GRID_COLOR,
                              LABEL_COLOR, ROUTE_COLORMAP)

logger = logging.getLogger(__name__)


class RenderSink(ABC):
    """Turns a composed view into an image file."""

    @abstractmethod
    def render(self, view: ComposedView, title: str, output_path, width: int, height: int):
        """
        Write ``view`` to ``output_path`` as a width x height pixel image.

        Raises:
            RenderIOError: the image could not be written
        """


class MatplotlibRenderSink(RenderSink):
    """Static PNG rendering: gray background, white grid, markers for the problem, lines for routes."""

    def __init__(self, dpi: int = 100, show_labels: bool = True):
        self.dpi = dpi
        self.show_labels = show_labels

    def render(self, view: ComposedView, title: str, output_path, width: int, height: int):
        style = {'axes.facecolor': BACKGROUND_COLOR, 'grid.color': GRID_COLOR}
        with sns.axes_style('darkgrid', style):
            fig, ax = plt.subplots(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)
        try:
            for layer in view.layers:
                if layer.style is LayerStyle.MARKERS:
                    self._draw_markers(ax, layer)
                else:
                    self._draw_lines(ax, layer)

            ax.set_xlim(view.domain.lower, view.domain.upper)
            ax.set_ylim(view.range.lower, view.range.upper)
            ax.set_xlabel('X Coordinate')
            ax.set_ylabel('Y Coordinate')
            ax.set_title(title)
            if ax.get_legend_handles_labels()[1]:
                ax.legend(loc='upper right', fontsize=8)

            try:
                fig.savefig(output_path, dpi=self.dpi, format='png')
            except (OSError, ValueError) as e:
                raise RenderIOError(output_path, e) from e
            logger.info(f"Plot saved to {output_path}")
        finally:
            plt.close(fig)

    def _draw_markers(self, ax, layer: PlotLayer):
        for series in layer.data:
            points = series.as_array()
            style = CATEGORY_STYLES.get(series.key, {})
            ax.scatter(points[:, 0], points[:, 1], label=str(series.key), zorder=3, **style)
            if not (self.show_labels and layer.labels):
                continue
            for index, point in enumerate(series):
                label = layer.labels.get(series.key, index)
                if label is not None:
                    ax.annotate(label, (point.x, point.y), xytext=(5, 5),
                                textcoords='offset points', fontsize=7, color=LABEL_COLOR)

    def _draw_lines(self, ax, layer: PlotLayer):
        cmap = plt.get_cmap(ROUTE_COLORMAP)
        for i, series in enumerate(layer.data):
            points = series.as_array()
            ax.plot(points[:, 0], points[:, 1], color=cmap(i % cmap.N),
                    linewidth=2, alpha=0.7, label=f'route {series.key}', zorder=2)
