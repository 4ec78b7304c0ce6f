"""
Errors raised while building and rendering a VRP plot.

All of them are caught at the boundary of a single plot call
(see vrp_solution_plotter); none are meant to reach the optimization
pipeline that asked for the plot.
"""


class VRPPlotError(Exception):
    """Base class for plotting errors."""


class MissingLocationError(VRPPlotError):
    """A vehicle or job lacks a location id or a coordinate."""

    def __init__(self, message: str, location_id=None):
        super().__init__(message)
        self.location_id = location_id


class UnsupportedJobKindError(VRPPlotError):
    """A job kind the plotter does not know how to classify."""

    def __init__(self, job_id: str, kind):
        super().__init__(f"job {job_id} is of kind {kind}. this is not supported.")
        self.job_id = job_id
        self.kind = kind


class RenderIOError(VRPPlotError):
    """The render sink could not write the output image."""

    def __init__(self, output_path, cause: Exception):
        super().__init__(f"cannot write plot to {output_path}: {cause}")
        self.output_path = output_path
        self.cause = cause
