"""
Tests for the plotting entry points.
"""

import logging

import pytest

from VRPPlot import (Coordinate, Job, Locations, PlotConfig, PlotStatus, Vehicle, VehicleRoute,
                     VRPInstance, VRPSolution, plot_routes_as_png, plot_solution_as_png,
                     plot_vrp_as_png)
from VRPPlot.vrp_exceptions import RenderIOError
from VRPPlot.vrp_plot_composer import LayerStyle
from VRPPlot.vrp_render import RenderSink

PLOTTER_LOGGER = 'VRPPlot.vrp_solution_plotter'


class FailingSink(RenderSink):
    def render(self, view, title, output_path, width, height):
        raise RenderIOError(output_path, OSError("disk full"))


def series_content(view):
    return [[(s.key, [p.as_tuple() for p in s]) for s in layer.data] for layer in view.layers]


def warnings_of(caplog):
    return [r for r in caplog.records if r.name == PLOTTER_LOGGER and r.levelno == logging.WARNING]


def test_plot_solution_scenario(tmp_path, simple_instance, simple_solution):
    output = tmp_path / "solution.png"
    result = plot_solution_as_png(simple_instance, simple_solution, str(output), "simple")

    assert result.success
    assert output.exists()
    problem, solution = series_content(result.view)
    assert problem == [('depot', [(0, 0), (10, 0)]), ('service', [(5, 5)])]
    assert solution == [(1, [(0, 0), (5, 5), (10, 0)])]
    assert result.view.problem.labels.get('service', 0) == "3"


def test_plot_vrp_is_markers_only(tmp_path, mixed_instance):
    output = tmp_path / "problem.png"
    result = plot_vrp_as_png(mixed_instance, str(output), "mixed")

    assert result.status is PlotStatus.SUCCESS
    assert output.exists()
    assert [layer.style for layer in result.view.layers] == [LayerStyle.MARKERS]
    assert len(result.view.problem.data.get_series('depot')) == len(mixed_instance.vehicles)


def test_plot_routes_uses_supplied_locations(simple_instance, simple_solution, recording_sink):
    locations = Locations({"depot_1": Coordinate(0, 0), "depot_2": Coordinate(10, 0),
                           "loc_s1": Coordinate(5, 5)})
    result = plot_routes_as_png(simple_solution.routes, locations, "routes.png", "routes",
                                sink=recording_sink)

    assert result.success
    problem, solution = series_content(result.view)
    # v2 drives an empty route but still shows up as a depot
    assert problem == [('depot', [(0, 0), (10, 0)]), ('service', [(5, 5)])]
    assert solution == [(1, [(0, 0), (5, 5), (10, 0)])]
    call, = recording_sink.calls
    assert (call['title'], call['output_path'], call['width'], call['height']) == ("routes", "routes.png", 1000, 600)


def test_plot_routes_with_incomplete_locations_is_abandoned(simple_solution, recording_sink, caplog):
    with caplog.at_level(logging.WARNING):
        result = plot_routes_as_png(simple_solution.routes, Locations({}), "routes.png", "routes",
                                    sink=recording_sink)

    assert result.status is PlotStatus.MISSING_LOCATION
    assert recording_sink.calls == []
    assert len(warnings_of(caplog)) == 1


@pytest.mark.parametrize("plot", ["vrp", "solution"])
def test_missing_service_coordinate_writes_nothing(tmp_path, simple_instance, simple_solution, caplog, plot):
    simple_instance.add_job(Job.service("s2", "loc_s2", None, 1))
    output = tmp_path / "broken.png"

    with caplog.at_level(logging.WARNING):
        if plot == "vrp":
            result = plot_vrp_as_png(simple_instance, str(output), "broken")
        else:
            result = plot_solution_as_png(simple_instance, simple_solution, str(output), "broken")

    assert result.status is PlotStatus.MISSING_LOCATION
    assert result.view is None
    assert not output.exists()
    assert len(warnings_of(caplog)) == 1


def test_vehicle_without_location_id_abandons_solution_plot(tmp_path, simple_solution):
    instance = VRPInstance("no ids")
    instance.add_vehicle(Vehicle("v1", None, Coordinate(0, 0)))
    output = tmp_path / "solution.png"

    result = plot_solution_as_png(instance, simple_solution, str(output), "no ids")

    assert result.status is PlotStatus.MISSING_LOCATION
    assert not output.exists()


def test_unsupported_job_kind_is_reported_not_raised(tmp_path, simple_instance, caplog):
    simple_instance.add_job(Job.shipment("sh1", "loc_sh1", Coordinate(3, 3), 2))
    output = tmp_path / "shipment.png"

    with caplog.at_level(logging.ERROR):
        result = plot_vrp_as_png(simple_instance, str(output), "shipment")

    assert result.status is PlotStatus.UNSUPPORTED_JOB_KIND
    assert not output.exists()
    assert any(r.levelno == logging.ERROR and "sh1" in r.getMessage() for r in caplog.records)


def test_unsupported_job_kind_inside_routes(simple_instance, recording_sink):
    vehicle = simple_instance.vehicles["v1"]
    shipment = Job.shipment("sh1", "loc_sh1", Coordinate(3, 3), 2)
    locations = Locations({"depot_1": Coordinate(0, 0), "loc_sh1": Coordinate(3, 3)})

    result = plot_routes_as_png([VehicleRoute.from_vehicle(vehicle, [shipment])], locations,
                                "routes.png", "routes", sink=recording_sink)

    assert result.status is PlotStatus.UNSUPPORTED_JOB_KIND
    assert recording_sink.calls == []


def test_render_failure_is_logged_not_raised(simple_instance, simple_solution, caplog):
    with caplog.at_level(logging.ERROR):
        result = plot_solution_as_png(simple_instance, simple_solution, "out.png", "fails",
                                      sink=FailingSink())

    assert result.status is PlotStatus.RENDER_FAILED
    assert result.view is not None
    assert any(r.levelno == logging.ERROR and "disk full" in r.getMessage() for r in caplog.records)


def test_render_failure_from_real_sink(tmp_path, simple_instance):
    output = tmp_path / "does" / "not" / "exist.png"
    result = plot_vrp_as_png(simple_instance, str(output), "fails")

    assert result.status is PlotStatus.RENDER_FAILED
    assert not output.exists()


def test_plotting_twice_gives_identical_series(tmp_path, simple_instance, simple_solution):
    first = plot_solution_as_png(simple_instance, simple_solution, str(tmp_path / "a.png"), "run")
    second = plot_solution_as_png(simple_instance, simple_solution, str(tmp_path / "b.png"), "run")

    assert first.success and second.success
    assert series_content(first.view) == series_content(second.view)
    assert first.view.domain == second.view.domain
    assert first.view.range == second.view.range


def test_config_controls_dimensions_and_margin(simple_instance, recording_sink):
    config = PlotConfig(width=800, height=400, axis_margin=0.0)
    result = plot_vrp_as_png(simple_instance, "p.png", "sized", config=config, sink=recording_sink)

    call, = recording_sink.calls
    assert (call['width'], call['height']) == (800, 400)
    assert (result.view.domain.lower, result.view.domain.upper) == (0.0, 10.0)


def test_range_axis_contains_every_point(tmp_path):
    instance = VRPInstance("spread")
    instance.add_vehicle(Vehicle("v1", "d", Coordinate(-3, -7)))
    jobs = [Job.service("a", "la", Coordinate(2, 40), 1), Job.delivery("b", "lb", Coordinate(9, -12), 1)]
    for job in jobs:
        instance.add_job(job)
    solution = VRPSolution([VehicleRoute.from_vehicle(instance.vehicles["v1"], jobs)])

    for result in (plot_vrp_as_png(instance, str(tmp_path / "p.png"), "p"),
                   plot_solution_as_png(instance, solution, str(tmp_path / "s.png"), "s")):
        for layer in result.view.layers:
            for series in layer.data:
                assert all(result.view.range.contains(p.y) for p in series)
