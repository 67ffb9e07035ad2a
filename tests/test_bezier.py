import numpy as np
import pytest

from bezierspline.model.bezier import (
    evaluate_cubic_bezier,
    evaluate_cubic_bezier_polynomial,
    reflect,
    sample_parameters,
    sample_segment,
)
from bezierspline.model.geometry_primitives import Vec2


def _s_curve() -> tuple[Vec2, Vec2, Vec2, Vec2]:
    return Vec2(100.0, 100.0), Vec2(180.0, 20.0), Vec2(260.0, 340.0), Vec2(400.0, 120.0)


def test_reflect_mirrors_through_pivot() -> None:
    assert reflect(Vec2(130.0, 90.0), Vec2(100.0, 100.0)) == Vec2(70.0, 110.0)
    assert reflect(Vec2(5.0, 5.0), Vec2(5.0, 5.0)) == Vec2(5.0, 5.0)


def test_polynomial_form_matches_de_casteljau() -> None:
    p0, p1, p2, p3 = _s_curve()
    for t in np.linspace(0.0, 1.0, 57):
        a = evaluate_cubic_bezier(p0, p1, p2, p3, float(t))
        b = evaluate_cubic_bezier_polynomial(p0, p1, p2, p3, float(t))
        assert a.x == pytest.approx(b.x, abs=1e-4)
        assert a.y == pytest.approx(b.y, abs=1e-4)


def test_evaluation_hits_end_points() -> None:
    p0, p1, p2, p3 = _s_curve()
    assert evaluate_cubic_bezier(p0, p1, p2, p3, 0.0) == p0
    end = evaluate_cubic_bezier(p0, p1, p2, p3, 1.0)
    assert end.x == pytest.approx(p3.x)
    assert end.y == pytest.approx(p3.y)


def test_sample_parameters_cover_closed_interval() -> None:
    t = sample_parameters(0.01)
    assert len(t) == 101
    assert t[0] == 0.0
    assert t[-1] == 1.0
    assert np.all(np.diff(t) > 0.0)


def test_sample_parameters_with_uneven_step() -> None:
    t = sample_parameters(0.3)
    np.testing.assert_allclose(t, [0.0, 0.3, 0.6, 0.9, 1.0])
    assert np.all(np.diff(t) > 0.0)


@pytest.mark.parametrize("step", [0.0, -0.1, 1.5])
def test_sample_parameters_rejects_invalid_step(step: float) -> None:
    with pytest.raises(ValueError):
        sample_parameters(step)


def test_sample_segment_starts_at_p0_and_ends_at_p3() -> None:
    p0, p1, p2, p3 = _s_curve()
    points = sample_segment(p0, p1, p2, p3)
    assert points.shape == (101, 2)
    np.testing.assert_allclose(points[0], p0.to_array())
    np.testing.assert_allclose(points[-1], p3.to_array(), atol=1e-9)


def test_sample_segment_agrees_with_pointwise_evaluation() -> None:
    p0, p1, p2, p3 = _s_curve()
    step = 0.05
    points = sample_segment(p0, p1, p2, p3, step)
    for t, row in zip(sample_parameters(step), points):
        expected = evaluate_cubic_bezier(p0, p1, p2, p3, float(t))
        np.testing.assert_allclose(row, expected.to_array(), atol=1e-4)


def test_degenerate_segment_is_a_straight_line() -> None:
    p0, p3 = Vec2(100.0, 100.0), Vec2(300.0, 100.0)
    points = sample_segment(p0, p0, p3, p3)
    np.testing.assert_allclose(points[:, 1], 100.0)
    assert np.all(np.diff(points[:, 0]) >= 0.0)
