import pytest

from bezierspline.model.curve import Curve, Hit, Knot
from bezierspline.model.geometry_primitives import Vec2


def test_append_knot_places_handles_on_the_knot() -> None:
    curve = Curve()
    index = curve.append_knot(Vec2(10.0, 20.0))
    assert index == 0
    knot = curve.knot(0)
    assert knot.position == Vec2(10.0, 20.0)
    for cp in knot.control_points:
        assert cp.position == Vec2(10.0, 20.0)
        assert cp.active


def test_append_knot_copies_the_position() -> None:
    curve = Curve()
    pos = Vec2(1.0, 2.0)
    curve.append_knot(pos)
    pos.x = 99.0
    knot = curve.knot(0)
    assert knot.position == Vec2(1.0, 2.0)
    assert knot.outgoing.position is not knot.incoming.position


def test_append_beyond_capacity_leaves_model_unchanged() -> None:
    curve = Curve(capacity=3)
    for i in range(3):
        assert curve.append_knot(Vec2(i, i)) == i
    assert curve.is_full
    assert curve.append_knot(Vec2(50.0, 50.0)) is None
    assert curve.knot_count == 3
    assert curve.knot(2).position == Vec2(2.0, 2.0)


def test_invalid_capacity_is_rejected() -> None:
    with pytest.raises(ValueError):
        Curve(capacity=0)


def test_segment_count() -> None:
    curve = Curve()
    assert curve.segment_count() == 0
    curve.append_knot(Vec2(0.0, 0.0))
    assert curve.segment_count() == 0
    curve.append_knot(Vec2(1.0, 0.0))
    curve.append_knot(Vec2(2.0, 0.0))
    assert curve.segment_count() == 2
    assert len(list(curve.segments())) == 2


def test_segment_control_points_use_facing_handles() -> None:
    curve = Curve()
    curve.append_knot(Vec2(0.0, 0.0))
    curve.append_knot(Vec2(100.0, 0.0))
    curve.knot(0).outgoing.position = Vec2(30.0, -40.0)
    curve.knot(0).incoming.position = Vec2(-30.0, 40.0)
    curve.knot(1).incoming.position = Vec2(70.0, 40.0)
    curve.knot(1).outgoing.position = Vec2(130.0, -40.0)

    p0, p1, p2, p3 = curve.segment_control_points(0)
    assert p0 == Vec2(0.0, 0.0)
    assert p1 == Vec2(30.0, -40.0)
    assert p2 == Vec2(70.0, 40.0)
    assert p3 == Vec2(100.0, 0.0)


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_segment_control_points_out_of_range(index: int) -> None:
    curve = Curve()
    curve.append_knot(Vec2(0.0, 0.0))
    curve.append_knot(Vec2(1.0, 0.0))
    with pytest.raises(IndexError):
        curve.segment_control_points(index)


def test_knot_index_out_of_range() -> None:
    curve = Curve()
    with pytest.raises(IndexError):
        curve.knot(0)
    curve.append_knot(Vec2(0.0, 0.0))
    with pytest.raises(IndexError):
        curve.knot(0).handle(2)


def test_clear_is_idempotent() -> None:
    curve = Curve()
    curve.append_knot(Vec2(0.0, 0.0))
    curve.clear()
    assert curve.knot_count == 0
    curve.clear()
    assert curve.knot_count == 0
    assert curve.append_knot(Vec2(5.0, 5.0)) == 0


def test_translate_moves_knot_and_handles_rigidly() -> None:
    knot = Knot.at(Vec2(10.0, 10.0))
    knot.outgoing.position = Vec2(20.0, 5.0)
    knot.incoming.position = Vec2(0.0, 15.0)
    knot.translate(Vec2(3.0, -4.0))
    assert knot.position == Vec2(13.0, 6.0)
    assert knot.outgoing.position == Vec2(23.0, 1.0)
    assert knot.incoming.position == Vec2(3.0, 11.0)


def test_hit_test_prefers_handles_then_lower_index() -> None:
    curve = Curve()
    curve.append_knot(Vec2(100.0, 100.0))
    curve.append_knot(Vec2(105.0, 100.0))
    # both knots' handles sit on their anchors, so a handle of knot 0 wins
    assert curve.hit_test(Vec2(102.0, 100.0), 15.0) == Hit(knot_index=0, handle_index=0)


def test_hit_test_knot_body_when_handles_are_away() -> None:
    curve = Curve()
    curve.append_knot(Vec2(100.0, 100.0))
    knot = curve.knot(0)
    knot.outgoing.position = Vec2(200.0, 100.0)
    knot.incoming.position = Vec2(0.0, 100.0)
    hit = curve.hit_test(Vec2(100.0, 100.0), 15.0)
    assert hit == Hit(knot_index=0)
    assert not hit.is_handle
    assert curve.hit_test(Vec2(195.0, 100.0), 15.0) == Hit(knot_index=0, handle_index=1)
    assert curve.hit_test(Vec2(150.0, 150.0), 15.0) is None


def test_hit_test_radius_is_inclusive() -> None:
    curve = Curve()
    curve.append_knot(Vec2(0.0, 0.0))
    assert curve.hit_test(Vec2(15.0, 0.0), 15.0) is not None
    assert curve.hit_test(Vec2(15.5, 0.0), 15.0) is None
