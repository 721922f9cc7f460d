import pytest

from aotsim.attacker import Attacker
from aotsim.constants import ATTACKER_RESTRICTED_FRAMES
from aotsim.errors import EmptyAttackerPathError
from aotsim.models import AttackerType, NewAttackerPath

ALLOWED = ATTACKER_RESTRICTED_FRAMES + 1
RESTRICTED = ATTACKER_RESTRICTED_FRAMES


def make_type(speed, max_health=50):
    return AttackerType(
        id=7, max_health=max_health, speed=speed, amt_of_emps=2, level=1, cost=10
    )


def straight_path(length, emp_at=None):
    return [
        NewAttackerPath(
            y_coord=step,
            x_coord=0,
            is_emp=(step == emp_at),
            emp_type=1 if step == emp_at else None,
            emp_time=4 if step == emp_at else None,
        )
        for step in range(length)
    ]


def test_from_path_numbers_and_reverses():
    path = straight_path(4, emp_at=2)
    attacker = Attacker.from_path(path, make_type(speed=2), attacker_id=9)
    assert [step.id for step in attacker.path] == [4, 3, 2, 1]
    assert attacker.path[-1].y_coord == path[0].y_coord
    assert attacker.emps_used == 1
    assert attacker.health == 50
    assert attacker.is_alive is True
    assert attacker.attacker_type == 7
    assert attacker.id == 9


def test_move_before_allowed_keeps_position():
    attacker = Attacker.from_path(straight_path(5), make_type(speed=2), 1)
    attacker.move_attacker(RESTRICTED)
    assert len(attacker.path_in_current_frame) == 1
    assert attacker.path_in_current_frame[0].attacker_path.id == 1
    assert len(attacker.path) == 5


def test_move_then_post_simulate_advances_by_speed():
    attacker = Attacker.from_path(straight_path(5), make_type(speed=2), 1)
    attacker.move_attacker(ALLOWED)
    ids = [s.attacker_path.id for s in attacker.path_in_current_frame]
    assert ids == [3, 2, 1]

    renders = attacker.post_simulate()
    assert len(renders) == attacker.speed
    assert [r.y_position for r in renders] == [1, 2]
    assert all(r.is_alive for r in renders)
    assert attacker.path[-1].id == 3
    assert [step.id for step in attacker.path] == [5, 4, 3]
    assert attacker.path_in_current_frame == []


def test_post_simulate_pads_when_restricted():
    attacker = Attacker.from_path(straight_path(3), make_type(speed=3), 1)
    attacker.move_attacker(RESTRICTED)
    renders = attacker.post_simulate()
    assert len(renders) == 3
    assert {(r.x_position, r.y_position) for r in renders} == {(0, 0)}
    assert attacker.path[-1].id == 1


def test_is_planted():
    attacker = Attacker.from_path(straight_path(4), make_type(speed=2), 1)
    assert attacker.is_planted(1) is True
    assert attacker.is_planted(2) is False


def test_is_planted_empty_path():
    attacker = Attacker.from_path([], make_type(speed=2), 1)
    with pytest.raises(EmptyAttackerPathError):
        attacker.is_planted(1)


def test_get_damage_clamps_at_zero():
    attacker = Attacker.from_path(straight_path(4), make_type(speed=3), 1)
    attacker.move_attacker(ALLOWED)
    attacker.get_damage(100, 1)
    frame = attacker.path_in_current_frame
    assert [s.health for s in frame[:2]] == [0, 0]
    assert [s.is_alive for s in frame] == [False, False, True, True]
    assert frame[3].health == 50


def test_attacker_stops_where_it_died():
    attacker = Attacker.from_path(straight_path(4), make_type(speed=3), 1)
    attacker.move_attacker(ALLOWED)
    attacker.get_damage(100, 1)
    renders = attacker.post_simulate()
    assert [r.is_alive for r in renders] == [True, False, False]
    assert attacker.is_alive is False
    assert attacker.health == 0
    assert attacker.path[-1].id == 3
    assert [step.id for step in attacker.path] == [4, 3]


def test_render_reports_emp_id():
    attacker = Attacker.from_path(straight_path(3, emp_at=1), make_type(speed=2), 1)
    attacker.move_attacker(ALLOWED)
    renders = attacker.post_simulate()
    emp_renders = [r for r in renders if r.y_position == 1]
    assert emp_renders and all(r.emp_id == 2 for r in emp_renders)
    assert all(r.emp_id == 0 for r in renders if r.y_position != 1)