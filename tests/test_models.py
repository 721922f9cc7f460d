import dataclasses

import pytest

from aotsim.models import (
    AttackerPath,
    BlockCategory,
    Game,
    NewAttacker,
    NewAttackerPath,
    UpdateUser,
    User,
)


def _user():
    return User(
        id=5,
        name="Alice",
        email="alice@example.com",
        username="alice_one",
        is_pragyan=False,
        attacks_won=2,
        defenses_won=3,
        trophies=1000,
        avatar_id=1,
        artifacts=0,
    )


def test_update_user_changes_only_given_fields():
    updated = UpdateUser(username="new_name").apply(_user())
    assert updated.username == "new_name"
    assert updated.name == "Alice"
    assert updated.avatar_id == 1


def test_update_user_does_not_mutate_original():
    original = _user()
    UpdateUser(name="Bob", avatar_id=4).apply(original)
    assert original.name == "Alice"
    assert original.avatar_id == 1


def test_empty_update_keeps_user_equal():
    original = _user()
    assert UpdateUser().apply(original) == original


def test_update_user_all_fields():
    updated = UpdateUser(name="Bob", username="bobby_b", avatar_id=9).apply(_user())
    assert (updated.name, updated.username, updated.avatar_id) == ("Bob", "bobby_b", 9)


def test_block_category_round_trip():
    for category in BlockCategory:
        assert BlockCategory(category.value) is category
    assert BlockCategory("mine") is BlockCategory.MINE


def test_new_attacker_from_dict():
    data = {
        "attacker_type": 2,
        "attacker_path": [
            {"y_coord": 1, "x_coord": 2, "is_emp": False},
            {"y_coord": 3, "x_coord": 4, "is_emp": True, "emp_type": 1, "emp_time": 60},
        ],
    }
    attacker = NewAttacker.from_dict(data)
    assert attacker.attacker_type == 2
    assert attacker.attacker_path[0] == NewAttackerPath(y_coord=1, x_coord=2, is_emp=False)
    assert attacker.attacker_path[1].emp_time == 60
    assert attacker.attacker_path[0].emp_type is None


def test_attacker_path_is_immutable():
    step = AttackerPath(id=1, y_coord=0, x_coord=0, is_emp=False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        step.x_coord = 3  # type: ignore[misc]
    assert step.x_coord == 0
    assert step.id == 1


def test_game_to_dict_round_trip():
    game = Game(
        id=1,
        attack_id=2,
        defend_id=3,
        map_layout_id=4,
        attack_score=60,
        defend_score=-60,
        artifacts_collected=0,
        emps_used=1,
        is_attacker_alive=True,
        damage_done=60,
    )
    assert Game(**game.to_dict()) == game
    assert _user().to_dict()["email"] == "alice@example.com"