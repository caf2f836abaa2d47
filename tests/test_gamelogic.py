import random

import pytest

from devlife.gamelogic import (
    MoneyPower,
    MovePower,
    Player,
    SkipPower,
    StealPower,
    SuperMovePower,
    random_powerup,
)


class FixedRng:
    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def make_pair():
    log = []

    def notifier(player, message):
        log.append((player.name, message))

    a = Player("Alice", notifier)
    b = Player("Bob", notifier)
    a.opponent = b
    b.opponent = a
    return a, b, log


def test_new_player_defaults():
    p = Player("Alice")
    assert p.position == 0
    assert p.money == 0
    assert p.income_percent == pytest.approx(100.0)
    assert p.powerups == []
    assert not p.finished
    assert not p.skip_next_turn


def test_is_cpu():
    assert Player("CPU").is_cpu
    assert not Player("cpu").is_cpu


def test_move_backward_clamps_at_zero():
    p = Player("Alice")
    p.move_forward(2)
    p.move_backward(5)
    assert p.position == 0


def test_move_forward_then_backward():
    p = Player("Alice")
    p.move_forward(7)
    p.move_backward(3)
    assert p.position == 4


def test_modify_income_accumulates():
    p = Player("Alice")
    p.modify_income(0.25)
    p.modify_income(-0.25)
    assert p.income_percent == pytest.approx(100.0)


@pytest.mark.parametrize(
    "index, kind, name",
    [
        (0, MovePower, "Job Promotion"),
        (1, StealPower, "Bank Account Hack"),
        (2, MoneyPower, "Energy Drink"),
        (3, SkipPower, "Time Freeze"),
        (4, SuperMovePower, "Speed Boost"),
    ],
)
def test_random_powerup_mapping(index, kind, name):
    power = random_powerup(FixedRng(index))
    assert isinstance(power, kind)
    assert power.name == name


def test_give_random_powerup_adds_and_notifies():
    a, _, log = make_pair()
    power = a.give_random_powerup(FixedRng(2))
    assert a.powerups == [power]
    assert log == [("Alice", "Gained Power-Up: Energy Drink!")]


def test_give_random_powerup_with_real_rng():
    a = Player("Alice")
    rng = random.Random(7)
    for _ in range(20):
        a.give_random_powerup(rng)
    assert len(a.powerups) == 20


def test_move_power():
    a, _, log = make_pair()
    MovePower().apply(a)
    assert a.position == 3
    assert a.income_multiplier > 1.0
    assert a.used_powerup_this_turn
    assert "Job Promotion" in log[-1][1]


def test_super_move_power():
    a, _, _ = make_pair()
    SuperMovePower().apply(a)
    assert a.position == 6
    assert a.used_powerup_this_turn


def test_money_power():
    a, _, _ = make_pair()
    a.used_powerup_this_turn = True
    MoneyPower().apply(a)
    assert a.money == 1000
    assert not a.used_powerup_this_turn


def test_steal_power_conserves_money():
    a, b, log = make_pair()
    b.add_money(1000)
    StealPower().apply(a)
    assert a.money > 0
    assert b.money < 1000
    assert a.money + b.money == 1000
    assert f"${a.money}" in log[-1][1]


def test_steal_power_broke_opponent_gets_debt():
    a, b, _ = make_pair()
    StealPower().apply(a)
    assert b.money == -3000
    assert a.money == 0


def test_steal_power_without_opponent():
    log = []
    a = Player("Solo", lambda p, m: log.append(m))
    StealPower().apply(a)
    assert a.money == 0
    assert log == ["No opponent to steal from!"]


def test_skip_power():
    a, b, _ = make_pair()
    SkipPower().apply(a)
    assert b.skip_next_turn
    assert not a.skip_next_turn
    b.clear_skip_turn()
    assert not b.skip_next_turn


def test_skip_power_without_opponent():
    log = []
    a = Player("Solo", lambda p, m: log.append(m))
    SkipPower().apply(a)
    assert log == ["No opponent to skip!"]


def test_use_powerup_removes_it():
    a, _, _ = make_pair()
    a.add_power(MoneyPower())
    a.add_power(SuperMovePower())
    used = a.use_powerup(1)
    assert isinstance(used, SuperMovePower)
    assert [p.name for p in a.powerups] == ["Energy Drink"]
    assert a.position == 6


@pytest.mark.parametrize("index", [-1, 0, 3])
def test_use_powerup_bad_index(index):
    a = Player("Alice")
    with pytest.raises(IndexError):
        a.use_powerup(index)


def test_reset_for_new_game_keeps_income_and_powerups():
    a = Player("CPU")
    a.move_forward(10)
    a.add_money(500)
    a.modify_income(0.5)
    a.add_power(MovePower())
    a.mark_finished()
    a.reset_for_new_game()
    assert (a.position, a.money, a.finished) == (0, 0, False)
    assert a.income_multiplier > 1.0
    assert len(a.powerups) == 1


def test_notify_without_notifier_is_silent():
    a = Player("Alice")
    a.notify("hello")
    a.add_money(-200)
    assert a.money == -200