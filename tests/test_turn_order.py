import random

import pytest

from castcaper.turn_order import Combatant, TurnOrder


class FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_empty_combatants_rejected():
    with pytest.raises(ValueError):
        TurnOrder([])


def test_initial_state():
    order = TurnOrder([Combatant(10)])
    assert order.global_progress == 100.0
    assert order.cycle == 1
    assert order.next_turn is None


def test_roll_party_midpoint_uses_haste_directly():
    order = TurnOrder([Combatant(20)], FixedRng(0.5))
    assert order.roll(0) == pytest.approx(100 - 20)
    assert order.turn_cd[0] == pytest.approx(100 - 20)


def test_roll_enemy_midpoint_uses_haste_directly():
    order = TurnOrder([Combatant(30, enemy=True)], FixedRng(0.5))
    assert order.roll(0) == pytest.approx(100 - 30)


def test_roll_party_bounds():
    low = TurnOrder([Combatant(40)], FixedRng(0.0)).roll(0)
    high = TurnOrder([Combatant(40)], FixedRng(1.0)).roll(0)
    assert low == pytest.approx(100 - 40 * 0.9)
    assert high == pytest.approx(100 - 40 * 1.1)


def test_roll_enemy_bounds_with_real_rng():
    order = TurnOrder([Combatant(40, enemy=True)], random.Random(7))
    for _ in range(200):
        cd = order.roll(0)
        assert 100 - 40 * 1.25 <= cd <= 100 - 40 * 0.75


def test_select_next_picks_lowest_living():
    order = TurnOrder([Combatant(1), Combatant(1), Combatant(1, enemy=True, alive=False)])
    order.turn_cd = [50.0, 30.0, 10.0]
    assert order.select_next() == 1
    assert order.next_turn == 1


def test_select_next_skips_dead_first_ally():
    order = TurnOrder([Combatant(1, alive=False), Combatant(1), Combatant(1, enemy=True)])
    order.turn_cd = [5.0, 60.0, 70.0]
    assert order.select_next() == 1


def test_select_next_cycle_comes_first():
    order = TurnOrder([Combatant(1), Combatant(1, enemy=True)])
    order.turn_cd = [80.0, 90.0]
    order.global_progress = 50.0
    assert order.select_next() is None


def test_advance_subtracts_due_cooldown():
    order = TurnOrder([Combatant(1), Combatant(1, enemy=True)])
    order.turn_cd = [30.0, 70.0]
    order.select_next()
    order.advance()
    assert order.prev_turn_cd == [30.0, 70.0]
    assert order.prev_global_progress == 100.0
    assert order.turn_cd == pytest.approx([0.0, 40.0])
    assert order.global_progress == pytest.approx(70.0)


def test_advance_to_cycle_end_keeps_global():
    order = TurnOrder([Combatant(1), Combatant(1, enemy=True)])
    order.turn_cd = [80.0, 90.0]
    order.global_progress = 50.0
    order.select_next()
    order.advance()
    assert order.global_progress == 50.0
    assert order.turn_cd == pytest.approx([30.0, 40.0])


def test_next_cycle_refills_and_counts():
    order = TurnOrder([Combatant(1)])
    order.global_progress = 12.0
    assert order.next_cycle() == 2
    assert order.global_progress == 100.0
    assert order.cycle == 2


def test_start_gives_first_turn_zero_cooldown():
    combatants = [Combatant(h) for h in (10, 25, 15)] + [Combatant(20, enemy=True)]
    order = TurnOrder(combatants, random.Random(3))
    first = order.start()
    assert first is not None
    assert order.turn_cd[first] == pytest.approx(0.0)
    assert all(cd >= -1e-9 for cd in order.turn_cd)
    assert order.prev_turn_cd[first] == min(order.prev_turn_cd)


def test_repeated_turns_never_go_negative():
    combatants = [Combatant(h) for h in (10, 20, 30)] + [Combatant(25, enemy=True)]
    order = TurnOrder(combatants, random.Random(11))
    order.start()
    for _ in range(50):
        if order.next_turn is None:
            order.next_cycle()
        else:
            order.roll(order.next_turn)
        order.select_next()
        order.advance()
        assert all(cd >= -1e-9 for cd in order.turn_cd)
        assert 0.0 <= order.global_progress <= 100.0