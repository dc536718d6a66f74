import pytest

from BassetRun import (
    GROUND_Y,
    PRUNE_MARGIN,
    SCROLL_SPEED,
    Obstacle,
    Treat,
    rects_overlap,
)


class Box:
    def __init__(self, x, y, w, h):
        self.x, self.y, self.w, self.h = x, y, w, h


def treat_on_player(world):
    player = world.player
    return Treat(player.x + 4, player.y + 4)


def test_overlap_is_strict():
    a = Box(0, 0, 10, 10)
    assert rects_overlap(a, Box(5, 5, 10, 10))
    assert rects_overlap(a, Box(9.99, 0, 10, 10))
    # touching edges only
    assert not rects_overlap(a, Box(10, 0, 10, 10))
    assert not rects_overlap(a, Box(0, 10, 10, 10))
    assert not rects_overlap(a, Box(-10, 0, 10, 10))
    assert not rects_overlap(a, Box(20, 20, 5, 5))


def test_obstacle_hit_ends_the_run(quiet_world):
    quiet_world.obstacles.append(Obstacle("cone", quiet_world.player.x + 5))
    quiet_world.update(1 / 60)
    assert quiet_world.game_over


def test_obstacle_takes_precedence_over_treat(quiet_world):
    treat = treat_on_player(quiet_world)
    quiet_world.treats.append(treat)
    quiet_world.obstacles.append(Obstacle("crate", quiet_world.player.x + 2))

    quiet_world.update(0.0)

    assert quiet_world.game_over
    assert quiet_world.score == 0
    assert treat in quiet_world.treats


def test_collecting_a_treat_scores_and_removes_it(quiet_world):
    treat = treat_on_player(quiet_world)
    quiet_world.treats.append(treat)

    quiet_world.update(0.0)
    assert quiet_world.score == 1
    assert treat not in quiet_world.treats

    # nothing left to collect
    quiet_world.update(0.0)
    assert quiet_world.score == 1


def test_simultaneous_treats_all_count(quiet_world):
    quiet_world.treats.extend(treat_on_player(quiet_world) for _ in range(3))
    far_treat = Treat(250, GROUND_Y - 8)
    quiet_world.treats.append(far_treat)

    quiet_world.update(0.0)

    assert quiet_world.score == 3
    assert quiet_world.treats == [far_treat]


def test_n_treats_over_n_ticks(quiet_world):
    for i in range(1, 6):
        quiet_world.treats.append(treat_on_player(quiet_world))
        quiet_world.update(1 / 60)
        assert quiet_world.score == i
    assert quiet_world.treats == []


def test_game_over_freezes_world(quiet_world):
    quiet_world.obstacles.append(Obstacle("crate", quiet_world.player.x))
    far_crate = Obstacle("crate", 200)
    quiet_world.obstacles.append(far_crate)
    quiet_world.update(0.0)
    assert quiet_world.game_over

    quiet_world.obstacle_timer = 0.01
    quiet_world.treats.append(treat_on_player(quiet_world))
    quiet_world.update(0.5, now=3.0, jump_held=True)

    assert far_crate.x == 200
    assert len(quiet_world.obstacles) == 2
    assert quiet_world.score == 0
    assert quiet_world.player.on_ground
    assert quiet_world.obstacle_timer == 0.01
    assert quiet_world.time == 3.0


def test_entities_scroll_left(quiet_world):
    crate = Obstacle("crate", 200)
    treat = Treat(220, GROUND_Y - 40)
    quiet_world.obstacles.append(crate)
    quiet_world.treats.append(treat)

    quiet_world.update(0.1)

    assert crate.x == pytest.approx(200 - SCROLL_SPEED * 0.1)
    assert treat.x == pytest.approx(220 - SCROLL_SPEED * 0.1)


@pytest.mark.parametrize("dt", [0.01, 0.05, 0.1])
def test_pruned_once_past_left_margin(quiet_world, dt):
    # right edges start just inside the margin and cross it this tick
    crate = Obstacle("crate", -PRUNE_MARGIN - 12 + 0.5)
    treat = Treat(-PRUNE_MARGIN - 6 + 0.5, GROUND_Y - 40)
    quiet_world.obstacles.append(crate)
    quiet_world.treats.append(treat)

    quiet_world.update(dt)

    assert crate not in quiet_world.obstacles
    assert treat not in quiet_world.treats


def test_entities_inside_margin_are_kept(quiet_world):
    crate = Obstacle("crate", 0)
    treat = Treat(0, GROUND_Y - 40)
    quiet_world.obstacles.append(crate)
    quiet_world.treats.append(treat)

    quiet_world.update(0.01)

    assert crate in quiet_world.obstacles
    assert treat in quiet_world.treats
