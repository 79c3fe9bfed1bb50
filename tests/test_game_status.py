import pytest

from brickgame.game_status import GameStatus


def _fresh():
    status = GameStatus(score=50, level=3)
    status.reset()
    return status


def test_create_game_status():
    status = _fresh()
    assert status.score == 0
    assert status.level == 0


@pytest.mark.parametrize(
    "steps",
    [
        [(1, 100), (1, 200), (1, 300), (1, 400), (1, 500)],
        [(1, 100), (2, 400), (1, 500), (2, 800), (1, 900)],
        [(1, 100), (2, 400), (3, 1100), (4, 2600), (5, 4100)],
    ],
)
def test_add_score(steps):
    status = _fresh()
    for lines, expected in steps:
        status.add_score(lines)
        assert status.score == expected


@pytest.mark.parametrize(
    "steps",
    [
        [(1, 100, 0), (2, 400, 0), (1, 500, 0), (2, 800, 1), (1, 900, 1)],
        [(1, 100, 0), (2, 400, 0), (3, 1100, 1), (4, 2600, 4), (5, 4100, 6)],
        [(4, 1500, 2), (4, 3000, 5), (4, 4500, 7), (4, 6000, 10), (4, 7500, 10), (4, 9000, 10)],
    ],
)
def test_add_score_and_update_level(steps):
    status = _fresh()
    for lines, score, level in steps:
        status.add_score(lines)
        status.update_level()
        assert status.score == score
        assert status.level == level


@pytest.mark.parametrize("lines", [0, 0, -1, -100])
def test_add_score_no_change(lines):
    status = _fresh()
    status.add_score(lines)
    assert status.score == 0
    assert status.level == 0