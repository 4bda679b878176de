import pytest

from quizquest_app.modules.gamification.logics.leveling import (
    XP_PER_LEVEL,
    calculate_level,
    level_progress,
)


@pytest.mark.parametrize('total_xp, expected', [
    (0, 1),
    (99, 1),
    (100, 2),
    (250, 3),
    (None, 1),
    (-20, 1),
])
def test_calculate_level(total_xp, expected):
    assert calculate_level(total_xp) == expected


def test_custom_xp_per_level():
    assert calculate_level(250, xp_per_level=50) == 6


def test_non_positive_divisor_rejected():
    with pytest.raises(ValueError):
        calculate_level(10, xp_per_level=0)


def test_level_progress():
    progress = level_progress(250)
    assert progress['level'] == 3
    assert progress['xp_into_level'] == 50
    assert progress['xp_for_next_level'] == 50
    assert progress['xp_per_level'] == XP_PER_LEVEL
    assert progress['progress_percent'] == 50
