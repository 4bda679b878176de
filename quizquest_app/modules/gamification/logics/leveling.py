"""Level math: a flat amount of XP per level, starting at level 1."""
from typing import Dict

XP_PER_LEVEL = 100


def calculate_level(total_xp: int, xp_per_level: int = XP_PER_LEVEL) -> int:
    """
    >>> calculate_level(0)
    1
    >>> calculate_level(250)
    3
    """
    if xp_per_level <= 0:
        raise ValueError("xp_per_level must be positive")
    return max(0, total_xp or 0) // xp_per_level + 1


def level_progress(total_xp: int, xp_per_level: int = XP_PER_LEVEL) -> Dict[str, int]:
    """Current level plus XP earned inside it and XP left to the next one."""
    total_xp = max(0, total_xp or 0)
    level = calculate_level(total_xp, xp_per_level)
    xp_into_level = total_xp - (level - 1) * xp_per_level
    return {
        'level': level,
        'xp_into_level': xp_into_level,
        'xp_for_next_level': xp_per_level - xp_into_level,
        'xp_per_level': xp_per_level,
        'progress_percent': int(xp_into_level * 100 / xp_per_level),
    }
