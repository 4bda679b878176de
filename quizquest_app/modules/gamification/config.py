from flask import current_app

from .logics.leveling import XP_PER_LEVEL


class GamificationConfig:
    """Default configuration for the Gamification Module."""
    XP_PER_LEVEL = XP_PER_LEVEL

    @staticmethod
    def xp_per_level() -> int:
        return int(current_app.config.get('GAMIFICATION_XP_PER_LEVEL', GamificationConfig.XP_PER_LEVEL))
