from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class StatsUpdateDTO:
    user_id: int
    previous_total_xp: int
    total_xp: int
    previous_level: int
    current_level: int
    current_streak: int
    longest_streak: int

    @property
    def leveled_up(self) -> bool:
        return self.current_level > self.previous_level


@dataclass
class AchievementDTO:
    id: int
    name: str
    description: Optional[str]
    criteria_type: str
    criteria_value: int
    badge_icon_url: Optional[str]
    unlocked: bool = False
    unlocked_at: Optional[str] = None


@dataclass
class GamificationResultDTO:
    """Outcome of processing one completed session."""
    user_id: int
    success: bool
    stats: Optional[StatsUpdateDTO] = None
    unlocked_achievements: List[AchievementDTO] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self):
        return {
            'success': self.success,
            'total_xp': self.stats.total_xp if self.stats else None,
            'current_level': self.stats.current_level if self.stats else None,
            'leveled_up': self.stats.leveled_up if self.stats else False,
            'current_streak': self.stats.current_streak if self.stats else None,
            'longest_streak': self.stats.longest_streak if self.stats else None,
            'unlocked_achievements': [
                {'id': a.id, 'name': a.name, 'badge_icon_url': a.badge_icon_url}
                for a in self.unlocked_achievements
            ],
        }
