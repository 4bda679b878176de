from quizquest_app.core.extensions import db
from quizquest_app.models.gamification import Achievement


ACHIEVEMENTS_DATA = [
    # --- QUIZ COUNT ---
    {
        "name": "First Steps",
        "description": "Complete your first quiz",
        "criteria_type": Achievement.TYPE_TOTAL_QUIZZES_COMPLETED,
        "criteria_value": 1,
        "badge_icon_url": "/badges/first-steps.svg",
    },
    {
        "name": "Quiz Enthusiast",
        "description": "Complete 10 quizzes",
        "criteria_type": Achievement.TYPE_TOTAL_QUIZZES_COMPLETED,
        "criteria_value": 10,
        "badge_icon_url": "/badges/quiz-enthusiast.svg",
    },
    {
        "name": "Quiz Master",
        "description": "Complete 50 quizzes",
        "criteria_type": Achievement.TYPE_TOTAL_QUIZZES_COMPLETED,
        "criteria_value": 50,
        "badge_icon_url": "/badges/quiz-master.svg",
    },

    # --- POINTS ---
    {
        "name": "Point Collector",
        "description": "Earn 100 points",
        "criteria_type": Achievement.TYPE_TOTAL_POINTS_EARNED,
        "criteria_value": 100,
        "badge_icon_url": "/badges/point-collector.svg",
    },
    {
        "name": "High Scorer",
        "description": "Earn 1,000 points",
        "criteria_type": Achievement.TYPE_TOTAL_POINTS_EARNED,
        "criteria_value": 1000,
        "badge_icon_url": "/badges/high-scorer.svg",
    },

    # --- STREAK ---
    {
        "name": "On a Roll",
        "description": "Study 3 days in a row",
        "criteria_type": Achievement.TYPE_LONGEST_STREAK,
        "criteria_value": 3,
        "badge_icon_url": "/badges/on-a-roll.svg",
    },
    {
        "name": "Week Warrior",
        "description": "Study 7 days in a row",
        "criteria_type": Achievement.TYPE_LONGEST_STREAK,
        "criteria_value": 7,
        "badge_icon_url": "/badges/week-warrior.svg",
    },
    {
        "name": "Unstoppable",
        "description": "Study 30 days in a row",
        "criteria_type": Achievement.TYPE_LONGEST_STREAK,
        "criteria_value": 30,
        "badge_icon_url": "/badges/unstoppable.svg",
    },

    # --- QUESTIONS ---
    {
        "name": "Curious Mind",
        "description": "Answer 100 questions",
        "criteria_type": Achievement.TYPE_TOTAL_QUESTIONS_ANSWERED,
        "criteria_value": 100,
        "badge_icon_url": "/badges/curious-mind.svg",
    },

    # --- SESSION ---
    {
        "name": "Perfectionist",
        "description": "Score full marks on a quiz",
        "criteria_type": Achievement.TYPE_PERFECT_QUIZ,
        "criteria_value": 1,
        "badge_icon_url": "/badges/perfectionist.svg",
    },
    {
        "name": "Speed Demon",
        "description": "Finish a quiz estimated at 5 minutes or less",
        "criteria_type": Achievement.TYPE_SPEED_DEMON,
        "criteria_value": 5,
        "badge_icon_url": "/badges/speed-demon.svg",
    },
]


def seed_achievements():
    """Insert catalog entries whose name is not already present.

    Returns the number of achievements created.
    """
    existing_names = {name for (name,) in db.session.query(Achievement.name).all()}

    created = 0
    for data in ACHIEVEMENTS_DATA:
        if data["name"] in existing_names:
            continue
        db.session.add(Achievement(**data))
        created += 1

    if created:
        db.session.commit()
    return created
