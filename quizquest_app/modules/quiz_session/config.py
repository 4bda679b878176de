class QuizSessionConfig:
    """Default configuration for the Quiz Session Module."""
    # app.extensions key holding the per-user store cache
    STORE_EXTENSION_KEY = 'quiz_session_stores'
    DEFAULT_TYPE = 'practice'
    # Columns a client may change through update_quiz_session
    UPDATABLE_FIELDS = (
        'title',
        'status',
        'study_items',
        'current_question_index',
        'total_points',
        'max_points',
        'estimated_minutes',
        'completed_at',
    )
