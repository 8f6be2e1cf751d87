"""Keys and names used by the persistent key-value store."""

QUESTIONS_KEY: str = "quiz_questions"
USERS_KEY: str = "quiz_users"

SETTINGS_ORGANIZATION: str = "SoloQuiz"
SETTINGS_APPLICATION: str = "SoloQuiz"
