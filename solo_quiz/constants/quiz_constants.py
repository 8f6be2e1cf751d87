"""Quiz-related constants shared across UI and core layers."""

OPTION_COUNT: int = 4
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
LEADERBOARD_SIZE: int = 5
POINTS_PER_CORRECT_ANSWER: int = 1

# Installed when the question bank is empty on startup.
DEFAULT_QUESTIONS: tuple[dict, ...] = (
    {
        "id": "1",
        "question": "What is the capital of Brazil?",
        "options": ["São Paulo", "Rio de Janeiro", "Brasília", "Salvador"],
        "correct_answer": 2,
    },
    {
        "id": "2",
        "question": "How much is 2 + 2?",
        "options": ["3", "4", "5", "6"],
        "correct_answer": 1,
    },
    {
        "id": "3",
        "question": "Which is the largest planet in the solar system?",
        "options": ["Earth", "Mars", "Jupiter", "Saturn"],
        "correct_answer": 2,
    },
)
