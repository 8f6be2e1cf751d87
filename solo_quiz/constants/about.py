"""Static metadata describing SoloQuiz."""

APP_NAME = "SoloQuiz"
APP_VERSION = "0.1"
APP_AUTHOR = "Magnus Simonsen"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "SoloQuiz is a single-player multiple-choice quiz built with Qt. "
    "Enter your name, answer questions and climb the local leaderboard. "
    "Questions and scores are stored on this computer only."
)

HELP_TEXT = (
    "Type your name on the login screen to play. Returning players keep their score.\n\n"
    "Pick an option, press Confirm to lock it in, then Next to continue. "
    "Each correct answer is worth one point.\n\n"
    "The admin screen lets you add, edit and delete questions. "
    "You can also import a question bank from a .txt file using this format:\n\n"
    "Q: What is the capital of Brazil?\n"
    "A: São Paulo\nB: Rio de Janeiro\nC: Brasília\nD: Salvador\n"
    "CORRECT: C\n\n"
    "Q: How much is 2 + 2?\n"
    "A: 3\nB: 4\nC: 5\nD: 6\n"
    "CORRECT: B"
)
