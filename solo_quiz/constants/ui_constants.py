"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "SoloQuiz"
PLACEHOLDER_NAME: str = "Your name..."
PLACEHOLDER_QUESTION: str = "Enter the question text (supports Markdown)."

LOGIN_TITLE: str = "Quiz App"
LOGIN_DESCRIPTION: str = "Type your name to start playing"
LOGIN_BUTTON_NEW: str = "Start Quiz"
LOGIN_BUTTON_RETURNING: str = "Keep Playing"
LOGIN_WELCOME_BACK: str = "Welcome back!"

MENU_BUTTON_START: str = "Start Quiz"
MENU_BUTTON_ADMIN: str = "Manage Questions"
MENU_BUTTON_SETTINGS: str = "Settings"
MENU_BUTTON_HELP: str = "Help"
MENU_BUTTON_ABOUT: str = "About"
MENU_BUTTON_RESET: str = "Reset Everything"
MENU_BUTTON_LOGOUT: str = "Log Out"
MENU_LEADERBOARD_TITLE: str = "Leaderboard"
MENU_LEADERBOARD_EMPTY: str = "No scores yet. Be the first!"

ADMIN_TITLE: str = "Question Administration"
ADMIN_BUTTON_NEW: str = "Add New Question"
ADMIN_BUTTON_SAVE: str = "Save Question"
ADMIN_BUTTON_CANCEL: str = "Cancel"
ADMIN_BUTTON_DELETE: str = "Delete Question"
ADMIN_BUTTON_IMPORT: str = "Import Questions"
ADMIN_BUTTON_EXPORT: str = "Export Questions"
ADMIN_BUTTON_BACK: str = "Back to Menu"
ADMIN_EMPTY_STATE: str = "No questions yet. Add the first one."

IMPORT_DIALOG_TITLE: str = "Select question file"
IMPORT_FILE_FILTER: str = "Question files (*.txt);;All files (*.*)"
EXPORT_DIALOG_TITLE: str = "Save questions to file"
EXPORT_FILE_FILTER: str = "Question files (*.txt);;All files (*.*)"

QUIZ_BUTTON_CONFIRM: str = "Confirm Answer"
QUIZ_BUTTON_NEXT: str = "Next Question"
QUIZ_BUTTON_FINISH: str = "Finish Quiz"
QUIZ_BUTTON_QUIT: str = "Quit to Menu"
QUIZ_CORRECT_MESSAGE: str = "Well done! That is the correct answer."
QUIZ_WRONG_MESSAGE: str = "Oops! That answer is wrong."

NO_QUESTIONS_MESSAGE: str = "No questions available. Add some in the admin screen first."
QUIZ_COMPLETE_TEMPLATE: str = "Congratulations {name}! You scored {points} point(s). Your total is now {total}."
RESET_DONE_MESSAGE: str = "All questions and scores were erased."
