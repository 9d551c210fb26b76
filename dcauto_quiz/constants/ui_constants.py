"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "DCAUTO Quiz"
STATE_REFRESH_INTERVAL_MS: int = 250

SETUP_DOMAIN_LABEL: str = "Select Domain"
SETUP_ALL_DOMAINS_LABEL: str = "ALL DOMAINS (Mixed)"
SETUP_START_BUTTON: str = "START QUIZ"
SETUP_FOOTER: str = "4 Options | Instant Feedback | Adaptive Queue"

PLAY_EXIT_BUTTON: str = "[ EXIT ]"
PLAY_NEXT_BUTTON: str = "NEXT QUESTION"
PLAY_FINISH_BUTTON: str = "FINISH EXAM"
PLAY_PAUSE_BUTTON: str = "Pause"
PLAY_RESUME_BUTTON: str = "Resume"
PLAY_SELECT_HINT: str = "Select an option to continue"
PLAY_CARD_TEMPLATE: str = "Card {position} / {total}"

SUMMARY_TITLE: str = "QUIZ COMPLETE"
SUMMARY_NEW_QUIZ_BUTTON: str = "NEW QUIZ"

EMPTY_POOL_TITLE: str = "No questions"
EMPTY_POOL_MESSAGE: str = "The selected domain has no questions. Pick another domain."

EXIT_CONFIRM_TITLE: str = "Exit Quiz"
EXIT_CONFIRM_MESSAGE: str = "Leaving now discards this session's progress and score. Exit?"
