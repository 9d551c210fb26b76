"""Quiz-related constants shared across UI, server and core layers."""

from pathlib import Path

TIMER_START_SECONDS: int = 20 * 60
TICK_INTERVAL_SECONDS: float = 1.0
LOW_TIME_WARNING_SECONDS: int = 60

OPTION_COUNT: int = 4
DISTRACTOR_COUNT: int = OPTION_COUNT - 1
PASSING_ACCURACY_PERCENT: int = 80

DEFAULT_QUESTIONS_PATH: Path = Path(__file__).resolve().parents[1] / "data" / "questions.txt"
