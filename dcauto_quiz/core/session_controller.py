"""Business logic for one quiz session shared between the Qt UI and the API."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from threading import Lock
from typing import Sequence

from dcauto_quiz.constants.quiz_constants import TIMER_START_SECONDS
from dcauto_quiz.core.distractors import generate_options
from dcauto_quiz.core.errors import ContractViolationError, EmptyPoolError
from dcauto_quiz.core.models import (
    ALL_DOMAINS,
    DomainFilter,
    Question,
    SessionPhase,
    normalize_domain_filter,
)
from dcauto_quiz.core.question_bank import QuestionBank
from dcauto_quiz.core.services.deck import Deck
from dcauto_quiz.core.services.session_timer import Countdown, ThreadingTicker, Ticker
from dcauto_quiz.core.services.stats import QuizStats, StatsSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Everything a presentation layer needs to draw the current state."""

    phase: SessionPhase
    domain_filter: DomainFilter
    current_card: Question | None = None
    current_options: tuple[str, ...] = ()
    selected_option: str | None = None
    answered: bool = False
    is_correct: bool | None = None
    card_number: int = 0
    deck_length: int = 0
    is_last_card: bool = False
    timer_seconds_remaining: int = TIMER_START_SECONDS
    timer_running: bool = False
    stats: StatsSnapshot = field(default_factory=StatsSnapshot)


class QuizSessionController:
    """Owns the session state machine: Setup -> Playing -> Summary -> Setup.

    Every public method runs under one lock, so the timer thread and the
    presentation layers never observe a half-applied transition.
    """

    def __init__(
        self,
        questions: QuestionBank | Sequence[Question],
        rng: random.Random | None = None,
        ticker: Ticker | None = None,
        timer_budget_seconds: int = TIMER_START_SECONDS,
    ) -> None:
        if timer_budget_seconds <= 0:
            raise ValueError("Timer budget must be a positive number of seconds.")
        self._lock = Lock()
        self._bank = questions if isinstance(questions, QuestionBank) else QuestionBank(questions)
        self._rng = rng if rng is not None else random.Random()
        self._ticker: Ticker = ticker if ticker is not None else ThreadingTicker()

        self._phase = SessionPhase.SETUP
        self._domain_filter: DomainFilter = ALL_DOMAINS
        self._deck: Deck | None = None
        self._current_options: list[str] = []
        self._selected_option: str | None = None
        self._answered: bool = False
        self._stats = QuizStats()
        self._countdown = Countdown(
            budget_seconds=timer_budget_seconds,
            remaining_seconds=timer_budget_seconds,
        )
        self._timer_generation: int = 0

    # --- Setup ---

    def select_domain(self, domain_filter: DomainFilter | None) -> DomainFilter:
        with self._lock:
            if self._phase == SessionPhase.PLAYING:
                raise ContractViolationError("Cannot change the domain filter while playing.")
            self._domain_filter = normalize_domain_filter(domain_filter)
            return self._domain_filter

    def start_game(self, domain_filter: DomainFilter | None = None) -> Question:
        """Build a fresh deck and enter Playing. Returns the first card.

        Raises ``EmptyPoolError`` and stays in Setup when the filter selects
        no questions. A finished session must be reset to Setup first.
        """
        with self._lock:
            if self._phase != SessionPhase.SETUP:
                raise ContractViolationError(
                    f"Cannot start a game from {self._phase.name}; reset to setup first."
                )
            if domain_filter is not None:
                self._domain_filter = normalize_domain_filter(domain_filter)

            deck = Deck.from_bank(self._bank, self._domain_filter, self._rng)
            if not len(deck):
                logger.warning("No questions for domain filter %s", self._domain_filter)
                raise EmptyPoolError(self._domain_filter)

            self._deck = deck
            self._stats = QuizStats()
            self._countdown.reset()
            self._present_current_card()
            self._phase = SessionPhase.PLAYING
            self._start_ticker()
            logger.info(
                "Quiz started: %d card(s), filter %s, %ds on the clock",
                len(deck),
                self._domain_filter,
                self._countdown.remaining_seconds,
            )
            return deck.current()

    # --- Playing ---

    def submit_answer(self, option: str) -> bool:
        """Grade an option for the current card.

        Returns False without touching stats or the deck when the card was
        already answered.
        """
        with self._lock:
            deck = self._require_playing("submit an answer")
            if self._answered:
                return False
            if option not in self._current_options:
                raise ContractViolationError(f"{option!r} is not one of the current options.")

            card = deck.current()
            is_correct = option == card.correct_answer
            self._selected_option = option
            self._answered = True
            self._stats.record_answer(is_correct)
            if not is_correct:
                deck.requeue(card)
                logger.debug("Re-queued %s; deck now has %d card(s)", card.id, len(deck))
            return True

    def advance(self) -> bool:
        """Move past an answered card, or finish when it was the last one.

        Returns False when the current card has not been answered yet.
        """
        with self._lock:
            deck = self._require_playing("advance")
            if not self._answered:
                return False
            if deck.advance():
                self._present_current_card()
            else:
                self._finish("deck exhausted")
            return True

    def start_timer(self) -> None:
        with self._lock:
            self._require_playing("start the timer")
            if not self._countdown.running:
                self._start_ticker()

    def stop_timer(self) -> None:
        with self._lock:
            self._require_playing("stop the timer")
            self._stop_ticker()

    def exit(self) -> None:
        """Abandon the session and return to Setup; stats are discarded."""
        with self._lock:
            if self._phase == SessionPhase.SETUP:
                return
            logger.info("Quiz exited from %s", self._phase.name)
            self._discard_session()

    # --- Summary ---

    def reset_to_setup(self) -> None:
        with self._lock:
            if self._phase == SessionPhase.PLAYING:
                raise ContractViolationError("Use exit() to leave a game in progress.")
            self._discard_session()

    # --- Read-only accessors ---

    def get_phase(self) -> SessionPhase:
        with self._lock:
            return self._phase

    def get_domain_filter(self) -> DomainFilter:
        with self._lock:
            return self._domain_filter

    def get_question_bank(self) -> QuestionBank:
        return self._bank

    def get_stats(self) -> StatsSnapshot:
        with self._lock:
            return self._stats.snapshot()

    def get_current_card(self) -> Question | None:
        with self._lock:
            if self._phase != SessionPhase.PLAYING or self._deck is None:
                return None
            return self._deck.current()

    def get_current_options(self) -> list[str]:
        with self._lock:
            return list(self._current_options)

    def get_timer_seconds_remaining(self) -> int:
        with self._lock:
            return self._countdown.remaining_seconds

    def is_timer_running(self) -> bool:
        with self._lock:
            return self._countdown.running

    def get_snapshot(self) -> SessionSnapshot:
        with self._lock:
            deck = self._deck
            playing = self._phase == SessionPhase.PLAYING and deck is not None
            card = deck.current() if playing else None
            is_correct = None
            if card is not None and self._answered:
                is_correct = self._selected_option == card.correct_answer
            return SessionSnapshot(
                phase=self._phase,
                domain_filter=self._domain_filter,
                current_card=card,
                current_options=tuple(self._current_options) if playing else (),
                selected_option=self._selected_option if playing else None,
                answered=self._answered if playing else False,
                is_correct=is_correct,
                card_number=deck.position if playing else 0,
                deck_length=len(deck) if deck is not None else 0,
                is_last_card=deck.is_last() if playing else False,
                timer_seconds_remaining=self._countdown.remaining_seconds,
                timer_running=self._countdown.running,
                stats=self._stats.snapshot(),
            )

    # --- Internal helpers (caller holds the lock) ---

    def _require_playing(self, action: str) -> Deck:
        if self._phase != SessionPhase.PLAYING or self._deck is None:
            raise ContractViolationError(f"Cannot {action} outside of Playing ({self._phase.name}).")
        return self._deck

    def _present_current_card(self) -> None:
        assert self._deck is not None
        card = self._deck.current()
        self._current_options = generate_options(card, self._bank.get_questions(), self._rng)
        self._selected_option = None
        self._answered = False

    def _finish(self, reason: str) -> None:
        self._stop_ticker()
        self._phase = SessionPhase.SUMMARY
        stats = self._stats.snapshot()
        logger.info(
            "Quiz finished (%s): %d/%d correct, accuracy %d%%",
            reason,
            stats.correct,
            stats.total_answered,
            stats.accuracy,
        )

    def _discard_session(self) -> None:
        self._stop_ticker()
        self._phase = SessionPhase.SETUP
        self._deck = None
        self._current_options = []
        self._selected_option = None
        self._answered = False
        self._stats = QuizStats()
        self._countdown.reset()

    def _start_ticker(self) -> None:
        self._timer_generation += 1
        generation = self._timer_generation
        self._countdown.running = True
        self._ticker.start(lambda: self._on_tick(generation))

    def _stop_ticker(self) -> None:
        self._timer_generation += 1
        self._countdown.running = False
        self._ticker.stop()

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._timer_generation or self._phase != SessionPhase.PLAYING:
                return
            if self._countdown.decrement():
                self._finish("time expired")
