import threading
import time

import pytest

from conftest import make_question
from dcauto_quiz.core.models import SessionPhase
from dcauto_quiz.core.services.session_timer import Countdown, ThreadingTicker
from dcauto_quiz.core.session_controller import QuizSessionController

FAST_INTERVAL = 0.01


def wait_until(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def threaded_controller(universe, rng):
    ticker = ThreadingTicker(interval_seconds=FAST_INTERVAL)

    def factory(budget: int) -> QuizSessionController:
        return QuizSessionController(universe, rng=rng, ticker=ticker, timer_budget_seconds=budget)

    yield factory, ticker
    ticker.stop()


def test_countdown_only_moves_while_running():
    countdown = Countdown(budget_seconds=2, remaining_seconds=2)
    assert not countdown.decrement()
    assert countdown.remaining_seconds == 2

    countdown.running = True
    assert not countdown.decrement()
    assert countdown.decrement()
    assert countdown.decrement()
    assert countdown.remaining_seconds == 0

    countdown.reset()
    assert countdown.remaining_seconds == 2
    assert not countdown.running


def test_threading_ticker_calls_back_until_stopped():
    ticker = ThreadingTicker(interval_seconds=FAST_INTERVAL)
    calls = []
    ticker.start(lambda: calls.append(threading.current_thread().name))

    assert wait_until(lambda: len(calls) >= 3)
    assert ticker.is_running()
    assert calls[0] == "QuizTicker"

    ticker.stop()
    assert not ticker.is_running()
    time.sleep(0.05)
    settled = len(calls)
    time.sleep(0.05)
    assert len(calls) == settled


def test_threaded_timeout_finishes_session(threaded_controller):
    factory, ticker = threaded_controller
    controller = factory(budget=3)
    controller.start_game()

    assert wait_until(lambda: controller.get_phase() == SessionPhase.SUMMARY)
    assert controller.get_timer_seconds_remaining() == 0
    assert not controller.is_timer_running()
    assert not ticker.is_running()


def test_threaded_exit_stops_ticking(threaded_controller):
    factory, ticker = threaded_controller
    controller = factory(budget=1200)
    controller.start_game()
    assert wait_until(lambda: controller.get_timer_seconds_remaining() < 1200)

    controller.exit()
    assert not ticker.is_running()
    time.sleep(0.05)
    assert controller.get_phase() == SessionPhase.SETUP
    assert controller.get_timer_seconds_remaining() == 1200


def test_threaded_pause_and_resume(threaded_controller):
    factory, ticker = threaded_controller
    controller = factory(budget=1200)
    controller.start_game()
    assert wait_until(lambda: controller.get_timer_seconds_remaining() < 1200)

    controller.stop_timer()
    assert not ticker.is_running()
    time.sleep(0.02)
    paused_at = controller.get_timer_seconds_remaining()
    time.sleep(0.05)
    assert controller.get_timer_seconds_remaining() == paused_at

    controller.start_timer()
    assert ticker.is_running()
    assert wait_until(lambda: controller.get_timer_seconds_remaining() < paused_at)
    controller.exit()
    assert not ticker.is_running()


def test_single_card_deck_times_out_on_real_thread(rng):
    ticker = ThreadingTicker(interval_seconds=FAST_INTERVAL)
    controller = QuizSessionController([make_question("only")], rng=rng, ticker=ticker, timer_budget_seconds=2)
    controller.start_game()
    assert wait_until(lambda: controller.get_phase() == SessionPhase.SUMMARY)
    assert not ticker.is_running()
