import pytest

from dcauto_quiz.core.services.stats import QuizStats, StatsSnapshot, percentage


def test_accuracy_is_zero_without_answers():
    assert StatsSnapshot().accuracy == 0
    assert not StatsSnapshot().passed()


@pytest.mark.parametrize(
    "correct, total, expected",
    [(2, 3, 67), (1, 3, 33), (1, 2, 50), (1, 8, 13), (5, 6, 83), (5, 5, 100), (0, 4, 0)],
)
def test_percentage_rounds_half_up(correct, total, expected):
    assert percentage(correct, total) == expected


def test_record_answer_keeps_invariants():
    stats = QuizStats()
    for is_correct in (True, False, False, True, False):
        stats.record_answer(is_correct)
        assert stats.requeued == stats.wrong
        assert stats.total_answered == stats.correct + stats.wrong
    assert stats.snapshot() == StatsSnapshot(correct=2, wrong=3, requeued=3, total_answered=5)


def test_snapshot_is_detached_from_tallies():
    stats = QuizStats()
    stats.record_answer(True)
    snapshot = stats.snapshot()
    stats.record_answer(False)
    assert snapshot.total_answered == 1


def test_passed_uses_threshold():
    assert StatsSnapshot(correct=4, wrong=1, requeued=1, total_answered=5).passed()
    assert not StatsSnapshot(correct=3, wrong=1, requeued=1, total_answered=4).passed()
    assert StatsSnapshot(correct=3, wrong=1, requeued=1, total_answered=4).passed(threshold=75)


def test_to_dict_includes_accuracy():
    data = StatsSnapshot(correct=2, wrong=1, requeued=1, total_answered=3).to_dict()
    assert data == {"correct": 2, "wrong": 1, "requeued": 1, "total_answered": 3, "accuracy": 67}
