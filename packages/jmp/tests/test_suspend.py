"""Tests for SuspendController."""

import pytest
from jmp.suspend import SuspendController
from jmp.types import SuspendError

H = 1 / 300


def _run(controller: SuspendController, seconds: float) -> None:
    for _ in range(round(seconds / H)):
        if controller.suspended:
            controller.advance(H)


def test_idle_by_default():
    controller = SuspendController()
    assert not controller.suspended
    assert not controller.pending
    assert not controller.tap_required


def test_suspend_then_auto_resume():
    controller = SuspendController()
    calls = []
    controller.suspend(0.1, on_resume=lambda: calls.append("resumed"))
    assert controller.suspended
    assert controller.pending

    _run(controller, 0.2)

    assert calls == ["resumed"]
    assert not controller.suspended
    assert not controller.pending


def test_advance_reports_resume():
    controller = SuspendController()
    controller.suspend(2 * H)
    assert controller.advance(H) is False
    assert controller.advance(H) is True


def test_tap_required_blocks_auto_resume():
    controller = SuspendController()
    calls = []
    controller.suspend(0.1, tap_required=True, on_resume=lambda: calls.append(1))

    _run(controller, 1.0)

    assert calls == []
    assert controller.suspended
    assert controller.timer.is_done


def test_tap_after_countdown_resumes():
    controller = SuspendController()
    calls = []
    controller.suspend(0.1, tap_required=True, on_resume=lambda: calls.append(1))
    _run(controller, 0.2)

    assert controller.tap() is True
    assert calls == [1]
    assert not controller.suspended


def test_tap_before_countdown_is_not_consumed():
    controller = SuspendController()
    calls = []
    controller.suspend(0.5, tap_required=True, on_resume=lambda: calls.append(1))
    _run(controller, 0.1)

    assert controller.tap() is False
    assert calls == []
    assert controller.suspended


def test_tap_without_suspend_is_not_consumed():
    assert SuspendController().tap() is False


def test_second_suspend_raises_and_leaves_state():
    controller = SuspendController()
    calls = []
    controller.suspend(0.5, tap_required=False, on_resume=lambda: calls.append("first"))
    target = controller.timer.target

    with pytest.raises(SuspendError):
        controller.suspend(1.0, tap_required=True, on_resume=lambda: calls.append("second"))

    assert controller.timer.target == target
    assert not controller.tap_required
    _run(controller, 0.6)
    assert calls == ["first"]


def test_negative_duration_raises():
    with pytest.raises(ValueError):
        SuspendController().suspend(-1.0)


def test_unsuspend_runs_callback_once():
    controller = SuspendController()
    calls = []
    controller.suspend(1.0, on_resume=lambda: calls.append(1))
    controller.unsuspend()
    controller.unsuspend()
    assert calls == [1]


def test_callback_may_suspend_again():
    """The continuation is cleared before it runs, so it can re-arm."""
    controller = SuspendController()
    calls = []

    def again():
        calls.append("first")
        controller.suspend(0.1, on_resume=lambda: calls.append("second"))

    controller.suspend(0.1, on_resume=again)
    _run(controller, 0.15)
    assert calls == ["first"]
    assert controller.pending

    _run(controller, 0.15)
    assert calls == ["first", "second"]


def test_zero_duration_resumes_on_next_increment():
    controller = SuspendController()
    calls = []
    controller.suspend(0.0, on_resume=lambda: calls.append(1))
    assert controller.suspended
    assert controller.advance(H) is True
    assert calls == [1]


def test_unsuspend_resets_timer():
    controller = SuspendController()
    controller.suspend(1.0, tap_required=True)
    controller.unsuspend()
    assert controller.timer.target == 0.0
    assert controller.timer.elapsed == 0.0
    assert not controller.suspended


def test_suspend_without_callback_blocks_another():
    controller = SuspendController()
    controller.suspend(0.5)
    target = controller.timer.target

    with pytest.raises(SuspendError):
        controller.suspend(0.5, tap_required=True, on_resume=lambda: None)

    assert controller.timer.target == target
    assert not controller.tap_required
    assert not controller.pending


def test_tap_wait_blocks_another_suspend():
    controller = SuspendController()
    controller.suspend(0.1, tap_required=True)
    _run(controller, 0.2)
    assert controller.timer.is_done

    with pytest.raises(SuspendError):
        controller.suspend(0.1)


def test_suspend_again_after_resume():
    controller = SuspendController()
    controller.suspend(0.1)
    _run(controller, 0.2)
    assert not controller.suspended
    controller.suspend(0.1)
    assert controller.suspended
