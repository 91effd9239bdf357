"""Tests for RequestLifecycle."""

import pytest

from cardforge.application.common.request_lifecycle import RequestLifecycle, RequestState
from cardforge.domain.common.exceptions import InvalidTransitionError


class TestRequestLifecycle:
    def test_starts_idle(self) -> None:
        lifecycle: RequestLifecycle[int] = RequestLifecycle("save")

        assert lifecycle.state is RequestState.IDLE
        assert lifecycle.can_start
        assert lifecycle.result is None
        assert lifecycle.error is None

    def test_success_path(self) -> None:
        lifecycle: RequestLifecycle[int] = RequestLifecycle("save")

        lifecycle.start()
        assert lifecycle.in_flight
        assert not lifecycle.can_start
        lifecycle.succeed(3)

        assert lifecycle.state is RequestState.SUCCESS
        assert lifecycle.result == 3

    def test_second_start_while_in_flight_is_refused(self) -> None:
        lifecycle: RequestLifecycle[int] = RequestLifecycle("generation")
        lifecycle.start()

        with pytest.raises(InvalidTransitionError) as exc_info:
            lifecycle.start()
        assert exc_info.value.action == "start generation"

    def test_retry_after_error_clears_message(self) -> None:
        lifecycle: RequestLifecycle[int] = RequestLifecycle("generation")
        lifecycle.start()
        lifecycle.fail("upstream down")
        assert lifecycle.state is RequestState.ERROR
        assert lifecycle.error == "upstream down"

        lifecycle.start()

        assert lifecycle.in_flight
        assert lifecycle.error is None

    @pytest.mark.parametrize("finish", ["succeed", "fail"])
    def test_finishing_without_start_is_refused(self, finish: str) -> None:
        lifecycle: RequestLifecycle[str] = RequestLifecycle("save")

        with pytest.raises(InvalidTransitionError):
            getattr(lifecycle, finish)("x")

    def test_reset_returns_to_idle(self) -> None:
        lifecycle: RequestLifecycle[int] = RequestLifecycle("save")
        lifecycle.start()
        lifecycle.succeed(1)

        lifecycle.reset()

        assert lifecycle.state is RequestState.IDLE
        assert lifecycle.result is None
