"""Tests for StructlogChatObserver."""

from structlog.testing import capture_logs

from ground_check.chat.domain.observer import ChatObserver
from ground_check.chat.infrastructure.observer import StructlogChatObserver


class TestStructlogChatObserver:
    def test_satisfies_protocol(self) -> None:
        observer: ChatObserver = StructlogChatObserver()

        assert observer is not None

    def test_events_are_logged_with_levels(self) -> None:
        observer = StructlogChatObserver()

        with capture_logs() as logs:
            observer.chat_completion_started(model="gpt-4o")
            observer.chat_completion_completed(
                model="gpt-4o", duration_ms=5, total_tokens=43
            )
            observer.chat_completion_failed(model="gpt-4o", reason="timeout")
            observer.chat_high_temperature_warned(model="gpt-4o", temperature=0.9)

        assert [(log["event"], log["log_level"]) for log in logs] == [
            ("chat.completion_started", "info"),
            ("chat.completion_completed", "info"),
            ("chat.completion_failed", "error"),
            ("chat.high_temperature_warned", "warning"),
        ]
        assert logs[1]["total_tokens"] == 43
        assert logs[2]["reason"] == "timeout"
