import json
from datetime import datetime
from typing import Any, List

import pytest
from seating.utils import audit_log
from seating.utils.request_id import set_request_id


def test_emit_audit_log_outputs_json(monkeypatch) -> None:
    messages: List[str] = []

    class DummyLogger:
        def info(self, message: str) -> None:
            messages.append(message)

    monkeypatch.setattr(audit_log, "_audit_logger", DummyLogger())

    set_request_id("req-123")
    audit_log.emit_audit_log(
        action="reservation.accepted",
        initiator="client",
        reservation_id="abc",
        client_name="Ada",
        seats=2,
        date=datetime(2024, 5, 1, 19, 0),
    )
    set_request_id(None)

    assert len(messages) == 1
    payload = json.loads(messages[0])
    assert payload["action"] == "reservation.accepted"
    assert payload["initiator"] == "client"
    assert payload["request_id"] == "req-123"
    assert payload["reservation_id"] == "abc"
    assert payload["date"] == "2024-05-01"
    assert "timestamp" in payload


def test_emit_audit_log_drops_none_fields(monkeypatch) -> None:
    messages: List[str] = []

    class DummyLogger:
        def info(self, message: str) -> None:
            messages.append(message)

    monkeypatch.setattr(audit_log, "_audit_logger", DummyLogger())

    audit_log.emit_audit_log(
        action="reservation.accepted",
        initiator="system",
        reservation_id="abc",
        client_name=None,
        seats=None,
        date=None,
        extra={"source": "import"},
    )

    payload = json.loads(messages[0])
    assert "client_name" not in payload
    assert "request_id" not in payload
    assert payload["source"] == "import"


def test_emit_audit_log_raises_on_logger_failure(monkeypatch) -> None:
    class DummyLogger:
        def info(self, _: Any) -> None:
            raise ValueError("fail")

    monkeypatch.setattr(audit_log, "_audit_logger", DummyLogger())

    with pytest.raises(RuntimeError):
        audit_log.emit_audit_log(
            action="reservation.accepted",
            initiator="client",
            reservation_id="abc",
            client_name="Ada",
            seats=2,
            date=datetime(2024, 5, 1),
        )
