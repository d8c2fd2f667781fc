from datetime import datetime

import pytest
from pydantic import ValidationError

from wa_relay.models import LOCAL_SENDER, MessageRecord, SendMessageEvent


def test_outbound_record():
    record = MessageRecord.outbound("+15551234567", "hello")

    assert record.sender == LOCAL_SENDER == "me"
    assert record.recipient == "+15551234567"
    assert record.content == "hello"
    assert record.timestamp.endswith("Z")
    # 2024-05-01T10:00:00.123Z
    assert len(record.timestamp) == 24
    datetime.fromisoformat(record.timestamp.replace("Z", "+00:00"))


def test_record_ids_are_unique():
    ids = {MessageRecord.outbound("+15551234567", "hi").id for _ in range(100)}

    assert len(ids) == 100


def test_record_timestamps_do_not_decrease():
    timestamps = [MessageRecord.outbound("+1", "x").timestamp for _ in range(50)]

    assert timestamps == sorted(timestamps)


def test_record_is_immutable():
    record = MessageRecord.outbound("+15551234567", "hello")

    with pytest.raises(ValidationError):
        record.content = "changed"


def test_send_message_event_envelope():
    event = SendMessageEvent.model_validate(
        {"arguments": {"recipient": "+15551234567", "content": "hello"}}
    )

    assert event.arguments.recipient == "+15551234567"
    assert event.arguments.content == "hello"


def test_send_message_event_requires_arguments():
    with pytest.raises(ValidationError):
        SendMessageEvent.model_validate({"recipient": "+15551234567"})
