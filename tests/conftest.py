import pytest

EVENT_ID = "11111111-1111-1111-1111-111111111111"
OTHER_EVENT_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture()
def event_id() -> str:
    return EVENT_ID


@pytest.fixture()
def other_event_id() -> str:
    return OTHER_EVENT_ID


@pytest.fixture()
def event_record(event_id: str) -> str:
    """Single-line event whose event_id field carries ``event_id``."""
    return f'{{"event_id":"{event_id}","x":1}}'


@pytest.fixture()
def decoy_record(event_id: str) -> str:
    """Event carrying ``event_id`` only under a different field name."""
    return f'{{"triggering_system_event_id":"{event_id}"}}'
