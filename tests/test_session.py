import uuid

from containerkit.session import session_id, session_string


def test_session_id_is_stable():
    assert len({session_id() for _ in range(5)}) == 1


def test_session_id_is_random_uuid():
    assert session_id().version == 4


def test_session_string_matches_id():
    assert session_string() == str(session_id())


def test_session_string_round_trips():
    assert uuid.UUID(session_string()) == session_id()