from datetime import datetime

from app.models.mood import MoodType
from app.services.session import SessionTracker


def parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def make_tracker(repositories, clock, errors=None):
    on_error = (lambda message, error: errors.append(message)) if errors is not None else None
    return SessionTracker(repositories.sessions, on_error=on_error, clock=clock)


async def test_start_session_creates_record_with_false_flags(repositories, supabase_client, clock):
    tracker = make_tracker(repositories, clock)

    session_id = await tracker.start_session(MoodType.CALM)

    assert session_id is not None
    assert tracker.is_tracking is True
    assert tracker.start_time == clock.now
    [(_, _, payload)] = supabase_client.calls_to("user_sessions", "insert")
    assert payload["mood_type"] == "calm"
    assert payload["music_played"] is False
    assert payload["timer_used"] is False
    assert parse_ts(payload["started_at"]) == clock.now


async def test_end_session_computes_duration_and_sends_flags(repositories, supabase_client, clock):
    tracker = make_tracker(repositories, clock)
    session_id = await tracker.start_session(MoodType.STRESSED)
    tracker.update_activity(music_played=True)

    clock.advance(125.7)
    closed_id = await tracker.end_session()

    assert closed_id == session_id
    assert tracker.is_tracking is False
    [(_, _, payload)] = supabase_client.calls_to("user_sessions", "update")
    assert payload["duration_seconds"] == 125
    assert payload["music_played"] is True
    assert payload["timer_used"] is False
    assert parse_ts(payload["ended_at"]) == clock.now
    stored = supabase_client.tables["user_sessions"][0]
    assert stored["duration_seconds"] == 125


async def test_end_session_without_start_is_noop(repositories, supabase_client, clock):
    tracker = make_tracker(repositories, clock)

    assert await tracker.end_session() is None
    assert supabase_client.calls == []


async def test_failed_start_leaves_tracking_inactive(repositories, supabase_client, clock):
    errors = []
    tracker = make_tracker(repositories, clock, errors)
    supabase_client.fail("user_sessions", "insert")

    assert await tracker.start_session(MoodType.TIRED) is None

    assert tracker.is_tracking is False
    assert errors == ["Error starting session"]
    assert len(supabase_client.calls_to("user_sessions", "insert")) == 1

    await tracker.end_session()
    assert supabase_client.calls_to("user_sessions", "update") == []


async def test_failed_end_still_clears_local_state(repositories, supabase_client, clock):
    errors = []
    tracker = make_tracker(repositories, clock, errors)
    session_id = await tracker.start_session(MoodType.EXCITED)
    supabase_client.fail("user_sessions", "update")

    assert await tracker.end_session() == session_id

    assert tracker.is_tracking is False
    assert errors == ["Error ending session"]

    supabase_client.recover()
    assert await tracker.start_session(MoodType.CALM) is not None


def test_update_activity_only_overwrites_given_flags(repositories, clock):
    tracker = make_tracker(repositories, clock)

    tracker.update_activity(True, None)
    flags = tracker.update_activity(None, True)

    assert flags.music_played is True
    assert flags.timer_used is True

    flags = tracker.update_activity(music_played=False)
    assert flags.music_played is False
    assert flags.timer_used is True


async def test_new_session_resets_activity_flags(repositories, clock):
    tracker = make_tracker(repositories, clock)
    await tracker.start_session(MoodType.CALM)
    tracker.update_activity(music_played=True, timer_used=True)
    await tracker.end_session()

    await tracker.start_session(MoodType.TIRED)

    assert tracker.activity.music_played is False
    assert tracker.activity.timer_used is False


async def test_starting_while_open_closes_previous_first(repositories, supabase_client, clock):
    tracker = make_tracker(repositories, clock)
    first = await tracker.start_session(MoodType.CALM)
    clock.advance(30)

    second = await tracker.start_session(MoodType.TIRED)

    ops = [(table, op) for table, op, _ in supabase_client.calls]
    assert ops == [("user_sessions", "insert"), ("user_sessions", "update"), ("user_sessions", "insert")]
    assert second != first
    closed = next(row for row in supabase_client.tables["user_sessions"] if row["id"] == first)
    assert closed["duration_seconds"] == 30
