import dataclasses

from birdman.data_models import (
    Bird, BirdmanState, EmitTelemetry, Mode, PlaySound, RunTracker, SoundKind
)
from birdman.game import advance, initialize_effects, initialize_run


def telemetry_events(effects):
    return [e.event for e in effects if isinstance(e, EmitTelemetry)]


def test_initialize_run_start_state(session, config):
    assert session.mode is Mode.TITLE
    assert session.birdman.state is BirdmanState.RUNNING
    assert (session.birdman.x, session.birdman.y) == (-60, config.screen_height // 3)
    assert session.birdman.vy == 0
    assert session.birdman.damaged_count == 0
    assert session.birds == []
    assert (session.camera.x, session.camera.y) == (-100, 0)
    assert session.run_id == "test-run"
    assert session.initialize_count == 1


def test_reinitialize_is_idempotent_except_counter(tracker, config):
    first = initialize_run(tracker, config)
    second = initialize_run(tracker, config)

    assert first.birdman == second.birdman
    assert first.birds == second.birds
    assert first.camera == second.camera
    assert (first.initialize_count, second.initialize_count) == (1, 2)


def test_initialize_effects(session):
    assert initialize_effects(session) == [
        EmitTelemetry("initialize", {"run_id": "test-run", "initialize_count": 1})
    ]


def test_title_waits_for_tap(session):
    new, effects = advance(session, False)
    assert new.mode is Mode.TITLE
    assert effects == []


def test_tap_on_title_starts_game(session):
    new, effects = advance(session, True)

    assert new.mode is Mode.PLAYING
    assert effects == [EmitTelemetry("start_game", {"run_id": "test-run"})]
    assert new.birdman.x == -60


def test_advance_does_not_mutate_input(flying):
    flying.birds = [Bird(x=700, y=100)]

    new, _ = advance(flying, True)

    assert flying.birdman.x == 501
    assert flying.birds == [Bird(x=700, y=100)]
    assert new is not flying
    assert new.birdman.x == 502


def test_tap_while_playing_never_changes_mode(session):
    session, _ = advance(session, True)
    for _ in range(100):
        session, _ = advance(session, True)
        assert session.mode is Mode.PLAYING


def test_fall_while_damaged_ends_game(flying):
    flying.birdman.state = BirdmanState.DAMAGED
    flying.birdman.y = flying.config.screen_height
    flying.birdman.damaged_count = 2

    new, effects = advance(flying, False)

    assert new.mode is Mode.GAME_OVER
    assert effects == [
        EmitTelemetry("game_over", {
            "run_id": "test-run", "x": 501, "record": 50, "damaged_count": 2,
        }),
        PlaySound(SoundKind.GAME_OVER),
    ]


def test_fall_while_flying_ends_game(flying):
    flying.birdman.y = flying.config.screen_height - 2
    flying.birdman.vy = 5

    new, effects = advance(flying, False)

    assert new.mode is Mode.GAME_OVER
    assert telemetry_events(effects) == ["game_over"]
    assert effects.count(PlaySound(SoundKind.GAME_OVER)) == 1


def test_game_over_ignores_ticks_without_tap(flying):
    flying.mode = Mode.GAME_OVER
    new, effects = advance(flying, False)

    assert new.mode is Mode.GAME_OVER
    assert new.birdman == flying.birdman
    assert effects == []


def test_tap_on_game_over_restarts(tracker, session):
    session.mode = Mode.GAME_OVER
    session.birdman.x = 3000
    session.birdman.damaged_count = 4
    session.birds = [Bird(x=3100, y=100)]

    new, effects = advance(session, True, tracker)

    assert new.mode is Mode.TITLE
    assert new.birdman.x == -60
    assert new.birdman.damaged_count == 0
    assert new.birds == []
    assert new.camera.x == -100
    assert new.initialize_count == 2
    assert effects == [
        EmitTelemetry("initialize", {"run_id": "test-run", "initialize_count": 2})
    ]


def test_restart_without_tracker_keeps_counting(session):
    session.mode = Mode.GAME_OVER
    new, _ = advance(session, True)
    newer, _ = advance(dataclasses.replace(new, mode=Mode.GAME_OVER), True)

    assert new.initialize_count == 2
    assert newer.initialize_count == 3
    assert newer.run_id == session.run_id


def test_full_runs_keep_invariants():
    tracker = RunTracker()
    session = initialize_run(tracker)
    game_overs = 0

    for tick in range(6000):
        tapped = tick % 15 == 0
        before = session
        session, effects = advance(session, tapped, tracker)

        if before.mode is Mode.PLAYING and session.mode is Mode.PLAYING:
            assert session.birdman.damaged_count >= before.birdman.damaged_count
            assert session.birdman.damaged_count - before.birdman.damaged_count <= 1
            if before.birdman.state is not BirdmanState.FLYING:
                assert session.birdman.damaged_count == before.birdman.damaged_count
            if session.birdman.state is BirdmanState.FLYING:
                assert session.birdman.vy <= 5
        assert effects.count(PlaySound(SoundKind.DAMAGE)) <= 1
        assert len(session.birds) <= 5
        game_overs += telemetry_events(effects).count("game_over")

    assert game_overs >= 1
    assert tracker.initialize_count >= 2
