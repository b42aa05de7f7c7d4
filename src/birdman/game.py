"""
game.py: The mode state machine (title, playing, game over) and the
per-tick entry point used by the client loop.
"""

import copy
import logging
from typing import List, Optional, Tuple

from .data_models import (
    Birdman, Camera, Effect, EmitTelemetry, GameConfig, Mode, PlaySound,
    RunTracker, SimulationSession, SoundKind
)
from .physics_engine import BirdmanEngine
from .scoring import record_from_x

logger = logging.getLogger(__name__)


def initialize_run(tracker: RunTracker, config: Optional[GameConfig] = None) -> SimulationSession:
    """
    Builds a start-of-run session in TITLE mode. Bumps the tracker's
    process-wide initialize counter and records it on the session.
    """
    config = config or GameConfig()
    count = tracker.next_initialize()
    session = SimulationSession(
        config=config,
        birdman=Birdman(y=config.initial_birdman_y),
        run_id=tracker.run_id,
        initialize_count=count,
        mode=Mode.TITLE,
        birds=[],
        camera=Camera(),
    )
    logger.debug("Initialized run %s (#%d)", session.run_id, count)
    return session


def initialize_effects(session: SimulationSession) -> List[Effect]:
    """The telemetry request announcing a freshly initialized session."""
    return [_telemetry(session, "initialize", initialize_count=session.initialize_count)]


def advance(session: SimulationSession, tapped: bool,
            tracker: Optional[RunTracker] = None) -> Tuple[SimulationSession, List[Effect]]:
    """
    Advances the game by one tick. The given session is left untouched;
    the returned one is a new object. ``tracker`` is only used for the
    restart from GAME_OVER and defaults to one seeded from the session.
    """
    session = copy.deepcopy(session)
    effects: List[Effect] = []

    if session.mode is Mode.TITLE:
        if tapped:
            session.mode = Mode.PLAYING
            effects.append(_telemetry(session, "start_game"))
            logger.info("Game started (run %s)", session.run_id)

    elif session.mode is Mode.PLAYING:
        engine = BirdmanEngine(config=session.config)
        effects.extend(engine.step(session, tapped))

        if engine.is_below_floor(session.birdman.y):
            session.mode = Mode.GAME_OVER
            birdman = session.birdman
            effects.append(_telemetry(
                session, "game_over",
                x=birdman.x,
                record=record_from_x(birdman.x),
                damaged_count=birdman.damaged_count,
            ))
            effects.append(PlaySound(SoundKind.GAME_OVER))
            logger.info("Game over at x=%d after %d hits",
                        birdman.x, birdman.damaged_count)

    elif session.mode is Mode.GAME_OVER:
        if tapped:
            if tracker is None:
                tracker = RunTracker(run_id=session.run_id,
                                     initialize_count=session.initialize_count)
            session = initialize_run(tracker, session.config)
            effects.extend(initialize_effects(session))

    return session, effects


def _telemetry(session: SimulationSession, event: str, **fields) -> EmitTelemetry:
    return EmitTelemetry(event=event, fields={"run_id": session.run_id, **fields})
