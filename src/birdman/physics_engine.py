"""
physics_engine.py: Per-tick world simulation while a run is being played.
Drives the birdman sub-state machine, the bird spawner and bird retirement.
"""

import logging
import random
from dataclasses import dataclass
from typing import List

from .constants import (
    RUN_SPEED, CAMERA_SPEED, BIRD_SPEED, DAMAGED_FALL_SPEED,
    BIRD_SPAWN_INTERVAL, BIRD_SPAWN_MARGIN
)
from .data_models import (
    Bird, BirdmanState, Effect, PlaySound, SimulationSession, SoundKind
)
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class BirdmanEngine(PhysicsCore):
    """
    Advances one PLAYING tick. Mutates the session it is given and returns
    the effect requests produced along the way. The floor check and the mode
    change it causes belong to the caller.
    """

    def step(self, session: SimulationSession, tapped: bool) -> List[Effect]:
        handlers = {
            BirdmanState.RUNNING: self._step_running,
            BirdmanState.FLYING: self._step_flying,
            BirdmanState.DAMAGED: self._step_damaged,
        }
        return handlers[session.birdman.state](session, tapped)

    # -------- Sub-states --------

    def _step_running(self, session: SimulationSession, tapped: bool) -> List[Effect]:
        birdman = session.birdman
        birdman.x += RUN_SPEED
        if birdman.x >= 0:
            birdman.state = BirdmanState.FLYING
            logger.debug("Birdman left the cliff")
        return []

    def _step_flying(self, session: SimulationSession, tapped: bool) -> List[Effect]:
        birdman = session.birdman
        effects: List[Effect] = []

        # 1. Camera and spawn use the pre-movement position
        session.camera.x += CAMERA_SPEED
        if birdman.x % BIRD_SPAWN_INTERVAL == 0:
            self._spawn_bird(session)

        # 2. Move and retire birds
        self._step_birds(session)

        # 3. Apply flap impulse
        if tapped:
            birdman.vy = self.flap(birdman)
            effects.append(PlaySound(SoundKind.FLAP))

        # 4. Apply gravity and movement
        birdman.x, birdman.y, birdman.vy = self.apply_gravity_and_movement(
            birdman.x, birdman.y, birdman.vy)

        # 5. Damage: ceiling first, then birds; at most one per tick
        if self.is_above_ceiling(birdman.y):
            self._damage(session, "ceiling")
            effects.append(PlaySound(SoundKind.DAMAGE))
        elif self.check_collision(birdman, session.birds) is not None:
            self._damage(session, "bird")
            effects.append(PlaySound(SoundKind.DAMAGE))

        return effects

    def _step_damaged(self, session: SimulationSession, tapped: bool) -> List[Effect]:
        birdman = session.birdman
        self._step_birds(session)

        birdman.damaged_ticks += 1
        birdman.vy = 0
        birdman.y += DAMAGED_FALL_SPEED

        if birdman.damaged_ticks >= self.config.tick_rate:
            birdman.damaged_ticks = 0
            birdman.state = BirdmanState.FLYING
            logger.debug("Birdman recovered at x=%d y=%d", birdman.x, birdman.y)
        return []

    # -------- Helpers --------

    def _spawn_bird(self, session: SimulationSession):
        """Places a new bird one screen ahead of the birdman."""
        height = self.config.screen_height
        y = random.randrange(BIRD_SPAWN_MARGIN, height - BIRD_SPAWN_MARGIN)
        bird = Bird(x=session.birdman.x + self.config.screen_width, y=y)
        session.birds.append(bird)
        logger.debug("Spawned bird at (%d, %d)", bird.x, bird.y)

    def _step_birds(self, session: SimulationSession):
        for bird in session.birds:
            bird.x -= BIRD_SPEED
        camera_x = session.camera.x
        session.birds = [b for b in session.birds if not self.is_behind_camera(b, camera_x)]

    def _damage(self, session: SimulationSession, cause: str):
        birdman = session.birdman
        birdman.damaged_count += 1
        birdman.state = BirdmanState.DAMAGED
        birdman.damaged_ticks = 0
        logger.info("Birdman damaged by %s at x=%d (damage count %d)",
                    cause, birdman.x, birdman.damaged_count)
