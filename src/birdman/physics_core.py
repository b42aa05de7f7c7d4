"""
physics_core.py: The shared kinematic functions and collision logic.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import GRAVITY, MAX_FALL_VELOCITY, FLY_SPEED
from .data_models import Bird, Birdman, GameConfig
from .scoring import flap_impulse


@dataclass
class PhysicsCore:
    """
    Integer per-tick physics shared by every birdman sub-state.
    """
    config: GameConfig = field(default_factory=GameConfig)

    def apply_gravity_and_movement(self, x: int, y: int, vy: int) -> tuple[int, int, int]:
        """
        Calculates new position and velocity after one tick of flight.
        """
        vy = min(vy + GRAVITY, MAX_FALL_VELOCITY)
        x += FLY_SPEED
        y += vy
        return x, y, vy

    def flap(self, birdman: Birdman) -> int:
        """Returns the velocity after a flap at the birdman's current distance."""
        return birdman.vy + flap_impulse(birdman.x, birdman.damaged_count)

    def check_collision(self, birdman: Birdman, birds: List[Bird]) -> Optional[Bird]:
        """
        Returns the earliest-spawned bird within the collision radius, if any.
        """
        radius_sq = self.config.collision_radius ** 2
        for bird in birds:
            dx = birdman.x - bird.x
            dy = birdman.y - bird.y
            if dx * dx + dy * dy < radius_sq:
                return bird
        return None

    def is_above_ceiling(self, y: int) -> bool:
        return y < 0

    def is_below_floor(self, y: int) -> bool:
        return y > self.config.screen_height

    def is_behind_camera(self, bird: Bird, camera_x: int) -> bool:
        """True once the bird's right edge is at or left of the camera's left edge."""
        return bird.x + self.config.bird_sprite_size <= camera_x
