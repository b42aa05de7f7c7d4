"""
data_models.py: Data structures for the game state and effect requests.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRDMAN_SPRITE_SIZE, BIRD_SPRITE_SIZE,
    COLLISION_RADIUS, TICK_RATE, INITIAL_BIRDMAN_X, INITIAL_CAMERA_X,
    INITIAL_CAMERA_Y, BIRD_SPAWN_MARGIN
)
from .errors import ConfigError


class Mode(Enum):
    TITLE = "title"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class BirdmanState(Enum):
    """Sub-states of the birdman while the mode is PLAYING."""
    RUNNING = "running"
    FLYING = "flying"
    DAMAGED = "damaged"


class SoundKind(Enum):
    FLAP = "flap"
    DAMAGE = "damage"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameConfig:
    """Screen and sprite geometry the simulation is parameterized by."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    birdman_sprite_size: int = BIRDMAN_SPRITE_SIZE
    bird_sprite_size: int = BIRD_SPRITE_SIZE
    tick_rate: int = TICK_RATE
    collision_radius: int = COLLISION_RADIUS

    def __post_init__(self):
        if self.screen_width <= 0:
            raise ConfigError(f"screen_width must be positive, got {self.screen_width}")
        # Birds spawn inside [margin, height - margin)
        if self.screen_height <= 2 * BIRD_SPAWN_MARGIN:
            raise ConfigError(
                f"screen_height must exceed {2 * BIRD_SPAWN_MARGIN}, got {self.screen_height}")
        if self.birdman_sprite_size <= 0 or self.bird_sprite_size <= 0:
            raise ConfigError("sprite sizes must be positive")
        if self.tick_rate <= 0:
            raise ConfigError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.collision_radius < 0:
            raise ConfigError(f"collision_radius must not be negative, got {self.collision_radius}")

    @property
    def initial_birdman_y(self) -> int:
        return self.screen_height // 3


@dataclass
class Birdman:
    """The player character."""
    y: int
    x: int = INITIAL_BIRDMAN_X
    vy: int = 0
    state: BirdmanState = BirdmanState.RUNNING
    damaged_count: int = 0          # Never reset during a run
    damaged_ticks: int = 0          # Only counts while DAMAGED


@dataclass
class Bird:
    """An obstacle flying towards the birdman."""
    x: int
    y: int


@dataclass
class Camera:
    x: int = INITIAL_CAMERA_X
    y: int = INITIAL_CAMERA_Y


@dataclass
class RunTracker:
    """
    Process-wide identifiers for telemetry. One instance lives as long as
    the process and is passed into every run initialization.
    """
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    initialize_count: int = 0

    def next_initialize(self) -> int:
        self.initialize_count += 1
        return self.initialize_count


@dataclass
class SimulationSession:
    """Everything one run of the game owns."""
    config: GameConfig
    birdman: Birdman
    run_id: str
    initialize_count: int
    mode: Mode = Mode.TITLE
    birds: List[Bird] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)


# -------- Effect Requests --------

@dataclass(frozen=True)
class PlaySound:
    """Play a sound from the beginning, cutting off a running instance."""
    kind: SoundKind


@dataclass(frozen=True)
class EmitTelemetry:
    """Fire-and-forget analytics event."""
    event: str
    fields: Dict[str, Any] = field(default_factory=dict)


Effect = Union[PlaySound, EmitTelemetry]
