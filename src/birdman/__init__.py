"""
Birdman Challenge: run off the cliff, flap, dodge the birds.
"""

from .data_models import (
    Bird, Birdman, BirdmanState, Camera, EmitTelemetry, GameConfig, Mode,
    PlaySound, RunTracker, SimulationSession, SoundKind,
)
from .game import advance, initialize_effects, initialize_run

__version__ = "1.0.0"

__all__ = [
    "Bird", "Birdman", "BirdmanState", "Camera", "EmitTelemetry", "GameConfig",
    "Mode", "PlaySound", "RunTracker", "SimulationSession", "SoundKind",
    "advance", "initialize_effects", "initialize_run",
]
