"""
sound.py: Sound effect playback through pygame.mixer.
"""

import logging
import os
from typing import Dict, Optional

import pygame

from .data_models import SoundKind
from .errors import AssetError

logger = logging.getLogger(__name__)

SOUND_FILES = {
    SoundKind.FLAP: "flap.wav",
    SoundKind.DAMAGE: "damage.wav",
    SoundKind.GAME_OVER: "game_over.wav",
}


class SoundBoard:
    """Holds one pygame Sound per kind. Silent when no directory is given."""

    def __init__(self, sound_dir: Optional[str] = None):
        self.sounds: Dict[SoundKind, pygame.mixer.Sound] = {}
        if sound_dir is None:
            logger.info("No sound directory configured, running silent")
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            raise AssetError(f"Failed to open audio device: {e}") from e

        for kind, filename in SOUND_FILES.items():
            path = os.path.join(sound_dir, filename)
            try:
                self.sounds[kind] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as e:
                raise AssetError(f"Failed to load sound {path}: {e}") from e

    def play(self, kind: SoundKind):
        """Restarts the sound from the beginning."""
        sound = self.sounds.get(kind)
        if sound is None:
            return
        sound.stop()
        sound.play()
