"""
effects.py: Executes the effect requests returned by the simulation.
"""

import logging
from typing import Iterable

from .data_models import Effect, EmitTelemetry, PlaySound

logger = logging.getLogger(__name__)


class EffectDispatcher:
    def __init__(self, sounds, telemetry):
        self.sounds = sounds
        self.telemetry = telemetry

    def execute(self, effects: Iterable[Effect]):
        for effect in effects:
            if isinstance(effect, PlaySound):
                self.sounds.play(effect.kind)
            elif isinstance(effect, EmitTelemetry):
                self.telemetry.emit(effect.event, effect.fields)
            else:
                logger.warning("Ignoring unknown effect %r", effect)
