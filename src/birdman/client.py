"""
client.py

Fixed-timestep game loop and pygame rendering. Feeds one tap flag per tick
into the simulation and executes the effects it returns.
"""

import logging
import math
from typing import Optional

import pygame

from .constants import CLIFF_WIDTH
from .data_models import BirdmanState, GameConfig, Mode, RunTracker, SimulationSession
from .effects import EffectDispatcher
from .game import advance, initialize_effects, initialize_run
from .scoring import format_int_comma, record_from_x
from .sound import SoundBoard
from .telemetry import TelemetryClient

logger = logging.getLogger(__name__)

# Rendering can run faster than the simulation
RENDER_FPS = 60

SKY_COLOR = (120, 190, 240)
SEA_COLOR = (20, 90, 170)
SEA_HEIGHT = 60
CLIFF_COLOR = (110, 85, 60)
BIRDMAN_COLOR = (250, 220, 60)
DAMAGED_COLOR = (230, 80, 60)
BIRD_COLOR = (60, 60, 60)
WHITE = (255, 255, 255)
GREY = (200, 200, 200)


def wing_frame(x: int) -> int:
    """Alternates between the two wing poses every 10 world units."""
    return x // 10 % 2


def damaged_angle(damaged_ticks: int) -> float:
    """Spin of a damaged birdman in degrees, a third of a radian per tick."""
    return math.degrees(damaged_ticks / 3)


class BirdmanClient:
    def __init__(self, config: GameConfig, telemetry: TelemetryClient,
                 sounds: Optional[SoundBoard] = None):
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode((config.screen_width, config.screen_height))
        pygame.display.set_caption("Birdman")

        self.tracker = RunTracker()
        self.telemetry = telemetry
        self.dispatcher = EffectDispatcher(sounds or SoundBoard(), telemetry)

        self.session: SimulationSession = initialize_run(self.tracker, config)
        self.dispatcher.execute(initialize_effects(self.session))
        self.best_record = 0

        # Time Management
        self.clock = pygame.time.Clock()
        self.tick_time = 1.0 / config.tick_rate
        self.tick_timer = 0.0
        self.tapped_on_render_frame = False

        self.title_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 22)

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            render_delta_time = self.clock.tick(RENDER_FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                if (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) or event.type == pygame.MOUSEBUTTONDOWN:
                    self.tapped_on_render_frame = True

            # --- Simulation Loop (Fixed Timestep) ---
            self.tick_timer += render_delta_time
            while self.tick_timer >= self.tick_time:
                self.tick_timer -= self.tick_time
                self._tick()

            self._draw_game()

        self.telemetry.close()
        pygame.quit()

    def _tick(self):
        tapped = self.tapped_on_render_frame
        self.tapped_on_render_frame = False

        previous_mode = self.session.mode
        self.session, effects = advance(self.session, tapped, self.tracker)
        self.dispatcher.execute(effects)

        if previous_mode is Mode.PLAYING and self.session.mode is Mode.GAME_OVER:
            record = record_from_x(self.session.birdman.x)
            if record > self.best_record:
                self.best_record = record
                logger.info("New best record: %sm", format_int_comma(record))

    # -------- Rendering --------

    def _draw_game(self):
        screen = self.screen
        session = self.session
        width, height = self.config.screen_width, self.config.screen_height
        camera_x = session.camera.x

        screen.fill(SKY_COLOR)
        pygame.draw.rect(screen, SEA_COLOR, (0, height - SEA_HEIGHT, width, SEA_HEIGHT))

        # Cliff ends at the world origin
        cliff_top = self.config.initial_birdman_y + self.config.birdman_sprite_size // 3
        pygame.draw.rect(screen, CLIFF_COLOR,
                         (-CLIFF_WIDTH - camera_x, cliff_top, CLIFF_WIDTH, height - cliff_top))

        self._draw_birdman(session.birdman, camera_x)
        for bird in session.birds:
            self._draw_bird(bird, camera_x)

        birdman = session.birdman
        record = format_int_comma(record_from_x(birdman.x))
        if session.mode is Mode.TITLE:
            self._blit_centered(self.title_font, "BIRDMAN CHALLENGE", 90)
            self._blit_centered(self.font, "CLICK TO START", 170)
            if self.best_record > 0:
                self._blit_centered(self.small_font, f"BEST {format_int_comma(self.best_record)}m", 220)
            instr = self.small_font.render("Space / Click = Flap | Esc = Quit", True, GREY)
            screen.blit(instr, (10, height - 30))
        elif session.mode is Mode.PLAYING:
            screen.blit(self.small_font.render(f"{record}m", True, WHITE), (24, 24))
        else:
            self._blit_centered(self.title_font, "GAME OVER", 180)
            self._blit_centered(self.font, "YOUR RECORD IS", 250)
            self._blit_centered(self.font, f"{record}m!", 298)

        pygame.display.flip()

    def _blit_centered(self, font, text: str, y: int):
        surf = font.render(text, True, WHITE)
        self.screen.blit(surf, (self.config.screen_width // 2 - surf.get_width() // 2, y))

    def _draw_birdman(self, birdman, camera_x: int):
        size = self.config.birdman_sprite_size
        center = (birdman.x - camera_x, birdman.y)

        if birdman.state is BirdmanState.DAMAGED:
            body = pygame.Surface((size // 2, size // 4), pygame.SRCALPHA)
            body.fill(DAMAGED_COLOR)
            # pygame rotates counter-clockwise
            spun = pygame.transform.rotate(body, -damaged_angle(birdman.damaged_ticks))
            self.screen.blit(spun, spun.get_rect(center=center))
            return

        pygame.draw.circle(self.screen, BIRDMAN_COLOR, center, size // 4)
        if birdman.state is BirdmanState.FLYING:
            self._draw_wings(center, size // 2, wing_frame(birdman.x), BIRDMAN_COLOR)

    def _draw_bird(self, bird, camera_x: int):
        size = self.config.bird_sprite_size
        center = (bird.x - camera_x, bird.y)
        pygame.draw.circle(self.screen, BIRD_COLOR, center, size // 5)
        self._draw_wings(center, size // 3, wing_frame(bird.x), BIRD_COLOR)

    def _draw_wings(self, center, span: int, frame: int, color):
        """Frame 0 has the wings up, frame 1 down."""
        cx, cy = center
        tip_y = cy - span // 3 if frame == 0 else cy + span // 3
        pygame.draw.line(self.screen, color, (cx - span, tip_y), center, 4)
        pygame.draw.line(self.screen, color, (cx + span, tip_y), center, 4)
