"""
Basset Run - pixel side-scroller starring a red basset hound

Features:
- Hound jumps with real gravity (delta-time physics, semi-implicit Euler)
- Crates and cones to jump over; touching one ends the run
- Treats float at three heights (ground, low jump, high jump) and add to the score
- Ears flap while the hound is airborne
- Low-resolution playfield scaled up for a chunky pixel look
- Instant restart at any time with R

Controls:
- SPACE / W / UP = Jump (hold to keep hopping)
- R = Restart
- Q = Quit (on the game over screen)

Run:
1) Install pygame if needed: pip install pygame
2) python BassetRun.py
"""

import copy
import logging
import math
import random
import sys
import time
from dataclasses import dataclass
from functools import lru_cache

import pygame

logger = logging.getLogger(__name__)

# -----------------------------
# CONFIGURATION / CONSTANTS
# -----------------------------
FIELD_WIDTH, FIELD_HEIGHT = 320, 180  # logical playfield size (pixels)
SCALE = 3  # window is the playfield scaled up for a pixel look
FPS = 60
MAX_FRAME_DT = 0.1  # longest frame the clock will report (seconds)

# World physics
GROUND_Y = 160  # y of the ground line
GRAVITY = 1200.0  # pixels per second^2
JUMP_VELOCITY = -420.0  # pixels per second (negative goes up)
SCROLL_SPEED = 140.0  # pixels per second, obstacles and treats move left

# Player (basset hound)
PLAYER_X = 40
PLAYER_W, PLAYER_H = 20, 14

# Obstacles: kind -> (width, height). Kind only changes the size.
OBSTACLE_SIZES = {
    "crate": (12, 12),
    "cone": (10, 16),
}
OBSTACLE_KINDS = tuple(OBSTACLE_SIZES)

# Treats float this far above the ground: near ground, low jump, high jump
TREAT_SIZE = 6
TREAT_TIER_OFFSETS = (2, 18, 34)

# Spawning (seconds between spawns, drawn uniformly from the range)
OBSTACLE_SPAWN_RANGE = (0.9, 1.7)
TREAT_SPAWN_RANGE = (0.6, 1.4)
SPAWN_OFFSET = 10  # entities appear this far past the right edge
PRUNE_MARGIN = 5  # entities are dropped once fully this far past the left edge

# Input
JUMP_KEYS = frozenset({pygame.K_SPACE, pygame.K_UP, pygame.K_w})
RESTART_KEY = pygame.K_r
QUIT_KEY = pygame.K_q

# Visuals
BACKGROUND_COLOR = (17, 17, 17)
STAR_COLOR = (31, 31, 31)
GROUND_COLOR = (42, 42, 42)
GROUND_EDGE_COLOR = (58, 58, 58)
HUD_COLOR = (187, 187, 187)
OBSTACLE_COLORS = {
    "body": (123, 90, 46),
    "top": (90, 63, 31),
    "slat": (59, 42, 21),
}
TREAT_COLORS = {
    "body": (216, 178, 106),
    "shade": (183, 143, 77),
    "dot": (138, 106, 51),
}
HOUND_COLORS = {
    "body": (169, 68, 46),  # red-brown
    "dark": (107, 44, 26),  # shading, legs, tail
    "ear": (90, 31, 18),
    "white": (245, 245, 245),  # snout and chest
    "eye": (0, 0, 0),
    "nose": (34, 34, 34),
}


# -----------------------------
# HELPER FUNCTIONS
# -----------------------------

def clamp(v, a, b):
    """Clamp value v between a and b."""
    return max(a, min(b, v))


def sanitize_dt(dt):
    """Return a frame delta that is safe to integrate with: NaN, infinities and negatives become 0."""
    if not math.isfinite(dt) or dt < 0.0:
        return 0.0
    return dt


def rects_overlap(a, b):
    """Strict axis-aligned box overlap between two objects with x, y, w, h.

    Boxes that only share an edge do not overlap.
    """
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )


def px(v):
    """Round half up to a whole pixel."""
    return int(math.floor(v + 0.5))


@lru_cache(maxsize=None)
def get_font(size):
    return pygame.font.SysFont(None, size)


def draw_text(surf, text, size, pos, color=HUD_COLOR, center=False):
    """Convenience to draw text on a surface. Fonts are cached per size."""
    surf_t = get_font(size).render(text, False, color)
    rect = surf_t.get_rect()
    if center:
        rect.center = pos
    else:
        rect.topleft = pos
    surf.blit(surf_t, rect)


# -----------------------------
# GAME OBJECTS
# -----------------------------

class Player:
    """The hound: fixed x, vertical physics only."""

    def __init__(self):
        self.x = float(PLAYER_X)
        self.w = PLAYER_W
        self.h = PLAYER_H
        self.reset()

    @property
    def rest_y(self):
        """Top edge of the player when standing on the ground."""
        return GROUND_Y - self.h

    def reset(self):
        self.y = float(self.rest_y)
        self.vy = 0.0
        self.on_ground = True

    def jump(self):
        """Launch upwards. Only meaningful while standing on the ground."""
        self.vy = JUMP_VELOCITY
        self.on_ground = False

    def update(self, dt):
        """Integrate gravity with delta-time dt (seconds) and land on the ground."""
        # velocity first, then position with the new velocity
        self.vy += GRAVITY * dt
        self.y += self.vy * dt

        # ground collision: snap to the ground and stop falling
        if self.y >= self.rest_y:
            self.y = float(self.rest_y)
            self.vy = 0.0
            self.on_ground = True


class Obstacle:
    """A crate or cone sitting on the ground, scrolling left."""

    def __init__(self, kind, x, y=None):
        self.kind = kind
        self.w, self.h = OBSTACLE_SIZES[kind]
        self.x = float(x)
        # default to resting on the ground plane
        self.y = float(GROUND_Y - self.h if y is None else y)

    def update(self, dt, speed):
        """Move left by speed (px/sec)."""
        self.x -= speed * dt

    def off_screen(self):
        return self.x + self.w <= -PRUNE_MARGIN


class Treat:
    """A biscuit floating at one of the treat heights."""

    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)
        self.w = TREAT_SIZE
        self.h = TREAT_SIZE

    def update(self, dt, speed):
        self.x -= speed * dt

    def off_screen(self):
        return self.x + self.w <= -PRUNE_MARGIN


# -----------------------------
# CLOCK
# -----------------------------

class FrameClock:
    """Monotonic frame clock handing out (dt, now) pairs in seconds.

    The first tick reports dt == 0. Deltas are clamped to [0, max_dt] so a
    stalled or minimised window does not produce one giant physics step, and
    `now` only ever moves forward.
    """

    def __init__(self, time_source=time.monotonic, max_dt=MAX_FRAME_DT):
        self._time_source = time_source
        self.max_dt = max_dt
        self._last = None
        self.now = 0.0

    def tick(self):
        t = self._time_source()
        if self._last is None:
            self._last = t
            return 0.0, self.now

        dt = clamp(sanitize_dt(t - self._last), 0.0, self.max_dt)
        self._last = t
        self.now += dt
        return dt, self.now


# -----------------------------
# SPAWNER
# -----------------------------

class Spawner:
    """Builds new obstacles and treats and draws the delays between them."""

    def __init__(self, rng):
        self.rng = rng

    def spawn_delay(self, span):
        """Uniform random delay in seconds within span = (min, max)."""
        lo, hi = span
        if lo < 0 or lo > hi:
            raise ValueError(f"invalid spawn range {span!r}")
        return self.rng.uniform(lo, hi)

    def spawn_obstacle(self):
        """Create a crate or cone just past the right edge, resting on the ground."""
        kind = self.rng.choice(OBSTACLE_KINDS)
        obstacle = Obstacle(kind, FIELD_WIDTH + SPAWN_OFFSET)
        logger.debug("spawned %s at x=%.1f", kind, obstacle.x)
        return obstacle

    def spawn_treat(self):
        """Create a treat just past the right edge at a random height tier."""
        offset = self.rng.choice(TREAT_TIER_OFFSETS)
        treat = Treat(FIELD_WIDTH + SPAWN_OFFSET, GROUND_Y - TREAT_SIZE - offset)
        logger.debug("spawned treat at y=%.1f", treat.y)
        return treat


# -----------------------------
# WORLD STATE
# -----------------------------

@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only copy of everything the renderer needs for one frame."""

    player: Player
    jumping: bool
    obstacles: tuple
    treats: tuple
    score: int
    game_over: bool
    time: float


class World:
    """Owns the player, the active obstacles and treats, the score and the
    game over flag. `update` is the whole per-tick simulation; it knows
    nothing about windows, events or drawing.
    """

    def __init__(self, rng=None):
        self.spawner = Spawner(rng if rng is not None else random.Random())
        self.player = Player()
        self.time = 0.0
        self._reset()

    def _reset(self):
        self.player.reset()
        self.obstacles = []
        self.treats = []
        self.score = 0
        self.game_over = False
        self.obstacle_timer = self.spawner.spawn_delay(OBSTACLE_SPAWN_RANGE)
        self.treat_timer = self.spawner.spawn_delay(TREAT_SPAWN_RANGE)

    def restart(self):
        """Start a fresh run: player at rest, no entities, score 0, new spawn timers."""
        logger.info("restarting (previous score %d)", self.score)
        self._reset()

    # -----------------------------
    # GAME LOGIC
    # -----------------------------
    def advance_spawn_timers(self, dt):
        """Count both spawn timers down and spawn whatever is due."""
        self.obstacle_timer -= dt
        if self.obstacle_timer <= 0:
            self.obstacles.append(self.spawner.spawn_obstacle())
            self.obstacle_timer = self.spawner.spawn_delay(OBSTACLE_SPAWN_RANGE)

        self.treat_timer -= dt
        if self.treat_timer <= 0:
            self.treats.append(self.spawner.spawn_treat())
            self.treat_timer = self.spawner.spawn_delay(TREAT_SPAWN_RANGE)

    def scroll(self, dt):
        """Move everything left, then drop what has left the field."""
        for obstacle in self.obstacles:
            obstacle.update(dt, SCROLL_SPEED)
        for treat in self.treats:
            treat.update(dt, SCROLL_SPEED)

        self.obstacles = [o for o in self.obstacles if not o.off_screen()]
        self.treats = [t for t in self.treats if not t.off_screen()]

    def handle_collisions(self):
        """Resolve player overlaps. Returns False if an obstacle ended the run.

        Obstacles are checked first and win: a hit stops processing, so a
        treat touched on the same tick is neither scored nor removed.
        """
        for obstacle in self.obstacles:
            if rects_overlap(self.player, obstacle):
                self.game_over = True
                logger.info("hit a %s, game over with %d treats", obstacle.kind, self.score)
                return False

        kept = []
        for treat in self.treats:
            if rects_overlap(self.player, treat):
                self.score += 1
            else:
                kept.append(treat)
        self.treats = kept
        return True

    def update(self, dt, now=None, jump_held=False):
        """Advance the world by dt seconds.

        `now` is the current clock time (only recorded for the renderer) and
        `jump_held` is whether a jump key is down at the start of the tick.
        Holding jump hops again as soon as the hound lands. dt is clamped to
        [0, MAX_FRAME_DT]; non-finite values count as 0.
        """
        dt = clamp(sanitize_dt(dt), 0.0, MAX_FRAME_DT)
        if now is not None:
            self.time = now

        # frozen until restart
        if self.game_over:
            return

        # jump input only works from the ground
        if jump_held and self.player.on_ground:
            self.player.jump()

        self.player.update(dt)
        self.advance_spawn_timers(dt)
        self.scroll(dt)
        self.handle_collisions()

    def snapshot(self):
        """Detached, immutable view of the current state for drawing."""
        return WorldSnapshot(
            player=copy.copy(self.player),
            jumping=not self.player.on_ground,
            obstacles=tuple(copy.copy(o) for o in self.obstacles),
            treats=tuple(copy.copy(t) for t in self.treats),
            score=self.score,
            game_over=self.game_over,
            time=self.time,
        )


# -----------------------------
# INPUT
# -----------------------------

class InputState:
    """Keyboard state collected from pygame events and read once per tick."""

    def __init__(self):
        self.held = set()
        self.restart_requested = False

    def handle_event(self, event):
        """Track jump keys while held and latch restart presses."""
        if event.type == pygame.KEYDOWN:
            if event.key in JUMP_KEYS:
                self.held.add(event.key)
            elif event.key == RESTART_KEY:
                self.restart_requested = True
        elif event.type == pygame.KEYUP:
            self.held.discard(event.key)

    @property
    def jump_held(self):
        return bool(self.held & JUMP_KEYS)

    def consume_restart(self):
        """Return True once per restart key press."""
        requested = self.restart_requested
        self.restart_requested = False
        return requested


# -----------------------------
# RENDERING
# -----------------------------

class Renderer:
    """Draws a WorldSnapshot onto the low-resolution playfield surface."""

    def __init__(self, surface=None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface if surface is not None else pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), 0, 32)

    def draw_background(self):
        """Dark sky with a fixed scatter of faint stars."""
        self.surface.fill(BACKGROUND_COLOR)
        for i in range(55):
            self.surface.fill(STAR_COLOR, ((i * 43) % FIELD_WIDTH, (i * 67) % 110, 1, 1))

    def draw_ground(self):
        self.surface.fill(GROUND_COLOR, (0, GROUND_Y, FIELD_WIDTH, FIELD_HEIGHT - GROUND_Y))
        self.surface.fill(GROUND_EDGE_COLOR, (0, GROUND_Y, FIELD_WIDTH, 2))

    def draw_obstacle(self, obstacle):
        x, y, w, h = px(obstacle.x), px(obstacle.y), obstacle.w, obstacle.h
        self.surface.fill(OBSTACLE_COLORS["body"], (x, y, w, h))
        self.surface.fill(OBSTACLE_COLORS["top"], (x, y, w, 2))
        self.surface.fill(OBSTACLE_COLORS["slat"], (x + 2, y + 4, w - 4, 2))

    def draw_treat(self, treat):
        """A little biscuit with top shading and a centre dot."""
        x, y = px(treat.x), px(treat.y)
        self.surface.fill(TREAT_COLORS["body"], (x, y, 6, 6))
        self.surface.fill(TREAT_COLORS["shade"], (x, y, 6, 1))
        self.surface.fill(TREAT_COLORS["dot"], (x + 2, y + 2, 2, 2))

    def draw_hound(self, player, t, jumping):
        """Draw the basset hound sprite. Ears wiggle while airborne."""
        x, y = px(player.x), px(player.y)
        fill = self.surface.fill
        c = HOUND_COLORS

        # ear flap: small vertical wiggle while jumping
        wiggle = px(math.sin(t * 18) * 2) if jumping else 0

        # long, low body with back shading
        fill(c["body"], (x + 3, y + 6, 12, 5))
        fill(c["dark"], (x + 3, y + 6, 12, 1))

        # head, snout, eye, chest
        fill(c["body"], (x + 14, y + 4, 5, 5))
        fill(c["white"], (x + 17, y + 7, 2, 2))
        fill(c["eye"], (x + 16, y + 6, 1, 1))
        fill(c["white"], (x + 12, y + 9, 2, 2))

        # floppy ears, the back one lags a little behind
        fill(c["ear"], (x + 14, y + 9 + wiggle, 2, 5))
        fill(c["ear"], (x + 13, y + 9 + px(wiggle * 0.7), 1, 4))

        # short legs and tail
        fill(c["dark"], (x + 5, y + 11, 2, 3))
        fill(c["dark"], (x + 10, y + 11, 2, 3))
        fill(c["dark"], (x + 1, y + 8, 2, 1))

        fill(c["nose"], (x + 19, y + 8, 1, 1))

    def draw_hud(self, snapshot):
        draw_text(self.surface, f"Treats: {snapshot.score}", 14, (8, 6))
        draw_text(self.surface, "Jump: Space/W/Up", 14, (8, 20))

        if snapshot.game_over:
            draw_text(self.surface, "Game Over!", 20, (110, 74), color=(255, 255, 255))
            draw_text(self.surface, "Press R to restart", 14, (110, 94), color=(255, 255, 255))

    def draw(self, snapshot):
        """Draw everything back to front and return the playfield surface."""
        self.draw_background()
        self.draw_ground()

        for treat in snapshot.treats:
            self.draw_treat(treat)
        for obstacle in snapshot.obstacles:
            self.draw_obstacle(obstacle)

        self.draw_hound(snapshot.player, snapshot.time, snapshot.jumping)
        self.draw_hud(snapshot)
        return self.surface


# -----------------------------
# MAIN GAME CLASS
# -----------------------------

class Game:
    """Wires pygame (window, events, frame pacing) to the World and Renderer."""

    def __init__(self, rng=None):
        # initialize pygame and create the scaled-up window
        pygame.init()
        self.screen = pygame.display.set_mode((FIELD_WIDTH * SCALE, FIELD_HEIGHT * SCALE))
        pygame.display.set_caption("Basset Run")
        self.pacer = pygame.time.Clock()

        # pacing and frame deltas both come from pygame's millisecond ticks
        self.clock = FrameClock(time_source=lambda: pygame.time.get_ticks() / 1000.0)
        self.input = InputState()
        self.world = World(rng)
        self.renderer = Renderer()

    def handle_input(self):
        """Drain pygame's event queue into the input state."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.KEYDOWN and event.key == QUIT_KEY and self.world.game_over:
                self.quit()
            else:
                self.input.handle_event(event)

    def step(self, dt, now):
        """One update-then-render pass."""
        if self.input.consume_restart():
            self.world.restart()
        self.world.update(dt, now, self.input.jump_held)
        self.draw()

    def draw(self):
        frame = self.renderer.draw(self.world.snapshot())
        self.screen.blit(pygame.transform.scale(frame, self.screen.get_size()), (0, 0))
        pygame.display.flip()

    # -----------------------------
    # RUN / QUIT
    # -----------------------------
    def run(self):
        """Main loop: pace to FPS, read input, step the world, present."""
        while True:
            self.pacer.tick(FPS)
            self.handle_input()
            dt, now = self.clock.tick()
            self.step(dt, now)

    def quit(self):
        pygame.quit()
        sys.exit()


# -----------------------------
# ENTRY POINT
# -----------------------------

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Game().run()


if __name__ == "__main__":
    main()
