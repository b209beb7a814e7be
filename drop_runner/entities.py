import logging
import random
from enum import Enum

from drop_runner.settings import (
    BONUS_CAN_H_RANGE,
    BONUS_CAN_W_RANGE,
    COLLECTIBLE_BAND,
    COLLECTIBLE_SIZE,
    CULL_EDGE,
    GROUND_OFFSET,
    OBSTACLE_H_RANGE,
    OBSTACLE_W_RANGE,
    POWERUP_BAND,
    POWERUP_SIZE,
    SCREEN_H,
    SPAWN_X,
)

logger = logging.getLogger(__name__)


# ------------ Entity kinds ------------
class Category(Enum):
    OBSTACLE = "obstacle"
    COLLECTIBLE = "collectible"
    POWERUP = "powerup"


class ObstacleKind(Enum):
    HAZARD = "hazard"
    BONUS_CAN = "bonus_can"


class PowerupKind(Enum):
    FILTER = "filter"
    SPEED_BOOST = "speed_boost"
    EXTRA_LIFE = "extra_life"


class Entity:
    """
    A scrolling rectangle. `kind` is an ObstacleKind for obstacles,
    a PowerupKind for powerups and None for collectibles.
    """
    __slots__ = ("category", "kind", "x", "y", "w", "h")

    def __init__(self, category, x, y, w, h, kind=None):
        self.category = category
        self.kind = kind
        self.x = float(x)
        self.y = float(y)
        self.w = float(w)
        self.h = float(h)

    @property
    def right(self):
        return self.x + self.w

    def update(self, dt, speed: float):
        self.x -= speed * dt

    def copy(self):
        return Entity(self.category, self.x, self.y, self.w, self.h, kind=self.kind)

    def __repr__(self):
        kind = f" {self.kind.value}" if self.kind is not None else ""
        return f"<Entity {self.category.value}{kind} x={self.x:.1f} y={self.y:.1f} {self.w:.0f}x{self.h:.0f}>"


def _ground_y(h):
    return SCREEN_H - GROUND_OFFSET - h


class EntityPools:
    """
    The three live entity sequences, oldest first.

    Spawning is interval based: the timer accumulates dt and, once it
    passes the profile's interval, four independent rolls decide what
    appears (any number of them may succeed on the same tick).
    """
    def __init__(self, rng: random.Random):
        self.rng = rng
        self.obstacles = []
        self.collectibles = []
        self.powerups = []
        self.spawn_timer = 0.0

    # ----- Spawning -----
    def spawn_obstacle(self):
        h = self.rng.uniform(*OBSTACLE_H_RANGE)
        w = self.rng.uniform(*OBSTACLE_W_RANGE)
        ob = Entity(Category.OBSTACLE, SPAWN_X, _ground_y(h), w, h, kind=ObstacleKind.HAZARD)
        self.obstacles.append(ob)
        return ob

    def spawn_bonus_can(self):
        h = self.rng.uniform(*BONUS_CAN_H_RANGE)
        w = self.rng.uniform(*BONUS_CAN_W_RANGE)
        can = Entity(Category.OBSTACLE, SPAWN_X, _ground_y(h), w, h, kind=ObstacleKind.BONUS_CAN)
        self.obstacles.append(can)
        return can

    def spawn_collectible(self):
        y = SCREEN_H - self.rng.uniform(*COLLECTIBLE_BAND)
        item = Entity(Category.COLLECTIBLE, SPAWN_X, y, COLLECTIBLE_SIZE, COLLECTIBLE_SIZE)
        self.collectibles.append(item)
        return item

    def spawn_powerup(self, kind=None):
        if kind is None:
            kind = self.rng.choice(list(PowerupKind))
        y = SCREEN_H - self.rng.uniform(*POWERUP_BAND)
        pu = Entity(Category.POWERUP, SPAWN_X, y, POWERUP_SIZE, POWERUP_SIZE, kind=kind)
        self.powerups.append(pu)
        return pu

    def spawn_tick(self, profile):
        if self.rng.random() < profile.obstacle_spawn_prob:
            self.spawn_obstacle()
        if self.rng.random() < profile.collectible_spawn_prob:
            self.spawn_collectible()
        if self.rng.random() < profile.powerup_spawn_prob:
            self.spawn_powerup()
        if self.rng.random() < profile.bonus_can_spawn_prob:
            self.spawn_bonus_can()

    # ----- Per-frame -----
    def update(self, dt, speed: float, profile):
        self.spawn_timer += dt
        if self.spawn_timer > profile.spawn_interval_seconds:
            self.spawn_timer = 0.0
            self.spawn_tick(profile)

        for pool in (self.obstacles, self.collectibles, self.powerups):
            for ent in pool:
                ent.update(dt, speed)

        # cull anything that scrolled past the left edge
        self.obstacles = [e for e in self.obstacles if e.right > CULL_EDGE]
        self.collectibles = [e for e in self.collectibles if e.right > CULL_EDGE]
        self.powerups = [e for e in self.powerups if e.right > CULL_EDGE]

    def __len__(self):
        return len(self.obstacles) + len(self.collectibles) + len(self.powerups)
