import math

from drop_runner.settings import (
    AURA_FADE,
    AURA_GROWTH,
    C_CONFETTI,
    CONFETTI_COUNT,
    CONFETTI_GRAVITY,
    SPEED_LINE_COUNT,
)


class Confetti:
    __slots__ = ("x", "y", "vx", "vy", "w", "h", "color", "angle", "spin", "life")

    def __init__(self, x, y, vx, vy, w, h, color, angle, spin, life):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.w = w
        self.h = h
        self.color = color
        self.angle = angle
        self.spin = spin
        self.life = life

    def update(self, dt):
        self.vy += CONFETTI_GRAVITY * dt
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.angle += self.spin * dt
        self.life -= dt


class SpeedLine:
    __slots__ = ("x", "y", "vx", "vy", "length", "opacity", "life")

    def __init__(self, x, y, vx, vy, length, life):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.length = length
        self.opacity = 1.0
        self.life = life

    def update(self, dt):
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.life -= dt
        self.opacity = max(0.0, self.opacity - 2.5 * dt)


class Aura:
    def __init__(self):
        self.active = False
        self.radius = 0.0
        self.opacity = 0.0

    def start(self, radius):
        self.active = True
        self.radius = float(radius)
        self.opacity = 1.0

    def update(self, dt):
        if not self.active:
            return
        self.radius += AURA_GROWTH * dt
        self.opacity -= AURA_FADE * dt
        if self.opacity <= 0:
            self.active = False
            self.opacity = 0.0


class Effects:
    """Short-lived celebration visuals. Purely cosmetic: nothing here feeds back into gameplay."""

    def __init__(self, rng):
        self.rng = rng
        self.confetti = []
        self.speed_lines = []
        self.aura = Aura()

    def confetti_burst(self, x, y):
        rng = self.rng
        for _ in range(CONFETTI_COUNT):
            angle = rng.uniform(0, math.tau)
            speed = rng.uniform(120, 420)
            self.confetti.append(Confetti(
                x, y,
                vx=math.cos(angle) * speed,
                vy=-rng.uniform(220, 480),
                w=rng.uniform(4, 9),
                h=rng.uniform(6, 12),
                color=rng.choice(C_CONFETTI),
                angle=rng.uniform(0, math.tau),
                spin=rng.uniform(-8, 8),
                life=rng.uniform(2.0, 3.2),
            ))

    def speed_lines_burst(self, x, y):
        rng = self.rng
        for _ in range(SPEED_LINE_COUNT):
            self.speed_lines.append(SpeedLine(
                x + rng.uniform(-8, 8),
                y + rng.uniform(-10, 10),
                vx=-rng.uniform(240, 560),  # mostly horizontal, moving left fast
                vy=rng.uniform(-12, 12),
                length=rng.uniform(24, 80),
                life=rng.uniform(0.25, 0.6),
            ))

    def update(self, dt):
        if self.confetti:
            for p in self.confetti:
                p.update(dt)
            self.confetti = [p for p in self.confetti if p.life > 0]

        if self.speed_lines:
            for s in self.speed_lines:
                s.update(dt)
            self.speed_lines = [s for s in self.speed_lines if s.life > 0]

        self.aura.update(dt)
