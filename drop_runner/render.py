import math

import pygame

from drop_runner.entities import ObstacleKind, PowerupKind
from drop_runner.settings import (
    C_BARREL,
    C_BARREL_BAND,
    C_CAN,
    C_COLLECTIBLE,
    C_DROP,
    C_DROP_FILTERED,
    C_FILTER,
    C_GROUND,
    C_OUTLINE,
    C_PUMP,
    C_SKY,
    C_TEXT,
    C_WELL,
    GROUND_OFFSET,
    SCREEN_H,
    SCREEN_W,
    WATER_FACTS,
)

POWERUP_COLORS = {
    PowerupKind.FILTER: C_FILTER,
    PowerupKind.SPEED_BOOST: C_PUMP,
    PowerupKind.EXTRA_LIFE: C_WELL,
}


def scroll_ground(offset, snap):
    # the ground strip only moves while a run is live
    if not snap.running or snap.paused:
        return offset
    return (offset + snap.game_speed * 0.2 / 60) % SCREEN_W


class Renderer:
    """Draws a Snapshot. Read-only: it never touches the simulation."""

    def __init__(self, screen):
        self.screen = screen
        self.font = pygame.font.SysFont(None, 28)
        self.small = pygame.font.SysFont(None, 16)
        self.big = pygame.font.SysFont(None, 56)
        self.bg_offset = 0.0

    # ----- Background -----
    def draw_background(self, snap):
        surf = self.screen
        surf.fill(C_SKY)
        self.bg_offset = scroll_ground(self.bg_offset, snap)
        x = -self.bg_offset
        while x < SCREEN_W:
            pygame.draw.rect(surf, C_GROUND, pygame.Rect(int(x), SCREEN_H - GROUND_OFFSET, 60, GROUND_OFFSET))
            x += 120

    # ----- Player -----
    def draw_player(self, p):
        surf = self.screen
        bob = 0
        if not p.distressed:
            t = pygame.time.get_ticks() / 180.0
            bob = int(math.sin(t) * (2 if p.grounded else 6))
        body = pygame.Rect(int(p.x), int(p.y) + bob, int(p.w), int(p.h))

        color = C_DROP_FILTERED if p.filter_active else C_DROP
        tip = (body.centerx, body.top)
        pygame.draw.ellipse(surf, color, body.inflate(0, -body.h // 3).move(0, body.h // 6))
        pygame.draw.polygon(surf, color, [tip, (body.left + 4, body.centery), (body.right - 4, body.centery)])
        pygame.draw.ellipse(surf, C_OUTLINE, body.inflate(0, -body.h // 3).move(0, body.h // 6), 2)

        eye_y = body.top + int(body.h * 0.45)
        for ex in (body.left + int(body.w * 0.33), body.left + int(body.w * 0.67)):
            pygame.draw.circle(surf, (255, 255, 255), (ex, eye_y), max(4, int(body.w * 0.12)))
            pygame.draw.circle(surf, C_OUTLINE, (ex + (-1 if p.distressed else 2), eye_y), max(2, int(body.w * 0.05)))

        mouth_y = body.top + int(body.h * 0.68)
        mouth = pygame.Rect(body.centerx - int(body.w * 0.15), mouth_y - 6, int(body.w * 0.3), 12)
        if p.distressed:
            # frown
            pygame.draw.arc(surf, C_OUTLINE, mouth.move(0, 6), 0, math.pi, 2)
            for ex, sgn in ((body.left + int(body.w * 0.33), 1), (body.left + int(body.w * 0.67), -1)):
                pygame.draw.line(surf, C_OUTLINE, (ex - 5 * sgn, eye_y - 10), (ex + 3 * sgn, eye_y - 5), 2)
        else:
            pygame.draw.arc(surf, C_OUTLINE, mouth, math.pi, math.tau, 2)

    # ----- Entities -----
    def draw_entities(self, snap):
        surf = self.screen
        for ob in snap.obstacles:
            r = pygame.Rect(int(ob.x), int(ob.y), int(ob.w), int(ob.h))
            if ob.kind is ObstacleKind.BONUS_CAN:
                pygame.draw.rect(surf, C_CAN, r, border_radius=4)
                pygame.draw.rect(surf, C_OUTLINE, r, 2, border_radius=4)
                continue
            pygame.draw.rect(surf, C_BARREL, r.inflate(0, -12), border_radius=6)
            pygame.draw.ellipse(surf, (15, 15, 15), pygame.Rect(r.x, r.y, r.w, max(12, int(r.w * 0.24))))
            for i in (1, 2):
                band_y = r.y + 8 + (r.h - 16) * i // 3
                pygame.draw.rect(surf, C_BARREL_BAND, pygame.Rect(r.x, band_y, r.w, max(3, int(r.w * 0.04))))

        for c in snap.collectibles:
            pygame.draw.ellipse(surf, C_COLLECTIBLE, pygame.Rect(int(c.x), int(c.y), int(c.w), int(c.h)))

        for pu in snap.powerups:
            r = pygame.Rect(int(pu.x), int(pu.y), int(pu.w), int(pu.h))
            pygame.draw.rect(surf, POWERUP_COLORS[pu.kind], r, border_radius=4)
            letter = self.small.render(pu.kind.value[0].upper(), True, (255, 255, 255))
            surf.blit(letter, (r.x + 6, r.y + 4))

    # ----- Effects -----
    def draw_effects(self, snap):
        surf = self.screen
        p = snap.player
        if snap.aura is not None:
            radius, opacity = snap.aura
            layer = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
            center = (int(p.x + p.w / 2), int(p.y + p.h / 2))
            pygame.draw.circle(layer, (*C_FILTER, int(255 * opacity)), center, int(radius))
            surf.blit(layer, (0, 0))

        for x, y, length, opacity in snap.speed_lines:
            shade = int(255 - (255 - C_PUMP[2]) * opacity)
            pygame.draw.line(surf, (C_PUMP[0], C_PUMP[1], shade), (int(x), int(y)), (int(x + length), int(y)), 2)

        for x, y, w, h, color, _angle in snap.confetti:
            pygame.draw.rect(surf, color, pygame.Rect(int(x - w / 2), int(y - h / 2), int(w), int(h)))

    # ----- HUD / screens -----
    def _center_text(self, font, text, y):
        img = font.render(text, True, C_TEXT)
        self.screen.blit(img, (SCREEN_W // 2 - img.get_width() // 2, y))

    def draw_ui(self, snap, fact_index=None):
        txt = self.font.render(
            f"Score: {snap.score}   Lives: {snap.lives}   High: {snap.high_score}   {snap.difficulty.title()}",
            True, C_TEXT,
        )
        self.screen.blit(txt, (10, 10))

        if snap.running and not snap.paused:
            return

        overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
        overlay.fill((255, 255, 255, 150))
        self.screen.blit(overlay, (0, 0))

        if snap.paused:
            self._center_text(self.big, "Paused", SCREEN_H // 2 - 50)
            self._center_text(self.font, "P to resume  •  R to reset", SCREEN_H // 2 + 10)
        elif snap.game_over:
            self._center_text(self.big, f"Final Score: {snap.score}", SCREEN_H // 2 - 80)
            if fact_index is not None:
                self._center_text(self.font, f"Water Fact: {WATER_FACTS[fact_index]}", SCREEN_H // 2 - 20)
            self._center_text(self.font, "Space to play again  •  Esc to quit", SCREEN_H // 2 + 30)
        else:
            self._center_text(self.big, "Clean Drop Runner", SCREEN_H // 2 - 80)
            self._center_text(self.font, "Space to start  •  1/2/3 difficulty  •  Esc to quit", SCREEN_H // 2 - 10)

    def draw(self, snap, fact_index=None):
        self.draw_background(snap)
        self.draw_player(snap.player)
        self.draw_entities(snap)
        self.draw_effects(snap)
        self.draw_ui(snap, fact_index)
        pygame.display.flip()
