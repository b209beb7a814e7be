from drop_runner.settings import GRAVITY, GROUND_Y, JUMP_IMPULSE, PLAYER_H, PLAYER_W, PLAYER_X


class Player:
    def __init__(self):
        self.x = float(PLAYER_X)
        self.w = float(PLAYER_W)
        self.h = float(PLAYER_H)
        self.reset()

    def reset(self):
        self.y = float(GROUND_Y)
        self.prev_y = self.y
        self.vy = 0.0
        self.grounded = True

        # visual state read by the renderer
        self.filter_active = False
        self.distressed = False

    @property
    def bottom(self):
        return self.y + self.h

    @property
    def prev_bottom(self):
        return self.prev_y + self.h

    def jump(self) -> bool:
        # no double jump, no coyote time
        if not self.grounded:
            return False
        self.vy = JUMP_IMPULSE
        self.grounded = False
        return True

    def update(self, dt):
        self.vy += GRAVITY * dt
        self.y += self.vy * dt

        if self.y >= GROUND_Y:
            self.y = float(GROUND_Y)
            self.vy = 0.0
            self.grounded = True
        else:
            self.grounded = False
