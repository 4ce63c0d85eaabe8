from chip8.static import SCREEN_HEIGHT, SCREEN_WIDTH


def blank_display(w=SCREEN_WIDTH, h=SCREEN_HEIGHT):
    return [[0] * w for _ in range(h)]


class Peripherals:
    """
    state shared between the CPU and the outside world:
    the monochrome display buffer and the 16 keys hex keypad

    the display is read by a renderer, the keys are driven by an input layer,
    neither of them is known here
    """
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT):
        self.w, self.h = w, h
        self.display = blank_display(w, h)
        self.keys = 0           # bit k is set while key k is held down
        self.last_key = -1      # most recently pressed key, -1 until the first press

    # ********** DISPLAY
    def clear_display(self):
        self.display = blank_display(self.w, self.h)

    def draw_pixel(self, value, x, y):
        """XOR value into the pixel at (x, y), return True if a lit pixel got erased"""
        x, y = x % self.w, y % self.h     # wrap around
        original = self.display[y][x]
        self.display[y][x] = original ^ (value & 0x1)
        return original == 1 and self.display[y][x] == 0

    def draw_sprite(self, sprite, x, y):
        """
        draw a sprite one byte per row, most significant bit first
        return True if any pixel got erased (collision)
        """
        collided = False
        for row, sprite_byte in enumerate(sprite):
            for col in range(8):
                bit = (sprite_byte >> (7 - col)) & 0x1
                if self.draw_pixel(bit, x + col, y + row):
                    collided = True
        return collided

    # ********** KEYPAD
    def key_down(self, key):
        self.keys |= 1 << key
        self.last_key = key

    def key_up(self, key):
        self.keys &= ~(1 << key)

    def is_key_down(self, key):
        return (self.keys >> key) & 0x1 == 1

    def any_key_down(self):
        return self.keys != 0

    def __str__(self):
        return f"KEYS:{self.keys:016b} | LAST_KEY:{self.last_key}"
