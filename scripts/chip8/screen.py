import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"   # this env var disable pygame's welcome message when imported
import pygame
from pygame.locals import (
    K_0, K_1, K_2, K_3,
    K_4, K_5, K_6, K_7,
    K_8, K_9, K_a, K_b,
    K_c, K_d, K_e, K_f,
)

from chip8.static import SCREEN_HEIGHT, SCREEN_WIDTH


KEY_MAPPINGS = {
    K_0: 0x0,
    K_1: 0x1,
    K_2: 0x2,
    K_3: 0x3,
    K_4: 0x4,
    K_5: 0x5,
    K_6: 0x6,
    K_7: 0x7,
    K_8: 0x8,
    K_9: 0x9,
    K_a: 0xA,
    K_b: 0xB,
    K_c: 0xC,
    K_d: 0xD,
    K_e: 0xE,
    K_f: 0xF,
}

SCALE = 15
BLUE = pygame.Color(80,69,155,255)
LIGHT_BLUE = pygame.Color(136,126,203,255)


class Screen:
    """paint the display buffer of the peripherals on a pygame window"""
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT, s=SCALE, bg_color=BLUE, fg_color=LIGHT_BLUE):
        self.w, self.h, self.scale = w, h, s
        self.background = bg_color
        self.foreground = fg_color
        self.surface = pygame.display.set_mode(
            (w * self.scale, h * self.scale),
        )
        self.surface.fill(self.background)

    def write_pixel(self, x, y, color):
        pygame.draw.rect(
            self.surface,
            self.background if color==0 else self.foreground,
            (x * self.scale, y * self.scale, self.scale, self.scale)
        )

    def render(self, display):
        """
        paint every pixel of a rows x columns grid of 0/1 values
        the change won't be immediatly visible because it'll require a call to the static method refresh
        """
        self.surface.fill(self.background)
        for y, row in enumerate(display):
            for x, pixel in enumerate(row):
                if pixel:
                    self.write_pixel(x, y, 1)

    @staticmethod
    def refresh():
        pygame.display.flip()


def translate_key_event(event, io):
    """forward a pygame KEYDOWN/KEYUP event to the keypad, return True if the key belongs to it"""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP) or event.key not in KEY_MAPPINGS:
        return False
    key = KEY_MAPPINGS[event.key]
    if event.type == pygame.KEYDOWN:
        io.key_down(key)
    else:
        io.key_up(key)
    return True
