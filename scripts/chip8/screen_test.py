import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from chip8.peripherals import Peripherals
from chip8.screen import KEY_MAPPINGS, Screen, translate_key_event


class TestScreen(unittest.TestCase):
    def setUp(self):
        pygame.display.init()
        self.screen = Screen(s=2)

    def tearDown(self):
        pygame.display.quit()

    def painted(self, color):
        """the color as the surface stores it, its pixel format may round it"""
        surface = self.screen.surface
        return surface.unmap_rgb(surface.map_rgb(color))

    def test_surface_size(self):
        self.assertEqual(self.screen.surface.get_size(), (128, 64))

    def test_render_display(self):
        io = Peripherals()
        io.draw_sprite([0x80], 3, 4)
        self.screen.render(io.display)
        self.assertEqual(self.screen.surface.get_at((6, 8)), self.painted(self.screen.foreground))
        self.assertEqual(self.screen.surface.get_at((8, 8)), self.painted(self.screen.background))
        io.clear_display()
        self.screen.render(io.display)
        self.assertEqual(self.screen.surface.get_at((6, 8)), self.painted(self.screen.background))


class TestKeyTranslation(unittest.TestCase):
    def test_sixteen_keys(self):
        self.assertEqual(sorted(KEY_MAPPINGS.values()), list(range(16)))

    def test_press_and_release(self):
        io = Peripherals()
        self.assertTrue(translate_key_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_b), io))
        self.assertTrue(io.is_key_down(0xB))
        self.assertEqual(io.last_key, 0xB)
        self.assertTrue(translate_key_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_b), io))
        self.assertFalse(io.is_key_down(0xB))

    def test_foreign_events_ignored(self):
        io = Peripherals()
        self.assertFalse(translate_key_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z), io))
        self.assertFalse(translate_key_event(pygame.event.Event(pygame.QUIT), io))
        self.assertEqual(io.keys, 0)


if __name__ == "__main__":
    unittest.main()
