import unittest

from chip8.peripherals import Peripherals


class TestDisplay(unittest.TestCase):
    def setUp(self):
        self.io = Peripherals()

    def test_blank_at_creation(self):
        self.assertEqual(len(self.io.display), 32)
        self.assertTrue(all(len(row) == 64 for row in self.io.display))
        self.assertFalse(any(any(row) for row in self.io.display))

    def test_draw_pixel_xor(self):
        self.assertFalse(self.io.draw_pixel(1, 3, 4))
        self.assertEqual(self.io.display[4][3], 1)
        self.assertTrue(self.io.draw_pixel(1, 3, 4))
        self.assertEqual(self.io.display[4][3], 0)

    def test_draw_pixel_zero_keeps_pixel(self):
        self.io.draw_pixel(1, 0, 0)
        self.assertFalse(self.io.draw_pixel(0, 0, 0))
        self.assertEqual(self.io.display[0][0], 1)

    def test_draw_pixel_wraps(self):
        self.io.draw_pixel(1, 64 + 2, 32 + 1)
        self.assertEqual(self.io.display[1][2], 1)

    def test_draw_sprite_msb_first(self):
        self.assertFalse(self.io.draw_sprite([0b10000001], 0, 0))
        self.assertEqual(self.io.display[0][:8], [1, 0, 0, 0, 0, 0, 0, 1])

    def test_draw_sprite_twice_collides_and_erases(self):
        sprite = [0xF0, 0x90, 0xF0]
        self.assertFalse(self.io.draw_sprite(sprite, 10, 10))
        self.assertTrue(self.io.draw_sprite(sprite, 10, 10))
        self.assertFalse(any(any(row) for row in self.io.display))

    def test_draw_sprite_wraps_around_edges(self):
        self.io.draw_sprite([0xFF, 0xFF], 60, 31)
        self.assertEqual(self.io.display[31][60:], [1, 1, 1, 1])
        self.assertEqual(self.io.display[0][:4], [1, 1, 1, 1])

    def test_clear_display(self):
        self.io.draw_sprite([0xFF], 0, 0)
        self.io.clear_display()
        self.assertFalse(any(any(row) for row in self.io.display))


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.io = Peripherals()

    def test_untouched(self):
        self.assertFalse(self.io.any_key_down())
        self.assertEqual(self.io.last_key, -1)

    def test_key_down_up(self):
        self.io.key_down(0xA)
        self.assertTrue(self.io.is_key_down(0xA))
        self.assertFalse(self.io.is_key_down(0xB))
        self.assertEqual(self.io.keys, 1 << 0xA)
        self.io.key_up(0xA)
        self.assertFalse(self.io.is_key_down(0xA))
        self.assertFalse(self.io.any_key_down())

    def test_last_key_follows_presses(self):
        self.io.key_down(0x1)
        self.io.key_down(0xF)
        self.assertEqual(self.io.last_key, 0xF)
        self.io.key_up(0xF)
        self.assertEqual(self.io.last_key, 0xF)

    def test_key_up_on_released_key(self):
        self.io.key_up(0x3)
        self.assertEqual(self.io.keys, 0)


if __name__ == "__main__":
    unittest.main()
