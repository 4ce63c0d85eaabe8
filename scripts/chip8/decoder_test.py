import unittest

from chip8.decoder import Args, nnn_decoder, none_decoder, x_decoder, xkk_decoder, xy_decoder, xyn_decoder


class TestDecoders(unittest.TestCase):
    def test_none(self):
        self.assertEqual(none_decoder(0x00E0), Args())

    def test_nnn(self):
        self.assertEqual(nnn_decoder(0x1ABC).nnn, 0xABC)

    def test_xkk(self):
        args = xkk_decoder(0x6E10)
        self.assertEqual((args.x, args.kk), (0xE, 0x10))

    def test_xy(self):
        args = xy_decoder(0x8AB4)
        self.assertEqual((args.x, args.y), (0xA, 0xB))
        self.assertIsNone(args.n)

    def test_x(self):
        self.assertEqual(x_decoder(0xF733).x, 0x7)

    def test_xyn(self):
        args = xyn_decoder(0xD12F)
        self.assertEqual((args.x, args.y, args.n), (0x1, 0x2, 0xF))


if __name__ == "__main__":
    unittest.main()
