# argument decoders, one per instruction format
# an instruction word is 4 nibbles: the first one (mostly) identifies the
# instruction, the remaining ones carry its operands
#
#   NNN  -> 12 bits address
#   XKK  -> register x, 8 bits immediate kk
#   XY   -> registers x and y
#   X    -> register x
#   XYN  -> registers x and y, 4 bits count n
from collections import namedtuple


Args = namedtuple("Args", ["nnn", "x", "y", "kk", "n"], defaults=(None,) * 5)


def none_decoder(opcode):
    return Args()


def nnn_decoder(opcode):
    return Args(nnn=opcode & 0x0FFF)


def xkk_decoder(opcode):
    return Args(x=(opcode & 0x0F00) >> 8, kk=opcode & 0x00FF)


def xy_decoder(opcode):
    return Args(x=(opcode & 0x0F00) >> 8, y=(opcode & 0x00F0) >> 4)


def x_decoder(opcode):
    return Args(x=(opcode & 0x0F00) >> 8)


def xyn_decoder(opcode):
    x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
    return Args(x=x, y=y, n=opcode & 0x000F)
