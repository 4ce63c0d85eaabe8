from chip8.cpu import Chip8, Memory, Registers
from chip8.errors import Chip8Error, StackOverflow, StackUnderflow, UnknownOpcode
from chip8.peripherals import Peripherals
