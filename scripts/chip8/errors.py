class Chip8Error(Exception):
    """base class for every fatal condition raised while stepping the VM"""


class UnknownOpcode(Chip8Error, NotImplementedError):
    def __init__(self, opcode):
        self.opcode = opcode
        super().__init__(f"The opcode ({opcode:#06x}) does not match any CHIP-8 instruction")


class StackUnderflow(Chip8Error, IndexError):
    def __init__(self):
        super().__init__("Cannot return from a subroutine, the CHIP-8 stack is empty")


class StackOverflow(Chip8Error, IndexError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"The CHIP-8 stack can contain at most {size} addresses. Limit exceeded")
