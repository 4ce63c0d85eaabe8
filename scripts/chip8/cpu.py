from chip8 import static
from chip8.instructions import find_instruction
from chip8.peripherals import Peripherals
from chip8.static import (
    C8_FONTS, FONT_START_ADDRESS, MEMORY_SIZE, REGISTERS_COUNT, ROM_START_ADDRESS, STACK_SIZE,
)


# ******************** MEMORY SECTION
# ********** WRAPS A BYTEARRAY TO REPRESENT THE MAIN MEMORY WITH A LIMITED SIZE OF 4KB
class Memory:
    def __init__(self, size=MEMORY_SIZE):
        self.inner = bytearray(size)

    def __setitem__(self, key, value):
        # every cell holds a single byte, anything wider gets truncated
        if isinstance(key, slice):
            data = bytes(v & 0xFF for v in value)
            cells = len(range(*key.indices(len(self.inner))))
            if cells != len(data):
                raise IndexError(f"Cannot write {len(data)} bytes over {cells} cells, the size is fixed at {len(self.inner)}")
            self.inner[key] = data
        else:
            self.inner[key] = value & 0xFF

    def __getitem__(self, index):
        return self.inner[index]

    def __len__(self):
        return len(self.inner)


# ********** THE 16 VARIABLE REGISTERS V0-VF, VF DOUBLES AS FLAG REGISTER
class Registers(Memory):
    def __init__(self):
        super().__init__(REGISTERS_COUNT)

    def __str__(self):
        return " ".join(f"V{i:X}:{v:02x}" for i, v in enumerate(self.inner))


# ******************** CPU SECTION
class Chip8:
    def __init__(self, io=None):
        self.mem = Memory()
        self.mem[FONT_START_ADDRESS:FONT_START_ADDRESS + len(C8_FONTS)] = C8_FONTS
        self.v_regs = Registers()
        self.stack = [0] * STACK_SIZE
        self.sp = -1    # points to the top of the stack, -1 when empty
        self.pc = ROM_START_ADDRESS
        self.idx = 0    # specify where the sprites reside in memory
        self.dt = 0     # delay timer, active when non-zero
        self.st = 0     # sound timer, active when non-zero
        self.draw = False
        self.io = io if io is not None else Peripherals()

    def __str__(self):
        registers = f"PC_REGISTER:0x{self.pc:04x} | IDX_REGISTER:0x{self.idx:04x} | VARIABLE_REGISTERS:{self.v_regs}"
        stack = f"SP:{self.sp} | STACK:{[hex(a) for a in self.stack[:self.sp + 1]]}"
        timers = f"DT:{self.dt} | ST:{self.st}"
        return f"{registers}\n{stack}\n{timers}\n{self.io}"

    def load(self, rom):
        """copy the program bytes in memory starting at ROM_START_ADDRESS"""
        rom = bytes(rom)
        if ROM_START_ADDRESS + len(rom) > len(self.mem):
            raise ValueError(f"The ROM is {len(rom)} bytes long, at most {len(self.mem) - ROM_START_ADDRESS} fit in memory")
        self.mem[ROM_START_ADDRESS:ROM_START_ADDRESS + len(rom)] = rom

    def load_rom(self, path):
        """load ROM file from user specified path"""
        with open(path, mode='rb') as f:
            self.load(f.read())
        if static.DEBUG: print(f"The ROM at path {path} has been loaded successfully")

    def fetch(self):
        # each instruction is two bytes long, stored big-endian
        return self.mem[self.pc] << 8 | self.mem[self.pc + 1]

    def decode(self, opcode):
        """decode opcodes using patterns and masks, return the instruction and its arguments"""
        instruction = find_instruction(opcode)
        return instruction, instruction.decode(opcode)

    def step(self):
        """emulate one machine cycle: fetch opcode, decode opcode, execute opcode"""
        self.draw = False
        opcode = self.fetch()
        instruction, args = self.decode(opcode)
        instruction.execute(self, args)

    def tick_timers(self):
        """called by the run loop at TIMER_HZ, never by step"""
        if self.dt > 0:
            self.dt -= 1
        if self.st > 0:
            self.st -= 1
