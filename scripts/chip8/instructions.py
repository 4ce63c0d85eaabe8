# the CHIP-8 instruction set as data: every instruction is a plain record made of
#   pattern  -> the bits that identify the instruction once the operands are masked out
#   mask     -> which bits of the instruction word belong to the pattern
#   decode   -> the argument decoder for the instruction format
#   execute  -> the effect, a function of (cpu, args), always in charge of moving the pc
import random
from collections import namedtuple
from functools import wraps

from chip8 import static
from chip8.decoder import nnn_decoder, none_decoder, x_decoder, xkk_decoder, xy_decoder, xyn_decoder
from chip8.errors import StackUnderflow, StackOverflow, UnknownOpcode
from chip8.static import FLAG_REGISTER, FONT_SPRITE_SIZE, FONT_START_ADDRESS, INSTRUCTION_SIZE


Instruction = namedtuple("Instruction", ["name", "pattern", "mask", "decode", "execute"])


# ******************** UTILITIES SECTION
def asm(msg):
    """decorator to print out the ASM of the instruction being executed"""
    def decorator(fn):
        @wraps(fn)
        def wrapper_fn(cpu, args):
            mem_addr = cpu.pc       # read before the effect moves it
            fn(cpu, args)
            if static.DEBUG:
                print(f"mem_addr: 0x{mem_addr:04x}    instruction: " + msg.format(**args._asdict()))
        wrapper_fn.asm = msg
        return wrapper_fn
    return decorator


def _next(cpu):
    cpu.pc += INSTRUCTION_SIZE


def _skip_if(cpu, condition):
    """skip the following instruction when condition holds"""
    cpu.pc += 2 * INSTRUCTION_SIZE if condition else INSTRUCTION_SIZE


def random_byte():
    return random.randint(0, 255)


# ******************** EFFECTS SECTION
@asm("SYS 0x{nnn:03x}")
def sys_addr(cpu, args):
    """jump to a machine code routine, ignored by modern interpreters"""
    _next(cpu)


@asm("CLS")
def clear_screen(cpu, args):
    cpu.io.clear_display()
    cpu.draw = True
    _next(cpu)


@asm("RET")
def return_(cpu, args):
    """return from a subroutine"""
    if cpu.sp < 0:
        raise StackUnderflow()
    cpu.pc = cpu.stack[cpu.sp]
    cpu.sp -= 1


@asm("JP 0x{nnn:03x}")
def jump(cpu, args):
    cpu.pc = args.nnn


@asm("CALL 0x{nnn:03x}")
def call_addr(cpu, args):
    if cpu.sp >= len(cpu.stack) - 1:
        raise StackOverflow(len(cpu.stack))
    cpu.sp += 1
    cpu.stack[cpu.sp] = cpu.pc
    cpu.pc = args.nnn


@asm("SE V{x:X}, {kk}")
def skip_if_eq(cpu, args):
    _skip_if(cpu, cpu.v_regs[args.x] == args.kk)


@asm("SNE V{x:X}, {kk}")
def skip_if_not_eq(cpu, args):
    _skip_if(cpu, cpu.v_regs[args.x] != args.kk)


@asm("SE V{x:X}, V{y:X}")
def skip_if_eq_regs(cpu, args):
    _skip_if(cpu, cpu.v_regs[args.x] == cpu.v_regs[args.y])


@asm("SNE V{x:X}, V{y:X}")
def skip_if_not_eq_regs(cpu, args):
    _skip_if(cpu, cpu.v_regs[args.x] != cpu.v_regs[args.y])


@asm("LD V{x:X}, {kk}")
def set_vx(cpu, args):
    """set the value of one of the 16 variable registers, Vx"""
    cpu.v_regs[args.x] = args.kk
    _next(cpu)


@asm("ADD V{x:X}, {kk}")
def add_to_vx(cpu, args):
    """add to the value already present in Vx, the carry is lost and VF untouched"""
    cpu.v_regs[args.x] = cpu.v_regs[args.x] + args.kk
    _next(cpu)


@asm("LD V{x:X}, V{y:X}")
def set_vx_to_vy(cpu, args):
    cpu.v_regs[args.x] = cpu.v_regs[args.y]
    _next(cpu)


@asm("OR V{x:X}, V{y:X}")
def set_vx_or_vy(cpu, args):
    cpu.v_regs[args.x] = cpu.v_regs[args.x] | cpu.v_regs[args.y]
    _next(cpu)


@asm("AND V{x:X}, V{y:X}")
def set_vx_and_vy(cpu, args):
    cpu.v_regs[args.x] = cpu.v_regs[args.x] & cpu.v_regs[args.y]
    _next(cpu)


@asm("XOR V{x:X}, V{y:X}")
def set_vx_xor_vy(cpu, args):
    cpu.v_regs[args.x] = cpu.v_regs[args.x] ^ cpu.v_regs[args.y]
    _next(cpu)


@asm("ADD V{x:X}, V{y:X}")
def add_vx_vy(cpu, args):
    """set Vx = Vx + Vy, VF = carry"""
    total = cpu.v_regs[args.x] + cpu.v_regs[args.y]
    cpu.v_regs[FLAG_REGISTER] = 1 if total > 255 else 0
    cpu.v_regs[args.x] = total        # registers keep only the lowest 8 bits
    _next(cpu)


@asm("SUB V{x:X}, V{y:X}")
def sub_vx_vy(cpu, args):
    """set Vx = Vx - Vy, VF = NOT borrow"""
    vx, vy = cpu.v_regs[args.x], cpu.v_regs[args.y]
    cpu.v_regs[FLAG_REGISTER] = 1 if vx > vy else 0
    cpu.v_regs[args.x] = vx - vy
    _next(cpu)


@asm("SHR V{x:X}")
def shr(cpu, args):
    """set Vx = Vx SHR 1, VF = the bit shifted out"""
    vx = cpu.v_regs[args.x]
    cpu.v_regs[FLAG_REGISTER] = vx & 0x1
    cpu.v_regs[args.x] = vx >> 1
    _next(cpu)


@asm("SUBN V{x:X}, V{y:X}")
def subn_vx_vy(cpu, args):
    """set Vx = Vy - Vx, VF = NOT borrow"""
    vx, vy = cpu.v_regs[args.x], cpu.v_regs[args.y]
    cpu.v_regs[FLAG_REGISTER] = 1 if vy > vx else 0
    cpu.v_regs[args.x] = vy - vx
    _next(cpu)


@asm("SHL V{x:X}")
def shl(cpu, args):
    """set Vx = Vx SHL 1, VF = the bit shifted out"""
    vx = cpu.v_regs[args.x]
    cpu.v_regs[FLAG_REGISTER] = (vx & 0x80) >> 7
    cpu.v_regs[args.x] = vx << 1
    _next(cpu)


@asm("LD I, 0x{nnn:03x}")
def set_idx(cpu, args):
    cpu.idx = args.nnn
    _next(cpu)


@asm("JP V0, 0x{nnn:03x}")
def jump_plus(cpu, args):
    cpu.pc = args.nnn + cpu.v_regs[0x0]


@asm("RND V{x:X}, 0x{kk:02x}")
def random_byte_and(cpu, args):
    cpu.v_regs[args.x] = random_byte() & args.kk
    _next(cpu)


@asm("DRW V{x:X}, V{y:X}, {n}")
def to_screen(cpu, args):
    """display n-byte sprite starting at memory location I at (Vx, Vy), set VF = collision"""
    sprite = cpu.mem[cpu.idx:cpu.idx + args.n]
    collided = cpu.io.draw_sprite(sprite, cpu.v_regs[args.x], cpu.v_regs[args.y])
    cpu.v_regs[FLAG_REGISTER] = 1 if collided else 0
    cpu.draw = True
    _next(cpu)


@asm("SKP V{x:X}")
def skip_if_pressed(cpu, args):
    _skip_if(cpu, cpu.io.is_key_down(cpu.v_regs[args.x]))


@asm("SKNP V{x:X}")
def skip_if_not_pressed(cpu, args):
    _skip_if(cpu, not cpu.io.is_key_down(cpu.v_regs[args.x]))


@asm("LD V{x:X}, DT")
def set_vx_dt(cpu, args):
    cpu.v_regs[args.x] = cpu.dt
    _next(cpu)


@asm("LD V{x:X}, K")
def wait_keypress(cpu, args):
    """wait for a key press and store its value in Vx"""
    if not cpu.io.any_key_down():
        return      # stay on the same instruction until a key is pressed
    cpu.v_regs[args.x] = cpu.io.last_key
    _next(cpu)


@asm("LD DT, V{x:X}")
def set_dt_vx(cpu, args):
    cpu.dt = cpu.v_regs[args.x]
    _next(cpu)


@asm("LD ST, V{x:X}")
def set_st_vx(cpu, args):
    cpu.st = cpu.v_regs[args.x]
    _next(cpu)


@asm("ADD I, V{x:X}")
def add_to_idx(cpu, args):
    cpu.idx += cpu.v_regs[args.x]
    _next(cpu)


@asm("LD F, V{x:X}")
def select_char(cpu, args):
    """set I to location of sprite for digit Vx"""
    cpu.idx = FONT_START_ADDRESS + cpu.v_regs[args.x] * FONT_SPRITE_SIZE
    _next(cpu)


@asm("LD B, V{x:X}")
def bcd_repr(cpu, args):
    """store the hundreds digit of Vx in memory at I, the tens digit at I+1, the ones digit at I+2"""
    vx = cpu.v_regs[args.x]
    cpu.mem[cpu.idx] = vx // 100
    cpu.mem[cpu.idx + 1] = (vx // 10) % 10
    cpu.mem[cpu.idx + 2] = vx % 10
    _next(cpu)


@asm("LD [I], V{x:X}")
def store_vregs(cpu, args):
    """store registers V0 through Vx (included) in memory starting at location I"""
    cpu.mem[cpu.idx:cpu.idx + args.x + 1] = cpu.v_regs[:args.x + 1]
    _next(cpu)


@asm("LD V{x:X}, [I]")
def load_vregs(cpu, args):
    """read registers V0 through Vx (included) from memory starting at location I"""
    cpu.v_regs[:args.x + 1] = cpu.mem[cpu.idx:cpu.idx + args.x + 1]
    _next(cpu)


# ******************** TABLE SECTION
# declaration order breaks ties between masked patterns
INSTRUCTIONS = (
    Instruction("sys", 0x0000, 0xF000, nnn_decoder, sys_addr),
    Instruction("cls", 0x00E0, 0xFFFF, none_decoder, clear_screen),
    Instruction("ret", 0x00EE, 0xFFFF, none_decoder, return_),
    Instruction("jp", 0x1000, 0xF000, nnn_decoder, jump),
    Instruction("call", 0x2000, 0xF000, nnn_decoder, call_addr),
    Instruction("se", 0x3000, 0xF000, xkk_decoder, skip_if_eq),
    Instruction("sne", 0x4000, 0xF000, xkk_decoder, skip_if_not_eq),
    Instruction("se_reg", 0x5000, 0xF00F, xy_decoder, skip_if_eq_regs),
    Instruction("ld", 0x6000, 0xF000, xkk_decoder, set_vx),
    Instruction("add", 0x7000, 0xF000, xkk_decoder, add_to_vx),
    Instruction("ld_reg", 0x8000, 0xF00F, xy_decoder, set_vx_to_vy),
    Instruction("or", 0x8001, 0xF00F, xy_decoder, set_vx_or_vy),
    Instruction("and", 0x8002, 0xF00F, xy_decoder, set_vx_and_vy),
    Instruction("xor", 0x8003, 0xF00F, xy_decoder, set_vx_xor_vy),
    Instruction("add_reg", 0x8004, 0xF00F, xy_decoder, add_vx_vy),
    Instruction("sub", 0x8005, 0xF00F, xy_decoder, sub_vx_vy),
    Instruction("shr", 0x8006, 0xF00F, xy_decoder, shr),
    Instruction("subn", 0x8007, 0xF00F, xy_decoder, subn_vx_vy),
    Instruction("shl", 0x800E, 0xF00F, xy_decoder, shl),
    Instruction("sne_reg", 0x9000, 0xF00F, xy_decoder, skip_if_not_eq_regs),
    Instruction("ld_i", 0xA000, 0xF000, nnn_decoder, set_idx),
    Instruction("jp_v0", 0xB000, 0xF000, nnn_decoder, jump_plus),
    Instruction("rnd", 0xC000, 0xF000, xkk_decoder, random_byte_and),
    Instruction("drw", 0xD000, 0xF000, xyn_decoder, to_screen),
    Instruction("skp", 0xE09E, 0xF0FF, x_decoder, skip_if_pressed),
    Instruction("sknp", 0xE0A1, 0xF0FF, x_decoder, skip_if_not_pressed),
    Instruction("ld_vx_dt", 0xF007, 0xF0FF, x_decoder, set_vx_dt),
    Instruction("ld_vx_k", 0xF00A, 0xF0FF, x_decoder, wait_keypress),
    Instruction("ld_dt_vx", 0xF015, 0xF0FF, x_decoder, set_dt_vx),
    Instruction("ld_st_vx", 0xF018, 0xF0FF, x_decoder, set_st_vx),
    Instruction("add_i", 0xF01E, 0xF0FF, x_decoder, add_to_idx),
    Instruction("ld_f", 0xF029, 0xF0FF, x_decoder, select_char),
    Instruction("ld_b", 0xF033, 0xF0FF, x_decoder, bcd_repr),
    Instruction("ld_mem_vx", 0xF055, 0xF0FF, x_decoder, store_vregs),
    Instruction("ld_vx_mem", 0xF065, 0xF0FF, x_decoder, load_vregs),
)

INSTRUCTIONS_BY_NAME = {ins.name: ins for ins in INSTRUCTIONS}


def find_instruction(opcode):
    """
    retrieve the instruction matching a 16 bits opcode
    WATCH OUT: literal patterns are checked before masked ones, 00E0 and 00EE would
    otherwise be taken for a SYS call as both fit the 0nnn layout
    """
    for ins in INSTRUCTIONS:
        if ins.pattern == opcode:
            return ins
    for ins in INSTRUCTIONS:
        if opcode & ins.mask == ins.pattern:
            return ins
    raise UnknownOpcode(opcode)
