# CHIP-8 INFO
# https://chip-8.github.io/extensions/#chip-8
# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
import os


C8_FONTS = [0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
            0x20, 0x60, 0x20, 0x20, 0x70,  # 1
            0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
            0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
            0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
            0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
            0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
            0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
            0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
            0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
            0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
            0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
            0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
            0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
            0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
            0xF0, 0x80, 0xF0, 0x80, 0x80]  # F

FONT_START_ADDRESS = 0x000
FONT_SPRITE_SIZE = 5        # each character font is made of 5 bytes
ROM_START_ADDRESS = 0x200
MEMORY_SIZE = 4096
STACK_SIZE = 16
REGISTERS_COUNT = 16
FLAG_REGISTER = 0xF
INSTRUCTION_SIZE = 0x2      # each instruction is two bytes long
SCREEN_HEIGHT = 32
SCREEN_WIDTH = 64
CLOCK_HZ = 300              # instructions executed per second
TIMER_HZ = 60               # delay/sound timers decrement rate

DEBUG = True if int(os.getenv('DEBUG', 0)) >= 1 else False
