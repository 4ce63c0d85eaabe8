# CHIP-8 INFO
# https://chip-8.github.io/extensions/#chip-8
# https://chip-8.github.io/links/
#
# MASTERING CHIP-8
# https://github.com/mattmikolay/chip-8/wiki/Mastering-CHIP%E2%80%908
#
# TEST SUITE
# https://github.com/Timendus/chip8-test-suite
import argparse
import sys

from chip8.screen import Screen, SCALE, translate_key_event   # sets pygame env vars, import it first
import pygame
from chip8.cpu import Chip8
from chip8.errors import Chip8Error
from chip8.static import CLOCK_HZ, TIMER_HZ


def get_args(argv=None):
    parser = argparse.ArgumentParser(prog="chip8")
    parser.add_argument("-f", "--file", required=True, help="input rom file")
    parser.add_argument("--hz", type=int, default=CLOCK_HZ, help="instructions executed per second")
    parser.add_argument("--scale", type=int, default=SCALE, help="size in pixels of a CHIP-8 pixel")
    return parser.parse_args(argv)


def run(chip, screen, clock, hz=CLOCK_HZ):
    """emulation loop, returns when the user quits"""
    cycles_per_tick = max(hz // TIMER_HZ, 1)
    cycles = 0
    while True:
        # frames per second
        clock.tick(hz)
        # process user input
        # loop throught the event queue
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return
            translate_key_event(event, chip.io)
        chip.step()     # emulate one machine cycle (fetch opcode, decode opcode, execute opcode)
        if chip.draw:
            screen.render(chip.io.display)
            screen.refresh()
        # delay/sound timers (dt/st) run at their own pace
        cycles += 1
        if cycles % cycles_per_tick == 0:
            chip.tick_timers()


# ******************** ENTRY POINT SECTION
def main(argv=None):
    args = get_args(argv)
    # pygame initialization
    pygame.init()
    try:
        clock = pygame.time.Clock()
        pygame.display.set_caption(args.file.split('/')[-1])
        screen = Screen(s=args.scale)
        chip = Chip8()
        chip.load_rom(args.file)
        try:
            run(chip, screen, clock, args.hz)
        except Chip8Error as err:
            sys.exit(f"********** THE EMULATOR CRASHED WITH THE FOLLOWING STATE\n{err}\n{chip}")
    finally:
        pygame.quit()
