from chip8.chip8 import main


if __name__ == "__main__":
    main()
