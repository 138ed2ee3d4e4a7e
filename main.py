import sys

from smallsh.shell import main_loop


def main():
    try:
        return main_loop()
    except MemoryError:
        print("smallsh: allocation failed", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
