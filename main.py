"""
main.py

Entry point for the police chase game.
"""

from game import Game
from logs import setup_logging


def main() -> None:
    setup_logging()
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
