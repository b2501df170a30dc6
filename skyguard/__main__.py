"""
__main__.py
-----------
Entry point: python -m skyguard [--seed N]
"""

import argparse

from skyguard.core.runtime.game_loop import GameLoop


def main(argv=None):
    parser = argparse.ArgumentParser(prog="skyguard", description="Vertical arcade shooter")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for enemy spawn positions")
    args = parser.parse_args(argv)

    GameLoop(seed=args.seed).run()


if __name__ == "__main__":
    main()
