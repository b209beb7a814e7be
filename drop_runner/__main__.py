import argparse
import logging

from drop_runner.app import Game

# ----------------------------
# Clean Drop Runner
# ----------------------------
# Jump over barrels, stomp them for points, grab clean drops and powerups.
#
# Controls:
#   Space / Up / click: start, jump
#   P: pause / resume
#   R: reset to the start screen
#   1 / 2 / 3: easy / normal / hard (before a run)
#   Esc: quit


def main(argv=None):
    parser = argparse.ArgumentParser(prog="drop-runner", description="Clean Drop Runner")
    parser.add_argument("--difficulty", choices=["easy", "normal", "hard"], default=None,
                        help="Difficulty for the next run (remembered between sessions).")
    parser.add_argument("--seed", type=int, default=None, help="Seed the spawn/bonus RNG.")
    parser.add_argument("--smoke", action="store_true",
                        help="Run briefly and exit (for quick verification).")
    parser.add_argument("--verbose", action="store_true", help="Log every simulation event.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    Game(difficulty=args.difficulty, seed=args.seed).run(smoke=args.smoke)


if __name__ == "__main__":
    main()
