# main.py
import argparse
import logging
import arcade
from settings import TITLE, TILE_SIZE, UPDATE_RATE, LEVELS_PATH, BG
from menu_view import MenuView, MENU_SIZE


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--levels", default=str(LEVELS_PATH), help="path to levels JSON")
    parser.add_argument("--tile-size", type=int, default=TILE_SIZE, help="pixels per tile")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.tile_size <= 0:
        raise SystemExit("--tile-size must be positive")

    window = arcade.Window(*MENU_SIZE, TITLE, resizable=False, update_rate=UPDATE_RATE)
    arcade.set_background_color(BG)
    window.show_view(MenuView(args.levels, args.tile_size))
    arcade.run()

if __name__ == "__main__":
    main()
