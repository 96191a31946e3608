"""Entrypoint to run the Wardrobe Manager shell locally."""

import argparse
from typing import List, Optional

from wardrobe_app.app import WardrobeManagerApp
from wardrobe_app.config import WardrobeConfig
from wardrobe_app.shell import WardrobeShell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage your wardrobe from the terminal")
    parser.add_argument("--file", help="Path of the wardrobe JSON file (default: WARDROBE_PATH or wardrobe.json).")
    parser.add_argument("--seed", type=int, help="Seed for reproducible outfit suggestions.")
    parser.add_argument(
        "--no-autoload",
        action="store_true",
        help="Start with an empty wardrobe instead of loading the file.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    config = WardrobeConfig.from_env()
    if args.file:
        config.wardrobe_path = args.file
    if args.seed is not None:
        config.random_seed = args.seed
    if args.no_autoload:
        config.autoload = False

    app = WardrobeManagerApp(config)
    WardrobeShell(app).run(autoload=config.autoload)


if __name__ == "__main__":
    main()
