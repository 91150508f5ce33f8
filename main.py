from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from checkers.game import CheckersGame
from ui.settings import AppSettings, DisplaySettings


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Play 8x8 checkers.")
	parser.add_argument("--text", action="store_true", help="Play in the terminal instead of a pygame window.")
	parser.add_argument("--square-size", type=int, default=80, help="Pixel size of one board square.")
	parser.add_argument("--fps", type=int, default=60, help="Frame rate cap for the window.")
	parser.add_argument("--log-level", default="warning", help="Logging level.")
	return parser


def load_settings(argv: list[str] | None = None) -> AppSettings:
	parser = build_parser()
	args = parser.parse_args(argv)
	try:
		return AppSettings(
			text_mode=args.text,
			log_level=args.log_level,
			display=DisplaySettings(square_size=args.square_size, fps=args.fps),
		)
	except ValidationError as exc:
		parser.error(str(exc))


def main(argv: list[str] | None = None) -> None:
	settings = load_settings(argv)
	logging.basicConfig(
		level=settings.logging_level,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	game = CheckersGame()

	if settings.text_mode:
		from ui.text_ui import TerminalUI

		TerminalUI(game).run()
		return

	import pygame

	from ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		gui = CheckersGUI(game, settings.display)
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
