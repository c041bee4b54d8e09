#!/usr/bin/env python3
"""
Interactive command-line shell for the movie summarizer.

Reads one title at a time, hands it to the app, prints the outcome, and
keeps going until the operator types 'quit'.
"""
import argparse
import logging
import sys
from typing import Callable, Optional

from .config_loader import load_config_from_env
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"
PROMPT = "Enter movie title: "


def print_banner(output: Callable[[str], None] = print):
    output("🎬 Movie Summarizer Bot Ready!")
    output("Enter a movie title to get a detailed summary saved to file.")
    output(f"Type '{QUIT_COMMAND}' to exit\n")


class MovieSummarizerShell:
    """
    Line-oriented loop around a summarize callable.

    One call per non-empty, non-quit line; the loop always re-prompts after
    a call, whether it succeeded or raised.
    """

    def __init__(self,
                 summarize: Callable,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None):
        self._summarize = summarize
        self._input = input_func or input
        self._output = output or print

    def run(self) -> int:
        print_banner(self._output)

        while True:
            try:
                line = self._input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._output("\n👋 Goodbye!")
                return 0

            if line.strip().lower() == QUIT_COMMAND:
                self._output("👋 Goodbye!")
                return 0

            if not line.strip():
                self._output("Please enter a movie title.\n")
                continue

            self.handle(line)

    def handle(self, line: str) -> None:
        try:
            self._output("Processing movie summary...\n")
            response = self._summarize(line)
            answer = getattr(response, "answer", response)
            self._output(f"{answer}\n")
        except Exception as e:
            logger.error(f"Failed to summarize {line!r}", exc_info=True)
            self._output("Error occurred while processing movie. Please try again.\n")
            self._output(f"Error details: {e}\n")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movie-summarizer",
        description="Turn a rough movie title into a formatted summary file.",
    )
    parser.add_argument(
        "--mode", choices=["pipeline", "agent"], default=None,
        help="pipeline: fixed refine/fetch/format/write order (default); "
             "agent: let the model choose the tool order",
    )
    parser.add_argument("--output-dir", default=None, help="Directory for summary files")
    parser.add_argument("--verbose", action="store_true", default=None, help="Debug logging")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(bool(args.verbose))

    try:
        config = load_config_from_env(
            orchestration_mode=args.mode,
            output_dir=args.output_dir,
            verbose=args.verbose,
        )
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Imported here so a missing key is reported before any provider SDK loads.
    from .app import MovieSummarizerApp

    app = MovieSummarizerApp(config)
    try:
        app.initialize()
    except Exception as e:
        logger.error("Failed to initialize the summarizer", exc_info=True)
        print(f"❌ Failed to initialize: {e}")
        return 1

    return MovieSummarizerShell(app.summarize).run()


if __name__ == "__main__":
    sys.exit(main())
