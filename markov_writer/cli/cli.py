"""
cli.py - command line interface for markov_writer
Commands:
- train     build a chain from one or more text files and save it as JSON
- generate  load a saved chain and print generated text
- run       train and generate in one step
Uses Rich for tables and error formatting; generated text goes to stdout,
everything else to stderr.
"""

import argparse
import random
import sys
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from markov_writer import __version__
from markov_writer.core.chain_builder import (
    Model,
    build_chain_from_text,
    check_positive,
    infer_state_size,
    merge_models,
    successor_count,
)
from markov_writer.core.errors import MarkovError
from markov_writer.core.text_generator import generate
from markov_writer.utils import logger_utils
from markov_writer.utils.config_manager import Config
from markov_writer.utils.model_store import load_model, read_text, save_model

# emoji off so tokens like ":cat:" are printed verbatim
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)

DEFAULT_CONFIG = "markov_writer.json"


class CLI:
    """Resolves options against the config file and runs one command."""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.cfg = Config(args.config, create=False)
        verbose = args.verbose if args.verbose is not None else self.cfg.get("verbose")
        log_file = args.log_file if args.log_file is not None else self.cfg.get("log_file")
        self.log = logger_utils.configure(
            level="DEBUG" if verbose else "INFO", path=log_file or ""
        )

    def option(self, name: str):
        """Command-line value if given, else the config value."""
        value = getattr(self.args, name, None)
        return self.cfg.get(name) if value is None else value

    def run(self) -> int:
        handler = getattr(self, f"cmd_{self.args.command}")
        try:
            handler()
        except MarkovError as e:
            err_console.print(Text.assemble(("error: ", "bold red"), str(e)))
            return 1
        return 0

    # COMMANDS --------------------------------------------------------------
    def cmd_train(self):
        state_size = check_positive(self.option("state_size"), "state_size")
        model = self._train(self._inputs(), state_size)
        save_model(self.option("model_path"), model)
        self._show_summary(model, state_size)

    def cmd_generate(self):
        state_size = self.args.state_size
        if state_size is None:
            model = load_model(self.option("model_path"))
            state_size = infer_state_size(model)
            self.log.debug(f"Inferred state size {state_size} from model keys")
        else:
            # keys must match the requested size, otherwise the walk dead-ends at once
            check_positive(state_size, "state_size")
            model = load_model(self.option("model_path"), state_size)
        self._generate(model, state_size)

    def cmd_run(self):
        state_size = check_positive(self.option("state_size"), "state_size")
        model = self._train(self._inputs(), state_size)
        if self.args.model_path:
            save_model(self.args.model_path, model)
        self._show_summary(model, state_size)
        self._generate(model, state_size)

    # HELPERS -----------------------------------------------------------------
    def _inputs(self) -> List[str]:
        return self.args.inputs or [self.cfg.get("input_path")]

    def _train(self, paths: Sequence[str], state_size: int) -> Model:
        models = []
        for path in paths:
            self.log.info(f"Training on {path} (state size {state_size})")
            models.append(build_chain_from_text(read_text(path), state_size))
        return merge_models(*models)

    def _generate(self, model: Model, state_size: int):
        max_words = check_positive(self.option("max_words"), "max_words")
        rng = random.Random(self.args.seed)
        text = generate(model, state_size, max_words, rng)
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _show_summary(self, model: Model, state_size: int):
        table = Table(title="Markov model", box=box.SIMPLE, show_edge=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="magenta")
        table.add_row("state size", str(state_size))
        table.add_row("states", str(len(model)))
        table.add_row("transitions", str(successor_count(model)))
        err_console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-writer",
        description="Build word-level Markov chains from text and generate new text.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=DEFAULT_CONFIG,
                        help="JSON config file with default options")
    parser.add_argument("--verbose", "-v", action="store_true", default=None,
                        help="log every state transition")
    parser.add_argument("--log-file", default=None, help="also append log lines to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    train = sub.add_parser("train", help="train from text and save the model")
    train.add_argument("inputs", nargs="*", help="training text files")
    train.add_argument("--output", "-o", dest="model_path", default=None,
                       help="where to write the model JSON")
    train.add_argument("--state-size", "-s", type=int, default=None)

    gen = sub.add_parser("generate", help="load a model and generate text")
    gen.add_argument("--model", "-m", dest="model_path", default=None,
                     help="model JSON written by 'train'")
    gen.add_argument("--state-size", "-s", type=int, default=None,
                     help="defaults to the word count of the model's keys")
    gen.add_argument("--max-words", "-n", type=int, default=None)
    gen.add_argument("--seed", type=int, default=None, help="random seed for reproducible output")

    run = sub.add_parser("run", help="train from text and generate in one step")
    run.add_argument("inputs", nargs="*", help="training text files")
    run.add_argument("--state-size", "-s", type=int, default=None)
    run.add_argument("--max-words", "-n", type=int, default=None)
    run.add_argument("--seed", type=int, default=None)
    run.add_argument("--output", "-o", dest="model_path", default=None,
                     help="also save the trained model here")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return CLI(args).run()


if __name__ == "__main__":
    sys.exit(main())
