"""
cli.py - command line front end for markov_sequences
Features:
- Trains a model from a text file (one training sequence per non-empty line)
- `generate`: random sequences sampled from the model
- `predict`: most probable continuation of the given words
- `stats`: the busiest contexts and their top successors
- JSON config file, overridden by command line flags
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from markov_sequences.context.tokenizer import get_tokenizer
from markov_sequences.core import Accumulator, Generator, MarkovModel, Predictor, END
from markov_sequences.core.errors import MarkovError
from markov_sequences.utils.config_manager import Config
from markov_sequences.utils.logger_utils import Log

logger = logging.getLogger(__name__)


# Training helpers -------------------------------------------------------------
def load_sequences(path: str, tokenizer: str = "words", lowercase: bool = True) -> List[List[str]]:
    """Read `path` and tokenize every non-empty line into a sequence."""
    tok = get_tokenizer(tokenizer)
    out = []
    try:
        with open(path, "r", encoding="utf8") as f:
            for line in f:
                if not line.strip():
                    continue
                symbols = tok(line, lowercase=lowercase)
                if symbols:
                    out.append(symbols)
    except UnicodeDecodeError as e:
        raise MarkovError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    return out


def train(sequences: Sequence[Sequence[str]], order: int) -> MarkovModel:
    model = MarkovModel(order)
    acc = Accumulator(model)
    with Log.time_block("train"):
        for seq in sequences:
            acc.add_sequence(seq)
    logger.info("trained order-%d model on %d sequences (%d contexts)", order, len(sequences), len(model))
    return model


def _joiner(cfg: Config) -> str:
    return "" if cfg.get("tokenizer") == "chars" else " "


# Commands ---------------------------------------------------------------------
def cmd_generate(args, cfg: Config, console: Console) -> int:
    model = train(load_sequences(args.file, cfg.get("tokenizer"), cfg.get("lowercase")), cfg.get("order"))
    gen = Generator(model, seed=cfg.get("seed"))
    sep = _joiner(cfg)
    for _ in range(cfg.get("count")):
        symbols = list(gen.generate(max_length=cfg.get("max_length")))
        console.print(escape(sep.join(symbols)) if symbols else "[dim](empty)[/dim]")
    return 0


def cmd_predict(args, cfg: Config, console: Console) -> int:
    model = train(load_sequences(args.file, cfg.get("tokenizer"), cfg.get("lowercase")), cfg.get("order"))
    tok = get_tokenizer(cfg.get("tokenizer"))
    given = tok(" ".join(args.words), lowercase=cfg.get("lowercase"))

    pre = Predictor(model)
    for s in given:
        pre.given(s)
    rest = pre.continuation(cfg.get("max_length"))

    sep = _joiner(cfg)
    if not rest:
        console.print(f"[yellow]no prediction after[/yellow] {escape(repr(sep.join(given)))}")
        return 0
    console.print(f"{escape(sep.join(given))}{sep}[bold green]{escape(sep.join(rest))}[/bold green]")
    return 0


def cmd_stats(args, cfg: Config, console: Console) -> int:
    model = train(load_sequences(args.file, cfg.get("tokenizer"), cfg.get("lowercase")), cfg.get("order"))
    ranked = sorted(model.contexts(), key=lambda c: -model.table(c).total)[: args.top]

    table = Table(title=f"order {model.order}: {len(model)} contexts", box=box.SIMPLE)
    table.add_column("context")
    table.add_column("seen", justify="right")
    table.add_column("successors", justify="right")
    table.add_column("top successor")
    for ctx in ranked:
        t = model.table(ctx)
        top, freq = t.entries()[0]
        label = "<end>" if top is END else str(top)
        table.add_row(escape(" ".join(map(str, ctx))) or "<start>", str(t.total), str(len(t)), f"{escape(label)} ({freq})")
    console.print(table)
    return 0


# Argument parsing -------------------------------------------------------------
def _non_negative_int(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {s!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="markov-sequences", description="Train Markov chains on text and query them.")
    p.add_argument("--config", help="path to a JSON config file")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="training text, one sequence per line")
    common.add_argument("--order", type=int, help="context length (default from config)")
    common.add_argument("--chars", dest="tokenizer", action="store_const", const="chars",
                        help="treat each character as a symbol instead of each word")
    common.add_argument("--max-length", dest="max_length", type=int, help="cap on symbols per output sequence")

    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", parents=[common], help="print random sequences")
    g.add_argument("--count", type=int, help="number of sequences")
    g.add_argument("--seed", type=int, help="random seed")
    g.set_defaults(func=cmd_generate)

    pr = sub.add_parser("predict", parents=[common], help="continue the given words")
    pr.add_argument("words", nargs="*", help="prior symbols")
    pr.set_defaults(func=cmd_predict)

    st = sub.add_parser("stats", parents=[common], help="show the busiest contexts")
    st.add_argument("--top", type=_non_negative_int, default=10)
    st.set_defaults(func=cmd_stats)
    return p


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    Log.setup(logging.WARNING - 10 * min(args.verbose, 2))

    try:
        cfg = Config(args.config)
        cfg.update(
            order=args.order,
            tokenizer=args.tokenizer,
            max_length=args.max_length,
            count=getattr(args, "count", None),
            seed=getattr(args, "seed", None),
        )
        return args.func(args, cfg, console)
    except (MarkovError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
