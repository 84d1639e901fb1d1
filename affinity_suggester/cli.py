"""
cli.py - interactive demo of the word suggestion engine
Features:
- Loads a plain-text corpus, one message per line, and trains the engine
- REPL: type some text to see the suggested next words, blank line exits
- Slash commands for inspecting counts and the affinity analysis
- Uses Rich for tables and formatting
"""

import argparse
import logging
import shlex
from typing import List, Optional, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from affinity_suggester.core.errors import (
    CorpusLoadError,
    InvalidArgumentError,
    InvalidStateError,
    SuggesterError,
)
from affinity_suggester.core.suggestion_engine import SuggesterConfig, SuggestionEngine
from affinity_suggester.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from affinity_suggester.utils.corpus_loader import load_messages
from affinity_suggester.utils.logger_utils import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
BANNER = "Enter some text to see available suggestions.\n(leave blank to exit, /help for commands)"
HELP = (
    "/stats            counts and engine state\n"
    "/grams [n]        most frequent n-grams\n"
    "/analysis         confidence and support of every implication\n"
    "/load <file> [k]  load a corpus file, skipping k header lines\n"
    "/train            recompute the analysis\n"
    "/clear            forget everything\n"
    "/quit             exit"
)


class CLI:
    """Read-suggest loop over a SuggestionEngine."""

    def __init__(
        self,
        engine: SuggestionEngine,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        show_analysis_on_exit: bool = True,
    ):
        self.engine = engine
        self.console = console or Console()
        self.input_stream = input_stream
        self.show_analysis_on_exit = show_analysis_on_exit
        self.running = True

    def run(self) -> None:
        self.console.print(f"[cyan]{BANNER}[/cyan]")
        while self.running:
            try:
                text = self.console.input(">>> ", stream=self.input_stream).strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not text:
                break
            if text.startswith("/"):
                self.handle_command(text)
                continue
            self.show_suggestions(text)

        if self.show_analysis_on_exit:
            self.console.print("The affinity analysis calculations:")
            self.show_analysis()

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, line: str) -> None:
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Can't parse command:[/red] {escape(str(e))}")
            return
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
        elif c == "/help":
            self.console.print(HELP, markup=False)
        elif c == "/stats":
            self.show_stats()
        elif c == "/grams":
            n = int(p[1]) if len(p) > 1 and p[1].isdigit() else 10
            self.show_grams(n)
        elif c == "/analysis":
            self.show_analysis()
        elif c == "/load" and len(p) > 1:
            skip = int(p[2]) if len(p) > 2 and p[2].isdigit() else 0
            self.load_file(p[1], skip)
        elif c == "/train":
            self.train()
        elif c == "/clear":
            self.engine.clear()
            self.console.print("[yellow]Engine cleared.[/yellow]")
        else:
            self.console.print(f"[red]Unknown command:[/red] {c}")

    # ACTIONS -------------------------------------------------------------------------------
    def show_suggestions(self, text: str) -> List[str]:
        if self.engine.is_untrained:
            self.console.print("[dim](analysis is stale, /train to refresh)[/dim]")
        out = self.engine.suggestions_for(text)
        self.console.print('["' + '", "'.join(out) + '"]', markup=False)
        self.console.print()
        return out

    def load_file(self, path: str, skip_lines: int = 0) -> int:
        try:
            n = load_messages(self.engine, path, skip_lines)
        except (CorpusLoadError, InvalidArgumentError) as e:
            self.console.print(f"[red]Couldn't load word suggestion data:[/red] {escape(str(e))}")
            return 0
        self.console.print(f"[green]Loaded {n} messages.[/green]")
        return n

    def train(self) -> bool:
        try:
            self.engine.train()
        except InvalidStateError as e:
            self.console.print(f"[red]Can't train:[/red] {escape(str(e))}")
            return False
        self.console.print(f"[green]Trained {len(self.engine.analysis)} implications.[/green]")
        return True

    # DISPLAY -------------------------------------------------------------------------------
    def show_stats(self) -> None:
        e = self.engine
        t = Table(title="Engine", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Order", str(e.order))
        t.add_row("Threshold", f"{e.threshold:.3f}")
        t.add_row("Messages", str(e.message_count))
        t.add_row("Words", str(e.word_count))
        t.add_row("Unique words", str(len(e.words)))
        t.add_row("N-gram windows", str(e.gram_count))
        t.add_row("Unique n-grams", str(len(e.store)))
        t.add_row("Implications", str(len(e.implications)))
        t.add_row("State", "untrained" if e.is_untrained else "trained")
        self.console.print(t)

    def show_grams(self, n: int = 10) -> None:
        t = Table(title="Most frequent n-grams", box=box.SIMPLE)
        t.add_column("N-gram")
        t.add_column("Count", justify="right", style="magenta")
        for i, (gram, count) in enumerate(self.engine.store.grams_by_count().items()):
            if i >= n:
                break
            t.add_row(str(gram), str(count))
        self.console.print(t)

    def show_analysis(self) -> None:
        t = Table(box=box.SIMPLE, show_edge=False)
        t.add_column("Premise")
        t.add_column("Conclusion", style="bold")
        t.add_column("Confidence", justify="right", style="magenta")
        t.add_column("Support", justify="right", style="cyan")
        for r in self.engine.analysis:
            t.add_row(str(r.premise), r.conclusion, f"{r.confidence:.3f}", f"{r.support:.3f}")
        self.console.print(t)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="affinity-suggester",
        description="Suggest next words using affinity analysis of n-grams.",
    )
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    ap.add_argument("--corpus", help="plain text corpus, one message per line")
    ap.add_argument("--skip-lines", type=int, help="header lines to skip in the corpus")
    ap.add_argument("--order", type=int, help="words per n-gram")
    ap.add_argument("--threshold", type=float, help="confidence a suggestion must exceed")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="log verbosity")
    ap.add_argument("--log-file", help="also write logs to this file")
    return ap


def main(
    argv: Optional[List[str]] = None,
    console: Optional[Console] = None,
    input_stream: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config, autosave=False)
    console = console or Console()
    for key in ("corpus", "skip_lines", "order", "threshold", "log_level"):
        val = getattr(args, key)
        if val is not None and not cfg.set(key, val):
            console.print(f"[red]Bad configuration:[/red] {escape(key)}={escape(str(val))}")
            return 2

    level = str(cfg.get("log_level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        console.print(f"[red]Bad configuration:[/red] unknown log level {escape(level)}")
        return 2
    setup_logging(level, args.log_file)

    try:
        suggester_cfg: SuggesterConfig = cfg.to_suggester_config()
    except SuggesterError as e:
        console.print(f"[red]Bad configuration:[/red] {escape(str(e))}")
        return 2

    engine = SuggestionEngine(suggester_cfg)
    cli = CLI(engine, console=console, input_stream=input_stream)

    corpus = cfg.get("corpus")
    if corpus and cli.load_file(corpus, int(cfg.get("skip_lines", 0))):
        cli.train()

    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
