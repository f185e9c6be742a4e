"""
cli.py - interactive search shell for a multitrie index
Features:
- Loads (key, value) pairs from JSON or tab-separated files
- Substring / prefix / leading-consonant search as you enter queries
- Adds pairs on the fly, shows node count and search latency
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, List, Optional, Sequence

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt
from rich import box

from multitrie.core.trie import Trie, TrieSettings
from multitrie.utils.config_manager import Config, ConfigError
from multitrie.utils.logger_utils import Log, setup_logging
from multitrie.utils.metrics_tracker import Metrics
from multitrie.utils.pair_loader import PairFileError, load_pairs

logger = logging.getLogger(__name__)

console = Console()


class CLI:
    """Owns one Trie plus the metrics shown by /stats."""

    def __init__(self, settings: TrieSettings, max_results: int = 20):
        self.trie: Trie[Any] = Trie(settings)
        self.max_results = max_results
        self.metrics = Metrics()
        self.running = True

    def load(self, paths: Sequence[str]) -> int:
        """Insert every pair of every file. Returns the number of pairs."""
        total = 0
        for path in paths:
            pairs = load_pairs(path)
            with Log.time_block("load", self.metrics):
                self.trie.insert_many(pairs)
            total += len(pairs)
            logger.info("loaded %d pairs from %s", len(pairs), path)
        return total

    def search(self, query: str) -> List[Any]:
        with Log.time_block("search", self.metrics):
            return self.trie.find_all(query)

    def run(self):
        """
        Main loop:
        - plain input searches the index
        - slash commands: /add /count /stats /clear /quit
        """
        console.rule("[bold magenta]multitrie[/bold magenta]")
        console.print("Commands: /add KEY VALUE  /count  /stats  /clear  /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Search[/green]", default="")
                if not line:
                    continue
                if line.startswith("/"):
                    self._handle_command(line)
                    continue
                self.show_results(line, self.search(line))
            except (EOFError, KeyboardInterrupt):
                self.running = False
        console.rule("[red]Exiting[/red]")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        name, _, rest = cmd.partition(" ")

        if name == "/quit":
            self.running = False
            return

        if name == "/add":
            key, _, value = rest.strip().partition(" ")
            if not key:
                console.print("[red]usage:[/red] /add KEY [VALUE]")
                return
            self.trie.insert_key(key, value or key)
            console.print(f"[cyan]Added:[/cyan] {key} -> {value or key}")
            return

        if name == "/count":
            console.print(f"nodes created: {self.trie.total_count}")
            return

        if name == "/stats":
            self._show_stats()
            return

        if name == "/clear":
            self.trie.clear()
            console.print("[yellow]Index cleared.[/yellow]")
            return

        console.print(f"[red]Unknown command:[/red] {cmd}")

    # DISPLAY -------------------------------------------------------------------
    def show_results(self, query: str, results: List[Any]):
        if not results:
            console.print("[dim](no matches)[/dim]")
            return
        table = Table(title=f"Matches for {query!r}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Value", style="bold")
        for i, value in enumerate(results[: self.max_results], 1):
            table.add_row(str(i), str(value))
        console.print(table)
        if len(results) > self.max_results:
            console.print(f"[dim]... {len(results) - self.max_results} more[/dim]")

    def _show_stats(self):
        table = Table(title="Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("nodes created", str(self.trie.total_count))
        for key, snap in self.metrics.snapshot().items():
            table.add_row(f"{key} avg (ms)", f"{snap['avg'] * 1000.0:.3f}")
            table.add_row(f"{key} calls", str(int(snap["count"])))
        console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="multitrie", description="Search (key, value) pairs by substring, prefix or initials.")
    parser.add_argument("files", nargs="*", help="pair files (.json or tab-separated)")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--no-partial", action="store_true", help="prefix-only search")
    parser.add_argument("--no-consonant", action="store_true", help="skip leading-consonant keys")
    parser.add_argument("--query", "-q", action="append", default=None, help="run query and exit (repeatable)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = Config(args.config)
        if args.no_partial:
            cfg.set("use_partial_search", False, persist=False)
        if args.no_consonant:
            cfg.set("use_consonant_search", False, persist=False)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        return 2

    setup_logging(cfg.get("log_level"))
    cli = CLI(cfg.settings(), max_results=cfg.get("max_results"))

    try:
        n = cli.load(args.files)
    except PairFileError as e:
        console.print(f"[red]Load failed:[/red] {e}")
        return 1
    if args.files:
        console.print(f"[dim]Loaded {n} pairs ({cli.trie.total_count} nodes).[/dim]")

    if args.query:
        for q in args.query:
            cli.show_results(q, cli.search(q))
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
