"""Command line helpers for easyevent."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table

from .config import DispatcherConfig
from .diagnostics import check_registry, describe_registry
from .dispatcher import EventDispatcher
from .hub import get_hub

console = Console()


def run_inspect(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show the listeners a module registers")
    parser.add_argument("module", help="Python module with register(dispatcher) function")
    parser.add_argument(
        "--hub",
        action="store_true",
        help="Inspect the broadcast hub instead of a fresh dispatcher",
    )
    args = parser.parse_args(argv)

    if args.hub:
        hub = get_hub()
        _load_module(args.module, hub)
        dispatcher = hub.dispatcher
    else:
        dispatcher = EventDispatcher(config=DispatcherConfig.from_env())
        _load_module(args.module, dispatcher)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Category")
    table.add_column("Callback")
    table.add_column("Priority", justify="right")
    table.add_column("Once")
    table.add_column("Context")
    for row in describe_registry(dispatcher):
        table.add_row(
            row.category,
            row.callback,
            str(row.priority),
            "yes" if row.once else "",
            row.context or "",
        )
    console.print(table)

    issues = check_registry(dispatcher)
    if not issues:
        console.print("[bold green]Registry looks healthy.[/bold green]")
        return
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    sys.exit(1)


def _load_module(path: str, target: object) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    module = importlib.import_module(path)
    if hasattr(module, "register"):
        module.register(target)
        return
    # hub listeners may be registered at import time
    if isinstance(target, EventDispatcher):
        raise RuntimeError(f"Module {path} does not define register(dispatcher).")
