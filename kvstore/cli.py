"""Command-line interface for a kv store file: list, get, or set entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import typer
from dotenv import load_dotenv

from .errors import StoreError
from .settings import Settings, get_settings
from .store import open_store

logger = logging.getLogger(__name__)

USAGE = "Usage: kv <path> [key] [value]"

app = typer.Typer(add_completion=False, help="Read and write a single-file key-value store.")


@dataclass(frozen=True)
class KvArgs:
    path: str
    verb: str
    key: str = ""
    value: str = ""


def parse_args(args: Sequence[str], settings: Settings | None = None) -> KvArgs:
    """
    Resolve raw arguments into (path, verb, key, value).

      [store.kv]              -> list
      [store.kv] key          -> get
      [store.kv] key words... -> set, value is the words joined by spaces
    """
    settings = settings or get_settings()
    rest = list(args)
    path = settings.default_path
    if rest and rest[0].endswith(settings.store_suffix):
        path = rest.pop(0)

    if not rest:
        return KvArgs(path=path, verb="list")
    if len(rest) == 1:
        return KvArgs(path=path, verb="get", key=rest[0])
    return KvArgs(path=path, verb="set", key=rest[0], value=" ".join(rest[1:]))


def run(argv: Sequence[str], settings: Settings | None = None) -> int:
    """Execute one invocation and return the process exit status."""
    if not argv:
        typer.echo(USAGE, err=True)
        return 1

    args = parse_args(argv, settings)
    logger.debug("KV CLI: verb=%s path=%s key=%r", args.verb, args.path, args.key)

    try:
        store = open_store(args.path)
    except StoreError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        return 1

    if args.verb == "list":
        for k, v in store.all().items():
            typer.echo(f"{k}:{v}")
        return 0

    if args.verb == "get":
        value, ok = store.get(args.key)
        if not ok:
            typer.echo("Key not found", err=True)
            return 1
        typer.echo(value)
        return 0

    try:
        store.set(args.key, args.value)
    except StoreError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        return 1
    return 0


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(context_settings={"ignore_unknown_options": True, "help_option_names": []})
def kv(
    args: Optional[List[str]] = typer.Argument(None, help="[path.kv] [key] [value ...]"),
) -> None:
    """List all entries, print one value, or set a key to the remaining words."""
    load_dotenv("local.env")
    settings = get_settings()
    _configure_logging(settings)

    code = run(args or [], settings)
    if code:
        raise typer.Exit(code)


def main() -> None:
    app()
