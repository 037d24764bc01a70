"""
Command-line interface tools for the Emotion Entries package.
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer

from .mapper import MappingError, entries_from_raw, entry_from_raw
from .models import Entry
from .server import DEFAULT_HOST, DEFAULT_PORT, main

app = typer.Typer(help="Emotion Entries CLI tools")


# MARK: - Commands


@app.command("map")
def map_entries(
    path: str = typer.Argument(
        "-", help="JSON file with one raw entry or a list of them ('-' for stdin)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output JSON"),
) -> None:
    """Map raw entry records and print the resulting entries."""

    def _map() -> None:
        document = _load_document(path)
        is_batch = isinstance(document, list)
        entries = entries_from_raw(document) if is_batch else [entry_from_raw(document)]

        if json_output:
            dumped = [entry.model_dump(mode="json", by_alias=True) for entry in entries]
            output = dumped if is_batch else dumped[0]
            print(json.dumps(output, indent=2, ensure_ascii=False))
            return

        for entry in entries:
            print(_format_entry(entry))

    _run_with_error_handling(_map)


@app.command()
def serve(
    host: str = typer.Option(DEFAULT_HOST, "--host", help="Address to bind"),
    port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the HTTP mapping service."""
    main(host=host, port=port)


# MARK: - Private Helpers


def _load_document(path: str) -> Any:
    """Read and decode the JSON document at path, or stdin for '-'."""
    if path == "-":
        return json.loads(sys.stdin.read())
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _format_entry(entry: Entry) -> str:
    """Format an entry as a single summary line."""
    created = entry.created_at.isoformat() if entry.created_at else "invalid date"
    names = ", ".join(emotion.name for emotion in entry.emotions)
    return f"#{entry.id} {created} {entry.comment} [{names}]"


def _run_with_error_handling(func: Callable[[], None]) -> None:
    """Run a command body with standardized error handling."""
    try:
        func()
    except UnicodeDecodeError as e:
        print(f"Error: Input is not valid UTF-8: {e}")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}")
        raise typer.Exit(1)
    except MappingError as e:
        print(f"Error: Malformed entry at {e}")
        raise typer.Exit(1)
    except OSError as e:
        print(f"Error: Could not read {e.filename}: {e.strerror}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
