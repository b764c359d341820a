# easyfts/cli.py
import logging
import sys
from pathlib import Path
from typing import Annotated

import cyclopts

from easyfts.convert import FullTextSearch
from easyfts.export import get_exporter
from easyfts.stopwords import STOP_WORDS_ENV, StopWords, load_stop_words

app = cyclopts.App(
    name="easyfts",
    help="Convert Google-like search expressions to SQL Server full-text queries.",
)


def _read_queries_from_stdin() -> list[str]:
    """Read one search expression per non-empty stdin line."""
    return [line.strip() for line in sys.stdin if line.strip()]


def _build_stop_words(
    words: list[str] | None, stop_words_file: Path | None
) -> StopWords | None:
    """Combine stop words given on the command line, or None to use the environment."""
    if words is None and stop_words_file is None:
        return None
    stop_words = StopWords(words or [])
    if stop_words_file is not None:
        stop_words |= load_stop_words(stop_words_file)
    return stop_words


@app.command(name="convert")
def convert(
    query: Annotated[
        str | None,
        cyclopts.Parameter(help="Search expression (reads stdin lines when omitted)"),
    ] = None,
    stop_word: Annotated[
        list[str] | None,
        cyclopts.Parameter(name=["--stop-word", "-s"], help="Word to leave out of queries"),
    ] = None,
    stop_words_file: Annotated[
        Path | None,
        cyclopts.Parameter(
            name="--stop-words-file",
            help=f"File with stop words, one per line (default: ${STOP_WORDS_ENV})",
        ),
    ] = None,
    format: Annotated[
        str,
        cyclopts.Parameter(name=["--format", "-f"], help="Output format: text, json"),
    ] = "text",
    output: Annotated[
        Path | None,
        cyclopts.Parameter(name=["--output", "-o"], help="Output file path"),
    ] = None,
    verbose: Annotated[
        bool,
        cyclopts.Parameter(name=["--verbose", "-v"], help="Log each conversion step"),
    ] = False,
) -> None:
    """Convert search expressions to full-text queries."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Validate format early
    try:
        exporter = get_exporter(format)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        fts = FullTextSearch(_build_stop_words(stop_word, stop_words_file))
    except OSError as e:
        print(f"Error: Cannot read stop words: {e}", file=sys.stderr)
        sys.exit(1)

    if query is not None:
        queries = [query]
    elif not sys.stdin.isatty():
        queries = _read_queries_from_stdin()
    else:
        queries = []

    if not queries:
        print("Error: No query provided. Use positional arg or pipe lines.", file=sys.stderr)
        sys.exit(1)

    results = [fts.convert(q) for q in queries]

    if output:
        exporter.export(results, output)
        print(f"Exported {len(results)} queries to {output}", file=sys.stderr)
    else:
        print(exporter.to_string(results))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
