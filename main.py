#!/usr/bin/env python3
"""
textstats - Word statistics for a text

Answers three questions: how many words, which are the most frequent,
and what share of distinct words occur exactly k times.

Usage:
    python main.py
    python main.py -i book.txt -n 10
    python main.py -t "a b a c a b d" -k 1 --json
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config, DEMO_TEXT
from analysis.word_frequency import TextAnalyzer, TextStats

DEFAULTS = Config()


def format_times(k: int) -> str:
    """Describe an occurrence count ('once', '2 times')."""
    return "once" if k == 1 else f"{k} times"


def format_report(stats: TextStats) -> list[str]:
    """Render stats as the three report lines."""
    return [
        f"Total words count: {stats.word_count}",
        f"Top {len(stats.top_words)} most frequent words: [{', '.join(stats.top_words)}]",
        f"Total percentage of words occurring {format_times(stats.occurrences)}: {stats.percentage}%",
    ]


def load_text(input_file: Optional[str], text: Optional[str], encoding: str) -> str:
    """Pick the text to analyze: file, literal, or the demo paragraph."""
    if input_file and text is not None:
        raise click.UsageError("Use either --input or --text, not both")
    if input_file:
        try:
            return Path(input_file).read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise click.BadParameter(f"Cannot decode as {encoding}: {e}", param_hint="'--input'")
    if text is not None:
        return text
    return DEMO_TEXT


@click.command()
@click.option("-i", "--input", "input_file", default=None, type=click.Path(exists=True, dir_okay=False), help="Input text file")
@click.option("-t", "--text", default=None, help="Text to analyze")
@click.option("-n", "--top", "top_n", default=DEFAULTS.top_n, type=int, help="How many most frequent words to list")
@click.option("-k", "--occurrences", default=DEFAULTS.occurrences, type=int, help="Occurrence count for the percentage")
@click.option("--encoding", default=DEFAULTS.encoding, help="Input file encoding")
@click.option("--json", "json_output", is_flag=True, default=DEFAULTS.json_output, help="Print stats as JSON")
def main(
    input_file: Optional[str],
    text: Optional[str],
    top_n: int,
    occurrences: int,
    encoding: str,
    json_output: bool,
):
    """Print word statistics for a text (the demo paragraph by default)."""
    source = load_text(input_file, text, encoding)

    analyzer = TextAnalyzer()
    stats = analyzer.summarize(source, top_n=top_n, occurrences=occurrences)

    if json_output:
        click.echo(json.dumps(stats.to_dict(), ensure_ascii=False))
        return

    for line in format_report(stats):
        click.echo(line)


if __name__ == "__main__":
    main()
