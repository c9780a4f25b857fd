"""CLI commands: sort, selectors, plugins, format."""

from __future__ import annotations

import re
import sys
from pathlib import Path

import click

from twsort.sorter import ClassSorter

# class="..." or class='...', but not :class, v-bind:class or data-class
_CLASS_ATTR_RE = re.compile(r"""(?<![\w:.-])(class\s*=\s*)(["'])(.*?)\2""", re.DOTALL)


def rewrite_class_attributes(source: str, sorter: ClassSorter) -> tuple[str, int]:
    """Sort the classes of every class attribute in *source*.

    Returns the new text and the number of attributes that changed.
    """
    changed = 0

    def repl(match: re.Match) -> str:
        nonlocal changed
        before, quote, classes = match.group(1), match.group(2), match.group(3)
        new = " ".join(sorter.sort_class_list(classes))
        if new == " ".join(classes.split()):
            return match.group(0)
        changed += 1
        return f"{before}{quote}{new}{quote}"

    return _CLASS_ATTR_RE.sub(repl, source), changed


@click.command()
@click.argument("classes", nargs=-1)
@click.pass_obj
def sort(obj, classes: tuple[str, ...]) -> None:
    """Sort CLASSES and print them on one line.

    Without arguments each line of standard input is sorted.
    """
    sorter = obj.sorter()
    if classes:
        click.echo(" ".join(sorter.sort_class_list(" ".join(classes))))
        return
    for line in click.get_text_stream("stdin"):
        click.echo(" ".join(sorter.sort_class_list(line)))


@click.command()
@click.pass_obj
def selectors(obj) -> None:
    """Print the selector index, one selector per line."""
    for selector in obj.sorter().index:
        click.echo(selector)


@click.command()
@click.pass_obj
def plugins(obj) -> None:
    """Print the effective plugin order."""
    for plugin_id in obj.sorter().plugin_order:
        click.echo(plugin_id)


@click.command("format")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--check", is_flag=True, help="Report files that would change; do not write")
@click.pass_obj
def format_files(obj, files: tuple[str, ...], check: bool) -> None:
    """Sort class attributes in FILES in place.

    With --check nothing is written and the exit code is 1 when any file
    would change.
    """
    sorter = obj.sorter()
    changed_files = 0
    for name in files:
        path = Path(name)
        source = path.read_text(encoding="utf-8")
        new_source, changed = rewrite_class_attributes(source, sorter)
        if not changed:
            continue
        changed_files += 1
        if check:
            click.echo(f"would reformat {path} ({changed} attribute(s))")
        else:
            path.write_text(new_source, encoding="utf-8")
            click.echo(f"reformatted {path} ({changed} attribute(s))")

    verb = "would be reformatted" if check else "reformatted"
    click.echo(f"{changed_files} of {len(files)} file(s) {verb}")
    if check and changed_files:
        sys.exit(1)
