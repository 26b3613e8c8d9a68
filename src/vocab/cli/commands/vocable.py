"""
Vocable commands.
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vocab.cli import client
from vocab.cli.prompt import print_outcome, resolve
from vocab.core.parsing import sanitize

console = Console()


def add_subparser(subparsers):
    add_p = subparsers.add_parser("add", help="Add a vocable or extend an existing one")
    add_p.add_argument("native", help="Native words, comma separated")
    add_p.add_argument("foreign", help="Foreign words, comma separated")
    add_p.set_defaults(func=vocable_add)

    remove_p = subparsers.add_parser("remove", help="Remove a word or its whole vocable")
    remove_p.add_argument("word", help="Word to remove")
    remove_p.set_defaults(func=vocable_remove)

    rename_p = subparsers.add_parser("rename", help="Change a word of a vocable")
    rename_p.add_argument("old", help="Word to change")
    rename_p.add_argument("new", help="New word")
    rename_p.set_defaults(func=vocable_rename)

    show_p = subparsers.add_parser("show", help="Show vocables containing a word")
    show_p.add_argument("word", help="Word to look up")
    show_p.set_defaults(func=vocable_show)

    search_p = subparsers.add_parser("search", help="Search vocables by word fragments")
    search_p.add_argument("fragments", nargs="+", help="Fragments to search for")
    search_p.set_defaults(func=vocable_search)

    list_p = subparsers.add_parser("list", help="List all vocables")
    list_p.set_defaults(func=vocable_list)

    import_p = subparsers.add_parser("import", help="Add vocables from a file")
    import_p.add_argument("file", help="Path to the import file")
    import_p.set_defaults(func=vocable_import)


def _fail(e: Exception):
    console.print(f"[red]✗ Error: {e}[/red]")
    sys.exit(1)


def _clean(text: str) -> str:
    cleaned, skipped = sanitize(text)
    if skipped:
        dropped = ", ".join(f'"{c}"' for c in skipped)
        console.print(f"[yellow]Illegal characters found: {escape(dropped)}. Used: {escape(cleaned)}[/yellow]")
    return cleaned


def vocable_add(args):
    native, foreign = _clean(args.native), _clean(args.foreign)
    try:
        result = resolve(lambda choices: client.add_vocable(native, foreign, choices))
        print_outcome(result)
    except Exception as e:
        _fail(e)


def vocable_remove(args):
    word = _clean(args.word)
    try:
        result = resolve(lambda choices: client.remove_word(word, choices))
        print_outcome(result)
    except Exception as e:
        _fail(e)


def vocable_rename(args):
    old, new = _clean(args.old), _clean(args.new)
    try:
        result = resolve(lambda choices: client.rename_word(old, new, choices))
        print_outcome(result)
    except Exception as e:
        _fail(e)


def _print_table(vocables: list[dict]):
    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Native")
    table.add_column("Foreign")
    table.add_column("Asked", justify="right")
    table.add_column("Correct", justify="right")
    for v in vocables:
        table.add_row(
            str(v["id"]), ", ".join(v["native"]), ", ".join(v["foreign"]),
            str(v["asked"]), str(v["correct"]),
        )
    console.print(table)


def vocable_show(args):
    try:
        vocables = client.lookup_word(args.word)
        if not vocables:
            console.print(f'"{args.word}" is not in the vocabulary.')
            return
        for v in vocables:
            console.print(f"{escape(v['label'])}  [dim]({escape(v['unique_label'])})[/dim]")
    except Exception as e:
        _fail(e)


def vocable_search(args):
    try:
        vocables = client.list_vocables(args.fragments)
        if not vocables:
            console.print("No matches.")
            return
        _print_table(vocables)
    except Exception as e:
        _fail(e)


def vocable_list(args):
    try:
        vocables = client.list_vocables()
        if not vocables:
            console.print("No vocables.")
            return
        _print_table(vocables)
    except Exception as e:
        _fail(e)


def vocable_import(args):
    path = Path(args.file)
    if not path.exists():
        console.print(f"[red]✗ File not found: {args.file}[/red]")
        sys.exit(1)

    try:
        report = client.import_vocables(path.read_text(encoding="utf-8"))
        console.print(f"[green]✓[/green] Imported {report['added']} vocables")
        for item in report["rejected"]:
            console.print(f"  [yellow]line {item['line']}:[/yellow] {escape(item['message'])}")
    except Exception as e:
        _fail(e)
