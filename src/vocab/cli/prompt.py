"""
Interactive answers to the server's choice questions.
"""

from rich.console import Console
from rich.markup import escape

console = Console()


def ask_choice(choice: dict, read=None) -> int | None:
    """
    Show a choice and read an option number.
    Empty input picks the default (None); unparsable input asks again.
    """
    read = read or console.input
    console.print(escape(choice["question"]))
    console.print(f"  [dim]()[/dim] {escape(choice['default'])}")
    for i, label in enumerate(choice["options"]):
        console.print(f"  [dim]({i})[/dim] {escape(label)}")

    while True:
        text = read("> ").strip()
        if not text:
            return None
        try:
            index = int(text)
        except ValueError:
            index = -1
        if 0 <= index < len(choice["options"]):
            return index
        console.print("[yellow]Could not parse input.[/yellow]")


def resolve(send, read=None) -> dict:
    """
    Call send(choices) until the server stops asking questions.
    Each answer is appended to the replayed choices of the next call.
    """
    choices = []
    result = send([])
    while result["status"] == "needs_choice":
        choices.append(ask_choice(result["choice"], read))
        result = send(list(choices))
    return result


def print_outcome(result: dict) -> None:
    if result["ok"]:
        console.print(f"[green]✓[/green] {escape(result['message'])}")
    else:
        console.print(f"[red]✗[/red] {escape(result['message'])}")
