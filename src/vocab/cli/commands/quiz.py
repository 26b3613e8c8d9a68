"""
Quiz command.
"""

import sys

from rich.console import Console

from vocab.cli import client

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("quiz", help="Train vocables")
    parser.add_argument("-n", "--number", type=int, help="Number of questions (default: settings)")
    parser.add_argument("-m", "--method", help="Learning method: random, new, bad, least")
    parser.set_defaults(func=run_quiz)


def run_quiz(args, read=None):
    read = read or console.input
    try:
        drawn = client.draw_questions(args.number, args.method)
    except Exception as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    questions = drawn["questions"]
    if not questions:
        console.print("No vocables to train.")
        return

    correct = 0
    for i, q in enumerate(questions, start=1):
        console.print(f"[bold]{i}/{len(questions)}[/bold] {', '.join(q['shown_words'])} [dim]({q['asked_side']})[/dim]")
        answer = read("> ")
        result = client.answer_question(q["vocable_id"], q["asked_side"], answer)
        if result["correct"]:
            correct += 1
            console.print("[green]✓ correct[/green]")
        else:
            console.print(f"[red]✗[/red] {', '.join(result['expected'])}")

    console.print(f"\n{correct}/{len(questions)} correct")
