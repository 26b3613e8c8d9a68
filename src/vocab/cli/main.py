"""
Vocabulary Trainer CLI.
"""

import argparse
from vocab.cli.commands import quiz, settings, vocable


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vocab", description="Vocabulary Trainer CLI")
    subparsers = parser.add_subparsers(dest="command")

    vocable.add_subparser(subparsers)
    quiz.add_subparser(subparsers)
    settings.add_subparser(subparsers)
    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
