"""
Settings commands.
"""

import sys

from vocab.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("settings", help="Show or change settings")
    settings_sub = parser.add_subparsers(dest="settings_command", required=True)

    show_p = settings_sub.add_parser("show", help="Show all settings")
    show_p.set_defaults(func=settings_show)

    set_p = settings_sub.add_parser("set", help="Change one setting")
    set_p.add_argument("key", help="Setting name")
    set_p.add_argument("value", help="New value")
    set_p.set_defaults(func=settings_set)

    ns_p = subparsers.add_parser("set-namespace", help="Switch to another vocabulary namespace")
    ns_p.add_argument("namespace", help="Namespace name")
    ns_p.set_defaults(func=namespace_set)


def settings_show(args):
    try:
        for key, value in client.get_settings().items():
            print(f"{key:24} {value}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def settings_set(args):
    try:
        settings = client.update_settings({args.key: args.value})
        print(f"✓ {args.key} = {settings[args.key]}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def namespace_set(args):
    try:
        result = client.set_namespace(args.namespace)
        print(f"Namespace set to: {result['namespace']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
