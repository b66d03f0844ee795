"""
Exact token lookup.
"""

import sys
from rich import print_json

from docsearch.cli import client
from docsearch.cli.commands.common import add_index_args, format_entry, open_table
from docsearch.core.tokens import encode_token


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up a token")
    parser.add_argument("token", help="Search token (e.g. onidle) or, with --name, a raw identifier")
    parser.add_argument("--name", action="store_true", help="Normalize the argument first (operator= -> operator_3d)")
    add_index_args(parser)
    parser.set_defaults(func=run)


def run(args):
    token = encode_token(args.token) if args.name else args.token
    try:
        if args.index:
            entries = [e.to_dict() for e in open_table(args).lookup(token)]
        else:
            entries = client.lookup(token)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    
    if args.json:
        print_json(data={"token": token, "entries": entries})
        return
    
    if not entries:
        print(f"No entries for '{token}'.")
        return
    
    print(f"{token} ({len(entries)})")
    for entry in entries:
        print(format_entry(entry))
