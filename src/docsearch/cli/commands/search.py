"""
Prefix search.
"""

import sys
from rich import print_json

from docsearch.cli import client
from docsearch.cli.commands.common import add_index_args, format_entry, open_table


def add_subparser(subparsers):
    parser = subparsers.add_parser("search", help="List tokens starting with a prefix")
    parser.add_argument("prefix", help="Token prefix")
    parser.add_argument("--limit", "-n", type=int, default=None, help="Maximum number of tokens")
    parser.add_argument("--entries", action="store_true", help="Show every entry, not just the label")
    add_index_args(parser)
    parser.set_defaults(func=run)


def run(args):
    try:
        if args.index:
            results = [
                {
                    "token": token,
                    "label": entries[0].label,
                    "entries": [e.to_dict() for e in entries],
                }
                for token, entries in open_table(args).search(args.prefix, limit=args.limit)
            ]
        else:
            results = client.search(args.prefix, limit=args.limit)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    
    if args.json:
        print_json(data={"prefix": args.prefix, "results": results})
        return
    
    if not results:
        print(f"No tokens start with '{args.prefix}'.")
        return
    
    for r in results:
        print(f"{r['token']:30} {r['label']:24} ({len(r['entries'])})")
        if args.entries:
            for entry in r["entries"]:
                print(format_entry(entry))
