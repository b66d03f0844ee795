"""
Index commands: info, tokens.
"""

import sys
from rich import print_json

from docsearch.cli import client
from docsearch.cli.commands.common import add_index_args, open_table


def add_subparser(subparsers):
    info_p = subparsers.add_parser("info", help="Show index summary")
    add_index_args(info_p)
    info_p.set_defaults(func=index_info)
    
    tokens_p = subparsers.add_parser("tokens", help="List all tokens")
    add_index_args(tokens_p)
    tokens_p.set_defaults(func=index_tokens)


def index_info(args):
    try:
        if args.index:
            table = open_table(args)
            info = {
                "source": table.source,
                "token_count": len(table),
                "entry_count": table.entry_count,
            }
        else:
            info = client.get_index()
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    
    if args.json:
        print_json(data=info)
        return
    
    print(f"Source: {info['source']}")
    print(f"Tokens: {info['token_count']}")
    print(f"Entries: {info['entry_count']}")


def index_tokens(args):
    try:
        if args.index:
            tokens = list(open_table(args).tokens())
        else:
            tokens = client.list_tokens()
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    
    if args.json:
        print_json(data={"tokens": tokens})
        return
    
    for token in tokens:
        print(token)
