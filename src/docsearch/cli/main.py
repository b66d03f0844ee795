"""
Docsearch CLI.
"""

import argparse
import logging

from docsearch.cli.commands import index, lookup, search, serve


def main(argv=None):
    parser = argparse.ArgumentParser(prog="docsearch", description="Documentation search index CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log loader activity")
    subparsers = parser.add_subparsers(dest="command")
    
    lookup.add_subparser(subparsers)
    search.add_subparser(subparsers)
    index.add_subparser(subparsers)
    serve.add_subparser(subparsers)
    
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
