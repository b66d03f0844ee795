"""
Run the API server.
"""

import os

import uvicorn


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Serve the search API")
    parser.add_argument("--index", "-i", help="Search data file or directory (default: $DOCSEARCH_INDEX)")
    parser.add_argument("--category", help="File category for directories (default: all)")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.set_defaults(func=run)


def run(args):
    # The server reads its index through config, which reads the environment
    if args.index:
        os.environ["DOCSEARCH_INDEX"] = args.index
    if args.category:
        os.environ["DOCSEARCH_CATEGORY"] = args.category
    
    uvicorn.run("docsearch.server.main:app", host=args.host, port=args.port)
