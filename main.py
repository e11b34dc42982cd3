"""
Command-line entry point: build and check indexes, run the service, invoke the search endpoint
"""
import argparse
import logging
import sys

from config import Config
from indexer.tf_index import check_index, index_folder, save_index
from invoker.errors import InvokerError
from invoker.search_invoker import run_variant
from invoker.variants import VARIANTS, get_variant


def cmd_index(args, config):
    output = args.output or config.index_path
    try:
        tf_index = index_folder(args.dir_path)
        save_index(tf_index, output)
    except (OSError, ValueError) as e:
        print(f"ERROR: could not index folder {args.dir_path}: {e}")
        return 1
    return 0


def cmd_search(args, config):
    try:
        check_index(args.index_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: could not check index file {args.index_path}: {e}")
        return 1
    return 0


def cmd_invoke(args, config):
    base_url = args.base_url or config.base_url
    try:
        run_variant(get_variant(args.variant), base_url)
    except InvokerError as e:
        print(f"ERROR: {e}")
        return 1
    return 0


def cmd_serve(args, config):
    from app import app

    if args.index_path:
        app.config['INDEX_PATH'] = args.index_path
    app.run(host=args.host, port=args.port or config.port)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="tf-search", description="Term-frequency search tools")
    subparsers = parser.add_subparsers(dest="command")

    index_parser = subparsers.add_parser("index", help="index a folder of XML documents")
    index_parser.add_argument("dir_path")
    index_parser.add_argument("--output", help="where to write the index (default: INDEX_PATH)")
    index_parser.set_defaults(handler=cmd_index)

    search_parser = subparsers.add_parser("search", help="check an index file")
    search_parser.add_argument("index_path")
    search_parser.set_defaults(handler=cmd_search)

    invoke_parser = subparsers.add_parser("invoke", help="send one request to the search endpoint")
    invoke_parser.add_argument("variant", choices=sorted(VARIANTS))
    invoke_parser.add_argument("--base-url", help="service URL (default: SEARCH_BASE_URL)")
    invoke_parser.set_defaults(handler=cmd_invoke)

    serve_parser = subparsers.add_parser("serve", help="run the search service")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int)
    serve_parser.add_argument("--index-path")
    serve_parser.set_defaults(handler=cmd_serve)

    return parser


def main(argv=None):
    config = Config()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        print("ERROR: no subcommand is provided")
        parser.print_usage()
        return 1

    return args.handler(args, config)


if __name__ == '__main__':
    sys.exit(main())
