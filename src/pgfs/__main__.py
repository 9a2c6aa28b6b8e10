"""Entry point: python -m pgfs"""

from __future__ import annotations

import argparse
import json
import sys

from pgfs.copier.directory_copier import DirectoryCopier
from pgfs.extension.database import ExtensionDatabase
from pgfs.infrastructure.logger import install_exception_hooks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pgfs", description="Recursive directory copy")
    subparsers = parser.add_subparsers(dest="command", required=True)

    copy_parser = subparsers.add_parser("copy-dir", help="Copy a directory tree")
    copy_parser.add_argument("source", help="directory to be copied from")
    copy_parser.add_argument("dest", help="directory to be copied into")
    copy_parser.add_argument("--json", action="store_true", help="Print the copy result as JSON")

    sql_parser = subparsers.add_parser("sql", help="Copy a directory tree through the SQL function")
    sql_parser.add_argument("source", help="directory to be copied from")
    sql_parser.add_argument("dest", help="directory to be copied into")

    return parser


def run_copy(source: str, dest: str, as_json: bool) -> int:
    result = DirectoryCopier().copy_tree(source, dest)
    if as_json:
        print(json.dumps(result.model_dump(), indent=2))
    return 0 if result.success else 1


def run_sql(source: str, dest: str) -> int:
    database = ExtensionDatabase()
    database.init(":memory:")
    try:
        ok = database.copy_dir(source, dest)
    finally:
        database.close()
    print("t" if ok else "f")
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "sql":
        return run_sql(args.source, args.dest)
    return run_copy(args.source, args.dest, args.json)


def run() -> None:
    install_exception_hooks()
    sys.exit(main())


if __name__ == "__main__":
    run()
