from __future__ import annotations

import argparse
from typing import Sequence

from app import DEFAULT_FEATURES, DemoApplication
from domain.formatting import format_list
from domain.ports import FileStorePort, LoggerPort
from domain.services import ConfigStore, StateManager
from domain.utils import split_csv
from infra.fs import LocalFileStore
from infra.runtime import StructuredLogger, SystemClock, format_time


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="demo-app")
    parser.add_argument("--quiet", action="store_true", help="Suppress structured log output")
    sub = parser.add_subparsers(dest="command", required=True)

    demo_p = sub.add_parser("demo", help="Run the demonstration sequence")
    demo_p.add_argument("--state-file", default=None, help="Also save the demo state to this file")
    demo_p.add_argument(
        "--features",
        default=",".join(DEFAULT_FEATURES),
        help="Comma-separated feature names to list",
    )

    config_p = sub.add_parser("config", help="Inspect or edit a JSON config file")
    config_sub = config_p.add_subparsers(dest="action", required=True)
    show_p = config_sub.add_parser("show")
    show_p.add_argument("file")
    get_p = config_sub.add_parser("get")
    get_p.add_argument("file")
    get_p.add_argument("key")
    get_p.add_argument("--default", default=None)
    get_p.add_argument("--int", dest="as_int", action="store_true")
    set_p = config_sub.add_parser("set")
    set_p.add_argument("file")
    set_p.add_argument("key")
    set_p.add_argument("value")
    set_p.add_argument("--int", dest="as_int", action="store_true")

    state_p = sub.add_parser("state", help="Inspect or edit a key=value state file")
    state_sub = state_p.add_subparsers(dest="action", required=True)
    sget_p = state_sub.add_parser("get")
    sget_p.add_argument("file")
    sget_p.add_argument("key")
    sset_p = state_sub.add_parser("set")
    sset_p.add_argument("file")
    sset_p.add_argument("key")
    sset_p.add_argument("value")

    ls_p = sub.add_parser("ls", help="List a directory")
    ls_p.add_argument("path", nargs="?", default=".")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = StructuredLogger() if not args.quiet else _NullLogger()
    file_store = LocalFileStore()

    if args.command == "demo":
        app = DemoApplication(
            clock=SystemClock(),
            file_store=file_store,
            logger=logger,
            format_time=format_time,
        )
        report = app.run(state_file=args.state_file, features=split_csv(args.features))
        return 1 if report.state_saved is False else 0

    if args.command == "config":
        return _handle_config(parser, args, file_store, logger)

    if args.command == "state":
        return _handle_state(args, file_store, logger)

    if args.command == "ls":
        if not file_store.is_directory(args.path):
            print(f"Not a directory: {args.path}")
            return 1
        print(format_list(file_store.list_directory(args.path)))
        return 0

    raise SystemExit(f"Unsupported command: {args.command}")


def _handle_config(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    file_store: FileStorePort,
    logger: LoggerPort,
) -> int:
    store = ConfigStore(logger=logger)

    if args.action == "set":
        if file_store.file_exists(args.file) and not _load_config(store, args.file, file_store):
            return 1
        if args.as_int:
            try:
                store.set_int(args.key, int(args.value))
            except ValueError:
                parser.error(f"--int requires an integer value, got {args.value!r}")
        else:
            store.set_value(args.key, args.value)
        if not file_store.write_file(args.file, store.to_json() + "\n"):
            print(f"Cannot write {args.file}")
            return 1
        print(f"updated {args.key}")
        return 0

    if not _load_config(store, args.file, file_store):
        return 1

    if args.action == "show":
        print(store.to_json())
        return 0

    if args.as_int:
        default = 0
        if args.default is not None:
            try:
                default = int(args.default)
            except ValueError:
                parser.error(f"--default must be an integer with --int, got {args.default!r}")
        print(store.get_int(args.key, default))
    else:
        print(store.get_value(args.key, args.default if args.default is not None else ""))
    return 0


def _load_config(store: ConfigStore, path: str, file_store: FileStorePort) -> bool:
    content, ok = file_store.read_file(path)
    if not ok:
        print(f"Cannot read {path}")
        return False
    if not store.load_from_json(content):
        print(f"Invalid config document: {path}")
        return False
    return True


def _handle_state(
    args: argparse.Namespace,
    file_store: FileStorePort,
    logger: LoggerPort,
) -> int:
    state = StateManager(file_store, logger=logger)

    if args.action == "get":
        if not state.load_from_file(args.file):
            print(f"Cannot read {args.file}")
            return 1
        if not state.has_key(args.key):
            print(f"{args.key} is not set")
            return 1
        print(state.get_value(args.key))
        return 0

    if file_store.file_exists(args.file) and not state.load_from_file(args.file):
        print(f"Cannot read {args.file}")
        return 1
    state.set_value(args.key, args.value)
    if not state.save_to_file(args.file):
        print(f"Cannot write {args.file}")
        return 1
    print(f"updated {args.key}")
    return 0


class _NullLogger:
    def info(self, message: str, **fields: object) -> None:
        pass

    def warning(self, message: str, **fields: object) -> None:
        pass

    def error(self, message: str, **fields: object) -> None:
        pass


if __name__ == "__main__":
    raise SystemExit(main())
