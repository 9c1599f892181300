import argparse
import logging
import sys
from pathlib import Path

from filestorage.components.files import FileStorage, create_file_storage
from filestorage.config import StorageSettings, apply_env_overrides, load_settings
from filestorage.core.entities import FileRecord
from filestorage.core.ports.storage import StorageError

logger = logging.getLogger("cli")


def get_settings(args: argparse.Namespace) -> StorageSettings:
    if args.config:
        settings = load_settings(Path(args.config))
    else:
        # Without a config file the CLI only makes sense against disk
        settings = StorageSettings(backend="local")

    settings = apply_env_overrides(settings)

    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.base_path:
        overrides["base_path"] = args.base_path
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def handle_save(storage: FileStorage, args: argparse.Namespace) -> None:
    if args.file:
        content: bytes | str = Path(args.file).read_bytes()
    else:
        content = args.data

    record = FileRecord(key=args.key, content=content)
    if args.content_type:
        record.content_type = args.content_type

    storage.save(record)
    print(f"Saved {args.key}")


def handle_load(storage: FileStorage, args: argparse.Namespace) -> None:
    record = storage.load(args.key)
    if isinstance(record.content, bytes):
        sys.stdout.buffer.write(record.content)
        sys.stdout.flush()
    else:
        sys.stdout.write(record.content or "")


def handle_init(storage: FileStorage, args: argparse.Namespace) -> None:
    storage.init(args.key, touch=args.touch)
    if args.touch:
        print(f"Reserved {args.key}")
    else:
        print(f"Key {args.key} is free")


def handle_delete(storage: FileStorage, args: argparse.Namespace) -> None:
    storage.delete(args.key)
    print(f"Deleted {args.key}")


HANDLERS = {
    "save": handle_save,
    "load": handle_load,
    "init": handle_init,
    "delete": handle_delete,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="filestorage", description="Key-addressed file storage")
    parser.add_argument("--config", help="Path to a storage settings YAML file")
    parser.add_argument("--backend", choices=["memory", "local"], help="Override storage backend")
    parser.add_argument("--base-path", help="Override local storage directory")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # save
    save_parser = subparsers.add_parser("save", help="Save content under a key")
    save_parser.add_argument("key")
    source = save_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", help="Text content to store")
    source.add_argument("--file", help="Path of a file whose bytes are stored")
    save_parser.add_argument("--content-type", help="MIME type recorded with the content")

    # load
    load_parser = subparsers.add_parser("load", help="Print the content stored under a key")
    load_parser.add_argument("key")

    # init
    init_parser = subparsers.add_parser("init", help="Check a key is free, optionally reserving it")
    init_parser.add_argument("key")
    init_parser.add_argument(
        "--touch", action="store_true", help="Save an empty file immediately to reserve the key"
    )

    # delete
    delete_parser = subparsers.add_parser("delete", help="Delete the file stored under a key")
    delete_parser.add_argument("key")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings(args)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("%s", e)
        return 1

    logging.basicConfig(level=settings.log_level)

    try:
        storage = create_file_storage(settings=settings)
        HANDLERS[args.command](storage, args)
    except (StorageError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
