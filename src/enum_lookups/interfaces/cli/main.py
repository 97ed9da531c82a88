import argparse
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Type
import importlib
import colorlog

from enum_lookups.core.conversion import (
    parse_enum,
    parse_enum_or_default,
    to_description,
    to_wire_constant,
)
from enum_lookups.core.errors import EnumLookupError, NoMatchError
from enum_lookups.core.registry import get_table
from enum_lookups.loader import load_annotations

try:
    from enum_lookups import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    from importlib.metadata import version as _pkg_version, PackageNotFoundError

    try:
        _PACKAGE_VERSION = _pkg_version("enum-lookups")
    except PackageNotFoundError:
        _PACKAGE_VERSION = "unknown"


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def import_enum(target: str) -> Type[Enum]:
    """Import an enum class from a ``package.module:ClassName`` string.

    Nested classes are reached with dots after the colon (``mod:Outer.Inner``).

    Raises:
        ValueError: If target is malformed, cannot be imported, or is not an Enum.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'module:EnumClass', got '{target}'")
    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}': {e}") from e
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ValueError(f"'{attr_path}' not found in module '{module_name}'") from e
    if not (isinstance(obj, type) and issubclass(obj, Enum)):
        raise ValueError(f"'{target}' is not an Enum class")
    return obj


def _resolve_target(args: argparse.Namespace) -> Optional[Type[Enum]]:
    """Import the target enum and apply --annotations; log and return None on failure."""
    try:
        enum_cls = import_enum(args.target)
    except ValueError as e:
        logging.error("%s", e)
        return None
    annotations_path = getattr(args, "annotations", None)
    if annotations_path:
        try:
            load_annotations(Path(annotations_path), enum_cls)
        except (FileNotFoundError, ValueError, EnumLookupError) as e:
            logging.error("Failed to load annotations: %s", e)
            return None
        logging.debug("Loaded annotations for %s from %s", enum_cls.__name__, annotations_path)
    return enum_cls


def _convert_member(args: argparse.Namespace, convert) -> int:
    enum_cls = _resolve_target(args)
    if enum_cls is None:
        return 2
    try:
        member = parse_enum(enum_cls, args.member)
        print(convert(member))
    except NoMatchError as e:
        logging.error("%s", e)
        return 1
    except EnumLookupError as e:
        logging.error("%s", e)
        return 2
    return 0


def cmd_wire(args: argparse.Namespace) -> int:
    """Print the wire constant of a member (given by name, wire constant or description)."""
    return _convert_member(args, to_wire_constant)


def cmd_describe(args: argparse.Namespace) -> int:
    """Print the description of a member (given by name, wire constant or description)."""
    return _convert_member(args, to_description)


def cmd_parse(args: argparse.Namespace) -> int:
    """Print the name of the member matching TEXT.

    With --default, a failed match prints the default member instead of
    returning exit code 1.
    """
    enum_cls = _resolve_target(args)
    if enum_cls is None:
        return 2
    default_name = getattr(args, "default", None)
    try:
        if default_name is not None:
            if default_name not in enum_cls.__members__:
                logging.error(
                    "Default '%s' is not a member of %s", default_name, enum_cls.__name__
                )
                return 2
            member = parse_enum_or_default(
                enum_cls, args.text, enum_cls.__members__[default_name]
            )
        else:
            member = parse_enum(enum_cls, args.text)
    except NoMatchError as e:
        logging.error("%s", e)
        return 1
    except EnumLookupError as e:
        logging.error("%s", e)
        return 2
    print(member.name)
    return 0


def cmd_table(args: argparse.Namespace) -> int:
    """Print the resolution table (name, wire constant, description) of an enum."""
    enum_cls = _resolve_target(args)
    if enum_cls is None:
        return 2
    rows = get_table(enum_cls).rows()
    if getattr(args, "json", False):
        print(json.dumps([row.to_dict() for row in rows], ensure_ascii=False, indent=2))
        return 0

    header = ("name", "wire_constant", "description")
    cells = [header] + [
        (row.name, row.wire_constant or "-", row.description or "-") for row in rows
    ]
    widths = [max(len(line[i]) for line in cells) for i in range(len(header))]
    for line in cells:
        print("  ".join(value.ljust(width) for value, width in zip(line, widths)).rstrip())
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="enum-lookups",
        description=f"Enum Lookups (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    # Shared by every subcommand
    target_parent = argparse.ArgumentParser(add_help=False)
    target_parent.add_argument("target", help="Enum class as 'package.module:EnumClass'")
    target_parent.add_argument(
        "--annotations",
        default=None,
        help="YAML file with annotations for the enum (replaces declared annotations)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_wire = sub.add_parser(
        "wire", parents=[target_parent], help="Print the wire constant of a member"
    )
    p_wire.add_argument("member", help="Member name, wire constant or description")
    p_wire.set_defaults(func=cmd_wire)

    p_describe = sub.add_parser(
        "describe", parents=[target_parent], help="Print the description of a member"
    )
    p_describe.add_argument("member", help="Member name, wire constant or description")
    p_describe.set_defaults(func=cmd_describe)

    p_parse = sub.add_parser(
        "parse", parents=[target_parent], help="Print the member name matching a string"
    )
    p_parse.add_argument("text", help="Text to convert")
    p_parse.add_argument(
        "--default",
        default=None,
        help="Member name to print when nothing matches (exit code stays 0)",
    )
    p_parse.set_defaults(func=cmd_parse)

    p_table = sub.add_parser(
        "table", parents=[target_parent], help="Print the resolution table of an enum"
    )
    p_table.add_argument("--json", action="store_true", help="Print rows as JSON")
    p_table.set_defaults(func=cmd_table)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
