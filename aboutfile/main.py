"""CLI entry point: dispatches aboutfile subcommands."""
import argparse
import logging
import sys

from pydantic import ValidationError

from aboutfile.classify import FeatureDisabledError
from aboutfile.commands import get_version


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="aboutfile",
        description="Validate filenames and classify them by extension",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    # aboutfile check
    p_check = sub.add_parser("check", help="Validate filenames and report name, extension and type")
    p_check.add_argument("names", nargs="+", metavar="NAME", help="Filename(s) to check")
    p_check.add_argument("--allow", default=None,
                         help="Comma-separated extension allowlist, e.g. png,jpg")
    p_check.add_argument("--json", action="store_true", help="One JSON object per filename")

    # aboutfile type
    p_type = sub.add_parser("type", help="Print the file type of each filename")
    p_type.add_argument("names", nargs="+", metavar="NAME", help="Filename(s) to classify")

    # aboutfile config
    sub.add_parser("config", help="Show the effective classifier configuration")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "check":
            from aboutfile.commands.check import cmd_check
            cmd_check(args)
        elif args.command == "type":
            from aboutfile.commands.check import cmd_type
            cmd_type(args)
        elif args.command == "config":
            from aboutfile.commands.config import cmd_config
            cmd_config(args)
        else:
            parser.print_help()
            sys.exit(1)
    except ValidationError as e:
        print(f"aboutfile: invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(2)
    except FeatureDisabledError as e:
        print(f"aboutfile: {e} (check ABOUTFILE_FEATURES or the config file)", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        sys.exit(130)


if __name__ == "__main__":
    main()
