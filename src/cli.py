"""Command-line interface for dab."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from errors import DabError, OptionError
from options import help_text, load_config, parse_arguments
from scaffold import create_module_in_project

if TYPE_CHECKING:
    from options.flags import ModuleOptions


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )


def _handle_create(root: Path, module_path: str, options: ModuleOptions) -> int:
    try:
        config = load_config(root)
        create_module_in_project(
            root, module_path, options.with_defaults(config), config
        )
    except DabError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        sys.stderr.write(f"error: I/O error: {exc}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        invocation = parse_arguments(argv)
    except OptionError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    options = invocation.options
    if options.is_help:
        sys.stdout.write(help_text())
        return 0
    if invocation.module_path is None:
        sys.stderr.write(
            "error: Expected module name. Only found options. "
            "Run `--help` for usage\n"
        )
        return 2

    _configure_logging(options.verbose)
    root = Path.cwd().resolve()
    return _handle_create(root, invocation.module_path, options)


if __name__ == "__main__":
    raise SystemExit(main())
