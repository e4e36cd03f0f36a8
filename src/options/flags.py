"""Command-line flag schema and parsing for dab."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, NoReturn

from errors import OptionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from options.config import DabConfig

PROG = "dab"
VERSION = "0.1.0"

DESCRIPTION = """\
dab is a command-line tool for Rust developers that can be used to create modules by paths.

Example usage:
- `dab errors`: Will create a file under src/errors/mod.rs (along with the directory) while
also adding `mod errors;` to the root file (`lib.rs` or `main.rs` depending on the package
type)
- `dab core::errors`: In a workspace, does the same inside the `core` member"""


class Flag(str, Enum):
    """Every flag dab accepts. Anything else is rejected by name."""

    HELP = "help"
    PUBLIC = "public"
    CSKIP = "cskip"
    FSKIP = "fskip"
    VERBOSE = "verbose"


_SHORT_FORMS: dict[Flag, str] = {
    Flag.HELP: "h",
    Flag.PUBLIC: "P",
    Flag.CSKIP: "C",
    Flag.FSKIP: "F",
    Flag.VERBOSE: "v",
}

_FLAG_HELP: dict[Flag, str] = {
    Flag.HELP: "Prints help information",
    Flag.PUBLIC: "Make the new module public",
    Flag.CSKIP: "Skip the comment header (if any)",
    Flag.FSKIP: "Skip creating module directory (only <module>.rs)",
    Flag.VERBOSE: "Log each step to stderr",
}


@dataclass(frozen=True)
class ModuleOptions:
    """The configuration to use while creating a module."""

    is_help: bool = False
    is_public: bool = False
    # insert the declaration below the leading comment header, not above it
    skip_header_insertion_point: bool = False
    # create `<module>.rs` instead of `<module>/mod.rs`
    no_directory_for_module: bool = False
    verbose: bool = False

    def with_defaults(self, config: DabConfig) -> ModuleOptions:
        """Turn on whatever the project config enables by default."""
        return replace(
            self,
            is_public=self.is_public or config.public,
            skip_header_insertion_point=(
                self.skip_header_insertion_point or config.after_header
            ),
            no_directory_for_module=self.no_directory_for_module or config.flat,
        )


@dataclass(frozen=True)
class Invocation:
    options: ModuleOptions
    module_path: str | None


class _StoreOnce(argparse.Action):
    """``store_true`` that refuses to see the same flag twice."""

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=False, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest):
            msg = f"duplicate options specified: `{option_string}`"
            raise OptionError(msg)
        setattr(namespace, self.dest, True)


class _FlagParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise OptionError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _FlagParser(
        prog=PROG,
        usage="%(prog)s [FLAGS] <module-path>",
        description=f"{PROG} {VERSION}\n{DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "module_path",
        nargs="*",
        metavar="<module-path>",
        help="Module to create, e.g. `errors` or `<member>::errors` in a workspace",
    )
    flags = parser.add_argument_group("FLAGS")
    for flag in Flag:
        flags.add_argument(
            f"--{flag.value}",
            f"-{_SHORT_FORMS[flag]}",
            dest=flag.value,
            action=_StoreOnce,
            help=_FLAG_HELP[flag],
        )
    return parser


def help_text() -> str:
    return _build_parser().format_help()


def parse_arguments(argv: Sequence[str]) -> Invocation:
    """Parse raw arguments into module options and an optional module path.

    Raises:
        OptionError: On an unknown or repeated flag, no arguments at all, or
            more than one module path.
    """
    if not argv:
        msg = "Incorrect number of arguments. Run `--help` for usage"
        raise OptionError(msg)

    args = _build_parser().parse_intermixed_args(list(argv))
    if len(args.module_path) > 1:
        msg = "expected one module name"
        raise OptionError(msg)

    options = ModuleOptions(
        is_help=args.help,
        is_public=args.public,
        skip_header_insertion_point=args.cskip,
        no_directory_for_module=args.fskip,
        verbose=args.verbose,
    )
    module_path = args.module_path[0] if args.module_path else None
    return Invocation(options=options, module_path=module_path)
