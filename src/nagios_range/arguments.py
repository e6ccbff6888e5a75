import argparse
import sys
from typing import NoReturn, Optional

from .error import RangeError
from .range import Range
from .threshold import State, Thresholds


def range_type(text: str) -> Range:
    """`type=` callable for argparse options that take a range."""
    try:
        return Range.parse(text)
    except RangeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


class _CheckArgumentParser(argparse.ArgumentParser):
    """
    Exits with ``Unknown`` (exit code 3) for usage errors and for the
    options ``--help``, ``-h`` and ``--version``, ``-V``, according to the
    `Monitoring Plugin Guidelines
    <https://github.com/monitoring-plugins/monitoring-plugin-guidelines/blob/main/monitoring_plugins_interface/02.Input.md>`__.
    """

    def exit(
        self, status: int = State.UNKNOWN, message: Optional[str] = None
    ) -> NoReturn:
        if message:
            self._print_message(message, sys.stderr)
        sys.exit(int(status))

    def error(self, message: str) -> NoReturn:
        # argparse exits with 2 here, which the plugin API does not know
        self.print_usage(sys.stderr)
        self.exit(State.UNKNOWN, "%s: error: %s\n" % (self.prog, message))


def setup_argparser(
    name: Optional[str],
    version: Optional[str] = None,
    description: Optional[str] = None,
) -> argparse.ArgumentParser:
    """
    Set up an argument parser for a check plugin with ``-w/--warning``
    and ``-c/--critical`` range options.

    :param name: The name of the plugin. If provided and doesn't start with
        ``check``, it will be prefixed with ``check_``.
    :param version: The version number of the plugin. Adds ``-V/--version``.
    :param description: A description of the plugin's functionality.

    :returns: A configured ArgumentParser instance.
    """
    if name is not None and not name.startswith("check"):
        name = f"check_{name}"

    parser: argparse.ArgumentParser = _CheckArgumentParser(
        prog=name,
        formatter_class=lambda prog: argparse.RawDescriptionHelpFormatter(
            prog, width=80
        ),
        description=description,
    )

    if version is not None:
        parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {version}",
        )

    parser.add_argument(
        "-w",
        "--warning",
        metavar="RANGE",
        type=range_type,
        help="Return warning if the value alerts against this range.",
    )
    parser.add_argument(
        "-c",
        "--critical",
        metavar="RANGE",
        type=range_type,
        help="Return critical if the value alerts against this range.",
    )

    return parser


def thresholds_from_args(args: argparse.Namespace) -> Thresholds:
    return Thresholds(
        getattr(args, "warning", None), getattr(args, "critical", None)
    )
