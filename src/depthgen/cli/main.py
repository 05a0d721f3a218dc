# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the depthgen command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from depthgen.compiler.assemble import GenerationError, generate
from depthgen.compiler.report import property_report, report_to_json
from depthgen.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    default_config_text,
    load_generator_config,
)
from depthgen.workspace.inputs import InputError, load_program

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the depthgen CLI."""
    parser = argparse.ArgumentParser(
        prog="depthgen",
        description="depthgen - depth-variant type and projector generator for TypeScript schemas",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a starter configuration",
        description=f"Write a starter {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the configuration in (default: current directory)",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate depth variants and projectors",
        description="Generate depth-variant interfaces and projection functions from a parsed schema.",
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help=f"Directory containing {CONFIG_FILE_NAME} (default: current directory)",
    )
    generate_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Deepest generated variant (overrides the configuration)",
    )
    generate_parser.add_argument(
        "--only",
        nargs="+",
        default=None,
        metavar="NAME",
        help="Restrict generation to these entity names (overrides the configuration)",
    )

    # report subcommand
    report_parser = subparsers.add_parser(
        "report",
        help="Print the property report",
        description="Print optional, nullable and referencing properties of every interface as JSON.",
    )
    report_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help=f"Directory containing {CONFIG_FILE_NAME} (default: current directory)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "report":
        return _cmd_report(args)
    return 0


def _error(message: str) -> None:
    print(f"{chalk.red('Error:')} {message}", file=sys.stderr)


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        _error(f"directory '{directory}' does not exist.")
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        _error(f"configuration already exists at '{config_file}'.")
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Initialized depthgen configuration at '{config_file}'.")
    return 0


def _load_config(directory: Path) -> GeneratorConfig | None:
    """Load the configuration of *directory*, reporting problems on stderr."""
    if not directory.exists():
        _error(f"directory '{directory}' does not exist.")
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        _error(f"no depthgen configuration found at '{directory}'. Run 'depthgen init' to create one.")
        return None

    try:
        return load_generator_config(config_file)
    except GeneratorConfigError as exc:
        _error(str(exc))
        return None


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = Path(args.directory).resolve()
    config = _load_config(directory)
    if config is None:
        return 1

    max_depth = config.max_depth if args.max_depth is None else args.max_depth
    if max_depth < 0:
        _error(f"--max-depth must be a non-negative integer, got {max_depth}.")
        return 1
    only_names = args.only if args.only is not None else config.only_names

    try:
        program = load_program(directory / config.input)
        code = generate(program, max_depth, only_names=only_names or None)
    except (InputError, GenerationError) as exc:
        _error(str(exc))
        return 1

    output_path = directory / config.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    header = f"{config.header}\n" if config.header else ""
    output_path.write_text(header + code, encoding="utf-8")
    print(chalk.green(f"Generated depth types (max depth {max_depth}) at '{output_path}'."))

    if config.report is not None:
        report_path = directory / config.report
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(report_to_json(property_report(program)), encoding="utf-8")
        print(chalk.green(f"Wrote property report to '{report_path}'."))
    return 0


def _cmd_report(args: argparse.Namespace) -> int:
    """Handle the report subcommand."""
    directory = Path(args.directory).resolve()
    config = _load_config(directory)
    if config is None:
        return 1

    try:
        program = load_program(directory / config.input)
    except InputError as exc:
        _error(str(exc))
        return 1

    print(report_to_json(property_report(program)))
    return 0
