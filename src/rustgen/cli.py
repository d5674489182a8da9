"""Command-line interface for rustgen."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import ScopeConfig
from .generator import CodeGenerator


def main(argv: list[str] | None = None) -> int:
    """Main entry point for rustgen CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    start_time = time.time()

    ap = argparse.ArgumentParser(
        prog="rustgen",
        description="Rust source generator - Generate Rust code from YAML scope definitions",
    )
    ap.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    subparsers = ap.add_subparsers(dest="command", help="Command to run")

    render_sub = subparsers.add_parser("render", help="Render a YAML scope to Rust")
    render_sub.add_argument("input", help="Input YAML file")
    render_sub.add_argument(
        "-o",
        "--output",
        default=Path.cwd() / "generated",
        help="Output directory (relative to invocation directory)",
    )
    render_sub.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated code instead of writing a file",
    )
    render_sub.add_argument(
        "--rustfmt", action="store_true", help="Pipe the output through rustfmt"
    )
    render_sub.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Spaces per indentation level (overrides the YAML 'indent' key)",
    )
    render_sub.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        metavar="PATH",
        help="Directory with templates overriding the builtin ones (also: RUSTGEN_TEMPLATES_DIR env var)",
    )

    subparsers.add_parser("schema", help="Print the JSON schema of the YAML input")

    args = ap.parse_args(argv)

    # Setup logging
    log = logging.getLogger("rustgen")
    log_level = logging.DEBUG if args.debug else logging.INFO
    # Logs go to stderr so --stdout output stays clean
    log.handlers = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            show_time=False,
        )
    ]
    log.setLevel(log_level)

    if args.command is None:
        ap.print_help()
        return 1

    if args.command == "schema":
        print(json.dumps(ScopeConfig.model_json_schema(), indent=2))
        return 0

    try:
        code_gen = CodeGenerator(
            args.output, templates_dir=args.templates_dir, rustfmt=args.rustfmt
        )
        data = code_gen.parse_yaml(args.input)
        # Validated together with the file so the same limits apply
        if args.indent is not None:
            data["indent"] = args.indent
        config = code_gen.validate(data)

        if args.stdout:
            sys.stdout.write(code_gen.render(config))
        else:
            code_gen.generate(config)
    except Exception as e:
        log.error(f"Generation failed: {e}")
        if args.debug:
            raise
        return 1

    end_time = time.time()
    log.debug(f"Done after {end_time - start_time:.2f} seconds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
