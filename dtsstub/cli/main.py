"""Main CLI entry point for dtsstub"""

import os
import sys
import argparse
import traceback
from pathlib import Path
from typing import List, Optional

import yaml

from dtsstub.core.config import LINE_ENDINGS, StubConfig
from dtsstub.core.declaration_table import DeclarationTableBuilder
from dtsstub.core.stub_logger import StubLogger
from dtsstub.frontend.declaration_loader import (
    DeclarationFormatError,
    DeclarationSource,
    load_environment,
)
from dtsstub.generators.stub_emitter import StubGenerationError, generate_stubs


def process_text(file: str,
                 text: str,
                 base_text: str,
                 config: Optional[StubConfig] = None,
                 logger: Optional[StubLogger] = None) -> List[str]:
    """Generate stub statements for an in-memory declaration document

    Args:
        file: Identifier of the document, used as processing origin
        text: Serialized declarations of the file
        base_text: Serialized base declarations
        config: Stub settings (default: StubConfig())
        logger: Optional decision logger

    Returns:
        Ordered list of statements

    Raises:
        DeclarationFormatError: If either document is malformed
        StubGenerationError: If the tree holds an unsupported node
    """
    config = config or StubConfig()
    env = load_environment(
        [
            DeclarationSource(file=config.base_origin, text=base_text),
            DeclarationSource(file=file, text=text),
        ],
        logger=logger,
    )
    table = DeclarationTableBuilder(config.module_prefix).build(env, file)
    return generate_stubs(table, file, logger=logger)


def process_file(input_file: Path,
                 config: Optional[StubConfig] = None,
                 logger: Optional[StubLogger] = None) -> List[str]:
    """Generate stub statements for a declaration file

    Args:
        input_file: Path to the serialized declarations
        config: Stub settings (default: StubConfig())
        logger: Optional decision logger

    Returns:
        Ordered list of statements

    Raises:
        FileNotFoundError: If input_file or the base declarations don't exist
        UnicodeDecodeError: If a declarations file is not valid UTF-8
        DeclarationFormatError: If either document is malformed
        StubGenerationError: If the tree holds an unsupported node
    """
    config = config or StubConfig()
    # Normalized but symlinks kept, so the origin is the path the caller named
    file_path = Path(os.path.abspath(input_file))
    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    base_path = config.base_path()
    if not base_path.exists():
        raise FileNotFoundError(f"Base declarations not found: {base_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        text = f.read()
    with open(base_path, 'r', encoding='utf-8') as f:
        base_text = f.read()

    return process_text(str(file_path), text, base_text, config=config, logger=logger)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Generate runtime JavaScript stubs from serialized type declarations"
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Declaration file to stub"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write stubs to this file instead of stdout"
    )
    parser.add_argument(
        "--base",
        type=Path,
        help="Base declarations file (default: bundled lib.d.yaml)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Load settings from YAML config file"
    )
    parser.add_argument(
        "--module-prefix",
        help="Name prefix marking module symbols (default: 'module:')"
    )
    parser.add_argument(
        "--line-ending",
        choices=sorted(LINE_ENDINGS),
        help="Line terminator between statements (default: crlf)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print a summary of stub decisions to stderr"
    )

    args = parser.parse_args(argv)

    if args.input is None:
        print("Please pass a valid path")
        return 0

    config = StubConfig()
    try:
        if args.config:
            config.load_from_yaml(args.config)
        config.apply_cli_overrides(
            module_prefix=args.module_prefix,
            line_ending=args.line_ending,
            base=args.base,
        )
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logger = StubLogger() if args.verbose else None

    try:
        statements = process_file(args.input, config=config, logger=logger)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: declarations are not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except DeclarationFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except StubGenerationError:
        print(f"Error generating stubs for {args.input}:", file=sys.stderr)
        traceback.print_exc()
        return 1

    output = config.line_ending.join(statements)

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8', newline='') as f:
                f.write(output)
        except OSError as e:
            print(f"Error writing output file {args.output}: {e}", file=sys.stderr)
            return 1
        if args.verbose:
            print(f"Generated: {args.output}", file=sys.stderr)
    else:
        print(output)

    if logger:
        print(logger.print_summary(), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
