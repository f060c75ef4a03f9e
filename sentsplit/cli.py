"""Command-line interface for the sentence splitter."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import Config
from .exceptions import ConfigError
from .pipeline import SplitPipeline
from .splitter import SentenceSplitter


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Split English passages into sentences aligned to Korean translations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split a single passage and print JSON
  sentsplit split --text "Dr. Smith arrived. He left." --translation "스미스 박사가 도착했다. 그는 떠났다."

  # Include the translation quality verdict
  sentsplit split --file passage.txt --translation-file passage.ko.txt --analyze

  # Batch mode with a config file
  sentsplit batch --config config.yaml

  # Batch mode with direct arguments
  sentsplit batch --input data/passages.jsonl --output data/split_output --format json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    split_parser = subparsers.add_parser("split", help="Split a single passage")
    setup_split_parser(split_parser)

    batch_parser = subparsers.add_parser("batch", help="Split passages from a JSONL file")
    setup_batch_parser(batch_parser)

    # If no command specified, treat as batch command
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or (argv[0] not in subparsers.choices and argv[0] not in ("-h", "--help")):
        argv = ["batch", *argv]

    return parser.parse_args(argv)


def setup_split_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for split command."""
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, help="Source passage text")
    source.add_argument("--file", type=Path, help="Path to a UTF-8 file with the source passage")

    translation = parser.add_mutually_exclusive_group()
    translation.add_argument("--translation", type=str, help="Korean translation text")
    translation.add_argument(
        "--translation-file", type=Path, help="Path to a UTF-8 file with the translation"
    )

    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Include the translation quality verdict in the output",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file (splitter section is used)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_batch_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for batch command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for sentence and passage tables",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "json"],
        help="Output format (default: csv)",
    )
    parser.add_argument(
        "--no-statuses",
        action="store_true",
        help="Skip writing the per-passage status table",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "output", None):
        config.output.output_dir = args.output
    if getattr(args, "format", None):
        config.output.format = args.format
    if getattr(args, "no_statuses", False):
        config.output.save_statuses = False

    return config


def _read_text(text: Optional[str], path: Optional[Path]) -> Optional[str]:
    if path is not None:
        return path.read_text(encoding="utf-8")
    return text


def handle_split(args: argparse.Namespace) -> int:
    """Handle split command."""
    try:
        config = build_config(args)
        source_text = _read_text(args.text, args.file)
        translation_text = _read_text(args.translation, args.translation_file)
    except (ConfigError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    splitter = SentenceSplitter(config.splitter)
    result = splitter.split(source_text, translation_text)
    output = result.to_dict()
    if args.analyze:
        status = splitter.analyze_translation(source_text, translation_text)
        output["translation_status"] = status.to_dict()
        output["pair_issues"] = [issue.to_dict() for issue in splitter.pair_issues(result)]
        output["needs_escalation"] = splitter.needs_escalation(result, status)

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


def handle_batch(args: argparse.Namespace) -> int:
    """Handle batch command."""
    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = SplitPipeline(config)
        count = pipeline.run()
        print(f"\nProcessed {count} passages")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Splitting failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    if args.command == "split":
        return handle_split(args)
    else:
        return handle_batch(args)


if __name__ == "__main__":
    sys.exit(main())
