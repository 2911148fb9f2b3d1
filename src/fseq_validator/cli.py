"""
Command-Line Entry Point
========================

Usage:
    fseq-validate lightshow.fseq
    fseq-validate lightshow.fseq --json
    fseq-validate lightshow.fseq --config config.yaml

Exit codes:
    0  sequence accepted
    1  sequence rejected
    2  sequence or config file could not be read, or frame data is truncated
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fseq_validator.config import load_config, settings
from fseq_validator.fseq.reader import FseqError
from fseq_validator.messages import build_error_messages, build_summary
from fseq_validator.validator import Validator


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fseq-validate",
        description="Validate an FSEQ v2 light-show sequence before playback",
    )
    parser.add_argument("file", help="Path to the .fseq file")
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to a config.yaml overriding the validation limits",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validation result as JSON",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config and not Path(args.config).exists():
        print(f"ERROR: cannot read config {args.config}: file not found", file=sys.stderr)
        return 2

    cfg = load_config(args.config) if args.config else settings

    try:
        data = Path(args.file).read_bytes()
    except OSError as e:
        print(f"ERROR: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    try:
        result = Validator(cfg.validation).validate(data)
    except FseqError as e:
        logger.error(f"Failed to decode {args.file}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return 0 if result.is_valid else 1

    if not result.is_valid:
        for message in build_error_messages(result, cfg.validation):
            print(f"VALIDATION ERROR: {message}", file=sys.stderr)
        return 1

    for line in build_summary(result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
