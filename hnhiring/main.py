"""Command-line entry point: build, filter and sort postings from comment hits."""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError

from hnhiring.config.environment import EnvironmentConfig
from hnhiring.config.exceptions import ConfigurationError
from hnhiring.config.loader import load_config
from hnhiring.config.models import AppConfig
from hnhiring.domain.models import JobFlags, JobPosting
from hnhiring.extraction.builder import JobPostingBuilder, apply_flag_state
from hnhiring.filtering.codec import from_query_string
from hnhiring.filtering.engine import filter_by_view, filter_postings
from hnhiring.logging import get_logger
from hnhiring.logging.config import configure_logging
from hnhiring.logging.context import log_context
from hnhiring.tech.matcher import TechKeywordMatcher
from hnhiring.utils.timestamps import thread_month_key

logger = get_logger(__name__, component="cli")


class InputError(Exception):
    """Raised when an input file cannot be read or has the wrong shape."""


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level and format.

    Priority for both: CLI > environment > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def _read_json(path: str, stdin: Optional[TextIO] = None) -> Any:
    try:
        if path == "-":
            return json.load(stdin or sys.stdin)
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {path}: {e}") from e


def read_hits(path: str, stdin: Optional[TextIO] = None) -> List[Any]:
    """Read comment hits: a JSON list, or an object with a ``hits`` list."""
    payload = _read_json(path, stdin)
    if isinstance(payload, dict):
        payload = payload.get("hits")
    if not isinstance(payload, list):
        raise InputError(f"{path} must contain a list of hits or an object with 'hits'")
    return payload


def read_flag_state(path: str) -> Dict[str, JobFlags]:
    """Read the ``{posting_id: {starred, applied, notes}}`` bookmark mapping.

    Raises:
        InputError: If the file is unreadable or an entry is not a flag object
    """
    payload = _read_json(path)
    if not isinstance(payload, dict):
        raise InputError(f"{path} must contain an object keyed by posting id")

    state: Dict[str, JobFlags] = {}
    for posting_id, values in payload.items():
        try:
            state[posting_id] = JobFlags.model_validate(values)
        except ValidationError as e:
            raise InputError(
                f"Invalid flags for posting {posting_id} in {path}: "
                f"{e.error_count()} validation error(s)"
            ) from e
    return state


def select_postings(
    postings: Sequence[JobPosting], params: str, limit: Optional[int] = None
) -> List[JobPosting]:
    """Apply the decoded filter state: month, view, filters, sort, then limit."""
    state = from_query_string(params or "")

    selected = list(postings)
    if state.month:
        selected = [
            posting
            for posting in selected
            if thread_month_key(posting.source.story_title, posting.created_at) == state.month
        ]

    selected = filter_by_view(selected, state.view)
    selected = filter_postings(selected, state.filters)

    if limit is not None:
        selected = selected[:limit]
    return selected


def non_negative_int(value: str) -> int:
    """argparse type for counts: an integer of at least 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hnhiring",
        description="Extract structured job postings from 'Who is hiring?' comments",
    )
    parser.add_argument(
        "--input",
        required=True,
        help="JSON file of comment hits ('-' reads stdin)",
    )
    parser.add_argument(
        "--params",
        default="",
        help="Filter parameters as a query string, e.g. 'tech=React&sort=newest'",
    )
    parser.add_argument(
        "--flags",
        default=None,
        help="JSON file mapping posting ids to {starred, applied, notes}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: hnhiring.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--limit",
        type=non_negative_int,
        default=None,
        help="Maximum number of postings to print",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for configuration or input errors)
    """
    load_dotenv()
    start_time = time.time()
    stdout = stdout or sys.stdout
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(
        level=env_config.log_level,
        format_type=env_config.log_format,
        environment=env_config.environment,
        stream=sys.stderr,
    )

    with log_context(input=args.input):
        try:
            hits = read_hits(args.input)
            flag_state = read_flag_state(args.flags) if args.flags else {}
        except InputError as e:
            logger.error(str(e), extra={"event": "cli.input.invalid"})
            return 1

        builder = JobPostingBuilder(
            tech_matcher=TechKeywordMatcher(app_config.build_tech_dictionary()),
            permalink_base_url=app_config.permalink_base_url,
        )
        postings = builder.build_many(hits)
        postings = apply_flag_state(postings, flag_state)
        selected = select_postings(postings, args.params, args.limit)

        json.dump(
            [posting.model_dump(mode="json") for posting in selected],
            stdout,
            indent=2,
            ensure_ascii=False,
        )
        stdout.write("\n")

        logger.info(
            f"Wrote {len(selected)} of {len(postings)} postings",
            extra={
                "event": "cli.completed",
                "hits": len(hits),
                "postings": len(postings),
                "selected": len(selected),
                "duration_seconds": round(time.time() - start_time, 3),
            },
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
