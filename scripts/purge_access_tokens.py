"""Cron entry point for deleting expired access tokens."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from datetime import datetime, timezone

from contacts_api.auth.access_token_repository import AccessTokenRepository
from contacts_api.config import AppConfig, load_config


@dataclass(slots=True)
class PurgeSummary:
    tokens_removed: int
    dry_run: bool


def perform_purge(
    *,
    dry_run: bool,
    reference_time: datetime | None = None,
    config: AppConfig | None = None,
) -> PurgeSummary:
    """Remove expired token rows and return the summary counters."""
    config = config or load_config()
    tokens = AccessTokenRepository(config.session_factory)

    # Token rows store naive UTC timestamps.
    now = reference_time or datetime.now(tz=timezone.utc).replace(tzinfo=None)

    if dry_run:
        return PurgeSummary(tokens_removed=len(tokens.list_expired(now)), dry_run=True)
    return PurgeSummary(tokens_removed=tokens.purge_expired(now), dry_run=False)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete expired access tokens.")
    parser.add_argument("--dry-run", action="store_true", help="Only report counts without deleting rows.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or [])
    try:
        summary = perform_purge(dry_run=args.dry_run)
    except Exception as exc:
        print(f"purge failed: {exc}", file=sys.stderr)
        return 2

    if summary.dry_run:
        print(f"purge dry-run, tokens_expired={summary.tokens_removed}", file=sys.stdout)
    else:
        print(f"purge done, tokens_removed={summary.tokens_removed}", file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
