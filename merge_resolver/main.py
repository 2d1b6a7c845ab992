"""Merge-label resolver entry point.

Runs as a GitHub Actions step on pull_request closed: reads the event
payload, maps merge:<version> labels of the merged PR to branches and
optionally opens follow-up merge pull requests. Usage:
merge-resolver [--config PATH] [--event-path PATH] [--repo OWNER/REPO].
"""

import argparse
import os
import sys
from pathlib import Path

from merge_resolver.actions import set_failed
from merge_resolver.adapters.github import GitHubAdapter
from merge_resolver.config import AppConfig, load_config
from merge_resolver.event import ResolverError, load_event, resolve_repository
from merge_resolver.logging import ResolverLogging
from merge_resolver.resolver import RunResult, run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="merge-resolver",
        description="Resolve merge:<version> labels of a merged pull request to target branches",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("merge-resolver.yaml"),
        help="Path to YAML config file (optional)",
    )
    parser.add_argument(
        "--event-path",
        type=Path,
        default=None,
        help="Event payload JSON (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--repo",
        default=None,
        help="owner/repo (default: $GITHUB_REPOSITORY or payload repository)",
    )
    parser.add_argument(
        "--create-prs",
        action="store_true",
        help="Open a merge pull request for each resolved branch",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def run_resolver(config: AppConfig, event_path: Path | None, repo: str | None = None) -> RunResult:
    """Load the event, build the adapter and resolve the merge labels."""
    path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if not path:
        raise ResolverError("Event payload not set (--event-path or GITHUB_EVENT_PATH).")
    token = config.github_token_resolved
    if not token:
        raise ResolverError("GitHub token not set (GITHUB_TOKEN, INPUT_GITHUB_TOKEN or GITHUB_TOKEN_FILE).")

    event = load_event(Path(path))
    repository = resolve_repository(event, os.environ, override=repo or config.github.repository)
    adapter = GitHubAdapter(token=token, api_url=config.github.api_url)
    return run(event, repository, adapter, config.resolver)


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns 1 and emits an error annotation on any failure."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except Exception as e:
        return set_failed(f"Invalid config: {e}")

    resolver_logging = ResolverLogging(config.logging)
    resolver_logging.setup()
    log = resolver_logging.get_logger("main")

    if args.check:
        print("Config OK:", config.resolver.label_prefix, config.resolver.develop_branch)
        return 0

    if args.create_prs:
        config.resolver.create_pull_requests = True

    try:
        result = run_resolver(config, args.event_path, args.repo)
    except Exception as e:
        log.debug("Run failed", exc_info=True)
        return set_failed(str(e) or type(e).__name__)
    log.debug(
        "Run finished | matches=%d | unresolved=%d | created=%d",
        len(result.matches),
        len(result.unresolved),
        len(result.created),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
