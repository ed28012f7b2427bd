"""Main entry point for the artmatch CLI."""

import argparse
import json
import sys
from pathlib import Path

from artmatch import __version__
from artmatch.config.settings import Settings
from artmatch.utils.logging import configure_logging


def _score(value: str) -> int:
    try:
        score = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("--min-score must be an integer") from None
    if not (0 <= score <= 100):
        raise argparse.ArgumentTypeError("--min-score must be between 0 and 100")
    return score


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("--limit must be an integer") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("--limit must be greater than 0")
    return number


def _add_data_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "data",
        nargs="?",
        type=Path,
        default=None,
        help="Dataset file (YAML or JSON); defaults to DATA_PATH",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="artmatch",
        description="artmatch: rank artists for a curated art project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m artmatch projects data/fixtures.yaml
  python -m artmatch rank data/fixtures.yaml --project project_001 --limit 3
  python -m artmatch explain data/fixtures.yaml --project project_001 --candidate artist_001
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank all candidates for a project",
    )
    _add_data_argument(rank_parser)
    rank_parser.add_argument("--project", required=True, help="Project id")
    rank_parser.add_argument(
        "--curator",
        default=None,
        help="Curator id (defaults to the project's curator)",
    )
    rank_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Show only the top N candidates",
    )
    rank_parser.add_argument(
        "--min-score",
        type=_score,
        default=None,
        help="Drop candidates scoring below this total (0-100)",
    )
    rank_parser.add_argument(
        "--locale",
        choices=["en", "ko"],
        default=None,
        help="Explanation language (overrides MATCHING_EXPLANATION_LOCALE)",
    )
    rank_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )

    projects_parser = subparsers.add_parser(
        "projects",
        help="List projects in a dataset",
    )
    _add_data_argument(projects_parser)

    explain_parser = subparsers.add_parser(
        "explain",
        help="Show the full score breakdown for one candidate",
    )
    _add_data_argument(explain_parser)
    explain_parser.add_argument("--project", required=True, help="Project id")
    explain_parser.add_argument("--candidate", required=True, help="Candidate id")
    explain_parser.add_argument(
        "--curator",
        default=None,
        help="Curator id (defaults to the project's curator)",
    )
    explain_parser.add_argument(
        "--locale",
        choices=["en", "ko"],
        default=None,
        help="Explanation language (overrides MATCHING_EXPLANATION_LOCALE)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.command is None:
        parser.print_help()
        return 0

    from artmatch.matching.config import MatchingConfig
    from artmatch.matching.provider import FileDataProvider
    from artmatch.matching.service import MatchingService

    data_path = parsed.data or settings.data_path
    overrides = {}
    if getattr(parsed, "locale", None):
        overrides["explanation_locale"] = parsed.locale
    try:
        config = MatchingConfig(**overrides)
    except Exception as e:
        print(f"Error loading matching config: {e}", file=sys.stderr)
        return 1

    logger.debug(f"artmatch v{__version__} running '{parsed.command}' on {data_path}")

    try:
        provider = FileDataProvider(data_path, config=config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed.command == "projects":
        for project in provider.list_projects():
            title = f" {project.title}" if project.title else ""
            curator = project.curator_id or "-"
            print(f"{project.id}{title} (curator: {curator})")
        return 0

    service = MatchingService(config=config)

    if parsed.command == "rank":
        try:
            results = service.rank_project(
                provider,
                parsed.project,
                parsed.curator,
                limit=parsed.limit,
                min_score=parsed.min_score,
            )
        except LookupError as e:
            logger.error(str(e))
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if parsed.json:
            print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
            return 0

        if not results:
            print("No candidates matched.")
            return 0
        print("\n\n".join(service.format_result(r, i) for i, r in enumerate(results, 1)))
        return 0

    if parsed.command == "explain":
        try:
            project, curator = service.resolve_project(
                provider, parsed.project, parsed.curator
            )
            candidate = provider.get_candidate(parsed.candidate)
        except LookupError as e:
            logger.error(str(e))
            print(f"Error: {e}", file=sys.stderr)
            return 1

        result = service.score_candidate(
            candidate, project, curator, provider.get_audience_model()
        )
        print(service.format_result(result))
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
