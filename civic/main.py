"""Civic issue tracker CLI.

Plays the part of the view layer: every invocation is one "page load"
(boot consumes one notification), then a single command reads or mutates
the stored issues. Usage: civic [--config PATH] <command> [options].
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from civic.app import CivicApp
from civic.config import load_config
from civic.logging import CivicLogging
from civic.models.issue import ALL, ISSUE_CATEGORIES, STATUS_ORDER, Issue, IssueDraft, IssueFilters, status_progress
from civic.services.issue_repository import InvalidStatusError
from civic.services.reports import submit_report
from civic.services.session import AuthenticationError
from civic.services.theme import THEMES
from civic.services.validation import SubmissionError

LOG = logging.getLogger("civic.main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse global options and one subcommand."""
    parser = argparse.ArgumentParser(
        prog="civic",
        description="Civic issue tracker - report, upvote and triage local issues",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log at DEBUG regardless of config",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("boot", help="Seed demo data if empty and show one pending notification")

    p_list = sub.add_parser("list", help="List issues (filtered and sorted)")
    p_list.add_argument("--q", default="", help="Case-insensitive text search")
    p_list.add_argument("--category", default=ALL, help=f"{ALL} or one of: {', '.join(ISSUE_CATEGORIES)}")
    p_list.add_argument("--status", default=ALL, help=f"{ALL} or one of: {', '.join(STATUS_ORDER)}")

    p_report = sub.add_parser("report", help="Submit a new issue report")
    p_report.add_argument("--name", default="")
    p_report.add_argument("--email", default="")
    p_report.add_argument("--location", default="")
    p_report.add_argument("--category", default="", help=", ".join(ISSUE_CATEGORIES))
    p_report.add_argument("--description", default="")
    p_report.add_argument("--title", default="", help="Defaults to '<category> Issue'")
    p_report.add_argument("--image", type=Path, default=None, help="Image file to attach")

    p_upvote = sub.add_parser("upvote", help="Upvote an issue")
    p_upvote.add_argument("issue_id")

    p_login = sub.add_parser("login", help="Open the admin session")
    p_login.add_argument("--username", required=True)
    p_login.add_argument("--password", required=True)

    sub.add_parser("logout", help="Close the admin session")

    p_status = sub.add_parser("status", help="Change issue status (admin)")
    p_status.add_argument("issue_id")
    p_status.add_argument("status", choices=list(STATUS_ORDER))

    sub.add_parser("stats", help="Issue counts by category and status (admin)")

    p_badge = sub.add_parser("badge", help="Show reporter badge for an email")
    p_badge.add_argument("email")

    p_theme = sub.add_parser("theme", help="Show, set or toggle the theme")
    group = p_theme.add_mutually_exclusive_group()
    group.add_argument("--toggle", action="store_true")
    group.add_argument("--set", dest="set_theme", choices=list(THEMES))

    p_map = sub.add_parser("map", help="Print map embed URL for a location")
    p_map.add_argument("location", nargs="?", default="")

    return parser.parse_args(argv)


def format_issue(app: CivicApp, issue: Issue) -> str:
    """One dashboard card as text."""
    badge = app.reputation.badge_for(issue.email).label
    lines = [
        f"[{issue.status}] {issue.title}  ({issue.id})",
        f"  {issue.category} • {issue.location}",
        f"  {issue.description}",
        f"  progress {status_progress(issue.status)}%  upvotes {issue.upvotes}" + (f"  🏅 {badge}" if badge else ""),
    ]
    if issue.image_data_url:
        lines.append("  [image attached]")
    return "\n".join(lines)


def _require_admin(app: CivicApp) -> bool:
    if app.session.is_authenticated():
        return True
    print("Admin login required (civic login --username ... --password ...)", file=sys.stderr)
    return False


def run_command(app: CivicApp, args: argparse.Namespace) -> int:
    """Dispatch parsed subcommand. Returns process exit code."""
    command = args.command or "list"

    if command == "boot":
        return 0

    if command == "list":
        q = getattr(args, "q", "")
        category = getattr(args, "category", ALL)
        status = getattr(args, "status", ALL)
        issues = app.issues.query(IssueFilters(text=q, category=category, status=status))
        for issue in issues:
            print(format_issue(app, issue))
        if not issues:
            print("No issues found.")
        return 0

    if command == "report":
        draft = IssueDraft(
            name=args.name,
            email=args.email,
            location=args.location,
            category=args.category,
            description=args.description,
            title=args.title,
        )
        try:
            issue = asyncio.run(submit_report(app.issues, draft, args.image))
        except SubmissionError as e:
            print(str(e), file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Cannot read image: {e}", file=sys.stderr)
            return 1
        print("Issue submitted successfully. Thank you for your report!")
        print(f"id: {issue.id}")
        print(f"map: {app.map_url(issue.location)}")
        return 0

    if command == "upvote":
        issue = app.issues.upvote(args.issue_id)
        if issue:
            print(f"{issue.title}: {issue.upvotes} upvotes")
        return 0

    if command == "login":
        try:
            app.session.login(args.username, args.password)
        except AuthenticationError as e:
            print(str(e), file=sys.stderr)
            return 1
        print("Logged in.")
        return 0

    if command == "logout":
        app.session.logout()
        print("Logged out.")
        return 0

    if command == "status":
        if not _require_admin(app):
            return 1
        try:
            issue = app.issues.set_status(args.issue_id, args.status)
        except InvalidStatusError as e:
            print(str(e), file=sys.stderr)
            return 1
        if issue:
            print(f'Status for "{issue.title}" changed to {issue.status}')
        return 0

    if command == "stats":
        if not _require_admin(app):
            return 1
        print("By category:")
        for category, count in app.issues.count_by_category().items():
            print(f"  {category}: {count}")
        print("By status:")
        for status, count in app.issues.count_by_status().items():
            print(f"  {status}: {count}")
        return 0

    if command == "badge":
        tier = app.reputation.badge_for(args.email)
        print(tier.label or "No badge yet")
        return 0

    if command == "theme":
        if args.toggle:
            print(app.theme.toggle())
        elif args.set_theme:
            app.theme.set(args.set_theme)
            print(args.set_theme)
        else:
            print(app.theme.current())
        return 0

    if command == "map":
        print(app.map_url(args.location))
        return 0

    print(f"Unknown command: {command}", file=sys.stderr)
    return 2


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, boot once, run one command."""
    args = parse_args(argv)
    config = load_config(args.config)
    log_setup = CivicLogging(config.logging, "DEBUG" if args.verbose else None)
    log_setup.setup()

    if args.check:
        print("Config OK:", config.storage.backend, config.storage.path, f"(log level {log_setup.level_name})")
        return 0

    try:
        app = CivicApp(config)
    except ValueError as e:
        LOG.error("Invalid configuration: %s", e)
        return 1

    note = app.boot()
    if note:
        print(f"🔔 {note.text}")
    return run_command(app, args)


if __name__ == "__main__":
    sys.exit(main())
