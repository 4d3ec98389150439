#!/usr/bin/env python3
"""
Cosense comment counter

Reads a hub page on Cosense (Scrapbox), follows every page it links to and
counts the [username.icon] markers left on them.

Modes:
- default: commenter ranking with statistics, also saved to result.txt
- --username NAME: per-page breakdown of one user's comments
- --check-links: verify each linked page really exists (line count heuristic)

Set COSENSE_SID (environment or .env) to read private projects.

Usage:
  pip install -e .
  cosense-counter --page yasulab/README --keyword Ruby
  cosense-counter --page yasulab/README --username yasulab --first
  cosense-counter --page yasulab/README --check-links --verbose --logfile counter.log

"""

import argparse
import sys

from analyzer import run_analysis, setup_logging
from configs import RESULT_FILE, load_session_id
from errors import AnalyzerError, MissingPageFlag
from links import parse_page_spec
from models import RunContext
from page_store import make_session

USAGE_HINT = """\
Usage:
  {prog} --page PROJECT/PAGE --keyword KEYWORD

Example:
  {prog} --page yasulab/README --keyword Ruby

See --help for details."""


# ---------- CLI ----------

def build_parser():
    parser = argparse.ArgumentParser(
        prog="cosense-counter",
        description="Count [user.icon] comments across the pages linked from a Cosense hub page",
    )
    parser.add_argument("--page", metavar="PROJECT/PAGE", help="Hub page to analyze (e.g. yasulab/README)")
    parser.add_argument("--keyword", help="Only follow links whose name contains this keyword")
    parser.add_argument("--username", help="Show a per-page breakdown for this user")
    parser.add_argument("--first", action="store_true", help="Analyze only the first link")
    parser.add_argument("--check-links", action="store_true", help="Check that every linked page exists")
    parser.add_argument("--output", default=RESULT_FILE, help="Where to save the ranking report")
    parser.add_argument("--logfile", type=str, default=None, help="Optional rotating logfile path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose console logging (DEBUG)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, logfile=args.logfile)

    try:
        if not args.page:
            raise MissingPageFlag("No page specified")
        project, page_title = parse_page_spec(args.page)
        context = RunContext(
            project=project,
            keyword=args.keyword,
            username=args.username,
            first_only=args.first,
            check_links=args.check_links,
            session_id=load_session_id(),
            report_path=args.output,
        )
        session = make_session(context.session_id)
        run_analysis(session, context, page_title)
    except MissingPageFlag as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        print("", file=sys.stderr)
        print(USAGE_HINT.format(prog=parser.prog), file=sys.stderr)
        return 1
    except AnalyzerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
