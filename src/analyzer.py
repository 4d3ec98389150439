import logging
from logging.handlers import RotatingFileHandler

from comments import rank_commenters, tally_comments
from errors import HubPageUnavailable
from link_checker import check_links_validity
from links import extract_links, filter_links
from models import PageFound
from orchestrator import fetch_all_pages
from page_store import describe_failure, fetch_page
from report import render_ranking_report, write_report
from stats import calculate_statistics
from user_detail import render_user_breakdown

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_run_handlers = []


def setup_logging(verbose=False, logfile=None):
    root_logger = logging.getLogger()
    for h in _run_handlers:
        root_logger.removeHandler(h)
    _run_handlers.clear()

    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)
    # console handler (stderr, so reports on stdout stay clean)
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    root_logger.addHandler(ch)
    _run_handlers.append(ch)
    # file handler
    if logfile:
        fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(formatter)
        fh.setLevel(logging.DEBUG)
        root_logger.addHandler(fh)
        _run_handlers.append(fh)


def load_hub_page(session, context, page_title):
    if context.authenticated:
        logging.info("Accessing '%s' in authenticated mode", context.project)
    else:
        logging.info("Accessing '%s' in public mode", context.project)
    result = fetch_page(session, context.project, page_title)
    if not isinstance(result, PageFound):
        raise HubPageUnavailable(describe_failure(result, f"{context.project}/{page_title}"))
    return result.page


def run_ranking(session, links, context, emit=print):
    outcomes = fetch_all_pages(session, links, context)
    tally = tally_comments(outcomes)
    ranking = rank_commenters(tally)
    stats = calculate_statistics(outcomes, tally)

    for line in render_ranking_report(ranking, outcomes, stats):
        emit(line)
    write_report(context.report_path, render_ranking_report(ranking, outcomes, stats, for_file=True))
    emit("")
    emit(f"💾 Saved results to {context.report_path}")
    logging.info("Wrote report to %s", context.report_path)
    return ranking, stats


def run_user_breakdown(session, links, context, emit=print):
    outcomes = fetch_all_pages(session, links, context)
    for line in render_user_breakdown(context.username, outcomes):
        emit(line)
    return outcomes


def run_analysis(session, context, page_title, emit=print):
    """Analyze the hub page ``page_title`` in ``context.project``.

    Returns the mode that ran ("check-links", "user", "ranking") or None when
    the hub page had no links.
    """
    hub = load_hub_page(session, context, page_title)
    links = extract_links(hub)
    if not links:
        logging.warning("This page contains no links")
        return None

    links = filter_links(links, context.keyword)
    if context.keyword:
        logging.info("Keyword %r matched %d links", context.keyword, len(links))

    if context.check_links:
        check_links_validity(session, links, context, emit=emit)
        return "check-links"

    logging.info("Counting comments across %d linked pages", len(links))
    if context.username:
        run_user_breakdown(session, links, context, emit=emit)
        return "user"
    run_ranking(session, links, context, emit=emit)
    return "ranking"
