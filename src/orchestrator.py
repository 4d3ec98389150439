import logging

from comments import extract_commenters
from limiter import RequestPacer
from links import normalize_page_name
from models import FetchFailure, FetchSuccess, PageFound
from page_store import fetch_page


def select_targets(links, first_only=False):
    links = list(links)
    if first_only:
        return links[:1]
    return links


def fetch_link(session, link, context):
    project = link.target_project(context.project)
    return fetch_page(session, project, normalize_page_name(link.name))


def _failure_reason(result):
    for attr in ("status", "reason"):
        value = getattr(result, attr, None)
        if value:
            return str(value)
    return type(result).__name__


def fetch_all_pages(session, links, context, pacer=None):
    """Fetch every target link in order, one request at a time.

    Failures become FetchFailure entries; nothing here raises for a bad page
    and the loop always runs to the end.
    """
    targets = select_targets(links, context.first_only)
    if pacer is None:
        pacer = RequestPacer(context.fetch_delay)

    outcomes = []
    total = len(targets)
    for idx, link in enumerate(targets, start=1):
        pacer.wait_for_slot()
        logging.info("Fetching page %d/%d: %s", idx, total, link.name)
        result = fetch_link(session, link, context)
        if isinstance(result, PageFound):
            page = result.page
            outcomes.append(FetchSuccess(link=link, page=page, commenters=extract_commenters(page)))
            pacer.record_response(True)
        else:
            logging.debug("Fetch failed for %s: %r", link.name, result)
            outcomes.append(FetchFailure(link=link, reason=_failure_reason(result)))
            pacer.record_response(False)

    logging.info("Fetched %d/%d pages", sum(1 for o in outcomes if o.ok), total)
    logging.debug("Pacer health: %s", pacer.get_health())
    return outcomes
