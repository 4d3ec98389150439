import logging
from urllib.parse import quote_plus

import requests

from configs import COSENSE_API, REQUEST_TIMEOUT, USER_AGENT
from models import (
    LineRecord,
    PageData,
    PageFound,
    PageHttpError,
    PageNetworkError,
    PageNotFound,
    PageUnauthorized,
)


def build_api_url(project, page_name):
    return f"{COSENSE_API}/pages/{project}/{quote_plus(page_name, safe='')}"


def make_session(session_id=None):
    session = requests.Session()
    session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})
    if session_id:
        session.headers["Cookie"] = f"connect.sid={session_id}"
    return session


def _parse_lines(raw_lines):
    lines = []
    for item in raw_lines or []:
        if isinstance(item, dict):
            lines.append(LineRecord(text=str(item.get("text") or "")))
        else:
            lines.append(LineRecord(text=str(item)))
    return tuple(lines)


def parse_page_payload(payload, fallback_title=""):
    """Convert a decoded /api/pages response into a PageData, or None if it is not a page object."""
    if not isinstance(payload, dict) or not isinstance(payload.get("lines"), list):
        return None
    raw_links = payload.get("links")
    links = None
    if isinstance(raw_links, list):
        links = tuple(str(l) for l in raw_links)
    return PageData(
        title=str(payload.get("title") or fallback_title),
        lines=_parse_lines(payload.get("lines")),
        links=links,
    )


def fetch_page(session, project, page_title, timeout=REQUEST_TIMEOUT):
    url = build_api_url(project, page_title)
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        logging.debug("Network error fetching %s: %s", url, e)
        return PageNetworkError(reason=str(e))

    status = resp.status_code
    if status == 200:
        try:
            payload = resp.json()
        except ValueError:
            logging.debug("Malformed JSON from %s", url)
            return PageHttpError(status=200, reason="malformed payload")
        page = parse_page_payload(payload, fallback_title=page_title)
        if page is None:
            logging.debug("Unexpected payload shape from %s", url)
            return PageHttpError(status=200, reason="malformed payload")
        return PageFound(page=page)
    if status == 401:
        return PageUnauthorized(authenticated="Cookie" in getattr(session, "headers", {}))
    if status == 404:
        return PageNotFound(project=project, title=page_title)
    return PageHttpError(status=status, reason=getattr(resp, "reason", "") or "")


def describe_failure(result, page_info):
    """Human-readable explanation for a failed hub page fetch."""
    if isinstance(result, PageUnauthorized):
        if result.authenticated:
            return "Authentication error: the session cookie is invalid or expired (update COSENSE_SID)"
        return "Access denied: this page is private (set COSENSE_SID to authenticate)"
    if isinstance(result, PageNotFound):
        return f"Page not found: {page_info}"
    if isinstance(result, PageNetworkError):
        return f"Network error while fetching {page_info}: {result.reason}"
    if isinstance(result, PageHttpError):
        return f"Error: {result.status} {result.reason}".rstrip()
    return f"Unexpected result for {page_info}"
