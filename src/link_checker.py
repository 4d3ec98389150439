"""
Link validity checking.

A Cosense page that does not exist still answers 200 with a single title line,
so a wrong link can only be told apart by how many lines come back.
"""
import logging
from dataclasses import dataclass
from typing import List

from configs import SEPARATOR_LINE, SUB_SEPARATOR
from limiter import RequestPacer
from links import normalize_page_name
from models import Link, PageFound, PageHttpError, PageNetworkError, PageNotFound, PageUnauthorized
from page_store import build_api_url, fetch_page
from utils import round_half_up

OK = "OK"
EMPTY = "EMPTY"
SUSPICIOUS = "SUSPICIOUS"
ERROR = "ERROR"

MIN_VALID_LINES = 100

STATUS_LABELS = {
    OK: "✅ OK",
    EMPTY: "⚠️  EMPTY",
    SUSPICIOUS: "⚠️  SUSPICIOUS",
    ERROR: "❌ ERROR",
}


@dataclass(frozen=True)
class LinkCheck:
    link: Link
    page_name: str
    url: str
    status: str
    detail: str

    @property
    def valid(self):
        return self.status == OK


@dataclass(frozen=True)
class LinkCheckSummary:
    checks: List[LinkCheck]
    valid_count: int
    invalid_count: int

    @property
    def success_rate(self):
        total = self.valid_count + self.invalid_count
        if not total:
            return 0
        return round_half_up(self.valid_count / total * 100, 1)


def classify_line_count(line_count):
    if line_count >= MIN_VALID_LINES:
        return OK, f"({line_count} lines)"
    if line_count == 1:
        return EMPTY, "(title only - wrong URL?)"
    return SUSPICIOUS, f"({line_count} lines - possibly wrong URL)"


def _error_detail(result):
    if isinstance(result, PageNetworkError):
        return "(network)"
    if isinstance(result, PageNotFound):
        return "(404)"
    if isinstance(result, PageUnauthorized):
        return "(401)"
    if isinstance(result, PageHttpError):
        return f"({result.status})"
    return "(unknown)"


def check_link(session, link, context):
    project = link.target_project(context.project)
    page_name = normalize_page_name(link.name)
    url = build_api_url(project, page_name)
    result = fetch_page(session, project, page_name)
    if isinstance(result, PageFound):
        status, detail = classify_line_count(len(result.page.lines))
    else:
        status, detail = ERROR, _error_detail(result)
    return LinkCheck(link=link, page_name=page_name, url=url, status=status, detail=detail)


def check_links_validity(session, links, context, pacer=None, emit=print):
    links = list(links)
    if pacer is None:
        pacer = RequestPacer(context.check_delay)

    emit(SEPARATOR_LINE)
    emit("🔍 Link validity check")
    emit(SEPARATOR_LINE)
    emit(f"Pages to check: {len(links)}")
    emit("")

    checks = []
    valid_count = 0
    invalid_count = 0
    for idx, link in enumerate(links, start=1):
        pacer.wait_for_slot()
        check = check_link(session, link, context)
        pacer.record_response(check.status != ERROR)
        checks.append(check)
        if check.valid:
            valid_count += 1
        else:
            invalid_count += 1
        logging.debug("Checked %s -> %s", check.url, check.status)

        emit(f"{idx:>2}. Page: {check.page_name}")
        emit(f"\tURL: {check.url}")
        emit(f"\t→ {STATUS_LABELS[check.status]} {check.detail}")
        emit("")

    summary = LinkCheckSummary(checks=checks, valid_count=valid_count, invalid_count=invalid_count)
    emit("")
    emit(SUB_SEPARATOR)
    emit("📊 Summary:")
    emit(f"  ✅ Valid: {valid_count} pages")
    emit(f"  ❌ Invalid: {invalid_count} pages")
    emit(f"  Success rate: {summary.success_rate}%")
    emit(SEPARATOR_LINE)
    return summary
