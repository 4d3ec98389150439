# -----------------------------
# File: tests/test_link_checker.py
# -----------------------------
import pytest

from conftest import DummyResp, page_payload
from link_checker import EMPTY, ERROR, OK, SUSPICIOUS, check_links_validity, classify_line_count
from models import Link, RunContext


@pytest.mark.parametrize("count,status", [(150, OK), (100, OK), (1, EMPTY), (50, SUSPICIOUS), (99, SUSPICIOUS), (0, SUSPICIOUS)])
def test_classify_line_count(count, status):
    assert classify_line_count(count)[0] == status


def test_check_links_validity_classifies_each_link(api, no_sleep, network_error):
    session = api({
        ("p", "Good_page"): DummyResp(200, page_payload("Good page", ["l"] * 150)),
        ("p", "Empty"): DummyResp(200, page_payload("Empty", ["Empty"])),
        ("p", "Short"): DummyResp(200, page_payload("Short", ["l"] * 50)),
        ("p", "Down"): network_error,
    })
    links = [Link("Good page"), Link("Empty"), Link("Short"), Link("Missing"), Link("Down")]
    out = []
    summary = check_links_validity(session, links, RunContext(project="p", first_only=True), emit=out.append)

    assert [c.status for c in summary.checks] == [OK, EMPTY, SUSPICIOUS, ERROR, ERROR]
    assert summary.checks[3].detail == "(404)"
    assert summary.checks[4].detail == "(network)"
    assert summary.valid_count == 1
    assert summary.invalid_count == 4
    assert summary.success_rate == 20.0
    # --first does not restrict link checking
    assert len(session.calls) == 5
    assert no_sleep == [0.1] * 4

    assert " 1. Page: Good_page" in out
    assert "\tURL: https://scrapbox.io/api/pages/p/Good_page" in out
    assert "\t→ ✅ OK (150 lines)" in out
    assert "\t→ ⚠️  EMPTY (title only - wrong URL?)" in out
    assert "  Success rate: 20.0%" in out


def test_check_links_validity_with_no_links(api, no_sleep):
    out = []
    summary = check_links_validity(api({}), [], RunContext(project="p"), emit=out.append)
    assert summary.checks == []
    assert summary.success_rate == 0
    assert "Pages to check: 0" in out


def test_check_links_validity_reports_non_page_payload_as_error(api, no_sleep):
    session = api({("p", "Odd"): DummyResp(200, {"message": "not a page"})})
    out = []
    summary = check_links_validity(session, [Link("Odd")], RunContext(project="p"), emit=out.append)
    check = summary.checks[0]
    assert check.status == ERROR
    assert check.detail == "(200)"
    assert summary.invalid_count == 1
