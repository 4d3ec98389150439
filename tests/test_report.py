# tests/test_report.py
# Ranking report rendering, persistence and conversion back to a table

from comments import CommentTally, rank_commenters, tally_comments
from configs import SEPARATOR_LINE
from models import FetchFailure, FetchSuccess, Link, PageData
from report import RANKING_HEADER, bar_graph, format_ranking_line, render_ranking_report, write_report
from stats import calculate_statistics
from table_converter import parse_result_text
from utils import display_width, pad_to_width


def build(outcomes):
    tally = tally_comments(outcomes)
    return rank_commenters(tally), calculate_statistics(outcomes, tally)


def sample_outcomes():
    return [
        FetchSuccess(Link("A"), PageData("A"), ("x", "x", "y")),
        FetchFailure(Link("B")),
        FetchSuccess(Link("C"), PageData("C"), ("y",)),
    ]


def test_display_width_counts_non_ascii_as_two():
    assert display_width("abc") == 3
    assert display_width("山田") == 4
    assert display_width("a山") == 3
    assert display_width(pad_to_width("山田taro", 20)) == 20
    assert pad_to_width("x" * 25, 20) == "x" * 25


def test_bar_graph():
    assert bar_graph(10, 10) == "█" * 30
    assert bar_graph(1, 4) == "█" * 8  # 7.5 rounds up
    assert bar_graph(0, 10) == ""
    assert bar_graph(3, 0) == ""


def test_format_ranking_line():
    line = format_ranking_line(1, "alice", 5, 10)
    assert line == " 1. alice               :   5 " + "█" * 15
    wide = format_ranking_line(12, "山田", 10, 10)
    assert wide.startswith("12. 山田" + " " * 16 + ":  10 ")


def test_render_console_report_lists_stats_ranking_and_failures():
    ranking, stats = build(sample_outcomes())
    lines = render_ranking_report(ranking, sample_outcomes(), stats)
    text = "\n".join(lines)
    assert lines[0] == SEPARATOR_LINE and lines[-1] == SEPARATOR_LINE
    assert "2/3 (66.7% success)" in text
    assert "Total comments: 4" in text
    assert "Commenters: 2" in text
    assert "Failed pages: 1" in text
    assert RANKING_HEADER in lines
    assert " 1. x" in text and " 2. y" in text
    assert "\t- B" in lines


def test_file_variant_omits_failed_count_line():
    ranking, stats = build(sample_outcomes())
    lines = render_ranking_report(ranking, sample_outcomes(), stats, for_file=True)
    assert not any("Failed pages:" in l for l in lines)
    assert "\t- B" in lines


def test_empty_tally_renders_no_comments_message():
    outcomes = [FetchSuccess(Link("A"), PageData("A"), ())]
    stats = calculate_statistics(outcomes, CommentTally())
    lines = render_ranking_report([], outcomes, stats)
    assert "No comments found" in lines
    assert RANKING_HEADER not in lines


def test_failed_pages_listing_is_capped_at_five():
    outcomes = [FetchFailure(Link(f"page{i}")) for i in range(8)]
    ranking, stats = build(outcomes)
    lines = render_ranking_report(ranking, outcomes, stats)
    listed = [l for l in lines if l.startswith("\t- ")]
    assert listed == [f"\t- page{i}" for i in range(5)]
    assert "\t... and 3 more pages" in lines


def test_write_report_overwrites(tmp_path):
    path = tmp_path / "result.txt"
    path.write_text("old content that should disappear\n" * 10, encoding="utf-8")
    write_report(str(path), ["line one", "line two"])
    assert path.read_text(encoding="utf-8") == "line one\nline two\n"


def test_rendered_ranking_parses_back_to_same_entries():
    tally = CommentTally()
    tally.update(["山田太郎"] * 3 + ["bob"] * 12 + ["carol_99"] * 3 + ["d"])
    ranking = rank_commenters(tally)
    outcomes = [FetchSuccess(Link("A"), PageData("A"), ()), FetchFailure(Link("B"))]
    stats = calculate_statistics(outcomes, tally)
    text = "\n".join(render_ranking_report(ranking, outcomes, stats, for_file=True)) + "\n"
    assert parse_result_text(text) == [(e.rank, e.username, e.count) for e in ranking]
