"""
Ranking report rendering.

The console and file variants share every line except the failed-page count in
the statistics block. The file variant is what ``table_converter`` parses back,
so the trophy header and the closing ``=`` separator must stay as they are.
"""
from configs import SEPARATOR_LINE, SUB_SEPARATOR
from io_helpers import save_text
from stats import failed_outcomes
from utils import pad_to_width, round_half_up

RANKING_HEADER = "🏆 Commenter ranking:"
NAME_WIDTH = 20
BAR_WIDTH = 30
BAR_CHAR = "█"
MAX_FAILED_LISTED = 5


def bar_graph(value, max_value, width=BAR_WIDTH):
    if max_value <= 0:
        return ""
    return BAR_CHAR * round_half_up(value / max_value * width)


def format_ranking_line(rank, username, count, max_count):
    bar = bar_graph(count, max_count)
    return f"{rank:>2}. {pad_to_width(username, NAME_WIDTH)}: {count:>3} {bar}"


def _stats_lines(stats, for_file):
    lines = [
        f"📄 Pages analyzed: {stats.success_pages}/{stats.total_pages} ({stats.success_rate}% success)",
        f"💬 Total comments: {stats.total_comments}",
        f"👥 Commenters: {stats.unique_commenters}",
    ]
    if not for_file and stats.failed_pages > 0:
        lines.append(f"⚠️ Failed pages: {stats.failed_pages}")
    return lines


def _ranking_lines(ranking):
    if not ranking:
        return ["No comments found"]
    max_count = ranking[0].count
    lines = [RANKING_HEADER, ""]
    for entry in ranking:
        lines.append(format_ranking_line(entry.rank, entry.username, entry.count, max_count))
    return lines


def _failed_lines(outcomes):
    failed = failed_outcomes(outcomes)
    if not failed:
        return []
    lines = [SUB_SEPARATOR, "📝 Pages that could not be fetched:"]
    for outcome in failed[:MAX_FAILED_LISTED]:
        lines.append(f"\t- {outcome.link.name}")
    if len(failed) > MAX_FAILED_LISTED:
        lines.append(f"\t... and {len(failed) - MAX_FAILED_LISTED} more pages")
    return lines


def render_ranking_report(ranking, outcomes, stats, for_file=False):
    lines = [SEPARATOR_LINE, "📊 Comment count results", SEPARATOR_LINE]
    lines.extend(_stats_lines(stats, for_file))
    lines.append(SUB_SEPARATOR)
    lines.extend(_ranking_lines(ranking))
    lines.extend(_failed_lines(outcomes))
    lines.append(SEPARATOR_LINE)
    return lines


def write_report(path, lines):
    """Overwrite ``path`` with the report lines."""
    save_text(path, "\n".join(lines) + "\n")
