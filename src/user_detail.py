import re
from dataclasses import dataclass

from configs import SEPARATOR_LINE, SUB_SEPARATOR
from utils import truncate

TITLE_LIMIT = 40
PREVIEW_LIMIT = 60


@dataclass(frozen=True)
class UserLine:
    line_num: int
    text: str
    count: int


def user_marker_pattern(username):
    return re.compile(re.escape(f"[{username}.icon]"))


def find_user_lines(page, username):
    pattern = user_marker_pattern(username)
    found = []
    for idx, line in enumerate(page.lines, start=1):
        count = len(pattern.findall(line.text))
        if count:
            found.append(UserLine(line_num=idx, text=line.text, count=count))
    return found


def shorten_title(title):
    return truncate(title.replace("+", " "), TITLE_LIMIT, TITLE_LIMIT - 2)


def preview_text(text):
    return truncate(text, PREVIEW_LIMIT, PREVIEW_LIMIT - 2)


def render_user_breakdown(username, outcomes):
    lines = [SEPARATOR_LINE, f"🔍 Per-user detail: {username}", SEPARATOR_LINE]
    total = 0
    # numbering follows the position in the outcome list, failures included
    for idx, outcome in enumerate(outcomes, start=1):
        if not outcome.ok:
            continue
        user_lines = find_user_lines(outcome.page, username)
        page_total = sum(l.count for l in user_lines)
        total += page_total

        lines.append(f"{idx:>2}. {shorten_title(outcome.page.title)}")
        lines.append(f"\t{username}: {page_total}")
        if user_lines:
            lines.append("\tDetails:")
            for info in user_lines:
                lines.append(f"\t\tL{info.line_num}: {preview_text(info.text)}")
                if info.count > 1:
                    lines.append(f"\t\t\t({info.count} occurrences)")
        lines.append("")

    lines.append(SUB_SEPARATOR)
    lines.append(f"📊 Total: comments by {username} = {total}")
    lines.append(SEPARATOR_LINE)
    return lines
