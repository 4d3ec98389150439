#!/usr/bin/env python3
"""
Ranking table converter

Reads the ranking block of a saved report and rewrites it as a Cosense table
that can be pasted straight into a page.

Input (default `result.txt`):
 - the report written by cosense-counter; only the lines between the trophy
   header and the closing "=====" separator are used

Output (default `cosense.txt`):
 - table:Comment ranking
   rank<TAB>name<TAB>comments
   1<TAB>yasulab<TAB>30
   ...

Usage:
    cosense-table result.txt cosense.txt
"""

import argparse
import os
import re

from configs import RESULT_FILE, TABLE_FILE
from io_helpers import read_lines, read_text, save_text
from report import RANKING_HEADER

TABLE_TITLE = "table:Comment ranking"
TABLE_HEADER = "rank\tname\tcomments"
PREVIEW_LINES = 12

SECTION_RE = re.compile(re.escape(RANKING_HEADER) + r"(.+?)={10,}", re.DOTALL)
# Names are padded with spaces in the report, so leading and trailing spaces
# of a username cannot be recovered from the text.
ENTRY_RE = re.compile(r"^\s*(\d+)\.\s+(.+?)\s*:\s*(\d+)\s*")


def parse_result_text(text):
    """Return [(rank, name, comments), ...] or None if there is no ranking section."""
    m = SECTION_RE.search(text)
    if not m:
        return None
    rankings = []
    for line in m.group(1).splitlines():
        if not line.strip():
            continue
        em = ENTRY_RE.match(line)
        if em:
            rankings.append((int(em.group(1)), em.group(2).strip(), int(em.group(3))))
    return rankings


def to_table_lines(rankings):
    lines = [TABLE_TITLE, TABLE_HEADER]
    for rank, name, comments in rankings:
        lines.append(f"{rank}\t{name}\t{comments}")
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a saved ranking report into a Cosense table")
    parser.add_argument("input", nargs="?", default=RESULT_FILE, help="Saved report to read")
    parser.add_argument("output", nargs="?", default=TABLE_FILE, help="Where to write the table")
    args = parser.parse_args(argv)

    print("📁 Input file:", args.input)
    print("📝 Output file:", args.output)
    print()

    if not os.path.exists(args.input):
        print(f"ERROR: {args.input} not found")
        return 1

    rankings = parse_result_text(read_text(args.input))
    if rankings is None:
        print("ERROR: ranking section not found")
        return 1
    if not rankings:
        print("WARNING: no ranking entries found")
        return 1

    save_text(args.output, "\n".join(to_table_lines(rankings)))
    print(f"✅ Saved converted table to {args.output}")
    print(f"📊 Converted entries: {len(rankings)}")

    print()
    print(f"📋 Preview (first {PREVIEW_LINES} lines):")
    print("-" * 40)
    lines = read_lines(args.output)
    for line in lines[:PREVIEW_LINES]:
        print(line)
    if len(lines) > PREVIEW_LINES:
        print(f"... ({len(lines) - PREVIEW_LINES} more lines)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
