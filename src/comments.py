# Comment markers look like [username.icon]; one marker is one comment.
import re

from models import RankingEntry

ICON_PATTERN = re.compile(r"\[([^\[\]]+)\.icon\]")


def extract_commenters(page):
    commenters = []
    for line in page.lines:
        commenters.extend(ICON_PATTERN.findall(line.text))
    return tuple(commenters)


class CommentTally:
    """Per-user comment counts that remember the order users were first seen."""

    def __init__(self):
        self._counts = {}
        self._first_seen = {}

    def add(self, username):
        if username not in self._first_seen:
            self._first_seen[username] = len(self._first_seen)
            self._counts[username] = 0
        self._counts[username] += 1

    def update(self, usernames):
        for name in usernames:
            self.add(name)

    def discovery_index(self, username):
        return self._first_seen[username]

    def total(self):
        return sum(self._counts.values())

    def items(self):
        return self._counts.items()

    def __len__(self):
        return len(self._counts)

    def as_dict(self):
        return dict(self._counts)


def tally_comments(outcomes):
    tally = CommentTally()
    for outcome in outcomes:
        if not outcome.ok:
            continue
        tally.update(outcome.commenters)
    return tally


def rank_commenters(tally):
    # ties keep the order in which users were first observed
    ordered = sorted(tally.items(), key=lambda kv: (-kv[1], tally.discovery_index(kv[0])))
    return [RankingEntry(rank=i, username=name, count=count) for i, (name, count) in enumerate(ordered, start=1)]
