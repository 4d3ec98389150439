from dataclasses import dataclass, field
from typing import Optional, Tuple

from configs import CHECK_DELAY, FETCH_DELAY, RESULT_FILE

INTERNAL = "internal"
CROSS_PROJECT = "cross_project"


@dataclass(frozen=True)
class Link:
    name: str
    kind: str = INTERNAL
    project: Optional[str] = None

    def target_project(self, default):
        if self.kind == CROSS_PROJECT and self.project:
            return self.project
        return default


@dataclass(frozen=True)
class LineRecord:
    text: str


@dataclass(frozen=True)
class PageData:
    title: str
    lines: Tuple[LineRecord, ...] = ()
    # None when the payload had no "links" field at all
    links: Optional[Tuple[str, ...]] = None


# ---------- Page store results ----------

@dataclass(frozen=True)
class PageFound:
    page: PageData


@dataclass(frozen=True)
class PageNotFound:
    project: str
    title: str


@dataclass(frozen=True)
class PageUnauthorized:
    authenticated: bool


@dataclass(frozen=True)
class PageHttpError:
    status: int
    reason: str = ""


@dataclass(frozen=True)
class PageNetworkError:
    reason: str


# ---------- Per-link fetch outcomes ----------

@dataclass(frozen=True)
class FetchSuccess:
    link: Link
    page: PageData
    commenters: Tuple[str, ...] = ()
    ok = True


@dataclass(frozen=True)
class FetchFailure:
    link: Link
    reason: str = ""
    ok = False


@dataclass(frozen=True)
class RankingEntry:
    rank: int
    username: str
    count: int


@dataclass(frozen=True)
class Statistics:
    total_pages: int
    success_pages: int
    failed_pages: int
    total_comments: int
    unique_commenters: int
    success_rate: float


@dataclass(frozen=True)
class RunContext:
    """Everything a run needs, passed explicitly to each component."""
    project: str
    keyword: Optional[str] = None
    username: Optional[str] = None
    first_only: bool = False
    check_links: bool = False
    session_id: Optional[str] = field(default=None, repr=False)
    fetch_delay: float = FETCH_DELAY
    check_delay: float = CHECK_DELAY
    report_path: str = RESULT_FILE

    @property
    def authenticated(self):
        return self.session_id is not None
