from models import Statistics
from utils import round_half_up


def calculate_statistics(outcomes, tally):
    success_pages = sum(1 for o in outcomes if o.ok)
    failed_pages = sum(1 for o in outcomes if not o.ok)
    total_pages = success_pages + failed_pages
    if total_pages:
        success_rate = round_half_up(success_pages / total_pages * 100, 1)
    else:
        success_rate = 0
    return Statistics(
        total_pages=total_pages,
        success_pages=success_pages,
        failed_pages=failed_pages,
        total_comments=tally.total(),
        unique_commenters=len(tally),
        success_rate=success_rate,
    )


def failed_outcomes(outcomes):
    return [o for o in outcomes if not o.ok]
