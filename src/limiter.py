import time

from configs import FETCH_DELAY


# ---------- Request pacer (fixed delay between sequential requests) ----------

class RequestPacer:
    def __init__(self, delay: float = FETCH_DELAY):
        self.delay = float(delay)
        self.request_count = 0
        self.error_count = 0

    def wait_for_slot(self):
        """Sleep the full delay before every request but the first."""
        if self.request_count and self.delay > 0:
            time.sleep(self.delay)

    def record_response(self, ok: bool):
        self.request_count += 1
        if not ok:
            self.error_count += 1

    def error_rate(self) -> float:
        if self.request_count == 0:
            return 0.0
        return float(self.error_count) / float(self.request_count)

    def get_health(self) -> dict:
        """Return a snapshot dict suitable for JSON serialization."""
        return {
            "delay": self.delay,
            "requests": self.request_count,
            "errors": self.error_count,
            "error_rate": self.error_rate(),
        }
