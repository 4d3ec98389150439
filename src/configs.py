import os

from dotenv import load_dotenv

COSENSE_API = "https://scrapbox.io/api"
USER_AGENT = "cosense-comment-counter/0.1.0"
REQUEST_TIMEOUT = 20
SID_ENV_VAR = "COSENSE_SID"

FETCH_DELAY = 0.2  # seconds between page fetches while counting comments
CHECK_DELAY = 0.1  # seconds between requests while checking links

RESULT_FILE = "result.txt"
TABLE_FILE = "cosense.txt"

SEPARATOR_WIDTH = 60
SEPARATOR_LINE = "=" * SEPARATOR_WIDTH
SUB_SEPARATOR = "-" * SEPARATOR_WIDTH


def load_session_id():
    """Return the connect.sid cookie value from the environment (or .env), or None."""
    load_dotenv(override=False)
    sid = os.environ.get(SID_ENV_VAR, "").strip()
    return sid or None
