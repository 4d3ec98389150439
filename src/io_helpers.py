import logging


def save_text(path, text):
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text or "")
    except OSError:
        logging.exception("Failed to save text file: %s", path)
        raise


def read_text(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
