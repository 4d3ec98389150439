from errors import InvalidPageSpecFormat, MissingLinksField
from models import INTERNAL, Link

FULL_WIDTH_BRACKETS = {"（": "(", "）": ")"}


def parse_page_spec(locator):
    """Split ``PROJECT/PAGE`` on the first slash."""
    if not locator or "/" not in locator:
        raise InvalidPageSpecFormat(locator)
    project, page = locator.split("/", 1)
    if not project or not page:
        raise InvalidPageSpecFormat(locator)
    return project, page


def extract_links(page):
    if page.links is None:
        raise MissingLinksField(page.title)
    return [Link(name=name, kind=INTERNAL) for name in page.links]


def normalize_brackets(text):
    for full, half in FULL_WIDTH_BRACKETS.items():
        text = text.replace(full, half)
    return text


def normalize_page_name(name):
    # Cosense page URLs use underscores for spaces
    return name.replace(" ", "_")


def filter_links(links, keyword):
    if not keyword:
        return list(links)
    needle = normalize_brackets(keyword).lower()
    selected = []
    for link in links:
        if needle in normalize_brackets(link.name).lower():
            selected.append(link)
        elif link.project and needle in normalize_brackets(link.project).lower():
            selected.append(link)
    return selected
