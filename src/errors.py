class AnalyzerError(Exception):
    """Fatal problem detected before any per-link work starts."""


class MissingPageFlag(AnalyzerError):
    pass


class InvalidPageSpecFormat(AnalyzerError):
    def __init__(self, value):
        super().__init__(f"Invalid page format: {value!r} (expected PROJECT/PAGE, e.g. yasulab/README)")
        self.value = value


class MissingLinksField(AnalyzerError):
    def __init__(self, title):
        super().__init__(
            f"API response for {title!r} has no links field; "
            "this page may not support link aggregation"
        )
        self.title = title


class HubPageUnavailable(AnalyzerError):
    pass
