"""Domain exceptions shared by the extractor, the stores and the API layer."""


class ExtractionFailed(Exception):
    """Neither structured data nor heuristic sections produced a usable recipe."""

    def __init__(self, source_url: str = "", message: str = "Could not parse this page"):
        super().__init__(message)
        self.source_url = source_url
        self.message = message


class MalformedStructuredData(ValueError):
    """A single JSON-LD block could not be decoded; the block is skipped."""


class PageFetchError(Exception):
    """The page could not be downloaded (bad URL, unreachable host, timeout, HTTP error)."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url
        self.message = message


class DuplicateRecipe(Exception):
    """A recipe with the same source URL is already saved."""


class DuplicatePlan(Exception):
    """A favourite plan with the same set of recipes is already saved."""


__all__ = ['ExtractionFailed', 'MalformedStructuredData', 'PageFetchError', 'DuplicateRecipe', 'DuplicatePlan']
