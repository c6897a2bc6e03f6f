"""Exception types raised while loading API descriptions and generating pages."""


class LoadError(Exception):
    """Raised when a path does not contain a well-formed API description."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Unable to load API description {path}: {reason}")
        self.path = path
        self.reason = reason


class IdentityConflict(ValueError):
    """Raised when two documentation nodes resolve to the same page id."""

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Duplicate page id: {doc_id}")
        self.doc_id = doc_id
