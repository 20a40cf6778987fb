"""Exceptions raised by the functional core."""


class FolioError(Exception):
    """Base class for errors that stop a page (or a build) from being generated."""


class FrontMatterError(FolioError):
    """A content document's front-matter block could not be parsed."""

    def __init__(self, message: str, slug: str | None = None):
        self.slug = slug
        if slug:
            message = f"{slug}: {message}"
        super().__init__(message)


class MissingTemplateSlot(FolioError):
    """The shell template is malformed or refers to a slot that doesn't exist."""

    def __init__(self, slot: str, detail: str = ""):
        self.slot = slot
        message = f"Shell template slot '{slot}' is missing or undefined"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
