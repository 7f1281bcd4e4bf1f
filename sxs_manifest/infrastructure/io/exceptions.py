class ManifestError(Exception):
    pass


class ManifestSerializationError(ManifestError):
    """Raised when a manifest cannot be written.

    Output may already be partially written to the sink when this is raised.
    """


class XmlWriteError(ManifestSerializationError):
    """The XML writer or its sink failed."""

    def __init__(self, reason: object) -> None:
        super().__init__(f"XmlWrite failed - {reason}")
        self.reason = reason


class InvalidManifestError(ManifestSerializationError):
    """The manifest holds a combination of values the schema does not allow."""

    def __init__(self, path: str, detail: str, rule: str | None = None) -> None:
        super().__init__(f"Invalid data found at {path}. {detail}")
        self.path = path
        self.detail = detail
        self.rule = rule


class ManifestDescriptionError(ManifestError):
    pass


class ManifestDescriptionNotFoundError(ManifestDescriptionError):
    pass
