"""Exceptions raised while building protocol adaptor lists."""


class AdaptorError(Exception):
    """Base class for adaptor list errors."""


class MissingProtocolsDataError(AdaptorError):
    """A breakdown adapter has no protocolsData in its config."""

    def __init__(self, adapter_key: str):
        self.adapter_key = adapter_key
        super().__init__(f"No protocols data defined for breakdown adapter {adapter_key}")


class CatalogLoadError(AdaptorError):
    """An input file could not be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Failed to load {path}: {reason}")
