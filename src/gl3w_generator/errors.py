"""Exceptions raised by the gl3w generator."""


class GeneratorError(Exception):
    """Base class for errors that abort a generator run."""


class FetchError(GeneratorError):
    """Downloading glcorearb.h failed."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"failed to download {url}: {reason}")
        self.url = url
        self.reason = reason


class DecodeError(GeneratorError):
    """glcorearb.h is not valid UTF-8 text."""

    def __init__(self, source: object, reason: object) -> None:
        super().__init__(f"{source} is not valid UTF-8: {reason}")
        self.source = source
        self.reason = reason
