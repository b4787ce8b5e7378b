from __future__ import annotations


class MeowdictError(Exception):
    """Base class for errors shown to the user as a single line."""


class NotFoundError(MeowdictError):
    def __init__(self, keyword: str):
        super().__init__(f"Could not find keyword: {keyword}")
        self.keyword = keyword


class TransportError(MeowdictError):
    def __init__(self, keyword: str, reason: str):
        super().__init__(f"Failed to fetch {keyword}: {reason}")
        self.keyword = keyword
        self.reason = reason


class ResponseParseError(MeowdictError):
    def __init__(self, keyword: str, reason: str = "response is not a JSON object"):
        super().__init__(f"Could not parse result for {keyword}: {reason}")
        self.keyword = keyword


class InvalidArgumentError(MeowdictError):
    def __init__(self, token: str):
        super().__init__(f"Invalid argument: {token}")
        self.token = token
