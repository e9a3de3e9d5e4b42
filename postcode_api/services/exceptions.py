"""Errors raised while looking up postcodes."""


class PostcodeLookupError(Exception):
    pass


class InputError(PostcodeLookupError):
    pass


class UpstreamError(PostcodeLookupError):
    pass


class RequestBuildError(UpstreamError):
    pass


class FetchError(UpstreamError):
    pass


class UpstreamStatusError(UpstreamError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Received non-OK HTTP status: {status_code}")


class ParseError(UpstreamError):
    pass
