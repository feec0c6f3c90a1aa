"""Errors raised by the Windy stations client."""


class WindyStationError(Exception):
    """A request to the Windy stations endpoint failed.

    Raised for transport failures (DNS, connection, timeout) and for any
    response outside the 2xx range. The underlying httpx error is chained
    as ``__cause__``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
