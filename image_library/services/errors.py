class ClientError(Exception):
    """Base class for every failure reported by the library client"""


class InvalidAddressError(ClientError):
    def __init__(self, address: str):
        super().__init__(f"'{address}' is not a valid http(s) address")
        self.address = address


class TransportError(ClientError):
    """Connection, DNS, timeout or I/O failure while talking to the library service"""

    def __init__(self, method: str, url: str, reason: str = ""):
        message = f"{method} {url} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.method = method
        self.url = url


class UnexpectedStatusError(ClientError):
    """The library service answered with a status other than 200 (the body is discarded)"""

    def __init__(self, method: str, url: str, status_code: int):
        super().__init__(f"{method} {url} returned unexpected status {status_code}")
        self.method = method
        self.url = url
        self.status_code = status_code


class DecodeError(ClientError):
    """The response body is not valid JSON or does not describe an image record"""

    def __init__(self, method: str, url: str):
        super().__init__(f"{method} {url} returned a body that is not an image record")
        self.method = method
        self.url = url
