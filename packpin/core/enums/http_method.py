"""HTTP verbs used by Packpin endpoints."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods issued by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
