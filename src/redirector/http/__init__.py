"""HTTP types: immutable request, response, redirect."""

from redirector.http.request import Request
from redirector.http.response import Redirect, Response

__all__ = ["Redirect", "Request", "Response"]
