"""Test utilities for redirector applications.

Provides an in-process test client and redirect assertions::

    from redirector.testing import TestClient, assert_redirect
"""

from redirector.testing.assertions import assert_greeting, assert_redirect
from redirector.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_greeting",
    "assert_redirect",
]
