"""Test utilities for latitude sites.

    from latitude.testing import TestClient
"""

from latitude.testing.client import TestClient, TestResponse

__all__ = ["TestClient", "TestResponse"]
