"""Test utilities for edgeroute applications::

    from edgeroute.testing import TestClient
"""

from edgeroute.testing.client import TestClient

__all__ = ["TestClient"]
