"""
Testing infrastructure for the Sanity binding.

Provides a fake Sanity API that can be mounted on a requests session.
"""

from .drivers import FakeResponse, FakeSanityService

__all__ = [
    "FakeResponse",
    "FakeSanityService",
]
