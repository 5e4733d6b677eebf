"""Test-side dependency injection: in-memory providers and container builder."""

from .container import build_test_container

__all__ = ["build_test_container"]
