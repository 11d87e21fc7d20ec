"""Shared pytest configuration for the book catalog tests."""

from tests.fixtures import *  # noqa: F401,F403
