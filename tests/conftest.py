"""Shared fixtures for the distlease test-suite."""

pytest_plugins = ["distlease.testing.fixtures"]
