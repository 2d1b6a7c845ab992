"""Resolve merge:<version> labels of merged pull requests to target branches."""

__version__ = "0.1.0"
