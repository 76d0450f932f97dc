"""Helpers for GitHub Actions steps: workflow commands, secret masking, job summaries, paths, platform details and tool release records."""

__version__ = "0.1.0"