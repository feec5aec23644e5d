"""Small helpers for services: boolean settings, TOML lookups, durations, time, JSON envelopes, SQL and build information."""

__version__ = "0.1.0"