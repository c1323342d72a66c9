"""Storing, shaping, aggregating and pacing the replay of captured gRPC call records."""

__version__ = "0.1.0"