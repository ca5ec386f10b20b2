"""Logging and in-memory build telemetry."""
