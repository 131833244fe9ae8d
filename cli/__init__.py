"""Command line entry point for picool telemetry collection."""
