"""Core runtime, services and diagnostics."""
