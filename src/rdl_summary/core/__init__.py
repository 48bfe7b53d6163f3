"""Core infrastructure: settings, logging, startup checks."""
