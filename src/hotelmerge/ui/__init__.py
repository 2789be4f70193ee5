"""User-facing entry points: HTTP API and command line."""
