"""HTTP API for rdl-summary."""
