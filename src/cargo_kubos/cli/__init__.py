"""Command-line entry point for cargo-kubos."""
