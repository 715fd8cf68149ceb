"""Read-only views of a running case."""
