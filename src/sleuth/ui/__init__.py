"""Terminal views for the case engine."""
