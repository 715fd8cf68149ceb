"""Case data models and invariants."""
