"""Standard data models."""
