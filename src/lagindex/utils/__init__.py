"""Small helpers shared across lagindex."""
