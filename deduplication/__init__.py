"""Builder Maps — Duplicate spot detection."""
