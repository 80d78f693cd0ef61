"""Builder Maps — Directory API."""
