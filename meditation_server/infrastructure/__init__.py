"""Infrastructure adapters (database, persistence)."""
