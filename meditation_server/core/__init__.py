"""Cross-cutting configuration, logging and security helpers."""
