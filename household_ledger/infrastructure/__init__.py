"""Infrastructure adapters: database, persistence, settings, logging."""
