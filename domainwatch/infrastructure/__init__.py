"""Infrastructure layer - adapters for registrars, mail, cache and queue."""
