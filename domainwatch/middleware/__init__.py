"""Flask middleware: error handling, metrics and rate limiting."""
