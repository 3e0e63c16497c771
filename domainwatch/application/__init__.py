"""Application layer - use cases and services built on domain interfaces."""
