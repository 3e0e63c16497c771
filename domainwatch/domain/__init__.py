"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities (domains, events, watch lists, order sessions)
- Typed errors surfaced to callers
- Provider, mailer and repository interfaces (Strategy Pattern)
"""
