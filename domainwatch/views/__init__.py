"""Views module - exports all blueprints."""
from domainwatch.views.connectors import connectors_blueprint
from domainwatch.views.health import health_blueprint

__all__ = ["connectors_blueprint", "health_blueprint"]
