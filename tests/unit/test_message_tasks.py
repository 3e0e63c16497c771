"""
Unit tests for queued message handling.

Tasks are called directly, so they run synchronously without a broker.
"""

from unittest.mock import Mock, patch

import pytest

from domainwatch.application.use_cases.process_domain_trigger_use_case import ProcessDomainTrigger
from domainwatch.domain.exceptions import DeliveryError, ResourceNotFoundError
from domainwatch.infrastructure.messaging.handler_registry import MessageHandlerRegistry
from domainwatch.infrastructure.service_container import ServiceContainer
from domainwatch.tasks.trigger_tasks import enqueue_domain_trigger, handle_message_task
from tests.conftest import utc


@pytest.fixture
def registry() -> MessageHandlerRegistry:
    registry = MessageHandlerRegistry()
    ServiceContainer._message_handler_registry = registry
    return registry


class TestMessageHandlerRegistry:
    """Tests for MessageHandlerRegistry."""

    def test_routes_by_kind(self) -> None:
        registry = MessageHandlerRegistry()
        handler = Mock(return_value=2)
        registry.register("process_domain_trigger", handler)

        assert registry.handle("process_domain_trigger", {"a": 1}) == 2
        handler.assert_called_once_with({"a": 1})

    def test_unknown_kind(self) -> None:
        with pytest.raises(KeyError, match="unknown"):
            MessageHandlerRegistry().handle("unknown", {})

    def test_container_registers_trigger_handler(self) -> None:
        registry = ServiceContainer().get_message_handler_registry()

        assert registry.kinds() == [ProcessDomainTrigger.KIND]


class TestHandleMessageTask:
    """Tests for handle_message_task."""

    def test_success(self, registry) -> None:
        registry.register("process_domain_trigger", Mock(return_value=1))

        result = handle_message_task("process_domain_trigger", {})

        assert result == {"status": "success", "kind": "process_domain_trigger", "result": 1}

    def test_delivery_error_propagates(self, registry) -> None:
        registry.register("process_domain_trigger", Mock(side_effect=DeliveryError("SMTP down")))

        with pytest.raises(DeliveryError):
            handle_message_task("process_domain_trigger", {})

    def test_missing_resource_propagates(self, registry) -> None:
        registry.register("process_domain_trigger", Mock(side_effect=ResourceNotFoundError()))

        with pytest.raises(ResourceNotFoundError):
            handle_message_task("process_domain_trigger", {})


class TestEnqueue:

    @patch("domainwatch.tasks.trigger_tasks.handle_message_task")
    def test_publishes_serialized_message(self, task) -> None:
        message = ProcessDomainTrigger("wl-token", "example.com", utc(2025, 1, 1))

        enqueue_domain_trigger(message)

        task.delay.assert_called_once_with("process_domain_trigger", {
            "watchListToken": "wl-token",
            "ldhName": "example.com",
            "updatedAt": "2025-01-01T00:00:00+00:00",
        })

    def test_round_trip(self) -> None:
        message = ProcessDomainTrigger("wl-token", "example.com", utc(2025, 1, 1))

        assert ProcessDomainTrigger.from_dict(message.to_dict()) == message
