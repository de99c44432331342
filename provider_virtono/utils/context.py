"""Context management for structured logging.

Context variables carry the resource being worked on (kind and name) and the
current action so that every log line emitted while handling a resource is
tagged with them, including across threads started with a copied context
and across async tasks.
"""

import contextvars
from contextlib import contextmanager
from typing import Optional, Any, Dict
from opentelemetry import trace

resource_kind_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "resource_kind", default=None
)
resource_name_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "resource_name", default=None
)
action_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "action", default=None
)

_VARS = {
    "resource_kind": resource_kind_var,
    "resource_name": resource_name_var,
    "action": action_var,
}


def set_context(
    resource_kind: Optional[str] = None,
    resource_name: Optional[str] = None,
    action: Optional[str] = None,
) -> None:
    """Set context variables.

    Args:
        resource_kind: Kind of the resource (e.g., 'VirtualMachine')
        resource_name: metadata.name of the resource
        action: Operation being performed (e.g., 'scheme.decode')
    """
    if resource_kind is not None:
        resource_kind_var.set(resource_kind)
    if resource_name is not None:
        resource_name_var.set(resource_name)
    if action is not None:
        action_var.set(action)


def get_context() -> Dict[str, Any]:
    """Get all current context values as a dictionary.

    Returns:
        Dictionary with all non-None context values
    """
    context = {}
    for key, var in _VARS.items():
        value = var.get()
        if value:
            context[key] = value
    return context


def get_resource_kind() -> Optional[str]:
    """Get current resource kind."""
    return resource_kind_var.get()


def get_resource_name() -> Optional[str]:
    """Get current resource name."""
    return resource_name_var.get()


def get_action() -> Optional[str]:
    """Get current action."""
    return action_var.get()


def clear_context() -> None:
    """Clear all context variables."""
    for var in _VARS.values():
        var.set(None)


@contextmanager
def operation_context(
    action: str,
    resource_kind: Optional[str] = None,
    resource_name: Optional[str] = None,
):
    """Context manager for setting operation context with automatic cleanup.

    The action and resource are also recorded as span attributes when there
    is an active span.

    Example:
        with operation_context("scheme.decode", resource_kind="VirtualMachine"):
            logger.info("Decoding object")
    """
    old_context = get_context()

    try:
        set_context(
            resource_kind=resource_kind,
            resource_name=resource_name,
            action=action,
        )

        span = trace.get_current_span()
        if span.is_recording():
            span.set_attribute("action", action)
            if resource_kind:
                span.set_attribute("resource.kind", resource_kind)
            if resource_name:
                span.set_attribute("resource.name", resource_name)

        yield

    finally:
        clear_context()
        for key, value in old_context.items():
            _VARS[key].set(value)


def get_trace_context() -> Dict[str, str]:
    """Get current OpenTelemetry trace context.

    Returns:
        Dictionary with trace_id and span_id (if available)
    """
    context = {}

    span = trace.get_current_span()
    if span.is_recording():
        span_context = span.get_span_context()
        if span_context.is_valid:
            context["trace_id"] = format(span_context.trace_id, "032x")
            context["span_id"] = format(span_context.span_id, "016x")

    return context
