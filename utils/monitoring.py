"""
Sentry monitoring utilities shared by the API apps.
Provides decorators and helpers for tracking performance and errors.
"""

import functools
import time
from typing import Callable, Optional, Dict
import logging

import sentry_sdk
from sentry_sdk import start_transaction, start_span, capture_message, capture_exception

logger = logging.getLogger(__name__)

# Performance thresholds (in seconds)
SLOW_OPERATION_THRESHOLD = 2.0
CRITICAL_OPERATION_THRESHOLD = 5.0


class SentryMonitor:
    """Sentry context helpers for API operations."""

    COMPONENT_VIEW = "view"
    COMPONENT_SERVICE = "service"

    @staticmethod
    def set_operation_context(module: str, operation: str, user_id: str, additional_data: Optional[Dict] = None):
        """Set context for the current operation."""
        context = {"operation": operation, "user_id": user_id, "module": module,
                   "timestamp": time.time(), **(additional_data or {})}
        sentry_sdk.set_context("operation_context", context)
        sentry_sdk.set_tag("module", module)
        sentry_sdk.set_tag("operation", operation)

    @staticmethod
    def add_breadcrumb(message: str, category: str = "api", level: str = "info", data: Optional[Dict] = None):
        """Add a breadcrumb to track execution flow."""
        sentry_sdk.add_breadcrumb(category=category, message=message, level=level, data=data or {})

    @staticmethod
    def _get_log_level_for_execution_time(execution_time: float) -> str:
        if execution_time > CRITICAL_OPERATION_THRESHOLD:
            return "error"
        elif execution_time > SLOW_OPERATION_THRESHOLD:
            return "warning"
        return "info"

    @staticmethod
    def track_operation_result(name: str, user_id: str, success: bool, execution_time: float,
                               status_code: int = 200, error_message: Optional[str] = None):
        """Record the outcome of an operation and report slow ones."""
        sentry_sdk.set_measurement("execution_time", execution_time)
        sentry_sdk.set_tag("operation_success", str(success))
        sentry_sdk.set_tag("http_status", status_code)

        level = SentryMonitor._get_log_level_for_execution_time(execution_time)
        if level != "info":
            capture_message(f"{name} took {execution_time:.3f}s for user {user_id}", level=level)

        if not success:
            logger.warning(f"{name} failed for user {user_id} [status={status_code}]: {error_message or 'Unknown error'}")
        elif execution_time > CRITICAL_OPERATION_THRESHOLD:
            logger.error(f"CRITICAL: {name} took {execution_time:.3f}s for user {user_id}")
        elif execution_time > SLOW_OPERATION_THRESHOLD:
            logger.warning(f"SLOW: {name} took {execution_time:.3f}s for user {user_id}")
        else:
            logger.debug(f"{name} completed in {execution_time:.3f}s for user {user_id}")


def _request_user_id(request) -> str:
    session = getattr(request, "session", None)
    if session is None:
        return "anonymous"
    return session.get("user_id") or "anonymous"


def track_transaction(name: str):
    """
    Decorator wrapping a view in a Sentry transaction.

    Records duration and status code, captures unhandled exceptions and
    logs slow operations.

    Usage:
        @track_transaction("chat.send")
        def chat(request):
            ...
    """
    module = name.split(".", 1)[0]

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(request, *args, **kwargs):
            user_id = _request_user_id(request)
            SentryMonitor.set_operation_context(module, name, user_id)
            SentryMonitor.add_breadcrumb(
                f"Starting {name}", category=f"{module}.{SentryMonitor.COMPONENT_VIEW}",
                data={"function": func.__name__, "method": request.method},
            )

            with start_transaction(op=module, name=name) as transaction:
                transaction.set_tag("operation", name)
                start_time = time.time()
                try:
                    result = func(request, *args, **kwargs)
                except Exception as e:
                    execution_time = time.time() - start_time
                    capture_exception(e)
                    transaction.set_status("internal_error")
                    SentryMonitor.track_operation_result(
                        name, user_id, False, execution_time, 500, f"{type(e).__name__}: {e}"
                    )
                    raise

                execution_time = time.time() - start_time
                status_code = getattr(result, "status_code", 200)
                is_success = 200 <= status_code < 400
                transaction.set_status("ok" if is_success else "error")
                SentryMonitor.track_operation_result(name, user_id, is_success, execution_time, status_code)
                return result
        return wrapper
    return decorator


def track_service_operation(name: str):
    """Child span around a service-layer call inside the current transaction."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with start_span(op="service", description=name) as span:
                start_time = time.time()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_data("error_type", type(e).__name__)
                    SentryMonitor.add_breadcrumb(
                        f"Error in {name}: {e}", category=SentryMonitor.COMPONENT_SERVICE, level="error"
                    )
                    raise
                finally:
                    span.set_data("execution_time", time.time() - start_time)
                return result
        return wrapper
    return decorator
