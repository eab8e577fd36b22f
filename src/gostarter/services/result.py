"""Common service result contracts for orchestration entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceSuccess(Generic[T]):
    """Container for successful service outcomes.

    Args:
        outcome: Typed outcome payload returned by a service.
    """

    outcome: T


def service_success(outcome: T) -> ServiceSuccess[T]:
    """Create a successful service result.

    Args:
        outcome: Typed outcome payload to return.

    Returns:
        ``ServiceSuccess`` wrapping ``outcome``.
    """

    return ServiceSuccess(outcome=outcome)
