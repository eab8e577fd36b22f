"""Callable service base shared by the scaffold services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .. import log
from .errors import ServiceFailure

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")


class BaseService(ABC, Generic[RequestT, ResultT]):
    """A service is called with one request and returns one typed result.

    Expected failures surface as ``ServiceFailure``. ``__call__`` routes them
    through :meth:`_handle_failure`, which re-raises unless a subclass
    recovers.
    """

    def __call__(self, request: RequestT) -> ResultT:
        try:
            return self._run(request)
        except ServiceFailure as failure:
            log.debug(f"{type(self).__name__} failed [{failure.code}]: {failure}")
            return self._handle_failure(failure)

    @abstractmethod
    def _run(self, request: RequestT) -> ResultT: ...

    def _handle_failure(self, error: ServiceFailure) -> ResultT:
        raise error
