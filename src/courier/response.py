"""Uniform outcome types returned by request handlers.

A `Response` carries a success flag and, by convention, a message when the
operation failed. A `ResultResponse` adds a typed ``results`` payload for
operations that produce a value (e.g. a query returning a list of records).

Failures are data, not exceptions:

```py
def handle(cmd: UpdateOrder.Command) -> Response:
    order = orders.get(cmd.order_id)
    if order is None:
        return failure("Could not update Order.")
    ...
    return success()
```

Payloads are attached to an existing outcome, keeping its success flag and
message:

```py
return success().with_results(orders)
return failure("Orders unavailable.").with_no_results(list)
```

The fields are independent: nothing stops a failed response from carrying
results, or a successful one from carrying a message. Callers branch on
``success`` (or on the response itself, which is truthy on success). Use
`ResultResponse.unwrap` to read results only when the operation succeeded.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, overload

from .errors import ResponseFailedError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Response:
    """Outcome of a single operation.

    Attributes:
        success: Whether the operation succeeded. Defaults to True.
        message: Human-readable reason, set on failure by convention.
    """

    success: bool = True
    message: str | None = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def failed(self) -> bool:
        """True when the operation did not succeed."""
        return not self.success

    def with_results(self, results: U) -> ResultResponse[U]:
        """Return a copy of this outcome carrying ``results``.

        The success flag and message are copied unchanged. Applied to a
        `ResultResponse`, the previous results are replaced.
        """
        return ResultResponse(
            success=self.success, message=self.message, results=results
        )

    @overload
    def with_no_results(self, default_factory: None = None) -> ResultResponse[None]: ...

    @overload
    def with_no_results(self, default_factory: Callable[[], U]) -> ResultResponse[U]: ...

    def with_no_results(self, default_factory=None):
        """Return a copy of this outcome carrying an empty payload.

        Args:
            default_factory: Called with no arguments to build the empty value
                of the payload type (e.g. ``list`` or ``dict``). When omitted
                the payload is ``None``.
        """
        empty = None if default_factory is None else default_factory()
        return self.with_results(empty)


@dataclass(frozen=True, kw_only=True)
class ResultResponse(Response, Generic[T]):
    """Outcome of an operation that produces a value.

    Attributes:
        results: The payload. Only meaningful when ``success`` is True.
    """

    results: T

    def unwrap(self) -> T:
        """Return the results of a successful response.

        Raises:
            ResponseFailedError: If the response is a failure. The error
                carries the response message.
        """
        if not self.success:
            raise ResponseFailedError(self.message)
        return self.results

    def results_or(self, default: T) -> T:
        """Return the results on success, ``default`` otherwise."""
        return self.results if self.success else default


def success() -> Response:
    """Return a successful outcome with no message."""
    return Response(success=True)


def failure(message: str) -> Response:
    """Return a failed outcome with the given message."""
    return Response(success=False, message=message)
