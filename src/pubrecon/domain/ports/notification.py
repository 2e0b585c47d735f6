"""Port for handing reconciled changes to downstream consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pubrecon.domain.model import ChangedItem, PublishContext


@runtime_checkable
class ChangeNotifier(Protocol):
    """Callable port invoked once per batch with every resolved changed item.

    Asynchronous implementations run their own event loop inside the call.
    """

    def __call__(self, context: PublishContext, items: Sequence[ChangedItem]) -> None: ...
