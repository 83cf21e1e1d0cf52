"""Extra line item store."""
from typing import Iterable, Optional, Tuple

from app.services.catalog.base import ExtraDefinition
from app.services.ordering.models import ExtraLine


class ExtraLineStore:
    """
    Holds the selectable add-ons for the loaded item.

    The collection is an immutable snapshot: every mutation swaps in a new
    tuple, so a reference taken earlier never changes underneath its holder.
    """

    def __init__(self):
        self._lines: Tuple[ExtraLine, ...] = ()

    @property
    def lines(self) -> Tuple[ExtraLine, ...]:
        """Current snapshot."""
        return self._lines

    def load(self, extras: Optional[Iterable[ExtraDefinition]]) -> None:
        """Start one line per definition at quantity 0."""
        self._lines = tuple(
            ExtraLine(id=extra.id, name=extra.name, value=extra.value, quantity=0)
            for extra in extras or []
        )

    def _find(self, extra_id: int) -> Optional[ExtraLine]:
        return next((line for line in self._lines if line.id == extra_id), None)

    def _replace(self, extra_id: int, delta: int) -> None:
        self._lines = tuple(
            line.model_copy(update={"quantity": line.quantity + delta})
            if line.id == extra_id
            else line
            for line in self._lines
        )

    def increment(self, extra_id: int) -> None:
        """Add one of an extra. Unknown ids are ignored."""
        if self._find(extra_id) is None:
            return
        self._replace(extra_id, 1)

    def decrement(self, extra_id: int) -> None:
        """Remove one of an extra. Unknown ids and zero quantities are ignored."""
        line = self._find(extra_id)
        if line is None or line.quantity == 0:
            return
        self._replace(extra_id, -1)

    def quantity_of(self, extra_id: int) -> Optional[int]:
        line = self._find(extra_id)
        return line.quantity if line else None

    def selected(self) -> Tuple[ExtraLine, ...]:
        """Lines with a quantity above zero."""
        return tuple(line for line in self._lines if line.quantity > 0)

    def __len__(self) -> int:
        return len(self._lines)
