"""Cart aggregate: the shopping session of the current device.

The Cart owns its lines.  All merging rules live here; persistence and
logging are the application service's business.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.menu import MenuItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


@dataclass
class CartLine:
    """One (item, quantity) pair.

    ``item`` is the snapshot taken when the line was created; the quantity
    is the only part that changes afterwards.
    """

    item: MenuItem
    quantity: Quantity

    @property
    def item_id(self) -> int:
        return self.item.id

    @property
    def line_total(self) -> Money:
        return self.item.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one line per distinct menu item id
    - every line has a quantity >= 1
    """

    lines: list[CartLine] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY

    # --- Mutations ------------------------------------------------------------

    def add(self, item: MenuItem, quantity: int = 1) -> CartLine:
        """Add ``quantity`` of ``item``, merging into an existing line."""
        if quantity <= 0:
            raise ValidationError("Quantity to add must be positive")

        line = self._find(item.id)
        if line is not None:
            line.quantity = line.quantity + Quantity(quantity)
            return line

        line = CartLine(item=item, quantity=Quantity(quantity))
        self.lines.append(line)
        return line

    def update_quantity(self, item_id: int, quantity: int) -> None:
        """Set the absolute quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove(item_id)
            return
        line = self._find(item_id)
        if line is not None:
            line.quantity = Quantity(quantity)

    def remove(self, item_id: int) -> None:
        self.lines = [line for line in self.lines if line.item_id != item_id]

    def clear(self) -> None:
        self.lines = []

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.currency)
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Internal helpers -----------------------------------------------------

    def _find(self, item_id: int) -> CartLine | None:
        for line in self.lines:
            if line.item_id == item_id:
                return line
        return None
