"""
In-memory cart of selected laundry services.

A service is either absent from or present in the cart; adding a
present service is refused with ``DuplicateCartItemError`` and leaves
the cart untouched.  Entries keep insertion order so the rendered table
lists services in the order they were picked.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from laundry_site.app.schemas.cart import CartItem


class DuplicateCartItemError(ValueError):
    """Raised when a service that is already in the cart is added again."""

    def __init__(self, service_id: str) -> None:
        super().__init__(f"Service {service_id} is already in the cart")
        self.service_id = service_id


class Cart:
    """Mapping of service id to the name and price it was added with."""

    def __init__(self) -> None:
        self._items: Dict[str, CartItem] = {}

    def add(self, service_id: str, name: str, price: float) -> CartItem:
        if service_id in self._items:
            raise DuplicateCartItemError(service_id)
        item = CartItem(name=name, price=price)
        self._items[service_id] = item
        return item

    def remove(self, service_id: str) -> Optional[CartItem]:
        """Drop ``service_id`` and return what it held.

        Removing an absent service does nothing and returns ``None``.
        """
        return self._items.pop(service_id, None)

    def total(self) -> float:
        return sum(item.price for item in self._items.values())

    def clear(self) -> None:
        self._items.clear()

    def get(self, service_id: str) -> Optional[CartItem]:
        return self._items.get(service_id)

    def items(self) -> List[Tuple[str, CartItem]]:
        return list(self._items.items())

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)
