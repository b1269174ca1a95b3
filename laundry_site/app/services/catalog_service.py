"""
Catalog of bookable services, read from the services page.

The services page carries one container per service::

    <div class="service-item" data-service="wash-fold" data-price="150">
        <span class="service-name">Wash &amp; Fold</span>
        <button class="service-btn add-btn">Add Item</button>
    </div>

``ServiceCatalog.from_html`` collects these into ``ServiceItem`` models
so the cart controller knows every service's id, name and price.  The
name is the whole text of the ``.service-name`` element, nested markup
included, as the page's own script reads it.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from bs4 import BeautifulSoup

from laundry_site.app.schemas.catalog import ServiceItem

logger = logging.getLogger(__name__)


class ServiceCatalog:
    """Read-only collection of services keyed by id, in page order."""

    def __init__(self, items: Optional[List[ServiceItem]] = None) -> None:
        self._items: Dict[str, ServiceItem] = {}
        for item in items or []:
            self._items[item.service_id] = item

    @classmethod
    def from_html(cls, html_text: str) -> "ServiceCatalog":
        soup = BeautifulSoup(html_text, "html.parser")
        items: List[ServiceItem] = []
        for container in soup.select("[data-service]"):
            service_id = container.get("data-service", "")
            raw_price = container.get("data-price", "")
            try:
                price = float(raw_price)
            except ValueError:
                logger.warning("Skipping service %s with invalid price %r", service_id, raw_price)
                continue
            label = container.select_one(".service-name")
            name = label.get_text() if label is not None else ""
            items.append(ServiceItem(service_id=service_id, name=" ".join(name.split()), price=price))
        return cls(items)

    @classmethod
    def from_file(cls, path: Path) -> "ServiceCatalog":
        return cls.from_html(Path(path).read_text(encoding="utf-8"))

    def get(self, service_id: str) -> Optional[ServiceItem]:
        return self._items.get(service_id)

    def __iter__(self) -> Iterator[ServiceItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._items
