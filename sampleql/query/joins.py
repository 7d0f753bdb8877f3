"""Co-location join between customers and suppliers.

A supplier is co-located with a customer when both ``city`` and ``country``
are equal.  Two equivalent formulations are provided: a nested filter over
all suppliers per customer, and a grouped join over a ``(city, country)``
lookup.  Every customer appears exactly once in either result, with an empty
supplier list when nothing matches.
"""
from __future__ import annotations

from collections.abc import Iterator

from sampleql.query.sequence import deferred, to_lookup
from sampleql.schema.entities import Customer, Dataset, Supplier
from sampleql.schema.results import CustomerSupplierGroup, CustomerSuppliers

LocationKey = tuple[str, str]


def location_key(party: Customer | Supplier) -> LocationKey:
    return (party.city, party.country)


@deferred
def suppliers_by_customer_nested(dataset: Dataset) -> Iterator[CustomerSuppliers]:
    """Filters all suppliers once per customer."""
    for customer in dataset.customers:
        names = tuple(
            s.supplier_name
            for s in dataset.suppliers
            if s.city == customer.city and s.country == customer.country
        )
        yield CustomerSuppliers(customer_id=customer.customer_id, supplier_names=names)


@deferred
def suppliers_by_customer_grouped(
    dataset: Dataset,
) -> Iterator[CustomerSupplierGroup]:
    """Grouped join on the compound ``(city, country)`` key."""
    lookup = to_lookup(dataset.suppliers, location_key)
    for customer in dataset.customers:
        yield CustomerSupplierGroup(
            customer=customer,
            suppliers=lookup.get(location_key(customer), ()),
        )
