"""
Service layer.

Repositories own the stores; the operation services (catalog, reviews,
users) validate payloads, check ownership and return ``Result`` values.
Nothing in this package keeps module-level state: every instance works
on the stores it was constructed with.
"""
