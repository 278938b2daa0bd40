"""
Pydantic schema definitions for records and payloads.

Each domain (services, reviews, users) defines a creation payload, a
partial update payload where the domain supports updates, and the
stored record shape.  Records are what the stores hold (as JSON) and
what the operations return.
"""
