"""
Pydantic schema definitions for API payloads and stored records.

Each domain (debts, escrows, crop insurance, claims) defines a
``*Create`` model for request bodies and a ``*Read`` model which is
both the API response and the record kept in the store.  Records are
immutable by replacement: updates store a whole new ``*Read``.
"""
