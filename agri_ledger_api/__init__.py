"""
Top‑level package for the Agri Ledger API.

A small record‑keeping backend for debts, escrows, crop insurance
policies and insurance claims.  All functionality lives in
submodules under ``app``.
"""

__all__ = []
