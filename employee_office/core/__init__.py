"""
Core utilities shared across the ledger service.

This package hosts configuration helpers, logging setup and the error
taxonomy. Services and routers depend on these primitives instead of
reading os.environ or building error payloads on their own.
"""
