"""
Persistence adapters.

``state_store`` talks to the key-value table; ``ledger_repository`` turns
stored bytes into Employee/Office records. Services depend on the
repository rather than on sessions or raw bytes.
"""
