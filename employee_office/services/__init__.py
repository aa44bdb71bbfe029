"""
Ledger operations.

Command and query services orchestrate the repository to implement each
named operation; the dispatcher maps operation names to them. Routers
and scripts call the dispatcher instead of touching the store directly.
"""
