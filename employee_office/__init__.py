"""Employee/Office ledger: records, key scheme, store access and operations."""
