"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the QRON reward
core that are independent of external systems (ledgers, wallets, web APIs).
"""
