"""
Core domain models, mathematical primitives, and input contracts.

This module contains the foundational building blocks that are independent
of external systems (subgraph queries, presentation layers, etc.).
"""
