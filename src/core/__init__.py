"""
Core domain models, money arithmetic, and document contracts.

This module contains the foundational building blocks that are independent
of external systems (menu catalog, order store, profile store).
"""
