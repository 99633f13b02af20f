"""
Test suite for the Sabor ordering core

Contains:
- tests/unit/          : Unit tests for cart, pricing, checkout, rewards and catalog
"""
