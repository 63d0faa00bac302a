"""
Test suite for InvoiceGenerator core contracts

Contains:
- tests/unit/          : Unit tests for individual modules
"""
