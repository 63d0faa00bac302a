"""
InvoiceGenerator — core contracts for invoice documents.
"""

__version__ = "0.1.0"
