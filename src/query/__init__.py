"""Query engine over loaded transactions.

This module groups, ranks, searches and formats register data.
Every query reads an immutable snapshot of the record store.
"""
