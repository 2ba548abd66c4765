"""In-memory storage layer.

This module holds loaded register transactions for one session.
It exposes the client facade that queries run against.
"""
