"""Register data ingestion.

This module fetches quarters from the transparency register API.
It decodes typed transactions for the in-memory record store.
"""
