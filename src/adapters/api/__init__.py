"""
Clients API externes.

Ce module fournit l'adaptateur de lecture de la base hebergee :
- SupabaseClient : lectures PostgREST (tables movies et categorie)

Le client implemente IDataStore defini dans core/ports/data_store.py.
"""

from src.adapters.api.supabase_client import SupabaseClient, parse_content_range

__all__ = [
    "SupabaseClient",
    "parse_content_range",
]
