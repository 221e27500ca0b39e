"""
Module de lecture du catalogue pour Gratuit Streaming.

Les donnees vivent dans une base Supabase alimentee par un processus externe ;
ce module ne contient que des repositories en lecture seule.

Usage:
    from src.infrastructure.persistence.repositories import SupabaseMovieRepository

    repository = SupabaseMovieRepository(data_store=client)
    result = await repository.list_latest(PageWindow(page=2))
"""
