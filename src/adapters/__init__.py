"""
Adaptateurs (infrastructure) implementant les ports du domaine.

- api/ : Client HTTP de la base hebergee (Supabase / PostgREST)
"""
