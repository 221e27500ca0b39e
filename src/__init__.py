"""
Gratuit Streaming - Page d'accueil et sitemap de l'annuaire de films.

Ce package lit le catalogue (films, catégories) dans une base Supabase
alimentée par ailleurs, et produit la page d'accueil HTML et le sitemap.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (page d'accueil, sitemap)
- adapters/ et infrastructure/ : Client Supabase et repositories
- web/ : Application FastAPI et templates Jinja2
"""
