"""
Couche infrastructure de Gratuit Streaming.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Repositories en lecture sur la base hebergee

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer de base sans modifier la logique metier.
"""
