"""
Fonctions utilitaires partagees dans le projet Gratuit Streaming.

Ce module centralise les fonctions reutilisees a travers le codebase :
- normalize_accents : suppression des diacritiques
- slugify / movie_slug / category_slug : segments d'URL lisibles
- parse_page : normalisation du parametre de pagination
"""

import re
import unicodedata
from typing import Optional

from src.utils.constants import LIGATURE_MAP

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_PAGE_RE = re.compile(r"\+?[0-9]+")


def normalize_accents(text: str) -> str:
    """
    Supprime les accents d'une chaine.

    Utilise la decomposition NFD puis filtre les caracteres diacritiques (Mn).
    Ex: "Amélie" -> "Amelie"
    """
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")


def _expand_ligatures(text: str) -> str:
    """Remplace les ligatures Unicode par leurs équivalents ASCII."""
    for lig, expanded in LIGATURE_MAP.items():
        text = text.replace(lig, expanded)
    return text


def slugify(text: Optional[str]) -> str:
    """
    Convertit un titre ou un nom de categorie en segment d'URL.

    Minuscules, ligatures depliees, accents retires, toute suite de caracteres
    non alphanumeriques remplacee par un tiret unique, tirets de bord retires.
    La fonction est idempotente : slugify(slugify(x)) == slugify(x).

    Une chaine vide (ou sans aucun caractere alphanumerique) donne "".

    Ex: "Les Misérables" -> "les-miserables", "Cœur d'Acier" -> "coeur-d-acier"
    """
    if not text:
        return ""
    ascii_text = normalize_accents(_expand_ligatures(text)).lower()
    return _NON_ALNUM_RE.sub("-", ascii_text).strip("-")


def movie_slug(movie_id: int | str, title: Optional[str]) -> str:
    """Segment d'URL d'un film : identifiant suivi du titre slugifie."""
    slug = slugify(title)
    return f"{movie_id}-{slug}" if slug else str(movie_id)


def category_slug(name: Optional[str]) -> str:
    """Segment d'URL d'une categorie."""
    return slugify(name)


def parse_page(raw: Optional[str]) -> int:
    """
    Convertit le parametre de requete `page` en numero de page.

    Toute valeur absente, non entiere, nulle ou negative donne la page 1.
    Seuls les chiffres ASCII sont acceptes ("1_000" ou "٣" donnent la page 1).
    """
    if raw is None or not _PAGE_RE.fullmatch(raw.strip()):
        return 1
    page = int(raw.strip())
    return page if page >= 1 else 1
