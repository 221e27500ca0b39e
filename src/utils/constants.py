"""
Constantes partagées du site Gratuit Streaming.
"""

DEFAULT_SITE_URL = "https://gratuit-streaming.fr"
SITE_NAME = "Gratuit Streaming"

# Nombre de films par page sur l'accueil
PAGE_SIZE = 30

# Tables PostgREST
MOVIES_TABLE = "movies"
CATEGORIES_TABLE = "categorie"

# Métadonnées SEO de la page d'accueil
HOME_TITLE = "Gratuit Streaming - Voir tous les films en streaming gratuitement"
HOME_DESCRIPTION = (
    "Découvrez les derniers films en streaming gratuit sur Gratuit Streaming"
)

# Ligatures françaises remplacées avant la suppression des accents
LIGATURE_MAP = {"œ": "oe", "Œ": "Oe", "æ": "ae", "Æ": "Ae"}

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
