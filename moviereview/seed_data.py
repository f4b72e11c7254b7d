import logging

from .models.movie import Movie
from .repositories.store import RecordStore, MOVIES

logger = logging.getLogger(__name__)

# Starter catalog. The ratings are the catalog's launch values; the first
# review on a movie replaces them with the aggregated review average.
MOVIES_SEED = [
    {
        "title": "The Shawshank Redemption",
        "genre": ["Drama"],
        "release_year": 1994,
        "director": "Frank Darabont",
        "cast": ["Tim Robbins", "Morgan Freeman", "Bob Gunton"],
        "synopsis": "Two imprisoned men bond over a number of years, finding solace and eventual redemption through acts of common decency.",
        "poster_url": "https://via.placeholder.com/300x450?text=Shawshank",
        "average_rating": 4.8,
    },
    {
        "title": "The Godfather",
        "genre": ["Crime", "Drama"],
        "release_year": 1972,
        "director": "Francis Ford Coppola",
        "cast": ["Marlon Brando", "Al Pacino", "James Caan"],
        "synopsis": "The aging patriarch of an organized crime dynasty transfers control of his clandestine empire to his reluctant son.",
        "poster_url": "https://via.placeholder.com/300x450?text=Godfather",
        "average_rating": 4.7,
    },
    {
        "title": "Pulp Fiction",
        "genre": ["Crime", "Drama"],
        "release_year": 1994,
        "director": "Quentin Tarantino",
        "cast": ["John Travolta", "Uma Thurman", "Samuel L. Jackson"],
        "synopsis": "The lives of two mob hitmen, a boxer, a gangster and his wife intertwine in four tales of violence and redemption.",
        "poster_url": "https://via.placeholder.com/300x450?text=Pulp+Fiction",
        "average_rating": 4.6,
    },
]


def seed_store(store: RecordStore) -> int:
    """Insert the starter catalog into `store`. Returns the number of movies added."""
    for entry in MOVIES_SEED:
        movie = Movie(
            **{**entry, "cast": [{"name": name} for name in entry["cast"]]}
        )
        store.insert(MOVIES, movie)

    logger.info("Seeded catalog", extra={"movies": len(MOVIES_SEED)})
    return len(MOVIES_SEED)
