from .omdb_client import OmdbClient, OMDB_URL

__all__ = ["OmdbClient", "OMDB_URL"]
