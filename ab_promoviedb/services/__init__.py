from ab_promoviedb.services.base import BaseService
from ab_promoviedb.services.certification import CertificationService
from ab_promoviedb.services.credit import CreditService
from ab_promoviedb.services.genre import GenreService
from ab_promoviedb.services.movie import MovieService
from ab_promoviedb.services.person import PersonService
from ab_promoviedb.services.search import SearchService
from ab_promoviedb.services.status import StatusService
from ab_promoviedb.services.tv_series import TvSeriesService

__all__ = [
    "BaseService",
    "CertificationService",
    "CreditService",
    "GenreService",
    "MovieService",
    "PersonService",
    "SearchService",
    "StatusService",
    "TvSeriesService",
]
