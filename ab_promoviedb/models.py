"""
响应数据模型

所有字段均可缺失（默认为 None），未声明的字段会被忽略
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class MovieDBModel(BaseModel):
    """模型基类：忽略多余字段，类型校验的严格程度由解码器控制"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Genre(MovieDBModel):
    id: int | None = None
    name: str | None = None


class Cast(MovieDBModel):
    id: int | None = None
    cast_id: int | None = None
    credit_id: str | None = None
    name: str | None = None
    original_name: str | None = None
    character: str | None = None
    gender: int | None = None
    profile_path: str | None = None
    order: int | None = None


class Crew(MovieDBModel):
    id: int | None = None
    credit_id: str | None = None
    name: str | None = None
    original_name: str | None = None
    department: str | None = None
    job: str | None = None
    gender: int | None = None
    profile_path: str | None = None


class Credits(MovieDBModel):
    id: int | None = None
    cast: list[Cast] | None = None
    crew: list[Crew] | None = None


class Image(MovieDBModel):
    aspect_ratio: float | None = None
    file_path: str | None = None
    height: int | None = None
    width: int | None = None
    # 接口字段名为 iso_639_1
    language: str | None = Field(default=None, alias="iso_639_1")
    vote_average: float | None = None
    vote_count: int | None = None


class ImageCollection(MovieDBModel):
    """图片列表，电影/剧集返回 backdrops、logos、posters，人物返回 profiles"""

    id: int | None = None
    backdrops: list[Image] | None = None
    logos: list[Image] | None = None
    posters: list[Image] | None = None
    profiles: list[Image] | None = None


class PagedResponse(MovieDBModel, Generic[T]):
    """分页响应，如 PagedResponse[MovieSummary]"""

    page: int | None = None
    results: list[T] | None = None
    total_pages: int | None = None
    total_results: int | None = None


class MovieSummary(MovieDBModel):
    id: int | None = None
    title: str | None = None
    original_title: str | None = None
    overview: str | None = None
    release_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genre_ids: list[int] | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    adult: bool | None = None


class TvSeriesSummary(MovieDBModel):
    id: int | None = None
    name: str | None = None
    original_name: str | None = None
    overview: str | None = None
    first_air_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genre_ids: list[int] | None = None
    origin_country: list[str] | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class MovieDetails(MovieDBModel):
    id: int | None = None
    imdb_id: str | None = None
    title: str | None = None
    original_title: str | None = None
    original_language: str | None = None
    overview: str | None = None
    tagline: str | None = None
    status: str | None = None
    release_date: str | None = None
    runtime: int | None = None
    budget: int | None = None
    revenue: int | None = None
    homepage: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genres: list[Genre] | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    adult: bool | None = None
    video: bool | None = None
    # append_to_response=credits 时携带
    credits: Credits | None = None


class TvSeriesDetails(MovieDBModel):
    id: int | None = None
    name: str | None = None
    original_name: str | None = None
    original_language: str | None = None
    overview: str | None = None
    tagline: str | None = None
    status: str | None = None
    type: str | None = None
    first_air_date: str | None = None
    last_air_date: str | None = None
    number_of_seasons: int | None = None
    number_of_episodes: int | None = None
    episode_run_time: list[int] | None = None
    in_production: bool | None = None
    homepage: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genres: list[Genre] | None = None
    origin_country: list[str] | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    credits: Credits | None = None


class PersonDetails(MovieDBModel):
    id: int | None = None
    imdb_id: str | None = None
    name: str | None = None
    also_known_as: list[str] | None = None
    biography: str | None = None
    birthday: str | None = None
    deathday: str | None = None
    gender: int | None = None
    place_of_birth: str | None = None
    known_for_department: str | None = None
    profile_path: str | None = None
    homepage: str | None = None
    popularity: float | None = None
    adult: bool | None = None
