"""
API Configuration Constants

This module contains all constants related to the TVDB v4 API:
base URL, request defaults and route templates.
"""

from typing import ClassVar

from .http_codes import ContentTypes, HTTPHeaders

BASE_SECOND = 1


class Application:
    """Package identity constants."""

    NAME = "tvdb"
    VERSION = "0.3.0"


class TVDBConfig:
    """TVDB API specific configuration."""

    BASE_URL = "https://api4.thetvdb.com/v4"

    REQUEST_TIMEOUT = 30 * BASE_SECOND  # 30 seconds

    USER_AGENT = f"{Application.NAME}-python/{Application.VERSION}"

    HEADERS: ClassVar[dict[str, str]] = {
        HTTPHeaders.ACCEPT: ContentTypes.JSON,
    }

    DEFAULT_SEASON_TYPE = "default"


class TVDBRoutes:
    """Route templates, relative to TVDBConfig.BASE_URL."""

    LOGIN = "/login"

    ARTWORK = "/artwork/{id}"
    ARTWORK_EXTENDED = "/artwork/{id}/extended"
    ARTWORK_STATUSES = "/artwork/statuses"
    ARTWORK_TYPES = "/artwork/types"

    AWARDS = "/awards"
    AWARD = "/awards/{id}"
    AWARD_EXTENDED = "/awards/{id}/extended"
    AWARD_CATEGORY = "/awards/categories/{id}"
    AWARD_CATEGORY_EXTENDED = "/awards/categories/{id}/extended"

    CHARACTER = "/characters/{id}"

    COMPANIES = "/companies"
    COMPANY = "/companies/{id}"
    COMPANY_TYPES = "/companies/types"

    CONTENT_RATINGS = "/content/ratings"
    COUNTRIES = "/countries"
    ENTITY_TYPES = "/entities"

    EPISODE = "/episodes/{id}"
    EPISODE_EXTENDED = "/episodes/{id}/extended"
    EPISODE_TRANSLATION = "/episodes/{id}/translations/{language}"

    GENDERS = "/genders"
    GENRES = "/genres"
    GENRE = "/genres/{id}"
    LANGUAGES = "/languages"

    LISTS = "/lists"
    LIST = "/lists/{id}"
    LIST_EXTENDED = "/lists/{id}/extended"
    LIST_TRANSLATION = "/lists/{id}/translations/{language}"

    MOVIES = "/movies"
    MOVIE = "/movies/{id}"
    MOVIE_EXTENDED = "/movies/{id}/extended"
    MOVIE_STATUSES = "/movies/statuses"
    MOVIE_TRANSLATION = "/movies/{id}/translations/{language}"

    PERSON = "/people/{id}"
    PERSON_EXTENDED = "/people/{id}/extended"
    PERSON_TYPES = "/people/types"
    PERSON_TRANSLATION = "/people/{id}/translations/{language}"

    SEARCH = "/search"

    SEASONS = "/seasons"
    SEASON = "/seasons/{id}"
    SEASON_EXTENDED = "/seasons/{id}/extended"
    SEASON_TYPES = "/seasons/types"
    SEASON_TRANSLATION = "/seasons/{id}/translations/{language}"

    SERIES_ALL = "/series"
    SERIES = "/series/{id}"
    SERIES_EXTENDED = "/series/{id}/extended"
    SERIES_EPISODES = "/series/{id}/episodes/{season_type}"
    SERIES_STATUSES = "/series/statuses"
    SERIES_TRANSLATION = "/series/{id}/translations/{language}"

    SOURCE_TYPES = "/sources/types"
    UPDATES = "/updates"
