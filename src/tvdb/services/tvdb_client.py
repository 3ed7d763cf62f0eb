"""Async client for TheTVDB v4 API.

:class:`TVDBClient` exposes one coroutine per API route. Each call reads the
session's current bearer token, dispatches through a shared
:class:`~tvdb.services.request_manager.RequestManager` and passes the
``data`` payload through the matching normalizer, so dates come back as
:class:`datetime.date` values and epoch timestamps as aware
:class:`datetime.datetime` values.

Example:
    async with TVDBClient("my-api-key") as client:
        await client.login()
        series = await client.series(121361)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from types import TracebackType
from typing import Any, cast

from tvdb.config import Settings, get_config, require_api_key
from tvdb.shared.constants import HTTPHeaders, TVDBConfig, TVDBRoutes
from tvdb.shared.models.records import (
    ArtworkBaseRecord,
    ArtworkExtendedRecord,
    ArtworkStatus,
    ArtworkType,
    AwardBaseRecord,
    AwardCategoryBaseRecord,
    AwardCategoryExtendedRecord,
    AwardExtendedRecord,
    Character,
    Company,
    CompanyType,
    ContentRating,
    Country,
    EntityType,
    EntityUpdate,
    EpisodeBaseRecord,
    EpisodeExtendedRecord,
    Gender,
    GenreBaseRecord,
    Language,
    ListBaseRecord,
    ListExtendedRecord,
    MovieBaseRecord,
    MovieExtendedRecord,
    PeopleBaseRecord,
    PeopleExtendedRecord,
    PeopleType,
    SearchResult,
    SeasonBaseRecord,
    SeasonExtendedRecord,
    SeasonType,
    SeriesBaseRecord,
    SeriesEpisodes,
    SeriesExtendedRecord,
    SourceType,
    Status,
    Translation,
)

from .normalizers import (
    normalize_artwork,
    normalize_award_category,
    normalize_character,
    normalize_company,
    normalize_entity_update,
    normalize_episode,
    normalize_episode_extended,
    normalize_list,
    normalize_movie,
    normalize_person,
    normalize_search_result,
    normalize_season,
    normalize_series,
    normalize_series_episodes,
    normalize_series_extended,
)
from .request_manager import RequestManager
from .session import TVDBSession

logger = logging.getLogger(__name__)


class TVDBClient:
    """Typed async client for TheTVDB v4 API.

    Args:
        api_key: The TVDB API key
        auto_relogin: Stored on the session; requests are never retried
        request_manager: Dispatcher to use; a default one is created if None
        pin: Subscriber PIN used when login is called without one
    """

    def __init__(
        self,
        api_key: str,
        auto_relogin: bool = True,
        request_manager: RequestManager | None = None,
        *,
        pin: str | None = None,
    ) -> None:
        self.request_manager = request_manager or RequestManager()
        self.session = TVDBSession(
            api_key,
            self.request_manager,
            pin=pin,
            auto_relogin=auto_relogin,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> TVDBClient:
        """Build a client from application settings.

        Args:
            settings: Settings to use; the global configuration if None

        Raises:
            SecurityError: If no API key is configured
        """
        settings = settings or get_config()
        tvdb_settings = settings.api.tvdb
        api_key = require_api_key(settings)

        request_manager = RequestManager(
            base_url=tvdb_settings.base_url,
            timeout=tvdb_settings.timeout,
            ssl_context=None if tvdb_settings.verify_ssl else False,
            headers={HTTPHeaders.USER_AGENT: tvdb_settings.user_agent},
        )
        client = cls(
            api_key,
            tvdb_settings.auto_relogin,
            request_manager,
            pin=tvdb_settings.pin,
        )
        logger.debug("TVDB client created for %s", tvdb_settings.base_url)
        return client

    def __repr__(self) -> str:
        return f"TVDBClient(base_url={self.request_manager.base_url}, session={self.session!r})"

    async def __aenter__(self) -> TVDBClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP session."""
        await self.request_manager.close()

    async def login(self, pin: str | None = None) -> None:
        """Authenticate and store the bearer token on the session.

        The PIN is remembered by the session, so a later ``login()`` without
        arguments sends it again. Pass ``pin=""`` to log in without a PIN
        and clear the remembered one.

        Args:
            pin: Optional subscriber PIN; None reuses the PIN already held
                by the session
        """
        await self.session.login(pin if pin is not None else self.session.pin)

    async def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request_manager.get(path, self.session.token, params)

    # Artwork

    async def artwork(self, id: int) -> ArtworkBaseRecord:
        return await self._get(TVDBRoutes.ARTWORK.format(id=id))

    async def artwork_extended(self, id: int) -> ArtworkExtendedRecord:
        data = await self._get(TVDBRoutes.ARTWORK_EXTENDED.format(id=id))
        return normalize_artwork(data)

    async def artwork_statuses(self) -> list[ArtworkStatus]:
        return await self._get(TVDBRoutes.ARTWORK_STATUSES)

    async def artwork_types(self) -> list[ArtworkType]:
        return await self._get(TVDBRoutes.ARTWORK_TYPES)

    # Awards

    async def all_awards(self) -> list[AwardBaseRecord]:
        return await self._get(TVDBRoutes.AWARDS)

    async def award(self, id: int) -> AwardBaseRecord:
        return await self._get(TVDBRoutes.AWARD.format(id=id))

    async def award_extended(self, id: int) -> AwardExtendedRecord:
        return await self._get(TVDBRoutes.AWARD_EXTENDED.format(id=id))

    async def award_category(self, id: int) -> AwardCategoryBaseRecord:
        return await self._get(TVDBRoutes.AWARD_CATEGORY.format(id=id))

    async def award_category_extended(self, id: int) -> AwardCategoryExtendedRecord:
        data = await self._get(TVDBRoutes.AWARD_CATEGORY_EXTENDED.format(id=id))
        return normalize_award_category(data)

    # Characters and companies

    async def character(self, id: int) -> Character:
        data = await self._get(TVDBRoutes.CHARACTER.format(id=id))
        return normalize_character(data)

    async def all_companies(self, page: int | None = None) -> list[Company]:
        data = await self._get(TVDBRoutes.COMPANIES, {"page": page})
        return [normalize_company(company) for company in data]

    async def company(self, id: int) -> Company:
        data = await self._get(TVDBRoutes.COMPANY.format(id=id))
        return normalize_company(data)

    async def company_types(self) -> list[CompanyType]:
        return await self._get(TVDBRoutes.COMPANY_TYPES)

    # Lookup tables

    async def content_ratings(self) -> list[ContentRating]:
        return await self._get(TVDBRoutes.CONTENT_RATINGS)

    async def countries(self) -> list[Country]:
        return await self._get(TVDBRoutes.COUNTRIES)

    async def entity_types(self) -> list[EntityType]:
        return await self._get(TVDBRoutes.ENTITY_TYPES)

    async def genders(self) -> list[Gender]:
        return await self._get(TVDBRoutes.GENDERS)

    async def all_genres(self) -> list[GenreBaseRecord]:
        return await self._get(TVDBRoutes.GENRES)

    async def genre(self, id: int) -> GenreBaseRecord:
        return await self._get(TVDBRoutes.GENRE.format(id=id))

    async def languages(self) -> list[Language]:
        return await self._get(TVDBRoutes.LANGUAGES)

    async def source_types(self) -> list[SourceType]:
        return await self._get(TVDBRoutes.SOURCE_TYPES)

    # Episodes

    async def episode(self, id: int) -> EpisodeBaseRecord:
        data = await self._get(TVDBRoutes.EPISODE.format(id=id))
        return normalize_episode(data)

    async def episode_extended(self, id: int) -> EpisodeExtendedRecord:
        data = await self._get(TVDBRoutes.EPISODE_EXTENDED.format(id=id))
        return normalize_episode_extended(data)

    async def episode_translation(self, id: int, language: str) -> Translation:
        return await self._get(TVDBRoutes.EPISODE_TRANSLATION.format(id=id, language=language))

    # Lists

    async def all_lists(self, page: int | None = None) -> list[ListBaseRecord]:
        data = await self._get(TVDBRoutes.LISTS, {"page": page})
        return [normalize_list(record) for record in data]

    async def list(self, id: int) -> ListBaseRecord:
        data = await self._get(TVDBRoutes.LIST.format(id=id))
        return normalize_list(data)

    async def list_extended(self, id: int) -> ListExtendedRecord:
        data = await self._get(TVDBRoutes.LIST_EXTENDED.format(id=id))
        return cast(ListExtendedRecord, normalize_list(data))

    async def list_translation(self, id: int, language: str) -> Translation:
        return await self._get(TVDBRoutes.LIST_TRANSLATION.format(id=id, language=language))

    # Movies

    async def all_movies(self, page: int | None = None) -> list[MovieBaseRecord]:
        return await self._get(TVDBRoutes.MOVIES, {"page": page})

    async def movie(self, id: int) -> MovieBaseRecord:
        return await self._get(TVDBRoutes.MOVIE.format(id=id))

    async def movie_extended(self, id: int) -> MovieExtendedRecord:
        data = await self._get(TVDBRoutes.MOVIE_EXTENDED.format(id=id))
        return normalize_movie(data)

    async def movie_statuses(self) -> list[Status]:
        return await self._get(TVDBRoutes.MOVIE_STATUSES)

    async def movie_translation(self, id: int, language: str) -> Translation:
        return await self._get(TVDBRoutes.MOVIE_TRANSLATION.format(id=id, language=language))

    # People

    async def person(self, id: int) -> PeopleBaseRecord:
        return await self._get(TVDBRoutes.PERSON.format(id=id))

    async def person_extended(self, id: int) -> PeopleExtendedRecord:
        data = await self._get(TVDBRoutes.PERSON_EXTENDED.format(id=id))
        return normalize_person(data)

    async def person_types(self) -> list[PeopleType]:
        return await self._get(TVDBRoutes.PERSON_TYPES)

    async def person_translation(self, id: int, language: str) -> Translation:
        return await self._get(TVDBRoutes.PERSON_TRANSLATION.format(id=id, language=language))

    # Search

    async def search(
        self,
        query: str,
        type: str | None = None,
        **filters: Any,
    ) -> list[SearchResult]:
        """Search series, movies, people and companies.

        Args:
            query: Search text
            type: Restrict results to one record type (e.g. ``"series"``)
            **filters: Additional query parameters accepted by ``/search``,
                such as ``year``, ``language``, ``offset`` or ``limit``

        Returns:
            Normalized search results
        """
        params = {"query": query, "type": type, **filters}
        data = await self._get(TVDBRoutes.SEARCH, params)
        return [normalize_search_result(result) for result in data]

    # Seasons

    async def all_seasons(self, page: int | None = None) -> list[SeasonBaseRecord]:
        return await self._get(TVDBRoutes.SEASONS, {"page": page})

    async def season(self, id: int) -> SeasonBaseRecord:
        return await self._get(TVDBRoutes.SEASON.format(id=id))

    async def season_extended(self, id: int) -> SeasonExtendedRecord:
        data = await self._get(TVDBRoutes.SEASON_EXTENDED.format(id=id))
        return normalize_season(data)

    async def season_types(self) -> list[SeasonType]:
        return await self._get(TVDBRoutes.SEASON_TYPES)

    async def season_translation(self, id: int, language: str) -> Translation:
        return await self._get(TVDBRoutes.SEASON_TRANSLATION.format(id=id, language=language))

    # Series

    async def all_series(self, page: int | None = None) -> list[SeriesBaseRecord]:
        data = await self._get(TVDBRoutes.SERIES_ALL, {"page": page})
        return [normalize_series(series) for series in data]

    async def series(self, id: int) -> SeriesBaseRecord:
        data = await self._get(TVDBRoutes.SERIES.format(id=id))
        return normalize_series(data)

    async def series_extended(self, id: int) -> SeriesExtendedRecord:
        data = await self._get(TVDBRoutes.SERIES_EXTENDED.format(id=id))
        return normalize_series_extended(data)

    async def series_episodes(
        self,
        id: int,
        season_type: str = TVDBConfig.DEFAULT_SEASON_TYPE,
        page: int | None = None,
    ) -> SeriesEpisodes:
        """Fetch a series together with its episodes for one season ordering.

        Args:
            id: Series ID
            season_type: Season ordering, e.g. ``"default"`` or ``"dvd"``
            page: Zero-indexed page of episodes
        """
        path = TVDBRoutes.SERIES_EPISODES.format(id=id, season_type=season_type)
        data = await self._get(path, {"page": page})
        return normalize_series_episodes(data)

    async def series_statuses(self) -> list[Status]:
        return await self._get(TVDBRoutes.SERIES_STATUSES)

    async def series_translation(self, id: int, language: str) -> Translation:
        return await self._get(TVDBRoutes.SERIES_TRANSLATION.format(id=id, language=language))

    # Updates

    async def updates(
        self,
        since: int | datetime,
        type: str | None = None,
        action: str | None = None,
        page: int | None = None,
    ) -> list[EntityUpdate]:
        """List entities changed since a point in time.

        Args:
            since: Epoch seconds, or a datetime converted to whole epoch seconds
            type: Entity type filter (e.g. ``"series"``)
            action: ``"create"``, ``"update"`` or ``"delete"``
            page: Zero-indexed page
        """
        if isinstance(since, datetime):
            since = int(since.timestamp())
        params = {"since": since, "type": type, "action": action, "page": page}
        data = await self._get(TVDBRoutes.UPDATES, params)
        return [normalize_entity_update(update) for update in data]


TVDB = TVDBClient

__all__ = ["TVDB", "TVDBClient"]
