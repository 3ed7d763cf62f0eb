"""TVDB v4 record schemas (wire shape).

Raw records are exactly what the API sends: epoch integers, ISO date
strings that may be empty, ``0`` or ``""`` for missing relations, and
numeric identifiers transmitted as strings. Only entities whose shape
differs from the parsed schema are declared here.
"""

from __future__ import annotations

from typing import Any, TypedDict

from tvdb.shared.models.records import (
    Alias,
    ArtworkBaseRecord,
    ArtworkStatus,
    AwardBaseRecord,
    AwardCategoryBaseRecord,
    Biography,
    ContentRating,
    Entity,
    GenreBaseRecord,
    ListBaseRecord,
    MovieBaseRecord,
    NetworkBaseRecord,
    PeopleBaseRecord,
    RemoteID,
    SeasonBaseRecord,
    SeriesAirsDays,
    Status,
    StudioBaseRecord,
    TagOption,
    Trailer,
)


class RawArtworkExtendedRecord(ArtworkBaseRecord, total=False):
    episodeId: int | None
    height: int
    movieId: int | None
    networkId: int | None
    peopleId: int | None
    seasonId: int | None
    seriesId: int | None
    seriesPeopleId: int
    status: ArtworkStatus
    tagOptions: list[TagOption]
    thumbnailHeight: int
    thumbnailWidth: int
    updatedAt: int  # epoch seconds
    width: int


class RawCharacter(TypedDict, total=False):
    aliases: list[Alias]
    episodeId: int  # 0 when unset
    id: int
    image: str
    isFeatured: bool
    movieId: int  # 0 when unset
    name: str
    nameTranslations: list[str]
    overviewTranslations: list[str]
    peopleId: int
    peopleType: str
    person: PeopleBaseRecord
    seriesId: int  # 0 when unset
    sort: int
    type: int
    url: str


class RawCompany(TypedDict, total=False):
    activeDate: str
    aliases: list[Alias]
    country: str
    id: int
    inactiveDate: str
    name: str
    nameTranslations: list[str]
    overviewTranslations: list[str]
    primaryCompanyType: int
    slug: str


class RawEntityUpdate(TypedDict, total=False):
    entityType: str
    method: str
    recordId: int
    timeStamp: int  # epoch seconds


class RawEpisodeBaseRecord(TypedDict, total=False):
    aired: str
    id: int
    image: str
    imageType: int
    isMovie: int
    name: str
    nameTranslations: list[str]
    number: int
    overviewTranslations: list[str]
    runtime: int
    seasonNumber: int
    seasons: list[SeasonBaseRecord]
    seriesId: int


class RawEpisodeExtendedRecord(RawEpisodeBaseRecord, total=False):
    airsAfterSeason: int
    airsBeforeEpisode: int
    airsBeforeSeason: int
    awards: list[AwardBaseRecord]
    characters: list[RawCharacter] | None
    contentRatings: list[ContentRating]
    network: NetworkBaseRecord
    productionCode: str
    remoteIds: list[RemoteID]
    tagOptions: list[TagOption]
    trailers: list[Trailer]


class RawListBaseRecord(TypedDict, total=False):
    aliases: list[Alias]
    id: int
    isOfficial: bool
    name: str
    nameTranslations: list[str]
    overview: str
    overviewTranslations: list[str]
    url: str


class RawListExtendedRecord(RawListBaseRecord, total=False):
    entities: list[Entity]
    score: int


class RawRelease(TypedDict, total=False):
    country: str
    date: str
    detail: str


class RawMovieExtendedRecord(MovieBaseRecord, total=False):
    artworks: list[ArtworkBaseRecord]
    audioLanguages: list[str] | None
    awards: list[AwardBaseRecord] | None
    boxOffice: str
    budget: str
    characters: list[RawCharacter] | None
    lists: list[ListBaseRecord]
    genres: list[GenreBaseRecord]
    originalCountry: str
    originalLanguage: str | None
    releases: list[RawRelease] | None
    remoteIds: list[RemoteID]
    studios: list[StudioBaseRecord]
    subtitleLanguages: list[str] | None
    tagOptions: list[TagOption] | None
    trailers: list[Trailer] | None


class RawPeopleExtendedRecord(PeopleBaseRecord, total=False):
    awards: list[AwardBaseRecord]
    biographies: list[Biography]
    birth: str
    birthPlace: str
    characters: list[RawCharacter] | None
    death: str
    gender: int
    races: list[dict[str, Any]]
    remoteIds: list[RemoteID]
    tagOptions: list[TagOption]


class RawSearchResult(TypedDict, total=False):
    aliases: list[str]
    companies: list[str]
    company_type: str
    country: str
    director: str
    extended_title: str
    genres: list[str]
    id: str
    image_url: str
    name: str
    name_translated: str
    network: str
    official_list: str
    overview: str
    overview_translated: list[str]
    posters: list[str]
    primary_language: str
    primary_type: str
    status: str
    translations_with_lang: str
    tvdb_id: str
    type: str
    year: str


class RawSeasonExtendedRecord(SeasonBaseRecord, total=False):
    artwork: list[ArtworkBaseRecord]
    episodes: list[RawEpisodeBaseRecord] | None
    trailers: list[Trailer]


class RawSeriesBaseRecord(TypedDict, total=False):
    abbreviation: str
    aliases: list[Alias]
    country: str
    defaultSeasonType: int
    firstAired: str
    id: int
    image: str
    isOrderRandomized: bool
    lastAired: str
    name: str
    nameTranslations: list[str]
    nextAired: str
    originalCountry: str
    originalLanguage: str
    originalNetwork: NetworkBaseRecord
    overviewTranslations: list[str]
    score: float
    slug: str
    status: Status


class RawSeriesExtendedRecord(RawSeriesBaseRecord, total=False):
    airsDays: SeriesAirsDays
    airsTime: str
    airsTimeUTC: int | None
    artworks: list[ArtworkBaseRecord]
    characters: list[RawCharacter] | None
    lists: Any
    genres: list[GenreBaseRecord]
    networks: list[NetworkBaseRecord]
    remoteIds: list[RemoteID]
    seasons: list[SeasonBaseRecord]
    trailers: list[Trailer]


class RawAwardNomineeBaseRecord(TypedDict, total=False):
    character: RawCharacter | None
    details: str
    episode: RawEpisodeBaseRecord | None
    id: int
    isWinner: bool
    movie: MovieBaseRecord | None
    series: RawSeriesBaseRecord | None
    year: str


class RawAwardCategoryExtendedRecord(AwardCategoryBaseRecord, total=False):
    nominees: list[RawAwardNomineeBaseRecord] | None


class RawSeriesEpisodes(TypedDict):
    series: RawSeriesBaseRecord
    episodes: list[RawEpisodeBaseRecord]
