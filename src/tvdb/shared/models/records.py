"""TVDB v4 record schemas (parsed shape).

These TypedDicts describe records after normalization: temporal fields are
``date``/``datetime`` values, nullable relations are ``None`` rather than
``0``/``""``, and numeric strings are ``int``. Records that need no
normalization are declared here once and shared with the raw schema.

All TypedDicts are non-total: the API omits keys freely, and records carry
through any key the schema does not list.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, TypedDict


# Pass-through records --------------------------------------------------------


class Alias(TypedDict, total=False):
    language: str
    name: str


class ArtworkBaseRecord(TypedDict, total=False):
    id: int
    image: str
    language: str
    score: float
    thumbnail: str
    type: int


class ArtworkStatus(TypedDict, total=False):
    id: int
    name: str


class ArtworkType(TypedDict, total=False):
    height: int
    id: int
    imageFormat: str
    name: str
    recordType: str
    slug: str
    thumbHeight: int
    thumbWidth: int
    width: int


class AwardBaseRecord(TypedDict, total=False):
    id: int
    name: str


class AwardCategoryBaseRecord(TypedDict, total=False):
    allowCoNominees: bool
    award: AwardBaseRecord
    forMovies: bool
    forSeries: bool
    id: int
    name: str


class AwardExtendedRecord(AwardBaseRecord, total=False):
    categories: list[AwardCategoryBaseRecord]
    score: int


class Biography(TypedDict, total=False):
    biography: str
    language: str


class CompanyType(TypedDict, total=False):
    id: int
    name: str


class ContentRating(TypedDict, total=False):
    id: int
    name: str
    country: str
    contentType: str
    order: int
    fullName: str


class Country(TypedDict, total=False):
    id: str
    name: str
    shortCode: str


class Entity(TypedDict, total=False):
    movieId: int
    order: int
    seriesId: int


class EntityType(TypedDict, total=False):
    id: int
    name: str
    hasSpecials: bool


class Gender(TypedDict, total=False):
    id: int
    name: str


class GenreBaseRecord(TypedDict, total=False):
    id: int
    name: str
    slug: str


class Language(TypedDict, total=False):
    id: str
    name: str
    nativeName: str
    shortCode: str


class NetworkBaseRecord(TypedDict, total=False):
    abbreviation: str
    country: str
    id: int
    name: str
    slug: str


class PeopleBaseRecord(TypedDict, total=False):
    aliases: list[Alias]
    id: int
    image: str
    name: str
    score: int


class PeopleType(TypedDict, total=False):
    id: int
    name: str


class RemoteID(TypedDict, total=False):
    id: str
    type: int


class Status(TypedDict, total=False):
    id: int
    keepUpdated: bool
    name: str
    recordType: str


class MovieBaseRecord(TypedDict, total=False):
    aliases: list[Alias]
    id: int
    image: str
    name: str
    nameTranslations: list[str]
    overviewTranslations: list[str]
    score: float
    slug: str
    status: Status


class SeasonType(TypedDict, total=False):
    id: int
    name: str
    type: str


class SeasonBaseRecord(TypedDict, total=False):
    abbreviation: str
    country: str
    id: int
    image: str
    imageType: int
    name: str
    nameTranslations: list[str]
    number: int
    overviewTranslations: list[str]
    seriesId: int
    slug: str
    type: SeasonType


class SeriesAirsDays(TypedDict, total=False):
    friday: bool
    monday: bool
    saturday: bool
    sunday: bool
    thursday: bool
    tuesday: bool
    wednesday: bool


class SourceType(TypedDict, total=False):
    id: int
    name: str
    postfix: str
    prefix: str
    slug: str
    sort: int


class StudioBaseRecord(TypedDict, total=False):
    id: int
    name: str
    parentStudio: int


class TagOption(TypedDict, total=False):
    helpText: str
    id: int
    name: str
    tag: int
    tagName: str


class Trailer(TypedDict, total=False):
    id: int
    language: str
    name: str
    url: str


class Translation(TypedDict, total=False):
    aliases: list[str]
    isAlias: bool
    isPrimary: bool
    language: str
    name: str
    overview: str


# Normalized records ----------------------------------------------------------


class ArtworkExtendedRecord(ArtworkBaseRecord, total=False):
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
    updatedAt: datetime
    width: int


class Character(TypedDict, total=False):
    aliases: list[Alias]
    episodeId: int | None
    id: int
    image: str | None
    isFeatured: bool
    movieId: int | None
    name: str
    nameTranslations: list[str]
    overviewTranslations: list[str]
    peopleId: int
    peopleType: str
    person: PeopleBaseRecord
    seriesId: int | None
    sort: int
    type: int
    url: str | None


class Company(TypedDict, total=False):
    activeDate: date | None
    aliases: list[Alias]
    country: str
    id: int
    inactiveDate: date | None
    name: str
    nameTranslations: list[str]
    overviewTranslations: list[str]
    primaryCompanyType: int
    slug: str


class EntityUpdate(TypedDict, total=False):
    entityType: str
    method: str
    recordId: int
    timeStamp: datetime


class EpisodeBaseRecord(TypedDict, total=False):
    aired: date | None
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


class EpisodeExtendedRecord(EpisodeBaseRecord, total=False):
    airsAfterSeason: int
    airsBeforeEpisode: int
    airsBeforeSeason: int
    awards: list[AwardBaseRecord]
    characters: list[Character] | None
    contentRatings: list[ContentRating]
    network: NetworkBaseRecord
    productionCode: str
    remoteIds: list[RemoteID]
    tagOptions: list[TagOption]
    trailers: list[Trailer]


class ListBaseRecord(TypedDict, total=False):
    aliases: list[Alias]
    id: int
    isOfficial: bool
    name: str
    nameTranslations: list[str]
    overview: str
    overviewTranslations: list[str]
    url: str | None


class ListExtendedRecord(ListBaseRecord, total=False):
    entities: list[Entity]
    score: int


class Release(TypedDict, total=False):
    country: str
    date: date | None
    detail: str


class MovieExtendedRecord(MovieBaseRecord, total=False):
    artworks: list[ArtworkBaseRecord]
    audioLanguages: list[str] | None
    awards: list[AwardBaseRecord] | None
    boxOffice: str
    budget: str
    characters: list[Character] | None
    lists: list[ListBaseRecord]
    genres: list[GenreBaseRecord]
    originalCountry: str
    originalLanguage: str | None
    releases: list[Release] | None
    remoteIds: list[RemoteID]
    studios: list[StudioBaseRecord]
    subtitleLanguages: list[str] | None
    tagOptions: list[TagOption] | None
    trailers: list[Trailer] | None


class PeopleExtendedRecord(PeopleBaseRecord, total=False):
    awards: list[AwardBaseRecord]
    biographies: list[Biography]
    birth: date | None
    birthPlace: str
    characters: list[Character] | None
    death: date | None
    gender: int
    races: list[dict[str, Any]]
    remoteIds: list[RemoteID]
    tagOptions: list[TagOption]


class SearchResult(TypedDict, total=False):
    aliases: list[str]
    companies: list[str]
    company_type: str
    country: str | None
    director: str
    extended_title: str
    genres: list[str]
    id: str
    image_url: str | None
    name: str
    name_translated: str | None
    network: str | None
    official_list: str
    overview: str | None
    overview_translated: list[str]
    posters: list[str]
    primary_language: str | None
    primary_type: str | None
    status: str | None
    translations_with_lang: str
    tvdb_id: int
    type: str
    year: int | None


class SeasonExtendedRecord(SeasonBaseRecord, total=False):
    artwork: list[ArtworkBaseRecord]
    episodes: list[EpisodeBaseRecord] | None
    trailers: list[Trailer]


class SeriesBaseRecord(TypedDict, total=False):
    abbreviation: str
    aliases: list[Alias]
    country: str
    defaultSeasonType: int
    firstAired: date | None
    id: int
    image: str
    isOrderRandomized: bool
    lastAired: date | None
    name: str
    nameTranslations: list[str]
    nextAired: date | None
    originalCountry: str
    originalLanguage: str
    originalNetwork: NetworkBaseRecord
    overviewTranslations: list[str]
    score: float
    slug: str
    status: Status


class SeriesExtendedRecord(SeriesBaseRecord, total=False):
    airsDays: SeriesAirsDays
    airsTime: str
    airsTimeUTC: int | None
    artworks: list[ArtworkBaseRecord]
    characters: list[Character] | None
    lists: Any
    genres: list[GenreBaseRecord]
    networks: list[NetworkBaseRecord]
    remoteIds: list[RemoteID]
    seasons: list[SeasonBaseRecord]
    trailers: list[Trailer]


class AwardNomineeBaseRecord(TypedDict, total=False):
    character: Character | None
    details: str
    episode: EpisodeBaseRecord | None
    id: int
    isWinner: bool
    movie: MovieBaseRecord | None
    series: SeriesBaseRecord | None
    year: int | None


class AwardCategoryExtendedRecord(AwardCategoryBaseRecord, total=False):
    nominees: list[AwardNomineeBaseRecord] | None


class SeriesEpisodes(TypedDict):
    series: SeriesBaseRecord
    episodes: list[EpisodeBaseRecord]
