"""Normalization of raw TVDB records into the parsed schema.

Every ``normalize_*`` function takes a raw wire record and returns a new
parsed record. The input is never mutated: the result is a shallow copy of
the raw record with the transformed fields replaced, so keys the schema
does not list are carried through untouched.

Field rules:

* epoch seconds -> timezone-aware UTC ``datetime``
* ISO date string -> ``date``; empty or absent -> ``None``
* falsy wire values (``0``, ``""``) of nullable fields -> ``None``
* numeric strings -> ``int``; empty or absent -> ``None``
* nested raw entities are normalized recursively
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone
from typing import Any, TypeVar, cast

from tvdb.shared.errors import ErrorCode, create_data_processing_error
from tvdb.shared.models.raw_records import (
    RawArtworkExtendedRecord,
    RawAwardCategoryExtendedRecord,
    RawAwardNomineeBaseRecord,
    RawCharacter,
    RawCompany,
    RawEntityUpdate,
    RawEpisodeBaseRecord,
    RawEpisodeExtendedRecord,
    RawListBaseRecord,
    RawMovieExtendedRecord,
    RawPeopleExtendedRecord,
    RawRelease,
    RawSearchResult,
    RawSeasonExtendedRecord,
    RawSeriesBaseRecord,
    RawSeriesEpisodes,
    RawSeriesExtendedRecord,
)
from tvdb.shared.models.records import (
    ArtworkExtendedRecord,
    AwardCategoryExtendedRecord,
    AwardNomineeBaseRecord,
    Character,
    Company,
    EntityUpdate,
    EpisodeBaseRecord,
    EpisodeExtendedRecord,
    ListBaseRecord,
    MovieExtendedRecord,
    PeopleExtendedRecord,
    Release,
    SearchResult,
    SeasonExtendedRecord,
    SeriesBaseRecord,
    SeriesEpisodes,
    SeriesExtendedRecord,
)

RawT = TypeVar("RawT")
ParsedT = TypeVar("ParsedT")


# Field converters ------------------------------------------------------------


def parse_date(value: str | None, field: str = "date") -> date | None:
    """Parse an ISO date string, returning None for empty or absent values.

    Args:
        value: Date string such as ``"1997-08-13"``; a full ISO datetime is
            accepted and reduced to its date.
        field: Field name reported if the string is malformed.

    Returns:
        The parsed date, or None.

    Raises:
        DataProcessingError: If a non-empty value is not an ISO date.
    """
    if not value:
        return None
    if not isinstance(value, str):
        raise create_data_processing_error(
            f"Expected a date string for '{field}', got {type(value).__name__}",
            field=field,
            code=ErrorCode.INVALID_DATE,
            operation="parse_date",
        )
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    # fromisoformat only accepts a "Z" suffix from Python 3.11 on
    iso_value = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(iso_value).date()
    except ValueError as e:
        raise create_data_processing_error(
            f"Invalid date for '{field}': {value!r}",
            field=field,
            code=ErrorCode.INVALID_DATE,
            operation="parse_date",
            original_error=e,
        ) from e


def parse_timestamp(value: int, field: str = "timestamp") -> datetime:
    """Convert epoch seconds to a UTC datetime.

    Raises:
        DataProcessingError: If the value is not a number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise create_data_processing_error(
            f"Expected epoch seconds for '{field}', got {value!r}",
            field=field,
            code=ErrorCode.INVALID_DATE,
            operation="parse_timestamp",
        )
    return datetime.fromtimestamp(value, tz=timezone.utc)


def parse_int(value: str | int | None, field: str = "value") -> int | None:
    """Parse a numeric string, returning None for empty or absent values.

    Raises:
        DataProcessingError: If a non-empty value is not an integer.
    """
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise create_data_processing_error(
            f"Invalid integer for '{field}': {value!r}",
            field=field,
            code=ErrorCode.INVALID_NUMBER,
            operation="parse_int",
            original_error=e,
        ) from e


def null_if_falsy(value: Any) -> Any:
    """Collapse falsy wire values (0, "", empty collections) to None."""
    return value or None


def _normalize_optional(
    normalize: Callable[[RawT], ParsedT], record: RawT | None
) -> ParsedT | None:
    return normalize(record) if record else None


def _normalize_many(
    normalize: Callable[[RawT], ParsedT], records: Iterable[RawT] | None
) -> list[ParsedT] | None:
    # A null list stays null; the API sends null for some empty collections.
    if records is None:
        return None
    return [normalize(record) for record in records]


# Entity normalizers ----------------------------------------------------------


def normalize_artwork(artwork: RawArtworkExtendedRecord) -> ArtworkExtendedRecord:
    """Normalize an extended artwork record."""
    parsed: dict[str, Any] = dict(artwork)
    parsed["updatedAt"] = parse_timestamp(artwork.get("updatedAt"), "updatedAt")
    return cast(ArtworkExtendedRecord, parsed)


def normalize_character(character: RawCharacter) -> Character:
    """Normalize a character record.

    Unset relations arrive as ``0`` and empty image/url fields as ``""``;
    both become None.
    """
    parsed: dict[str, Any] = dict(character)
    parsed.update(
        episodeId=null_if_falsy(character.get("episodeId")),
        movieId=null_if_falsy(character.get("movieId")),
        seriesId=null_if_falsy(character.get("seriesId")),
        image=null_if_falsy(character.get("image")),
        url=null_if_falsy(character.get("url")),
    )
    return cast(Character, parsed)


def normalize_company(company: RawCompany) -> Company:
    """Normalize a company record."""
    parsed: dict[str, Any] = dict(company)
    parsed["activeDate"] = parse_date(company.get("activeDate"), "activeDate")
    parsed["inactiveDate"] = parse_date(company.get("inactiveDate"), "inactiveDate")
    return cast(Company, parsed)


def normalize_entity_update(update: RawEntityUpdate) -> EntityUpdate:
    """Normalize an entity update record."""
    parsed: dict[str, Any] = dict(update)
    parsed["timeStamp"] = parse_timestamp(update.get("timeStamp"), "timeStamp")
    return cast(EntityUpdate, parsed)


def normalize_episode(episode: RawEpisodeBaseRecord) -> EpisodeBaseRecord:
    """Normalize a base episode record."""
    parsed: dict[str, Any] = dict(episode)
    parsed["aired"] = parse_date(episode.get("aired"), "aired")
    return cast(EpisodeBaseRecord, parsed)


def normalize_episode_extended(episode: RawEpisodeExtendedRecord) -> EpisodeExtendedRecord:
    """Normalize an extended episode record, including its characters."""
    parsed: dict[str, Any] = dict(normalize_episode(episode))
    parsed["characters"] = _normalize_many(normalize_character, episode.get("characters"))
    return cast(EpisodeExtendedRecord, parsed)


def normalize_list(record: RawListBaseRecord) -> ListBaseRecord:
    """Normalize a list record (base or extended)."""
    parsed: dict[str, Any] = dict(record)
    parsed["url"] = null_if_falsy(record.get("url"))
    return cast(ListBaseRecord, parsed)


def normalize_release(release: RawRelease) -> Release:
    """Normalize a movie release record."""
    parsed: dict[str, Any] = dict(release)
    parsed["date"] = parse_date(release.get("date"), "date")
    return cast(Release, parsed)


def normalize_movie(movie: RawMovieExtendedRecord) -> MovieExtendedRecord:
    """Normalize an extended movie record, including characters and releases."""
    parsed: dict[str, Any] = dict(movie)
    parsed["characters"] = _normalize_many(normalize_character, movie.get("characters"))
    parsed["releases"] = _normalize_many(normalize_release, movie.get("releases"))
    return cast(MovieExtendedRecord, parsed)


def normalize_person(person: RawPeopleExtendedRecord) -> PeopleExtendedRecord:
    """Normalize an extended people record."""
    parsed: dict[str, Any] = dict(person)
    parsed["birth"] = parse_date(person.get("birth"), "birth")
    parsed["death"] = parse_date(person.get("death"), "death")
    parsed["characters"] = _normalize_many(normalize_character, person.get("characters"))
    return cast(PeopleExtendedRecord, parsed)


def normalize_search_result(result: RawSearchResult) -> SearchResult:
    """Normalize a search result.

    ``tvdb_id`` is always present and always parsed; ``year`` may be
    missing or empty.
    """
    parsed: dict[str, Any] = dict(result)
    for key in (
        "country",
        "image_url",
        "name_translated",
        "network",
        "overview",
        "primary_language",
        "primary_type",
        "status",
    ):
        parsed[key] = null_if_falsy(result.get(key))

    tvdb_id = parse_int(result.get("tvdb_id"), "tvdb_id")
    if tvdb_id is None:
        raise create_data_processing_error(
            "Search result has no tvdb_id",
            field="tvdb_id",
            code=ErrorCode.INVALID_NUMBER,
            operation="normalize_search_result",
        )
    parsed["tvdb_id"] = tvdb_id
    parsed["year"] = parse_int(result.get("year"), "year")
    return cast(SearchResult, parsed)


def normalize_series(series: RawSeriesBaseRecord) -> SeriesBaseRecord:
    """Normalize a base series record."""
    parsed: dict[str, Any] = dict(series)
    for key in ("firstAired", "lastAired", "nextAired"):
        parsed[key] = parse_date(series.get(key), key)
    return cast(SeriesBaseRecord, parsed)


def normalize_series_extended(series: RawSeriesExtendedRecord) -> SeriesExtendedRecord:
    """Normalize an extended series record, including its characters."""
    parsed: dict[str, Any] = dict(normalize_series(series))
    parsed["characters"] = _normalize_many(normalize_character, series.get("characters"))
    return cast(SeriesExtendedRecord, parsed)


def normalize_season(season: RawSeasonExtendedRecord) -> SeasonExtendedRecord:
    """Normalize an extended season record, including its episodes."""
    parsed: dict[str, Any] = dict(season)
    parsed["episodes"] = _normalize_many(normalize_episode, season.get("episodes"))
    return cast(SeasonExtendedRecord, parsed)


def normalize_award_nominee(nominee: RawAwardNomineeBaseRecord) -> AwardNomineeBaseRecord:
    """Normalize an award nominee and the entities it embeds.

    Character, episode and series are each normalized only when present;
    the embedded movie needs no conversion.
    """
    parsed: dict[str, Any] = dict(nominee)
    parsed.update(
        character=_normalize_optional(normalize_character, nominee.get("character")),
        episode=_normalize_optional(normalize_episode, nominee.get("episode")),
        movie=null_if_falsy(nominee.get("movie")),
        series=_normalize_optional(normalize_series, nominee.get("series")),
        year=parse_int(nominee.get("year"), "year"),
    )
    return cast(AwardNomineeBaseRecord, parsed)


def normalize_award_category(
    category: RawAwardCategoryExtendedRecord,
) -> AwardCategoryExtendedRecord:
    """Normalize an extended award category, including its nominees."""
    parsed: dict[str, Any] = dict(category)
    parsed["nominees"] = _normalize_many(normalize_award_nominee, category.get("nominees"))
    return cast(AwardCategoryExtendedRecord, parsed)


def normalize_series_episodes(payload: RawSeriesEpisodes) -> SeriesEpisodes:
    """Normalize the series + episodes payload of the series episodes route."""
    parsed: dict[str, Any] = dict(payload)
    parsed["series"] = normalize_series(payload["series"])
    parsed["episodes"] = _normalize_many(normalize_episode, payload.get("episodes")) or []
    return cast(SeriesEpisodes, parsed)


__all__ = [
    "normalize_artwork",
    "normalize_award_category",
    "normalize_award_nominee",
    "normalize_character",
    "normalize_company",
    "normalize_entity_update",
    "normalize_episode",
    "normalize_episode_extended",
    "normalize_list",
    "normalize_movie",
    "normalize_person",
    "normalize_release",
    "normalize_search_result",
    "normalize_season",
    "normalize_series",
    "normalize_series_episodes",
    "normalize_series_extended",
    "null_if_falsy",
    "parse_date",
    "parse_int",
    "parse_timestamp",
]
