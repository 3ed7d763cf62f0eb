"""Tests for the raw-to-parsed record normalizers."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from tvdb.services.normalizers import (
    normalize_artwork,
    normalize_award_category,
    normalize_award_nominee,
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
    parse_date,
    parse_int,
    parse_timestamp,
)
from tvdb.shared.errors import DataProcessingError, ErrorCode


@pytest.fixture
def raw_character() -> dict:
    return {
        "id": 7,
        "name": "Jon Snow",
        "peopleId": 1,
        "seriesId": 121361,
        "movieId": 0,
        "episodeId": 0,
        "image": "",
        "url": "https://thetvdb.com/characters/7",
        "isFeatured": True,
        "sort": 1,
    }


@pytest.fixture
def raw_episode() -> dict:
    return {"id": 1, "name": "Pilot", "aired": "1997-08-13", "seasonNumber": 1}


class TestFieldConverters:
    """Tests for the date, timestamp and number converters."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_parse_date_empty_is_none(self, value: str | None) -> None:
        assert parse_date(value) is None

    def test_parse_date_iso_string(self) -> None:
        assert parse_date("1997-08-13") == date(1997, 8, 13)

    def test_parse_date_accepts_full_datetime(self) -> None:
        assert parse_date("1997-08-13T10:30:00") == date(1997, 8, 13)

    def test_parse_date_malformed_raises(self) -> None:
        with pytest.raises(DataProcessingError) as exc_info:
            parse_date("13/08/1997", "aired")

        assert exc_info.value.code == ErrorCode.INVALID_DATE
        assert exc_info.value.context.additional_data == {"field": "aired"}

    def test_parse_timestamp_preserves_epoch_milliseconds(self) -> None:
        epoch = 1700000000

        parsed = parse_timestamp(epoch)

        assert parsed.tzinfo is not None
        assert int(parsed.timestamp() * 1000) == epoch * 1000

    def test_parse_timestamp_rejects_non_numbers(self) -> None:
        with pytest.raises(DataProcessingError):
            parse_timestamp("yesterday")  # type: ignore[arg-type]

    def test_parse_int(self) -> None:
        assert parse_int("1999") == 1999
        assert parse_int(1999) == 1999
        assert parse_int("") is None
        assert parse_int(None) is None

    def test_parse_int_malformed_raises(self) -> None:
        with pytest.raises(DataProcessingError) as exc_info:
            parse_int("nineteen", "year")

        assert exc_info.value.code == ErrorCode.INVALID_NUMBER


class TestCharacter:
    def test_zero_relations_become_none(self, raw_character: dict) -> None:
        parsed = normalize_character(raw_character)

        assert parsed["movieId"] is None
        assert parsed["episodeId"] is None
        assert parsed["image"] is None
        assert parsed["seriesId"] == 121361

    def test_set_relation_is_kept(self, raw_character: dict) -> None:
        raw_character["movieId"] = 42

        assert normalize_character(raw_character)["movieId"] == 42

    def test_does_not_mutate_input(self, raw_character: dict) -> None:
        snapshot = dict(raw_character)

        normalize_character(raw_character)

        assert raw_character == snapshot

    def test_unknown_keys_pass_through(self, raw_character: dict) -> None:
        raw_character["tagOptions"] = [{"id": 1}]

        parsed = normalize_character(raw_character)

        assert parsed["tagOptions"] == [{"id": 1}]
        assert set(parsed) == set(raw_character)


class TestEpisodes:
    def test_episode_aired_is_parsed(self, raw_episode: dict) -> None:
        assert normalize_episode(raw_episode)["aired"] == date(1997, 8, 13)

    def test_absent_aired_is_none(self) -> None:
        assert normalize_episode({"id": 1})["aired"] is None

    def test_extended_episode_parses_characters(
        self, raw_episode: dict, raw_character: dict
    ) -> None:
        raw_episode["characters"] = [raw_character]

        parsed = normalize_episode_extended(raw_episode)

        assert parsed["aired"] == date(1997, 8, 13)
        assert parsed["characters"][0]["movieId"] is None

    def test_null_character_list_stays_null(self, raw_episode: dict) -> None:
        raw_episode["characters"] = None

        assert normalize_episode_extended(raw_episode)["characters"] is None

    def test_season_parses_episodes(self, raw_episode: dict) -> None:
        parsed = normalize_season({"id": 10, "episodes": [raw_episode]})

        assert parsed["episodes"][0]["aired"] == date(1997, 8, 13)


class TestSeries:
    def test_series_dates(self) -> None:
        parsed = normalize_series(
            {"id": 1, "firstAired": "2011-04-17", "lastAired": "2019-05-19", "nextAired": ""}
        )

        assert parsed["firstAired"] == date(2011, 4, 17)
        assert parsed["lastAired"] == date(2019, 5, 19)
        assert parsed["nextAired"] is None

    def test_series_extended_characters(self, raw_character: dict) -> None:
        parsed = normalize_series_extended(
            {"id": 1, "firstAired": "2011-04-17", "characters": [raw_character]}
        )

        assert parsed["firstAired"] == date(2011, 4, 17)
        assert parsed["characters"][0]["image"] is None

    def test_series_episodes_payload(self, raw_episode: dict) -> None:
        parsed = normalize_series_episodes(
            {"series": {"id": 1, "firstAired": "2011-04-17"}, "episodes": [raw_episode]}
        )

        assert parsed["series"]["firstAired"] == date(2011, 4, 17)
        assert parsed["episodes"][0]["aired"] == date(1997, 8, 13)

    def test_series_episodes_null_episodes(self) -> None:
        parsed = normalize_series_episodes({"series": {"id": 1}, "episodes": None})

        assert parsed["episodes"] == []


class TestOtherEntities:
    def test_artwork_updated_at(self) -> None:
        parsed = normalize_artwork({"id": 1, "updatedAt": 1700000000})

        assert parsed["updatedAt"] == datetime.fromtimestamp(1700000000, tz=timezone.utc)

    def test_company_dates(self) -> None:
        parsed = normalize_company({"id": 1, "activeDate": "1972-11-08", "inactiveDate": ""})

        assert parsed["activeDate"] == date(1972, 11, 8)
        assert parsed["inactiveDate"] is None

    def test_entity_update_timestamp(self) -> None:
        parsed = normalize_entity_update({"recordId": 1, "timeStamp": 1700000000})

        assert isinstance(parsed["timeStamp"], datetime)

    def test_list_empty_url(self) -> None:
        assert normalize_list({"id": 1, "url": ""})["url"] is None

    def test_movie_releases_and_characters(self, raw_character: dict) -> None:
        parsed = normalize_movie(
            {
                "id": 1,
                "characters": [raw_character],
                "releases": [{"country": "usa", "date": "1999-03-31", "detail": None}],
            }
        )

        assert parsed["releases"][0]["date"] == date(1999, 3, 31)
        assert parsed["characters"][0]["movieId"] is None

    def test_person_dates(self) -> None:
        parsed = normalize_person({"id": 1, "birth": "1986-12-26", "death": "", "characters": None})

        assert parsed["birth"] == date(1986, 12, 26)
        assert parsed["death"] is None
        assert parsed["characters"] is None


class TestSearchResult:
    def test_empty_strings_become_none(self) -> None:
        parsed = normalize_search_result(
            {"tvdb_id": "121361", "year": "2011", "overview": "", "network": "HBO"}
        )

        assert parsed["tvdb_id"] == 121361
        assert parsed["year"] == 2011
        assert parsed["overview"] is None
        assert parsed["network"] == "HBO"
        assert parsed["country"] is None

    def test_missing_year_is_none(self) -> None:
        assert normalize_search_result({"tvdb_id": "1"})["year"] is None

    def test_missing_tvdb_id_raises(self) -> None:
        with pytest.raises(DataProcessingError):
            normalize_search_result({"name": "Nothing"})


class TestAwards:
    def test_nominee_year(self) -> None:
        assert normalize_award_nominee({"id": 1, "year": "1999"})["year"] == 1999
        assert normalize_award_nominee({"id": 1, "year": ""})["year"] is None
        assert normalize_award_nominee({"id": 1})["year"] is None

    def test_nominee_embedded_records(self, raw_episode: dict, raw_character: dict) -> None:
        parsed = normalize_award_nominee(
            {
                "id": 1,
                "character": raw_character,
                "episode": raw_episode,
                "series": None,
                "movie": None,
            }
        )

        assert parsed["character"]["movieId"] is None
        assert parsed["episode"]["aired"] == date(1997, 8, 13)
        assert parsed["series"] is None
        assert parsed["movie"] is None

    def test_category_nominees(self) -> None:
        parsed = normalize_award_category({"id": 3, "nominees": [{"id": 1, "year": "2001"}]})

        assert parsed["nominees"][0]["year"] == 2001


class TestUtcSuffix:
    def test_parse_date_accepts_z_suffix(self) -> None:
        assert parse_date("2011-04-17T00:00:00Z") == date(2011, 4, 17)

    def test_series_with_z_suffixed_date(self) -> None:
        parsed = normalize_series({"id": 1, "firstAired": "2011-04-17T21:00:00.000Z"})

        assert parsed["firstAired"] == date(2011, 4, 17)
