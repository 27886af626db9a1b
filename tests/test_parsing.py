"""Tests for building models from API payloads."""

import pytest
from battlecabbage_viewer.models import (
    Actor,
    Genre,
    Movie,
    PayloadError,
    Stats,
    TopActor,
    from_payload,
    from_payload_list,
)

MOVIE_PAYLOAD = {
    "movie_id": 17,
    "external_id": "bc-0017",
    "title": "The Cabbage Patch",
    "tagline": "It grows on you.",
    "mpaa_rating": "PG-13",
    "description": "A garden turns on its gardener.",
    "popularity_score": 8.25,
    "genre": "Horror",
    "poster_url": "images/posters/17.png",
    "release_date": "2024-10-31T00:00:00",
    "actors": [{"actor_id": 1, "actor": "Jane Doe", "image_url": "/images/actors/1.png"}],
    "directors": [{"director_id": 2, "director": "John Roe", "image_url": None}],
    "reviews": [
        {"review_id": 1, "critic_score": 9},
        {"review_id": 2, "critic_score": None},
        {"review_id": 3, "critic_score": 5},
    ],
}


class TestFromPayload:
    """Tests for single-record parsing."""

    def test_full_movie(self):
        """Test a full movie payload with nested records."""
        movie = from_payload(Movie, MOVIE_PAYLOAD)
        assert movie.movie_id == 17
        assert movie.title == "The Cabbage Patch"
        assert movie.popularity_score == 8.25
        assert movie.release_date == "2024-10-31T00:00:00"
        assert movie.actors[0].name == "Jane Doe"
        assert movie.actors[0].full_image_url == "https://api.battlecabbage.com/images/actors/1.png"
        assert movie.directors[0].full_image_url is None
        assert movie.full_poster_url == "https://api.battlecabbage.com/images/posters/17.png"
        assert movie.average_score == 7

    def test_keys_match_case_insensitively(self):
        """Test PascalCase, camelCase and upper-case keys all map to fields."""
        actor = from_payload(Actor, {"ActorId": 4, "ACTOR": "Ann", "imageUrl": "a.png"})
        assert actor.actor_id == 4
        assert actor.actor == "Ann"
        assert actor.image_url == "a.png"

    def test_unknown_keys_ignored(self):
        genre = from_payload(Genre, {"genre_id": 1, "genre": "Drama", "slug": "drama"})
        assert genre == Genre(genre_id=1, genre="Drama")

    def test_missing_keys_use_defaults(self):
        movie = from_payload(Movie, {"title": "Untitled"})
        assert movie.movie_id is None
        assert movie.external_id == ""
        assert movie.actors == []

    def test_null_lists_become_empty(self):
        movie = from_payload(Movie, {"title": "X", "actors": None, "reviews": None})
        assert movie.actors == []
        assert movie.reviews == []

    def test_values_accepted_as_is(self):
        """Test no validation beyond type coercion is applied."""
        movie = from_payload(Movie, {"movie_id": -5, "release_date": "not a date"})
        assert movie.movie_id == -5
        assert movie.release_date == "not a date"

    def test_stats_maps(self):
        stats = from_payload(
            Stats,
            {
                "total_movies": 120,
                "total_reviews": 480,
                "total_actors": 300,
                "total_directors": 45,
                "genres": {"Horror": 40, "Comedy": 80},
                "ratings": {"PG": 60, "R": 60},
            },
        )
        assert stats.total_movies == 120
        assert stats.genres == {"Horror": 40, "Comedy": 80}
        assert stats.ratings["R"] == 60

    def test_non_object_rejected(self):
        with pytest.raises(PayloadError):
            from_payload(Movie, ["not", "an", "object"])

    def test_bad_scalar_rejected(self):
        with pytest.raises(PayloadError):
            from_payload(TopActor, {"actor_id": "abc", "actor": "Ann"})

    def test_bad_nested_rejected(self):
        with pytest.raises(PayloadError):
            from_payload(Movie, {"title": "X", "actors": {"actor_id": 1}})

    def test_payload_error_is_value_error(self):
        assert issubclass(PayloadError, ValueError)


class TestFromPayloadList:
    """Tests for list parsing."""

    def test_order_preserved(self):
        genres = from_payload_list(
            Genre,
            [
                {"genre_id": 3, "genre": "Sci-Fi"},
                {"genre_id": 1, "genre": "Action"},
                {"genre_id": 2, "genre": "Drama"},
            ],
        )
        assert [g.genre_id for g in genres] == [3, 1, 2]

    def test_empty_list(self):
        assert from_payload_list(Genre, []) == []

    def test_object_rejected(self):
        with pytest.raises(PayloadError):
            from_payload_list(Genre, {"genre_id": 1})


class TestScalarCoercion:
    """Tests that scalar fields reject values they would have to distort."""

    def test_integral_float_accepted(self):
        genre = from_payload(Genre, {"genre_id": 3.0, "genre": "Drama", "movie_count": 2.0})
        assert genre.genre_id == 3
        assert genre.movie_count == 2

    @pytest.mark.parametrize(
        "payload",
        [
            {"genre_id": 3.9, "genre": "Drama"},
            {"genre_id": 3, "genre": "Drama", "movie_count": 2.5},
            {"genre_id": True, "genre": "Drama"},
            {"genre_id": "3", "genre": "Drama"},
            {"genre_id": float("inf"), "genre": "Drama"},
        ],
    )
    def test_integer_fields_reject(self, payload):
        with pytest.raises(PayloadError):
            from_payload(Genre, payload)

    @pytest.mark.parametrize("title", [{"nested": 1}, ["a", "b"], True])
    def test_text_fields_reject_non_scalars(self, title):
        with pytest.raises(PayloadError):
            from_payload(Movie, {"title": title})

    def test_number_fields(self):
        movie = from_payload(Movie, {"popularity_score": 7, "reviews": [{"critic_score": 6.5}]})
        assert movie.popularity_score == 7.0
        assert movie.reviews[0].critic_score == 6.5
        with pytest.raises(PayloadError):
            from_payload(Movie, {"popularity_score": "high"})
        with pytest.raises(PayloadError):
            from_payload(Movie, {"popularity_score": float("nan")})

    def test_count_map_rejects_fractions(self):
        with pytest.raises(PayloadError):
            from_payload(Stats, {"genres": {"Horror": 1.5}})
