"""Turn response models into JSON-ready dicts for display."""

from ..models import Actor, Director, Genre, Movie, Stats, TopActor, TopDirector, TopGenre


def movie_summary(m: Movie) -> dict:
    return {
        "movie_id": m.movie_id,
        "title": m.title,
        "tagline": m.tagline,
        "mpaa_rating": m.mpaa_rating,
        "genre": m.genre,
        "release_date": m.release_date,
        "popularity_score": m.popularity_score,
        "full_poster_url": m.full_poster_url,
        "average_score": m.average_score,
    }


def movie_detail(m: Movie) -> dict:
    """Summary plus description, cast, crew and reviews."""
    result = movie_summary(m)
    result.update(
        {
            "external_id": m.external_id,
            "description": m.description,
            "actors": [person(a) for a in m.actors],
            "directors": [person(d) for d in m.directors],
            "reviews": [
                {
                    "review_id": r.review_id,
                    "reviewer": r.reviewer,
                    "critic_score": r.critic_score,
                    "review_text": r.review_text,
                }
                for r in m.reviews
            ],
        }
    )
    return result


def person(p: Actor | Director) -> dict:
    if isinstance(p, Actor):
        return {"actor_id": p.actor_id, "name": p.name, "full_image_url": p.full_image_url}
    return {"director_id": p.director_id, "name": p.name, "full_image_url": p.full_image_url}


def top_person(p: TopActor | TopDirector) -> dict:
    if isinstance(p, TopActor):
        result = {"actor_id": p.actor_id, "name": p.actor}
    else:
        result = {"director_id": p.director_id, "name": p.director}
    result["movie_count"] = p.movie_count
    result["full_image_url"] = p.full_image_url
    return result


def genre(g: Genre | TopGenre) -> dict:
    return {"genre_id": g.genre_id, "name": g.genre, "movie_count": g.movie_count}


def stats(s: Stats) -> dict:
    return {
        "total_movies": s.total_movies,
        "total_reviews": s.total_reviews,
        "total_actors": s.total_actors,
        "total_directors": s.total_directors,
        "genres": s.genres,
        "ratings": s.ratings,
    }
