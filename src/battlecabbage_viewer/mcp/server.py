"""MCP server exposing the Battle Cabbage catalogue."""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from ..config import get_settings
from ..logging_setup import configure_logging
from ..services.movie_api import MovieApiService
from . import render

logger = logging.getLogger(__name__)


def _paging_properties(default_limit: int) -> dict:
    return {
        "skip": {
            "type": "integer",
            "description": "Number of items to skip (default 0)",
        },
        "limit": {
            "type": "integer",
            "description": f"Maximum number of items to return (default {default_limit})",
        },
    }


def _id_schema(key: str, description: str) -> dict:
    return {
        "type": "object",
        "properties": {key: {"type": "integer", "description": description}},
        "required": [key],
    }


NO_ARGS = {"type": "object", "properties": {}}


def tool_definitions() -> list[Tool]:
    return [
        Tool(
            name="list_movies",
            description="List movies, optionally filtered by genre. Supports skip/limit paging.",
            inputSchema={
                "type": "object",
                "properties": {
                    **_paging_properties(10),
                    "genre": {
                        "type": "string",
                        "description": "Genre name to filter by (e.g., 'Sci-Fi')",
                    },
                },
            },
        ),
        Tool(
            name="get_movie",
            description="Get a movie with its actors, directors, reviews and average critic score",
            inputSchema=_id_schema("movie_id", "Movie ID"),
        ),
        Tool(
            name="get_random_movies",
            description="Get a random selection of movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="get_top_rated_movies",
            description="Get the highest rated movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="get_worst_rated_movies",
            description="Get the lowest rated movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="get_recent_movies",
            description="Get the most recently added movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="list_actors",
            description="List actors. Supports skip/limit paging.",
            inputSchema={"type": "object", "properties": _paging_properties(50)},
        ),
        Tool(
            name="get_actor",
            description="Get a single actor",
            inputSchema=_id_schema("actor_id", "Actor ID"),
        ),
        Tool(
            name="get_top_actors",
            description="Get actors ranked by number of movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="get_actor_movies",
            description="Get the movies an actor appears in",
            inputSchema=_id_schema("actor_id", "Actor ID"),
        ),
        Tool(
            name="list_directors",
            description="List directors. Supports skip/limit paging.",
            inputSchema={"type": "object", "properties": _paging_properties(50)},
        ),
        Tool(
            name="get_top_directors",
            description="Get directors ranked by number of movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="list_genres",
            description="List all genres with their movie counts",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="get_top_genres",
            description="Get genres ranked by number of movies",
            inputSchema=NO_ARGS,
        ),
        Tool(
            name="get_stats",
            description="Get catalogue totals and per-genre and per-rating counts",
            inputSchema=NO_ARGS,
        ),
    ]


def _text(result) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


def _not_found(what: str) -> list[TextContent]:
    return [TextContent(type="text", text=f"{what} not found")]


async def handle_tool(
    api: MovieApiService, name: str, arguments: dict | None
) -> list[TextContent]:
    """Run one tool call against the API and render the result."""
    arguments = arguments or {}
    try:
        if name == "list_movies":
            movies = await api.get_movies(
                skip=int(arguments.get("skip", 0)),
                limit=int(arguments.get("limit", 10)),
                genre=arguments.get("genre"),
            )
            return _text([render.movie_summary(m) for m in movies])

        elif name == "get_movie":
            movie = await api.get_movie(int(arguments["movie_id"]))
            if movie is None:
                return _not_found("Movie")
            return _text(render.movie_detail(movie))

        elif name == "get_random_movies":
            movies = await api.get_random_movies()
            return _text([render.movie_summary(m) for m in movies])

        elif name == "get_top_rated_movies":
            movies = await api.get_top_rated_movies()
            return _text([render.movie_summary(m) for m in movies])

        elif name == "get_worst_rated_movies":
            movies = await api.get_worst_rated_movies()
            return _text([render.movie_summary(m) for m in movies])

        elif name == "get_recent_movies":
            movies = await api.get_recent_movies()
            return _text([render.movie_summary(m) for m in movies])

        elif name == "list_actors":
            actors = await api.get_actors(
                skip=int(arguments.get("skip", 0)),
                limit=int(arguments.get("limit", 50)),
            )
            return _text([render.person(a) for a in actors])

        elif name == "get_actor":
            actor = await api.get_actor(int(arguments["actor_id"]))
            if actor is None:
                return _not_found("Actor")
            return _text(render.person(actor))

        elif name == "get_top_actors":
            actors = await api.get_top_actors()
            return _text([render.top_person(a) for a in actors])

        elif name == "get_actor_movies":
            movies = await api.get_actor_movies(int(arguments["actor_id"]))
            return _text([render.movie_summary(m) for m in movies])

        elif name == "list_directors":
            directors = await api.get_directors(
                skip=int(arguments.get("skip", 0)),
                limit=int(arguments.get("limit", 50)),
            )
            return _text([render.person(d) for d in directors])

        elif name == "get_top_directors":
            directors = await api.get_top_directors()
            return _text([render.top_person(d) for d in directors])

        elif name == "list_genres":
            genres = await api.get_genres()
            return _text([render.genre(g) for g in genres])

        elif name == "get_top_genres":
            genres = await api.get_top_genres()
            return _text([render.genre(g) for g in genres])

        elif name == "get_stats":
            stats = await api.get_stats()
            if stats is None:
                return _not_found("Stats")
            return _text(render.stats(stats))

        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    except (KeyError, TypeError, ValueError) as e:
        logger.info("Bad arguments for %s: %s", name, e)
        return [TextContent(type="text", text=f"Error: {str(e)}")]


def create_mcp_server(api: MovieApiService) -> Server:
    """Create and configure the MCP server around a caller-owned API service."""
    server = Server("battlecabbage-movie-viewer")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_definitions()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        return await handle_tool(api, name, arguments)

    return server


async def main():
    """Run the MCP server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    async with MovieApiService(settings=settings) as api:
        server = create_mcp_server(api)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
