from __future__ import annotations
from typing import Any

MOVIES: list[dict[str, Any]] = [
    {
        "id": 1234,
        "adult": False,
        "genre_ids": [28, 14, 32],
        "original_language": "en",
        "original_title": "Rebel Moon - Part Two: The Scargiver",
        "overview": "The rebels gear up for battle against the ruthless forces of the Motherworld as unbreakable bonds are forged, heroes emerge, and legends are made.",
        "popularity": 1136.427,
        "release_date": "2024-04-19",
        "title": "Rebel Moon - Part Two: The Scargiver",
        "video": False,
        "vote_average": 6.0,
        "vote_count": 100,
    },
    {
        "id": 2345,
        "adult": False,
        "genre_ids": [878, 12, 28],
        "original_language": "en",
        "original_title": "Kingdom of the Planet of the Apes",
        "overview": "Several generations in the future following Caesar's reign, apes are now the dominant species and live harmoniously while humans have been reduced to living in the shadows.",
        "popularity": 1050.812,
        "release_date": "2024-05-08",
        "title": "Kingdom of the Planet of the Apes",
        "video": False,
        "vote_average": 7.2,
        "vote_count": 456,
    },
    {
        "id": 3456,
        "adult": False,
        "genre_ids": [28, 53],
        "original_language": "en",
        "original_title": "Boy Kills World",
        "overview": "When his family is murdered, a deaf-mute named Boy escapes to the jungle and is trained by a mysterious shaman to repress his childish imagination and become an instrument of death.",
        "popularity": 862.151,
        "release_date": "2024-04-24",
        "title": "Boy Kills World",
        "video": False,
        "vote_average": 6.9,
        "vote_count": 185,
    },
    {
        "id": 4567,
        "adult": False,
        "genre_ids": [28, 12, 878],
        "original_language": "en",
        "original_title": "Godzilla x Kong: The New Empire",
        "overview": "Following their explosive showdown, Godzilla and Kong must reunite against a colossal undiscovered threat hidden within our world.",
        "popularity": 727.485,
        "release_date": "2024-03-27",
        "title": "Godzilla x Kong: The New Empire",
        "video": False,
        "vote_average": 7.2,
        "vote_count": 1729,
    },
    {
        "id": 5678,
        "adult": False,
        "genre_ids": [27, 53],
        "original_language": "en",
        "original_title": "Abigail",
        "overview": "A group of would-be criminals kidnap the 12-year-old ballerina daughter of a powerful underworld figure.",
        "popularity": 603.309,
        "release_date": "2024-04-18",
        "title": "Abigail",
        "video": False,
        "vote_average": 6.8,
        "vote_count": 349,
    },
]

MOVIE_CASTS: list[dict[str, Any]] = [
    {
        "movieId": 1234,
        "actorName": "Sofia Boutella",
        "roleName": "Kora",
        "roleDescription": "A former soldier of the Motherworld",
    },
    {
        "movieId": 1234,
        "actorName": "Djimon Hounsou",
        "roleName": "Titus",
        "roleDescription": "A disgraced general",
    },
    {
        "movieId": 1234,
        "actorName": "Ed Skrein",
        "roleName": "Atticus Noble",
        "roleDescription": "Admiral of the Imperium fleet",
    },
    {
        "movieId": 2345,
        "actorName": "Owen Teague",
        "roleName": "Noa",
        "roleDescription": "A young chimpanzee",
    },
    {
        "movieId": 2345,
        "actorName": "Freya Allan",
        "roleName": "Mae",
        "roleDescription": "",
    },
    {
        "movieId": 4567,
        "actorName": "Rebecca Hall",
        "roleName": "Dr. Ilene Andrews",
        "roleDescription": None,
    },
]
