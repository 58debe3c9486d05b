"""Weather condition to news mood mapping.

All tables are read-only module data. Generic keywords judge relevance after a
search; localized phrases drive the search itself.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, NamedTuple

from weathermood.schemas.news import NewsArticle, NewsFilterType
from weathermood.schemas.weather import WeatherCondition


class MoodKeywords(NamedTuple):
    generic: tuple[str, ...]
    localized: tuple[str, ...]


MOOD_BY_CONDITION = MappingProxyType(
    {
        WeatherCondition.COLD: NewsFilterType.DEPRESSING,
        WeatherCondition.HOT: NewsFilterType.FEAR,
        WeatherCondition.COOL: NewsFilterType.WINNING,
    }
)

GENERIC_KEYWORDS = MappingProxyType(
    {
        NewsFilterType.DEPRESSING: (
            "tragedy", "death", "disaster", "crisis", "loss", "defeat",
            "failure", "recession", "unemployment", "sad", "mourning",
        ),
        NewsFilterType.FEAR: (
            "terror", "attack", "threat", "danger", "violence", "crime",
            "war", "conflict", "emergency", "fear", "scary",
        ),
        NewsFilterType.WINNING: (
            "victory", "success", "achievement", "celebration", "winner",
            "breakthrough", "progress", "joy", "happiness", "champion", "triumph",
        ),
    }
)

LOCALIZED_KEYWORDS = MappingProxyType(
    {
        NewsFilterType.DEPRESSING: (
            "India tragedy", "India crisis", "India disaster", "India unemployment", "India recession",
        ),
        NewsFilterType.FEAR: (
            "India security", "India violence", "India crime", "India terror", "India conflict",
        ),
        NewsFilterType.WINNING: (
            "India success", "India victory", "India achievement",
            "India celebration", "India champion", "India progress",
        ),
    }
)

# Single composite query used when the keyword searches turn up nothing.
BROAD_SEARCH_QUERIES = MappingProxyType(
    {
        NewsFilterType.DEPRESSING: "India news crisis OR tragedy OR loss",
        NewsFilterType.FEAR: "India news security OR crime OR danger",
        NewsFilterType.WINNING: "India news success OR victory OR achievement",
    }
)


def mood_for(condition: WeatherCondition) -> NewsFilterType:
    return MOOD_BY_CONDITION[condition]


def keywords_for(mood: NewsFilterType) -> MoodKeywords:
    return MoodKeywords(generic=GENERIC_KEYWORDS[mood], localized=LOCALIZED_KEYWORDS[mood])


def broad_query_for(mood: NewsFilterType) -> str:
    return BROAD_SEARCH_QUERIES[mood]


def search_terms(keywords: MoodKeywords, *, generic_count: int = 2) -> list[str]:
    return [*keywords.localized, *keywords.generic[:generic_count]]


def relevance_terms(keywords: MoodKeywords) -> tuple[str, ...]:
    # Only the trailing word of each localized phrase ("crisis" from "India crisis").
    trailing = tuple(phrase.split()[-1] for phrase in keywords.localized)
    return tuple(term.lower() for term in (*keywords.generic, *trailing))


def is_relevant(article: NewsArticle, terms: Iterable[str]) -> bool:
    text = article.search_text
    return any(term in text for term in terms)

