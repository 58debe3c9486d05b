from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class NewsCategory(str, Enum):
    GENERAL = "general"
    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class NewsFilterType(str, Enum):
    """The news mood a weather condition calls for."""

    DEPRESSING = "depressing"
    FEAR = "fear"
    WINNING = "winning"


class SortBy(str, Enum):
    RELEVANCY = "relevancy"
    POPULARITY = "popularity"
    PUBLISHED_AT = "publishedAt"


class NewsSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str = ""


class NewsArticle(BaseModel):
    """A NewsAPI article. ``url`` is the identity key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    url: str = Field(..., min_length=1)
    description: str | None = None
    url_to_image: str | None = Field(None, alias="urlToImage")
    source: NewsSource = Field(default_factory=NewsSource)
    author: str | None = None
    published_at: str | None = Field(None, alias="publishedAt")
    content: str | None = None

    @property
    def has_image(self) -> bool:
        return bool(self.url_to_image)

    @property
    def search_text(self) -> str:
        return f"{self.title} {self.description or ''}".lower()


class NewsResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: Literal["ok", "error"] = "ok"
    total_results: int = Field(0, alias="totalResults")
    articles: list[NewsArticle] = Field(default_factory=list)

    @classmethod
    def failed(cls) -> "NewsResponse":
        return cls(status="error", total_results=0, articles=[])

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class FeedStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"
    DISABLED = "disabled"


class NewsFeed(BaseModel):
    status: FeedStatus
    articles: list[NewsArticle] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def from_articles(cls, articles: list[NewsArticle]) -> "NewsFeed":
        return cls(status=FeedStatus.OK if articles else FeedStatus.EMPTY, articles=articles)
