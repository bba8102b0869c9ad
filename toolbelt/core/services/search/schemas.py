from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Bookkeeping fields removed from organic results
DROPPED_RESULT_FIELDS = frozenset({'prerender', 'page', 'position', 'position_overall', 'block_position'})


class SearchError(Exception):
    """ScaleSERP request failed."""


class WebSearchRequest(BaseModel):
    """ScaleSERP web search options. Pagination keys keep their snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        coerce_numbers_to_str=True,
    )

    search_term: str | None = None
    location: str | None = None
    host_language: str | None = None
    geolocation: str | None = None
    device: str | None = None
    number_of_results: str | None = None
    max_page: str | None = Field(None, alias='max_page')
    include_html: str | None = Field(None, alias='include_html')
    include_answer_box: str | None = Field(None, alias='include_answer_box')
    time_period: str | None = Field(None, alias='time_period')
    output: str | None = None

    def to_params(self) -> dict[str, str]:
        return {
            'q': self.search_term or '',
            'location': self.location or '',
            'hl': self.host_language or 'en',
            'gl': self.geolocation or 'us',
            'device': self.device or 'desktop',
            'num': self.number_of_results or '4',
            'max_page': self.max_page or '1',
            'include_html': self.include_html or 'false',
            'output': self.output or 'json',
            'include_answer_box': self.include_answer_box or 'false',
            'time_period': self.time_period or '',
        }


class SerpSearchRequest(BaseModel):
    """ScaleSERP parameters under their native names, passed through with defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        coerce_numbers_to_str=True,
    )

    q: str | None = None
    location: str | None = None
    hl: str | None = None
    gl: str | None = None
    device: str | None = None
    num: str | None = None
    max_page: str | None = Field(None, alias='max_page')
    include_html: str | None = Field(None, alias='include_html')
    output: str | None = None
    include_answer_box: str | None = Field(None, alias='include_answer_box')
    time_period: str | None = Field(None, alias='time_period')

    def to_params(self) -> dict[str, str]:
        return {
            'q': self.q or '',
            'location': self.location or '',
            'hl': self.hl or 'en',
            'gl': self.gl or 'us',
            'device': self.device or 'desktop',
            'num': self.num or '1',
            'max_page': self.max_page or '1',
            'include_html': self.include_html or 'false',
            'output': self.output or 'json',
            'include_answer_box': self.include_answer_box or 'false',
            'time_period': self.time_period or '',
        }


class WebSearchResult(BaseModel):
    search_query: str | None = Field(None, serialization_alias='searchQuery')
    organic_results: list[dict[str, Any]] = Field(default_factory=list)
    search_url: str | None = Field(None, serialization_alias='searchUrl')
    meta_data_url: str | None = Field(None, serialization_alias='metaDataUrl')


class ImageResult(BaseModel):
    url: str | None = None
    width: int = 0
    height: int = 0
