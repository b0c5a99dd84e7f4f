from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SearchHit(BaseModel):
    """One raw result of the multi search endpoint.

    Movies, TV shows and people share the endpoint, so everything but the id
    is optional. The original-language titles are preferred over the
    localized ones.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("original_name", "name"))
    title: Optional[str] = Field(default=None, validation_alias=AliasChoices("original_title", "title"))
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    original_language: Optional[str] = None
    overview: Optional[str] = None
    media_type: Optional[str] = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    results: List[SearchHit] = Field(default_factory=list)


class NormalizedItem(BaseModel):
    id: int
    label: str
    title: str
    overview: str = ""
    original_language: str = ""
    media_type: str = ""


class DetailResult(BaseModel):
    """Fields of the movie or TV detail endpoint; irrelevant ones stay None."""

    model_config = ConfigDict(extra="ignore")

    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None
    tagline: Optional[str] = None
    runtime: Optional[int] = None

    @property
    def has_tv_counts(self) -> bool:
        return self.number_of_seasons is not None and self.number_of_episodes is not None
