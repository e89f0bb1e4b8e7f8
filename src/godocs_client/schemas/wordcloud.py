"""Schemas for word cloud data."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class WordFrequency(BaseModel):
    """A word and how often it occurs across all documents."""

    word: str
    frequency: int


class WordCloudMetadata(BaseModel):
    """Bookkeeping about the last word cloud calculation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    last_calculation: str = Field(
        default="", validation_alias=AliasChoices("lastCalculation", "last_calculation")
    )
    total_docs_processed: int = Field(
        default=0, validation_alias=AliasChoices("totalDocsProcessed", "total_docs_processed")
    )
    total_words_indexed: int = Field(
        default=0, validation_alias=AliasChoices("totalWordsIndexed", "total_words_indexed")
    )
    version: int = 0


class WordCloudResponse(BaseModel):
    """Response of /api/wordcloud."""

    model_config = ConfigDict(extra="ignore")

    words: List[WordFrequency]
    metadata: Optional[WordCloudMetadata] = None
    count: int = 0

    @field_validator("words", mode="before")
    @classmethod
    def null_words(cls, v):
        return [] if v is None else v
