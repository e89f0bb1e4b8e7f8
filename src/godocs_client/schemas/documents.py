"""Schemas for the paginated latest-documents listing."""

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A stored document as returned by /api/documents/latest."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    storm_id: int = Field(default=0, validation_alias=AliasChoices("StormID", "storm_id"))
    name: str = Field(validation_alias=AliasChoices("Name", "name"))
    path: str = Field(default="", validation_alias=AliasChoices("Path", "path"))
    ingress_time: str = Field(default="", validation_alias=AliasChoices("IngressTime", "ingress_time"))
    folder: str = Field(default="", validation_alias=AliasChoices("Folder", "folder"))
    hash: str = Field(default="", validation_alias=AliasChoices("Hash", "hash"))
    ulid: str = Field(validation_alias=AliasChoices("ULID", "ulid"))
    document_type: str = Field(
        default="", validation_alias=AliasChoices("DocumentType", "document_type")
    )
    full_text: str = Field(default="", validation_alias=AliasChoices("FullText", "full_text"))
    url: str = Field(default="", validation_alias=AliasChoices("URL", "url"))


class PaginatedDocuments(BaseModel):
    """One page of documents plus the server's authoritative paging flags."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    documents: List[Document]
    page: int
    page_size: int = Field(validation_alias=AliasChoices("pageSize", "page_size"))
    total_count: int = Field(validation_alias=AliasChoices("totalCount", "total_count"))
    total_pages: int = Field(validation_alias=AliasChoices("totalPages", "total_pages"))
    has_next: bool = Field(validation_alias=AliasChoices("hasNext", "has_next"))
    has_previous: bool = Field(validation_alias=AliasChoices("hasPrevious", "has_previous"))
