"""Schemas for the document file tree and search results."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Id of the synthetic directory the search endpoint wraps its results in
SEARCH_RESULTS_ID = "SearchResults"


class TreeNode(BaseModel):
    """One entry of the flat file tree delivered by the backend.

    Nodes reference their parent by id only. Parent/child relations are
    derived by the tree builder, never stored here.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    parent_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("parentID", "parentId", "parent_id")
    )
    name: str = ""
    size: int = 0
    mod_time: str = Field(default="", validation_alias=AliasChoices("modDate", "modTime", "mod_time"))
    is_directory: bool = Field(validation_alias=AliasChoices("isDir", "isDirectory", "is_directory"))
    download_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("fileURL", "downloadURL", "download_url")
    )
    ulid: Optional[str] = None
    openable: bool = False
    children_ids: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("childrenIDs", "children_ids")
    )
    full_path: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("fullPath", "full_path")
    )

    @field_validator("parent_id", "download_url", mode="before")
    @classmethod
    def empty_string_is_none(cls, v):
        """The backend sends "" for "no value"."""
        if v == "":
            return None
        return v

    @field_validator("children_ids", mode="before")
    @classmethod
    def null_children(cls, v):
        return [] if v is None else v

    @property
    def is_file(self) -> bool:
        return not self.is_directory


class FileSystemResponse(BaseModel):
    """Response of /api/documents/filesystem and /api/search."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_system: List[TreeNode] = Field(
        default_factory=list, validation_alias=AliasChoices("fileSystem", "file_system")
    )
    error: str = ""

    @field_validator("file_system", mode="before")
    @classmethod
    def null_file_system(cls, v):
        return [] if v is None else v

    @field_validator("error", mode="before")
    @classmethod
    def null_error(cls, v):
        return "" if v is None else v

    def search_hits(self) -> List[TreeNode]:
        """Nodes to list as search results, without the results wrapper.

        The wrapper is recognised by its id *and* its shape (a parentless
        directory), so a document that merely shares the id is kept.
        """
        return [node for node in self.file_system if not is_search_wrapper(node)]


def is_search_wrapper(node: TreeNode) -> bool:
    return node.id == SEARCH_RESULTS_ID and node.is_directory and node.parent_id is None
