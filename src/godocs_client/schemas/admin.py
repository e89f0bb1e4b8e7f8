"""Schemas for maintenance endpoints: clean and about."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CleanResult(BaseModel):
    """Response of POST /api/clean. Every field may be omitted."""

    model_config = ConfigDict(extra="ignore")

    deleted: Optional[int] = None
    scanned: Optional[int] = None
    moved: Optional[int] = None
    message: Optional[str] = None


class AboutInfo(BaseModel):
    """Read-only snapshot of the server configuration from /api/about."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: str = ""
    ocr_configured: bool = Field(
        default=False, validation_alias=AliasChoices("ocrConfigured", "ocr_configured")
    )
    ocr_path: str = Field(default="", validation_alias=AliasChoices("ocrPath", "ocr_path"))
    database_type: str = Field(
        default="", validation_alias=AliasChoices("databaseType", "database_type")
    )
    database_host: str = Field(
        default="", validation_alias=AliasChoices("databaseHost", "database_host")
    )
    database_port: str = Field(
        default="", validation_alias=AliasChoices("databasePort", "database_port")
    )
    database_name: str = Field(
        default="", validation_alias=AliasChoices("databaseName", "database_name")
    )
    is_ephemeral: bool = Field(
        default=False, validation_alias=AliasChoices("isEphemeral", "is_ephemeral")
    )
    ingress_path: str = Field(default="", validation_alias=AliasChoices("ingressPath", "ingress_path"))
    document_path: str = Field(
        default="", validation_alias=AliasChoices("documentPath", "document_path")
    )
