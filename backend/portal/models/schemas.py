"""Pydantic models matching the portal frontend TypeScript types."""

from typing import Literal

from pydantic import BaseModel, Field

from portal.components.catalog import PageMode
from portal.components.filtering import (
    AssetFacets,
    AssetItemView,
    ContentFacets,
    ContentItemView,
    FacetOption,
)
from portal.db.models import Content, ContentType, Folder


class FacetOptionResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_option(cls, option: FacetOption) -> "FacetOptionResponse":
        return cls(id=option.id, name=option.name)


def _options(options: list[FacetOption]) -> list[FacetOptionResponse]:
    return [FacetOptionResponse.from_option(option) for option in options]


# ==================== Folders ====================


class FolderResponse(BaseModel):
    folderId: str
    spaceId: str
    name: str
    contentTypes: list[str] = Field(default_factory=list)
    createdAt: int

    @classmethod
    def from_model(cls, folder: Folder) -> "FolderResponse":
        return cls(
            folderId=folder.id,
            spaceId=folder.space_id,
            name=folder.name,
            contentTypes=list(folder.content_types or []),
            createdAt=folder.created_at,
        )


class CreateFolderRequest(BaseModel):
    """Request to create a new folder."""

    name: str = Field(min_length=1, max_length=255)
    contentTypes: list[str] = Field(default_factory=list)  # Empty = all types allowed


class DeleteFolderResponse(BaseModel):
    """Folder deletion answers with an empty object."""

    pass


# ==================== Content types ====================


class ContentTypeResponse(BaseModel):
    contentTypeId: str
    name: str
    hidden: bool = False
    enabled: bool = True

    @classmethod
    def from_model(cls, content_type: ContentType) -> "ContentTypeResponse":
        return cls(
            contentTypeId=content_type.id,
            name=content_type.name,
            hidden=bool(content_type.hidden),
            enabled=bool(content_type.enabled),
        )


# ==================== Content ====================


class ContentItemResponse(BaseModel):
    contentId: str
    contentTypeId: str
    contentTypeName: str
    title: str
    status: Literal["draft", "published"]
    scheduledPublishDate: int | None = None
    modifiedDate: int
    modifiedUserId: str
    modifiedUserName: str
    folderId: str | None = None
    folderName: str | None = None

    @classmethod
    def from_view(cls, item: ContentItemView) -> "ContentItemResponse":
        return cls(
            contentId=item.content_id,
            contentTypeId=item.content_type_id,
            contentTypeName=item.content_type_name,
            title=item.title,
            status=item.status,
            scheduledPublishDate=item.scheduled_publish_date,
            modifiedDate=item.modified_date,
            modifiedUserId=item.modified_user_id,
            modifiedUserName=item.modified_user_name,
            folderId=item.folder_id,
            folderName=item.folder_name,
        )


class ContentFacetsResponse(BaseModel):
    folders: list[FacetOptionResponse] = Field(default_factory=list)
    contentTypes: list[FacetOptionResponse] = Field(default_factory=list)
    authors: list[FacetOptionResponse] = Field(default_factory=list)
    dates: list[FacetOptionResponse] = Field(default_factory=list)

    @classmethod
    def from_facets(cls, facets: ContentFacets) -> "ContentFacetsResponse":
        return cls(
            folders=_options(facets.folders),
            contentTypes=_options(facets.content_types),
            authors=_options(facets.authors),
            dates=_options(facets.dates),
        )


class ContentListResponse(BaseModel):
    mode: PageMode
    items: list[ContentItemResponse] = Field(default_factory=list)
    facets: ContentFacetsResponse = Field(default_factory=ContentFacetsResponse)
    creatableContentTypes: list[str] = Field(default_factory=list)


class CreateContentRequest(BaseModel):
    """Request to create a draft content item."""

    contentTypeId: str
    folderId: str | None = None


class ContentResponse(BaseModel):
    contentId: str
    spaceId: str
    contentTypeId: str
    folderId: str | None = None
    title: str
    status: Literal["draft", "published"]
    modifiedDate: int

    @classmethod
    def from_model(cls, content: Content) -> "ContentResponse":
        return cls(
            contentId=content.id,
            spaceId=content.space_id,
            contentTypeId=content.content_type_id,
            folderId=content.folder_id,
            title=content.title or "",
            status=content.status,
            modifiedDate=content.modified_date,
        )


# ==================== Assets ====================


class AssetItemResponse(BaseModel):
    assetId: str
    name: str
    type: str
    status: Literal["enabled", "disabled"]
    modifiedDate: int
    modifiedUserName: str
    folderId: str | None = None
    folderName: str | None = None

    @classmethod
    def from_view(cls, item: AssetItemView) -> "AssetItemResponse":
        return cls(
            assetId=item.asset_id,
            name=item.name,
            type=item.type,
            status=item.status,
            modifiedDate=item.modified_date,
            modifiedUserName=item.modified_user_name,
            folderId=item.folder_id,
            folderName=item.folder_name,
        )


class AssetFacetsResponse(BaseModel):
    folders: list[FacetOptionResponse] = Field(default_factory=list)
    types: list[FacetOptionResponse] = Field(default_factory=list)

    @classmethod
    def from_facets(cls, facets: AssetFacets) -> "AssetFacetsResponse":
        return cls(folders=_options(facets.folders), types=_options(facets.types))


class AssetListResponse(BaseModel):
    mode: PageMode
    items: list[AssetItemResponse] = Field(default_factory=list)
    facets: AssetFacetsResponse = Field(default_factory=AssetFacetsResponse)


# ==================== Runtime config ====================


class RuntimeConfigResponse(BaseModel):
    FOLDER_DELETE_MODE: Literal["DETACH", "CASCADE", "PROMPT"] = "DETACH"
