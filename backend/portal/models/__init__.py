from .schemas import (
    AssetFacetsResponse,
    AssetItemResponse,
    AssetListResponse,
    ContentFacetsResponse,
    ContentItemResponse,
    ContentListResponse,
    ContentResponse,
    ContentTypeResponse,
    CreateContentRequest,
    CreateFolderRequest,
    DeleteFolderResponse,
    FacetOptionResponse,
    FolderResponse,
    RuntimeConfigResponse,
)

__all__ = [
    "AssetFacetsResponse",
    "AssetItemResponse",
    "AssetListResponse",
    "ContentFacetsResponse",
    "ContentItemResponse",
    "ContentListResponse",
    "ContentResponse",
    "ContentTypeResponse",
    "CreateContentRequest",
    "CreateFolderRequest",
    "DeleteFolderResponse",
    "FacetOptionResponse",
    "FolderResponse",
    "RuntimeConfigResponse",
]
