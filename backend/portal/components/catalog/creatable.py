"""Which content types can be created from the current listing context."""

from collections.abc import Iterable, Sequence

from portal.db.models import ContentType, Folder


def folder_allows(folder: Folder, content_type_id: str) -> bool:
    """An empty allow list means every content type is allowed."""
    allowed = folder.content_types or []
    return not allowed or content_type_id in allowed


def creatable_content_types(
    content_types: Iterable[ContentType],
    folders: Sequence[Folder],
    folder_filter: str = "",
    content_type_filter: str = "",
    show_hidden: bool = False,
) -> list[str]:
    """Ids of content types a user may create given the active filters.

    Args:
        content_types: Content types of the space
        folders: Folders of the space
        folder_filter: Active folder filter ("" for none)
        content_type_filter: Active content type filter ("" for none)
        show_hidden: Whether hidden content types are shown

    Returns:
        Creatable content type ids, in the order of ``content_types``
    """
    folder = None
    if folder_filter:
        folder = next((f for f in folders if f.id == folder_filter), None)
        if folder is None:
            return []

    result = []
    for content_type in content_types:
        if not show_hidden and content_type.hidden:
            continue
        if not content_type.enabled:
            continue
        if content_type_filter and content_type.id != content_type_filter:
            continue
        if folder is not None and not folder_allows(folder, content_type.id):
            continue
        result.append(content_type.id)
    return result
