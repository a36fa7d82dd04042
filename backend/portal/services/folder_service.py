"""Folder business logic.

Provides service functions for:
- Folder listing and creation within a space
- Folder deletion with the DETACH / CASCADE policy

Deletion removes the folder record and applies the content mutation in a
single transaction: either both happen or neither does.
"""

from sqlalchemy.orm import Session

from portal.components.folders import (
    ContentAction,
    FolderDeleteMode,
    FolderDeletionPlan,
    plan_folder_deletion,
)
from portal.db.models import Folder
from portal.repositories import content_repository, folder_repository
from portal.utils import get_logger

logger = get_logger(__name__)


def list_folders(db: Session, space_id: str) -> list[Folder]:
    """List the folders of a space in creation order."""
    return folder_repository.list_for_space(db, space_id)


def get_folder(db: Session, space_id: str, folder_id: str) -> Folder | None:
    """Get a folder, only if it belongs to the space."""
    return folder_repository.find_one(db, space_id, folder_id)


def create_folder(
    db: Session,
    space_id: str,
    name: str,
    content_types: list[str] | None = None,
) -> Folder:
    """Create a folder in a space.

    Args:
        db: Database session
        space_id: Owning space
        name: Folder name
        content_types: Allowed content type ids (empty = all)

    Returns:
        The created folder
    """
    folder = folder_repository.create_folder(db, space_id, name, content_types)
    logger.info(f"Created folder {folder.id} in space {space_id}")
    return folder


def delete_folder(
    db: Session,
    space_id: str,
    folder_id: str,
    mode: FolderDeleteMode = FolderDeleteMode.DETACH,
) -> FolderDeletionPlan | None:
    """Delete a folder and detach or delete the content it contains.

    Args:
        db: Database session
        space_id: Space owning the folder
        folder_id: Folder to delete
        mode: DETACH (unlink content) or CASCADE (delete content)

    Returns:
        The executed deletion plan, or None if the folder does not exist
        in the space (nothing is modified in that case)

    Raises:
        FolderDeletePromptRequired: If ``mode`` is PROMPT
    """
    folder = folder_repository.find_one(db, space_id, folder_id)
    if folder is None:
        logger.debug(f"Folder {folder_id} not found in space {space_id}")
        return None

    affected = [content.id for content in content_repository.list_in_folder(db, space_id, folder_id)]
    plan = plan_folder_deletion(space_id, folder_id, mode, affected)
    logger.debug(f"Folder {folder_id}: {plan.mode.value} -> {plan.content_action.value} on {len(affected)} items")

    try:
        folder_repository.delete_many(db, space_id, folder_id)
        if plan.content_action is ContentAction.delete:
            changed = content_repository.delete_many_in_folder(db, space_id, folder_id)
        else:
            changed = content_repository.unset_folder(db, space_id, folder_id)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to delete folder {folder_id} in space {space_id}, rolled back")
        raise

    logger.info(
        f"Deleted folder {folder_id} in space {space_id} "
        f"(mode={plan.mode.value}, content {plan.content_action.value}: {changed})"
    )
    return plan
