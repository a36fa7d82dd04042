"""Folder deletion policy.

Decides which store mutations a folder deletion performs. The mode is an
explicit input, never inferred from the folder's contents:

- DETACH (default): content in the folder loses its folder reference
- CASCADE: content in the folder is deleted
- PROMPT: accepted as configuration, but there is no server-side deletion
  behaviour for it; building a plan for PROMPT is refused
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class FolderDeleteMode(str, Enum):
    """Configured folder deletion behaviour."""

    DETACH = "DETACH"
    CASCADE = "CASCADE"
    PROMPT = "PROMPT"

    @classmethod
    def from_cascade_flag(cls, cascade: bool) -> "FolderDeleteMode":
        """Map the ``cascade`` query flag of the delete endpoint to a mode."""
        return cls.CASCADE if cascade else cls.DETACH


class ContentAction(str, Enum):
    """What happens to content referencing the deleted folder."""

    unset_folder = "unset_folder"
    delete = "delete"


class FolderDeletePromptRequired(ValueError):
    """Raised when asked to plan a deletion in PROMPT mode."""

    def __init__(self, folder_id: str):
        super().__init__(f"Folder {folder_id}: PROMPT mode has no server-side deletion behaviour")
        self.folder_id = folder_id


@dataclass(frozen=True)
class FolderDeletionPlan:
    """Mutations for deleting one folder of one space.

    The folder record is always removed; ``content_action`` is applied to
    every content item of the same space referencing the folder.
    """

    space_id: str
    folder_id: str
    mode: FolderDeleteMode
    content_action: ContentAction
    affected_content_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def deletes_content(self) -> bool:
        return self.content_action is ContentAction.delete


def plan_folder_deletion(
    space_id: str,
    folder_id: str,
    mode: FolderDeleteMode | str = FolderDeleteMode.DETACH,
    affected_content_ids: Iterable[str] = (),
) -> FolderDeletionPlan:
    """Build the deletion plan for an existing folder.

    Args:
        space_id: Space owning the folder
        folder_id: Folder being deleted
        mode: DETACH or CASCADE
        affected_content_ids: Content currently in the folder (for reporting)

    Returns:
        The deletion plan

    Raises:
        FolderDeletePromptRequired: If ``mode`` is PROMPT
        ValueError: If ``mode`` is not a known mode
    """
    mode = FolderDeleteMode(mode)

    if mode is FolderDeleteMode.PROMPT:
        raise FolderDeletePromptRequired(folder_id)

    action = ContentAction.delete if mode is FolderDeleteMode.CASCADE else ContentAction.unset_folder

    return FolderDeletionPlan(
        space_id=space_id,
        folder_id=folder_id,
        mode=mode,
        content_action=action,
        affected_content_ids=tuple(affected_content_ids),
    )
