"""Folder deletion policy (DETACH / CASCADE / PROMPT)."""

from portal.components.folders.policy import (
    ContentAction,
    FolderDeleteMode,
    FolderDeletePromptRequired,
    FolderDeletionPlan,
    plan_folder_deletion,
)

__all__ = [
    "ContentAction",
    "FolderDeleteMode",
    "FolderDeletePromptRequired",
    "FolderDeletionPlan",
    "plan_folder_deletion",
]
