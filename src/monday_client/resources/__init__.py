"""Resource classes, one per monday.com object type."""

from typing import Dict, Type

from .account import Account
from .activity_log import ActivityLog
from .base import BaseResource
from .board import Board
from .board_view import BoardView
from .column import Column
from .file import File
from .folder import Folder
from .group import Group
from .item import Item
from .me import Me
from .subitem import Subitem
from .update import Update
from .workspace import Workspace

# attribute name on Client -> resource class
RESOURCES: Dict[str, Type[BaseResource]] = {
    "account": Account,
    "activity_log": ActivityLog,
    "board": Board,
    "board_view": BoardView,
    "column": Column,
    "file": File,
    "folder": Folder,
    "group": Group,
    "item": Item,
    "me": Me,
    "subitem": Subitem,
    "update": Update,
    "workspace": Workspace,
}

__all__ = [
    "RESOURCES",
    "BaseResource",
    "Account",
    "ActivityLog",
    "Board",
    "BoardView",
    "Column",
    "File",
    "Folder",
    "Group",
    "Item",
    "Me",
    "Subitem",
    "Update",
    "Workspace",
]
