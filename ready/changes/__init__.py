from .inspector import EMPTY_TREE, GIT_COMMANDS, GitInspector
from .types import ChangeSet, ChangeSetError

__all__ = ["EMPTY_TREE", "GIT_COMMANDS", "GitInspector", "ChangeSet", "ChangeSetError"]
