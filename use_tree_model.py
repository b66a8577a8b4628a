"""
use_tree_model.py
A raw representation of one parsed `use` declaration, captured directly from the parser. The flattener in use_trees.py reads it and never modifies it.
"""
from enum import Enum
from typing import List, Optional, Sequence

PATH_KEYWORDS = ("self", "super", "crate")
UNDERSCORE = "_"
STAR = "*"


class UseTreeShape(Enum):
    GROUP = "group"    # a::{b, c}
    RENAME = "rename"  # a::b as c / a::b as _
    GLOB = "glob"      # a::*
    PLAIN = "plain"    # a::b


class UsePathSegment:
    def __init__(self, text: str, line: int = -1):
        self.text: str = text  # identifier, raw identifier (r#x) or path keyword
        self.line: int = line

    @property
    def kind(self) -> str:
        """'self', 'super', 'crate' for path keywords, 'name' for everything else."""
        return self.text if self.text in PATH_KEYWORDS else "name"

    @property
    def is_self(self) -> bool:
        return self.text == "self"

    def __repr__(self):
        return f"UsePathSegment({self.text!r})"


class UsePath:
    """
    A possibly-qualified path, stored innermost-first: `segment` is the last
    segment and `qualifier` is the path made of the segments before it.
    `a::b::c` is UsePath(c, qualifier=UsePath(b, qualifier=UsePath(a))).
    """
    def __init__(self, segment: Optional[UsePathSegment], qualifier: Optional['UsePath'] = None):
        self.segment = segment
        self.qualifier = qualifier

    @classmethod
    def from_segments(cls, texts: Sequence[str], line: int = -1) -> Optional['UsePath']:
        """Build the qualifier chain from root-to-leaf segment texts. Returns None for no segments."""
        path = None
        for text in texts:
            path = cls(UsePathSegment(text, line), qualifier=path)
        return path

    def segments(self) -> List[str]:
        # A node without a segment ends the chain
        parts = []
        path = self
        while path is not None and path.segment is not None:
            parts.append(path.segment.text)
            path = path.qualifier
        parts.reverse()
        return parts

    def __str__(self):
        return "::".join(self.segments())

    def __repr__(self):
        return f"UsePath({str(self)!r})"


class UseRename:
    def __init__(self, name: Optional[str] = None, underscore: bool = False):
        self.name = name  # None when renamed to the discard marker
        self.underscore = underscore

    @property
    def text(self) -> Optional[str]:
        if self.name is not None:
            return self.name
        if self.underscore:
            return UNDERSCORE
        return None

    def __repr__(self):
        return f"UseRename({self.text!r})"


class UseTree:
    def __init__(self, path: Optional[UsePath] = None, use_tree_list: Optional[List['UseTree']] = None,
                 rename: Optional[UseRename] = None, star_token: Optional[str] = None, line: int = -1):
        self.path = path
        self.use_tree_list = use_tree_list  # None unless the node is a {...} group
        self.rename = rename
        self.star_token = star_token
        self.line = line

    @property
    def shape(self) -> UseTreeShape:
        # Same precedence as the traversal: a group wins over a rename, a rename over a glob.
        if self.use_tree_list is not None:
            return UseTreeShape.GROUP
        if self.rename is not None:
            return UseTreeShape.RENAME
        if self.star_token is not None:
            return UseTreeShape.GLOB
        return UseTreeShape.PLAIN

    def __str__(self):
        head = str(self.path) if self.path is not None else ""
        shape = self.shape
        if shape == UseTreeShape.GROUP:
            body = "{" + ", ".join(str(child) for child in self.use_tree_list) + "}"
        elif shape == UseTreeShape.GLOB:
            body = self.star_token
        else:
            body = None
        if body is not None:
            text = f"{head}::{body}" if head else body
        else:
            text = head
        if shape == UseTreeShape.RENAME:
            text = f"{text} as {self.rename.text}"
        return text

    def __repr__(self):
        return f"UseTree({str(self)!r})"
