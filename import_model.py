"""
import_model.py
Import records produced by flattening a use tree. Each record carries the source text of one standalone `use` statement.
"""
from typing import Optional, Sequence

from use_tree_model import STAR, UNDERSCORE

PATH_SEPARATOR = "::"


class Import:
    """
    One binding introduced by a `use` declaration.
    Either Named (brings `name` into scope) or Unnamed (a glob, or a rename to `_`).
    Import itself is abstract; build records with Import.format or the two subclasses.
    """
    name: Optional[str] = None

    def __init__(self, code: str):
        if type(self) is Import:
            raise TypeError("Import is abstract; use Import.format, Named or Unnamed")
        self.code = code

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @staticmethod
    def format(name: str, path: Sequence[str]) -> 'Import':
        """
        Build the record for `path` bound as `name`.
        The `as` clause is only written when `name` differs from the last segment of `path`.
        """
        joined_path = PATH_SEPARATOR.join(path)
        if path and path[-1] == name:
            code = f"use {joined_path};"
        else:
            code = f"use {joined_path} as {name};"
        if name == UNDERSCORE or name == STAR:
            return Unnamed(code)
        return Named(name, code)

    def _key(self):
        return (self.name, self.code)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())


class Unnamed(Import):
    # use x as _;
    # use x::*;
    def __repr__(self):
        return f"Unnamed({self.code!r})"


class Named(Import):
    # use x::y;
    # use x::y as z;
    def __init__(self, name: str, code: str):
        super().__init__(code)
        self.name = name

    def __repr__(self):
        return f"Named(name={self.name!r}, code={self.code!r})"
