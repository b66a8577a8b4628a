"""
use_trees.py
Flattens a use tree into one Import record per bound name, in source order.
`use std::collections::{self, HashSet as Set};` yields
Named("collections", "use std::collections;") and Named("Set", "use std::collections::HashSet as Set;").
"""
from typing import Callable, List, Optional, Tuple

from import_model import Import
from use_tree_model import STAR, UsePath, UseTree, UseTreeShape


class MalformedUseTreeError(Exception):
    pass


def _collect_path_segments(path: Optional[UsePath]) -> Tuple[str, ...]:
    """
    Walk the qualifier chain from the leaf to the root and return the named segments root-to-leaf.
    Path keywords (crate, super, self) are not names and are left out.
    """
    path_parts = []
    while path is not None and path.segment is not None:
        if path.segment.kind == "name":
            path_parts.append(path.segment.text)
        path = path.qualifier
    path_parts.reverse()
    return tuple(path_parts)


class UseTreeFlattener:
    """
    Depth-first walk over a UseTree. Every node is paired with the prefix
    accumulated above it; groups hand their full prefix to each child.
    """

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: Whether to print debug information (default: False)
        """
        self.verbose = verbose

    def debug_print(self, message: str) -> None:
        if self.verbose:
            print(f"[DEBUG] {message}")

    def flatten(self, use_tree: UseTree, out: Callable[[Import], None]) -> None:
        # Explicit stack instead of recursion; children are pushed in reverse so they pop in source order.
        stack: List[Tuple[UseTree, Tuple[str, ...]]] = [(use_tree, ())]
        while stack:
            node, prefix = stack.pop()
            path = node.path
            new_prefix = prefix
            if path is not None:
                # `::self` means "what we've got so far", bound under its own last name.
                if path.segment is not None and path.segment.is_self:
                    self_path = prefix + _collect_path_segments(path.qualifier)
                    if self_path:
                        self._emit(self_path[-1], self_path, out)
                    else:
                        self.debug_print(f"Skipping bare self in '{node}'")
                    continue
                new_prefix = prefix + _collect_path_segments(path)

            shape = node.shape
            if shape == UseTreeShape.GROUP:
                self.debug_print(f"Entering group under '{'::'.join(new_prefix)}' with {len(node.use_tree_list)} item(s)")
                for subtree in reversed(node.use_tree_list):
                    stack.append((subtree, new_prefix))
            elif shape == UseTreeShape.RENAME:
                if node.rename.text is None:
                    self.debug_print(f"Skipping rename without a target in '{node}'")
                    continue
                self._emit(node.rename.text, new_prefix, out)
            elif shape == UseTreeShape.GLOB:
                star = node.star_token or STAR
                self._emit(star, new_prefix + (star,), out)
            elif shape == UseTreeShape.PLAIN:
                if not new_prefix:
                    raise MalformedUseTreeError(f"Use tree leaf has no path (line {node.line})")
                self._emit(new_prefix[-1], new_prefix, out)

    def _emit(self, name: str, path: Tuple[str, ...], out: Callable[[Import], None]) -> None:
        record = Import.format(name, path)
        self.debug_print(f"Emitting {record!r}")
        out(record)


def use_tree_names_do(use_tree: UseTree, out: Callable[[Import], None], verbose: bool = False) -> None:
    """Call `out` once per import bound by `use_tree`, in source order."""
    UseTreeFlattener(verbose=verbose).flatten(use_tree, out)


def use_tree_names(use_tree: UseTree, verbose: bool = False) -> List[Import]:
    imports = []
    use_tree_names_do(use_tree, imports.append, verbose=verbose)
    return imports
