# use_tree_loader.py
# Builds the UseTree model from the lark parse tree of a single `use` declaration.
from typing import List

from lark import Token, Tree

from import_model import Import
from lark_parser import USE_TREE_RULES, parse_use_decl
from use_tree_model import UNDERSCORE, UsePath, UseRename, UseTree
from use_trees import use_tree_names


def get_line(node):
    return getattr(node, 'line', None) or -1


class UseTreeLoader:
    """
    Converts `use` declarations into UseTree models.
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

    def load(self, text: str) -> UseTree:
        tree = parse_use_decl(text)
        self.debug_print(f"Parse tree: {tree}")
        return self.build(tree)

    def build(self, tree: Tree) -> UseTree:
        """Build a UseTree from a parse tree produced by lark_parser.parse_use_decl."""
        for use_decl in tree.find_data('use_decl'):
            for child in use_decl.children:
                if isinstance(child, Tree) and child.data == 'visibility':
                    # Visibility does not change what gets bound
                    self.debug_print(f"Ignoring visibility on line {get_line(use_decl)}")
                elif isinstance(child, Tree) and child.data in USE_TREE_RULES:
                    return self._build_use_tree(child)
        raise ValueError("Parse tree does not contain a use tree")

    def _build_use_tree(self, node: Tree) -> UseTree:
        line = get_line(node)
        path = None
        use_tree_list = None
        rename = None
        star_token = None
        for child in node.children:
            if isinstance(child, Tree) and child.data == 'path':
                path = self._build_path(child, line)
            elif isinstance(child, Tree) and child.data == 'use_tree_list':
                use_tree_list = [self._build_use_tree(c) for c in child.children if isinstance(c, Tree)]
            elif isinstance(child, Tree) and child.data == 'use_rename':
                rename = self._build_rename(child)
            elif isinstance(child, Token) and child.type == 'STAR':
                star_token = str(child)
        # `a::{}` is still a group, just an empty one
        if node.data == 'use_group' and use_tree_list is None:
            use_tree_list = []
        use_tree = UseTree(path=path, use_tree_list=use_tree_list, rename=rename, star_token=star_token, line=line)
        self.debug_print(f"Built {node.data} '{use_tree}' (line {line})")
        return use_tree

    def _build_path(self, node: Tree, line: int) -> UsePath:
        segments = [str(token) for token in node.children if isinstance(token, Token) and token.type == 'NAME']
        return UsePath.from_segments(segments, line)

    def _build_rename(self, node: Tree) -> UseRename:
        target = str(node.children[0])
        if target == UNDERSCORE:
            return UseRename(underscore=True)
        return UseRename(name=target)


def load_use_tree(text: str, verbose: bool = False) -> UseTree:
    return UseTreeLoader(verbose=verbose).load(text)


def use_tree_names_from_source(text: str, verbose: bool = False) -> List[Import]:
    """Parse one `use` declaration and return the imports it binds, in source order."""
    return use_tree_names(load_use_tree(text, verbose=verbose), verbose=verbose)
