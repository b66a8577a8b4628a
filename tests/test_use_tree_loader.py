import pytest
from lark import Tree
from lark.exceptions import UnexpectedInput
from use_tree_loader import UseTreeLoader, get_line, load_use_tree, use_tree_names_from_source
from use_tree_model import UseTreeShape


def test_load_plain():
    tree = load_use_tree("use a::b::c;")
    assert tree.shape == UseTreeShape.PLAIN
    assert tree.path.segments() == ["a", "b", "c"]


def test_load_group():
    tree = load_use_tree("use std::collections::{self, hash_map::{HashMap}, HashSet as MyHashSet};")
    assert tree.shape == UseTreeShape.GROUP
    assert str(tree.path) == "std::collections"
    children = tree.use_tree_list
    assert [child.shape for child in children] == [UseTreeShape.PLAIN, UseTreeShape.GROUP, UseTreeShape.RENAME]
    assert children[0].path.segment.is_self
    assert str(children[1].use_tree_list[0].path) == "HashMap"
    assert children[2].rename.name == "MyHashSet"


def test_load_underscore_rename():
    tree = load_use_tree("use foo::bar::MyTrait as _;")
    assert tree.rename.underscore
    assert tree.rename.name is None


def test_load_glob():
    tree = load_use_tree("use foo::bar::*;")
    assert tree.shape == UseTreeShape.GLOB
    assert tree.star_token == "*"
    assert str(tree.path) == "foo::bar"


def test_load_empty_group():
    tree = load_use_tree("use a::{};")
    assert tree.shape == UseTreeShape.GROUP
    assert tree.use_tree_list == []


def test_load_group_without_path():
    tree = load_use_tree("use {a, b,};")
    assert tree.path is None
    assert len(tree.use_tree_list) == 2


def test_line_numbers():
    tree = load_use_tree("\n\nuse a::{\n    b,\n    c,\n};")
    assert tree.line == 3
    assert [child.line for child in tree.use_tree_list] == [4, 5]


def test_get_line_without_line_attribute():
    assert get_line(Tree('use_path_tree', [])) == -1


def test_visibility_and_comments_are_ignored():
    text = "pub(crate) use a::{ /* first */ b, // second\n c };"
    assert [imp.code for imp in use_tree_names_from_source(text)] == ["use a::b;", "use a::c;"]


def test_raw_identifier():
    assert [imp.name for imp in use_tree_names_from_source("use a::r#type;")] == ["r#type"]


def test_not_a_use_declaration():
    with pytest.raises(UnexpectedInput):
        load_use_tree("fn main() {}")


def test_missing_semicolon():
    with pytest.raises(UnexpectedInput):
        load_use_tree("use a::b")


def test_build_rejects_tree_without_use_decl():
    with pytest.raises(ValueError):
        UseTreeLoader().build(Tree('start', []))


def test_verbose_loader(capsys):
    UseTreeLoader(verbose=True).load("use a::b;")
    out = capsys.readouterr().out
    assert "[DEBUG] Parse tree:" in out
    assert "use_path_tree" in out
