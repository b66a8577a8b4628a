import pytest
from lark_parser import parse_use_decl

def test_simple_use():
    tree = parse_use_decl("use foo::bar;")
    pretty = tree.pretty()
    assert 'use_decl' in pretty, pretty
    assert 'use_path_tree' in pretty, pretty
    assert 'foo' in pretty and 'bar' in pretty, pretty

def test_nested_groups():
    text = '''
    use std::{
        io::{self, Read},
        fmt::*,
        sync::Arc as Shared,
    };
    '''
    tree = parse_use_decl(text)
    pretty = tree.pretty()
    assert 'use_group' in pretty, pretty
    assert 'use_tree_list' in pretty, pretty
    assert 'use_glob' in pretty, pretty
    assert 'use_rename' in pretty, pretty
    assert 'Shared' in pretty, pretty

def test_visibility():
    tree = parse_use_decl("pub(in crate::a) use b::c;")
    assert 'visibility' in tree.pretty(), tree.pretty()

def test_use_tree_nodes_have_lines():
    tree = parse_use_decl("\nuse a::{\nb};")
    groups = list(tree.find_data('use_group'))
    assert groups[0].line == 2
    leaves = list(tree.find_data('use_path_tree'))
    assert leaves[0].line == 3

if __name__ == "__main__":
    pytest.main([__file__])
