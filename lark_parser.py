from lark import Lark, Transformer, Tree


# Grammar for a single Rust `use` declaration
grammar = r"""
    start: use_decl
    use_decl: visibility? "use" use_tree ";"

    visibility: "pub" ("(" VIS_SCOPE ")")?
    VIS_SCOPE: /[^()]+/

    ?use_tree: use_path_tree
             | use_glob
             | use_group

    use_path_tree: path use_rename?
    use_glob: (path? _PATH_SEP)? STAR
    use_group: (path? _PATH_SEP)? "{" use_tree_list? "}"
    use_tree_list: use_tree ("," use_tree)* ","?
    use_rename: "as" NAME

    // A leading `::` is accepted and dropped
    path: _PATH_SEP? NAME (_PATH_SEP NAME)*

    _PATH_SEP: "::"
    STAR: "*"
    // Identifiers, raw identifiers, path keywords (self, super, crate) and `_`
    NAME: /(r#)?[a-zA-Z_][a-zA-Z0-9_]*/

    %import common.WS
    %import common.CPP_COMMENT
    %import common.C_COMMENT
    %ignore WS
    %ignore CPP_COMMENT
    %ignore C_COMMENT
"""

parser = Lark(
    grammar,
    start='start',
    propagate_positions=True
)

USE_TREE_RULES = ('use_path_tree', 'use_glob', 'use_group')


# Transformer to attach line numbers to use tree nodes
class AttachUseTreeLineNumbers(Transformer):
    def __default__(self, data, children, meta):
        node = Tree(data, children, meta)
        if data in USE_TREE_RULES and not meta.empty:
            node.line = meta.line
        return node

def parse_use_decl(text):
    tree = parser.parse(text)
    # Attach line numbers to use tree nodes
    tree = AttachUseTreeLineNumbers().transform(tree)
    return tree
