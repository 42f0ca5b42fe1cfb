from falcogen.dom_model import DomNode, document, element, text
from falcogen.emitter import VOID_ELEMENTS, emit_document, emit_node
from falcogen.models import ConverterOptions


def test_text_is_trimmed_and_escaped() -> None:
    assert emit_node(text('  say "hi"\n ')) == '_text "say \\"hi\\""'


def test_whitespace_text_emits_nothing() -> None:
    assert emit_node(text(" \n\t ")) == ""
    assert emit_node(text("")) == ""


def test_element_without_children_has_empty_lists() -> None:
    assert emit_node(element("div")) == "_div [] []"


def test_whitespace_children_do_not_count() -> None:
    node = element("ul", children=[text("\n  "), text("   ")])
    assert emit_node(node) == "_ul [] []"


def test_nested_elements_are_indented_per_depth() -> None:
    tree = element("div", {"class": "a"}, [element("p", children=[text("Hi")])])

    assert emit_node(tree) == (
        '_div [ _class_ "a" ] [\n'
        "    _p [] [\n"
        '        _text "Hi"\n'
        "    ]\n"
        "]"
    )


def test_indent_size_comes_from_options() -> None:
    tree = element("div", children=[element("span", children=[text("x")])])

    output = emit_node(tree, options=ConverterOptions(indent_size=2))

    assert output == '_div [] [\n  _span [] [\n    _text "x"\n  ]\n]'


def test_depth_is_not_shared_between_siblings() -> None:
    deep = element("div", children=[element("div", children=[element("div", children=[text("deep")])])])
    tree = element("section", children=[deep, element("p", children=[text("next")])])

    lines = emit_node(tree).split("\n")

    assert "    _p [] [" in lines
    assert '        _text "next"' in lines


def test_void_elements_drop_children() -> None:
    for name in sorted(VOID_ELEMENTS):
        node = element(name, {"id": "x"}, [text("ignored"), element("span")])
        assert emit_node(node) == f'_{name} [ _id_ "x" ]'


def test_script_body_replaces_double_quotes() -> None:
    node = element("script", {"type": "module"}, [text('var x = "y";\nconsole.log(x);')])

    assert node.kind == "script"
    assert emit_node(node) == (
        '_script [ _type_ "module" ] [\n'
        "    _text \"var x = 'y';\nconsole.log(x);\"\n"
        "]"
    )


def test_script_keeps_only_text_children() -> None:
    node = element("script", children=[element("b", children=[text("no")]), text("  ")])
    assert emit_node(node) == "_script [] []"


def test_script_identifier_is_lower_case() -> None:
    node = element("SCRIPT", children=[text("go()")])
    assert emit_node(node) == '_script [] [\n    _text "go()"\n]'


def test_unknown_kinds_emit_nothing() -> None:
    assert emit_node(DomNode(kind="other", text=" a comment ")) == ""


def test_document_joins_roots_with_newlines() -> None:
    doc = document([element("br"), text("  "), DomNode(kind="other"), text("tail")])
    assert emit_document(doc) == '_br []\n_text "tail"'


def test_empty_document() -> None:
    assert emit_document(document()) == ""


def test_deep_tree() -> None:
    node = text("leaf")
    for _ in range(2000):
        node = element("div", children=[node])

    output = emit_node(node)

    assert output.count("[") == output.count("]")
    assert output.split("\n")[2000].strip() == '_text "leaf"'


def test_deep_tree_lines_are_indented_per_level() -> None:
    node = text("leaf")
    for _ in range(2000):
        node = element("div", children=[node])

    lines = emit_node(node, options=ConverterOptions(indent_size=1)).split("\n")

    assert len(lines) == 4001
    assert lines[1999] == " " * 1999 + "_div [] ["
    assert lines[2001] == " " * 1999 + "]"
