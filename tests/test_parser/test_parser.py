"""Tests for the layout markup parser and the property-block grammar."""

import pytest

from declay.errors import MalformedMarkupError
from declay.model.document import Node
from declay.parser import parse_markup, parse_properties, serialize_properties


# ---------------------------------------------------------------------------
# Property blocks
# ---------------------------------------------------------------------------


class TestParseProperties:
    def test_simple_block(self):
        assert parse_properties("color: red; width: 100") == {"color": "red", "width": "100"}

    def test_braces_and_whitespace_stripped(self):
        assert parse_properties("  { color : red ;  }  ") == {"color": "red"}

    def test_first_colon_split_keeps_nested_colons(self):
        props = parse_properties("background: url(http://host/a.png); at: 12:30")
        assert props == {"background": "url(http://host/a.png)", "at": "12:30"}

    def test_declaration_without_colon_dropped(self):
        assert parse_properties("color red; width: 5") == {"width": "5"}

    def test_empty_declarations_dropped(self):
        assert parse_properties(";;color: red;;") == {"color": "red"}

    def test_empty_block(self):
        assert parse_properties("") == {}
        assert parse_properties("{}") == {}

    def test_repeated_key_keeps_last(self):
        assert parse_properties("color: red; color: blue") == {"color": "blue"}

    def test_insertion_order_preserved(self):
        assert list(parse_properties("b: 1; a: 2; c: 3")) == ["b", "a", "c"]


class TestSerializeProperties:
    def test_serialize(self):
        assert serialize_properties({"color": "red", "width": "10"}) == "color: red; width: 10;"

    @pytest.mark.parametrize(
        "block",
        [
            "{ font-weight:bold;font-size:20 }",
            "  color : red ; ; at: 12:30  ",
            "no-colon; x: 1;",
        ],
    )
    def test_reparse_is_stable(self, block):
        props = parse_properties(block)
        assert parse_properties(serialize_properties(props)) == props


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestParseMarkup:
    def test_rules_and_root(self):
        doc = parse_markup(
            '<Layout><Style selector=".title">font-weight: bold; font-size: 20</Style>'
            '<VBox><Label class="title">Hi</Label></VBox></Layout>'
        )
        assert len(doc.rules) == 1
        rule = doc.rules[0]
        assert rule.selector.kind == "class"
        assert rule.selector.value == "title"
        assert rule.properties == {"font-weight": "bold", "font-size": "20"}
        assert doc.root.tag == "VBox"
        assert doc.root.children[0].class_list == "title"

    def test_accepts_bytes(self):
        doc = parse_markup(b'<?xml version="1.0" encoding="UTF-8"?><Layout><Spacer/></Layout>')
        assert doc.root.tag == "Spacer"

    def test_node_fields_split_from_attributes(self):
        doc = parse_markup(
            '<Layout><Button id="b" class="x y" style="color: red" text="Go" '
            'onclick="go" bind="k"/></Layout>'
        )
        node = doc.root
        assert node.id == "b"
        assert node.class_list == "x y"
        assert node.inline_style == "color: red"
        assert node.text == "Go"
        assert node.attributes == {"onclick": "go", "bind": "k"}

    def test_content_and_display_text(self):
        doc = parse_markup("<Layout><Label>  Hello  </Label></Layout>")
        assert doc.root.content == "  Hello  "
        assert doc.root.display_text == "Hello"

    def test_text_attribute_wins_over_content(self):
        doc = parse_markup('<Layout><Label text="A">B</Label></Layout>')
        assert doc.root.display_text == "A"

    def test_children_in_order(self):
        doc = parse_markup("<Layout><HBox><Label>1</Label><Spacer/><Label>2</Label></HBox></Layout>")
        assert [c.tag for c in doc.root.children] == ["Label", "Spacer", "Label"]

    def test_namespaced_tags_use_local_name(self):
        doc = parse_markup('<l:Layout xmlns:l="urn:declay"><l:Label>x</l:Label></l:Layout>')
        assert doc.root.tag == "Label"

    def test_unsupported_selector_kept(self):
        doc = parse_markup('<Layout><Style selector="VBox .a">color: red</Style><Spacer/></Layout>')
        assert doc.rules[0].selector.kind == "unsupported"
        assert not doc.rules[0].selector.is_supported

    def test_rule_raw_block_kept(self):
        doc = parse_markup('<Layout><Style selector="#a">{ color: red }</Style><Spacer/></Layout>')
        assert doc.rules[0].raw == "{ color: red }"

    def test_iter_nodes_pre_order(self):
        doc = parse_markup(
            '<Layout><VBox id="a"><HBox id="b"><Label id="c"/></HBox><Label id="d"/></VBox></Layout>'
        )
        assert [n.id for n in doc.iter_nodes()] == ["a", "b", "c", "d"]

    def test_nodes_are_frozen(self):
        node = parse_markup("<Layout><Spacer/></Layout>").root
        assert isinstance(node, Node)
        with pytest.raises(AttributeError):
            node.tag = "Label"


class TestMalformedMarkup:
    def test_unbalanced_tags(self):
        with pytest.raises(MalformedMarkupError) as exc_info:
            parse_markup("<Layout><VBox></Layout>")
        assert exc_info.value.line == 1

    def test_invalid_encoding(self):
        with pytest.raises(MalformedMarkupError):
            parse_markup(b'<?xml version="1.0" encoding="UTF-8"?><Layout><Label>\xff\xfe</Label></Layout>')

    def test_wrong_root_element(self):
        with pytest.raises(MalformedMarkupError, match="Layout"):
            parse_markup("<VBox/>")

    def test_no_content_root(self):
        with pytest.raises(MalformedMarkupError, match="no content"):
            parse_markup('<Layout><Style selector=".a">x: 1</Style></Layout>')

    def test_two_content_roots(self):
        with pytest.raises(MalformedMarkupError, match="exactly one"):
            parse_markup("<Layout><VBox/><HBox/></Layout>")

    def test_fixture_file(self, fixtures_dir):
        with pytest.raises(MalformedMarkupError):
            parse_markup((fixtures_dir / "broken.xml").read_bytes())
