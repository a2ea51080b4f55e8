"""
Tests for commands.json deserialization.
"""

import pytest

from command_tree import CommandNode, CommandTreeError, load_command_tree, node_from_json, parse_command_tree


class TestNodeFromJson:

    def test_defaults_for_absent_keys(self):
        node = node_from_json({"type": "literal"})

        assert node == CommandNode(kind="literal")
        assert node.executable is False
        assert node.parser is None
        assert node.redirects == ()
        assert node.children == {}

    def test_children_keep_document_order(self, sample_tree):
        assert list(sample_tree.children) == ["help", "execute", "tp", "teleport"]
        assert list(sample_tree.children["execute"].children) == ["run", "as"]

    def test_fields_are_read(self, sample_tree):
        command = sample_tree.children["help"].children["command"]
        assert command.kind == "argument"
        assert command.parser == "brigadier:string"
        assert command.executable is True
        assert sample_tree.children["tp"].redirects == ("teleport",)

    def test_argument_without_parser_still_parses(self):
        # the namespace check happens when the label is built
        node = node_from_json({"type": "argument"})
        assert node.parser is None

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({}, "missing required key 'type'"),
            ({"type": 3}, "'type' must be str"),
            ({"type": "bogus"}, "unknown node type"),
            ({"type": "root", "children": []}, "'children' must be dict"),
            ({"type": "literal", "executable": "yes"}, "'executable' must be bool"),
            ({"type": "argument", "parser": 1}, "'parser' must be str"),
            ({"type": "literal", "redirect": "tp"}, "'redirect' must be list"),
            ({"type": "literal", "redirect": [1]}, "'redirect entry' must be str"),
            ([], "'node' must be dict"),
        ],
    )
    def test_structural_violations(self, payload, message):
        with pytest.raises(CommandTreeError, match=message):
            node_from_json(payload)

    def test_error_names_the_offending_child(self):
        data = {"type": "root", "children": {"a": {"type": "literal", "children": {"b": {}}}}}
        with pytest.raises(CommandTreeError, match=r"\(root\)/a/b"):
            node_from_json(data)


class TestParseCommandTree:

    def test_invalid_json(self):
        with pytest.raises(CommandTreeError):
            parse_command_tree("{not json")

    def test_load_from_file(self, write_json, sample_data):
        root = load_command_tree(write_json(sample_data))
        assert root.kind == "root"
        assert root.count() == 10

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_command_tree(str(tmp_path / "nope.json"))


def test_iter_nodes_is_preorder(sample_tree):
    paths = [path for path, _ in sample_tree.iter_nodes()]
    assert paths == [
        (),
        ("help",),
        ("help", "command"),
        ("execute",),
        ("execute", "run"),
        ("execute", "as"),
        ("execute", "as", "targets"),
        ("tp",),
        ("teleport",),
        ("teleport", "x"),
    ]
