"""
Shared fixtures for the command graph test suite.
"""

import json

import pytest

from command_tree import node_from_json


SAMPLE_TREE = {
    "type": "root",
    "children": {
        "help": {
            "type": "literal",
            "executable": True,
            "children": {
                "command": {
                    "type": "argument",
                    "parser": "brigadier:string",
                    "properties": {"type": "greedy"},
                    "executable": True,
                }
            },
        },
        "execute": {
            "type": "literal",
            "children": {
                "run": {"type": "literal", "redirect": []},
                "as": {
                    "type": "literal",
                    "children": {
                        "targets": {
                            "type": "argument",
                            "parser": "minecraft:entity",
                            "redirect": ["execute"],
                        }
                    },
                },
            },
        },
        "tp": {"type": "literal", "redirect": ["teleport"]},
        "teleport": {
            "type": "literal",
            "children": {
                "x": {"type": "argument", "parser": "brigadier:integer", "executable": True}
            },
        },
    },
}


@pytest.fixture
def sample_data():
    return json.loads(json.dumps(SAMPLE_TREE))


@pytest.fixture
def sample_tree(sample_data):
    return node_from_json(sample_data)


@pytest.fixture
def write_json(tmp_path):
    """Write an object (or raw text) to a file under tmp_path and return its path."""

    def _write(payload, name="commands.json"):
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
