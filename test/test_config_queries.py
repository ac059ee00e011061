"""Tests for query template config parsing and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LuceneQuery.config import load_config, parse_config_dict, parse_query_node
from LuceneQuery.core.template import (
    BooleanNode,
    BoostNode,
    FieldNode,
    FuzzyNode,
    GroupNode,
    ProximityNode,
    RangeNode,
    RawNode,
    RequiredNode,
    TermNode,
)


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "data": {"color": "brown"},
        "queries": [{"NAME": "q1", "QUERY": {"term": "{color}"}}],
    }


class TestParseConfigDict(unittest.TestCase):
    def test_parses_sections(self) -> None:
        cfg = parse_config_dict(_base_raw_config())

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.queries.data, {"color": "brown"})
        self.assertEqual(len(cfg.queries.queries), 1)
        query = cfg.queries.queries[0]
        self.assertEqual(query.name, "q1")
        self.assertEqual(query.root, TermNode(text="{color}"))

    def test_log_section_is_optional(self) -> None:
        raw = _base_raw_config()
        del raw["log"]
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.runtime.dir, "log")

    def test_rejects_unknown_log_level(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_requires_queries(self) -> None:
        raw = _base_raw_config()
        del raw["queries"]
        with self.assertRaisesRegex(ValueError, "queries"):
            parse_config_dict(raw)

    def test_rejects_empty_queries(self) -> None:
        raw = _base_raw_config()
        raw["queries"] = []
        with self.assertRaisesRegex(ValueError, "at least one query"):
            parse_config_dict(raw)

    def test_rejects_duplicate_names(self) -> None:
        raw = _base_raw_config()
        raw["queries"].append({"NAME": "q1", "QUERY": "x"})
        with self.assertRaisesRegex(ValueError, "duplicate NAME"):
            parse_config_dict(raw)

    def test_requires_query_body(self) -> None:
        raw = _base_raw_config()
        raw["queries"] = [{"NAME": "q1"}]
        with self.assertRaisesRegex(ValueError, "queries\\[0\\]\\.QUERY"):
            parse_config_dict(raw)

    def test_load_config_reads_yaml(self) -> None:
        yaml_text = """
queries:
  - NAME: colors
    QUERY:
      group: [red, white, blue]
"""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "queries.yml"
            path.write_text(yaml_text, encoding="utf-8")
            cfg = load_config(path)

        root = cfg.queries.queries[0].root
        self.assertEqual(
            root,
            GroupNode(children=(TermNode("red"), TermNode("white"), TermNode("blue"))),
        )

    def test_shipped_example_config_loads(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "queries.yml")
        self.assertEqual(
            [q.name for q in cfg.queries.queries],
            ["user", "eyes", "colors", "relevance"],
        )


class TestParseQueryNode(unittest.TestCase):
    def test_bare_string_is_term(self) -> None:
        self.assertEqual(parse_query_node("hello", "q"), TermNode("hello"))

    def test_simple_kinds(self) -> None:
        self.assertEqual(parse_query_node({"phrase": "a b"}, "q"), TermNode("a b"))
        self.assertEqual(parse_query_node({"raw": "a~"}, "q"), RawNode("a~"))
        self.assertEqual(parse_query_node({"required": "a"}, "q"), RequiredNode(TermNode("a")))

    def test_field(self) -> None:
        node = parse_query_node({"field": "title", "query": {"raw": "x"}}, "q")
        self.assertEqual(node, FieldNode(name="title", query=RawNode("x")))

    def test_field_requires_query(self) -> None:
        with self.assertRaisesRegex(ValueError, "q\\.query"):
            parse_query_node({"field": "title"}, "q")

    def test_boolean(self) -> None:
        node = parse_query_node({"or": ["a", {"raw": "b"}]}, "q")
        self.assertEqual(node, BooleanNode(operator="OR", children=(TermNode("a"), RawNode("b"))))

    def test_range(self) -> None:
        node = parse_query_node({"range": {"start": "a", "end": "b", "include_right": True}}, "q")
        self.assertEqual(node, RangeNode(start="a", end="b", include_left=False, include_right=True))

    def test_range_bounds_must_be_strings(self) -> None:
        with self.assertRaisesRegex(TypeError, "q\\.range\\.end must be a string"):
            parse_query_node({"range": {"start": "a", "end": 30}}, "q")

    def test_fuzzy(self) -> None:
        self.assertEqual(parse_query_node({"fuzzy": {"raw": "roam"}}, "q"), FuzzyNode(RawNode("roam"), None))
        self.assertEqual(
            parse_query_node({"fuzzy": {"raw": "roam"}, "similarity": 0}, "q"),
            FuzzyNode(RawNode("roam"), 0),
        )

    def test_proximity(self) -> None:
        node = parse_query_node({"proximity": {"first": "a", "second": "b", "distance": 3}}, "q")
        self.assertEqual(node, ProximityNode(first="a", second="b", distance=3))

    def test_boost_requires_factor(self) -> None:
        self.assertEqual(parse_query_node({"boost": "a", "factor": 2}, "q"), BoostNode(TermNode("a"), 2))
        with self.assertRaisesRegex(ValueError, "q\\.factor"):
            parse_query_node({"boost": "a"}, "q")

    def test_rejects_ambiguous_or_unknown_nodes(self) -> None:
        with self.assertRaisesRegex(ValueError, "exactly one of"):
            parse_query_node({"term": "a", "raw": "b"}, "q")
        with self.assertRaisesRegex(ValueError, "exactly one of"):
            parse_query_node({"wildcard": "a*"}, "q")
        with self.assertRaisesRegex(ValueError, "unknown keys"):
            parse_query_node({"term": "a", "factor": 2}, "q")

    def test_rejects_wrong_shapes(self) -> None:
        with self.assertRaisesRegex(TypeError, "q must be an object"):
            parse_query_node(3, "q")
        with self.assertRaisesRegex(TypeError, "q\\.and must be a list"):
            parse_query_node({"and": "a"}, "q")
        with self.assertRaisesRegex(TypeError, "q\\.similarity must be a number"):
            parse_query_node({"fuzzy": "a", "similarity": "high"}, "q")


if __name__ == "__main__":
    unittest.main()
