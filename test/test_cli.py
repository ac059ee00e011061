"""Tests for the click CLI."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LuceneQuery.cli.commands import RenderCommand
from LuceneQuery.cli.ui import cli, parse_data_options
from LuceneQuery.config import parse_config_dict

_CONFIG_YAML = """
log:
  level: WARNING
  to_file: false
  dir: log

data:
  user:
    name: Dolly

queries:
  - NAME: user
    QUERY:
      field: user-name
      query: "{user[name]}"
  - NAME: eyes
    QUERY:
      and:
        - field: eye-color
          query: "{color}"
        - boost:
            raw: tall
          factor: 2
"""


class TestParseDataOptions(unittest.TestCase):
    def test_flat_and_nested_keys(self) -> None:
        data = parse_data_options(("color=brown", "user.name=Molly", "user.id=7"))
        self.assertEqual(data, {"color": "brown", "user": {"name": "Molly", "id": "7"}})

    def test_value_may_contain_equals(self) -> None:
        self.assertEqual(parse_data_options(("q=a=b",)), {"q": "a=b"})

    def test_rejects_pairs_without_equals(self) -> None:
        from click import BadParameter

        with self.assertRaises(BadParameter):
            parse_data_options(("color",))


class TestRenderCommand(unittest.TestCase):
    def _config(self):
        return parse_config_dict(
            {
                "data": {"user": {"name": "Dolly"}, "color": "brown"},
                "queries": [
                    {
                        "NAME": "user",
                        "DATA": {"user": {"id": "7"}, "color": "blue"},
                        "QUERY": {"and": [{"raw": "{user[id]}"}, {"raw": "{user[name]}"}, {"raw": "{color}"}]},
                    }
                ],
            }
        )

    def test_template_data_overrides_config_data_key_by_key(self) -> None:
        compiled = RenderCommand(config=self._config(), data={}).execute()
        self.assertEqual(compiled[0].query, "7 AND Dolly AND blue")

    def test_command_line_data_overrides_template_data(self) -> None:
        compiled = RenderCommand(config=self._config(), data={"user": {"name": "Molly"}}).execute()
        self.assertEqual(compiled[0].query, "7 AND Molly AND blue")


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "queries.yml"
        self.config_path.write_text(_CONFIG_YAML, encoding="utf-8")
        self.runner = CliRunner()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _invoke(self, *args: str):
        return self.runner.invoke(cli, ["--config", str(self.config_path), *args])

    def test_render_named_query(self) -> None:
        result = self._invoke("render", "--name", "user")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('user: user-name: "Dolly"', result.output)

    def test_render_with_cli_data(self) -> None:
        result = self._invoke("render", "--data", "color=brown", "--data", "user.name=Molly")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('user: user-name: "Molly"', result.output)
        self.assertIn('eyes: eye-color: "brown" AND tall^2', result.output)

    def test_render_json(self) -> None:
        result = self._invoke("render", "--name", "user", "--format", "json")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), [{"name": "user", "query": 'user-name: "Dolly"'}])

    def test_render_aborts_on_missing_data(self) -> None:
        result = self._invoke("render", "--name", "eyes")
        self.assertNotEqual(result.exit_code, 0)

    def test_render_aborts_on_unknown_name(self) -> None:
        result = self._invoke("render", "--name", "nope")
        self.assertNotEqual(result.exit_code, 0)

    def test_render_reports_invalid_config(self) -> None:
        self.config_path.write_text("queries: 3\n", encoding="utf-8")
        result = self._invoke("render")
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("queries must be a list", result.output)

    def test_escape_and_term_commands(self) -> None:
        result = self.runner.invoke(cli, ["escape", "a+b (c)"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), "a\\+b \\(c\\)")

        result = self.runner.invoke(cli, ["term", "hello world"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), '"hello world"')


if __name__ == "__main__":
    unittest.main()
