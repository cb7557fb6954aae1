"""
Tests for the command line entry point.
"""

import json
from unittest.mock import patch

from rest_index import cli


class TestCli:
    """Tests for rest-index CLI with a local entity file."""
    
    def test_json_output(self, settings, xwiki_root, xwiki_entity_path, capsys):
        with patch("rest_index.cli.get_settings", return_value=settings):
            code = cli.main(["--entity-file", str(xwiki_entity_path)])
        
        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["a_story"] == {
            "uri": xwiki_root + "/a_story",
            "breadcrumbs": "/stories",
        }
        assert len(out) == 3
    
    def test_single_name_text_output(self, settings, xwiki_entity_path, capsys):
        with patch("rest_index.cli.get_settings", return_value=settings):
            code = cli.main([
                "--entity-file", str(xwiki_entity_path),
                "--root-path", "http://wiki/pages/",
                "--name", "another_story",
                "--output", "text",
            ])
        
        assert code == 0
        assert capsys.readouterr().out.strip() == (
            "another_story\thttp://wiki/pages/another_story\t/stories"
        )
    
    def test_unknown_name(self, settings, xwiki_entity_path, capsys):
        with patch("rest_index.cli.get_settings", return_value=settings):
            code = cli.main(["--entity-file", str(xwiki_entity_path), "--name", "nope"])
        
        assert code == 2
        assert capsys.readouterr().out == ""
    
    def test_decode_error_exit_code(self, settings, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"pageSummaries": [{"title": "untitled"}]}', encoding="utf-8")
        
        with patch("rest_index.cli.get_settings", return_value=settings):
            assert cli.main(["--entity-file", str(bad)]) == 1
    
    def test_missing_file_exit_code(self, settings, tmp_path):
        with patch("rest_index.cli.get_settings", return_value=settings):
            assert cli.main(["--entity-file", str(tmp_path / "absent.json")]) == 1
    
    def test_deep_hierarchy(self, settings, tmp_path, capsys):
        depth = 300
        opened = "".join(f'{{"name": "n{i}", "pageSummaries": [' for i in range(depth))
        deep = tmp_path / "deep.json"
        deep.write_text("[" + opened + "]}" * depth + "]", encoding="utf-8")
        
        with patch("rest_index.cli.get_settings", return_value=settings):
            code = cli.main(["--entity-file", str(deep)])
        
        assert code == 0
        assert len(json.loads(capsys.readouterr().out)) == depth
