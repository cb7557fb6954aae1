"""
Unit Tests for JsonHierarchyDecoder
"""

import json
from unittest.mock import patch

import pytest

from rest_index.errors import HierarchyDecodeError
from rest_index.pipeline.decoder import JsonHierarchyDecoder


class TestJsonHierarchyDecoder:
    """Tests for decoding JSON hierarchy documents."""
    
    def test_decode_xwiki_fixture(self, xwiki_entity):
        """Test decoding the XWiki space fixture into a typed tree."""
        nodes = JsonHierarchyDecoder().decode(xwiki_entity)
        
        assert len(nodes) == 1
        assert nodes[0].identifier == "stories"
        assert [c.identifier for c in nodes[0].children] == ["a_story", "another_story"]
        assert nodes[0].children[0].children == []
    
    def test_top_level_array(self):
        nodes = JsonHierarchyDecoder().decode('[{"name": "a"}, {"name": "b"}]')
        
        assert [n.identifier for n in nodes] == ["a", "b"]
    
    def test_preserves_document_order(self):
        names = ["zeta", "alpha", "mu"]
        entity = json.dumps({"pageSummaries": [{"name": n} for n in names]})
        
        nodes = JsonHierarchyDecoder().decode(entity)
        
        assert [n.identifier for n in nodes] == names
    
    def test_null_children_means_leaf(self):
        nodes = JsonHierarchyDecoder().decode('[{"name": "a", "pageSummaries": null}]')
        
        assert nodes[0].children == []
    
    def test_missing_identifier_reports_path(self):
        entity = json.dumps(
            {"pageSummaries": [{"name": "a", "pageSummaries": [{"title": "x"}]}]}
        )
        
        with pytest.raises(HierarchyDecodeError) as exc_info:
            JsonHierarchyDecoder().decode(entity)
        
        assert exc_info.value.path == "$.pageSummaries[0].pageSummaries[0]"
        assert "name" in str(exc_info.value)
    
    @pytest.mark.parametrize("identifier", ['""', "null", "42"])
    def test_rejects_bad_identifiers(self, identifier):
        with pytest.raises(HierarchyDecodeError):
            JsonHierarchyDecoder().decode(f'[{{"name": {identifier}}}]')
    
    def test_rejects_non_object_node(self):
        with pytest.raises(HierarchyDecodeError) as exc_info:
            JsonHierarchyDecoder().decode('["a_story"]')
        
        assert exc_info.value.path == "$[0]"
    
    def test_rejects_non_list_children(self):
        with pytest.raises(HierarchyDecodeError) as exc_info:
            JsonHierarchyDecoder().decode('{"pageSummaries": {"name": "a"}}')
        
        assert exc_info.value.path == "$.pageSummaries"
    
    def test_rejects_scalar_document(self):
        with pytest.raises(HierarchyDecodeError):
            JsonHierarchyDecoder().decode('"stories"')
    
    def test_malformed_json(self):
        with pytest.raises(HierarchyDecodeError, match="Malformed JSON"):
            JsonHierarchyDecoder().decode('{"pageSummaries": [')
    
    def test_custom_keys(self):
        decoder = JsonHierarchyDecoder(identifier_key="id", children_key="kids")
        
        nodes = decoder.decode('{"kids": [{"id": "p", "kids": [{"id": "c"}]}]}')
        
        assert nodes[0].identifier == "p"
        assert nodes[0].children[0].identifier == "c"
    
    def test_deep_chain_keeps_paths(self):
        """Test decoding a deep hierarchy and reporting errors at depth."""
        depth = 300
        opened = "".join(f'{{"name": "n{i}", "pageSummaries": [' for i in range(depth))
        entity = "[" + opened + '{"title": "x"}' + "]}" * depth + "]"
        
        with pytest.raises(HierarchyDecodeError) as exc_info:
            JsonHierarchyDecoder().decode(entity)
        
        assert exc_info.value.path == "$[0]" + ".pageSummaries[0]" * depth
    
    def test_parser_recursion_becomes_decode_error(self):
        with patch(
            "rest_index.pipeline.decoder.json.loads",
            side_effect=RecursionError("maximum recursion depth exceeded"),
        ):
            with pytest.raises(HierarchyDecodeError, match="nested too deeply"):
                JsonHierarchyDecoder().decode('[{"name": "a"}]')
