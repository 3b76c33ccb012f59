import json
from pathlib import Path

import yaml

from monzo_openapi.generator.pipeline import generate
from monzo_openapi.loader import collect_fragments, load_docs
from monzo_openapi.writer import dump_json, dump_yaml, write_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoader:
    def test_concatenates_in_argument_order(self, tmp_path):
        first = tmp_path / "b.md"
        second = tmp_path / "a.md"
        first.write_text("# First\n", encoding="utf-8")
        second.write_text("# Second\n", encoding="utf-8")
        assert load_docs([first, second]) == "# First\n\n# Second\n"

    def test_directory_is_sorted_by_name(self, tmp_path):
        (tmp_path / "02-pots.md").write_text("# Pots\n", encoding="utf-8")
        (tmp_path / "01-accounts.md").write_text("# Accounts\n", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        files = collect_fragments([tmp_path])
        assert [f.name for f in files] == ["01-accounts.md", "02-pots.md"]
        assert load_docs([tmp_path]).index("# Accounts") < load_docs([tmp_path]).index("# Pots")

    def test_no_files(self):
        assert load_docs([]) == ""


class TestWriter:
    def test_yaml_matches_document(self):
        doc = generate((FIXTURES / "monzo-docs.md").read_text(encoding="utf-8"))
        data = yaml.safe_load(dump_yaml(doc))
        assert data == doc.to_openapi()
        assert list(data) == ["openapi", "info", "servers", "tags", "paths", "components"]

    def test_yaml_has_no_anchors(self):
        doc = generate((FIXTURES / "monzo-docs.md").read_text(encoding="utf-8"))
        assert "&id" not in dump_yaml(doc)

    def test_json_matches_yaml(self):
        doc = generate((FIXTURES / "monzo-docs.md").read_text(encoding="utf-8"))
        assert json.loads(dump_json(doc)) == yaml.safe_load(dump_yaml(doc))
        assert dump_json(doc).endswith("}\n")

    def test_write_document_picks_format_from_suffix(self, tmp_path):
        doc = generate("")
        json_path = write_document(doc, tmp_path / "out" / "openapi.json")
        yaml_path = write_document(doc, tmp_path / "out" / "openapi.yaml")
        assert json.loads(json_path.read_text(encoding="utf-8"))["openapi"] == "3.1.0"
        assert yaml.safe_load(yaml_path.read_text(encoding="utf-8"))["openapi"] == "3.1.0"
