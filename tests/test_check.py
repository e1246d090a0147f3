"""
Tests for catalog consistency checks.

Covers:
- Frontmatter parsing
- Unknown categories, duplicate ids, missing sources, category mismatches
"""

from skillbook.check import check_catalog, read_frontmatter
from skillbook.models.catalog import Catalog


def _write_skill(root, skill_id, content):
    path = root / skill_id / "SKILL.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestReadFrontmatter:
    """Test read_frontmatter."""

    def test_parses_fields(self):
        fm = read_frontmatter("---\nname: test\ncategory: dev\n---\n# Body")
        assert fm == {"name": "test", "category": "dev"}

    def test_no_frontmatter(self):
        assert read_frontmatter("# Body") == {}

    def test_unclosed(self):
        assert read_frontmatter("---\nname: test\n# Body") == {}

    def test_invalid_yaml(self):
        assert read_frontmatter("---\nname: [unclosed\n---\nBody") == {}

    def test_non_mapping(self):
        assert read_frontmatter("---\n- a\n- b\n---\nBody") == {}


class TestCheckCatalog:
    """Test check_catalog."""

    def test_clean_catalog(self, tmp_path, minimal_meta):
        _write_skill(tmp_path, "market-research", "---\nname: market-research\ncategory: business\n---\nBody")
        report = check_catalog(Catalog.from_dict(minimal_meta), tmp_path)
        assert report.ok
        assert report.skills == 1

    def test_unknown_category(self, tmp_path, minimal_meta):
        minimal_meta["skills"][0]["category"] = "nowhere"
        _write_skill(tmp_path, "market-research", "# Body")
        report = check_catalog(Catalog.from_dict(minimal_meta), tmp_path)
        issues = report.by_kind("unknown_category")
        assert [i.skill_id for i in issues] == ["market-research"]
        assert "nowhere" in issues[0].message

    def test_missing_source(self, tmp_path, minimal_meta):
        report = check_catalog(Catalog.from_dict(minimal_meta), tmp_path)
        assert [i.skill_id for i in report.by_kind("missing_source")] == ["market-research"]
        assert not report.ok

    def test_category_mismatch(self, tmp_path, minimal_meta):
        _write_skill(tmp_path, "market-research", "---\nname: market-research\ncategory: dev\n---\nBody")
        report = check_catalog(Catalog.from_dict(minimal_meta), tmp_path)
        issues = report.by_kind("category_mismatch")
        assert len(issues) == 1
        assert "'dev'" in issues[0].message
        assert "'business'" in issues[0].message

    def test_frontmatter_without_category_is_fine(self, tmp_path, minimal_meta):
        _write_skill(tmp_path, "market-research", "---\nname: market-research\n---\nBody")
        assert check_catalog(Catalog.from_dict(minimal_meta), tmp_path).ok

    def test_duplicate_ids(self, tmp_path, minimal_meta):
        minimal_meta["skills"].append(dict(minimal_meta["skills"][0]))
        minimal_meta["categories"].append(dict(minimal_meta["categories"][0]))
        _write_skill(tmp_path, "market-research", "# Body")
        report = check_catalog(Catalog.from_dict(minimal_meta), tmp_path)
        assert len(report.by_kind("duplicate_id")) == 2
