"""
Tests for the legacy mirror generator.

Covers:
- strip_frontmatter edge cases
- INDEX.md grouping, exclusion and ordering
- Writing the mirror tree (missing sources skipped, valid set returned)
"""

from pathlib import Path

import pytest

from skillbook.generators.legacy import (
    INDEX_HEADER,
    generate_index_md,
    strip_frontmatter,
    write_legacy_mirror,
)
from skillbook.models.catalog import Catalog


INDEX_META = {
    "categories": [
        {"id": "business", "label": "Business", "icon": "📊", "description": {"ko": "비즈니스", "en": "Business"}},
        {"id": "dev", "label": "Development", "icon": "💻", "description": {"ko": "개발", "en": "Dev"}},
        {"id": "design", "label": "Design", "icon": "🎨", "description": {"ko": "디자인", "en": "Design"}},
        {"id": "meta", "label": "Meta", "icon": "🔧", "description": {"ko": "메타", "en": "Meta"}},
    ],
    "skills": [
        {"id": "market-research", "category": "business", "description": {"ko": "시장조사 스킬", "en": "Market research"}},
        {"id": "frontend", "category": "dev", "description": {"ko": "프론트엔드 개발", "en": "Frontend dev"}},
        {"id": "documentation", "category": "meta", "description": {"ko": "문서화", "en": "Documentation"}},
        {"id": "health", "category": "meta", "description": {"ko": "헬스체크", "en": "Health check"}},
        {"id": "manage", "category": "meta", "description": {"ko": "관리", "en": "Manage"}},
        {"id": "sync", "category": "meta", "description": {"ko": "동기화", "en": "Sync"}},
    ],
}


class TestStripFrontmatter:
    """Test frontmatter removal."""

    def test_removes_frontmatter(self):
        text = "---\nname: test\ncategory: dev\n---\n# Heading\n\nBody text"
        assert strip_frontmatter(text) == "# Heading\n\nBody text"

    def test_removes_leading_blank_lines(self):
        assert strip_frontmatter("---\nname: test\n---\n\n\n# Heading") == "# Heading"

    def test_no_frontmatter_unchanged(self):
        text = "# Heading\n\nBody text"
        assert strip_frontmatter(text) == text

    def test_unclosed_frontmatter_unchanged(self):
        text = "---\nname: test\n# Heading"
        assert strip_frontmatter(text) == text

    def test_marker_not_at_start_unchanged(self):
        text = "\n---\nname: test\n---\nBody"
        assert strip_frontmatter(text) == text

    def test_dashes_inside_values(self):
        text = '---\nname: test\ndescription: "has --- dashes"\nallowed-tools:\n  - Read\n  - Write\n---\nBody'
        assert strip_frontmatter(text) == "Body"

    def test_longer_dash_run_is_not_a_closer(self):
        text = "---\nname: test\n----\nstill frontmatter\n---\nBody"
        assert strip_frontmatter(text) == "Body"

    def test_closing_marker_at_end(self):
        assert strip_frontmatter("---\nname: test\n---") == ""

    def test_keeps_later_horizontal_rules(self):
        text = "---\nname: test\n---\nIntro\n\n---\n\nMore"
        assert strip_frontmatter(text) == "Intro\n\n---\n\nMore"

    def test_empty_string(self):
        assert strip_frontmatter("") == ""


class TestGenerateIndexMd:
    """Test INDEX.md content."""

    def test_starts_with_header(self):
        assert generate_index_md(INDEX_META).startswith(INDEX_HEADER)

    def test_category_headings(self):
        result = generate_index_md(INDEX_META)
        assert "## Business" in result
        assert "## Development" in result
        assert "## Meta" in result

    def test_category_without_skills_has_no_heading(self):
        assert "## Design" not in generate_index_md(INDEX_META)

    def test_category_headings_in_catalog_order(self):
        result = generate_index_md(INDEX_META)
        assert result.index("## Business") < result.index("## Development") < result.index("## Meta")

    def test_skill_entries(self):
        lines = generate_index_md(INDEX_META).split("\n")
        idx = lines.index("### business/market-research.md")
        assert lines[idx + 1] == "시장조사 스킬"
        idx = lines.index("### dev/frontend.md")
        assert lines[idx + 1] == "프론트엔드 개발"

    def test_skill_under_its_category(self):
        result = generate_index_md(INDEX_META)
        assert result.index("## Meta") < result.index("### meta/documentation.md")
        assert result.index("## Development") < result.index("### dev/frontend.md") < result.index("## Meta")

    def test_excludes_automation_skills(self):
        result = generate_index_md(INDEX_META)
        assert "### meta/health.md" not in result
        assert "### meta/manage.md" not in result
        assert "### meta/sync.md" not in result

    def test_skill_count(self):
        headers = [l for l in generate_index_md(INDEX_META).split("\n") if l.startswith("### ")]
        assert len(headers) == 3

    def test_custom_exclusions(self):
        result = generate_index_md(INDEX_META, excluded_ids=["frontend"])
        assert "### dev/frontend.md" not in result
        assert "## Development" not in result
        assert "### meta/health.md" in result

    def test_only_excluded_skills_drops_category(self):
        meta = {
            "categories": [{"id": "meta", "label": "Meta"}],
            "skills": [{"id": "health", "category": "meta", "description": {"ko": "x", "en": "x"}}],
        }
        assert "## Meta" not in generate_index_md(meta)

    def test_unknown_category_listed_as_uncategorized(self):
        meta = {
            "categories": [{"id": "dev", "label": "Development"}],
            "skills": [
                {"id": "frontend", "category": "dev", "description": {"ko": "프론트", "en": "Front"}},
                {"id": "stray", "category": "nowhere", "description": {"ko": "미분류", "en": "Stray"}},
            ],
        }
        result = generate_index_md(meta)
        assert result.index("## Development") < result.index("## Uncategorized")
        assert "### nowhere/stray.md\n미분류" in result


class TestWriteLegacyMirror:
    """Test writing mirror files to disk."""

    @pytest.fixture
    def skills_root(self, tmp_path):
        root = tmp_path / "skills"
        for skill_id in ("market-research", "documentation", "health"):
            (root / skill_id).mkdir(parents=True)
            (root / skill_id / "SKILL.md").write_text(
                f"---\nname: {skill_id}\n---\n\n# {skill_id}\n", encoding="utf-8"
            )
        return root

    def test_writes_stripped_files(self, tmp_path, skills_root):
        legacy = tmp_path / "legacy"
        result = write_legacy_mirror(
            Catalog.from_dict(INDEX_META), skills_root, legacy, ["health", "manage", "sync"]
        )

        target = legacy / "business" / "market-research.md"
        assert target.read_text(encoding="utf-8") == "# market-research\n"
        assert (legacy / "meta" / "documentation.md").exists()
        assert result.synced == 2
        assert str(target) in result.written

    def test_excluded_skills_not_written(self, tmp_path, skills_root):
        legacy = tmp_path / "legacy"
        result = write_legacy_mirror(
            Catalog.from_dict(INDEX_META), skills_root, legacy, ["health", "manage", "sync"]
        )
        assert not (legacy / "meta" / "health.md").exists()
        assert result.excluded == ["health", "manage", "sync"]

    def test_missing_source_skipped_with_warning(self, tmp_path, skills_root, caplog):
        legacy = tmp_path / "legacy"
        with caplog.at_level("WARNING"):
            result = write_legacy_mirror(
                Catalog.from_dict(INDEX_META), skills_root, legacy, ["health", "manage", "sync"]
            )
        assert result.skipped == ["frontend"]
        assert not (legacy / "dev" / "frontend.md").exists()
        assert "frontend" in caplog.text

    def test_writes_index(self, tmp_path, skills_root):
        legacy = tmp_path / "legacy"
        result = write_legacy_mirror(
            Catalog.from_dict(INDEX_META), skills_root, legacy, ["health", "manage", "sync"],
            index_name="INDEX.md",
        )
        index = Path(result.index_path)
        assert index == legacy / "INDEX.md"
        assert index.read_text(encoding="utf-8") == generate_index_md(INDEX_META)
        assert str(index) not in result.written

    def test_overwrites_existing_file(self, tmp_path, skills_root):
        legacy = tmp_path / "legacy"
        (legacy / "business").mkdir(parents=True)
        (legacy / "business" / "market-research.md").write_text("stale")
        write_legacy_mirror(Catalog.from_dict(INDEX_META), skills_root, legacy, [])
        assert (legacy / "business" / "market-research.md").read_text(encoding="utf-8") == "# market-research\n"

    def test_preserves_crlf_line_endings(self, tmp_path, minimal_meta):
        skills_root = tmp_path / "skills"
        (skills_root / "market-research").mkdir(parents=True)
        (skills_root / "market-research" / "SKILL.md").write_bytes(
            b"---\r\nname: x\r\n---\r\nline1\r\nline2\r\n"
        )
        legacy = tmp_path / "legacy"

        write_legacy_mirror(Catalog.from_dict(minimal_meta), skills_root, legacy, [])

        assert (legacy / "business" / "market-research.md").read_bytes() == b"line1\r\nline2\r\n"

    @pytest.mark.parametrize("category", ["", ".", "..", "../outside"])
    def test_category_outside_mirror_skipped(self, tmp_path, skills_root, minimal_meta, caplog, category):
        minimal_meta["skills"][0]["category"] = category
        legacy = tmp_path / "legacy"

        with caplog.at_level("WARNING"):
            result = write_legacy_mirror(Catalog.from_dict(minimal_meta), skills_root, legacy, [])

        assert result.skipped == ["market-research"]
        assert result.written == set()
        assert not (tmp_path / "market-research.md").exists()
        assert not (tmp_path / "outside").exists()
        assert not (legacy / "market-research.md").exists()
        assert "outside" in caplog.text

    def test_index_named_skill_cannot_replace_index(self, tmp_path, minimal_meta):
        skills_root = tmp_path / "skills"
        (skills_root / "INDEX").mkdir(parents=True)
        (skills_root / "INDEX" / "SKILL.md").write_text("clobber", encoding="utf-8")
        minimal_meta["skills"][0].update(id="INDEX", category="")
        legacy = tmp_path / "legacy"

        result = write_legacy_mirror(Catalog.from_dict(minimal_meta), skills_root, legacy, [])

        assert result.skipped == ["INDEX"]
        assert (legacy / "INDEX.md").read_text(encoding="utf-8").startswith("# Skill Book Index")
