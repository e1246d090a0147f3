"""
Shared fixtures: a minimal catalog and a plugin root laid out on disk.
"""

import copy
import json

import pytest


MINIMAL_META = {
    "ui": {
        "ko": {
            "title": "Skill Book",
            "subtitle_tpl": "{count} Skills · {steps} Process Steps · {lines} Lines of Knowledge",
            "toc": "목차",
            "welcomeDesc": "바이브코딩 시 AI가 자동으로 활용하는\n전문가 지식 라이브러리.",
        },
        "en": {
            "title": "Skill Book",
            "subtitle_tpl": "{count} Skills · {steps} Process Steps · {lines} Lines of Knowledge",
            "toc": "Table of Contents",
            "welcomeDesc": "An expert knowledge library\nautomatically used by AI during vibe coding.",
        },
    },
    "categories": [
        {
            "id": "business",
            "label": "Business",
            "icon": "📊",
            "description": {
                "ko": "시장조사, 경쟁 분석, SaaS 전략",
                "en": "Market Research, Competitor Analysis, SaaS Strategy",
            },
        },
    ],
    "skills": [
        {
            "id": "market-research",
            "name": {"ko": "시장조사 전문가", "en": "Market Research Expert"},
            "description": {
                "ko": "데이터 기반 시장 분석과 기회 발굴을 통해 제품 전략의 근거를 만드는 전문 스킬",
                "en": "A specialized skill for building product strategy foundations through data-driven market analysis",
            },
            "category": "business",
            "role": {
                "ko": "당신은 시장조사 및 시장 분석 분야의 시니어 전문가입니다.",
                "en": "You are a senior expert in market research and analysis.",
            },
            "principles": [
                {"ko": "데이터 우선: 검증 가능한 데이터에 기반하여 판단한다", "en": "Data-First: Make decisions based on verifiable data"},
            ],
            "processSteps": 17,
            "antiPatterns": [
                {"ko": "확증 편향", "en": "Confirmation Bias"},
            ],
            "lineCount": 166,
            "path": "business/market-research.md",
        },
    ],
}


PLUGIN_JSON = {
    "name": "skillbook",
    "version": "3.2.0",
    "description": "48 expert skills",
    "author": {"name": "sangjun0000"},
    "license": "MIT",
}

MARKETPLACE_JSON = {
    "$schema": "https://anthropic.com/claude-code/marketplace.schema.json",
    "name": "skillbook-marketplace",
    "version": "3.2.0",
    "description": "old description",
    "owner": {"name": "sangjun0000"},
    "plugins": [
        {
            "name": "skillbook",
            "description": "old plugin description",
            "version": "3.2.0",
            "category": "development",
            "keywords": ["skills"],
        },
    ],
}


@pytest.fixture
def minimal_meta():
    """A fresh copy of the minimal catalog mapping."""
    return copy.deepcopy(MINIMAL_META)


@pytest.fixture
def plugin_root(tmp_path, minimal_meta):
    """A plugin root with catalog, one SKILL.md, descriptors and a config.

    data.ts and the legacy mirror are redirected into tmp_path.
    """
    root = tmp_path / "plugin"
    (root / "tools").mkdir(parents=True)
    (root / "tools" / "skills-meta.json").write_text(
        json.dumps(minimal_meta, ensure_ascii=False, indent=2), encoding="utf-8"
    )

    skill_dir = root / "skills" / "market-research"
    skill_dir.mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text(
        "---\nname: market-research\ncategory: business\n---\n\n# Market Research\n\nBody\n",
        encoding="utf-8",
    )

    (root / ".claude-plugin").mkdir()
    (root / ".claude-plugin" / "plugin.json").write_text(json.dumps(PLUGIN_JSON, indent=2))
    (root / ".claude-plugin" / "marketplace.json").write_text(json.dumps(MARKETPLACE_JSON, indent=2))

    (root / ".skillbook").mkdir()
    (root / ".skillbook" / "config.json").write_text(json.dumps({
        "data_ts_path": str(tmp_path / "site" / "app" / "data.ts"),
        "legacy_dir": str(tmp_path / "legacy"),
    }))

    return root
