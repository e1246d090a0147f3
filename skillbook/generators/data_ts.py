"""
data.ts generator for the skillbook site.

Emits the catalog as a TypeScript module: type declarations, then the
ui, categories and skills constants. Field order inside each skill is
what the site expects, so changing it breaks the front end.
"""

from typing import Any, Dict, List, Union

from skillbook.models.catalog import Catalog, Category, Skill
from skillbook.render import bilingual_multi_line, bilingual_one_line, ts_str


def generate_data_ts(catalog: Union[Catalog, Dict[str, Any]]) -> str:
    """Generate data.ts content from the catalog.

    Args:
        catalog: Catalog object or the raw skills-meta.json mapping

    Returns:
        data.ts content, ending with the closing `];` of the skills list
    """
    catalog = Catalog.coerce(catalog)

    lines: List[str] = []
    lines.extend(_type_lines())
    lines.extend(_ui_lines(catalog.ui))
    lines.extend(_category_lines(catalog.categories))
    lines.extend(_skill_lines(catalog.skills))

    return "\n".join(lines)


def _type_lines() -> List[str]:
    return [
        'export type Lang = "ko" | "en";',
        "",
        "export interface Skill {",
        "  id: string;",
        "  name: { ko: string; en: string };",
        "  description: { ko: string; en: string };",
        "  category: string;",
        "  role: { ko: string; en: string };",
        "  principles: { ko: string; en: string }[];",
        "  processSteps: number;",
        "  antiPatterns: { ko: string; en: string }[];",
        "  lineCount: number;",
        "  path: string;",
        "}",
        "",
        "export interface Category {",
        "  id: string;",
        "  label: string;",
        "  icon: string;",
        "  description: { ko: string; en: string };",
        "}",
        "",
    ]


def _ui_lines(ui: Dict[str, Dict[str, str]]) -> List[str]:
    lines = ["export const ui: Record<Lang, Record<string, string>> = {"]
    for lang, strings in ui.items():
        lines.append(f"  {lang}: {{")
        for key, value in strings.items():
            lines.append(f"    {key}: {ts_str(value)},")
        lines.append("  },")
    lines.extend(["};", ""])
    return lines


def _category_lines(categories: List[Category]) -> List[str]:
    lines = ["export const categories: Category[] = ["]
    for cat in categories:
        lines.append(
            f"  {{ id: {ts_str(cat.id)}, label: {ts_str(cat.label)}, "
            f"icon: {ts_str(cat.icon)}, description: {bilingual_one_line(cat.description)} }},"
        )
    lines.extend(["];", ""])
    return lines


def _skill_lines(skills: List[Skill]) -> List[str]:
    lines = ["export const skills: Skill[] = ["]
    for skill in skills:
        lines.extend(_skill_block(skill))
    lines.append("];")
    return lines


def _skill_block(skill: Skill) -> List[str]:
    """One skill object. description and role are always multi-line."""
    lines = [
        "  {",
        f"    id: {ts_str(skill.id)},",
        f"    name: {bilingual_one_line(skill.name)},",
        f"    description: {bilingual_multi_line(skill.description, '    ')},",
        f"    category: {ts_str(skill.category)},",
        f"    role: {bilingual_multi_line(skill.role, '    ')},",
        "    principles: [",
    ]
    for principle in skill.principles:
        lines.append(f"      {bilingual_one_line(principle)},")
    lines.append("    ],")

    lines.append(f"    processSteps: {skill.process_steps},")

    lines.append("    antiPatterns: [")
    for anti in skill.anti_patterns:
        lines.append(f"      {bilingual_one_line(anti)},")
    lines.append("    ],")

    lines.append(f"    lineCount: {skill.line_count},")
    lines.append(f"    path: {ts_str(skill.path)},")
    lines.append("  },")
    return lines
