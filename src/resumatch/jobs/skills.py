"""
职位技能 vs 简历技能的模糊匹配。

一对一、贪心、先到先得：按职位技能的给定顺序逐个处理，每个职位技能在简历技能中按给定顺序
找第一个尚未被占用且满足匹配条件的位置。结果完全由输入顺序决定，同样的输入永远得到同样的结果。

匹配条件（小写 + 去首尾空白后，按顺序短路判断）：
1. 完全相等；
2. 任一方包含另一方（java 与含 javascript 的技能互不匹配）；
3. 同义词表：任一方的别名等于或被包含于另一方。

空技能（归一化后为空字符串）不与任何技能匹配，即使按包含规则 "" 被任何字符串包含。
"""
from __future__ import annotations

import math
from typing import Sequence

from resumatch.jobs.schemas import SkillMatchResult

# 同义词表：规范写法 → 可接受的别名（均为小写）
SKILL_SYNONYMS: dict[str, list[str]] = {
    "mongo": ["mongodb", "mongo db"],
    "mongodb": ["mongo", "mongo db"],
    "postgres": ["postgresql", "psql"],
    "postgresql": ["postgres", "psql"],
    "javascript": ["js", "es6", "ecmascript"],
    "js": ["javascript", "es6"],
    "typescript": ["ts"],
    "ts": ["typescript"],
    "react": ["reactjs", "react.js"],
    "reactjs": ["react", "react.js"],
    "node": ["nodejs", "node.js"],
    "nodejs": ["node", "node.js"],
    "git": ["github", "gitlab", "version control"],
    "docker": ["containerization", "containers"],
    "kubernetes": ["k8s"],
    "k8s": ["kubernetes"],
    "aws": ["amazon web services"],
    "gcp": ["google cloud platform"],
    "azure": ["microsoft azure"],
}

EXTRA_SKILLS_LIMIT = 10


def normalize_skill(skill: str) -> str:
    return (skill or "").strip().lower()


def _is_java_javascript(a: str, b: str) -> bool:
    # 包含关系的已知误判：java ⊂ javascript
    return (a == "java" and "javascript" in b) or (b == "java" and "javascript" in a)


def skills_match(job_skill: str, resume_skill: str) -> bool:
    """两个已归一化的技能是否匹配。空字符串不与任何技能匹配。"""
    if not job_skill or not resume_skill:
        return False
    if job_skill == resume_skill:
        return True
    if job_skill in resume_skill or resume_skill in job_skill:
        return not _is_java_javascript(job_skill, resume_skill)
    for alias in SKILL_SYNONYMS.get(job_skill, ()):
        if alias == resume_skill or alias in resume_skill:
            return True
    for alias in SKILL_SYNONYMS.get(resume_skill, ()):
        if alias == job_skill or alias in job_skill:
            return True
    return False


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def match_skills(job_skills: Sequence[str], resume_skills: Sequence[str]) -> SkillMatchResult:
    """
    计算职位技能集与简历技能集的重叠。
    matched / missing 保留职位技能的原始写法，extra 保留简历技能的原始写法（最多 10 个）；
    职位技能为空时返回全空结果，匹配度为 0。
    """
    job_skills = list(job_skills or [])
    resume_skills = list(resume_skills or [])
    if not job_skills:
        return SkillMatchResult()

    norm_job = [normalize_skill(s) for s in job_skills]
    norm_resume = [normalize_skill(s) for s in resume_skills]

    claimed: set[int] = set()
    matched: list[str] = []
    missing: list[str] = []
    for original, job_skill in zip(job_skills, norm_job):
        hit = next(
            (
                i for i, resume_skill in enumerate(norm_resume)
                if i not in claimed and skills_match(job_skill, resume_skill)
            ),
            None,
        )
        if hit is None:
            missing.append(original)
        else:
            claimed.add(hit)
            matched.append(original)

    extra = [s for i, s in enumerate(resume_skills) if i not in claimed]
    return SkillMatchResult(
        match_percentage=_round_half_up(len(matched) / len(job_skills) * 100),
        matched_skills=matched,
        missing_skills=missing,
        extra_skills=extra[:EXTRA_SKILLS_LIMIT],
        total_required=len(job_skills),
        total_matched=len(matched),
    )
