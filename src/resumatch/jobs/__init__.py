"""
职位技能匹配：技能提取 → 简历 vs 职位模糊技能匹配 → 按匹配度排序取 Top-N。
全部为确定性计算（技能提取除外），不依赖向量索引。
"""
from .schemas import (
    SkillMatchResult,
    ResumeCandidate,
    RankingEntry,
)
from .skills import SKILL_SYNONYMS, match_skills, skills_match, normalize_skill
from .ranking import rank_resumes_for_job
from .extract import extract_skills, extract_skills_by_keyword, parse_skill_list

__all__ = [
    "SkillMatchResult",
    "ResumeCandidate",
    "RankingEntry",
    "SKILL_SYNONYMS",
    "match_skills",
    "skills_match",
    "normalize_skill",
    "rank_resumes_for_job",
    "extract_skills",
    "extract_skills_by_keyword",
    "parse_skill_list",
]
