"""
简历排序：对某职位的技能集，逐份简历做技能匹配 → 按匹配度排序 → 取 Top-N。
每次请求都全量重算，不缓存、不增量；复杂度 O(简历数 × 职位技能数 × 简历技能数)。
"""
from __future__ import annotations

import logging
from typing import Sequence

from resumatch.core.config import ranking_limit
from resumatch.jobs.schemas import RankingEntry, ResumeCandidate
from resumatch.jobs.skills import match_skills

logger = logging.getLogger(__name__)

# 排序结果条数的硬上限，配置或调用方只能调小
MAX_RANKING_ENTRIES = 10


def rank_resumes_for_job(
    job_skills: Sequence[str],
    resumes: Sequence[ResumeCandidate],
    limit: int | None = None,
) -> list[RankingEntry]:
    """
    按 match_percentage 降序返回前 limit 条（默认 RESUMATCH_RANKING_LIMIT），最多 10 条。
    匹配度相同的简历保持输入中的先后顺序。
    """
    n = limit if limit is not None else ranking_limit()
    entries: list[RankingEntry] = []
    for resume in resumes:
        result = match_skills(job_skills, resume.skills)
        entries.append(
            RankingEntry(
                resume_id=resume.resume_id,
                filename=resume.filename,
                uploaded_at=resume.uploaded_at,
                **result.model_dump(),
            )
        )

    # list.sort 是稳定排序，reverse=True 也不会打乱同分条目的相对顺序
    entries.sort(key=lambda e: e.match_percentage, reverse=True)
    top = entries[:max(min(n, MAX_RANKING_ENTRIES), 0)]
    logger.info(
        "职位技能 %d 项，参与排序简历 %d 份，最高匹配度 %d%%",
        len(job_skills), len(entries), top[0].match_percentage if top else 0,
    )
    return top
