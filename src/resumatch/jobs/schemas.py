"""
技能匹配与简历排序的数据模型。
匹配结果与排序结果都是按需计算的临时结构，不持久化。
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class SkillMatchResult(BaseModel):
    """职位技能 vs 简历技能的匹配结果。"""
    match_percentage: int = Field(0, ge=0, le=100, description="匹配百分比 0–100")
    matched_skills: list[str] = Field(default_factory=list, description="已匹配的职位技能（保留调用方原始写法）")
    missing_skills: list[str] = Field(default_factory=list, description="未匹配的职位技能")
    extra_skills: list[str] = Field(default_factory=list, description="未被占用的简历技能，最多 10 个")
    total_required: int = Field(0, description="职位技能总数")
    total_matched: int = Field(0, description="匹配上的职位技能数")


class ResumeCandidate(BaseModel):
    """参与排序的一份简历：身份信息 + 技能集。"""
    resume_id: str = Field(..., description="简历 ID")
    filename: Optional[str] = Field(None, description="上传时的文件名")
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    skills: list[str] = Field(default_factory=list, description="简历技能集，按提取顺序")


class RankingEntry(SkillMatchResult):
    """排序结果中的一条：简历身份信息 + 匹配结果。"""
    resume_id: str
    filename: Optional[str] = None
    uploaded_at: Optional[datetime] = None
