"""
对外入口：HTTP 层等调用方只和 MatchingEngine 打交道。

MatchingEngine 显式持有向量索引与两个 provider（embedding / 生成），由调用方创建、传递与关闭，
不使用模块级单例。索引只在进程内存活，close() 或进程退出即丢弃。
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from resumatch.core.llm import (
    EmbeddingProvider,
    GenerationProvider,
    LiteLLMEmbeddingProvider,
    LiteLLMGenerationProvider,
)
from resumatch.jobs.extract import SkillSource, extract_skills
from resumatch.jobs.ranking import rank_resumes_for_job
from resumatch.jobs.schemas import RankingEntry, ResumeCandidate, SkillMatchResult
from resumatch.jobs.skills import match_skills
from resumatch.retrieval.chunking import index_resume
from resumatch.retrieval.rag import ResumeRAG
from resumatch.retrieval.schemas import IndexResult, RagAnswer
from resumatch.retrieval.vector_store import VectorStore

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    检索 + 排序引擎。
    embedder / generator: 任意实现对应 Protocol 的对象；dim 不传则读 RESUMATCH_EMBED_DIM。
    用法：
        with MatchingEngine.from_env() as engine:
            await engine.index_resume("resume-1", text, {"filename": "a.pdf"})
            answer = await engine.query("resume-1", "What databases has the candidate used?")
    """

    def __init__(
        self,
        embedder: EmbeddingProvider,
        generator: GenerationProvider,
        dim: int | None = None,
        top_k: int | None = None,
    ):
        self.store = VectorStore(embedder, dim=dim)
        self.generator = generator
        self.rag = ResumeRAG(self.store, generator, top_k=top_k)
        self._closed = False

    @classmethod
    def from_env(cls) -> "MatchingEngine":
        """按环境变量配置创建 LiteLLM provider（默认本地 Ollama）。"""
        return cls(LiteLLMEmbeddingProvider(), LiteLLMGenerationProvider())

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("MatchingEngine 已关闭")

    # ---------- 检索侧 ----------

    async def index_resume(
        self,
        resume_id: str,
        text: str,
        metadata: Mapping[str, Any] | None = None,
    ) -> IndexResult:
        self._ensure_open()
        return await index_resume(self.store, resume_id, text, metadata)

    async def query(self, resume_id: str, question: str) -> RagAnswer:
        self._ensure_open()
        return await self.rag.query(resume_id, question)

    async def summarize_resume(self, resume_id: str) -> str:
        self._ensure_open()
        return await self.rag.summarize(resume_id)

    def delete_resume_documents(self, resume_id: str) -> int:
        """删除该简历在索引中的全部分块，返回删除数。"""
        self._ensure_open()
        return self.store.delete_by_resume(resume_id)

    def stats(self) -> dict[str, int]:
        self._ensure_open()
        return self.store.stats()

    # ---------- 技能侧 ----------

    async def extract_skills(self, text: str, source: SkillSource = "resume") -> list[str]:
        self._ensure_open()
        return await extract_skills(text, self.generator, source)

    def match_skills(self, job_skills: Sequence[str], resume_skills: Sequence[str]) -> SkillMatchResult:
        return match_skills(job_skills, resume_skills)

    def rank_resumes_for_job(
        self,
        job_skills: Sequence[str],
        resumes: Sequence[ResumeCandidate],
    ) -> list[RankingEntry]:
        return rank_resumes_for_job(job_skills, resumes)

    # ---------- 生命周期 ----------

    def close(self) -> None:
        if self._closed:
            return
        self.store.clear()
        self._closed = True
        logger.info("MatchingEngine 已关闭")

    def __enter__(self) -> "MatchingEngine":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
