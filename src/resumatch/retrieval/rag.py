"""
简历 RAG：先从向量索引取回该简历最相关的分块，再让生成模型只依据这些分块回答。

检索不到任何分块时直接返回固定的「无相关信息」答复，不调用生成模型，避免无依据的编造。
"""
from __future__ import annotations

import logging

from resumatch.core.config import get_default_model, rag_top_k
from resumatch.core.errors import ResumeNotIndexed, ValidationFailure
from resumatch.core.llm import GenerationOptions, GenerationProvider
from resumatch.core.tokens import count_tokens
from resumatch.retrieval.schemas import ContextPreview, RagAnswer, SearchFilter, SearchHit
from resumatch.retrieval.vector_store import VectorStore

logger = logging.getLogger(__name__)

NOT_FOUND_ANSWER = "I couldn't find relevant information in this resume to answer your question."

# 问答：偏自然的回答；摘要：更收敛、更短
CHAT_OPTIONS = GenerationOptions(temperature=0.7, max_tokens=300)
SUMMARY_OPTIONS = GenerationOptions(temperature=0.5, max_tokens=150)

# 返回给调用方的片段预览长度（字符）
PREVIEW_CHARS = 200
# 摘要时送入模型的简历全文上限（字符）
SUMMARY_INPUT_CHARS = 2000

QA_PROMPT = """You are an AI assistant analyzing a resume. Answer the user's question based ONLY on the provided context from the resume.

Context from Resume:
{context}

User Question: {question}

Instructions:
- Answer directly and concisely
- Only use information from the context above
- If the context doesn't contain the answer, say "This information is not available in the resume"
- Be professional and accurate
- Do not make assumptions or add information not in the context

Answer:"""

SUMMARY_PROMPT = """Summarize this resume in 3-4 concise sentences, highlighting key skills, experience, and qualifications:

{text}

Summary:"""


def build_context(hits: list[SearchHit]) -> str:
    """检索结果拼成带编号与相关度的上下文块。"""
    return "\n\n---\n\n".join(
        f"[Context {i}] (Relevance: {hit.similarity * 100:.1f}%)\n{hit.document.text}"
        for i, hit in enumerate(hits, 1)
    )


def _preview(text: str) -> str:
    return text[:PREVIEW_CHARS] + "..."


class ResumeRAG:
    """
    单份简历的问答流水线。
    store: 已写入简历分块的向量索引；generator: 文本生成 provider。
    top_k 不传则读 RESUMATCH_RAG_TOP_K。
    """

    def __init__(
        self,
        store: VectorStore,
        generator: GenerationProvider,
        top_k: int | None = None,
        model_name: str | None = None,
    ):
        self.store = store
        self.generator = generator
        self.top_k = top_k if top_k is not None else rag_top_k()
        # 仅用于 token 估算日志
        self.model_name = model_name or get_default_model()

    async def query(self, resume_id: str, question: str) -> RagAnswer:
        """
        回答关于某份简历的问题。
        confidence 为排名第一的分块相似度；retrieved_context 只是前 200 字符的预览，仅供展示。
        生成失败时抛 GenerationFailure，已检索到的上下文随之丢弃。
        """
        if not resume_id or not resume_id.strip():
            raise ValidationFailure("resume_id 不能为空")
        if not question or not question.strip():
            raise ValidationFailure("问题不能为空")

        hits = await self.store.search(question, self.top_k, SearchFilter(resume_id=resume_id))
        if not hits:
            logger.info("简历 %s 没有可用分块，返回默认答复", resume_id)
            return RagAnswer(answer=NOT_FOUND_ANSWER, retrieved_context=[], confidence=0.0)

        logger.debug("简历 %s 检索到 %d 个分块", resume_id, len(hits))
        prompt = QA_PROMPT.format(context=build_context(hits), question=question)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("RAG prompt 约 %d tokens", count_tokens(prompt, self.model_name))

        answer = await self.generator.generate(prompt, CHAT_OPTIONS)
        return RagAnswer(
            answer=answer.strip(),
            retrieved_context=[
                ContextPreview(text=_preview(hit.document.text), similarity=hit.similarity)
                for hit in hits
            ],
            confidence=hits[0].similarity,
        )

    async def summarize(self, resume_id: str) -> str:
        """按分块顺序拼回简历全文（截断至 2000 字符），生成 3–4 句摘要。"""
        docs = self.store.get_by_resume(resume_id)
        if not docs:
            raise ResumeNotIndexed(resume_id)
        full_text = "\n".join(doc.text for doc in docs)
        prompt = SUMMARY_PROMPT.format(text=full_text[:SUMMARY_INPUT_CHARS])
        summary = await self.generator.generate(prompt, SUMMARY_OPTIONS)
        return summary.strip()
