"""
简历分块与入库：按词切成有重叠的分块，逐块写入向量索引。
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from resumatch.core.config import chunk_overlap, chunk_size
from resumatch.core.errors import DimensionMismatch, EmbeddingFailure, ValidationFailure
from resumatch.retrieval.schemas import IndexResult
from resumatch.retrieval.vector_store import VectorStore

logger = logging.getLogger(__name__)


def split_into_chunks(text: str, size: int = 500, overlap: int = 50) -> list[str]:
    """
    按空白切词后分块：第 i 块从第 i·(size−overlap) 个词开始，最多 size 个词，以单个空格拼回。
    相邻两块共享 overlap 个词；最后一块可能不足 size；空块跳过。
    """
    if size <= 0 or overlap < 0 or overlap >= size:
        raise ValidationFailure(f"分块参数不合法: size={size}, overlap={overlap}")
    words = (text or "").split()
    step = size - overlap
    chunks: list[str] = []
    for start in range(0, len(words), step):
        chunk = " ".join(words[start:start + size])
        if chunk.strip():
            chunks.append(chunk)
    logger.debug("文本切分为 %d 个分块", len(chunks))
    return chunks


async def index_resume(
    store: VectorStore,
    resume_id: str,
    full_text: str,
    metadata: Mapping[str, Any] | None = None,
    size: int | None = None,
    overlap: int | None = None,
) -> IndexResult:
    """
    将简历全文分块并逐块写入向量索引，元数据为 {resume_id, chunk_index, total_chunks} 合并调用方 metadata。
    尽力而为：单块 embedding 失败或向量维度异常只记录到 failed_chunks 并跳过，不影响其余分块，
    已写入的分块照常返回在 ids 中；结果报告实际写入的块数。
    size / overlap 不传则读配置（RESUMATCH_CHUNK_SIZE / RESUMATCH_CHUNK_OVERLAP）。
    """
    if not resume_id or not resume_id.strip():
        raise ValidationFailure("resume_id 不能为空")

    chunks = split_into_chunks(
        full_text,
        size if size is not None else chunk_size(),
        overlap if overlap is not None else chunk_overlap(),
    )
    total = len(chunks)
    result = IndexResult(resume_id=resume_id, total_chunks=total)
    if not chunks:
        logger.warning("简历 %s 没有可索引的文本", resume_id)
        return result

    extra = dict(metadata or {})
    for i, chunk in enumerate(chunks):
        chunk_meta = {**extra, "resume_id": resume_id, "chunk_index": i, "total_chunks": total}
        try:
            doc_id = await store.add(chunk, chunk_meta)
        except (EmbeddingFailure, DimensionMismatch) as e:
            logger.warning("简历 %s 第 %d/%d 块写入失败: %s", resume_id, i + 1, total, e)
            result.failed_chunks.append(i)
            continue
        result.ids.append(doc_id)

    result.chunks_indexed = len(result.ids)
    logger.info("简历 %s 索引完成: %d/%d 块", resume_id, result.chunks_indexed, total)
    return result
