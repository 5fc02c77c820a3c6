"""
内存向量索引：简历分块 + embedding + 元数据，支持按 resume_id 过滤的 Top-K 相似度检索。

结构为「稠密文档数组 + resume_id → 位置列表」的二级索引：
- add 只追加，不重排也不修改已有条目，并发的 search 看到的是某个一致的快照；
- delete_by_resume 先置空（墓碑）该简历的全部文档，再压缩数组并整体重建二级索引（O(n)），
  这是唯一会改动已有位置的操作，与 add / search 的读写通过同一把锁串行化。
锁内不做任何 await，embedding 调用都在锁外完成。
索引仅存在于进程内，重启即丢失。
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from resumatch.core.config import embed_dim
from resumatch.core.errors import DimensionMismatch, EmbeddingFailure, ValidationFailure
from resumatch.core.llm import EmbeddingProvider
from resumatch.retrieval.schemas import Document, DocumentMetadata, SearchFilter, SearchHit
from resumatch.retrieval.similarity import cosine_similarity

logger = logging.getLogger(__name__)

MetadataLike = DocumentMetadata | Mapping[str, Any] | None


def _to_metadata(metadata: MetadataLike) -> DocumentMetadata:
    if isinstance(metadata, DocumentMetadata):
        return metadata
    try:
        return DocumentMetadata(**dict(metadata or {}))
    except ValidationError as e:
        raise ValidationFailure(f"文档元数据不合法: {e}") from e


class VectorStore:
    """
    进程内向量索引，由调用方显式创建并持有（不是模块级单例）。
    embedder: 任意实现 EmbeddingProvider 的对象；dim 不传则读 RESUMATCH_EMBED_DIM。
    """

    def __init__(self, embedder: EmbeddingProvider, dim: int | None = None):
        self._embedder = embedder
        self.dim = dim or embed_dim()
        self._documents: list[Document | None] = []
        self._resume_index: dict[str, list[int]] = {}
        self._lock = threading.RLock()

    @property
    def embedder(self) -> EmbeddingProvider:
        return self._embedder

    # ---------- 写入 ----------

    async def add(self, text: str, metadata: MetadataLike = None) -> str:
        """为 text 生成 embedding 并追加为新文档，返回文档 ID。text 为空时抛 EmbeddingFailure。"""
        if not text or not text.strip():
            raise EmbeddingFailure("文档内容不能为空")
        meta = _to_metadata(metadata)

        embedding = await self._embedder.embed(text)
        if len(embedding) != self.dim:
            logger.error("embedding 维度异常: 期望 %d 实际 %d", self.dim, len(embedding))
            raise DimensionMismatch(self.dim, len(embedding))

        doc = Document(text=text, embedding=list(embedding), metadata=meta)
        with self._lock:
            self._documents.append(doc)
            if meta.resume_id:
                self._resume_index.setdefault(meta.resume_id, []).append(len(self._documents) - 1)
        logger.debug("文档已写入向量索引: %s (resume_id=%s)", doc.id, meta.resume_id)
        return doc.id

    async def add_many(self, items: Iterable[tuple[str, MetadataLike]]) -> list[str]:
        """批量写入：单条 embedding 失败只跳过该条，返回成功写入的 ID。"""
        ids: list[str] = []
        for text, metadata in items:
            try:
                ids.append(await self.add(text, metadata))
            except EmbeddingFailure as e:
                logger.warning("文档写入失败，已跳过: %s", e)
        return ids

    # ---------- 检索 ----------

    async def search(
        self,
        query_text: str,
        top_k: int = 3,
        search_filter: SearchFilter | None = None,
    ) -> list[SearchHit]:
        """
        对满足过滤条件的文档按余弦相似度降序排序，返回前 top_k 条。
        相似度相同的按写入顺序（排序稳定）；没有候选文档时返回空列表。
        """
        if top_k < 0:
            raise ValidationFailure(f"top_k 不能为负数: {top_k}")
        search_filter = search_filter or SearchFilter()

        query_embedding = await self._embedder.embed(query_text)
        candidates = self._candidates(search_filter)
        logger.debug("过滤后候选文档数: %d", len(candidates))
        if not candidates:
            return []

        hits: list[SearchHit] = []
        for doc in candidates:
            try:
                score = cosine_similarity(query_embedding, doc.embedding)
            except DimensionMismatch:
                logger.error("查询向量与文档 %s 维度不一致", doc.id)
                raise
            hits.append(SearchHit(document=doc, similarity=score))

        hits.sort(key=lambda h: h.similarity, reverse=True)
        return hits[:top_k]

    def _candidates(self, search_filter: SearchFilter) -> list[Document]:
        """锁内取快照：按 resume_id 过滤时走二级索引，位置递增即写入顺序。"""
        with self._lock:
            if search_filter.resume_id is not None:
                positions = self._resume_index.get(search_filter.resume_id, [])
                docs = [self._documents[i] for i in positions]
            else:
                docs = list(self._documents)
        return [d for d in docs if d is not None and search_filter.matches(d.metadata)]

    def get_by_resume(self, resume_id: str) -> list[Document]:
        """该简历的全部文档，按 chunk_index 排序；未知或已删除的简历返回空列表。"""
        with self._lock:
            positions = self._resume_index.get(resume_id, [])
            docs = [self._documents[i] for i in positions]
        live = [d for d in docs if d is not None]
        return sorted(
            live,
            key=lambda d: d.metadata.chunk_index if d.metadata.chunk_index is not None else 0,
        )

    # ---------- 删除与维护 ----------

    def delete_by_resume(self, resume_id: str) -> int:
        """
        删除该简历的全部文档：置空 → 移除索引项 → 压缩数组 → 重建二级索引。
        返回删除的文档数。
        """
        with self._lock:
            positions = self._resume_index.pop(resume_id, [])
            for i in positions:
                self._documents[i] = None
            self._documents = [d for d in self._documents if d is not None]
            self._rebuild_index()
            remaining = len(self._documents)
        logger.info("已删除简历 %s 的 %d 个文档，剩余 %d", resume_id, len(positions), remaining)
        return len(positions)

    def _rebuild_index(self) -> None:
        self._resume_index = {}
        for i, doc in enumerate(self._documents):
            if doc is not None and doc.metadata.resume_id:
                self._resume_index.setdefault(doc.metadata.resume_id, []).append(i)

    def count(self) -> int:
        """存活文档数。"""
        with self._lock:
            return sum(1 for d in self._documents if d is not None)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "total_documents": sum(1 for d in self._documents if d is not None),
                "total_resumes": len(self._resume_index),
            }

    def clear(self) -> None:
        with self._lock:
            self._documents = []
            self._resume_index = {}
        logger.info("向量索引已清空")

    def __len__(self) -> int:
        return self.count()
