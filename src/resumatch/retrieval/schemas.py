"""
向量索引与 RAG 的数据模型。
Document 一经创建不可变；删除只影响其在索引中的存活，不修改文档本身。
"""
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DocumentMetadata(BaseModel):
    """分块元数据：resume_id / chunk_index / total_chunks，其余键（如 filename）原样保留。"""
    model_config = ConfigDict(frozen=True, extra="allow")

    resume_id: Optional[str] = Field(None, description="所属简历 ID")
    chunk_index: Optional[int] = Field(None, ge=0, description="分块序号，从 0 开始")
    total_chunks: Optional[int] = Field(None, ge=1, description="该简历的分块总数")

    @model_validator(mode="after")
    def _chunk_index_in_range(self) -> "DocumentMetadata":
        if (
            self.chunk_index is not None
            and self.total_chunks is not None
            and self.chunk_index >= self.total_chunks
        ):
            raise ValueError(
                f"chunk_index 越界: {self.chunk_index} >= total_chunks {self.total_chunks}"
            )
        return self


class Document(BaseModel):
    """向量索引中的一条文档（一个分块）。"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="文档 ID")
    text: str = Field(..., description="分块正文")
    embedding: list[float] = Field(..., description="分块向量")
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata, description="分块元数据")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SearchFilter(BaseModel):
    """检索过滤条件：固定形状，目前只按 resume_id 过滤；全部为空表示不过滤。"""
    resume_id: Optional[str] = Field(None, description="只检索该简历的分块")

    def matches(self, metadata: DocumentMetadata) -> bool:
        return self.resume_id is None or metadata.resume_id == self.resume_id


class SearchHit(BaseModel):
    """单条检索结果：文档 + 与查询的余弦相似度。"""
    document: Document
    similarity: float


class IndexResult(BaseModel):
    """简历分块入库结果。chunks_indexed 为实际写入数，可能少于 total_chunks。"""
    resume_id: str
    chunks_indexed: int = 0
    total_chunks: int = 0
    ids: list[str] = Field(default_factory=list, description="写入成功的文档 ID，按分块顺序")
    failed_chunks: list[int] = Field(default_factory=list, description="写入失败的分块序号")


class ContextPreview(BaseModel):
    """返回给调用方展示用的检索片段预览，不再用于生成。"""
    text: str
    similarity: float


class RagAnswer(BaseModel):
    """RAG 问答结果。confidence 取排名第一的分块相似度。"""
    answer: str
    retrieved_context: list[ContextPreview] = Field(default_factory=list)
    confidence: float = 0.0
