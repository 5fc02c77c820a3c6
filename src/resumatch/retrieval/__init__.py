# 内存向量索引、简历分块入库与 RAG 问答

from .schemas import (
    Document,
    DocumentMetadata,
    SearchFilter,
    SearchHit,
    IndexResult,
    ContextPreview,
    RagAnswer,
)
from .similarity import cosine_similarity
from .vector_store import VectorStore
from .chunking import split_into_chunks, index_resume
from .rag import ResumeRAG, NOT_FOUND_ANSWER

__all__ = [
    "Document",
    "DocumentMetadata",
    "SearchFilter",
    "SearchHit",
    "IndexResult",
    "ContextPreview",
    "RagAnswer",
    "cosine_similarity",
    "VectorStore",
    "split_into_chunks",
    "index_resume",
    "ResumeRAG",
    "NOT_FOUND_ANSWER",
]
