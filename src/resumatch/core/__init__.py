# 配置、错误类型、LiteLLM provider、tiktoken 预估、日志初始化

from .config import (
    get_default_model,
    get_embed_model,
    get_api_base,
    embed_dim,
    chunk_size,
    chunk_overlap,
    rag_top_k,
    ranking_limit,
)
from .errors import (
    ResumatchError,
    EmbeddingFailure,
    GenerationFailure,
    DimensionMismatch,
    ValidationFailure,
    ResumeNotIndexed,
)
from .llm import (
    EmbeddingProvider,
    GenerationProvider,
    GenerationOptions,
    LiteLLMEmbeddingProvider,
    LiteLLMGenerationProvider,
)
from .tokens import count_tokens
from .log import setup_logging

__all__ = [
    "get_default_model",
    "get_embed_model",
    "get_api_base",
    "embed_dim",
    "chunk_size",
    "chunk_overlap",
    "rag_top_k",
    "ranking_limit",
    "ResumatchError",
    "EmbeddingFailure",
    "GenerationFailure",
    "DimensionMismatch",
    "ValidationFailure",
    "ResumeNotIndexed",
    "EmbeddingProvider",
    "GenerationProvider",
    "GenerationOptions",
    "LiteLLMEmbeddingProvider",
    "LiteLLMGenerationProvider",
    "count_tokens",
    "setup_logging",
]
