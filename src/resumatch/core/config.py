"""
配置：从环境变量读取，供向量索引、RAG 与技能匹配各模块使用。
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# 可选加载 .env（若存在）：先项目根（与 pyproject.toml 同层），再当前工作目录
_env_paths = [
    Path(__file__).resolve().parents[3] / ".env",  # src/resumatch/core 往上的项目根
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        load_dotenv(_p)
        break


def _int_env(name: str, default: int) -> int:
    """读取整数环境变量；未设置或非法时返回默认值。"""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_default_model() -> str:
    """RAG 回答与技能提取使用的生成模型（LiteLLM 格式，如 ollama/llama3.2:3b、openai/gpt-4o）。"""
    return os.getenv("RESUMATCH_DEFAULT_MODEL", "ollama/llama3.2:3b")


def get_embed_model() -> str:
    """Embedding 模型（LiteLLM 格式）。默认 nomic-embed-text，768 维。"""
    return os.getenv("RESUMATCH_EMBED_MODEL", "ollama/nomic-embed-text")


def get_api_base() -> str:
    """本地模型服务地址；仅对 ollama/ 前缀的模型生效。"""
    return (
        os.getenv("RESUMATCH_API_BASE")
        or os.getenv("OLLAMA_BASE_URL")
        or "http://localhost:11434"
    )


def embed_dim() -> int:
    """向量维度，需与 embedding 模型一致。"""
    return _int_env("RESUMATCH_EMBED_DIM", 768)


def chunk_size() -> int:
    """分块大小（词数）。"""
    return _int_env("RESUMATCH_CHUNK_SIZE", 500)


def chunk_overlap() -> int:
    """相邻分块共享的词数。"""
    return _int_env("RESUMATCH_CHUNK_OVERLAP", 50)


def rag_top_k() -> int:
    """RAG 每次检索的分块数。"""
    return _int_env("RESUMATCH_RAG_TOP_K", 3)


def ranking_limit() -> int:
    """职位排序返回的简历条数上限。"""
    return _int_env("RESUMATCH_RANKING_LIMIT", 10)


def log_level() -> str:
    return (os.getenv("RESUMATCH_LOG_LEVEL") or "INFO").strip().upper()
