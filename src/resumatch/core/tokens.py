"""
tiktoken：估算 RAG prompt（检索上下文 + 问题）的 token 数，便于观察上下文长度是否逼近模型窗口。
本地模型没有官方编码，按 cl100k_base 估算即可；只用于日志，不参与截断。
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

# 模型名片段 → 编码；按顺序匹配，先写更具体的
_MODEL_ENCODING = (
    ("gpt-4o", "o200k_base"),
    ("gpt-4", "cl100k_base"),
    ("gpt-3.5", "cl100k_base"),
)
_DEFAULT_ENCODING = "cl100k_base"


def encoding_name_for(model_name: Optional[str] = None) -> str:
    """LiteLLM 模型名（如 openai/gpt-4o、ollama/llama3.2:3b）对应的 tiktoken 编码名。"""
    name = (model_name or "").strip().lower()
    return next((enc for key, enc in _MODEL_ENCODING if key in name), _DEFAULT_ENCODING)


@lru_cache(maxsize=None)
def _load_encoding(encoding_name: str) -> "tiktoken.Encoding | None":
    import tiktoken
    try:
        return tiktoken.get_encoding(encoding_name)
    except Exception:
        # 离线环境拿不到编码表
        return None


def count_tokens(text: str, model_name: Optional[str] = None) -> int:
    """prompt 的 token 数；编码表不可用时按每 2 个字符 1 个 token 粗估。"""
    if not text:
        return 0
    encoding = _load_encoding(encoding_name_for(model_name))
    if encoding is None:
        return max(1, len(text) // 2)
    return len(encoding.encode(text))
