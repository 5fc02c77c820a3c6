"""
LiteLLM 统一多平台模型调用：embedding 与文本生成各一个 provider，换模型只改 model 字符串。

默认走本地 Ollama（nomic-embed-text + llama3.2:3b），也可切到 openai/...、deepseek/... 等，
LiteLLM 自动读取 OPENAI_API_KEY、DEEPSEEK_API_KEY 等环境变量。
核心不做重试、不加超时：provider 失败只让当前这一次调用失败。
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import BaseModel, Field

from resumatch.core.config import embed_dim, get_api_base, get_default_model, get_embed_model
from resumatch.core.errors import DimensionMismatch, EmbeddingFailure, GenerationFailure

logger = logging.getLogger(__name__)

# embedding 输入截断长度（字符）
EMBED_INPUT_LIMIT = 2000


class GenerationOptions(BaseModel):
    """单次生成调用的参数。"""
    temperature: float = Field(0.7, ge=0.0, le=2.0, description="采样温度")
    max_tokens: int = Field(300, ge=1, description="输出 token 上限")
    stop_sequences: list[str] = Field(default_factory=list, description="遇到即停止生成的序列")


class EmbeddingProvider(Protocol):
    """文本 → 定长向量。失败抛 EmbeddingFailure。"""

    async def embed(self, text: str) -> list[float]:
        ...


class GenerationProvider(Protocol):
    """prompt → 文本。失败抛 GenerationFailure。"""

    async def generate(self, prompt: str, options: GenerationOptions | None = None) -> str:
        ...


def _provider_kwargs(model: str, api_base: str | None) -> dict[str, Any]:
    # 只有本地 ollama 需要显式 api_base，其余厂商用 LiteLLM 默认地址
    if api_base and model.startswith("ollama"):
        return {"api_base": api_base}
    return {}


def _first_embedding(response: Any) -> list[float]:
    data = getattr(response, "data", None) or []
    if not data:
        return []
    item = data[0]
    if isinstance(item, dict):
        return list(item.get("embedding") or [])
    return list(getattr(item, "embedding", None) or [])


class LiteLLMEmbeddingProvider:
    """
    基于 litellm.aembedding 的 embedding provider。
    model / api_base / dim 不传则读配置（RESUMATCH_EMBED_MODEL 等）。
    """

    def __init__(
        self,
        model: str | None = None,
        api_base: str | None = None,
        dim: int | None = None,
    ):
        self.model = model or get_embed_model()
        self.api_base = api_base if api_base is not None else get_api_base()
        self.dim = dim or embed_dim()

    async def embed(self, text: str) -> list[float]:
        if not text or not text.strip():
            raise EmbeddingFailure("待 embedding 的文本不能为空")
        from litellm import aembedding

        try:
            response = await aembedding(
                model=self.model,
                input=[text[:EMBED_INPUT_LIMIT]],
                **_provider_kwargs(self.model, self.api_base),
            )
        except Exception as e:
            raise EmbeddingFailure(f"embedding 生成失败: {e}") from e

        vector = _first_embedding(response)
        if not vector:
            raise EmbeddingFailure("embedding 生成失败: provider 返回空向量")
        if len(vector) != self.dim:
            logger.error("embedding 维度异常: model=%s 期望 %d 实际 %d", self.model, self.dim, len(vector))
            raise DimensionMismatch(self.dim, len(vector))
        return [float(v) for v in vector]


class LiteLLMGenerationProvider:
    """
    基于 litellm.acompletion 的生成 provider：单轮 user 消息，返回回复正文。
    model 不传则使用 RESUMATCH_DEFAULT_MODEL。
    """

    def __init__(self, model: str | None = None, api_base: str | None = None):
        self.model = model or get_default_model()
        self.api_base = api_base if api_base is not None else get_api_base()

    async def generate(self, prompt: str, options: GenerationOptions | None = None) -> str:
        from litellm import acompletion

        opts = options or GenerationOptions()
        kwargs: dict[str, Any] = {
            "temperature": opts.temperature,
            "max_tokens": opts.max_tokens,
            **_provider_kwargs(self.model, self.api_base),
        }
        if opts.stop_sequences:
            kwargs["stop"] = list(opts.stop_sequences)
        try:
            resp = await acompletion(
                model=self.model,
                messages=[{"role": "user", "content": prompt or ""}],
                **kwargs,
            )
        except Exception as e:
            raise GenerationFailure(f"文本生成失败: {e}") from e

        text = (resp.choices[0].message.content or "").strip()
        if not text:
            raise GenerationFailure("文本生成失败: provider 返回空回复")
        return text
