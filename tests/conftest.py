"""
测试用的 provider 替身：无需 Ollama / API Key、无需网络。

- HashingEmbedder：按词哈希到固定维度的确定性 embedding，词重叠越多相似度越高；
- SlowEmbedder：按文本延迟返回，用于交错执行的测试；
- RecordingGenerator：记录每次 prompt 与参数，按预设返回或抛 GenerationFailure。
"""
import asyncio
import hashlib

import pytest

from resumatch.core.errors import EmbeddingFailure, GenerationFailure
from resumatch.core.llm import GenerationOptions

DIM = 768


class HashingEmbedder:
    """fail_on 中的任一词出现在文本里时抛 EmbeddingFailure，模拟单块 embedding 失败。"""

    def __init__(self, dim: int = DIM, fail_on: tuple[str, ...] = ()):
        self.dim = dim
        self.fail_on = fail_on
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if not text or not text.strip():
            raise EmbeddingFailure("empty text")
        if any(word in text for word in self.fail_on):
            raise EmbeddingFailure(f"provider down for: {text[:20]}")
        vector = [0.0] * self.dim
        for token in text.lower().split():
            bucket = int(hashlib.md5(token.encode("utf-8")).hexdigest()[:8], 16) % self.dim
            vector[bucket] += 1.0
        return vector


class SlowEmbedder(HashingEmbedder):
    """按文本设定 embedding 耗时（秒），用于让 add / search 与 delete 交错执行。"""

    def __init__(self, delays: dict[str, float]):
        super().__init__()
        self.delays = delays

    async def embed(self, text: str) -> list[float]:
        await asyncio.sleep(self.delays.get(text, 0))
        return await super().embed(text)


class FixedEmbedder:
    """按文本返回预设向量，未预设的返回 default。"""

    def __init__(self, vectors: dict[str, list[float]], default: list[float]):
        self.vectors = vectors
        self.default = default

    async def embed(self, text: str) -> list[float]:
        return list(self.vectors.get(text, self.default))


class RecordingGenerator:
    def __init__(self, reply: str = "The candidate has 5 years of Python experience.", fail: bool = False):
        self.reply = reply
        self.fail = fail
        self.calls: list[tuple[str, GenerationOptions | None]] = []

    async def generate(self, prompt: str, options: GenerationOptions | None = None) -> str:
        self.calls.append((prompt, options))
        if self.fail:
            raise GenerationFailure("model unavailable")
        return self.reply


@pytest.fixture
def embedder():
    return HashingEmbedder()


@pytest.fixture
def generator():
    return RecordingGenerator()
