"""余弦相似度。"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from resumatch.core.errors import DimensionMismatch


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    dot(a, b) / (|a|·|b|)，取值 [-1, 1]。
    维度不一致抛 DimensionMismatch；任一向量模为 0 时返回 0（合法的退化情形，不是错误）。
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise DimensionMismatch(va.size, vb.size)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))
