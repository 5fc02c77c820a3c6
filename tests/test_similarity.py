"""余弦相似度：同向 ≈1、反向 ≈-1、零向量为 0、维度不一致报错。"""
import pytest

from resumatch.core.errors import DimensionMismatch
from resumatch.retrieval.similarity import cosine_similarity


def test_same_vector_is_one():
    v = [0.3, -1.2, 4.0, 0.0, 2.5]
    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_scaled_vector_is_one():
    assert cosine_similarity([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]) == pytest.approx(1.0)


def test_opposite_vector_is_minus_one():
    v = [0.5, 1.5, -2.0]
    assert cosine_similarity(v, [-x for x in v]) == pytest.approx(-1.0)


def test_orthogonal_is_zero():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)


def test_zero_vector_returns_zero_not_error():
    assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0
    assert cosine_similarity([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]) == 0
    assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0


def test_dimension_mismatch_raises():
    with pytest.raises(DimensionMismatch) as exc:
        cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0])
    assert exc.value.expected == 3
    assert exc.value.actual == 2
