"""
错误类型：索引、检索、生成与输入校验失败各自独立，调用方按类型处理。
"""


class ResumatchError(Exception):
    """所有 resumatch 错误的基类。"""


class EmbeddingFailure(ResumatchError):
    """embedding 失败：输入为空或 provider 出错。"""


class GenerationFailure(ResumatchError):
    """文本生成失败：provider 出错或返回空回复。"""


class DimensionMismatch(ResumatchError):
    """向量维度不一致，通常说明 embedding provider 配置有误。"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"向量维度不一致: {expected} vs {actual}")


class ValidationFailure(ResumatchError, ValueError):
    """调用方输入非法，且没有合理的默认结果可以返回。"""


class ResumeNotIndexed(ResumatchError, LookupError):
    """该简历在向量索引中没有任何文档。"""

    def __init__(self, resume_id: str):
        self.resume_id = resume_id
        super().__init__(f"向量索引中不存在该简历: {resume_id}")
