"""
resumatch：简历 RAG 问答 + 职位技能匹配排序。

- retrieval：内存向量索引、简历分块入库、基于检索结果的问答；
- jobs：技能提取、模糊技能匹配、按匹配度排序；
- engine：对外入口 MatchingEngine。
"""
import logging

from .engine import MatchingEngine

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["MatchingEngine"]
__version__ = "0.1.0"
