"""配置读取、token 计数回退、日志初始化。"""
import logging

import pytest

from resumatch.core import config, tokens
from resumatch.core.log import setup_logging


def test_defaults(monkeypatch):
    for name in (
        "RESUMATCH_DEFAULT_MODEL", "RESUMATCH_EMBED_MODEL", "RESUMATCH_API_BASE", "OLLAMA_BASE_URL",
        "RESUMATCH_EMBED_DIM", "RESUMATCH_CHUNK_SIZE", "RESUMATCH_CHUNK_OVERLAP",
        "RESUMATCH_RAG_TOP_K", "RESUMATCH_RANKING_LIMIT", "RESUMATCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    assert config.get_default_model() == "ollama/llama3.2:3b"
    assert config.get_embed_model() == "ollama/nomic-embed-text"
    assert config.get_api_base() == "http://localhost:11434"
    assert config.embed_dim() == 768
    assert (config.chunk_size(), config.chunk_overlap()) == (500, 50)
    assert config.rag_top_k() == 3
    assert config.ranking_limit() == 10
    assert config.log_level() == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RESUMATCH_DEFAULT_MODEL", "deepseek/deepseek-chat")
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://gpu-box:11434")
    monkeypatch.delenv("RESUMATCH_API_BASE", raising=False)
    monkeypatch.setenv("RESUMATCH_RAG_TOP_K", " 5 ")
    monkeypatch.setenv("RESUMATCH_LOG_LEVEL", "debug")

    assert config.get_default_model() == "deepseek/deepseek-chat"
    assert config.get_api_base() == "http://gpu-box:11434"
    assert config.rag_top_k() == 5
    assert config.log_level() == "DEBUG"

    monkeypatch.setenv("RESUMATCH_API_BASE", "http://override:11434")
    assert config.get_api_base() == "http://override:11434"


@pytest.mark.parametrize("raw", ["abc", "5.5", ""])
def test_invalid_int_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("RESUMATCH_CHUNK_SIZE", raw)
    assert config.chunk_size() == 500


def test_count_tokens_empty():
    assert tokens.count_tokens("") == 0


def test_count_tokens_approximates_without_encoding(monkeypatch):
    monkeypatch.setattr(tokens, "_load_encoding", lambda encoding_name: None)
    assert tokens.count_tokens("abcdefgh", "ollama/llama3.2:3b") == 4
    assert tokens.count_tokens("a") == 1


@pytest.mark.parametrize(
    "model,expected",
    [
        ("openai/gpt-4o-mini", "o200k_base"),
        ("openai/gpt-4-turbo", "cl100k_base"),
        ("ollama/llama3.2:3b", "cl100k_base"),
        (None, "cl100k_base"),
    ],
)
def test_encoding_name_for_model(model, expected):
    assert tokens.encoding_name_for(model) == expected


def test_setup_logging_adds_handler_once():
    logger = logging.getLogger("resumatch")
    before_handlers = list(logger.handlers)
    before_level = logger.level
    try:
        setup_logging("WARNING")
        setup_logging("WARNING")
        added = [h for h in logger.handlers if h not in before_handlers]
        assert len(added) == 1
        assert isinstance(added[0], logging.StreamHandler)
        assert logger.level == logging.WARNING
    finally:
        logger.handlers = before_handlers
        logger.setLevel(before_level)
