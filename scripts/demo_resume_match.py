#!/usr/bin/env python3
"""
本地跑一遍：简历入库 → RAG 问答 → 摘要 → 技能提取 → 职位排序，打印结果。
需要本地 Ollama（默认 nomic-embed-text + llama3.2:3b），或在 .env 中把 RESUMATCH_* 模型换成托管模型。
用法: python scripts/demo_resume_match.py [简历文本文件路径]
"""
import asyncio
import sys
from pathlib import Path

from resumatch import MatchingEngine
from resumatch.core import setup_logging
from resumatch.jobs import ResumeCandidate

DEMO_RESUME = """张三 后端工程师
5 年 Python 经验，熟悉 Django、FastAPI、PostgreSQL 与 Redis。
负责支付系统的服务拆分，使用 Docker 与 Kubernetes 部署到 AWS，带领 4 人小组。
"""
JOB_SKILLS = ["Python", "Django", "PostgreSQL", "Kubernetes", "Kafka"]


async def run(text: str) -> None:
    with MatchingEngine.from_env() as engine:
        print("=== 1. 简历入库 ===\n")
        indexed = await engine.index_resume("demo", text, {"filename": "demo.txt"})
        print(f"分块 {indexed.total_chunks}，写入 {indexed.chunks_indexed}，失败 {indexed.failed_chunks}\n")

        print("=== 2. RAG 问答 ===\n")
        answer = await engine.query("demo", "What databases has the candidate used?")
        print(f"回答: {answer.answer}")
        print(f"置信度: {answer.confidence:.3f}\n")

        print("=== 3. 简历摘要 ===\n")
        print(await engine.summarize_resume("demo"), "\n")

        print("=== 4. 技能提取与职位排序 ===\n")
        skills = await engine.extract_skills(text, source="resume")
        print(f"简历技能: {skills}")
        ranking = engine.rank_resumes_for_job(
            JOB_SKILLS,
            [
                ResumeCandidate(resume_id="demo", filename="demo.txt", skills=skills),
                ResumeCandidate(resume_id="frontend", filename="fe.pdf", skills=["React", "TypeScript", "CSS"]),
            ],
        )
        for i, entry in enumerate(ranking, 1):
            print(f"#{i} {entry.resume_id}: {entry.match_percentage}% 缺少 {entry.missing_skills}")


def main():
    setup_logging()
    text = DEMO_RESUME
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        if not path.exists():
            print(f"文件不存在: {path}")
            sys.exit(1)
        text = path.read_text(encoding="utf-8")
    asyncio.run(run(text))


if __name__ == "__main__":
    main()
