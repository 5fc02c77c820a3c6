"""
技能提取：为职位描述 / 简历生成技能集，供 match_skills 与排序使用。

主路径：生成模型输出逗号分隔的技能列表，再做清洗与去重；
回退：文本过短、模型闲聊式答复、解析不出技能或生成失败时，改用内置技能词表做关键词匹配。
"""
from __future__ import annotations

import logging
import re
from typing import Literal

from resumatch.core.errors import GenerationFailure
from resumatch.core.llm import GenerationOptions, GenerationProvider

logger = logging.getLogger(__name__)

SkillSource = Literal["job", "resume"]

# 低于该长度不调用模型，直接关键词匹配
MIN_TEXT_CHARS: dict[str, int] = {"job": 20, "resume": 50}
PROMPT_INPUT_CHARS = 2000
MAX_SKILLS = 30

_STOP_SEQUENCES: dict[str, list[str]] = {
    "job": ["\n\nExplanation:", "\n\nNote:", "\n\nRequired:", "\n\nQualifications:", "\n\nResponsibilities:"],
    "resume": ["\n\nExperience:", "\n\nEducation:", "\n\nNote:", "\n\nProjects:", "\n\nCertifications:"],
}

_SOURCE_LABEL = {"job": "job description", "resume": "resume"}
_SECTION_LABEL = {"job": "Job Description", "resume": "Resume"}

EXTRACT_PROMPT = """Task: Extract technical skills from {label} below.
Output format: comma-separated list only.

{section}:
{text}

Extracted Skills (comma-separated):"""

# 模型没按要求输出、而是在闲聊时的典型开头
_CONVERSATIONAL_MARKERS = ("i don't see", "can you provide", "please provide", "i'm happy to help")

KNOWN_SKILLS: list[str] = [
    # 编程语言
    "JavaScript", "Python", "Java", "C++", "C#", "Ruby", "Go", "Rust",
    "TypeScript", "PHP", "Swift", "Kotlin", "Scala", "R", "MATLAB",
    # 前端
    "React", "Angular", "Vue", "HTML", "CSS", "jQuery", "Bootstrap",
    "Tailwind CSS", "Next.js", "Nuxt.js", "Redux", "Webpack", "Vite",
    # 后端
    "Node.js", "Express", "Django", "Flask", "Spring Boot", "Laravel",
    "Ruby on Rails", "ASP.NET", "FastAPI", "NestJS",
    # 数据库
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "Cassandra", "DynamoDB",
    "SQLite", "Oracle", "SQL Server", "MariaDB", "Elasticsearch", "Neo4j",
    # 云与 DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins", "CircleCI",
    "GitHub Actions", "Terraform", "Ansible", "CI/CD",
    # 工具
    "Git", "GitHub", "GitLab", "Bitbucket", "JIRA", "Confluence",
    "Postman", "VS Code", "IntelliJ", "npm", "yarn",
    # AI/ML
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Keras",
    "Scikit-learn", "NLP", "Computer Vision", "LangChain", "OpenAI",
    # 软技能
    "Leadership", "Communication", "Problem Solving", "Team Collaboration",
    "Agile", "Scrum", "Project Management", "Analytical Thinking",
    "Critical Thinking", "Time Management",
]

_BULLET = re.compile(r"^[-*•]\s*")
_NUMBERING = re.compile(r"^\d+\.\s*")


def extract_skills_by_keyword(text: str) -> list[str]:
    """关键词回退：返回词表中出现在文本里的技能（按词表顺序，大小写不敏感）。"""
    lower = (text or "").lower()
    found = [skill for skill in KNOWN_SKILLS if skill.lower() in lower]
    logger.debug("关键词提取到 %d 个技能", len(found))
    return found


def parse_skill_list(reply: str) -> list[str]:
    """把模型回复解析为技能列表：切分、去项目符号与编号、过滤噪声、保序去重，最多 30 个。"""
    skills: list[str] = []
    for raw in re.split(r"[,\n;]", reply or ""):
        skill = _NUMBERING.sub("", _BULLET.sub("", raw.strip()))
        lower = skill.lower()
        if not (1 < len(skill) < 50):
            continue
        if "skill" in lower or lower.startswith("and ") or lower.startswith("or "):
            continue
        if skill not in skills:
            skills.append(skill)
    return skills[:MAX_SKILLS]


async def extract_skills(
    text: str,
    generator: GenerationProvider,
    source: SkillSource = "resume",
) -> list[str]:
    """
    从职位描述（source="job"）或简历（source="resume"）提取技能集。
    任何模型侧问题都回退到关键词提取，不向调用方抛出 GenerationFailure。
    """
    text = text or ""
    if len(text.strip()) < MIN_TEXT_CHARS[source]:
        logger.warning("%s 文本过短，使用关键词提取", source)
        return extract_skills_by_keyword(text)

    prompt = EXTRACT_PROMPT.format(
        label=_SOURCE_LABEL[source],
        section=_SECTION_LABEL[source],
        text=text[:PROMPT_INPUT_CHARS],
    )
    options = GenerationOptions(temperature=0.3, max_tokens=150, stop_sequences=_STOP_SEQUENCES[source])
    try:
        reply = await generator.generate(prompt, options)
    except GenerationFailure as e:
        logger.warning("技能提取调用失败，使用关键词提取: %s", e)
        return extract_skills_by_keyword(text)

    if any(marker in reply.lower() for marker in _CONVERSATIONAL_MARKERS):
        logger.warning("模型返回闲聊式答复，使用关键词提取")
        return extract_skills_by_keyword(text)

    skills = parse_skill_list(reply)
    if not skills:
        logger.warning("模型未提取出技能，使用关键词提取")
        return extract_skills_by_keyword(text)
    logger.info("从 %s 提取到 %d 个技能", source, len(skills))
    return skills
