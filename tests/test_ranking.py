"""
职位排序测试：Top-N 截断、降序、同分保持输入顺序、空输入。
"""
from datetime import datetime, timezone

from resumatch.jobs import RankingEntry, ResumeCandidate, rank_resumes_for_job

JOB = ["Python", "Django", "PostgreSQL", "Docker"]


def _candidate(i: int, skills: list[str]) -> ResumeCandidate:
    return ResumeCandidate(
        resume_id=f"r{i}",
        filename=f"resume_{i}.pdf",
        uploaded_at=datetime(2024, 1, i % 28 + 1, tzinfo=timezone.utc),
        skills=skills,
    )


def test_at_most_ten_entries_by_default():
    resumes = [_candidate(i, ["Python"]) for i in range(15)]
    ranking = rank_resumes_for_job(JOB, resumes)
    assert len(ranking) == 10
    assert [e.resume_id for e in ranking] == [f"r{i}" for i in range(10)]


def test_sorted_descending_ties_keep_input_order():
    resumes = [
        _candidate(1, ["Python"]),                                  # 25
        _candidate(2, ["Python", "Django", "Postgres", "Docker"]),  # 100
        _candidate(3, ["Django"]),                                  # 25
        _candidate(4, ["Rust"]),                                    # 0
        _candidate(5, ["python", "docker"]),                        # 50
    ]
    ranking = rank_resumes_for_job(JOB, resumes)

    assert [e.resume_id for e in ranking] == ["r2", "r5", "r1", "r3", "r4"]
    assert [e.match_percentage for e in ranking] == [100, 50, 25, 25, 0]


def test_entry_carries_resume_identity_and_match_result():
    resume = _candidate(7, ["Python", "Kubernetes"])
    [entry] = rank_resumes_for_job(JOB, [resume])

    assert isinstance(entry, RankingEntry)
    assert entry.resume_id == "r7"
    assert entry.filename == "resume_7.pdf"
    assert entry.uploaded_at == resume.uploaded_at
    assert entry.matched_skills == ["Python"]
    assert entry.missing_skills == ["Django", "PostgreSQL", "Docker"]
    assert entry.extra_skills == ["Kubernetes"]
    assert entry.total_required == 4
    assert entry.total_matched == 1


def test_no_resumes_gives_empty_ranking():
    assert rank_resumes_for_job(JOB, []) == []


def test_explicit_and_configured_limit(monkeypatch):
    resumes = [_candidate(i, ["Docker"]) for i in range(6)]
    assert len(rank_resumes_for_job(JOB, resumes, limit=3)) == 3
    assert rank_resumes_for_job(JOB, resumes, limit=0) == []

    monkeypatch.setenv("RESUMATCH_RANKING_LIMIT", "2")
    assert len(rank_resumes_for_job(JOB, resumes)) == 2


def test_limit_never_exceeds_ten(monkeypatch):
    resumes = [_candidate(i, ["Python"]) for i in range(20)]
    assert len(rank_resumes_for_job(JOB, resumes, limit=25)) == 10

    monkeypatch.setenv("RESUMATCH_RANKING_LIMIT", "50")
    assert len(rank_resumes_for_job(JOB, resumes)) == 10
