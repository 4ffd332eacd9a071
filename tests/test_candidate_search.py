"""
候选人自然语言搜索：default / nlp / fallback / error_fallback 四种模式与目录来源。
"""
import asyncio
import json

from conftest import FakeLLMClient
from hireai.candidates import keyword_search, search_candidates
from hireai.candidates.search import FALLBACK_NLP_SCORE, FALLBACK_REASON, UNAVAILABLE_MESSAGE
from hireai.candidates.sources import SampleCandidateSource, get_candidate_source
from hireai.candidates.sources.json_file import JsonFileCandidateSource
from hireai.core.errors import ExternalServiceError

SOURCE = SampleCandidateSource()


def test_blank_query_returns_directory_without_calls():
    fake = FakeLLMClient()
    resp = asyncio.run(search_candidates(fake, "   ", limit=3, source=SOURCE))
    assert resp.search_type == "default"
    assert resp.total_results == 3
    assert [c.name for c in resp.candidates] == ["Priya Sharma", "Marcus Lee", "Sofia Garcia"]
    assert fake.calls == []


def test_nlp_mode_filters_incomplete_entries():
    reply = json.dumps([
        {"name": "Sofia Garcia", "linkedin_profile_url": "https://www.linkedin.com/in/example-sofia-garcia",
         "nlpScore": 92.6, "matchReason": "NLP experience"},
        {"name": "No Url", "nlpScore": 80},
        {"linkedin_profile_url": "https://example.com/no-name"},
        "garbage",
    ])
    fake = FakeLLMClient(["Here you go:\n```json\n" + reply + "\n```"])
    resp = asyncio.run(search_candidates(fake, "NLP engineer", source=SOURCE))
    assert resp.search_type == "nlp"
    assert resp.query == "NLP engineer"
    assert resp.total_results == 1
    match = resp.candidates[0]
    assert match.nlp_score == 93
    assert match.match_reason == "NLP experience"
    assert '"NLP engineer"' in fake.calls[0]["prompt"]


def test_nlp_mode_clamps_oversized_score():
    reply = '[{"name": "Ada", "linkedin_profile_url": "https://example.com/ada", "nlpScore": ' + "9" * 400 + "}]"
    resp = asyncio.run(search_candidates(FakeLLMClient([reply]), "math", source=SOURCE))
    assert resp.search_type == "nlp"
    assert resp.candidates[0].nlp_score == 100


def test_nlp_mode_respects_limit():
    reply = json.dumps([
        {"name": f"P{i}", "linkedin_profile_url": f"https://example.com/{i}", "nlpScore": 90 - i} for i in range(5)
    ])
    resp = asyncio.run(search_candidates(FakeLLMClient([reply]), "anyone", limit=2, source=SOURCE))
    assert [c.name for c in resp.candidates] == ["P0", "P1"]


def test_undecodable_reply_uses_keyword_fallback():
    fake = FakeLLMClient(["I think Priya is great."])
    resp = asyncio.run(search_candidates(fake, "python", source=SOURCE))
    assert resp.search_type == "fallback"
    assert {c.name for c in resp.candidates} == {"Priya Sharma", "Sofia Garcia", "David Okafor"}
    assert all(c.nlp_score == FALLBACK_NLP_SCORE for c in resp.candidates)
    assert all(c.match_reason == FALLBACK_REASON for c in resp.candidates)


def test_service_failure_returns_directory_with_error():
    fake = FakeLLMClient([ExternalServiceError("timeout")])
    resp = asyncio.run(search_candidates(fake, "react", limit=2, source=SOURCE))
    assert resp.search_type == "error_fallback"
    assert resp.error == UNAVAILABLE_MESSAGE
    assert len(resp.candidates) == 2


def test_keyword_search_case_insensitive():
    profiles = SOURCE.list_candidates()
    assert [m.name for m in keyword_search("REMOTE", profiles, 10)] == ["Marcus Lee"]
    assert keyword_search("cobol", profiles, 10) == []


def test_response_serializes_camel_case():
    resp = asyncio.run(search_candidates(FakeLLMClient(["nope"]), "react", source=SOURCE))
    dumped = resp.model_dump(by_alias=True)
    assert dumped["searchType"] == "fallback"
    assert dumped["totalResults"] == 1
    first = dumped["candidates"][0]
    assert first["nlpScore"] == FALLBACK_NLP_SCORE
    assert first["linkedin_profile_url"].startswith("https://")


def test_json_file_source(tmp_path, monkeypatch):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps([
        {"name": "Ada", "linkedin_profile_url": "https://example.com/ada", "skills": ["Math"]},
        {"name": "Bad", "skills": "not a list"},
        {"name": "Grace", "linkedin_profile_url": "https://example.com/grace"},
    ]), encoding="utf-8")
    monkeypatch.setenv("HIREAI_CANDIDATE_SOURCE", "json")
    monkeypatch.setenv("HIREAI_CANDIDATES_FILE", str(path))
    source = get_candidate_source()
    assert isinstance(source, JsonFileCandidateSource)
    assert [p.name for p in source.list_candidates()] == ["Ada", "Grace"]


def test_json_file_source_missing_file(tmp_path):
    assert JsonFileCandidateSource(tmp_path / "missing.json").list_candidates() == []
