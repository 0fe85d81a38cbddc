"""
Tests for LLM enhancement with the provider call replaced.
"""
import asyncio

import pytest

from app.prompts.improvement_suggestions import DEFAULT_SUGGESTIONS
from app.services import enhancer_service, llm_service
from app.utils.text_cleanup import parse_numbered_list, split_answer_lines

LLM = {"provider": "google", "model_key": "gemini-2.0-flash", "api_key": "test-key"}


@pytest.fixture
def failing_llm(monkeypatch):
    calls = []

    async def fake_complete(**kwargs):
        calls.append(kwargs)
        raise RuntimeError("provider unavailable")

    monkeypatch.setattr(llm_service, "complete", fake_complete)
    return calls


@pytest.fixture
def scripted_llm(monkeypatch):
    """Answers by prompt name; records every call."""
    answers = {}
    calls = []

    async def fake_complete(**kwargs):
        calls.append(kwargs)
        return answers[kwargs["prompt_name"]]

    monkeypatch.setattr(llm_service, "complete", fake_complete)
    return answers, calls


def test_bullets_fall_back_on_error(failing_llm):
    bullets = ["Did reports", "Answered phones"]
    result = asyncio.run(enhancer_service.enhance_bullets(bullets, "responsibilities", **LLM))
    assert result == bullets
    assert len(failing_llm) == 1


def test_bullets_are_cleaned(scripted_llm):
    answers, calls = scripted_llm
    answers["enhance_bullets"] = "1. Automated weekly reporting for 12 teams\n\n- Resolved 40+ support calls daily\n"

    result = asyncio.run(enhancer_service.enhance_bullets(
        ["Did reports", "Answered phones"], "responsibilities", "Support analyst role", **LLM
    ))

    assert result == ["Automated weekly reporting for 12 teams", "Resolved 40+ support calls daily"]
    prompt = calls[0]["messages"][1]["content"]
    assert "1. Did reports" in prompt
    assert "Target Job Description: Support analyst role" in prompt


def test_blank_answer_keeps_original(scripted_llm):
    answers, _ = scripted_llm
    answers["enhance_text"] = "   \n"
    result = asyncio.run(enhancer_service.enhance_text("A todo app", "project description", **LLM))
    assert result == "A todo app"


def test_empty_text_skips_llm(scripted_llm):
    _, calls = scripted_llm
    assert asyncio.run(enhancer_service.enhance_text("", "project description", **LLM)) == ""
    assert calls == []


def test_enhance_resume_records_suggestions(scripted_llm, strong_resume):
    answers, _ = scripted_llm
    answers["enhance_bullets"] = "Rewritten bullet one\nRewritten bullet two"
    answers["enhance_text"] = "Rewritten text"
    original = strong_resume.model_copy(deep=True)

    enhanced, suggestions = asyncio.run(enhancer_service.enhance_resume(strong_resume, **LLM))

    assert strong_resume == original
    assert enhanced.experience[0].responsibilities == ["Rewritten bullet one", "Rewritten bullet two"]
    assert enhanced.projects[0].description == "Rewritten text"
    assert enhanced.projects[0].highlights == ["Rewritten text"]

    ids = [s.id for s in suggestions]
    assert "exp-resp-0-0" in ids
    assert "proj-desc-1" in ids
    assert "proj-high-0" in ids
    # third role had one responsibility; the extra line is reported as an addition
    extra = next(s for s in suggestions if s.id == "exp-resp-2-1")
    assert extra.original == ""
    assert all(not s.accepted for s in suggestions)


def test_enhance_resume_is_noop_when_llm_fails(failing_llm, strong_resume):
    enhanced, suggestions = asyncio.run(enhancer_service.enhance_resume(strong_resume, "Backend role", **LLM))
    assert enhanced == strong_resume
    assert suggestions == []


def test_improvement_suggestions_parse_numbered_list(scripted_llm, scenario_resume):
    answers, calls = scripted_llm
    answers["improvement_suggestions"] = (
        "Here are my suggestions:\n1. Add a skills section\n2. Quantify achievements\nGood luck!"
    )
    result = asyncio.run(enhancer_service.generate_improvement_suggestions(scenario_resume, 45, **LLM))
    assert result == ["Add a skills section", "Quantify achievements"]
    assert "Current ATS Score: 45/100" in calls[0]["messages"][1]["content"]


def test_improvement_suggestions_default_on_error(failing_llm, scenario_resume):
    result = asyncio.run(enhancer_service.generate_improvement_suggestions(scenario_resume, 45, **LLM))
    assert result == DEFAULT_SUGGESTIONS


def test_unknown_model_is_rejected():
    with pytest.raises(ValueError):
        llm_service.resolve_model_id("google", "no-such-model")


def test_decimal_led_lines_keep_their_numbers():
    answer = "1. Cut build time by 40%\n99.9% uptime kept across 3 regions\n2) Wrote the runbook"
    assert split_answer_lines(answer) == [
        "Cut build time by 40%",
        "99.9% uptime kept across 3 regions",
        "Wrote the runbook",
    ]
    assert parse_numbered_list("1. Add metrics\n99.9% uptime is a strength\n2. Add links") == [
        "Add metrics",
        "Add links",
    ]


def test_bullets_with_decimal_metrics(scripted_llm):
    answers, _ = scripted_llm
    answers["enhance_bullets"] = "3.5x faster builds after caching rework\n2.5M requests served daily"
    result = asyncio.run(enhancer_service.enhance_bullets(["Sped up builds", "Served requests"], "responsibilities", **LLM))
    assert result == ["3.5x faster builds after caching rework", "2.5M requests served daily"]
