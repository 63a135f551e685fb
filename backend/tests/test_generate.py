from types import SimpleNamespace

import pytest
from openai import OpenAIError

from jobmatch.config import settings
from jobmatch.services import generation_service
from jobmatch.services.generation_service import (
    GenerationError,
    GenerationUnavailableError,
    cover_letter,
)


class FakeCompletions:
    def __init__(self, content="Generated text", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_openai(monkeypatch):
    completions = FakeCompletions()
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(generation_service, "_get_client", lambda: client)
    return completions


class TestGenerationService:
    def test_requires_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", None)
        with pytest.raises(GenerationUnavailableError):
            generation_service.resume_tips("resume")

    def test_prompt_and_model(self, fake_openai):
        letter = cover_letter("my resume", "job text", "Pixel Forge")
        assert letter == "Generated text"
        call = fake_openai.calls[0]
        assert call["model"] == settings.openai_model
        assert call["max_tokens"] == settings.openai_max_tokens
        assert call["messages"][0] == {"role": "system", "content": "You are an expert career coach."}
        user_prompt = call["messages"][1]["content"]
        assert "Pixel Forge" in user_prompt
        assert "job text" in user_prompt
        assert "my resume" in user_prompt

    def test_cover_letter_default_company(self, fake_openai):
        cover_letter("my resume", "job text")
        assert "the company" in fake_openai.calls[0]["messages"][1]["content"]

    def test_sdk_error_wrapped(self, fake_openai):
        fake_openai.error = OpenAIError("boom")
        with pytest.raises(GenerationError):
            generation_service.tailor_resume("resume", "job")

    def test_empty_content(self, fake_openai):
        fake_openai.content = None
        assert generation_service.resume_tips("resume") == ""


class TestGenerateRoutes:
    def test_resume_tips(self, client, fake_openai):
        r = client.post("/api/v1/generate/resume-tips", json={"resume_text": "my resume"})
        assert r.status_code == 200
        assert r.json() == {"tips": "Generated text"}

    def test_tailor_resume(self, client, fake_openai):
        r = client.post("/api/v1/generate/tailor-resume", json={
            "resume_text": "my resume",
            "job_description": "job text",
        })
        assert r.status_code == 200
        assert r.json() == {"tailored_resume": "Generated text"}

    def test_cover_letter(self, client, fake_openai):
        r = client.post("/api/v1/generate/cover-letter", json={
            "resume_text": "my resume",
            "job_description": "job text",
            "company_name": "Pixel Forge",
        })
        assert r.status_code == 200
        assert r.json() == {"cover_letter": "Generated text"}

    def test_missing_fields(self, client, fake_openai):
        assert client.post("/api/v1/generate/resume-tips", json={}).status_code == 400
        r = client.post("/api/v1/generate/tailor-resume", json={"resume_text": "my resume"})
        assert r.status_code == 400
        r = client.post("/api/v1/generate/cover-letter", json={"job_description": "job"})
        assert r.status_code == 400
        assert fake_openai.calls == []

    def test_not_configured(self, client, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", None)
        r = client.post("/api/v1/generate/resume-tips", json={"resume_text": "my resume"})
        assert r.status_code == 503

    def test_upstream_failure(self, client, fake_openai):
        fake_openai.error = OpenAIError("boom")
        r = client.post("/api/v1/generate/resume-tips", json={"resume_text": "my resume"})
        assert r.status_code == 502
