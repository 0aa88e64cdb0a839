"""Tests for enhancement prompts."""

from blogsmith.generation import SYSTEM_PROMPT, ReferenceExcerpt, build_user_prompt
from blogsmith.models import Article


def _article():
    return Article(
        id="a1",
        title="Chatbots",
        original_content="Chatbots answer questions.",
        source_url="https://example.com/blog/chatbots",
    )


def test_prompt_without_references():
    prompt = build_user_prompt(_article(), [])

    assert "Title: Chatbots" in prompt
    assert "Chatbots answer questions." in prompt
    assert "No reference articles available." in prompt
    assert "REFERENCE ARTICLES" not in prompt


def test_prompt_numbers_and_truncates_references():
    references = [
        ReferenceExcerpt(url="https://r.test/1", title="One", content="a" * 2500),
        ReferenceExcerpt(url="https://r.test/2", content="short"),
    ]

    prompt = build_user_prompt(_article(), references)

    assert "--- Reference 1 ---" in prompt
    assert "--- Reference 2 ---" in prompt
    assert "a" * 2000 in prompt
    assert "a" * 2001 not in prompt
    assert "Title: Reference Article" in prompt
    assert "No reference articles available." not in prompt


def test_system_prompt_requests_references_section():
    assert "References" in SYSTEM_PROMPT
