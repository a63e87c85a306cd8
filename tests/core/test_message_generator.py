"""Tests for MessageGenerator and input block assembly."""

import pytest

from gai.core.context import config_for_test
from gai.core.errors import GenerationError
from gai.core.message_generator import GenerationRequest, MessageGenerator, build_input_block
from gai.gateway.llm.fake import FakeTextGenerator


def _request() -> GenerationRequest:
    return GenerationRequest(
        system_instructions="SYSTEM",
        task_instructions="TASK",
        input_block="INPUT",
    )


def test_generate_sends_three_ordered_messages() -> None:
    llm = FakeTextGenerator(outputs=["✨ [feat]: add login"])
    config = config_for_test()
    generator = MessageGenerator(llm, config)

    result = generator.generate(_request())

    assert result == "✨ [feat]: add login"
    assert len(llm.requests) == 1
    sent = llm.requests[0]
    assert [(m.role, m.content) for m in sent.messages] == [
        ("system", "SYSTEM"),
        ("user", "TASK"),
        ("user", "INPUT"),
    ]
    assert sent.model == config.model
    assert sent.max_tokens == config.max_tokens
    assert sent.temperature == config.temperature
    assert sent.top_p == config.top_p


def test_generate_returns_first_candidate() -> None:
    llm = FakeTextGenerator(outputs=[["first", "second"]])
    generator = MessageGenerator(llm, config_for_test())

    assert generator.generate(_request()) == "first"


def test_generate_raises_when_no_candidates() -> None:
    llm = FakeTextGenerator(outputs=[[]])
    generator = MessageGenerator(llm, config_for_test())

    with pytest.raises(GenerationError):
        generator.generate(_request())


def test_generate_allows_empty_candidate_text() -> None:
    """A candidate without content is empty text, not an error."""
    llm = FakeTextGenerator(outputs=[[""]])
    generator = MessageGenerator(llm, config_for_test())

    assert generator.generate(_request()) == ""


def test_generate_propagates_service_failure() -> None:
    llm = FakeTextGenerator(error=GenerationError("OpenAI API request failed: boom"))
    generator = MessageGenerator(llm, config_for_test())

    with pytest.raises(GenerationError, match="boom"):
        generator.generate(_request())


def test_build_input_block_layout() -> None:
    block = build_input_block(
        ticket="ABC-123",
        branch="feature/ABC-123-login",
        pr_title="Add login",
        commit_subjects=["add form", "wire api"],
        diff="diff --git a/x b/x",
    )

    assert block == (
        "INPUT:\n"
        "TICKET NUMBER: ABC-123\n"
        "BRANCH NAME:   feature/ABC-123-login\n"
        "PULL REQUEST TITLE: Add login\n"
        "COMMIT MESSAGES LIST:\n"
        "add form\nwire api\n"
        "GIT DIFFERENCE TO HEAD:\n"
        "diff --git a/x b/x\n"
    )


def test_build_input_block_leaves_unused_fields_empty() -> None:
    block = build_input_block(diff="+line")

    assert "TICKET NUMBER: \n" in block
    assert "PULL REQUEST TITLE: \n" in block
    assert block.endswith("GIT DIFFERENCE TO HEAD:\n+line\n")
