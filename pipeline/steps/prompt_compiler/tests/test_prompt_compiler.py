"""
Test suite for the Prompt Compiler step.

Run with:
    pytest pipeline/steps/prompt_compiler/tests/test_prompt_compiler.py -v
"""

import pytest

from pipeline.models.core import EmailRequest
from pipeline.steps.prompt_compiler import compile_prompt
from pipeline.tables import ConfigurationTables, LengthTier


# ===================================================================
# FIXTURES
# ===================================================================

@pytest.fixture
def project_update_request():
    return EmailRequest(
        subject="Project Update",
        recipient_name="Priya",
        tone="casual",
        personal_note="The demo moved to Thursday.",
        length="short",
        language="en",
    )


# ===================================================================
# TESTS - Determinism
# ===================================================================

@pytest.mark.unit
def test_compilation_is_deterministic(project_update_request):
    first = compile_prompt(project_update_request)
    second = compile_prompt(EmailRequest(**vars(project_update_request)))

    assert first == second
    assert first.instruction_text == second.instruction_text


# ===================================================================
# TESTS - Content and ordering
# ===================================================================

@pytest.mark.unit
def test_sections_appear_in_order(project_update_request):
    text = compile_prompt(project_update_request).instruction_text

    positions = [
        text.index("Write the email in English."),
        text.index("RECIPIENT: Priya"),
        text.index("SUBJECT: Project Update"),
        text.index("TONE: casual"),
        text.index("LENGTH: brief (3-4 sentences)"),
        text.index("The demo moved to Thursday."),
        text.index("Subject: Project Update"),
    ]
    assert positions == sorted(positions)


@pytest.mark.unit
def test_formatting_directives_are_present(project_update_request):
    text = compile_prompt(project_update_request).instruction_text

    assert "must begin with this exact first line:\nSubject: Project Update" in text
    assert "Write ONLY the email content" in text
    assert "matches the casual tone" in text


@pytest.mark.unit
def test_personal_note_section_omitted_when_empty():
    text = compile_prompt(EmailRequest(subject="Hello")).instruction_text

    assert "<personal_note>" not in text


@pytest.mark.unit
def test_missing_recipient_uses_generic_placeholder():
    text = compile_prompt(EmailRequest(subject="Hello")).instruction_text

    assert "RECIPIENT: the recipient" in text


@pytest.mark.unit
def test_known_language_gets_localized_directive():
    text = compile_prompt(EmailRequest(subject="Namaste", language="hi")).instruction_text

    assert "ईमेल हिंदी में लिखें।" in text
    assert "Write the email in Hindi." in text


@pytest.mark.unit
def test_unknown_language_code_is_passed_through():
    text = compile_prompt(EmailRequest(subject="Hei", language="fi")).instruction_text

    assert "Write the email in the language identified by the code 'fi'." in text


# ===================================================================
# TESTS - Generation parameters
# ===================================================================

@pytest.mark.unit
@pytest.mark.parametrize(
    "length, expected_tokens",
    [("short", 400), ("medium", 700), ("long", 1100), ("enormous", 700)],
)
def test_max_output_tokens_follow_length_tier(length, expected_tokens):
    compiled = compile_prompt(EmailRequest(subject="Hello", length=length))

    assert compiled.parameters.max_output_tokens == expected_tokens


@pytest.mark.unit
def test_unknown_length_uses_medium_descriptor():
    text = compile_prompt(EmailRequest(subject="Hello", length="enormous")).instruction_text

    assert "LENGTH: moderate (5-7 sentences)" in text


@pytest.mark.unit
def test_sampling_constants_are_not_request_controlled():
    casual = compile_prompt(EmailRequest(subject="a", tone="casual", length="short"))
    formal = compile_prompt(EmailRequest(subject="b", tone="formal", length="long"))

    assert casual.parameters.temperature == formal.parameters.temperature == 0.9
    assert casual.parameters.top_p == formal.parameters.top_p == 0.95


@pytest.mark.unit
def test_custom_tables_are_respected():
    tables = ConfigurationTables(
        lengths={
            "medium": LengthTier(descriptor="two lines", max_output_tokens=50),
        },
    )

    compiled = compile_prompt(EmailRequest(subject="Hello", length="short"), tables)

    assert "LENGTH: two lines" in compiled.instruction_text
    assert compiled.parameters.max_output_tokens == 50


@pytest.mark.unit
def test_length_descriptor_appears_only_after_tone(project_update_request):
    text = compile_prompt(project_update_request).instruction_text

    assert text.count("brief (3-4 sentences)") == 1
    assert text.index("brief (3-4 sentences)") > text.index("TONE: casual") > text.index("RECIPIENT: Priya")
