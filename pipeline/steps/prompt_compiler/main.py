"""
Prompt Compiler Step

Pure function from EmailRequest + configuration tables to CompiledPrompt.
No randomness and no hidden state: identical inputs give a byte-identical
instruction string.
"""

from pipeline.models.core import CompiledPrompt, EmailRequest, GenerationParameters
from pipeline.tables import DEFAULT_TABLES, ConfigurationTables

from .prompts import (
    FORMAT_INSTRUCTIONS,
    GENERIC_RECIPIENT,
    HUMAN_WRITING_GUIDANCE,
    LANGUAGE_TEMPLATE,
    PERSONAL_NOTE_TEMPLATE,
    TASK_TEMPLATE,
)


def create_instruction_text(request: EmailRequest, tables: ConfigurationTables = DEFAULT_TABLES) -> str:
    """
    Build the instruction text.

    Section order: language directive, task details (recipient, subject,
    tone, length), personal note (only when present), writing guidance,
    formatting directives.
    """
    length_tier = tables.length_tier(request.length)

    sections = [
        LANGUAGE_TEMPLATE.format(directive=tables.language_directive(request.language)),
        TASK_TEMPLATE.format(
            recipient=request.recipient_name or GENERIC_RECIPIENT,
            subject=request.subject,
            tone=request.tone,
            length_descriptor=length_tier.descriptor,
        ),
    ]

    if request.personal_note:
        sections.append(PERSONAL_NOTE_TEMPLATE.format(personal_note=request.personal_note))

    sections.append(HUMAN_WRITING_GUIDANCE)
    sections.append(FORMAT_INSTRUCTIONS.format(subject=request.subject, tone=request.tone))

    return "\n\n".join(sections)


def compile_prompt(request: EmailRequest, tables: ConfigurationTables = DEFAULT_TABLES) -> CompiledPrompt:
    """
    Compile a request into instruction text and generation parameters.

    Args:
        request: Normalized request from the validator
        tables: Length/language tables and sampling constants

    Returns:
        CompiledPrompt with the instruction text and parameters. Temperature
        and top_p are fixed constants; the output token cap comes from the
        length tier.
    """
    length_tier = tables.length_tier(request.length)

    return CompiledPrompt(
        instruction_text=create_instruction_text(request, tables),
        parameters=GenerationParameters(
            temperature=tables.temperature,
            top_p=tables.top_p,
            max_output_tokens=length_tier.max_output_tokens,
        ),
    )
