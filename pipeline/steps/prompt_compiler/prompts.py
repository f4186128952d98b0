"""
Prompt Compiler Prompts

Instruction text sent to the generation service. Sections are joined in a
fixed order so the same request always produces the same prompt.
"""

HUMAN_WRITING_GUIDANCE = """<writing_style>
Write this email so it sounds completely human and natural. Avoid AI patterns.
1. Use natural language, with conversational phrases where the tone allows
2. Vary sentence length - mix short and long sentences
3. Use contractions (I'm, don't, can't) where appropriate for the tone
4. Add personal touches and specific details from the context
5. Use colloquial language only when it fits the tone
6. Include transitional phrases naturally
7. Never use em dashes, "I hope this email finds you well", "delve" or "leverage"
</writing_style>"""


FORMAT_INSTRUCTIONS = """<output_format>
The email must begin with this exact first line:
Subject: {subject}

Then a blank line, a greeting that matches the {tone} tone, the body, and a
closing and sign-off that match the {tone} tone.

Write ONLY the email content. Do not add explanations, notes, markdown or
anything outside the email itself.
</output_format>"""


TASK_TEMPLATE = """<task>
Write an email using the details below.
</task>

<details>
RECIPIENT: {recipient}
SUBJECT: {subject}
TONE: {tone}
LENGTH: {length_descriptor}
</details>"""


PERSONAL_NOTE_TEMPLATE = """<personal_note>
Include this context from the sender, keeping its meaning intact:
{personal_note}
</personal_note>"""


LANGUAGE_TEMPLATE = """<language>
{directive}
</language>"""


GENERIC_RECIPIENT = "the recipient"
