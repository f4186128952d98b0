"""
Fallback Synthesizer Step

Builds a complete email from static per-language skeletons with no
external calls. Output depends only on the request, so identical requests
always produce identical text (a seeded humanizer keeps that property).
"""

from typing import Callable, Mapping, Optional

from pipeline.models.core import EmailRequest

from .templates import (
    DEFAULT_LANGUAGE,
    DEFAULT_TONE,
    FALLBACK_TEMPLATES,
    FallbackSkeleton,
)


def select_skeleton(
    language: str,
    tone: str,
    templates: Mapping[str, Mapping[str, FallbackSkeleton]] = FALLBACK_TEMPLATES,
) -> FallbackSkeleton:
    """
    Pick a skeleton for a language/tone pair.

    Unknown languages use English. Tones are matched case-insensitively and
    unknown tones use the language's professional entry.
    """
    language_templates = templates.get((language or "").lower()) or templates[DEFAULT_LANGUAGE]
    skeleton = language_templates.get((tone or "").lower())
    if skeleton is None:
        skeleton = language_templates.get(DEFAULT_TONE) or templates[DEFAULT_LANGUAGE][DEFAULT_TONE]
    return skeleton


def render_skeleton(skeleton: FallbackSkeleton, request: EmailRequest) -> str:
    """Fill a skeleton's slots from the request."""
    recipient = request.recipient_name or skeleton.generic_recipient
    greeting = " ".join(part for part in (skeleton.greeting, recipient) if part)

    paragraphs = [
        f"{skeleton.subject_label}: {request.subject}",
        f"{greeting},",
        f"{skeleton.opening} {skeleton.body}",
    ]

    if request.personal_note:
        paragraphs.append(request.personal_note)

    paragraphs.append(skeleton.closing)
    paragraphs.append(f"{skeleton.sign_off},\n{skeleton.signature}")

    return "\n\n".join(paragraphs)


def synthesize_fallback(
    request: EmailRequest,
    templates: Mapping[str, Mapping[str, FallbackSkeleton]] = FALLBACK_TEMPLATES,
    humanizer: Optional[Callable[[FallbackSkeleton, str], FallbackSkeleton]] = None,
) -> str:
    """
    Produce a fallback email for a request.

    Args:
        request: Normalized request from the validator
        templates: Skeleton table (language -> tone -> skeleton)
        humanizer: Optional skeleton transform (e.g. a seeded Humanizer),
            applied before the request's own text is filled in

    Returns:
        Email text starting with the localized subject line, followed by a
        greeting, body, optional personal note, closing and signature
    """
    skeleton = select_skeleton(request.language, request.tone, templates)
    if humanizer is not None:
        skeleton = humanizer(skeleton, request.language)
    return render_skeleton(skeleton, request)
