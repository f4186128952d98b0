"""
Fallback email skeletons, keyed by language and then by lower-case tone.

Every language must provide a "professional" entry, and English must exist:
it is the default for unknown languages.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class FallbackSkeleton:
    """Localized pieces of one fallback email."""

    subject_label: str
    greeting: str
    generic_recipient: str
    opening: str
    body: str
    closing: str
    sign_off: str
    signature: str


DEFAULT_LANGUAGE = "en"
DEFAULT_TONE = "professional"


FALLBACK_TEMPLATES: Mapping[str, Mapping[str, FallbackSkeleton]] = MappingProxyType({
    "en": MappingProxyType({
        "professional": FallbackSkeleton(
            subject_label="Subject",
            greeting="Hi",
            generic_recipient="there",
            opening="Hope you're doing well.",
            body="I wanted to quickly touch base about this.",
            closing=(
                "Looking forward to hearing your thoughts when you get a moment. "
                "Let me know if you need any clarification from my end."
            ),
            sign_off="Best",
            signature="[Your Name]",
        ),
        "casual": FallbackSkeleton(
            subject_label="Subject",
            greeting="Hey",
            generic_recipient="there",
            opening="Hope you're having a good week!",
            body="Just wanted to follow up on this.",
            closing=(
                "When you get a chance, could you take a look? "
                "No major rush, but would appreciate your input."
            ),
            sign_off="Thanks",
            signature="[Your Name]",
        ),
        "friendly": FallbackSkeleton(
            subject_label="Subject",
            greeting="Hello",
            generic_recipient="there",
            opening="Hope all is well on your end!",
            body="I was thinking about this and wanted to reach out.",
            closing=(
                "Let me know what you think when you have some time. "
                "Would love to catch up properly soon!"
            ),
            sign_off="Cheers",
            signature="[Your Name]",
        ),
    }),
    "hi": MappingProxyType({
        "professional": FallbackSkeleton(
            subject_label="विषय",
            greeting="प्रिय",
            generic_recipient="सर/मैडम",
            opening="आशा है आप सभी ठीक हैं।",
            body="मैं इस बारे में आपसे संपर्क करना चाहता था/चाहती थी।",
            closing="आपके विचारों की प्रतीक्षा रहेगी। यदि कोई स्पष्टीकरण चाहिए हो तो बताएं।",
            sign_off="धन्यवाद",
            signature="[आपका नाम]",
        ),
        "casual": FallbackSkeleton(
            subject_label="विषय",
            greeting="नमस्ते",
            generic_recipient="भाई/दोस्त",
            opening="कैसे हो?",
            body="बस इस बारे में एक अपडेट देने के लिए मैसेज कर रहा/रही हूं।",
            closing="जब भी समय मिले, जरूर बताएं। कोई जल्दी नहीं है।",
            sign_off="शुक्रिया",
            signature="[आपका नाम]",
        ),
    }),
    "es": MappingProxyType({
        "professional": FallbackSkeleton(
            subject_label="Asunto",
            greeting="Hola",
            generic_recipient="",
            opening="Espero que se encuentre bien.",
            body="Quería ponerme en contacto brevemente sobre este tema.",
            closing=(
                "Quedo atento a sus comentarios cuando tenga un momento. "
                "Avíseme si necesita cualquier aclaración."
            ),
            sign_off="Saludos cordiales",
            signature="[Tu nombre]",
        ),
        "casual": FallbackSkeleton(
            subject_label="Asunto",
            greeting="Hola",
            generic_recipient="",
            opening="¿Qué tal la semana?",
            body="Solo quería darle seguimiento a esto.",
            closing="Cuando puedas, échale un vistazo. No hay prisa, pero me vendría bien tu opinión.",
            sign_off="Gracias",
            signature="[Tu nombre]",
        ),
    }),
})
