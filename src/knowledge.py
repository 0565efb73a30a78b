"""Canned cybersecurity knowledge: static, keyword, topic and sentiment tables.

All keys are lower-cased when a KnowledgeBase is built and every lookup is
lower-cased the same way, so matching is case-insensitive. Iteration order
of the keyword and sentiment tables is the insertion order below; the
router relies on it when several keys are contained in one input.
"""
from __future__ import annotations
import random
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

STATIC_RESPONSES: Dict[str, str] = {
    "how are you": "I'm a bot, but I'm fully operational and ready to help you stay safe online!",
    "what's your purpose": "My mission is to educate and empower you with cybersecurity knowledge.",
    "what can i ask you about": "You can ask me about password safety, phishing, safe browsing, and general cybersecurity tips.",
    "safe browsing": "Avoid clicking unknown links, use HTTPS websites, and keep your browser up to date.",
}

KEYWORD_RESPONSES: Dict[str, str] = {
    "password": "Make sure to use strong, unique passwords for each account. Consider using a password manager.",
    "scam": "Watch out for online scams. If something sounds too good to be true, it probably is.",
    "privacy": "Protect your privacy by limiting what you share online and reviewing app permissions regularly.",
}

TOPIC_RESPONSES: Dict[str, List[str]] = {
    "phishing": [
        "Watch out for emails with urgent requests or attachments.",
        "Always verify the sender's email address before clicking links.",
        "Don’t enter credentials on suspicious login pages.",
        "Phishing often mimics trusted brands—double-check URLs.",
        "Enable 2FA to protect accounts even if your password is phished.",
    ],
    "password safety": [
        "Use a mix of letters, numbers, and symbols in your passwords.",
        "Avoid using the same password across multiple sites.",
        "Consider using a trusted password manager.",
        "Change your passwords regularly, especially after a breach.",
    ],
}

SENTIMENT_RESPONSES: Dict[str, str] = {
    "worried": "It's completely understandable to feel that way. Remember, staying informed helps you stay safe!",
    "frustrated": "I know cybersecurity can be challenging. I'm here to help you step-by-step.",
    "curious": "That's great! Curiosity is the first step toward becoming cybersecurity savvy.",
}

# first match wins, checked against the lower-cased title
PRIVACY_DESCRIPTION = "Review your account privacy settings to ensure your data is protected."
PASSWORD_DESCRIPTION = "Update your passwords and ensure they are strong and unique."
TWO_FACTOR_DESCRIPTION = "Set up two-factor authentication for added security."
PHISHING_DESCRIPTION = "Learn how to identify and report phishing emails."

TASK_DESCRIPTION_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("privacy",), PRIVACY_DESCRIPTION),
    (("password",), PASSWORD_DESCRIPTION),
    (("2fa", "two-factor"), TWO_FACTOR_DESCRIPTION),
    (("phishing",), PHISHING_DESCRIPTION),
)


def describe_task(title: str) -> str:
    """Return the canned description for a task title."""
    lowered = title.lower()
    for keywords, description in TASK_DESCRIPTION_RULES:
        if any(k in lowered for k in keywords):
            return description
    return f"Task: {title} - Please stay cyber-aware."


def _lower_keys(table: Mapping[str, object]) -> Dict[str, object]:
    lowered: Dict[str, object] = {}
    for key, value in table.items():
        k = key.strip().lower()
        if k in lowered:
            raise ValueError(f"duplicate key after normalization: {key!r}")
        lowered[k] = value
    return lowered


class KnowledgeBase:
    """Immutable lookup tables; safe to share between sessions."""

    def __init__(
        self,
        static: Mapping[str, str] = STATIC_RESPONSES,
        keywords: Mapping[str, str] = KEYWORD_RESPONSES,
        topics: Mapping[str, Sequence[str]] = TOPIC_RESPONSES,
        sentiments: Mapping[str, str] = SENTIMENT_RESPONSES,
    ):
        self.static: Mapping[str, str] = MappingProxyType(_lower_keys(static))  # type: ignore[arg-type]
        self.keywords: Mapping[str, str] = MappingProxyType(_lower_keys(keywords))  # type: ignore[arg-type]
        topic_table = {k: tuple(v) for k, v in _lower_keys(topics).items()}  # type: ignore[arg-type]
        for name, variants in topic_table.items():
            if not variants:
                raise ValueError(f"topic {name!r} has no responses")
        self.topics: Mapping[str, Tuple[str, ...]] = MappingProxyType(topic_table)
        self.sentiments: Mapping[str, str] = MappingProxyType(_lower_keys(sentiments))  # type: ignore[arg-type]

    # -------------------- exact lookups --------------------
    def static_response(self, text: str) -> Optional[str]:
        return self.static.get(text.strip().lower())

    def has_topic(self, topic: str) -> bool:
        return topic.strip().lower() in self.topics

    def topic_tip(self, topic: str, rng: random.Random) -> Optional[str]:
        """Pick one variant for a topic uniformly at random (None if unknown)."""
        variants = self.topics.get(topic.strip().lower())
        if not variants:
            return None
        return rng.choice(variants)

    def keyword_response(self, keyword: str) -> Optional[str]:
        return self.keywords.get(keyword.strip().lower())

    # -------------------- containment scans --------------------
    def match_keyword(self, text: str) -> Optional[Tuple[str, str]]:
        """First (key, response) whose key is contained in text."""
        lowered = text.lower()
        for key, response in self.keywords.items():
            if key in lowered:
                return key, response
        return None

    def match_sentiment(self, text: str) -> Optional[Tuple[str, str]]:
        lowered = text.lower()
        for key, response in self.sentiments.items():
            if key in lowered:
                return key, response
        return None
