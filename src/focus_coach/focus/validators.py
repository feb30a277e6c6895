"""Quality gates for AI-generated first steps.

The checks are surface-form heuristics kept as literal rule tables so each
table can be tested and extended on its own. They do not prove a suggestion
is a good five-minute action; the red-flag list in particular is a
non-exhaustive denylist and overlong suggestions using unlisted phrasing will
get through.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from focus_coach.core.errors import ValidationError

ACTION_VERB_CATEGORIES: dict[str, tuple[str, ...]] = {
    "creation": ("write", "create", "draft", "outline", "list", "sketch", "draw", "jot", "type"),
    "investigation": (
        "find",
        "search",
        "look up",
        "read",
        "review",
        "identify",
        "gather",
        "watch",
    ),
    "organization": (
        "open",
        "set up",
        "organize",
        "schedule",
        "book",
        "add",
        "download",
        "install",
    ),
    "communication": ("email", "message", "call", "ask", "send"),
    "physical": ("take out", "move", "put", "go to", "get"),
    "technical": ("run", "test", "debug", "check"),
}

ACTION_VERB_PREFIXES: tuple[str, ...] = tuple(
    verb for verbs in ACTION_VERB_CATEGORIES.values() for verb in verbs
)

RED_FLAG_PHRASES: tuple[str, ...] = (
    # Finality or creation verb + a large noun.
    "complete the",
    "finish the",
    "finalize the",
    "implement the",
    "build the",
    "design the",
    "write the entire",
    "write the full",
    "create the whole",
    # Nouns indicating a large, undefined scope.
    "the entire module",
    "the whole chapter",
    "the full draft",
    "the first draft",
    "the final version",
    "the complete list",  # "a list" is fine
    # Totalizing phrases.
    "all of the",
    "every part of",
    "the rest of the",
    "organize all",
    "clean the entire",
)

SENTENCE_TERMINATORS: tuple[str, ...] = (".", "?", "!")


@dataclass(frozen=True, slots=True)
class Validator:
    """A named predicate over candidate text.

    `check` returns None when the text passes, or a short reason when it
    fails.
    """

    name: str
    description: str
    check: Callable[[str], str | None]

    def __call__(self, text: str) -> None:
        reason = self.check(text)
        if reason is not None:
            raise ValidationError(self.name, text, reason)


def check_non_empty(text: str) -> str | None:
    if not text.strip():
        return "suggestion is empty"
    return None


# Multi-word verbs ("look up", "set up") compare as many leading tokens as they have words.
def _opens_with(tokens: list[str], verb: str) -> bool:
    verb_words = verb.split()
    if len(tokens) < len(verb_words):
        return False
    return " ".join(tokens[: len(verb_words)]).startswith(verb)


def check_actionable(text: str) -> str | None:
    tokens = text.strip().lower().split()
    if not tokens:
        return "suggestion is empty"
    if any(_opens_with(tokens, verb) for verb in ACTION_VERB_PREFIXES):
        return None
    return f"does not open with an action verb (first word {tokens[0]!r})"


def find_red_flags(text: str) -> list[str]:
    lowered = text.lower()
    return [phrase for phrase in RED_FLAG_PHRASES if phrase in lowered]


def check_bounded_scope(text: str) -> str | None:
    flags = find_red_flags(text)
    if flags:
        return f"implies too large a scope: {', '.join(repr(f) for f in flags)}"
    return None


def check_single_sentence(text: str) -> str | None:
    positions = [i for i in (text.find(t) for t in SENTENCE_TERMINATORS) if i != -1]
    # No terminator at all reads as one bare imperative.
    if not positions:
        return None
    if text[min(positions) + 1 :].strip():
        return "text continues after the first sentence"
    return None


NON_EMPTY = Validator("non_empty", "Suggestion has visible text", check_non_empty)
ACTIONABLE = Validator(
    "actionable", "Opens with an imperative action verb", check_actionable
)
BOUNDED_SCOPE = Validator(
    "bounded_scope", "Contains no large-scope red-flag phrase", check_bounded_scope
)
SINGLE_SENTENCE = Validator(
    "single_sentence", "Nothing follows the first sentence", check_single_sentence
)

# Order matters: later validators assume non-empty input.
VALIDATORS: tuple[Validator, ...] = (NON_EMPTY, ACTIONABLE, BOUNDED_SCOPE, SINGLE_SENTENCE)


def validate_suggestion(candidate: str, validators: Sequence[Validator] = VALIDATORS) -> str:
    """Run `candidate` through `validators` in order.

    Returns:
        The candidate, unchanged, when every validator passes.

    Raises:
        ValidationError: From the first validator that fails.
    """
    for validator in validators:
        validator(candidate)
    return candidate
