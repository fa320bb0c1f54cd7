"""Prompt templates for flashcard generation.

The topic is sent with one of two templates depending on whether the user
pasted a link or typed a subject / block of text. Both ask the model for one
``Term: Definition`` pair per line, which is the shape the parser expects.
"""

from __future__ import annotations

from pydantic import AnyUrl, TypeAdapter, ValidationError

from cardsmith.modules.flashcards.models import PromptKind

_URL_ADAPTER = TypeAdapter(AnyUrl)
_URL_PREFIXES = ("http://", "https://")


URL_TEMPLATE = (
    "Generate a list of flashcards that summarize the key information from the "
    'content at this URL: "{topic}". Each flashcard should have a term and a '
    'concise definition. Format the output as a list of "Term: Definition" pairs, '
    "with each pair on a new line.\n"
    "Example:\n"
    "Roman Republic: The period of ancient Roman civilization beginning with the "
    "overthrow of the Roman Kingdom.\n"
    "Julius Caesar: A Roman general and statesman who played a critical role in "
    "the events that led to the demise of the Roman Republic."
)

TOPIC_TEMPLATE = (
    'Generate a list of flashcards for the following topic or text: "{topic}". '
    "Each flashcard should have a term and a concise definition. Format the "
    'output as a list of "Term: Definition" pairs, with each pair on a new line. '
    "Ensure terms and definitions are distinct and clearly separated by a single "
    "colon.\n"
    'Example output for the topic "Spanish Greetings":\n'
    "Hello: Hola\n"
    "Goodbye: Adiós"
)


def is_url(text: str) -> bool:
    """True for a valid absolute URL that literally starts with http(s)://."""
    try:
        _URL_ADAPTER.validate_python(text)
    except ValidationError:
        return False
    return text.startswith(_URL_PREFIXES)


def prompt_kind(topic: str) -> PromptKind:
    return "url" if is_url(topic) else "topic"


def build_prompt(topic: str) -> str:
    if is_url(topic):
        return URL_TEMPLATE.format(topic=topic)
    return TOPIC_TEMPLATE.format(topic=topic)
