"""
Script Generator
================

Writes a new script on any topic in the style captured by a style guide.
"""

import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable

from .errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)

SCRIPT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "You are an expert scriptwriter who can perfectly mimic any writing style."),
    ("human", """Based on this script-writing style guide:

{style_guide}

Write a complete YouTube video script about: "{topic}"

The script should:
- Match the tone, voice, and pacing described in the style guide
- Use similar sentence structures and expressions
- Follow the same opening and closing patterns
- Engage the audience in the same way
- Maintain the same level of formality/casualness
- Include any unique stylistic elements mentioned

Write a complete, ready-to-use script (approximately 2-3 minutes of content)."""),
])


def generate_script(style_guide: str, topic: str, llm: Runnable) -> str:
    """
    Generate a script for `topic` following `style_guide`.

    Raises:
        ValidationError if either input is blank (no request is made)
        UpstreamError if the completion call fails
    """
    if not (style_guide or "").strip() or not (topic or "").strip():
        raise ValidationError("Style analysis and topic are required")

    chain = SCRIPT_PROMPT | llm | StrOutputParser()
    try:
        return chain.invoke({"style_guide": style_guide, "topic": topic.strip()})
    except Exception as e:
        logger.error(f"Script generation failed: {type(e).__name__}: {e}")
        raise UpstreamError("Failed to generate script", status_code=500) from e
