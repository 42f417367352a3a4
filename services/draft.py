import logging
from typing import Optional

from models import EmailRequest
from .llm import GeminiClient, GenerationError

logger = logging.getLogger(__name__)

MISSING_CONTENT = "Error: Please provide email content"

INSTRUCTION = (
    "Generate a Professional email reply for the following email content "
    "and Please dont Generate the subject line and "
)
ALLOWED_TONES = frozenset({"professional", "friendly", "casual", "formal"})


def build_prompt(email_content: str, tone: Optional[str] = None) -> str:
    prompt = INSTRUCTION
    if tone:
        tone = tone.lower().strip()
        # unknown tones are dropped, never echoed into the prompt
        if tone in ALLOWED_TONES:
            prompt += f" Use a {tone} tone"
    return prompt + "\nOriginal email content : \n" + email_content


class ReplyGenerator:
    def __init__(self, client: GeminiClient):
        self.client = client

    async def generate_email_reply(self, request: Optional[EmailRequest]) -> str:
        if request is None or not (request.email_content or "").strip():
            return MISSING_CONTENT

        prompt = build_prompt(request.email_content, request.tone)
        try:
            return await self.client.complete(prompt)
        except GenerationError as e:
            logger.info("%s: %s", type(e).__name__, e)
            return e.user_message
