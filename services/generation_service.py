"""
Generation service wrapping the provider's text, image and speech endpoints.
"""
import base64
import re

from openai import AsyncOpenAI

from config import Config
from models.chat_models import SpeechResult
from utils.constants import (
    IMAGE_PROMPT_TEMPLATE,
    SPEECH_SYSTEM_PROMPT,
    TEXT_SYSTEM_PROMPT,
    Patterns,
)
from utils.errors import EmptyResponseError
from utils.logger import app_logger


class GenerationService:
    """Single-attempt provider calls. Retrying is the caller's concern."""

    def __init__(self, client: AsyncOpenAI):
        self.client = client

    @staticmethod
    def sanitize_prompt(text: str) -> str:
        """Drop characters outside word characters, whitespace and basic punctuation."""
        return re.sub(Patterns.UNSAFE_PROMPT_CHARS, '', text, flags=re.ASCII).strip()

    async def _complete(self, system_prompt: str, messages: list[dict], max_tokens: int) -> str:
        completion = await self.client.chat.completions.create(
            model=Config.TEXT_MODEL,
            messages=[{"role": "system", "content": system_prompt}, *messages],
            temperature=Config.TEXT_TEMPERATURE,
            max_tokens=max_tokens,
        )

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise EmptyResponseError()
        return content

    async def generate_text(self, messages: list[dict]) -> str:
        """Chat completion over the conversation so far."""
        app_logger.info(f"Text generation: {len(messages)} messages, model {Config.TEXT_MODEL}")
        content = await self._complete(TEXT_SYSTEM_PROMPT, messages, Config.TEXT_MAX_TOKENS)
        app_logger.info(f"Text generation completed: {len(content)} characters")
        return content

    async def generate_image(self, prompt: str) -> str:
        """
        Generate one image for `prompt`.

        Returns:
            The image as a data:image/png;base64 URL
        """
        safe_prompt = IMAGE_PROMPT_TEMPLATE.format(prompt=self.sanitize_prompt(prompt))
        app_logger.info(f"Image generation: model {Config.IMAGE_MODEL}")

        response = await self.client.images.generate(
            model=Config.IMAGE_MODEL,
            prompt=safe_prompt,
            n=1,
            size=Config.IMAGE_SIZE,
            quality="standard",
            response_format="b64_json",
            style="natural",
        )

        image_b64 = response.data[0].b64_json if response.data else None
        if not image_b64:
            raise EmptyResponseError()

        return f"data:image/png;base64,{image_b64}"

    async def generate_speech(self, messages: list[dict]) -> SpeechResult:
        """
        Produce a short spoken reply: a brief completion, sanitized, then synthesized.

        Returns:
            SpeechResult with a data:audio/mp3;base64 URL and the spoken text
        """
        speech_text = await self._complete(SPEECH_SYSTEM_PROMPT, messages, Config.SPEECH_TEXT_MAX_TOKENS)
        clean_text = self.sanitize_prompt(speech_text)
        if not clean_text:
            raise EmptyResponseError()

        app_logger.info(f"Speech synthesis: {len(clean_text)} characters, voice {Config.SPEECH_VOICE}")
        audio = await self.client.audio.speech.create(
            model=Config.SPEECH_MODEL,
            voice=Config.SPEECH_VOICE,
            input=clean_text,
            speed=1.0,
        )

        audio_b64 = base64.b64encode(audio.content).decode("ascii")
        return SpeechResult(url=f"data:audio/mp3;base64,{audio_b64}", text=clean_text)
