import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from novasearch.application.errors.exceptions import ConfigurationError, UpstreamError
from novasearch.domain.external.llm import LLM
from novasearch.domain.models.app_config import LLMConfig

logger = logging.getLogger(__name__)


class OpenAILLM(LLM):
    """Chat-completion client for OpenAI-compatible endpoints (OpenRouter by default)"""

    def __init__(self, llm_config: LLMConfig, **kwargs) -> None:
        self._enabled = llm_config.enabled
        self._client = AsyncOpenAI(
            base_url=str(llm_config.base_url),
            # the SDK refuses an empty key at construction time
            api_key=llm_config.api_key or "unset",
            **kwargs,
        )
        self._model_name = llm_config.model_name
        self._temperature = llm_config.temperature
        self._max_tokens = llm_config.max_tokens
        self._timeout = llm_config.timeout_seconds

    @property
    def model_name(self) -> str:
        return self._model_name

    @staticmethod
    def _extract_text(payload: Any) -> Optional[str]:
        """Best-effort text extraction from str / list-of-parts / dict content"""
        if payload is None:
            return None
        if hasattr(payload, "model_dump"):
            payload = payload.model_dump()
        if isinstance(payload, str):
            return payload
        if isinstance(payload, list):
            parts = [OpenAILLM._extract_text(item) for item in payload]
            text = "".join(part for part in parts if part)
            return text or None
        if isinstance(payload, dict):
            for key in ("text", "content"):
                if isinstance(payload.get(key), str):
                    return payload[key]
            for key in ("content", "parts"):
                if key in payload:
                    text = OpenAILLM._extract_text(payload[key])
                    if text:
                        return text
        return None

    @staticmethod
    def _normalize_message(message: Any) -> Dict[str, Any]:
        if hasattr(message, "model_dump"):
            message = message.model_dump()
        if isinstance(message, str):
            return {"role": "assistant", "content": message}
        if not isinstance(message, dict):
            raise ValueError(f"Unexpected LLM message type: {type(message).__name__}")

        normalized = dict(message)
        normalized.setdefault("role", "assistant")
        if not isinstance(normalized.get("content"), str):
            normalized["content"] = OpenAILLM._extract_text(normalized.get("content")) or ""
        return normalized

    @staticmethod
    def _extract_message(response: Any) -> Any:
        choices = getattr(response, "choices", None)
        if isinstance(choices, list) and choices:
            message = getattr(choices[0], "message", None)
            if message is not None:
                return message
            text = OpenAILLM._extract_text(getattr(choices[0], "text", None))
            if text is not None:
                return {"role": "assistant", "content": text}

        logger.error(f"LLM response has no choices.message: {type(response).__name__}")
        raise ValueError("LLM response has no choices.message")

    async def invoke(
        self,
        messages: List[Dict[str, Any]],
        response_format: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        if not self._enabled:
            raise ConfigurationError("LLM provider is not configured")

        try:
            params: Dict[str, Any] = {
                "model": self._model_name,
                "temperature": self._temperature,
                "max_tokens": self._max_tokens,
                "messages": messages,
                "timeout": self._timeout,
            }
            if response_format is not None:
                params["response_format"] = response_format

            logger.info(f"Sending chat completion request: {self._model_name}")
            response = await self._client.chat.completions.create(**params)
            return self._normalize_message(self._extract_message(response))
        except Exception as e:
            logger.error(f"LLM request failed: {type(e).__name__}: {e}")
            raise UpstreamError(f"LLM request failed: {e}")
