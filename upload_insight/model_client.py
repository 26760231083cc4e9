"""Model-call capability built on LangChain's OpenAI-compatible chat model."""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from .config import ModelConfig
from .errors import ModelCallError
from .types import BlobPart, ContentPart, TextPart

logger = logging.getLogger(__name__)


class ModelClient(Protocol):
    """Submit prompt and content parts, receive an opaque result."""

    def submit(self, parts: Sequence[ContentPart], model: str) -> Any:
        ...


def call_model(client: ModelClient, parts: Sequence[ContentPart], model: str, context: str) -> Any:
    """Submit one request; provider failures surface as ModelCallError."""
    try:
        return client.submit(parts, model)
    except Exception as exc:
        logger.error("Model call failed during %s: %s", context, exc)
        raise ModelCallError(context, exc) from exc


def to_message_content(parts: Sequence[ContentPart]) -> List[Dict[str, Any]]:
    content: List[Dict[str, Any]] = []
    for part in parts:
        if isinstance(part, TextPart):
            content.append({"type": "text", "text": part.text})
        elif isinstance(part, BlobPart):
            encoded = base64.b64encode(part.data).decode("ascii")
            content.append(
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{part.mime_type};base64,{encoded}"},
                }
            )
        else:
            raise TypeError(f"Unsupported content part: {type(part).__name__}")
    return content


class ChatModelClient:
    """Sends each request as a single human message to a chat model."""

    def __init__(self, config: ModelConfig, llm: Optional[BaseChatModel] = None) -> None:
        self.config = config
        if llm is None:
            if not config.api_key:
                raise ValueError("API key required. Provide --api-key or set GEMINI_API_KEY.")
            llm_kwargs: Dict[str, Any] = {
                "model": config.model,
                "api_key": config.api_key,
                "base_url": config.base_url.rstrip("/"),
                "timeout": config.timeout,
                "max_retries": config.max_retries,
            }
            if config.temperature is not None:
                llm_kwargs["temperature"] = config.temperature
            llm = ChatOpenAI(**llm_kwargs)
        self._llm = llm

    def submit(self, parts: Sequence[ContentPart], model: str) -> Any:
        message = HumanMessage(content=to_message_content(parts))
        if model == self.config.model:
            return self._llm.invoke([message])
        return self._llm.invoke([message], model=model)

    @property
    def llm(self) -> BaseChatModel:
        return self._llm
