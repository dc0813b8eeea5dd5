"""LiteLLM wrapper for schema-constrained structured generation."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Protocol

import litellm

from .config import TEMPERATURE, Config
from .errors import EmptyResponseError, TransportError
from .pipeline.request_builder import GenerationRequest

logger = logging.getLogger(__name__)

# Known LiteLLM provider prefixes that handle their own routing
_KNOWN_PREFIXES = (
    "openai/", "gemini/", "vertex_ai/", "anthropic/", "openrouter/", "ollama/", "azure/",
)

# Model prefix → env var name (for providers that need it in the env)
_PREFIX_TO_ENV_VAR = {
    "gemini/": "GEMINI_API_KEY",
    "openai/": "OPENAI_API_KEY",
    "anthropic/": "ANTHROPIC_API_KEY",
    "openrouter/": "OPENROUTER_API_KEY",
}

# Models that don't use a prefix but can be identified by name start
_NAME_TO_ENV_VAR = {
    "gpt": "OPENAI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
}


def _detect_env_var(model: str) -> str | None:
    """Detect the correct env var for a model string."""
    for prefix, env_var in _PREFIX_TO_ENV_VAR.items():
        if model.startswith(prefix):
            return env_var
    for name_start, env_var in _NAME_TO_ENV_VAR.items():
        if model.startswith(name_start):
            return env_var
    return None


def _set_provider_key(model: str, api_key: str) -> None:
    """Export the API key to the provider's env var as well.

    Some LiteLLM providers (OpenRouter in particular) only read credentials
    from the environment, not from the api_key parameter.
    """
    env_var = _detect_env_var(model)
    if env_var:
        os.environ[env_var] = api_key


def _prepare_model(model: str, api_base: str | None) -> str:
    """Add openai/ prefix for custom base URLs with unknown model names."""
    if api_base and not any(model.startswith(p) for p in _KNOWN_PREFIXES):
        return f"openai/{model}"
    return model


class StructuredGenerator(Protocol):
    """Anything that can answer a GenerationRequest with raw JSON text."""

    async def generate_structured(self, request: GenerationRequest) -> str:
        ...


def build_messages(request: GenerationRequest) -> List[Dict[str, Any]]:
    """Translate a GenerationRequest into OpenAI-style chat messages."""
    content: List[Dict[str, Any]] = []
    for part in request.parts:
        if part.is_media:
            content.append(
                {
                    "type": "file",
                    "file": {"file_data": f"data:{part.mime_type};base64,{part.inline_data}"},
                }
            )
        else:
            content.append({"type": "text", "text": part.text})

    return [
        {"role": "system", "content": request.system_instruction},
        {"role": "user", "content": content},
    ]


class LLMClient:
    """Structured-generation client backed by LiteLLM.

    Makes exactly one completion call per request: no retries and no timeout
    of its own. Callers that need a deadline wrap the coroutine themselves.
    """

    def __init__(self, config: Config):
        cfg = config.llm
        self.model = _prepare_model(cfg.model, cfg.api_base)
        self.api_key = cfg.api_key
        self.api_base = cfg.api_base

        if self.api_key:
            _set_provider_key(self.model, self.api_key)

        litellm.suppress_debug_info = True
        logging.getLogger("LiteLLM").setLevel(logging.WARNING)
        logging.getLogger("litellm").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)

    def _completion_kwargs(self, request: GenerationRequest) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": build_messages(request),
            "temperature": TEMPERATURE,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": "analysis_result",
                    "schema": request.response_schema,
                },
            },
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        # OpenRouter is routed internally by LiteLLM; never pass api_base for it.
        if self.api_base and not self.model.startswith("openrouter/"):
            kwargs["api_base"] = self.api_base
        return kwargs

    async def generate_structured(self, request: GenerationRequest) -> str:
        """Send the request and return the raw response text.

        Raises TransportError if the call fails and EmptyResponseError if it
        returns nothing.
        """
        kwargs = self._completion_kwargs(request)
        logger.info("Requesting structured analysis from %s", self.model)

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        choices = getattr(response, "choices", None) or []
        text = getattr(choices[0].message, "content", None) if choices else None
        if not text or not text.strip():
            raise EmptyResponseError(f"No response from {self.model}")
        return text
