# chat/llm.py

import os
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

# Quiet down gRPC noise from the SDK
os.environ.setdefault("GRPC_VERBOSITY", "ERROR")
os.environ.setdefault("GRPC_TRACE", "")

from django.conf import settings
import google.generativeai as genai

logger = logging.getLogger(__name__)


# ===== Exceptions =====
class GeminiError(RuntimeError):
    ...


class GeminiBlocked(GeminiError):
    ...


class GeminiConfigError(GeminiError):
    ...


# ===== Base config =====

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_S = 60

GENERATION_CONFIG = {
    "temperature": 0.7,
    "top_p": 0.95,
    "top_k": 40,
    "max_output_tokens": 1024,
}


@dataclass(frozen=True)
class GeminiConfig:
    api_key: Optional[str]
    model_name: str = DEFAULT_MODEL
    timeout_s: int = DEFAULT_TIMEOUT_S

    @classmethod
    def from_settings(cls) -> "GeminiConfig":
        return cls(
            api_key=getattr(settings, "GEMINI_API_KEY", None),
            model_name=getattr(settings, "GEMINI_MODEL", None) or DEFAULT_MODEL,
            timeout_s=int(getattr(settings, "GEMINI_TIMEOUT_S", DEFAULT_TIMEOUT_S)),
        )


def _extract_text(resp) -> str:
    """
    Pull the reply text out of a Gemini SDK response.

    Supports:
        * resp.candidates[..].content.parts[..].text
        * resp.text
        * plain string resp
    """
    if isinstance(resp, str):
        return resp.strip()

    candidates = getattr(resp, "candidates", None) or []
    chunks = []
    for c in candidates:
        content = getattr(c, "content", None)
        for p in getattr(content, "parts", None) or []:
            txt = getattr(p, "text", "") or ""
            if isinstance(txt, str) and txt.strip():
                chunks.append(txt)
        if chunks:
            return "".join(chunks).strip()

    # resp.text raises ValueError on the real SDK when there are no parts
    try:
        t = getattr(resp, "text", "") or ""
    except ValueError:
        return ""
    return t.strip() if isinstance(t, str) else ""


def _check_block(resp) -> None:
    fb = getattr(resp, "prompt_feedback", None)
    br = getattr(fb, "block_reason", None) if fb else None
    if br:
        raise GeminiBlocked(f"blocked: {getattr(br, 'name', br)}")


def _translate(exc: Exception) -> GeminiError:
    if "API_KEY" in str(exc):
        return GeminiConfigError(str(exc))
    return GeminiError(str(exc))


class GeminiChatClient:
    """Adapter over google.generativeai GenerativeModel for multi-turn chat."""

    def __init__(self, config: GeminiConfig, model=None):
        self.config = config
        self._model = model

    def _get_model(self):
        if self._model is not None:
            return self._model

        if not self.config.api_key:
            raise GeminiConfigError("GEMINI_API_KEY missing")

        try:
            genai.configure(api_key=self.config.api_key)
            self._model = genai.GenerativeModel(self.config.model_name, generation_config=GENERATION_CONFIG)
        except Exception as e:
            raise GeminiConfigError(f"gemini_config_error: {e}") from e
        return self._model

    def generate(self, turns: Sequence[dict]) -> str:
        """Send the whole conversation and return the reply text."""
        model = self._get_model()
        try:
            resp = model.generate_content(
                list(turns),
                request_options={"timeout": self.config.timeout_s},
            )
        except Exception as e:
            logger.warning(f"Gemini call failed: {e}")
            raise _translate(e) from e

        _check_block(resp)

        text = _extract_text(resp)
        if not text:
            raise GeminiError("empty_response")
        return text
