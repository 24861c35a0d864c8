from __future__ import annotations

import logging
from typing import Dict, List, Optional

from openai import OpenAI, OpenAIError

from .config import get_settings
from .exceptions import UpstreamError

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    Envoltorio mínimo sobre `chat.completions` de OpenAI.

    Se construye una vez al arrancar la API y se inyecta en las rutas.
    En tests se le pasa un `client` falso con la misma forma que `OpenAI`.

    Parameters
    ----------
    api_key:
        API key de OpenAI. Si no se pasa, se toma de `get_settings()`.
    client:
        Cliente ya construido (opcional). Si se pasa, `api_key` se ignora.
    """

    def __init__(self, api_key: Optional[str] = None, client: Optional[OpenAI] = None):
        self._api_key = api_key
        self._client = client

    def _get_client(self) -> OpenAI:
        if self._client is None:
            api_key = self._api_key if self._api_key is not None else get_settings().openai_api_key
            if not api_key:
                raise UpstreamError("OPENAI_API_KEY no está configurada en el .env")
            self._client = OpenAI(api_key=api_key)
        return self._client

    def complete(self, messages: List[Dict[str, str]], model: str, max_tokens: int) -> str:
        """
        Hace una única llamada bloqueante y devuelve el texto del primer candidato.

        La generación se trunca si alcanza `max_tokens`; no hay timeout propio,
        reintentos ni circuit breaker.

        Raises
        ------
        ValueError
            Si `max_tokens` no es un entero positivo.
        UpstreamError
            Ante cualquier falla remota (red, modelo inválido, cuota, respuesta
            malformada). La causa original queda encadenada.
        """
        if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
            raise ValueError(f"max_tokens debe ser un entero positivo, recibido: {max_tokens!r}")

        client = self._get_client()
        try:
            completion = client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            raise UpstreamError(f"Falló la llamada a chat.completions ({model}): {e}") from e

        if not completion.choices:
            raise UpstreamError(f"Respuesta sin choices del modelo {model}")

        content = completion.choices[0].message.content
        if content is None:
            raise UpstreamError(f"Respuesta sin contenido del modelo {model}")

        logger.debug(f"Completion de {model}: {len(content)} caracteres")
        return content
