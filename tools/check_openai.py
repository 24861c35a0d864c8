#!/usr/bin/env python3
"""
Prueba de humo contra OpenAI: una completion corta con la plantilla de idea.

Ejecutar: python tools/check_openai.py "Una app que conecta huertas urbanas con restaurantes"
"""

import sys
from pathlib import Path

# Agregar raíz del proyecto al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from idea_validator_core.config import get_settings  # noqa: E402
from idea_validator_core.exceptions import UpstreamError  # noqa: E402
from idea_validator_core.llm_client import CompletionClient  # noqa: E402
from idea_validator_core.prompts import build_category_messages  # noqa: E402


def main() -> int:
    settings = get_settings()
    if not settings.openai_api_key:
        print("❌ OPENAI_API_KEY no encontrada en .env")
        return 1

    print("✅ API key encontrada (no la muestro por seguridad)")
    idea = " ".join(sys.argv[1:]) or "A marketplace for second-hand lab equipment"

    print(f"🔌 Probando {settings.openai_model_text}…")
    client = CompletionClient(api_key=settings.openai_api_key)
    try:
        text = client.complete(
            build_category_messages("idea", idea),
            model=settings.openai_model_text,
            max_tokens=200,
        )
    except UpstreamError as e:
        print("❌ Error al conectarse a OpenAI:")
        print(e)
        return 1

    print("✅ Conexión exitosa!")
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
