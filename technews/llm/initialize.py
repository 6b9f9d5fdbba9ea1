from typing import List, Tuple

import google.generativeai as genai


def initialize(api_key: str):
    genai.configure(api_key=api_key)


def list_available_models(api_key: str) -> List[Tuple[str, List[str]]]:
    """Return the name and supported generation methods of every model available for the key."""
    initialize(api_key)
    return [
        (model.name, list(model.supported_generation_methods))
        for model in genai.list_models()
    ]
