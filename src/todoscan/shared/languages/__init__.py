from todoscan.shared.languages.definitions import LANGUAGE_DEFINITIONS, LanguageDefinition
from todoscan.shared.languages.registry import LanguageRegistry

__all__ = ["LANGUAGE_DEFINITIONS", "LanguageDefinition", "LanguageRegistry"]
