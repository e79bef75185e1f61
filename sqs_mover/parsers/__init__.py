# Copyright 2025 Loopper-AI
# Parser modules for batch translation

from .batch_translator import BatchTranslator

__all__ = ["BatchTranslator"]
