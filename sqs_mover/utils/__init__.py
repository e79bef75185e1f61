# Copyright 2025 Loopper-AI
# Utility modules

from .progress import NullReporter, ProgressReporter, TqdmReporter

__all__ = ["NullReporter", "ProgressReporter", "TqdmReporter"]
