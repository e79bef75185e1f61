# Copyright 2025 Loopper-AI

from .cli import main

main()
