"""Domain layer — alphabets, masks, codec, and check digits.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
