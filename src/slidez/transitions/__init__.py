"""Transition effects and the compositing of their visibility masks.

- [`effects`][slidez.transitions.effects] contains the mask generators
- [`registry`][slidez.transitions.registry] maps effect names to effects
- [`masking`][slidez.transitions.masking] applies masks to screen buffers
"""
