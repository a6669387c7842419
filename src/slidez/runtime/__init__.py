"""Navigation and transition sequencing.

- [`selection`][slidez.runtime.selection] decides the shape of a transition
- [`orchestrator`][slidez.runtime.orchestrator] expands a decision into steps
- [`navigation`][slidez.runtime.navigation] is the navigation state machine
- [`cancel`][slidez.runtime.cancel] resolves where to settle when rendering stops \
    mid-transition
- [`player`][slidez.runtime.player] plays the steps as the host ticks
"""
