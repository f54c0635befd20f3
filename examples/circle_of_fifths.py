#!/usr/bin/env python3
"""
Example: Drive the selection store the way a circle-of-fifths view does.

Usage:
    python examples/circle_of_fifths.py

This shows:
1. The layout order of the 12 segments
2. Observers registered before the initial announcement
3. Tonic and mode changes broadcasting fresh scales
"""

from chuk_mcp_cof import (
    MODES_BY_BRIGHTNESS,
    PitchClass,
    SelectionStore,
    StateChange,
    circle_of_fifths,
    degree_name,
)

# Segment order around the circle, fixed at startup
LAYOUT = circle_of_fifths()


def render_circle(state_change: StateChange) -> None:
    """Print each segment with its degree label, or '-' if out of scale."""
    labels = state_change.degree_labels()
    cells = [f"{p.label}:{labels.get(p, '-')}" for p in LAYOUT]
    print("  circle:", " ".join(cells))


def render_modes(state_change: StateChange) -> None:
    """Print the mode buttons with the selected one marked."""
    buttons = [f"[{m.label}]" if m == state_change.mode else m.label for m in MODES_BY_BRIGHTNESS]
    print("  modes: ", " | ".join(buttons))


def main() -> None:
    print("CHUK Circle of Fifths")
    print("=" * 40)
    print("Layout:", " ".join(p.label for p in LAYOUT))
    print()

    store = SelectionStore()
    store.add_observer(render_circle)
    store.add_observer(render_modes)

    # Announce the default selection
    print("Startup:")
    store.change_tonic(PitchClass.C)

    for mode in MODES_BY_BRIGHTNESS:
        print(f"\nMode -> {mode.label}:")
        store.change_mode(mode)

    print("\nTonic -> F#:")
    store.change_tonic(PitchClass.Fs)

    print()
    snap = store.snapshot()
    for i, pitch in enumerate(snap.scale):
        print(f"  {degree_name(i):>4}  {pitch.label}")


if __name__ == "__main__":
    main()
