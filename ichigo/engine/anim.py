"""Frame-based animations over sheet cells."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AnimStep:
    """Show a cell for a number of ticks."""

    cell: int = 0
    duration: int = 0


@dataclass(eq=False)
class AnimDef:
    """An animation: a sequence of steps, optionally played only once."""

    steps: list[AnimStep] = field(default_factory=list)
    one_shot: bool = False

    def new_anim(self) -> Anim:
        """Return a fresh Anim playing this definition."""
        return Anim(anim_def=self)


@dataclass(eq=False)
class Anim:
    """The playing state of an AnimDef."""

    anim_def: AnimDef | None = None
    index: int = 0
    ticks: int = 0

    def __str__(self) -> str:
        return f"Anim({self.index},{self.ticks})"

    def cell(self) -> int:
        """Return the cell of the current step."""
        return self.anim_def.steps[self.index].cell

    def reset(self) -> None:
        """Go back to the first step."""
        self.index = 0
        self.ticks = 0

    def update(self) -> None:
        """Count a tick and advance to the next step when it is due."""
        steps = self.anim_def.steps
        self.ticks += 1
        if self.anim_def.one_shot and self.index == len(steps) - 1:
            # A one-shot stays on its final step.
            return
        if self.ticks >= steps[self.index].duration:
            self.ticks = 0
            self.index += 1
        if not self.anim_def.one_shot and self.index >= len(steps):
            self.index = 0