import sys
from typing import TextIO, Optional
from ..domain import Axis, Direction, IntersectionSnapshot

class ConsoleStatusDisplay:
    """
    Status sink that prints the light board after every tick.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def render(self, snapshot: IntersectionSnapshot) -> str:
        def state(direction: Direction) -> str:
            return snapshot.light(direction).state.value

        return "\n".join([
            "",
            "--- Traffic Light Status ---",
            f"North: {state(Direction.NORTH)}\tSouth: {state(Direction.SOUTH)}",
            f"East:  {state(Direction.EAST)}\tWest:  {state(Direction.WEST)}",
            f"Timing: N/S:{snapshot.axis_duration(Axis.NS)}s, E/W:{snapshot.axis_duration(Axis.EW)}s",
            f"Emergency Mode: {'ON' if snapshot.emergency_active else 'OFF'}",
            "---------------------------",
        ])

    def emit(self, snapshot: IntersectionSnapshot) -> None:
        print(self.render(snapshot), file=self.stream)
