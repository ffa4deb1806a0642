"""Terminal animations: bouncing particles and a dot bouncing in a grid."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass

WIDTH = 800
HEIGHT = 600
DT = 0.1
_CLEAR = "\033[H\033[J"


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float


def initialize_particles(count: int, rng: random.Random | None = None) -> list[Particle]:
    """Create particles at random positions with velocities in [-10, 9.9]."""
    rng = rng or random.Random()
    return [
        Particle(
            x=float(rng.randrange(WIDTH)),
            y=float(rng.randrange(HEIGHT)),
            vx=(rng.randrange(200) - 100) / 10.0,
            vy=(rng.randrange(200) - 100) / 10.0,
        )
        for _ in range(count)
    ]


def update_particles(particles: Iterable[Particle]) -> None:
    """Advance each particle one time step, reversing velocity outside the box."""
    for particle in particles:
        particle.x += particle.vx * DT
        particle.y += particle.vy * DT
        if particle.x < 0 or particle.x > WIDTH:
            particle.vx *= -1
        if particle.y < 0 or particle.y > HEIGHT:
            particle.vy *= -1


def render_particles(particles: Iterable[Particle]) -> str:
    """Return a screen-clearing frame listing every particle position."""
    return _CLEAR + "".join(
        f"Particle {index}: ({p.x:.1f}, {p.y:.1f})\n" for index, p in enumerate(particles)
    )


@dataclass
class Bouncer:
    """A dot moving diagonally and bouncing inside a centred grid."""

    x: int = 0
    y: int = 0
    ax: int = 1
    ay: int = 1
    xbound: int = 20
    ybound: int = 10

    def step(self) -> None:
        self.x += self.ax
        if self.x >= self.xbound or self.x <= -self.xbound:
            self.ax = -self.ax
        self.y += self.ay
        if self.y >= self.ybound or self.y <= -self.ybound:
            self.ay = -self.ay

    def render(self) -> str:
        """Return the grid with 'O' at the dot and '.' elsewhere."""
        rows = (
            "".join(
                "O" if (col, row) == (self.x, self.y) else "."
                for col in range(-self.xbound, self.xbound + 1)
            )
            for row in range(-self.ybound, self.ybound + 1)
        )
        return "\n".join(rows) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Animate particles or the bouncing dot in the terminal."""
    parser = argparse.ArgumentParser(description="Terminal animations.")
    parser.add_argument("--mode", choices=("particles", "bouncer"), default="particles")
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--frames", type=int, default=None)
    parser.add_argument("--delay", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    frames = itertools.count() if args.frames is None else range(args.frames)
    try:
        if args.mode == "particles":
            delay = 0.05 if args.delay is None else args.delay
            particles = initialize_particles(args.count, rng)
            for _ in frames:
                update_particles(particles)
                print(render_particles(particles), end="", flush=True)
                time.sleep(delay)
        else:
            delay = 0.125 if args.delay is None else args.delay
            bouncer = Bouncer(x=rng.randint(-10, 10), y=rng.randint(-10, 10))
            for _ in frames:
                bouncer.step()
                print(_CLEAR + bouncer.render(), end="", flush=True)
                time.sleep(delay)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())