"""A small simulated engine control loop."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass

MAX_RPM = 7000
MIN_RPM = 800
MAX_THROTTLE = 100
MIN_THROTTLE = 0
MAX_TEMP = 120
MIN_TEMP = 20


@dataclass
class EngineData:
    rpm: int
    throttle: int
    engine_temp: float
    fuel_injection_time: float = 0.0
    ignition_timing: float = 0.0
    error_flag: bool = False


def read_sensors(rng: random.Random | None = None) -> EngineData:
    """Return a reading with random rpm, throttle and temperature in range."""
    rng = rng or random.Random()
    return EngineData(
        rpm=rng.randint(MIN_RPM, MAX_RPM),
        throttle=rng.randint(MIN_THROTTLE, MAX_THROTTLE),
        engine_temp=float(rng.randint(MIN_TEMP, MAX_TEMP)),
    )


def calculate_fuel_injection(rpm: int, throttle: int) -> float:
    """Return the fuel injection time in milliseconds."""
    base = 2.5
    if rpm > 5000:
        base += 1.5
    elif rpm > 3000:
        base += 1.0
    elif rpm > 1500:
        base += 0.5
    return base * (1.0 + throttle / MAX_THROTTLE * 0.6)


def calculate_ignition_timing(rpm: int) -> float:
    """Return ignition timing in degrees before top dead centre."""
    if rpm > 6000:
        return 15.0
    if rpm > 4000:
        return 12.0
    if rpm > 2000:
        return 8.0
    return 10.0


def check_engine_status(engine: EngineData) -> str | None:
    """Return a warning when the engine is out of limits, else None."""
    if engine.engine_temp > MAX_TEMP:
        return f"Engine overheating. Temp: {engine.engine_temp:.2f}°C"
    if engine.rpm > MAX_RPM:
        return f"RPM limit exceeded. RPM: {engine.rpm}"
    return None


def main(argv: list[str] | None = None) -> int:
    """Simulate a number of engine cycles and print each one."""
    parser = argparse.ArgumentParser(description="Simulated engine monitor.")
    parser.add_argument("--cycles", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    for cycle in range(1, args.cycles + 1):
        print(f"\n----- Engine Cycle {cycle} -----")
        engine = read_sensors(rng)
        engine.fuel_injection_time = calculate_fuel_injection(engine.rpm, engine.throttle)
        engine.ignition_timing = calculate_ignition_timing(engine.rpm)
        warning = check_engine_status(engine)
        engine.error_flag = warning is not None
        if warning:
            print(warning)
        print(f"RPM: {engine.rpm}")
        print(f"Throttle: {engine.throttle}%")
        print(f"Engine Temperature: {engine.engine_temp:.2f}°C")
        print(f"Fuel Injection Time: {engine.fuel_injection_time:.2f} ms")
        print(f"Ignition Timing: {engine.ignition_timing:.2f}° BTDC")
        if engine.error_flag:
            print("error")
    return 0


if __name__ == "__main__":
    sys.exit(main())