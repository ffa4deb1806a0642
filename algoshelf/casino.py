"""A small text casino: coin flip, high-low and a slot machine."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

_CLEAR = "\033[H\033[J"


class HighLowGuess(IntEnum):
    HIGHER = 1
    LOWER = 2
    EQUAL = 3


@dataclass(frozen=True)
class CoinFlipResult:
    answer: int
    won: bool
    amount: int


@dataclass(frozen=True)
class HighLowResult:
    base: int
    answer: int
    won: bool
    amount: int


@dataclass(frozen=True)
class PlayerStats:
    money: int
    total_earnings: int
    coin_flip_wins: int
    high_low_wins: int


@dataclass(frozen=True)
class SlotSpin:
    reels: tuple[int, int, int]

    @property
    def jackpot(self) -> bool:
        return len(set(self.reels)) == 1


class Casino:
    """Player purse and win counters for the casino games."""

    def __init__(self, money: int = 100) -> None:
        self.money = money
        self.total_earnings = 0
        self.coin_flip_wins = 0
        self.high_low_wins = 0

    def add_money(self, amount: int) -> None:
        """Add ``amount``; positive amounts also count toward total earnings."""
        self.money += amount
        if amount > 0:
            self.total_earnings += amount

    def place_bet(self, amount: int) -> int:
        """Take ``amount`` from the purse and return it."""
        if amount < 0:
            raise ValueError("bet cannot be negative")
        self.money -= amount
        return amount

    def play_coin_flip(
        self, bet: int, choice: int, rng: random.Random | None = None
    ) -> CoinFlipResult:
        """Bet on heads (1) or tails (2); a win pays twice the bet."""
        rng = rng or random.Random()
        self.place_bet(bet)
        answer = rng.randint(1, 2)
        if choice == answer:
            self.add_money(bet * 2)
            self.coin_flip_wins += 1
            return CoinFlipResult(answer, True, bet * 2)
        return CoinFlipResult(answer, False, bet)

    def play_high_low(
        self, bet: int, guess: int, rng: random.Random | None = None
    ) -> HighLowResult:
        """Guess whether a second number from 1 to 10 is higher, lower or equal."""
        rng = rng or random.Random()
        guess = HighLowGuess(guess)
        base = rng.randint(1, 10)
        answer = rng.randint(1, 10)
        self.place_bet(bet)
        if answer > base and guess is HighLowGuess.HIGHER:
            self.add_money(bet * base + bet)
            self.high_low_wins += 1
            return HighLowResult(base, answer, True, bet * base)
        if answer < base and guess is HighLowGuess.LOWER:
            multiplier = 11 - base
            self.add_money(bet * multiplier + bet)
            self.high_low_wins += 1
            return HighLowResult(base, answer, True, bet * multiplier)
        if answer == base and guess is HighLowGuess.EQUAL:
            self.add_money(bet * 10)
            self.high_low_wins += 1
            return HighLowResult(base, answer, True, bet * 10 - bet)
        return HighLowResult(base, answer, False, bet)

    def stats(self) -> PlayerStats:
        return PlayerStats(
            self.money, self.total_earnings, self.coin_flip_wins, self.high_low_wins
        )


def spin_slot(rng: random.Random | None = None) -> SlotSpin:
    """Spin three reels showing 1 to 9."""
    rng = rng or random.Random()
    return SlotSpin((rng.randint(1, 9), rng.randint(1, 9), rng.randint(1, 9)))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_bet(casino: Casino, tokens: Iterator[str]) -> int:
    print(f"\nMoney: ${casino.money}")
    print("Place your bet: $", end="")
    return int(next(tokens))


def _coin_flip_round(casino: Casino, tokens: Iterator[str], rng: random.Random) -> None:
    bet = _read_bet(casino, tokens)
    print(_CLEAR + "Heads or Tails?\n1 - Heads\n2 - Tails")
    choice = int(next(tokens))
    try:
        result = casino.play_coin_flip(bet, choice, rng)
    except ValueError as error:
        print(f"\n{error}")
        return
    if result.won:
        print(f"\nYou Win!\n+ ${result.amount}")
    else:
        print(f"\nYou Lose, try again.\n\n- ${result.amount}")


def _high_low_round(casino: Casino, tokens: Iterator[str], rng: random.Random) -> None:
    bet = _read_bet(casino, tokens)
    state = rng.getstate()
    base = rng.randint(1, 10)
    rng.setstate(state)
    print(_CLEAR + f"Number 1 is {base}. Number 2 is...\n")
    print("1 - Higher\n2 - Lower\n3 - Equal")
    try:
        result = casino.play_high_low(bet, int(next(tokens)), rng)
    except ValueError as error:
        print(f"\n{error}")
        return
    print(f"\nNumber 2 is {result.answer}.\n")
    if result.won:
        print(f"You Win!\n+ ${result.amount}")
    else:
        print(f"You lose, try again.\n- ${result.amount}")


def _slot_round(tokens: Iterator[str], rng: random.Random) -> None:
    spin = spin_slot(rng)
    print("\n" + " ".join(str(reel) for reel in spin.reels) + "\n")
    if spin.jackpot:
        print("JACKPOT!")


def _submenu(title: Callable[[], str], tokens: Iterator[str], play: Callable[[], None]) -> None:
    while True:
        print(_CLEAR + title())
        print("1 - Play\n9 - Back")
        choice = int(next(tokens))
        if choice == 9:
            return
        if choice == 1:
            play()


def _stats_menu(casino: Casino, tokens: Iterator[str]) -> None:
    while True:
        print(_CLEAR + "Player Stats: \n1 - View Stats\n9 - Exit")
        choice = int(next(tokens))
        if choice == 9:
            return
        if choice == 1:
            stats = casino.stats()
            print(f"Money = {stats.money}$")
            print(f"Total Earnings = {stats.total_earnings}$\n")
            print(f"Coin Flip Wins = {stats.coin_flip_wins}")
            print(f"High Low Wins: {stats.high_low_wins}")


def main(argv: list[str] | None = None) -> int:
    """Run the casino menus on standard input."""
    parser = argparse.ArgumentParser(description="Text casino.")
    parser.add_argument("--money", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    casino = Casino(args.money)
    rng = random.Random(args.seed)
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(_CLEAR + f"Welcome to the casino!  ${casino.money}\n")
            print("0 - Player Stats\n\n1 - Coin Flip\n2 - High Low\n3 - Slot Machine\n\n9 - Exit")
            choice = int(next(tokens))
            if choice == 9:
                break
            if choice == 0:
                _stats_menu(casino, tokens)
            elif choice == 1:
                _submenu(
                    lambda: f"Coin Flip: ${casino.money}",
                    tokens,
                    lambda: _coin_flip_round(casino, tokens, rng),
                )
            elif choice == 2:
                _submenu(
                    lambda: f"High Low: ${casino.money}",
                    tokens,
                    lambda: _high_low_round(casino, tokens, rng),
                )
            elif choice == 3:
                _submenu(
                    lambda: "Welcome to the slot machine: ",
                    tokens,
                    lambda: _slot_round(tokens, rng),
                )
    except (StopIteration, ValueError):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())