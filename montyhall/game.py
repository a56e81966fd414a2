"""
montyhall/game.py - Single Game Steps

The five steps of one Monty Hall game: lay out the doors, take the
contestant's pick, let the host open a goat door, apply the stay/switch
decision, judge the final door.

Randomness only enters through the rng argument. change_door and
determine_winner draw nothing.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import DOORS, N_DOORS, Content, Outcome, Strategy
from .errors import InvalidArgument
from .rng import ensure_rng

__all__ = [
    "Game",
    "generate_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "resolve",
    "determine_winner",
]

# Multiset shuffled onto the doors for every new game
_LAYOUT = ("car", "goat", "goat")


# =============================================================================
# GAME LAYOUT
# =============================================================================

@dataclass(frozen=True)
class Game:
    """
    Door -> content assignment for one game (immutable).

    Indexed by door number: game[1], game[2], game[3].
    """
    contents: Tuple[Content, Content, Content]

    def __post_init__(self):
        if len(self.contents) != N_DOORS:
            raise InvalidArgument(
                f"Game needs {N_DOORS} doors, got {len(self.contents)}"
            )
        if not all(isinstance(c, Content) for c in self.contents):
            raise InvalidArgument(f"Game contents must be Content values: {self.contents}")
        n_cars = sum(1 for c in self.contents if c is Content.CAR)
        if n_cars != 1:
            raise InvalidArgument(f"Game needs exactly one car, got {n_cars}")

    def __getitem__(self, door: int) -> Content:
        _check_door(door, "door")
        return self.contents[int(door) - 1]

    @property
    def car_door(self) -> int:
        return self.contents.index(Content.CAR) + 1

    def as_dict(self) -> dict:
        """Door -> label mapping, e.g. {1: "goat", 2: "goat", 3: "car"}."""
        return {door: self[door].value for door in DOORS}

    @classmethod
    def from_labels(cls, labels: Union[Mapping[int, str], Sequence[str]]) -> "Game":
        """
        Build a Game from content labels.

        Args:
            labels: {door: "goat"|"car"} mapping or a 3-item sequence in door order

        Returns:
            Validated Game

        Raises:
            InvalidArgument: unknown label, missing door, or not one car
        """
        if isinstance(labels, Mapping):
            if sorted(labels) != list(DOORS):
                raise InvalidArgument(f"Game must cover doors {DOORS}, got {sorted(labels)}")
            ordered = [labels[door] for door in DOORS]
        else:
            ordered = list(labels)
        try:
            contents = tuple(
                c if isinstance(c, Content) else Content(str(c).lower()) for c in ordered
            )
        except ValueError as e:
            raise InvalidArgument(f"Unknown door content: {e}") from e
        return cls(contents)


def _check_game(game) -> Game:
    """Return game as a Game; raw mappings and label sequences are coerced."""
    if isinstance(game, Game):
        return game
    if isinstance(game, Mapping) or (
        isinstance(game, Sequence) and not isinstance(game, (str, bytes))
    ):
        return Game.from_labels(game)
    raise InvalidArgument(f"game must be a Game, mapping or label sequence, got {type(game).__name__}")


def _check_door(door, name: str) -> None:
    if isinstance(door, bool) or not isinstance(door, Integral) or door not in DOORS:
        raise InvalidArgument(f"{name} must be one of {DOORS}, got {door!r}")


GameLike = Union[Game, Mapping[int, str], Sequence[str]]


# =============================================================================
# STEP 1: generate_game
# =============================================================================

def generate_game(rng: Optional[np.random.Generator] = None) -> Game:
    """
    Shuffle one car and two goats behind the three doors.

    Each door holds the car with probability 1/3.
    """
    rng = ensure_rng(rng)
    shuffled = rng.permutation(_LAYOUT)
    return Game(tuple(Content(str(label)) for label in shuffled))


# =============================================================================
# STEP 2: select_door
# =============================================================================

def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Contestant's initial pick, uniform over the three doors."""
    rng = ensure_rng(rng)
    return int(rng.choice(DOORS))


# =============================================================================
# STEP 3: open_goat_door
# =============================================================================

def open_goat_door(game: GameLike, pick: int,
                   rng: Optional[np.random.Generator] = None) -> int:
    """
    Host opens a door that is not the pick and hides a goat.

    If the pick hides the car, both other doors are goats and the host picks
    one at random. If the pick hides a goat, exactly one other goat door
    remains and the host must open it; no random draw is made.

    Args:
        game: Game layout
        pick: Contestant's current door
        rng: Generator for the car branch

    Returns:
        int: Opened door

    Raises:
        InvalidArgument: pick is not a door, or game is not a valid layout
    """
    game = _check_game(game)
    _check_door(pick, "pick")

    if game[pick] is Content.CAR:
        goat_doors = [door for door in DOORS if door != pick]
        opened = int(ensure_rng(rng).choice(goat_doors))
    else:
        candidates = [
            door for door in DOORS
            if game[door] is not Content.CAR and door != pick
        ]
        opened = candidates[0]

    if opened == pick or game[opened] is not Content.GOAT:
        raise InvalidArgument(
            f"Host reveal broke the rules: opened={opened}, pick={pick}, game={game.as_dict()}"
        )
    return opened


# =============================================================================
# STEP 4: change_door
# =============================================================================

def change_door(stay: bool, opened: int, pick: int) -> int:
    """
    Final door after the stay/switch decision.

    Args:
        stay: True keeps pick; False takes the last unopened door
        opened: Door the host opened
        pick: Contestant's initial door

    Returns:
        int: Final door

    Raises:
        InvalidArgument: bad door, or opened == pick
    """
    _check_door(opened, "opened")
    _check_door(pick, "pick")
    if opened == pick:
        raise InvalidArgument(f"Host cannot open the picked door ({pick})")

    if stay:
        return int(pick)

    remaining = [door for door in DOORS if door != opened and door != pick]
    return remaining[0]


def resolve(strategy: Strategy, opened: int, pick: int) -> int:
    """change_door() keyed by Strategy."""
    if not isinstance(strategy, Strategy):
        raise InvalidArgument(f"strategy must be a Strategy, got {strategy!r}")
    return change_door(strategy is Strategy.STAY, opened, pick)


# =============================================================================
# STEP 5: determine_winner
# =============================================================================

def determine_winner(final: int, game: GameLike) -> Outcome:
    """WIN if the final door hides the car, LOSE otherwise."""
    game = _check_game(game)
    if game[final] is Content.CAR:
        return Outcome.WIN
    return Outcome.LOSE
