"""Type hints used in Esports Season."""

from typing import List, Optional, Protocol


class RandomSource(Protocol):
    """Anything that can drive the simulator; ``random.Random`` qualifies."""

    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


# One competitor's season, slot by slot; None marks an absent slot
MatchRow = List[Optional["Match"]]
# [competitor index][match slot]
MatchGrid = List[MatchRow]
Competitors = List["Competitor"]
GameTitles = List["GameTitle"]

#  LocalWords:  MatchRow MatchGrid
