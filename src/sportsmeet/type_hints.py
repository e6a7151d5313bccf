"""Type hints used in Sports Meet."""

from typing import Callable, List, Literal, MutableSequence, Tuple, Union

# Match status literals
MatchStatus = Literal["scheduled", "finished"]

# Participation status literals (per participant and sport)
ParticipationStatus = Literal["not-played", "playing", "played"]

# One participant id, or a positional group of ids for team sports
Winner = Union[str, Tuple[str, ...]]

# (category name, lowest grade, highest grade)
CategoryBand = Tuple[str, int, int]
CategoryBands = List[CategoryBand]

# In-place permutation of a list, e.g. random.shuffle
ShuffleFunction = Callable[[MutableSequence], None]

#  LocalWords:  ShuffleFunction CategoryBands
