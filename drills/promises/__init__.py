from .answer import NO, YES, propose
from .fold import MISSING, fold_settled, fold_settled_w, fold_settledM
from .race import RacePolicy, race_first, race_first_w, race_firstM
from .settled import collect_settled, collect_settled_w, collect_settledM

__all__ = (
    # Policies
    "RacePolicy",
    # Answer
    "NO",
    "YES",
    "propose",
    # Collect settled
    "collect_settled",
    "collect_settled_w",
    "collect_settledM",
    # Race
    "race_first",
    "race_first_w",
    "race_firstM",
    # Fold
    "MISSING",
    "fold_settled",
    "fold_settled_w",
    "fold_settledM",
)
