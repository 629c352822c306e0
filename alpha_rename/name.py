"""
Unique names produced by the renamer
"""
import typing as tp

__ALL__ = ['Name', 'GLOBAL_UID']

# uid of every name that is not bound locally
GLOBAL_UID = 0


class Name(tp.NamedTuple):
    """
    A symbol paired with a uid.

    Two names are the same binding iff both symbol and uid match.
    A uid of `GLOBAL_UID` means the name refers to a global (or free)
    definition and is identified by its symbol alone.
    """
    symbol: tp.Hashable
    uid: int = GLOBAL_UID

    @classmethod
    def global_(cls, symbol: tp.Hashable) -> 'Name':
        return cls(symbol, GLOBAL_UID)

    @property
    def is_global(self) -> bool:
        return self.uid == GLOBAL_UID

    def __str__(self) -> str:
        return str(self.symbol)
