import threading
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, Iterator, List, Optional


@dataclass(frozen=True)
class Bird:
    species: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class BirdStore:
    """
    Ordered, in-memory collection of birds.

    Every read and append goes through one lock, so handlers can share a
    store across concurrent requests. Reads hand out snapshots; callers never
    see the list being mutated underneath them.
    """

    def __init__(self, birds: Optional[Iterable[Bird]] = None):
        self._lock = threading.Lock()
        self._birds: List[Bird] = list(birds or [])

    def add(self, bird: Bird) -> Bird:
        with self._lock:
            self._birds.append(bird)
        return bird

    def all(self) -> List[Bird]:
        with self._lock:
            return list(self._birds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._birds)

    def __getitem__(self, index: int) -> Bird:
        with self._lock:
            return self._birds[index]

    def __iter__(self) -> Iterator[Bird]:
        return iter(self.all())
