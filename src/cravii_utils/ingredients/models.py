import dataclasses
import enum
from typing import FrozenSet, Optional


class Priority(str, enum.Enum):
    MAIN = "main"
    COMPLEMENTARY = "complementary"


@dataclasses.dataclass(frozen=True)
class Ingredient:
    name: str
    description: str = ""
    category: str = ""
    tags: FrozenSet[str] = frozenset()
    dietary_tags: FrozenSet[str] = frozenset()
    is_common: bool = True
    search_terms: FrozenSet[str] = frozenset()
    priority: Priority = Priority.COMPLEMENTARY
    id: Optional[int] = None

    @property
    def is_main(self) -> bool:
        return self.priority is Priority.MAIN
