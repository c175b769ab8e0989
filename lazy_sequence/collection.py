import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Tuple, Union

logger = logging.getLogger(__name__)


class EvaluationMode(Enum):
    LAZY = "lazy"
    EAGER = "eager"


@dataclass(frozen=True)
class Filter:
    predicate: Callable[[Any], bool]

    def __post_init__(self):
        if not callable(self.predicate):
            raise TypeError(f"Filter predicate must be callable, got {type(self.predicate).__name__}")

    def lazy(self, it: Iterator[Any]) -> Iterator[Any]:
        return filter(self.predicate, it)

    def eager(self, items: Iterable[Any]) -> List[Any]:
        return [item for item in items if self.predicate(item)]


@dataclass(frozen=True)
class Map:
    transform: Callable[[Any], Any]

    def __post_init__(self):
        if not callable(self.transform):
            raise TypeError(f"Map transform must be callable, got {type(self.transform).__name__}")

    def lazy(self, it: Iterator[Any]) -> Iterator[Any]:
        return map(self.transform, it)

    def eager(self, items: Iterable[Any]) -> List[Any]:
        return [self.transform(item) for item in items]


@dataclass(frozen=True)
class Take:
    count: int

    def __post_init__(self):
        # bool is an int subclass but never a meaningful count
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise ValueError(f"Take count must be a non-negative integer, got {self.count!r}")

    def lazy(self, it: Iterator[Any]) -> Iterator[Any]:
        # islice stops before pulling the (count + 1)-th element
        return itertools.islice(it, self.count)

    def eager(self, items: Iterable[Any]) -> List[Any]:
        return list(items)[:self.count]


Stage = Union[Filter, Map, Take]


class LazyCollection:
    """Chain of filter/map/take stages over a fixed source.

    Adding a stage returns a new collection and runs nothing. Work only
    happens when the collection is iterated, by ``to_list()``, ``first()``
    or a plain ``for`` loop. In ``EvaluationMode.LAZY`` each element is
    pulled through the whole chain before the next source element is
    touched; in ``EvaluationMode.EAGER`` every stage builds its complete
    output list before the next stage starts.
    """

    def __init__(self, source: Iterable[Any], mode: EvaluationMode = EvaluationMode.LAZY):
        if not isinstance(mode, EvaluationMode):
            raise TypeError(f"Unknown evaluation mode: {mode!r}")
        self._source = source
        self._mode = mode
        self._stages: Tuple[Stage, ...] = ()

    @property
    def mode(self) -> EvaluationMode:
        return self._mode

    @property
    def stages(self) -> Tuple[Stage, ...]:
        return self._stages

    def __iter__(self) -> Iterator[Any]:
        if self._mode is EvaluationMode.EAGER:
            items = list(self._source)
            for stage in self._stages:
                items = stage.eager(items)
            return iter(items)

        # Wrap the source iterator once per stage
        current_iter = iter(self._source)
        for stage in self._stages:
            current_iter = stage.lazy(current_iter)
        return current_iter

    def __repr__(self) -> str:
        names = ", ".join(type(stage).__name__ for stage in self._stages)
        return f"LazyCollection(mode={self._mode.value}, stages=[{names}])"

    def _add_stage(self, stage: Stage) -> 'LazyCollection':
        new_collection = LazyCollection(self._source, self._mode)
        new_collection._stages = self._stages + (stage,)
        return new_collection

    def with_mode(self, mode: EvaluationMode) -> 'LazyCollection':
        new_collection = LazyCollection(self._source, mode)
        new_collection._stages = self._stages
        return new_collection

    # Transformations
    def filter(self, predicate: Callable[[Any], bool]) -> 'LazyCollection':
        return self._add_stage(Filter(predicate))

    def map(self, func: Callable[[Any], Any]) -> 'LazyCollection':
        return self._add_stage(Map(func))

    def take(self, n: int) -> 'LazyCollection':
        return self._add_stage(Take(n))

    # Terminal operations
    def to_list(self) -> List[Any]:
        result = list(self)
        logger.debug(f"Materialized {len(result)} item(s) through {len(self._stages)} "
                     f"stage(s) in {self._mode.value} mode")
        return result

    def first(self, default: Any = None) -> Any:
        """Pull a single element, or return ``default`` when there is none."""
        return next(iter(self), default)
