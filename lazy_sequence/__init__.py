from lazy_sequence.collection import EvaluationMode, Filter, LazyCollection, Map, Take
from lazy_sequence.stopwatch import Timing, stopwatch, time_call, timed

__all__ = [
    "EvaluationMode",
    "Filter",
    "LazyCollection",
    "Map",
    "Take",
    "Timing",
    "stopwatch",
    "time_call",
    "timed",
]
