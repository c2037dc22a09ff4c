"""In-memory record store shared by the .lang and JSON codecs."""

from typing import Dict, Iterable, Tuple


# Insertion ordered; re-assigning a key keeps its original position.
RecordStore = Dict[str, str]


def build_store(pairs: Iterable[Tuple[str, str]]) -> RecordStore:
    """
    Build a record store from (key, value) pairs.
    
    A key seen again later overwrites the earlier value but keeps the
    position of its first occurrence.
    
    Args:
        pairs: Iterable of (key, value) string pairs
        
    Returns:
        Ordered dictionary of keys to values
    """
    store: RecordStore = {}
    for key, value in pairs:
        store[key] = value
    return store
