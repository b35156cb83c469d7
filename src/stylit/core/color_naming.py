"""
Hex -> nearest human color name.

Fully offline: the reference dataset is converted to Lab once when the
resolver is built, and lookups are a linear ΔE scan (CIEDE2000 by default)
fronted by a small FIFO cache.
"""

import logging
import threading
from collections import OrderedDict
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .color_space import delta_e_2000_many, hex_to_lab, normalize_hex
from .models import NamedColorMatch
from .rules.named_colors import NAMED_COLORS

logger = logging.getLogger(__name__)

UNKNOWN_NAME = 'Unknown'
DEFAULT_CACHE_SIZE = 100

DistanceMetric = Callable[[Sequence[float], np.ndarray], np.ndarray]


class FifoCache:
    """
    Bounded key -> value map with insertion-order eviction.

    Reads do not refresh an entry's position (FIFO, not LRU). Every access
    takes the lock so concurrent writers keep a strict eviction order.
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_SIZE):
        if capacity < 1:
            raise ValueError("cache capacity must be at least 1")
        self.capacity = capacity
        self._entries = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key):
        with self._lock:
            return self._entries.get(key)

    def put(self, key, value):
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                return
            while len(self._entries) >= self.capacity:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def clear(self):
        with self._lock:
            self._entries.clear()

    def keys(self) -> List:
        with self._lock:
            return list(self._entries.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._entries


class NamedColorResolver:
    """
    Maps any hex color to the closest name in a reference dataset.

    There is no gating here: every well-formed hex gets a name, and only a
    malformed hex comes back as 'Unknown'.
    """

    def __init__(self,
                 dataset: Optional[Iterable[Tuple[str, str]]] = None,
                 cache_size: int = DEFAULT_CACHE_SIZE,
                 metric: DistanceMetric = delta_e_2000_many):
        """
        Initialize the resolver.

        Args:
            dataset: (name, hex) pairs; defaults to the bundled NAMED_COLORS table
            cache_size: Maximum number of cached lookups (default 100)
            metric: Vectorized ΔE function f(lab, labs) -> distances
        """
        names = []
        hexes = []
        labs = []
        for name, hex_code in (NAMED_COLORS if dataset is None else dataset):
            lab = hex_to_lab(hex_code)
            if lab is None:
                logger.warning(f"Skipping named color {name!r}: invalid hex {hex_code!r}")
                continue
            names.append(name)
            hexes.append(normalize_hex(hex_code))
            labs.append(lab)

        self._names = tuple(names)
        self._hexes = tuple(hexes)
        self._labs = np.array(labs, dtype=float).reshape(-1, 3)
        self._labs.setflags(write=False)
        self._by_name = {}
        for name, hex_code in zip(self._names, self._hexes):
            self._by_name.setdefault(name.strip().lower(), hex_code)

        self.metric = metric
        self.cache = FifoCache(cache_size)

        logger.info(f"NamedColorResolver initialized with {len(self._names)} colors "
                    f"(cache size {cache_size})")

    @property
    def dataset_size(self) -> int:
        return len(self._names)

    def get_nearest_color_name(self, hex_code: str) -> NamedColorMatch:
        """
        Resolve a hex color to its nearest named color.

        Args:
            hex_code: '#RGB' or '#RRGGBB', '#' optional

        Returns:
            NamedColorMatch with the normalized hex; name 'Unknown' if the
            hex is malformed or the dataset is empty
        """
        normalized = normalize_hex(hex_code)
        if normalized is None:
            logger.debug(f"Invalid hex for naming: {hex_code!r}")
            return NamedColorMatch(hex=hex_code if isinstance(hex_code, str) and hex_code else '#000000',
                                   name=UNKNOWN_NAME)

        cached = self.cache.get(normalized)
        if cached is not None:
            return cached

        if not self._names:
            return NamedColorMatch(hex=normalized, name=UNKNOWN_NAME)

        distances = self.metric(hex_to_lab(normalized), self._labs)
        index = int(np.argmin(distances))
        match = NamedColorMatch(hex=normalized, name=self._names[index])
        self.cache.put(normalized, match)

        logger.debug(f"Named {normalized} as {match.name} (ΔE={float(distances[index]):.2f}, "
                     f"cache size {len(self.cache)})")
        return match

    def hex_for_name(self, name: str) -> Optional[str]:
        """Reverse lookup of a color name (case-insensitive, exact)."""
        if not isinstance(name, str):
            return None
        return self._by_name.get(name.strip().lower())

    def clear_cache(self):
        self.cache.clear()
        logger.debug("Color name cache cleared")

    def get_statistics(self) -> Dict:
        return {
            'dataset_size': self.dataset_size,
            'cache_entries': len(self.cache),
            'cache_capacity': self.cache.capacity,
        }
