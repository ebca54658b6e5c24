"""In-memory cache of the language pairs a server supports.

The cache is filled from one list_pairs() call and projected into three
views: the pair set, source -> targets and target -> sources. All three are
rebuilt together on every refresh.
"""
import asyncio
import logging

from apertium.models import LanguagePair
from apertium.service import RemoteTranslationService

logger = logging.getLogger(__name__)


class PairCache:
    """Lazily populated, force-refreshable view of valid language pairs.

    Features:
    - Populated on first query, or whenever it is empty
    - force_refresh re-fetches unconditionally
    - Returned collections are copies; callers cannot mutate the cache

    An empty server pair list cannot be told apart from an unpopulated
    cache, so every query re-fetches until the server lists a pair.
    """

    def __init__(self, service: RemoteTranslationService):
        """Initialize an empty cache.

        Args:
            service: Remote service providing list_pairs()
        """
        self.service = service
        self._pairs: set[LanguagePair] = set()
        self._from_index: dict[str, list[str]] = {}
        self._to_index: dict[str, list[str]] = {}
        self._lock = asyncio.Lock()
        # Bumped by clear(); a refresh started under an older generation is discarded
        self._generation = 0

    def __len__(self):
        return len(self._pairs)

    @property
    def is_empty(self) -> bool:
        return not self._pairs

    @property
    def from_mapping(self) -> dict[str, list[str]]:
        """Copy of the source -> targets index."""
        return {source: list(targets) for source, targets in self._from_index.items()}

    @property
    def to_mapping(self) -> dict[str, list[str]]:
        """Copy of the target -> sources index."""
        return {target: list(sources) for target, sources in self._to_index.items()}

    def clear(self):
        """Drop all cached pairs; the next query fetches again.

        A refresh still waiting on list_pairs() when this runs will not
        store its result.
        """
        self._generation += 1
        self._pairs = set()
        self._from_index = {}
        self._to_index = {}

    async def refresh(self) -> set[LanguagePair]:
        """Re-fetch the pair list and rebuild every view.

        Returns:
            Copy of the new pair set

        Raises:
            RemoteError: When list_pairs() fails; the cache is left empty

        The returned set is empty when clear() ran while the fetch was in
        flight, since that result may belong to a previous endpoint.
        """
        async with self._lock:
            await self._refresh()
            return set(self._pairs)

    async def _refresh(self):
        self.clear()
        generation = self._generation

        raw_pairs = await self.service.list_pairs()

        pairs: set[LanguagePair] = set()
        from_index: dict[str, list[str]] = {}
        to_index: dict[str, list[str]] = {}
        for source, target in raw_pairs:
            pairs.add(LanguagePair(source, target))
            # Lists are not deduplicated; a repeated pair repeats here
            from_index.setdefault(source, []).append(target)
            to_index.setdefault(target, []).append(source)

        if generation != self._generation:
            logger.info("Discarded %d language pairs fetched before the cache was cleared", len(pairs))
            return

        self._pairs = pairs
        self._from_index = from_index
        self._to_index = to_index

        logger.info(
            "Loaded %d language pairs (%d sources, %d targets)",
            len(pairs), len(from_index), len(to_index)
        )

    async def _ensure_populated(self, force_refresh: bool):
        async with self._lock:
            if force_refresh or not self._pairs:
                await self._refresh()
            else:
                logger.debug("Using %d cached language pairs", len(self._pairs))

    async def get_pairs(self, force_refresh: bool = False) -> set[LanguagePair]:
        """Return the valid pair set, fetching it if needed."""
        await self._ensure_populated(force_refresh)
        return set(self._pairs)

    async def is_valid_pair(
        self,
        from_language: str,
        to_language: str,
        force_refresh: bool = False
    ) -> bool:
        """Check whether the server translates from_language -> to_language."""
        await self._ensure_populated(force_refresh)
        return (from_language, to_language) in self._pairs

    async def get_targets_for(self, from_language: str, force_refresh: bool = False) -> list[str]:
        """Languages from_language can be translated to, [] when unknown."""
        await self._ensure_populated(force_refresh)
        return list(self._from_index.get(from_language, []))

    async def get_sources_for(self, to_language: str, force_refresh: bool = False) -> list[str]:
        """Languages that can be translated to to_language, [] when unknown."""
        await self._ensure_populated(force_refresh)
        return list(self._to_index.get(to_language, []))

    async def is_valid_source_language(self, language: str, force_refresh: bool = False) -> bool:
        await self._ensure_populated(force_refresh)
        return language in self._from_index

    async def is_valid_target_language(self, language: str, force_refresh: bool = False) -> bool:
        await self._ensure_populated(force_refresh)
        return language in self._to_index
