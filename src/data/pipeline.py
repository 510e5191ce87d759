"""Data pipeline for protocol adaptor lists.

Loads the catalog, adapter config and adapter modules on first use (the
catalog and config again whenever their files change), builds adaptor lists
per adaptor type, and caches the results in memory and on disk.
"""

import logging
from typing import Dict, List, Optional

from config.settings import Settings, get_settings
from src.adaptors.builder import AdaptorListBuilder
from src.core.models import AdaptorsConfig, ImportsMap, ProtocolAdaptor
from src.data.cache.disk_cache import CacheKeys, DiskCache
from src.data.loader import load_adapter_modules, load_adaptors_config, load_protocol_catalog

logger = logging.getLogger(__name__)


class AdaptorPipeline:
    """Builds and caches ProtocolAdaptor lists.

    Inputs not passed to the constructor are loaded lazily from the
    locations in settings on first use.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        builder: Optional[AdaptorListBuilder] = None,
        imports: Optional[ImportsMap] = None,
        config: Optional[AdaptorsConfig] = None,
        cache: Optional[DiskCache] = None,
    ):
        """Initialize the pipeline.

        Args:
            settings: Application settings
            builder: Prebuilt builder (otherwise built from the catalog file)
            imports: Adapter modules (otherwise imported from settings.adapters_package)
            config: Adapter config (otherwise read from settings.adaptors_config_path)
            cache: Optional disk cache instance
        """
        self.settings = settings or get_settings()
        self.cache = cache or DiskCache(self.settings)
        self._builder = builder
        self._imports = imports
        self._config = config

        # Inputs read from files are reloaded when the files change
        self._builder_from_file = builder is None
        self._config_from_file = config is None
        self._fingerprint: Optional[str] = None

        # In-memory cache keyed by cache key
        self._adaptors_cache: Dict[str, List[ProtocolAdaptor]] = {}

    @property
    def builder(self) -> AdaptorListBuilder:
        if self._builder is None:
            protocols = load_protocol_catalog(self.settings.protocols_catalog_path)
            self._builder = AdaptorListBuilder.from_catalog(
                protocols,
                base_icons_url=self.settings.base_icons_url,
            )
        return self._builder

    @property
    def imports(self) -> ImportsMap:
        if self._imports is None:
            self._imports = load_adapter_modules(self.settings.adapters_package)
        return self._imports

    @property
    def config(self) -> AdaptorsConfig:
        if self._config is None:
            self._config = load_adaptors_config(self.settings.adaptors_config_path)
        return self._config

    def _cache_key(self, adaptor_type: Optional[str]) -> str:
        """Cache key for a type, reloading file inputs that changed on disk."""
        fingerprint = CacheKeys.fingerprint(
            self.settings.protocols_catalog_path,
            self.settings.adaptors_config_path,
        )
        if self._fingerprint is not None and fingerprint != self._fingerprint:
            logger.info("Input files changed, reloading catalog and adapter config")
            if self._builder_from_file:
                self._builder = None
            if self._config_from_file:
                self._config = None
            self._adaptors_cache.clear()
        self._fingerprint = fingerprint
        return CacheKeys.adaptors(adaptor_type, fingerprint)

    def get_adaptors(
        self,
        adaptor_type: Optional[str] = None,
        force_refresh: bool = False,
    ) -> List[ProtocolAdaptor]:
        """Get the adaptor list for an adaptor type.

        Each call returns a new list; the cached list is never handed out.

        Args:
            adaptor_type: Override table selector (defaults to settings.adaptor_type)
            force_refresh: Skip both caches and rebuild

        Returns:
            List of ProtocolAdaptor records

        Raises:
            MissingProtocolsDataError: A breakdown adapter has no protocolsData
            CatalogLoadError: An input file could not be loaded
        """
        adaptor_type = adaptor_type or self.settings.adaptor_type
        cache_key = self._cache_key(adaptor_type)

        if not force_refresh:
            if cache_key in self._adaptors_cache:
                logger.debug(f"Memory cache hit for {cache_key}")
                return list(self._adaptors_cache[cache_key])

            cached = self.cache.get_adaptors(cache_key)
            if cached is not None:
                logger.debug(f"Disk cache hit for {cache_key}")
                self._adaptors_cache[cache_key] = cached
                return list(cached)

        logger.info(f"Building adaptor list (type={adaptor_type})")
        adaptors = self.builder.build(self.imports, self.config, adaptor_type)
        self._adaptors_cache[cache_key] = adaptors
        self.cache.set_adaptors(cache_key, adaptors)
        return list(adaptors)

    def get_adaptor(
        self,
        module_key: str,
        adaptor_type: Optional[str] = None,
    ) -> List[ProtocolAdaptor]:
        """All records built from one adapter module (several for breakdowns)."""
        return [a for a in self.get_adaptors(adaptor_type) if a.module == module_key]

    def invalidate(self, adaptor_type: Optional[str] = None) -> None:
        """Drop cached lists for one adaptor type."""
        adaptor_type = adaptor_type or self.settings.adaptor_type
        cache_key = self._cache_key(adaptor_type)
        self._adaptors_cache.pop(cache_key, None)
        self.cache.delete(cache_key)

    def close(self) -> None:
        """Close the disk cache."""
        self.cache.close()
