"""Loaders for the adaptor list inputs.

- protocol catalog: JSON array of protocol objects
- adaptors config: JSON object of adapter key -> config
- adapter modules: a Python package whose submodules expose ``adapter``
"""

import importlib
import json
import logging
import pkgutil
from pathlib import Path
from typing import Any, List, Union

from src.adaptors.exceptions import CatalogLoadError
from src.core.models import (
    AdapterConfig,
    AdaptorsConfig,
    BreakdownAdapter,
    ImportedAdapter,
    ImportsMap,
    ProtocolRecord,
    SingleAdapter,
)

logger = logging.getLogger(__name__)

# Module attribute holding the adapter object
ADAPTER_ATTRIBUTE = "adapter"
# Optional module attribute overriding the key derived from the module name
ADAPTER_KEY_ATTRIBUTE = "ADAPTER_KEY"


def _read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CatalogLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(path, f"invalid JSON ({e})") from e


def load_protocol_catalog(path: Union[str, Path]) -> List[ProtocolRecord]:
    """Load the protocol catalog.

    Entries without an id are skipped with a warning.

    Raises:
        CatalogLoadError: File missing, unreadable, or not a JSON array
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise CatalogLoadError(path, "expected a JSON array of protocols")

    records = []
    for entry in data:
        if not isinstance(entry, dict) or entry.get("id") is None:
            logger.warning(f"Skipping catalog entry without id: {entry!r:.80}")
            continue
        records.append(ProtocolRecord.from_dict(entry))
    logger.info(f"Loaded {len(records)} protocols from {path}")
    return records


def load_adaptors_config(path: Union[str, Path]) -> AdaptorsConfig:
    """Load the adapter key -> config mapping.

    Raises:
        CatalogLoadError: File missing, unreadable, or not a JSON object
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise CatalogLoadError(path, "expected a JSON object of adapter configs")

    config = {key: AdapterConfig.from_dict(value or {}) for key, value in data.items()}
    logger.info(f"Loaded config for {len(config)} adapters from {path}")
    return config


def module_name_to_key(name: str) -> str:
    """Adapter key for a module name (``karura_swap`` -> ``karura-swap``)."""
    return name.replace("_", "-")


def load_adapter_modules(package_name: str) -> ImportsMap:
    """Import every adapter module under a package.

    Modules that fail to import are logged and skipped. A module without an
    ``adapter`` attribute (or with an unrecognized one) is kept with
    ``module=None`` so that the builder skips it.

    Args:
        package_name: Importable package name, e.g. "adapters"

    Returns:
        Adapter key -> ImportedAdapter, in module-name order
    """
    package = importlib.import_module(package_name)
    package_root = Path(next(iter(package.__path__)))
    imports: ImportsMap = {}

    for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if info.name.startswith("_"):
            continue
        full_name = f"{package_name}.{info.name}"
        try:
            module = importlib.import_module(full_name)
        except Exception as e:
            logger.error(f"Failed to import adapter module {full_name}: {e}")
            continue

        adapter = getattr(module, ADAPTER_ATTRIBUTE, None)
        if adapter is not None and not isinstance(adapter, (SingleAdapter, BreakdownAdapter)):
            logger.warning(f"Ignoring {full_name}.{ADAPTER_ATTRIBUTE}: unsupported type {type(adapter).__name__}")
            adapter = None

        key = getattr(module, ADAPTER_KEY_ATTRIBUTE, None) or module_name_to_key(info.name)
        module_file = Path(module.__file__) if getattr(module, "__file__", None) else package_root / info.name
        try:
            code_path = f"{package_root.name}/{module_file.relative_to(package_root).as_posix()}"
        except ValueError:
            code_path = module_file.as_posix()

        imports[key] = ImportedAdapter(module=adapter, code_path=code_path)

    logger.info(f"Loaded {len(imports)} adapter modules from {package_name}")
    return imports
