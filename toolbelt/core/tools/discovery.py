"""Auto-discovery of tools.

Scans the category subpackages of `toolbelt.core.tools` and imports every
module so that module-level `tool_registry.register()` calls run.
"""

import importlib
import logging
import pkgutil

logger = logging.getLogger(__name__)


def discover_tools(base_package: str = 'toolbelt.core.tools') -> list[str]:
    """Discover and register all tools by scanning subdirectories dynamically.

    Args:
        base_package: Base package path to scan

    Returns:
        List of registered tool IDs.
    """
    from toolbelt.core.tools.registry import tool_registry

    modules_loaded = 0
    modules_failed: list[str] = []

    base = importlib.import_module(base_package)

    for _, category_name, is_category_pkg in pkgutil.iter_modules(base.__path__):
        # Only scan subpackages, skip modules like base.py, registry.py
        if not is_category_pkg or category_name.startswith('_'):
            continue

        category_package = f'{base_package}.{category_name}'
        package = importlib.import_module(category_package)

        for _, module_name, is_pkg in pkgutil.iter_modules(package.__path__):
            # Skip __init__, common, and subpackages
            if module_name.startswith('_') or module_name == 'common' or is_pkg:
                continue

            full_module_name = f'{category_package}.{module_name}'

            try:
                importlib.import_module(full_module_name)
                modules_loaded += 1
                logger.debug(f'Loaded tool module: {full_module_name}')
            except Exception:
                modules_failed.append(full_module_name)
                logger.exception(f'Failed to import tool module {full_module_name}')

    logger.info(f'Tool discovery: {modules_loaded} modules loaded, {len(tool_registry)} tools registered')

    if modules_failed:
        logger.warning(f'Failed to import {len(modules_failed)} tool modules: {modules_failed}')

    return tool_registry.list_ids()

