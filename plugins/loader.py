"""plugins/loader.py - 操作符插件加载"""
import importlib.util
import logging
import os

from config.config import PLUGIN_CONFIG

logger = logging.getLogger(__name__)


def load_provider(file_path, entry_point=None):
    """
    按文件路径导入一个插件模块并调用其入口函数。

    Args:
        file_path: .py 文件路径
        entry_point: 入口函数名，默认取 PLUGIN_CONFIG['entry_point']
    Returns:
        操作符描述列表；模块无法导入、没有入口或返回空时返回 None
    """
    entry_point = entry_point or PLUGIN_CONFIG["entry_point"]
    module_name = "operator_plugin_" + os.path.splitext(os.path.basename(file_path))[0]

    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        logger.warning(f"Skipping {file_path}: not an importable module")
        return None

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        logger.warning(f"Skipping {file_path}: import failed ({e})")
        return None

    func = getattr(module, entry_point, None)
    if not callable(func):
        logger.warning(f"Skipping {file_path}: no '{entry_point}' entry point")
        return None

    try:
        operators = func()
    except Exception as e:
        logger.warning(f"Skipping {file_path}: '{entry_point}' failed ({e})")
        return None
    if not operators:
        logger.warning(f"Skipping {file_path}: '{entry_point}' returned no operators")
        return None

    # 取得所有权：复制一份，插件返回的集合就此释放
    operators = list(operators)
    logger.info(f"Loaded {len(operators)} operators from {os.path.basename(file_path)}")
    return operators


def discover_providers(path=None, entry_point=None):
    """
    扫描目录下的所有插件（按文件名排序）

    Returns:
        每个插件一个操作符列表，顺序即发现顺序
    """
    path = path or PLUGIN_CONFIG["plugin_dir"]
    if not os.path.isdir(path):
        logger.warning(f"Plugin directory {path} does not exist, no plugins loaded")
        return []

    providers = []
    for name in sorted(os.listdir(path)):
        if not name.endswith('.py') or name.startswith(PLUGIN_CONFIG["skip_prefix"]):
            continue
        operators = load_provider(os.path.join(path, name), entry_point)
        if operators:
            providers.append(operators)

    logger.info(f"Discovered {len(providers)} operator providers in {path}")
    return providers
