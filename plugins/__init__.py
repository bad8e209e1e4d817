"""插件模块 - 从目录发现并加载操作符提供者"""
from .loader import load_provider, discover_providers

__all__ = ['load_provider', 'discover_providers']
