"""配置文件"""
import os

_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 计算器参数
CALC_CONFIG = {
    "max_expression_length": 10000,  # CLI 单行上限，超过的行直接报错
    "number_format": "%g",  # 与 C++ cout 默认输出一致（6位有效数字）
}

# 插件参数
PLUGIN_CONFIG = {
    "plugin_dir": os.path.join(_ROOT, "operator_plugins"),
    "entry_point": "get_operators",  # 插件模块导出的函数名
    "skip_prefix": "_",  # 以此开头的文件不加载
}

# 命令行参数
CLI_CONFIG = {
    "log_level": "WARNING",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "csv_columns": ["expression", "result", "error"],
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALC_CONFIG["max_expression_length"] > 0, "max_expression_length must be positive"
    assert PLUGIN_CONFIG["entry_point"].isidentifier(), "entry_point must be a valid identifier"
    assert CLI_CONFIG["csv_columns"][0] == "expression", "first CSV column must be the expression"
    return True
