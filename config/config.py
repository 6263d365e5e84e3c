"""配置文件"""

# 计算器参数
CALCULATOR_CONFIG = {
    "cache_size": 256,       # 后缀序列LRU缓存条目数，0表示不缓存
    "result_precision": 18,  # 打印结果时的有效数字位数（long double约18-19位）
}

# 交互模式参数
REPL_CONFIG = {
    "prompt": "> ",
    "exit_commands": ("e", "exit"),
    "banner": "Enter expressions to evaluate or type 'e' to exit:",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["cache_size"] >= 0, "cache_size不能为负"
    assert 1 <= CALCULATOR_CONFIG["result_precision"] <= 21, "result_precision应在1-21之间"
    assert REPL_CONFIG["exit_commands"], "至少需要一个退出命令"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), \
        f"未知日志级别: {LOGGING_CONFIG['level']}"
