"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,             # 编译后缀程序的LRU缓存大小
    "division_by_zero": "raise",    # raise: 抛出 DivisionByZeroError; ieee: 返回 inf/nan
    "strategy": "postfix",          # postfix: 两阶段; climbing: 单遍优先级爬升
}

# 日志参数
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    if EVALUATOR_CONFIG["cache_size"] < 0:
        raise ValueError("cache_size must be >= 0")
    if EVALUATOR_CONFIG["division_by_zero"] not in ("raise", "ieee"):
        raise ValueError(f"Unknown division_by_zero policy: {EVALUATOR_CONFIG['division_by_zero']!r}")
    if EVALUATOR_CONFIG["strategy"] not in ("postfix", "climbing"):
        raise ValueError(f"Unknown strategy: {EVALUATOR_CONFIG['strategy']!r}")
    if LOGGING_CONFIG["level"] not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Unknown log level: {LOGGING_CONFIG['level']!r}")
    logger.debug("Configuration validated successfully!")
