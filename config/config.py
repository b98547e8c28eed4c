"""配置文件"""

# 逆波兰转换参数
PARSER_CONFIG = {
    "on_parse_error": "recover",  # recover: 替换为0并继续; raise: 直接报错
    "error_template": (
        "Error with parsing your expression '{expression}'. "
        "Please enter valid numbers, operators, or variables and try again."
    ),
}

# 求值参数
EVALUATOR_CONFIG = {
    "allow_partial": True,  # 栈中剩余多个值时返回栈顶值
}

# 批量计算参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "float_format": "%.10g",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert PARSER_CONFIG["on_parse_error"] in ("recover", "raise"), "on_parse_error 只能是 recover 或 raise"
    assert "{expression}" in PARSER_CONFIG["error_template"], "error_template 需要包含 {expression}"
    assert isinstance(EVALUATOR_CONFIG["allow_partial"], bool), "allow_partial 必须是布尔值"
    assert BATCH_CONFIG["expression_column"], "expression_column 不能为空"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), "未知的日志级别"
