"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 解析器参数
PARSER_CONFIG = {
    "default_precision": 3,  # 实部和虚部保留的小数位数
    "imaginary_symbol": "I",  # 虚数单位
    "variable_token": "var",  # 唯一支持的自由变量
    "separator": ",",  # 函数参数分隔符
    "operators": "+-*/",
    "open_bracket": "(",
    "close_bracket": ")",
    "degree_symbol": "°",  # 角度后缀，替换为 *π/180
}

# 运算符优先级（左结合）
PRECEDENCE_CONFIG = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precision = PARSER_CONFIG["default_precision"]
    assert isinstance(precision, int) and precision >= 0, "精度必须是非负整数"

    delimiters = [PARSER_CONFIG["separator"], PARSER_CONFIG["open_bracket"],
                  PARSER_CONFIG["close_bracket"]]
    for delimiter in delimiters:
        assert len(delimiter) == 1, f"分隔符必须是单个字符: {delimiter!r}"

    for op in PARSER_CONFIG["operators"]:
        assert op not in delimiters, f"运算符与分隔符冲突: {op!r}"
        assert op in PRECEDENCE_CONFIG, f"运算符缺少优先级: {op!r}"

    assert PARSER_CONFIG["imaginary_symbol"] not in PARSER_CONFIG["variable_token"], \
        "变量名不能包含虚数单位"
    logger.debug("Configuration validated successfully")
